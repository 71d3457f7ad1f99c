"""Shared test fixtures.

Puts the repository root on sys.path so ``econstruct`` and
``econstruct_api`` import when pytest runs from a fresh checkout.
"""

import sys
from pathlib import Path

import pytest

_ROOT = str(Path(__file__).resolve().parent.parent)
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from econstruct_api.main import app

    return TestClient(app)
