from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

CODE_LENGTH = 3
EMPTY_CODE = "0" * CODE_LENGTH


@dataclass(frozen=True)
class DigitTriple:
    home: int
    solar: int
    grid: int


def normalize_code(raw: Optional[object]) -> str:
    """Strip non-digits, left-pad with zeros and keep the first 3 characters.

    Never fails: ``None``, empty or garbage input all normalize to ``"000"``.
    """
    digits = re.sub(r"[^0-9]", "", "" if raw is None else str(raw))
    return digits.rjust(CODE_LENGTH, "0")[:CODE_LENGTH]


def split_digits(raw: Optional[object]) -> DigitTriple:
    code = normalize_code(raw)
    home, solar, grid = (int(ch) for ch in code)
    return DigitTriple(home=home, solar=solar, grid=grid)
