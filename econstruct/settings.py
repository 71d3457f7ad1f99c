from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
DEFAULT_USER_AGENT = "econstruct-dashboard/0.1 (demo)"
DEFAULT_GEOCODE_TIMEOUT = 6.0
DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:8501"]


@dataclass(frozen=True)
class Settings:
    nominatim_url: str = DEFAULT_NOMINATIM_URL
    user_agent: str = DEFAULT_USER_AGENT
    geocode_timeout: float = DEFAULT_GEOCODE_TIMEOUT
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _as_timeout(value: Optional[str]) -> float:
    try:
        out = float(value) if value else DEFAULT_GEOCODE_TIMEOUT
    except Exception:
        return DEFAULT_GEOCODE_TIMEOUT
    return out if out > 0 else DEFAULT_GEOCODE_TIMEOUT


def _as_origins(value: Optional[str]) -> List[str]:
    origins = [o.strip() for o in (value or "").split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


def load_settings(env: Optional[dict] = None) -> Settings:
    """Read ECON_* settings from ``env`` (defaults to os.environ after loading .env)."""
    if env is None:
        load_dotenv()
        env = dict(os.environ)
    return Settings(
        nominatim_url=(env.get("ECON_NOMINATIM_URL") or DEFAULT_NOMINATIM_URL).strip(),
        user_agent=(env.get("ECON_USER_AGENT") or DEFAULT_USER_AGENT).strip(),
        geocode_timeout=_as_timeout(env.get("ECON_GEOCODE_TIMEOUT")),
        cors_origins=_as_origins(env.get("ECON_CORS_ORIGINS")),
    )
