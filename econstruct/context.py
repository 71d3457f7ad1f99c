from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def label(self, places: int = 4) -> str:
        return f"{self.lat:.{places}f}, {self.lng:.{places}f}"


@dataclass(frozen=True)
class DashboardContext:
    """Caller-owned display context that travels with a code to the dashboard."""

    file_name: str = ""
    location: Optional[Coordinate] = None


def _as_float(value: object) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        out = float(value)  # type: ignore[arg-type]
    except Exception:
        return None
    if out != out or out in (float("inf"), float("-inf")):
        return None
    return out


def as_coordinate(raw: object) -> Optional[Coordinate]:
    if raw is None:
        return None
    if isinstance(raw, Coordinate):
        return raw
    if isinstance(raw, dict):
        lat, lng = _as_float(raw.get("lat")), _as_float(raw.get("lng", raw.get("lon")))
    else:
        try:
            lat_raw, lng_raw = raw  # type: ignore[misc]
        except Exception:
            return None
        lat, lng = _as_float(lat_raw), _as_float(lng_raw)
    if lat is None or lng is None:
        return None
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
        return None
    return Coordinate(lat=lat, lng=lng)


def normalize_context(raw: Optional[dict]) -> DashboardContext:
    raw = raw or {}
    file_name = str(raw.get("file_name") or "").strip()
    location = as_coordinate(raw.get("location"))
    if location is None and ("lat" in raw or "lng" in raw):
        location = as_coordinate({"lat": raw.get("lat"), "lng": raw.get("lng")})
    return DashboardContext(file_name=file_name, location=location)
