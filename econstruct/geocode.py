from __future__ import annotations

import logging
from typing import Optional

import requests

from econstruct.context import Coordinate, as_coordinate
from econstruct.settings import Settings, load_settings

logger = logging.getLogger(__name__)


class GeocodeError(Exception):
    """Address search failed (network, HTTP status or unparseable payload)."""

    message = "Search failed."


class NoResultsError(GeocodeError):
    message = "No results."


def search_address(query: str, settings: Optional[Settings] = None, session: Optional[requests.Session] = None) -> Optional[Coordinate]:
    """Return the first Nominatim match for ``query``.

    A blank query returns None without touching the network.
    """
    q = (query or "").strip()
    if not q:
        return None
    settings = settings or load_settings()
    http = session or requests
    try:
        r = http.get(
            settings.nominatim_url,
            params={"format": "json", "q": q, "limit": 1},
            headers={"Accept-Language": "en", "User-Agent": settings.user_agent},
            timeout=settings.geocode_timeout,
        )
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("geocode request failed for %r: %s", q, exc)
        raise GeocodeError(GeocodeError.message) from exc

    if not isinstance(data, list) or not data:
        raise NoResultsError(NoResultsError.message)
    first = data[0] if isinstance(data[0], dict) else {}
    location = as_coordinate({"lat": first.get("lat"), "lng": first.get("lon")})
    if location is None:
        raise GeocodeError(GeocodeError.message)
    logger.info("geocoded %r -> %s", q, location.label())
    return location
