from __future__ import annotations

from typing import Any, Dict, List

import numpy as np
import pandas as pd

WEEKLY_POINTS = 12
HOURLY_POINTS = 10


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer with exact ties going toward +inf (-4.5 -> -4, 4.5 -> 5).

    ``floor(x + 0.5)`` is avoided: the addition itself rounds, pushing values
    just below .5 (0.49999999999999994) up to the next integer.
    """
    x = np.asarray(values, dtype=float)
    r = np.floor(x)
    return (r + (x - r >= 0.5)).astype(int)


def _clamped(values: np.ndarray) -> List[int]:
    return [int(v) for v in np.maximum(values, 0)]


def _perturb(base: int, wave: np.ndarray) -> List[int]:
    return _clamped(base + round_half_up(wave * (base / 2)))


def build_weekly_series(home_kwh: int, solar_kwh: int, grid_kwh: int, points: int = WEEKLY_POINTS) -> List[Dict[str, Any]]:
    """Deterministic week-labelled series (W1..W12) from the three digits.

    Each field oscillates around its base quantity by up to half of it:
    solar over a 6-week sine, home over an 8-week cosine and grid over a
    10-week sine.
    """
    t = np.arange(1, points + 1)
    temperature = _perturb(solar_kwh, np.sin(t / 3 * np.pi))
    humidity = _perturb(home_kwh, np.cos(t / 4 * np.pi))
    grid = _perturb(grid_kwh, np.sin(t / 5 * np.pi))
    return [
        {"t": f"W{int(week)}", "temperature": temperature[i], "humidity": humidity[i], "grid": grid[i]}
        for i, week in enumerate(t)
    ]


def build_hourly_series(to_home: int, to_grid: int, points: int = HOURLY_POINTS) -> List[Dict[str, Any]]:
    """Hour-labelled series (0:00..9:00) centred on half of each routed solar flow."""
    i = np.arange(points)
    home = _clamped(round_half_up((to_home / 5) * np.sin(i / 3 * np.pi) + to_home / 2))
    orientation = _clamped(round_half_up((to_grid / 5) * np.cos(i / 3 * np.pi) + to_grid / 2))
    return [
        {"t": f"{int(hour)}:00", "to_home": home[n], "orientation": orientation[n]}
        for n, hour in enumerate(i)
    ]


def series_frame(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Series records -> DataFrame, keeping the label order for ordinal axes."""
    df = pd.DataFrame.from_records(records)
    if "t" in df.columns:
        df["order"] = range(len(df))
    return df
