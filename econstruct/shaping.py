from __future__ import annotations

from typing import Any, Dict, List

from econstruct.flows import HomeAllocation, SolarAllocation
from econstruct.series import round_half_up

GAUGE_MAX = 100
GAUGE_STEP = 10

COAL_T_PER_KWH = 0.0003
CO2_KG_PER_TREE = 21

COLORS = {
    "home": "#22d3ee",
    "solar": "#34d399",
    "grid": "#f59e0b",
    "bg": "#0f172a",
    "card": "#111827",
    "accent": "#14b8a6",
}


def solar_pie(alloc: SolarAllocation) -> List[Dict[str, Any]]:
    return [
        {"name": "To Battery", "value": alloc.to_battery},
        {"name": "To Home", "value": alloc.to_home},
        {"name": "To Grid", "value": alloc.to_grid},
    ]


def home_pie(alloc: HomeAllocation) -> List[Dict[str, Any]]:
    return [
        {"name": "From Solar", "value": alloc.from_solar},
        {"name": "From Battery", "value": alloc.from_battery},
        {"name": "From Grid", "value": alloc.from_grid},
    ]


def grid_bar(grid_kwh: int, alloc: SolarAllocation) -> Dict[str, Any]:
    return {"name": "Grid", "from_grid": grid_kwh, "to_grid": alloc.to_grid}


def net_exported(alloc: SolarAllocation, grid_kwh: int) -> int:
    return max(alloc.to_grid - grid_kwh, 0)


def gauge_value(alloc: SolarAllocation) -> int:
    """Toy battery state-of-charge gauge, always within 0..100."""
    return max(0, min(GAUGE_MAX, alloc.to_battery * GAUGE_STEP))


def solar_legend(alloc: SolarAllocation) -> List[Dict[str, Any]]:
    return [
        {"label": "To Battery", "color": COLORS["accent"], "value": alloc.to_battery},
        {"label": "To Home", "color": COLORS["home"], "value": alloc.to_home},
        {"label": "To Grid", "color": COLORS["grid"], "value": alloc.to_grid},
    ]


def environmental_benefits(solar_kwh: int, avoided_kg: float) -> Dict[str, Any]:
    return {
        "generated_kwh": solar_kwh,
        "coal_saved_t": round(solar_kwh * COAL_T_PER_KWH, 2),
        "co2_avoided_t": round(avoided_kg / 1000, 2),
        "equivalent_trees": int(round_half_up(avoided_kg / CO2_KG_PER_TREE)),
    }


def work_orders(home_kwh: int, solar_kwh: int) -> Dict[str, int]:
    return {"executing": solar_kwh % 5 + 1, "finished": home_kwh % 5 + 1}
