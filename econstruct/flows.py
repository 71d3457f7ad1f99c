from __future__ import annotations

import math
from dataclasses import dataclass

from econstruct.codes import DigitTriple

# Demo carbon factor (kg CO2e per kWh). Illustrative only, not for reporting.
EF_GRID = 0.45

SOLAR_TO_BATTERY_SHARE = 0.11
SOLAR_TO_HOME_SHARE = 0.19
HOME_FROM_SOLAR_CAP = 0.4
HOME_FROM_BATTERY_CAP = 0.25


@dataclass(frozen=True)
class SolarAllocation:
    to_battery: int
    to_home: int
    to_grid: int


@dataclass(frozen=True)
class HomeAllocation:
    from_solar: int
    from_battery: int
    from_grid: int


@dataclass(frozen=True)
class Totals:
    total_kwh: int
    emissions_kg: float
    avoided_kg: float


@dataclass(frozen=True)
class FlowResult:
    digits: DigitTriple
    solar_allocation: SolarAllocation
    home_allocation: HomeAllocation
    totals: Totals


def allocate_solar(solar_kwh: int) -> SolarAllocation:
    """Split solar into battery (11%), home (19%) and grid (remainder)."""
    to_battery = math.floor(solar_kwh * SOLAR_TO_BATTERY_SHARE)
    to_home = math.floor(solar_kwh * SOLAR_TO_HOME_SHARE)
    to_grid = max(solar_kwh - to_battery - to_home, 0)
    return SolarAllocation(to_battery=to_battery, to_home=to_home, to_grid=to_grid)


def allocate_home(home_kwh: int, from_solar: int, from_battery: int) -> HomeAllocation:
    """Source home consumption from solar and battery up to fixed caps; grid covers the rest."""
    s = min(from_solar, math.floor(home_kwh * HOME_FROM_SOLAR_CAP))
    b = min(from_battery, math.floor(home_kwh * HOME_FROM_BATTERY_CAP))
    g = max(home_kwh - s - b, 0)
    return HomeAllocation(from_solar=s, from_battery=b, from_grid=g)


def compute_totals(digits: DigitTriple) -> Totals:
    return Totals(
        total_kwh=digits.home + digits.solar + digits.grid,
        emissions_kg=(digits.home + digits.grid) * EF_GRID,
        avoided_kg=digits.solar * EF_GRID,
    )


def derive_flows(home: int, solar: int, grid: int) -> FlowResult:
    digits = DigitTriple(home=home, solar=solar, grid=grid)
    solar_alloc = allocate_solar(solar)
    home_alloc = allocate_home(home, solar_alloc.to_home, solar_alloc.to_battery)
    return FlowResult(
        digits=digits,
        solar_allocation=solar_alloc,
        home_allocation=home_alloc,
        totals=compute_totals(digits),
    )
