from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional

from econstruct.charts import build_chart_specs
from econstruct.codes import normalize_code, split_digits
from econstruct.context import DashboardContext
from econstruct.flows import EF_GRID, derive_flows
from econstruct.series import build_hourly_series, build_weekly_series
from econstruct.shaping import (
    environmental_benefits,
    gauge_value,
    grid_bar,
    home_pie,
    net_exported,
    solar_legend,
    solar_pie,
    work_orders,
)

DASHBOARD_TITLE = "Energy management and projection"


def _header(code: str, context: DashboardContext) -> Dict[str, Any]:
    parts = [f"Code: {code}"]
    if context.file_name:
        parts.append(context.file_name)
    if context.location is not None:
        parts.append(context.location.label())
    return {
        "title": DASHBOARD_TITLE,
        "code": code,
        "file_name": context.file_name or None,
        "location": asdict(context.location) if context.location is not None else None,
        "subtitle": " · ".join(parts),
    }


def compute_dashboard(raw_code: object, context: Optional[DashboardContext] = None, *, with_charts: bool = True) -> Dict[str, Any]:
    """Expand a code into every value the dashboard renders.

    ``raw_code`` is normalized first, so any input produces a payload.
    The result is JSON-serializable; chart specs are Vega-Lite dicts.
    """
    context = context or DashboardContext()
    code = normalize_code(raw_code)
    digits = split_digits(code)
    flows = derive_flows(digits.home, digits.solar, digits.grid)
    solar_alloc = flows.solar_allocation

    payload: Dict[str, Any] = {
        "normalized_code": code,
        "header": _header(code, context),
        "digits": asdict(digits),
        "emissions_factor": EF_GRID,
        "totals": asdict(flows.totals),
        "solar_allocation": asdict(solar_alloc),
        "home_allocation": asdict(flows.home_allocation),
        "weekly_series": build_weekly_series(digits.home, digits.solar, digits.grid),
        "hourly_series": build_hourly_series(solar_alloc.to_home, solar_alloc.to_grid),
        "solar_pie": solar_pie(solar_alloc),
        "home_pie": home_pie(flows.home_allocation),
        "grid_bar": grid_bar(digits.grid, solar_alloc),
        "net_exported": net_exported(solar_alloc, digits.grid),
        "gauge_value": gauge_value(solar_alloc),
        "solar_legend": solar_legend(solar_alloc),
        "benefits": environmental_benefits(digits.solar, flows.totals.avoided_kg),
        "work_orders": work_orders(digits.home, digits.solar),
    }
    payload["charts"] = build_chart_specs(payload) if with_charts else {}
    return payload
