from __future__ import annotations

from typing import Any, Dict, List

import altair as alt
import pandas as pd

from econstruct.series import series_frame
from econstruct.shaping import COLORS

alt.data_transformers.disable_max_rows()


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def _x_time() -> alt.X:
    return alt.X("t:O", title=None, sort=alt.EncodingSortField(field="order", op="min"), axis=alt.Axis(labels=False, ticks=False, domain=False))


def weekly_line_chart(weekly: List[Dict[str, Any]]) -> alt.Chart:
    df = series_frame(weekly)
    return (
        alt.Chart(df)
        .transform_fold(["temperature", "humidity"], as_=["series", "value"])
        .mark_line(strokeWidth=2)
        .encode(
            x=_x_time(),
            y=alt.Y("value:Q", title=None, axis=None),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(domain=["temperature", "humidity"], range=[COLORS["home"], COLORS["grid"]]),
                legend=None,
            ),
            tooltip=["t:O", "series:N", "value:Q"],
        )
        .properties(height=224)
    )


def hourly_area_chart(hourly: List[Dict[str, Any]]) -> alt.Chart:
    df = series_frame(hourly)
    return (
        alt.Chart(df)
        .transform_fold(["to_home", "orientation"], as_=["series", "value"])
        .mark_area(opacity=0.3, interpolate="monotone", line=True)
        .encode(
            x=_x_time(),
            y=alt.Y("value:Q", title=None, axis=None, stack=None),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(domain=["to_home", "orientation"], range=[COLORS["home"], COLORS["grid"]]),
                legend=None,
            ),
            tooltip=["t:O", "series:N", "value:Q"],
        )
        .properties(height=192)
    )


def donut_chart(pie: List[Dict[str, Any]], colors: List[str]) -> alt.Chart:
    df = pd.DataFrame.from_records(pie)
    df["index"] = range(len(df))
    return (
        alt.Chart(df)
        .mark_arc(innerRadius=50, outerRadius=80, padAngle=0.03)
        .encode(
            theta=alt.Theta("value:Q"),
            color=alt.Color("name:N", scale=alt.Scale(domain=df["name"].tolist(), range=colors), legend=None),
            order=alt.Order("index:Q"),
            tooltip=["name:N", alt.Tooltip("value:Q", title="kWh")],
        )
        .properties(height=224)
    )


def grid_bar_chart(bar: Dict[str, Any]) -> alt.Chart:
    df = pd.DataFrame.from_records([bar])
    return (
        alt.Chart(df)
        .transform_fold(["to_grid", "from_grid"], as_=["flow", "kwh"])
        .mark_bar()
        .encode(
            x=alt.X("name:N", title=None, axis=None),
            y=alt.Y("kwh:Q", title=None, axis=None, stack="zero"),
            color=alt.Color(
                "flow:N",
                scale=alt.Scale(domain=["to_grid", "from_grid"], range=[COLORS["home"], COLORS["grid"]]),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=["flow:N", "kwh:Q"],
        )
        .properties(height=192)
    )


def gauge_chart(value: int) -> alt.Chart:
    df = pd.DataFrame({"part": ["charged", "empty"], "value": [value, 100 - value]})
    return (
        alt.Chart(df)
        .mark_arc(innerRadius=60, outerRadius=80)
        .encode(
            theta=alt.Theta("value:Q"),
            color=alt.Color("part:N", scale=alt.Scale(domain=["charged", "empty"], range=[COLORS["accent"], COLORS["card"]]), legend=None),
            tooltip=["part:N", "value:Q"],
        )
        .properties(height=192)
    )


def build_chart_specs(bundle: Dict[str, Any]) -> Dict[str, Any]:
    """All dashboard charts for a computed bundle, as Vega-Lite dicts."""
    pie_colors = [COLORS["accent"], COLORS["home"], COLORS["grid"]]
    return {
        "weekly": to_vega_spec(weekly_line_chart(bundle["weekly_series"])),
        "hourly": to_vega_spec(hourly_area_chart(bundle["hourly_series"])),
        "solar_donut": to_vega_spec(donut_chart(bundle["solar_pie"], pie_colors)),
        "home_donut": to_vega_spec(donut_chart(bundle["home_pie"], pie_colors)),
        "grid_bar": to_vega_spec(grid_bar_chart(bundle["grid_bar"])),
        "gauge": to_vega_spec(gauge_chart(bundle["gauge_value"])),
    }
