"""Tests for the full dashboard payload."""

import json

import pytest

from econstruct.context import Coordinate, DashboardContext
from econstruct.dashboard import compute_dashboard

OUTPUT_KEYS = {
    "normalized_code",
    "totals",
    "solar_allocation",
    "home_allocation",
    "weekly_series",
    "hourly_series",
    "solar_pie",
    "home_pie",
    "grid_bar",
    "net_exported",
    "gauge_value",
}


class TestComputeDashboard:
    def test_exposes_output_boundary(self) -> None:
        payload = compute_dashboard("333", with_charts=False)
        assert OUTPUT_KEYS <= set(payload)

    def test_code_333(self) -> None:
        payload = compute_dashboard("333", with_charts=False)
        assert payload["normalized_code"] == "333"
        assert payload["solar_allocation"] == {"to_battery": 0, "to_home": 0, "to_grid": 3}
        assert payload["home_allocation"] == {"from_solar": 0, "from_battery": 0, "from_grid": 3}
        assert payload["totals"]["total_kwh"] == 9
        assert payload["totals"]["emissions_kg"] == pytest.approx(2.7)
        assert payload["totals"]["avoided_kg"] == pytest.approx(1.35)
        assert payload["grid_bar"] == {"name": "Grid", "from_grid": 3, "to_grid": 3}
        assert payload["net_exported"] == 0
        assert payload["gauge_value"] == 0
        assert len(payload["weekly_series"]) == 12
        assert len(payload["hourly_series"]) == 10
        assert len(payload["solar_pie"]) == 3 and len(payload["home_pie"]) == 3

    def test_garbage_code_defaults_to_zero(self) -> None:
        payload = compute_dashboard("report", with_charts=False)
        assert payload["normalized_code"] == "000"
        assert payload["totals"]["total_kwh"] == 0

    def test_net_exported_with_export(self) -> None:
        payload = compute_dashboard("050", with_charts=False)
        assert payload["net_exported"] == 5

    def test_deterministic(self) -> None:
        assert compute_dashboard("472") == compute_dashboard("472")

    def test_header_without_context(self) -> None:
        header = compute_dashboard("7", with_charts=False)["header"]
        assert header["subtitle"] == "Code: 007"
        assert header["file_name"] is None and header["location"] is None

    def test_header_with_context(self) -> None:
        ctx = DashboardContext(file_name="something333.ifc", location=Coordinate(lat=-36.80837, lng=174.72353))
        header = compute_dashboard("333", ctx, with_charts=False)["header"]
        assert header["subtitle"] == "Code: 333 · something333.ifc · -36.8084, 174.7235"
        assert header["location"] == {"lat": -36.80837, "lng": 174.72353}

    def test_charts_included_by_default(self) -> None:
        charts = compute_dashboard("999")["charts"]
        assert set(charts) == {"weekly", "hourly", "solar_donut", "home_donut", "grid_bar", "gauge"}

    def test_json_serializable(self) -> None:
        json.dumps(compute_dashboard("999"))
