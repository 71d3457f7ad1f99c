"""Tests for dashboard context normalization."""

import pytest

from econstruct.context import Coordinate, DashboardContext, as_coordinate, normalize_context


class TestAsCoordinate:
    @pytest.mark.parametrize(
        "raw",
        [
            {"lat": -36.8, "lng": 174.7},
            {"lat": "-36.8", "lon": "174.7"},
            (-36.8, 174.7),
            Coordinate(lat=-36.8, lng=174.7),
        ],
    )
    def test_accepts(self, raw) -> None:
        assert as_coordinate(raw) == Coordinate(lat=-36.8, lng=174.7)

    @pytest.mark.parametrize(
        "raw",
        [None, {}, {"lat": "x", "lng": 1}, {"lat": 91, "lng": 0}, {"lat": 0, "lng": 181}, (1,), "nope", {"lat": float("nan"), "lng": 0}],
    )
    def test_rejects(self, raw) -> None:
        assert as_coordinate(raw) is None


class TestNormalizeContext:
    def test_empty(self) -> None:
        assert normalize_context(None) == DashboardContext()

    def test_flat_lat_lng(self) -> None:
        ctx = normalize_context({"file_name": "  plan7.ifc ", "lat": 1.5, "lng": 2.5})
        assert ctx == DashboardContext(file_name="plan7.ifc", location=Coordinate(lat=1.5, lng=2.5))

    def test_nested_location(self) -> None:
        ctx = normalize_context({"location": {"lat": 1.5, "lng": 2.5}})
        assert ctx.location == Coordinate(lat=1.5, lng=2.5)

    def test_partial_coordinate_is_dropped(self) -> None:
        assert normalize_context({"lat": 1.5, "lng": None}).location is None


def test_coordinate_label() -> None:
    assert Coordinate(lat=-36.80837, lng=174.72353).label(5) == "-36.80837, 174.72353"
