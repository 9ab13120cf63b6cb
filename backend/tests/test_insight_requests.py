import math

import pytest

from app.insight.requests import (
    InsightRequestError,
    build_distribution_request,
    build_stuck_query,
    build_trend_request,
    build_workload_query,
)
from app.middleware.error_handler import ServiceError


def test_distribution_request_keeps_only_dimension() -> None:
    params = {
        "entity": "subcase",
        "dimension": "status",
        "org_unit_id": 5,
        "date_from": "2026-01-01",
        "date_to": "2026-01-31",
        "extra": True,
    }
    assert build_distribution_request(params) == {"dimension": "status"}


def test_distribution_request_returns_new_object_without_mutating_input() -> None:
    params = {"dimension": "status", "org_unit_id": 5}
    result = build_distribution_request(params)
    assert result is not params
    assert params == {"dimension": "status", "org_unit_id": 5}


@pytest.mark.parametrize("params", [{}, None, {"dimension": None}, {"entity": "subcase"}, "status", 3])
def test_distribution_request_requires_dimension(params) -> None:
    with pytest.raises(InsightRequestError, match="dimension required"):
        build_distribution_request(params)


@pytest.mark.parametrize("dimension", ["", 0, False])
def test_distribution_request_accepts_falsy_dimension(dimension) -> None:
    assert build_distribution_request({"dimension": dimension}) == {"dimension": dimension}


def test_trend_request_maps_interval_to_bucket() -> None:
    params = {"entity": "subcase", "interval": "month", "org_unit_id": 3, "status": "SUBMITTED"}
    assert build_trend_request(params) == {"bucket": "month"}
    assert "interval" in params


@pytest.mark.parametrize("params", [{}, None, {"interval": None}, {"bucket": "month"}])
def test_trend_request_requires_interval(params) -> None:
    with pytest.raises(InsightRequestError, match="interval required"):
        build_trend_request(params)


@pytest.mark.parametrize("interval", ["", 0, False])
def test_trend_request_accepts_falsy_interval(interval) -> None:
    assert build_trend_request({"interval": interval}) == {"bucket": interval}


def test_request_error_is_a_user_facing_value_error() -> None:
    with pytest.raises(ValueError):
        build_trend_request(None)
    assert issubclass(InsightRequestError, ServiceError)


def test_stuck_query_defaults_to_seven_days() -> None:
    assert build_stuck_query() == {"days_threshold": 7}
    assert build_stuck_query(None) == {"days_threshold": 7}


def test_stuck_query_returns_fresh_objects() -> None:
    first = build_stuck_query()
    second = build_stuck_query()
    assert first == second
    assert first is not second
    first["days_threshold"] = 30
    assert build_stuck_query() == {"days_threshold": 7}


@pytest.mark.parametrize("value", [0, 14, -3, "10", True, float("inf"), {"days": 3}])
def test_stuck_query_echoes_supplied_threshold(value) -> None:
    assert build_stuck_query(value)["days_threshold"] is value


def test_stuck_query_echoes_nan() -> None:
    assert math.isnan(build_stuck_query(float("nan"))["days_threshold"])


def test_workload_query_maps_filters() -> None:
    query = build_workload_query(
        {"orgUnitId": 4, "role": "SUPERVISOR", "minItems": 2, "sortBy": "open", "sortOrder": "desc"}
    )
    assert query == {
        "org_unit_id": 4,
        "role": "SUPERVISOR",
        "min_items": 2,
        "sort_by": "open",
        "sort_order": "desc",
    }


def test_workload_query_accepts_snake_case_and_skips_empty_values() -> None:
    query = build_workload_query(
        {"org_unit_id": 9, "role": "", "min_items": 0, "sort_by": None, "unknown": "x"}
    )
    assert query == {"org_unit_id": 9}


@pytest.mark.parametrize("filters", [None, {}, "role=admin"])
def test_workload_query_without_filters_is_empty(filters) -> None:
    assert build_workload_query(filters) == {}
