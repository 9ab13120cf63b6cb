import asyncio

import httpx
import pytest

from app.insight.client import (
    DISTRIBUTION_PATH,
    GROUPED_INBOX_PATH,
    KPI_SUMMARY_PATH,
    STUCK_PATH,
    TREND_PATH,
    USER_WORKLOAD_PATH,
    InsightClient,
)
from app.insight.requests import InsightRequestError
from app.schemas.insight import InsightOverview, KpiSummary
from tests.mocks.fake_insight_transport import FakeInsightTransport, upstream_status_error

KPI_BODY = {
    "total_subcases": 21,
    "by_status": [
        {"status": "SUBMITTED", "count": 4},
        {"status": "SECTION_ACCEPTED_PENDING_DEPT", "count": 2},
        {"status": "ADMIN_APPROVED", "count": 15},
    ],
    "action_items": {"total": 9, "open": 6, "completed": 3, "overdue": 1},
}


def _full_transport() -> FakeInsightTransport:
    return FakeInsightTransport(
        {
            ("GET", KPI_SUMMARY_PATH): KPI_BODY,
            ("POST", DISTRIBUTION_PATH): [{"key": "SUBMITTED", "count": 4}],
            ("POST", TREND_PATH): [{"bucket": "2026-01", "count": 12}],
            ("GET", STUCK_PATH): [{"subcase_id": 3, "status": "PENDING_REVIEW", "days_in_stage": "11"}],
        }
    )


def test_get_insight_kpis_adapts_summary() -> None:
    transport = _full_transport()
    kpis = asyncio.run(InsightClient(transport).get_insight_kpis())
    assert kpis == KpiSummary(
        open_subcases=6, pending_approvals=2, active_action_items=6, overdue_items=1
    )
    assert transport.calls == [("GET", KPI_SUMMARY_PATH, None)]


def test_get_insight_kpis_tolerates_junk_body() -> None:
    transport = FakeInsightTransport({("GET", KPI_SUMMARY_PATH): "<html>maintenance</html>"})
    kpis = asyncio.run(InsightClient(transport).get_insight_kpis())
    assert kpis == KpiSummary()


def test_get_insight_distribution_sends_only_dimension() -> None:
    transport = _full_transport()
    points = asyncio.run(
        InsightClient(transport).get_insight_distribution(
            {"entity": "subcase", "dimension": "status", "org_unit_id": 5}
        )
    )
    assert [point.model_dump() for point in points] == [{"label": "SUBMITTED", "value": 4}]
    assert transport.calls == [("POST", DISTRIBUTION_PATH, {"dimension": "status"})]


def test_get_insight_trend_sends_bucket() -> None:
    transport = _full_transport()
    points = asyncio.run(
        InsightClient(transport).get_insight_trend({"interval": "month", "date_from": "2026-01-01"})
    )
    assert [point.model_dump() for point in points] == [{"period": "2026-01", "count": 12}]
    assert transport.calls == [("POST", TREND_PATH, {"bucket": "month"})]


@pytest.mark.parametrize(("threshold", "sent"), [(None, 7), (14, 14)])
def test_get_stuck_cases_sends_threshold(threshold, sent) -> None:
    transport = _full_transport()
    cases = asyncio.run(InsightClient(transport).get_stuck_cases(threshold))
    assert cases == [
        {
            "subcase_id": 3,
            "status": "PENDING_REVIEW",
            "stage": "PENDING_REVIEW",
            "assigned_level": "—",
            "days_in_stage": 11,
        }
    ]
    assert transport.calls == [("GET", STUCK_PATH, {"days_threshold": sent})]


def test_missing_dimension_fails_before_any_upstream_call() -> None:
    transport = _full_transport()
    client = InsightClient(transport)
    with pytest.raises(InsightRequestError, match="dimension required"):
        asyncio.run(client.get_insight_distribution({"org_unit_id": 5}))
    with pytest.raises(InsightRequestError, match="interval required"):
        asyncio.run(client.get_insight_trend(None))
    assert transport.calls == []


def test_transport_errors_propagate_unchanged() -> None:
    error = upstream_status_error(503, {"detail": "database offline"})
    transport = FakeInsightTransport({("GET", KPI_SUMMARY_PATH): error})
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        asyncio.run(InsightClient(transport).get_insight_kpis())
    assert exc_info.value is error


def test_get_overview_loads_all_four_concurrently() -> None:
    transport = _full_transport()
    overview = asyncio.run(
        InsightClient(transport).get_overview({"dimension": "status"}, {"interval": "month"})
    )
    assert isinstance(overview, InsightOverview)
    assert overview.kpis.open_subcases == 6
    assert [point.label for point in overview.distribution] == ["SUBMITTED"]
    assert [point.period for point in overview.trend] == ["2026-01"]
    assert overview.stuck_cases[0]["stage"] == "PENDING_REVIEW"
    assert sorted((method, path) for method, path, _ in transport.calls) == sorted(
        [
            ("GET", KPI_SUMMARY_PATH),
            ("POST", DISTRIBUTION_PATH),
            ("POST", TREND_PATH),
            ("GET", STUCK_PATH),
        ]
    )
    assert transport.max_in_flight == 4


def test_get_overview_propagates_first_failure() -> None:
    transport = _full_transport()
    transport.respond("POST", TREND_PATH, httpx.ConnectError("connection refused"))
    with pytest.raises(httpx.ConnectError):
        asyncio.run(
            InsightClient(transport).get_overview({"dimension": "status"}, {"interval": "week"})
        )


def test_get_overview_rejects_bad_params_without_calling_upstream() -> None:
    transport = _full_transport()
    with pytest.raises(InsightRequestError, match="interval required"):
        asyncio.run(InsightClient(transport).get_overview({"dimension": "status"}, {}))
    assert transport.calls == []


def test_get_grouped_inbox_adapts_sections() -> None:
    transport = FakeInsightTransport(
        {
            ("GET", GROUPED_INBOX_PATH): [
                {"section_id": 1, "section_name": "Radiology", "pending_count": 2, "subcases": []},
                {"section_id": 2, "section_name": "Pharmacy", "pending_count": 0},
            ]
        }
    )
    sections = asyncio.run(InsightClient(transport).get_grouped_inbox())
    assert [section.section_id for section in sections] == [1]
    assert sections[0].supervisor_name == "Unassigned"


def test_get_user_workload_builds_query() -> None:
    rows = [{"user_id": 8, "open_items": 3}]
    transport = FakeInsightTransport({("GET", USER_WORKLOAD_PATH): rows})
    result = asyncio.run(
        InsightClient(transport).get_user_workload({"orgUnitId": 2, "sortBy": "open"})
    )
    assert result == rows
    assert transport.calls == [
        ("GET", USER_WORKLOAD_PATH, {"org_unit_id": 2, "sort_by": "open"})
    ]
