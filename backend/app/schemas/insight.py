from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field

Number = int | float

ASSIGNED_LEVEL_PLACEHOLDER = "—"


class KpiSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    open_subcases: Number = 0
    pending_approvals: Number = 0
    active_action_items: Number = 0
    overdue_items: Number = 0


class DistributionPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: Number


class TrendPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: str
    count: Number


class StuckCase(TypedDict, total=False):
    """Upstream stuck-case record plus the table's derived display fields.

    Only the commonly present keys are declared; every other upstream key is
    carried through unchanged.
    """

    subcase_id: Any
    target_org_unit_id: Any
    updated_at: Any
    status: Any
    stage: Any
    assigned_level: str
    days_in_stage: Number


class InboxSubcase(BaseModel):
    model_config = ConfigDict(frozen=True)

    subcase_id: Any = None
    case_type: Any = None
    incident_id: Any = None
    seasonal_report_id: Any = None
    case_description: str = ""
    patient_name: str = ""
    severity: Any = "NEUTRAL"
    severity_id: Any = None
    category: str = ""
    waiting_days: Number = 0
    created_at: Any = None
    status: Any = None
    is_red_flag: bool = False
    is_never_event: bool = False


class InboxSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    section_id: Any = None
    section_name: str
    org_type: str
    supervisor_name: str
    pending_count: Number
    subcases: list[InboxSubcase] = Field(default_factory=list)


class InsightOverview(BaseModel):
    """The four dashboard datasets loaded together."""

    model_config = ConfigDict(frozen=True)

    kpis: KpiSummary
    distribution: list[DistributionPoint]
    trend: list[TrendPoint]
    stuck_cases: list[dict]
