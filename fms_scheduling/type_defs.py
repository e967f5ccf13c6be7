"""Type definitions for FMS scheduling data structures.

TypedDict is used for the fixed-key record shapes exchanged with the
surrounding application (schedule templates, equipment references,
preventive-schedule form defaults).

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime validation lives in
helpers/schedule_helpers.py (voluptuous schemas).

IMPORTANT: This file must NOT import from engines/ or helpers/ to avoid
circular dependencies. Only import from const.py and typing.
"""

from datetime import date, datetime
from typing import NotRequired, TypedDict

from .const import PeriodType

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

EquipmentId = str
TemplateId = str
ISODate = str  # ISO 8601 date string (no time) "2024-01-15"
DateInput = str | date | datetime | None


# =============================================================================
# Schedule Records
# =============================================================================


class ScheduleInput(TypedDict):
    """Inputs to a single next-date calculation."""

    base_date: DateInput
    period_type: PeriodType | str
    period_value: int


class ScheduleTemplate(TypedDict):
    """Maintenance/inspection template carrying the recurrence definition."""

    name: NotRequired[str]
    period_type: NotRequired[PeriodType | str | None]
    period_value: NotRequired[int]
    estimated_time: NotRequired[int | None]  # minutes


class EquipmentRef(TypedDict):
    """Subset of an equipment record used for schedule suggestions."""

    name: NotRequired[str | None]
    install_date: NotRequired[DateInput]


class PreventiveScheduleDefaults(TypedDict):
    """Initial values for a new preventive-maintenance schedule record."""

    equipment_id: EquipmentId | None
    template_id: TemplateId | None
    task_description: str
    estimated_duration: int
    estimated_cost: int
    is_active: bool
    next_schedule_date: ISODate


class ConfigData(TypedDict):
    """Validated package configuration."""

    time_zone: str
