# File: const.py
"""Constants for the FMS scheduling package.

This file centralizes period types, label keys, record field keys, defaults,
and configuration keys for consistency across the package.
"""

from enum import StrEnum
import logging

# ------------------------------------------------------------------------------------------------
# General / Package Information
# ------------------------------------------------------------------------------------------------
# Logger
LOGGER = logging.getLogger(__package__)


# ------------------------------------------------------------------------------------------------
# Period Types
# ------------------------------------------------------------------------------------------------
class PeriodType(StrEnum):
    """Recurrence kinds for maintenance and inspection schedules.

    Values match the tags stored on schedule records, so raw strings read
    from storage compare equal to the members.
    """

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMI_ANNUALLY = "SEMI_ANNUALLY"
    ANNUALLY = "ANNUALLY"
    ON_DEMAND = "ON_DEMAND"
    CUSTOM_DAYS = "CUSTOM_DAYS"
    CUSTOM_WEEKS = "CUSTOM_WEEKS"
    CUSTOM_MONTHS = "CUSTOM_MONTHS"
    CUSTOM_YEARS = "CUSTOM_YEARS"


PERIOD_TYPE_OPTIONS = [period_type.value for period_type in PeriodType]

# Translation label keys (one per period type)
TRANS_KEY_PERIOD_PREFIX = "inspection.period."
PERIOD_TYPE_LABELS: dict[PeriodType, str] = {
    period_type: f"{TRANS_KEY_PERIOD_PREFIX}{period_type.value.lower()}"
    for period_type in PeriodType
}


# ------------------------------------------------------------------------------------------------
# Calendar Units
# ------------------------------------------------------------------------------------------------
TIME_UNIT_DAYS = "days"
TIME_UNIT_WEEKS = "weeks"
TIME_UNIT_MONTHS = "months"
TIME_UNIT_YEARS = "years"

MONTHS_PER_QUARTER = 3
MONTHS_PER_HALF_YEAR = 6


# ------------------------------------------------------------------------------------------------
# Fallback Reasons (strict schedule results)
# ------------------------------------------------------------------------------------------------
FALLBACK_INVALID_BASE_DATE = "invalid_base_date"
FALLBACK_NON_POSITIVE_PERIOD_VALUE = "non_positive_period_value"
FALLBACK_INVALID_PERIOD_VALUE = "invalid_period_value"
FALLBACK_ON_DEMAND = "on_demand"
FALLBACK_UNKNOWN_PERIOD_TYPE = "unknown_period_type"
FALLBACK_OVERFLOW = "overflow"


# ------------------------------------------------------------------------------------------------
# Schedule Template / Equipment / Preventive Schedule Fields
# ------------------------------------------------------------------------------------------------
DATA_TEMPLATE_NAME = "name"
DATA_TEMPLATE_PERIOD_TYPE = "period_type"
DATA_TEMPLATE_PERIOD_VALUE = "period_value"
DATA_TEMPLATE_ESTIMATED_TIME = "estimated_time"

DATA_EQUIPMENT_NAME = "name"
DATA_EQUIPMENT_INSTALL_DATE = "install_date"

DATA_PREVENTIVE_EQUIPMENT_ID = "equipment_id"
DATA_PREVENTIVE_TEMPLATE_ID = "template_id"
DATA_PREVENTIVE_TASK_DESCRIPTION = "task_description"
DATA_PREVENTIVE_ESTIMATED_DURATION = "estimated_duration"
DATA_PREVENTIVE_ESTIMATED_COST = "estimated_cost"
DATA_PREVENTIVE_IS_ACTIVE = "is_active"
DATA_PREVENTIVE_NEXT_SCHEDULE_DATE = "next_schedule_date"


# ------------------------------------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------------------------------------
DEFAULT_PERIOD_VALUE = 1
DEFAULT_ESTIMATED_DURATION = 60  # minutes
DEFAULT_ESTIMATED_COST = 0
DEFAULT_EQUIPMENT_NAME = "Selected equipment"
DEFAULT_TIME_ZONE_NAME = "UTC"


# ------------------------------------------------------------------------------------------------
# Configuration Keys
# ------------------------------------------------------------------------------------------------
CONF_TIME_ZONE = "time_zone"


# ------------------------------------------------------------------------------------------------
# Validation Translation Keys
# ------------------------------------------------------------------------------------------------
TRANS_KEY_INVALID_PERIOD_TYPE = "invalid_period_type"
TRANS_KEY_INVALID_PERIOD_VALUE = "invalid_period_value"
TRANS_KEY_INVALID_ESTIMATED_TIME = "invalid_estimated_time"
TRANS_KEY_INVALID_TEMPLATE = "invalid_template"
