# File: __init__.py
"""Initialization file for the FMS scheduling package.

Computes next occurrence dates for recurring preventive-maintenance and
inspection schedules, and validates the recurrence fields of schedule
templates.

Key Features:
- `compute_next_date`: permissive next-date calculation (never raises).
- `compute_next_date_strict`: same calculation, reports applied fallbacks.
- `setup`: validate package configuration and apply the site time zone.
"""

from __future__ import annotations

from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import voluptuous as vol

from . import const
from .const import PeriodType
from .engines.schedule_engine import (
    ScheduleAdvancer,
    StrictScheduleResult,
    compute_next_date,
    compute_next_date_strict,
)
from .helpers.schedule_helpers import (
    ScheduleValidationError,
    build_preventive_schedule_defaults,
    suggest_next_schedule_date,
    validate_schedule_template,
)
from .type_defs import ConfigData
from .utils.dt_utils import dt_today_iso, set_default_timezone


def _time_zone(value: Any) -> str:
    """Validate an IANA time zone name."""
    if not isinstance(value, str) or not value:
        raise vol.Invalid("time zone must be a non-empty string")
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise vol.Invalid(f"unknown time zone: {value}") from err
    return value


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(
            const.CONF_TIME_ZONE, default=const.DEFAULT_TIME_ZONE_NAME
        ): _time_zone,
    }
)


def setup(config: dict[str, Any] | None = None) -> ConfigData:
    """Validate the package configuration and apply it.

    Args:
        config: Mapping with optional CONF_TIME_ZONE (IANA name).

    Returns:
        The validated configuration.

    Raises:
        vol.Invalid: configuration is malformed.
    """
    validated: ConfigData = CONFIG_SCHEMA(config or {})
    set_default_timezone(ZoneInfo(validated[const.CONF_TIME_ZONE]))
    const.LOGGER.debug(
        "FMS scheduling configured: time_zone=%s", validated[const.CONF_TIME_ZONE]
    )
    return validated


__all__ = [
    "CONFIG_SCHEMA",
    "PeriodType",
    "ScheduleAdvancer",
    "ScheduleValidationError",
    "StrictScheduleResult",
    "build_preventive_schedule_defaults",
    "compute_next_date",
    "compute_next_date_strict",
    "dt_today_iso",
    "setup",
    "suggest_next_schedule_date",
    "validate_schedule_template",
]
