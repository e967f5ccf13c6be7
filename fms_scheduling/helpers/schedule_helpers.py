# File: helpers/schedule_helpers.py
"""Schedule template validation and preventive-schedule form defaults.

Validation is the SINGLE SOURCE OF TRUTH for template recurrence fields and
is shared by the template CRUD screens and the import path.

Functions:
    - validate_schedule_template: Normalize a template or raise ScheduleValidationError
    - suggest_next_schedule_date: Next date for an equipment/template pair
    - build_preventive_schedule_defaults: Initial values for a new or edited PM schedule
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import voluptuous as vol

from .. import const
from ..engines.schedule_engine import compute_next_date
from ..utils.dt_utils import dt_parse_date, dt_today_iso

if TYPE_CHECKING:
    from ..type_defs import (
        EquipmentId,
        EquipmentRef,
        ISODate,
        PreventiveScheduleDefaults,
        ScheduleTemplate,
        TemplateId,
    )


# ==============================================================================
# SCHEMAS
# ==============================================================================


def _strict_int(value: Any) -> int:
    """Coerce to int, rejecting bools and fractional numbers."""
    if isinstance(value, bool):
        raise vol.Invalid("expected an integer")
    if isinstance(value, float) and not value.is_integer():
        raise vol.Invalid("expected an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise vol.Invalid("expected an integer") from err


SCHEDULE_TEMPLATE_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_TEMPLATE_NAME): str,
        vol.Required(const.DATA_TEMPLATE_PERIOD_TYPE): vol.All(
            str, vol.In(const.PERIOD_TYPE_OPTIONS), vol.Coerce(const.PeriodType)
        ),
        vol.Optional(
            const.DATA_TEMPLATE_PERIOD_VALUE, default=const.DEFAULT_PERIOD_VALUE
        ): vol.All(_strict_int, vol.Range(min=1)),
        vol.Optional(const.DATA_TEMPLATE_ESTIMATED_TIME): vol.Any(
            None, vol.All(_strict_int, vol.Range(min=0))
        ),
    },
    extra=vol.ALLOW_EXTRA,
)

# Map schema paths back to the field and message shown on the form
_FIELD_TRANSLATION_KEYS = {
    const.DATA_TEMPLATE_PERIOD_TYPE: const.TRANS_KEY_INVALID_PERIOD_TYPE,
    const.DATA_TEMPLATE_PERIOD_VALUE: const.TRANS_KEY_INVALID_PERIOD_VALUE,
    const.DATA_TEMPLATE_ESTIMATED_TIME: const.TRANS_KEY_INVALID_ESTIMATED_TIME,
}


# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class ScheduleValidationError(Exception):
    """Validation error with field-specific information for form highlighting.

    Attributes:
        field: The DATA_TEMPLATE_* constant identifying the field that failed
        translation_key: The TRANS_KEY_* constant for the error message
        placeholders: Optional dict for translation string placeholders

    Example:
        raise ScheduleValidationError(
            field=const.DATA_TEMPLATE_PERIOD_VALUE,
            translation_key=const.TRANS_KEY_INVALID_PERIOD_VALUE,
            placeholders={"value": "0"},
        )
    """

    def __init__(
        self,
        field: str | None,
        translation_key: str,
        placeholders: dict[str, str] | None = None,
    ) -> None:
        """Initialize ScheduleValidationError."""
        self.field = field
        self.translation_key = translation_key
        self.placeholders = placeholders or {}
        super().__init__(translation_key)


# ==============================================================================
# TEMPLATES
# ==============================================================================


def validate_schedule_template(data: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize a template's recurrence fields.

    Args:
        data: Template dict with DATA_TEMPLATE_* keys

    Returns:
        Normalized copy (period_type as PeriodType, period_value as int,
        period_value defaulted to 1 when missing).

    Raises:
        ScheduleValidationError: first failing field and its translation key
    """
    try:
        return SCHEDULE_TEMPLATE_SCHEMA(data)
    except vol.MultipleInvalid as err:
        first = err.errors[0]
        field = str(first.path[0]) if first.path else None
        translation_key = _FIELD_TRANSLATION_KEYS.get(
            field or "", const.TRANS_KEY_INVALID_TEMPLATE
        )
        value = data.get(field) if field and isinstance(data, dict) else None
        const.LOGGER.debug(
            "Schedule template validation failed: field=%s, error=%s", field, first
        )
        raise ScheduleValidationError(
            field=field,
            translation_key=translation_key,
            placeholders={"value": str(value)},
        ) from err


# ==============================================================================
# PREVENTIVE SCHEDULES
# ==============================================================================


def _period_value_or_none(value: Any) -> int | None:
    """Return the period value as an int, or None if it cannot be read as one."""
    try:
        return _strict_int(value)
    except vol.Invalid:
        return None


def suggest_next_schedule_date(
    template: ScheduleTemplate | None,
    equipment: EquipmentRef | None = None,
) -> ISODate:
    """Suggest the next schedule date for an equipment/template pair.

    The equipment's install date is the base when present, otherwise today.
    Period values stored as numeric strings ("2") or integral floats (2.0)
    are read as ints. Templates without a period type or with a missing or
    non-positive period value suggest today.
    """
    today = dt_today_iso()
    if not template:
        return today

    period_type = template.get(const.DATA_TEMPLATE_PERIOD_TYPE)
    period_value = _period_value_or_none(
        template.get(const.DATA_TEMPLATE_PERIOD_VALUE)
    )
    if not period_type or period_value is None or period_value <= 0:
        return today

    base_date = (equipment or {}).get(const.DATA_EQUIPMENT_INSTALL_DATE) or today
    return compute_next_date(base_date, period_type, period_value)


def build_preventive_schedule_defaults(
    equipment_id: EquipmentId | None,
    template_id: TemplateId | None,
    template: ScheduleTemplate | None = None,
    equipment: EquipmentRef | None = None,
    existing: dict[str, Any] | None = None,
) -> PreventiveScheduleDefaults:
    """Build initial form values for a preventive-maintenance schedule.

    When an existing record is being edited, its values are kept as-is and
    only next_schedule_date is normalized to an ISO date (today when the
    record has none or it cannot be parsed). Otherwise the values are
    derived from the equipment/template pair.
    """
    if existing:
        next_date = dt_parse_date(
            existing.get(const.DATA_PREVENTIVE_NEXT_SCHEDULE_DATE)
        )
        return {
            **existing,
            const.DATA_PREVENTIVE_NEXT_SCHEDULE_DATE: (
                next_date.isoformat() if next_date else dt_today_iso()
            ),
        }  # type: ignore[return-value]

    task_description = ""
    estimated_duration = const.DEFAULT_ESTIMATED_DURATION

    if template:
        equipment_name = (equipment or {}).get(
            const.DATA_EQUIPMENT_NAME
        ) or const.DEFAULT_EQUIPMENT_NAME
        template_name = template.get(const.DATA_TEMPLATE_NAME, "")
        task_description = f"{equipment_name} - {template_name}"
        estimated_duration = (
            template.get(const.DATA_TEMPLATE_ESTIMATED_TIME)
            or const.DEFAULT_ESTIMATED_DURATION
        )

    return {
        const.DATA_PREVENTIVE_EQUIPMENT_ID: equipment_id,
        const.DATA_PREVENTIVE_TEMPLATE_ID: template_id,
        const.DATA_PREVENTIVE_TASK_DESCRIPTION: task_description,
        const.DATA_PREVENTIVE_ESTIMATED_DURATION: estimated_duration,
        const.DATA_PREVENTIVE_ESTIMATED_COST: const.DEFAULT_ESTIMATED_COST,
        const.DATA_PREVENTIVE_IS_ACTIVE: True,
        const.DATA_PREVENTIVE_NEXT_SCHEDULE_DATE: suggest_next_schedule_date(
            template, equipment
        ),
    }  # type: ignore[return-value]
