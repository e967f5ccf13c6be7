"""Schedule Engine for FMS scheduling.

Computes the next occurrence of a recurring maintenance or inspection task
from a base date, a period type and a period value.

- `datetime.timedelta` for day/week arithmetic
- `dateutil.relativedelta` for month/year clamping (Jan 31 + 1 month = Feb 28/29)

The advancer never raises: a bad base date falls back to today, a
non-positive or non-integer period value and an unknown period type fall
back to the base date. `compute_next_date_strict` returns the same date
together with the fallbacks that were applied.

IMPORTANT: This module must NOT import from helpers/ to avoid circular imports.
Only import from const.py, type_defs.py, and utils/.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, ClassVar

from .. import const
from ..utils.dt_utils import dt_add_interval, dt_parse_date, dt_today_local

if TYPE_CHECKING:
    from ..type_defs import DateInput, ISODate


@dataclass(frozen=True, slots=True)
class StrictScheduleResult:
    """Next schedule date plus the fallbacks applied while computing it."""

    next_date: ISODate
    fallback_reasons: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True when the date was advanced from a valid base date."""
        return not self.fallback_reasons

    @property
    def fallback_reason(self) -> str | None:
        """Return the first fallback applied, or None."""
        return self.fallback_reasons[0] if self.fallback_reasons else None


class ScheduleAdvancer:
    """Advance a base date by a period type and period value.

    Each period type maps to a calendar unit and a multiplier applied to the
    period value. ON_DEMAND and unrecognized tags have no entry and leave the
    base date unchanged.
    """

    PERIOD_TYPE_INTERVALS: ClassVar[dict[const.PeriodType, tuple[str, int]]] = {
        const.PeriodType.DAILY: (const.TIME_UNIT_DAYS, 1),
        const.PeriodType.WEEKLY: (const.TIME_UNIT_WEEKS, 1),
        const.PeriodType.MONTHLY: (const.TIME_UNIT_MONTHS, 1),
        const.PeriodType.QUARTERLY: (
            const.TIME_UNIT_MONTHS,
            const.MONTHS_PER_QUARTER,
        ),
        const.PeriodType.SEMI_ANNUALLY: (
            const.TIME_UNIT_MONTHS,
            const.MONTHS_PER_HALF_YEAR,
        ),
        const.PeriodType.ANNUALLY: (const.TIME_UNIT_YEARS, 1),
        const.PeriodType.CUSTOM_DAYS: (const.TIME_UNIT_DAYS, 1),
        const.PeriodType.CUSTOM_WEEKS: (const.TIME_UNIT_WEEKS, 1),
        const.PeriodType.CUSTOM_MONTHS: (const.TIME_UNIT_MONTHS, 1),
        const.PeriodType.CUSTOM_YEARS: (const.TIME_UNIT_YEARS, 1),
    }

    def advance(
        self,
        base_date: DateInput,
        period_type: const.PeriodType | str | None,
        period_value: int,
    ) -> StrictScheduleResult:
        """Compute the next schedule date and record any fallback applied.

        Args:
            base_date: ISO date/datetime string, date or datetime.
            period_type: PeriodType member or its tag string.
            period_value: Number of period units to advance (expected > 0).

        Returns:
            StrictScheduleResult with an ISO date (YYYY-MM-DD).
        """
        reasons: list[str] = []

        base = dt_parse_date(base_date)
        if base is None:
            const.LOGGER.warning(
                "Invalid base date provided to schedule advancer: %r. Defaulting to today.",
                base_date,
            )
            base = dt_today_local()
            reasons.append(const.FALLBACK_INVALID_BASE_DATE)

        value = self._coerce_period_value(period_value)
        if value is None:
            const.LOGGER.warning(
                "Period value (%r) is not an integer. Returning base date.",
                period_value,
            )
            reasons.append(const.FALLBACK_INVALID_PERIOD_VALUE)
            return self._result(base, reasons)
        if value <= 0:
            const.LOGGER.warning(
                "Period value (%s) must be positive. Returning base date.", value
            )
            reasons.append(const.FALLBACK_NON_POSITIVE_PERIOD_VALUE)
            return self._result(base, reasons)

        resolved_type = self._resolve_period_type(period_type)
        if resolved_type == const.PeriodType.ON_DEMAND:
            const.LOGGER.debug("ON_DEMAND schedule, no calendar advancement")
            reasons.append(const.FALLBACK_ON_DEMAND)
            return self._result(base, reasons)

        interval = (
            self.PERIOD_TYPE_INTERVALS.get(resolved_type) if resolved_type else None
        )
        if interval is None:
            const.LOGGER.warning(
                "Unhandled period type: %r. Returning base date.", period_type
            )
            reasons.append(const.FALLBACK_UNKNOWN_PERIOD_TYPE)
            return self._result(base, reasons)

        interval_unit, multiplier = interval
        next_date = dt_add_interval(base, interval_unit, value * multiplier)
        if next_date is None:
            reasons.append(const.FALLBACK_OVERFLOW)
            return self._result(base, reasons)

        const.LOGGER.debug(
            "Advanced schedule: base=%s, period_type=%s, period_value=%s, next=%s",
            base,
            resolved_type,
            value,
            next_date,
        )
        return self._result(next_date, reasons)

    @staticmethod
    def _result(next_date: date, reasons: list[str]) -> StrictScheduleResult:
        return StrictScheduleResult(
            next_date=next_date.isoformat(), fallback_reasons=tuple(reasons)
        )

    @staticmethod
    def _resolve_period_type(
        period_type: const.PeriodType | str | None,
    ) -> const.PeriodType | None:
        """Map a tag string onto the enumeration, or None if unrecognized."""
        if isinstance(period_type, const.PeriodType):
            return period_type
        if not isinstance(period_type, str):
            return None
        try:
            return const.PeriodType(period_type)
        except ValueError:
            return None

    @staticmethod
    def _coerce_period_value(period_value: object) -> int | None:
        """Return the period value as an int, or None if it is not integral."""
        # bool is an int subclass but never a meaningful period value
        if isinstance(period_value, bool):
            return None
        if isinstance(period_value, int):
            return period_value
        if isinstance(period_value, float) and period_value.is_integer():
            return int(period_value)
        return None


_ADVANCER = ScheduleAdvancer()


def compute_next_date(
    base_date: DateInput,
    period_type: const.PeriodType | str | None,
    period_value: int,
) -> ISODate:
    """Calculate the next schedule date as an ISO date string.

    Convenience function for the common case. Never raises; see
    `compute_next_date_strict` to find out whether a fallback was applied.

    Examples:
        compute_next_date("2024-01-15", PeriodType.QUARTERLY, 1) → "2024-04-15"
        compute_next_date("2024-01-31", PeriodType.MONTHLY, 1) → "2024-02-29"
    """
    return _ADVANCER.advance(base_date, period_type, period_value).next_date


def compute_next_date_strict(
    base_date: DateInput,
    period_type: const.PeriodType | str | None,
    period_value: int,
) -> StrictScheduleResult:
    """Calculate the next schedule date, reporting any fallback applied."""
    return _ADVANCER.advance(base_date, period_type, period_value)
