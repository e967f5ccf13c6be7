# File: utils/dt_utils.py
"""Date and time utilities for FMS scheduling.

Pure Python date/time functions with no application dependencies.
All functions here can be unit tested without any mocking beyond pinning
the clock.

Uses standard library: datetime, zoneinfo, plus dateutil for month/year
arithmetic.

Functions:
    - set_default_timezone / get_default_timezone: Zone "today" is evaluated in
    - dt_today_local: Get today's date in the default timezone
    - dt_today_iso: Get today's date as ISO string
    - dt_now_local: Get current datetime in the default timezone
    - dt_parse_date: Parse date inputs into a `datetime.date`
    - dt_parse_datetime: Parse datetime inputs into an aware datetime
    - dt_add_interval: Add days/weeks/months/years to a date
    - dt_format_date: Format a date for display
    - dt_format_datetime: Format a datetime for display
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
import logging
from zoneinfo import ZoneInfo

# Third-party date utilities
from dateutil.relativedelta import relativedelta

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# These mirror const.py values but are defined locally for purity.
# ==============================================================================

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

# Time unit constants
TIME_UNIT_DAYS = "days"
TIME_UNIT_WEEKS = "weeks"
TIME_UNIT_MONTHS = "months"
TIME_UNIT_YEARS = "years"

# Display formats (dashboard style: "2024. 01. 15." / "2024. 01. 15. 14:30:00")
DISPLAY_DATE_FORMAT = "%Y. %m. %d."
DISPLAY_DATETIME_FORMAT = "%Y. %m. %d. %H:%M:%S"


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone for all dt_utils functions.

    Call this during package setup to configure the site's timezone.

    Args:
        tz: ZoneInfo object representing the default timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the current default timezone.

    Returns:
        The configured default timezone (ZoneInfo object)
    """
    return DEFAULT_TIME_ZONE


# ==============================================================================
# Current Date/Time Functions
# ==============================================================================


def dt_today_local(tz: ZoneInfo | None = None) -> date:
    """Return today's date in the default timezone as a `datetime.date`.

    Args:
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Today's date in the specified timezone.

    Example:
        datetime.date(2024, 1, 15)
    """
    return dt_now_local(tz).date()


def dt_today_iso(tz: ZoneInfo | None = None) -> str:
    """Return today's date in the default timezone as ISO string (YYYY-MM-DD).

    Example:
        "2024-01-15"
    """
    return dt_today_local(tz).isoformat()


def dt_now_local(tz: ZoneInfo | None = None) -> datetime:
    """Return the current datetime in the default timezone (timezone-aware)."""
    tz_info = tz or DEFAULT_TIME_ZONE
    return datetime.now(tz_info)


# ==============================================================================
# Date/Time Parsing
# ==============================================================================


def dt_parse_date(value: str | date | datetime | None) -> date | None:
    """Safely parse a date input into a `datetime.date`.

    Accepts:
    - datetime.date
    - datetime.datetime (calendar date in its own timezone; time is dropped)
    - "2024-01-15" (ISO date)
    - "2024-01-15T09:30:00+09:00" (ISO datetime; date part in its own offset)

    Args:
        value: Date input to parse, or None

    Returns:
        datetime.date or None if parsing fails.
    """
    if value is None:
        return None

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def dt_parse_datetime(
    value: str | date | datetime | None,
    default_tzinfo: ZoneInfo | None = None,
) -> datetime | None:
    """Normalize a datetime input into a timezone-aware datetime.

    Naive inputs are assumed to be in the default timezone. Plain dates
    become midnight.

    Args:
        value: String, date or datetime to normalize, or None
        default_tzinfo: Timezone applied to naive inputs
                        (defaults to DEFAULT_TIME_ZONE if None)

    Returns:
        Aware datetime, or None if the input could not be parsed.
    """
    if value is None:
        return None

    tz_info = default_tzinfo or DEFAULT_TIME_ZONE
    result: datetime | None = None

    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime.combine(value, datetime.min.time())
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            result = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if result.tzinfo is None:
        result = result.replace(tzinfo=tz_info)

    return result


# ==============================================================================
# Interval Calculations
# ==============================================================================


def dt_add_interval(base: date, interval_unit: str, delta: int) -> date | None:
    """Add a number of calendar units to a date.

    Months and years use relativedelta, which clamps the day to the last
    valid day of the target month (Jan 31 + 1 month = Feb 28/29,
    Feb 29 + 1 year = Feb 28).

    Args:
        base: Base date.
        interval_unit: One of the TIME_UNIT_* constants.
        delta: Number of time units to add (may be negative).

    Returns:
        The resulting date, or None on unknown unit or date overflow.
    """
    try:
        if interval_unit == TIME_UNIT_DAYS:
            return base + timedelta(days=delta)
        if interval_unit == TIME_UNIT_WEEKS:
            return base + timedelta(weeks=delta)
        if interval_unit == TIME_UNIT_MONTHS:
            return base + relativedelta(months=delta)
        if interval_unit == TIME_UNIT_YEARS:
            return base + relativedelta(years=delta)
    except (ValueError, OverflowError) as exc:
        _LOGGER.error(
            "dt_add_interval: Error adding %s %s to %s: %s",
            delta,
            interval_unit,
            base,
            exc,
        )
        return None

    _LOGGER.warning("dt_add_interval: Unknown interval_unit: %s", interval_unit)
    return None


# ==============================================================================
# Display Formatting
# ==============================================================================


def _dt_from_epoch_ms(value: int | float, tz_info: ZoneInfo) -> datetime | None:
    """Convert a Unix timestamp in milliseconds to an aware datetime."""
    try:
        return datetime.fromtimestamp(value / 1000, tz=tz_info)
    except (ValueError, OverflowError, OSError) as exc:
        _LOGGER.debug("Timestamp %r out of range: %s", value, exc)
        return None


def _display_datetime(
    value: str | date | datetime | int | float | None, tz_info: ZoneInfo
) -> datetime | None:
    # bool is an int subclass, not a timestamp
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _dt_from_epoch_ms(value, tz_info)
    return dt_parse_datetime(value, default_tzinfo=tz_info)


def dt_format_date(value: str | date | datetime | int | float | None) -> str:
    """Format a date for display ("2024. 01. 15.").

    Numbers are Unix timestamps in milliseconds and are shown as the date in
    the default timezone. Returns an empty string for empty or unparseable
    input.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        stamp = _dt_from_epoch_ms(value, DEFAULT_TIME_ZONE)
        return stamp.strftime(DISPLAY_DATE_FORMAT) if stamp else ""
    parsed = dt_parse_date(value)
    if parsed is None:
        return ""
    return parsed.strftime(DISPLAY_DATE_FORMAT)


def dt_format_datetime(
    value: str | date | datetime | int | float | None, tz: ZoneInfo | None = None
) -> str:
    """Format a datetime for display in the default timezone.

    24-hour clock, e.g. "2024. 01. 15. 14:30:00".

    Args:
        value: Datetime input (string, date or datetime), a Unix timestamp
               in milliseconds, or None
        tz: Optional display timezone. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Formatted string, or "" for empty or unparseable input.
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    parsed = _display_datetime(value, tz_info)
    if parsed is None:
        return ""
    return parsed.astimezone(tz_info).strftime(DISPLAY_DATETIME_FORMAT)
