"""Engine modules for FMS scheduling.

Contains specialized computation engines:
- schedule_engine: Next-occurrence calculation for recurring schedules
"""

from .schedule_engine import (
    ScheduleAdvancer,
    StrictScheduleResult,
    compute_next_date,
    compute_next_date_strict,
)

__all__ = [
    "ScheduleAdvancer",
    "StrictScheduleResult",
    "compute_next_date",
    "compute_next_date_strict",
]
