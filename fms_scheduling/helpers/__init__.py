# File: helpers/__init__.py
"""Record-level helper functions for FMS scheduling.

Submodules:
    - schedule_helpers: Template validation and preventive-schedule defaults

Usage:
    from . import schedule_helpers
    from .schedule_helpers import suggest_next_schedule_date
"""

from . import schedule_helpers

__all__ = ["schedule_helpers"]
