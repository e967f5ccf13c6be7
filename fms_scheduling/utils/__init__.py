# File: utils/__init__.py
"""Pure Python utilities for FMS scheduling.

Submodules:
    - dt_utils: Date parsing, formatting, calendar arithmetic

Usage:
    from . import dt_utils
    from .dt_utils import dt_add_interval
"""

from . import dt_utils

__all__ = ["dt_utils"]
