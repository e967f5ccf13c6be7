"""Shared fixtures for FMS scheduling tests."""

from collections.abc import Iterator
from zoneinfo import ZoneInfo

import pytest

from fms_scheduling.utils import dt_utils


@pytest.fixture(autouse=True)
def reset_default_timezone() -> Iterator[None]:
    """Restore the UTC default timezone around every test."""
    dt_utils.set_default_timezone(ZoneInfo("UTC"))
    yield
    dt_utils.set_default_timezone(ZoneInfo("UTC"))
