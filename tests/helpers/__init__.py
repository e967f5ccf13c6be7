"""Test helpers for FMS scheduling tests.

    from tests.helpers import load_scenario, load_schedule_cases, setup_from_yaml

See setup.py for the scenario file format.
"""

from tests.helpers.setup import (
    SCENARIOS_DIR,
    load_scenario,
    load_schedule_cases,
    setup_from_yaml,
)

__all__ = [
    "SCENARIOS_DIR",
    "load_scenario",
    "load_schedule_cases",
    "setup_from_yaml",
]
