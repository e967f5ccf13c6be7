"""Tests for package setup, configuration and period-type constants."""

from zoneinfo import ZoneInfo

from freezegun import freeze_time
import pytest
import voluptuous as vol

import fms_scheduling
from fms_scheduling import const
from fms_scheduling.const import PERIOD_TYPE_LABELS, PERIOD_TYPE_OPTIONS, PeriodType
from fms_scheduling.utils.dt_utils import get_default_timezone
from tests.helpers import setup_from_yaml


class TestSetup:
    """setup() validates configuration and applies the time zone."""

    def test_defaults_to_utc(self) -> None:
        """Empty configuration means UTC."""
        config = fms_scheduling.setup()
        assert config == {const.CONF_TIME_ZONE: "UTC"}
        assert get_default_timezone() == ZoneInfo("UTC")

    def test_setup_from_yaml(self) -> None:
        """A YAML config file sets the site time zone."""
        config = setup_from_yaml("config_seoul.yaml")
        assert config[const.CONF_TIME_ZONE] == "Asia/Seoul"
        assert get_default_timezone() == ZoneInfo("Asia/Seoul")

    @freeze_time("2025-01-15 20:00:00", tz_offset=0)
    def test_configured_zone_drives_today_fallback(self) -> None:
        """The invalid-base-date fallback uses today in the site zone."""
        fms_scheduling.setup({const.CONF_TIME_ZONE: "Asia/Seoul"})
        assert (
            fms_scheduling.compute_next_date("???", PeriodType.DAILY, 1)
            == "2025-01-17"
        )

    @pytest.mark.parametrize("time_zone", ["Mars/Olympus_Mons", "", 9])
    def test_invalid_time_zone(self, time_zone: object) -> None:
        """Unknown zones are rejected."""
        with pytest.raises(vol.Invalid):
            fms_scheduling.setup({const.CONF_TIME_ZONE: time_zone})

    def test_unknown_key_rejected(self) -> None:
        """Unknown configuration keys are rejected."""
        with pytest.raises(vol.Invalid):
            fms_scheduling.setup({"timezone": "UTC"})

    def test_package_logger_name(self) -> None:
        """Package modules log under the fms_scheduling logger."""
        assert const.LOGGER.name == "fms_scheduling"


class TestPeriodTypeConstants:
    """PeriodType enumeration and its label keys."""

    def test_closed_set(self) -> None:
        """Exactly eleven period types exist."""
        assert len(PeriodType) == 11
        assert "SEMI_ANNUALLY" in PERIOD_TYPE_OPTIONS

    def test_members_equal_raw_tags(self) -> None:
        """Members compare equal to the stored tag strings."""
        assert PeriodType.CUSTOM_MONTHS == "CUSTOM_MONTHS"
        assert PeriodType("ON_DEMAND") is PeriodType.ON_DEMAND

    def test_label_keys(self) -> None:
        """Every member has a translation label key."""
        assert set(PERIOD_TYPE_LABELS) == set(PeriodType)
        assert (
            PERIOD_TYPE_LABELS[PeriodType.SEMI_ANNUALLY]
            == "inspection.period.semi_annually"
        )
        assert PERIOD_TYPE_LABELS[PeriodType.ON_DEMAND] == "inspection.period.on_demand"
