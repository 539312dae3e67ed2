"""
Tests for argument shaping and validation helpers.
"""

from datetime import date

import pytest

from appstore_connect_mcp.exceptions import ConfigurationError, ValidationError
from appstore_connect_mcp.utils import (
    build_fields_params,
    build_filter_params,
    resolve_vendor_number,
    sanitize_limit,
    validate_choice,
    validate_choices,
    validate_report_date,
    validate_required,
)

TODAY = date(2024, 6, 15)


class TestReportDate:
    """Test report date validation."""

    @pytest.mark.parametrize(
        "value",
        ["2024-1", "24-01", "2024/01", "2024-01-01", "", "January", "2024-01\n", " 2024-01", None],
    )
    def test_malformed(self, value):
        with pytest.raises(ValidationError, match="YYYY-MM"):
            validate_report_date(value, "sales", today=TODAY)

    @pytest.mark.parametrize("value", ["2024-00", "2024-13"])
    def test_month_out_of_range(self, value):
        with pytest.raises(ValidationError, match="YYYY-MM"):
            validate_report_date(value, "sales", today=TODAY)

    def test_past_month(self):
        assert validate_report_date("2024-01", "sales", today=TODAY) == "2024-01"

    def test_current_month_allowed(self):
        assert validate_report_date("2024-06", "finance", today=TODAY) == "2024-06"

    def test_future_month(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_report_date("2024-07", "finance", today=TODAY)
        assert "Cannot request finance report for future date: 2024-07" in str(excinfo.value)
        assert "Finance reports are only available for past months" in str(excinfo.value)

    def test_far_future_against_real_clock(self):
        with pytest.raises(ValidationError, match="future date"):
            validate_report_date("2099-01", "sales")


class TestParams:
    """Test query parameter builders."""

    def test_filter_params(self):
        params = build_filter_params(
            {"name": "Test", "platform": None, "roles": ["ADMIN", "SALES"]}
        )
        assert params == {"filter[name]": "Test", "filter[roles]": "ADMIN,SALES"}

    def test_filter_params_empty(self):
        assert build_filter_params(None) == {}

    def test_fields_params(self):
        assert build_fields_params({"devices": ["name", "udid"], "apps": []}) == {
            "fields[devices]": "name,udid"
        }

    @pytest.mark.parametrize(
        "limit, expected", [(None, 100), (0, 1), (50, 50), (500, 200), ("20", 20)]
    )
    def test_sanitize_limit(self, limit, expected):
        assert sanitize_limit(limit) == expected

    def test_sanitize_limit_invalid(self):
        with pytest.raises(ValidationError):
            sanitize_limit("many")


class TestValidation:
    """Test presence and enumeration checks."""

    def test_required_lists_missing(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_required({"a": "x", "b": "", "c": None}, ["a", "b", "c"])
        assert "b, c" in str(excinfo.value)

    def test_choice_enumerates_permitted(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_choice("HOURLY", ["DAILY", "WEEKLY"], "frequency")
        assert "DAILY, WEEKLY" in str(excinfo.value)

    def test_choices_reports_all_invalid(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_choices(["builds", "foo", "bar"], ["builds"], "include parameters")
        assert "foo, bar" in str(excinfo.value)

    def test_choices_none(self):
        assert validate_choices(None, ["x"], "include") == []


class TestVendorNumber:
    """Test vendor number resolution."""

    def test_argument_wins(self):
        assert resolve_vendor_number("111", "222") == "111"

    def test_configured_fallback(self):
        assert resolve_vendor_number(None, "222") == "222"

    def test_missing(self):
        with pytest.raises(ConfigurationError, match="Vendor number is required"):
            resolve_vendor_number(None, None)
