"""
Utility functions for appstore-connect-mcp.

This module provides helper functions for shaping tool arguments into
query parameters and validating them before any network call is made.
"""

import re
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .exceptions import ConfigurationError, ValidationError

DEFAULT_LIMIT = 100
MAX_LIMIT = 200

REPORT_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}$")

VALID_FREQUENCIES = ["DAILY", "WEEKLY", "MONTHLY", "YEARLY"]
VALID_REPORT_SUBTYPES = ["SUMMARY", "DETAILED"]
VALID_SALES_REPORT_TYPES = ["SALES"]


def validate_required(args: Mapping[str, Any], fields: Sequence[str]) -> None:
    """
    Ensure every named argument is present and non-empty.

    Raises:
        ValidationError: Listing the missing fields
    """
    missing = [name for name in fields if args.get(name) in (None, "", [], {})]
    if missing:
        raise ValidationError(f"Missing required parameters: {', '.join(missing)}")


def sanitize_limit(limit: Any, default: int = DEFAULT_LIMIT) -> int:
    """Clamp a page size to the 1-200 range accepted by the API."""
    if limit is None:
        return default
    try:
        value = int(limit)
    except (TypeError, ValueError):
        raise ValidationError(f"Limit must be a number, got: {limit}")
    return min(max(value, 1), MAX_LIMIT)


def build_filter_params(filters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Turn a filter mapping into ``filter[key]`` query parameters.

    Lists are joined with commas; None values are dropped.
    """
    params: Dict[str, Any] = {}
    for key, value in (filters or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(str(item) for item in value)
        params[f"filter[{key}]"] = value
    return params


def build_fields_params(fields: Optional[Mapping[str, Iterable[str]]]) -> Dict[str, str]:
    """Turn ``{"devices": ["name", "udid"]}`` into ``fields[devices]=name,udid``."""
    params = {}
    for resource, names in (fields or {}).items():
        names = list(names or [])
        if names:
            params[f"fields[{resource}]"] = ",".join(names)
    return params


def validate_choice(value: str, allowed: Sequence[str], label: str) -> str:
    """
    Validate a single enumerated value.

    Raises:
        ValidationError: Enumerating the permitted values
    """
    if value not in allowed:
        raise ValidationError(f"Invalid {label}: {value}. Valid options are: {', '.join(allowed)}")
    return value


def validate_choices(values: Optional[Iterable[str]], allowed: Sequence[str], label: str) -> List[str]:
    """Validate a list of enumerated values, reporting every invalid one."""
    values = list(values or [])
    invalid = [value for value in values if value not in allowed]
    if invalid:
        raise ValidationError(
            f"Invalid {label}: {', '.join(invalid)}. Valid options are: {', '.join(allowed)}"
        )
    return values


def validate_report_date(report_date: str, report_label: str, today: Optional[date] = None) -> str:
    """
    Validate a report date in YYYY-MM format.

    Args:
        report_date: The date string to validate
        report_label: "sales" or "finance", used in the future-date message
        today: Reference date (defaults to today)

    Returns:
        The validated date string

    Raises:
        ValidationError: If the format is wrong or the month lies in the future
    """
    if not isinstance(report_date, str) or not REPORT_DATE_PATTERN.fullmatch(report_date):
        raise ValidationError("Report date must be in YYYY-MM format (e.g., 2024-01)")

    year, month = (int(part) for part in report_date.split("-"))
    if not 1 <= month <= 12:
        raise ValidationError(
            f"Report date must be in YYYY-MM format (e.g., 2024-01), got month {month:02d}"
        )

    today = today or date.today()
    if (year, month) > (today.year, today.month):
        raise ValidationError(
            f"Cannot request {report_label} report for future date: {report_date}. "
            f"{report_label.capitalize()} reports are only available for past months."
        )

    return report_date


def resolve_vendor_number(vendor_number: Optional[str], configured: Optional[str]) -> str:
    """
    Pick the vendor number from the call arguments or process configuration.

    Raises:
        ConfigurationError: If neither source provides one
    """
    resolved = str(vendor_number or configured or "").strip()
    if not resolved:
        raise ConfigurationError(
            "Vendor number is required. Please provide it as an argument or set "
            "APP_STORE_CONNECT_VENDOR_NUMBER environment variable."
        )
    return resolved
