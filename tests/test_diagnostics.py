"""
Tests for caller-facing error diagnostics.
"""

import pytest

from appstore_connect_mcp.diagnostics import (
    FINANCE_REPORT_NOT_FOUND,
    INVALID_APP_INCLUDES,
    SALES_REPORT_NOT_FOUND,
    classify_error,
    describe_exception,
)
from appstore_connect_mcp.endpoints import (
    FINANCE_REPORTS,
    SALES_REPORTS,
    Endpoint,
    EndpointKind,
)
from appstore_connect_mcp.exceptions import (
    DecodeError,
    NotFoundError,
    TransportError,
    ValidationError,
)

APP_DETAIL = Endpoint("GET", "/apps/123", EndpointKind.APP_DETAIL)
BETA_GROUPS = Endpoint("GET", "/betaGroups")


class TestNotFound:
    """404 guidance."""

    def test_sales_report(self):
        message = classify_error(404, SALES_REPORTS, errors=[{"detail": "ignored"}])
        assert message == SALES_REPORT_NOT_FOUND
        assert "future" in message
        assert "No sales data exists" in message
        assert "hasn't been generated yet" in message

    def test_finance_report(self):
        message = classify_error(404, FINANCE_REPORTS)
        assert message == FINANCE_REPORT_NOT_FOUND
        assert "5th of the following month" in message

    def test_other_with_detail(self):
        assert classify_error(404, BETA_GROUPS, errors=[{"detail": "Group gone"}]) == "Group gone"

    def test_other_without_detail(self):
        assert classify_error(404, BETA_GROUPS) == "Resource not found (404): /betaGroups"


class TestBadRequest:
    """400 guidance."""

    def test_app_detail_with_includes(self):
        message = classify_error(400, APP_DETAIL, params={"include": "customerReviews"})
        assert message == INVALID_APP_INCLUDES
        assert "reviewSubmissions" in message

    def test_app_detail_without_includes(self):
        message = classify_error(400, APP_DETAIL, errors=[{"detail": "bad id"}])
        assert message == "bad id"

    def test_other_without_detail(self):
        assert classify_error(400, BETA_GROUPS).startswith(
            "Bad request: The request parameters are invalid."
        )


class TestOtherStatuses:
    """Everything else."""

    def test_error_body_detail(self):
        message = classify_error(403, BETA_GROUPS, errors=[{"detail": "Forbidden role"}])
        assert message == "App Store Connect API error: Forbidden role"

    def test_error_body_title(self):
        message = classify_error(409, BETA_GROUPS, errors=[{"title": "Conflict"}])
        assert message == "App Store Connect API error: Conflict"

    def test_error_body_falls_back_to_message(self):
        message = classify_error(409, BETA_GROUPS, errors=[{"code": "X"}], message="boom")
        assert message == "App Store Connect API error: boom"

    def test_generic(self):
        assert classify_error(502, BETA_GROUPS, message="bad gateway") == (
            "Request failed with status 502: bad gateway"
        )

    def test_report_kinds_only_special_on_404(self):
        assert classify_error(500, SALES_REPORTS, message="x") == "Request failed with status 500: x"


class TestDescribeException:
    """Exceptions become one diagnostic string."""

    def test_response_error_is_classified(self):
        error = NotFoundError("API Error 404", status_code=404, endpoint=SALES_REPORTS)
        assert describe_exception(error) == SALES_REPORT_NOT_FOUND

    @pytest.mark.parametrize(
        "error",
        [
            TransportError("Request failed: connection refused"),
            ValidationError("Report date must be in YYYY-MM format (e.g., 2024-01)"),
            DecodeError("Failed to decompress report data", stage="decompress"),
        ],
    )
    def test_other_errors_pass_through(self, error):
        assert describe_exception(error) == str(error)
