"""
Analytics, sales and finance report operations.
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, Optional

from ..client import AppStoreConnectClient
from ..endpoints import FINANCE_REPORTS, SALES_REPORTS
from ..reports import report_to_dataframe, summarize_report
from ..utils import (
    VALID_FREQUENCIES,
    VALID_REPORT_SUBTYPES,
    VALID_SALES_REPORT_TYPES,
    build_filter_params,
    resolve_vendor_number,
    sanitize_limit,
    validate_choice,
    validate_report_date,
    validate_required,
)

logger = logging.getLogger(__name__)

VALID_ACCESS_TYPES = ["ONGOING", "ONE_TIME_SNAPSHOT"]
VALID_REPORT_CATEGORIES = [
    "APP_STORE_ENGAGEMENT",
    "APP_STORE_COMMERCE",
    "APP_USAGE",
    "FRAMEWORKS_USAGE",
    "PERFORMANCE",
]


class AnalyticsHandlers:
    """
    Handlers for analytics and payment report tools.

    Args:
        client: API client
        vendor_number: Configured vendor number, used when a call omits one
        today: Callable returning the reference date for future-date checks
    """

    def __init__(
        self,
        client: AppStoreConnectClient,
        vendor_number: Optional[str] = None,
        today: Callable[[], date] = date.today,
    ):
        self.client = client
        self.vendor_number = vendor_number
        self.today = today

    def create_analytics_report_request(
        self, appId: str = None, accessType: str = "ONE_TIME_SNAPSHOT"
    ) -> Dict[str, Any]:
        """Create a new analytics report request for an app."""
        validate_required({"appId": appId}, ["appId"])
        validate_choice(accessType, VALID_ACCESS_TYPES, "access type")

        body = {
            "data": {
                "type": "analyticsReportRequests",
                "attributes": {"accessType": accessType},
                "relationships": {"app": {"data": {"id": appId, "type": "apps"}}},
            }
        }
        return self.client.post("/analyticsReportRequests", body)

    def list_analytics_reports(
        self,
        reportRequestId: str = None,
        limit: Optional[int] = 100,
        filter: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Get available analytics reports for a specific report request."""
        validate_required({"reportRequestId": reportRequestId}, ["reportRequestId"])

        filter = dict(filter or {})
        if filter.get("category"):
            validate_choice(filter["category"], VALID_REPORT_CATEGORIES, "category")

        params: Dict[str, Any] = {"limit": sanitize_limit(limit)}
        params.update(build_filter_params(filter))
        return self.client.get(f"/analyticsReportRequests/{reportRequestId}/reports", params)

    def list_analytics_report_segments(
        self, reportId: str = None, limit: Optional[int] = 100
    ) -> Dict[str, Any]:
        """Get segments for a specific analytics report (contains download URLs)."""
        validate_required({"reportId": reportId}, ["reportId"])
        return self.client.get(
            f"/analyticsReports/{reportId}/segments", {"limit": sanitize_limit(limit)}
        )

    def download_analytics_report_segment(self, segmentUrl: str = None) -> Dict[str, Any]:
        """Download data from an analytics report segment URL."""
        validate_required({"segmentUrl": segmentUrl}, ["segmentUrl"])
        return self.client.download_from_url(segmentUrl)

    def download_sales_report(
        self,
        reportDate: str = None,
        vendorNumber: Optional[str] = None,
        reportType: str = "SALES",
        reportSubType: str = "SUMMARY",
        frequency: str = "MONTHLY",
        summary: bool = False,
    ) -> Dict[str, Any]:
        """
        Download a sales and trends report.

        Args:
            reportDate: Report month in YYYY-MM format
            vendorNumber: Vendor number (defaults to the configured one)
            reportType: Report type, SALES
            reportSubType: SUMMARY or DETAILED
            frequency: DAILY, WEEKLY, MONTHLY, or YEARLY
            summary: Also return headline metrics computed from the report

        Returns:
            ``{"data": <report text>}``, plus ``"summary"`` when requested

        Raises:
            ConfigurationError: If no vendor number is available
            ValidationError: If the date or an enumerated value is invalid
        """
        vendor_number = resolve_vendor_number(vendorNumber, self.vendor_number)
        validate_required({"reportDate": reportDate}, ["reportDate"])
        validate_report_date(reportDate, "sales", today=self.today())
        validate_choice(reportType, VALID_SALES_REPORT_TYPES, "report type")
        validate_choice(reportSubType, VALID_REPORT_SUBTYPES, "report sub-type")
        validate_choice(frequency, VALID_FREQUENCIES, "frequency")

        params = build_filter_params(
            {
                "reportDate": reportDate,
                "reportType": reportType,
                "reportSubType": reportSubType,
                "frequency": frequency,
                "vendorNumber": vendor_number,
            }
        )
        logger.info(f"download_sales_report: filters={params}")

        text = self.client.download_report(SALES_REPORTS, params)
        logger.info(f"download_sales_report: received {len(text)} characters")

        result: Dict[str, Any] = {"data": text}
        if summary:
            result["summary"] = summarize_report(report_to_dataframe(text))
        return result

    def download_finance_report(
        self,
        reportDate: str = None,
        regionCode: str = None,
        vendorNumber: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Download a finance report for a specific region."""
        vendor_number = resolve_vendor_number(vendorNumber, self.vendor_number)
        validate_required(
            {"reportDate": reportDate, "regionCode": regionCode}, ["reportDate", "regionCode"]
        )
        validate_report_date(reportDate, "finance", today=self.today())

        params = build_filter_params(
            {"reportDate": reportDate, "regionCode": regionCode, "vendorNumber": vendor_number}
        )
        text = self.client.download_report(FINANCE_REPORTS, params)
        return {"data": text}
