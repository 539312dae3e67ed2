"""
Endpoint descriptors.

Each call site names its endpoint once, tagging it with the kind of
response it produces, so transport mode and error guidance never depend on
string matching against the request path.
"""

from dataclasses import dataclass
from enum import Enum


class EndpointKind(Enum):
    STANDARD = "standard"
    APP_DETAIL = "app_detail"
    SALES_REPORT = "sales_report"
    FINANCE_REPORT = "finance_report"

    @property
    def is_report(self) -> bool:
        return self in (EndpointKind.SALES_REPORT, EndpointKind.FINANCE_REPORT)


@dataclass(frozen=True)
class Endpoint:
    """An HTTP method and path relative to the API root, plus its kind."""

    method: str
    path: str
    kind: EndpointKind = EndpointKind.STANDARD

    @property
    def is_report(self) -> bool:
        return self.kind.is_report


SALES_REPORTS = Endpoint("GET", "/salesReports", EndpointKind.SALES_REPORT)
FINANCE_REPORTS = Endpoint("GET", "/financeReports", EndpointKind.FINANCE_REPORT)
