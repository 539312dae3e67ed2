"""
App listing and detail operations.
"""

from typing import Any, Dict, List, Optional

from ..client import AppStoreConnectClient
from ..endpoints import EndpointKind
from ..utils import sanitize_limit, validate_choices, validate_required

# Valid include options for get_app_info as defined by App Store Connect API
VALID_APP_INCLUDES = [
    "appClips",
    "appInfos",
    "appStoreVersions",
    "availableTerritories",
    "betaAppReviewDetail",
    "betaGroups",
    "betaLicenseAgreement",
    "builds",
    "endUserLicenseAgreement",
    "gameCenterEnabledVersions",
    "inAppPurchases",
    "preOrder",
    "prices",
    "reviewSubmissions",
]


class AppHandlers:
    """Handlers for the app tools."""

    def __init__(self, client: AppStoreConnectClient):
        self.client = client

    def list_apps(self, limit: Optional[int] = 100) -> Dict[str, Any]:
        """Get a list of all apps in App Store Connect."""
        return self.client.get("/apps", {"limit": sanitize_limit(limit)})

    def get_app_info(self, appId: str = None, include: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Get detailed information about a specific app.

        Args:
            appId: The ID of the app
            include: Optional relationships to include in the response

        Raises:
            ValidationError: If appId is missing or an include value is unknown
        """
        validate_required({"appId": appId}, ["appId"])
        include = validate_choices(include, VALID_APP_INCLUDES, "include parameters")

        params: Dict[str, Any] = {}
        if include:
            params["include"] = ",".join(include)

        return self.client.get(f"/apps/{appId}", params, kind=EndpointKind.APP_DETAIL)
