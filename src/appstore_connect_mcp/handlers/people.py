"""
Device and team user listings.
"""

from typing import Any, Dict, List, Optional

from ..client import AppStoreConnectClient
from ..utils import (
    build_fields_params,
    build_filter_params,
    sanitize_limit,
    validate_choice,
    validate_choices,
)

VALID_DEVICE_SORTS = [
    "name", "-name", "platform", "-platform", "status", "-status", "udid", "-udid",
    "deviceClass", "-deviceClass", "model", "-model", "addedDate", "-addedDate",
]
VALID_USER_SORTS = [
    "username", "-username", "firstName", "-firstName", "lastName", "-lastName",
    "roles", "-roles",
]
VALID_USER_INCLUDES = ["visibleApps"]


class DeviceHandlers:
    """Handlers for the device tools."""

    def __init__(self, client: AppStoreConnectClient):
        self.client = client

    def list_devices(
        self,
        limit: Optional[int] = 100,
        sort: Optional[str] = None,
        filter: Optional[Dict[str, Any]] = None,
        fields: Optional[Dict[str, List[str]]] = None,
    ) -> Dict[str, Any]:
        """Get a list of all devices registered to your team."""
        params: Dict[str, Any] = {"limit": sanitize_limit(limit)}
        if sort:
            params["sort"] = validate_choice(sort, VALID_DEVICE_SORTS, "sort")
        params.update(build_filter_params(filter))
        params.update(build_fields_params(fields))

        return self.client.get("/devices", params)


class UserHandlers:
    """Handlers for the user tools."""

    def __init__(self, client: AppStoreConnectClient):
        self.client = client

    def list_users(
        self,
        limit: Optional[int] = 100,
        sort: Optional[str] = None,
        filter: Optional[Dict[str, Any]] = None,
        include: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Get a list of all users registered on your App Store Connect team."""
        params: Dict[str, Any] = {"limit": sanitize_limit(limit)}
        if sort:
            params["sort"] = validate_choice(sort, VALID_USER_SORTS, "sort")
        params.update(build_filter_params(filter))
        include = validate_choices(include, VALID_USER_INCLUDES, "include parameters")
        if include:
            params["include"] = ",".join(include)

        return self.client.get("/users", params)
