"""
Bundle ID and capability operations.
"""

from typing import Any, Dict, List, Optional

from ..client import AppStoreConnectClient
from ..utils import (
    build_fields_params,
    build_filter_params,
    sanitize_limit,
    validate_choice,
    validate_choices,
    validate_required,
)

VALID_PLATFORMS = ["IOS", "MAC_OS", "UNIVERSAL"]
VALID_BUNDLE_INCLUDES = ["profiles", "bundleIdCapabilities", "app"]
VALID_BUNDLE_SORTS = [
    "name", "-name", "platform", "-platform", "identifier", "-identifier",
    "seedId", "-seedId", "id", "-id",
]
VALID_CAPABILITIES = [
    "ICLOUD", "IN_APP_PURCHASE", "GAME_CENTER", "PUSH_NOTIFICATIONS", "WALLET",
    "INTER_APP_AUDIO", "MAPS", "ASSOCIATED_DOMAINS", "PERSONAL_VPN", "APP_GROUPS",
    "HEALTHKIT", "HOMEKIT", "WIRELESS_ACCESSORY_CONFIGURATION", "APPLE_PAY",
    "DATA_PROTECTION", "SIRIKIT", "NETWORK_EXTENSIONS", "MULTIPATH", "HOT_SPOT",
    "NFC_TAG_READING", "CLASSKIT", "AUTOFILL_CREDENTIAL_PROVIDER",
    "ACCESS_WIFI_INFORMATION", "NETWORK_CUSTOM_PROTOCOL", "COREMEDIA_HLS_LOW_LATENCY",
    "SYSTEM_EXTENSION_INSTALL", "USER_MANAGEMENT", "APPLE_ID_AUTH",
]


class BundleHandlers:
    """Handlers for the bundle ID tools."""

    def __init__(self, client: AppStoreConnectClient):
        self.client = client

    def create_bundle_id(
        self,
        identifier: str = None,
        name: str = None,
        platform: str = None,
        seedId: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Register a new bundle ID for app development."""
        validate_required(
            {"identifier": identifier, "name": name, "platform": platform},
            ["identifier", "name", "platform"],
        )
        validate_choice(platform, VALID_PLATFORMS, "platform")

        attributes = {"identifier": identifier, "name": name, "platform": platform}
        if seedId:
            attributes["seedId"] = seedId

        return self.client.post(
            "/bundleIds", {"data": {"type": "bundleIds", "attributes": attributes}}
        )

    def list_bundle_ids(
        self,
        limit: Optional[int] = 100,
        sort: Optional[str] = None,
        filter: Optional[Dict[str, Any]] = None,
        include: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Find and list bundle IDs that are registered to your team."""
        params: Dict[str, Any] = {"limit": sanitize_limit(limit)}
        if sort:
            params["sort"] = validate_choice(sort, VALID_BUNDLE_SORTS, "sort")
        params.update(build_filter_params(filter))
        include = validate_choices(include, VALID_BUNDLE_INCLUDES, "include parameters")
        if include:
            params["include"] = ",".join(include)

        return self.client.get("/bundleIds", params)

    def get_bundle_id_info(
        self,
        bundleIdId: str = None,
        include: Optional[List[str]] = None,
        fields: Optional[Dict[str, List[str]]] = None,
    ) -> Dict[str, Any]:
        """Get detailed information about a specific bundle ID."""
        validate_required({"bundleIdId": bundleIdId}, ["bundleIdId"])

        params: Dict[str, Any] = {}
        include = validate_choices(include, VALID_BUNDLE_INCLUDES, "include parameters")
        if include:
            params["include"] = ",".join(include)
        params.update(build_fields_params(fields))

        return self.client.get(f"/bundleIds/{bundleIdId}", params)

    def enable_bundle_capability(
        self,
        bundleIdId: str = None,
        capabilityType: str = None,
        settings: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """Enable a capability for a bundle ID."""
        validate_required(
            {"bundleIdId": bundleIdId, "capabilityType": capabilityType},
            ["bundleIdId", "capabilityType"],
        )
        validate_choice(capabilityType, VALID_CAPABILITIES, "capability type")

        attributes: Dict[str, Any] = {"capabilityType": capabilityType}
        if settings:
            attributes["settings"] = settings

        body = {
            "data": {
                "type": "bundleIdCapabilities",
                "attributes": attributes,
                "relationships": {
                    "bundleId": {"data": {"id": bundleIdId, "type": "bundleIds"}}
                },
            }
        }
        return self.client.post("/bundleIdCapabilities", body)

    def disable_bundle_capability(self, capabilityId: str = None) -> Dict[str, Any]:
        """Disable a capability for a bundle ID."""
        validate_required({"capabilityId": capabilityId}, ["capabilityId"])
        self.client.delete(f"/bundleIdCapabilities/{capabilityId}")
        return {"success": True, "capabilityId": capabilityId}
