"""
Tool names, descriptions and input schemas advertised to the agent.
"""

from typing import Any, Dict, List, Optional

from .handlers.analytics import VALID_ACCESS_TYPES, VALID_REPORT_CATEGORIES
from .handlers.apps import VALID_APP_INCLUDES
from .handlers.bundles import (
    VALID_BUNDLE_INCLUDES,
    VALID_BUNDLE_SORTS,
    VALID_CAPABILITIES,
    VALID_PLATFORMS,
)
from .handlers.people import VALID_DEVICE_SORTS, VALID_USER_INCLUDES, VALID_USER_SORTS
from .utils import VALID_FREQUENCIES, VALID_REPORT_SUBTYPES, VALID_SALES_REPORT_TYPES

USER_ROLES = [
    "ADMIN", "FINANCE", "TECHNICAL", "SALES", "MARKETING", "DEVELOPER",
    "ACCOUNT_HOLDER", "READ_ONLY", "APP_MANAGER", "ACCESS_TO_REPORTS", "CUSTOMER_SUPPORT",
]


def _limit(noun: str) -> Dict[str, Any]:
    return {
        "type": "number",
        "description": f"Maximum number of {noun} to return (default: 100, max: 200)",
        "minimum": 1,
        "maximum": 200,
    }


def _string(description: str, enum: Optional[List[str]] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "string", "description": description}
    if enum:
        schema["enum"] = list(enum)
    return schema


def _string_list(description: str, enum: Optional[List[str]] = None) -> Dict[str, Any]:
    items: Dict[str, Any] = {"type": "string"}
    if enum:
        items["enum"] = list(enum)
    return {"type": "array", "items": items, "description": description}


def _tool(name: str, description: str, properties: Dict[str, Any], required=()) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)
    return {"name": name, "description": description, "inputSchema": schema}


BASE_TOOLS = [
    _tool("list_apps", "Get a list of all apps in App Store Connect", {"limit": _limit("apps")}),
    _tool(
        "get_app_info",
        "Get detailed information about a specific app",
        {
            "appId": _string("The ID of the app to get information for"),
            "include": _string_list(
                "Optional relationships to include in the response", VALID_APP_INCLUDES
            ),
        },
        required=["appId"],
    ),
    _tool(
        "list_beta_groups",
        "Get a list of all beta groups (internal and external)",
        {"limit": _limit("groups")},
    ),
    _tool(
        "list_group_testers",
        "Get a list of all testers in a specific beta group",
        {"groupId": _string("The ID of the beta group"), "limit": _limit("testers")},
        required=["groupId"],
    ),
    _tool(
        "add_tester_to_group",
        "Add a new tester to a beta group",
        {
            "groupId": _string("The ID of the beta group"),
            "email": _string("Email address of the tester"),
            "firstName": _string("First name of the tester"),
            "lastName": _string("Last name of the tester"),
        },
        required=["groupId", "email", "firstName", "lastName"],
    ),
    _tool(
        "remove_tester_from_group",
        "Remove a tester from a beta group",
        {
            "groupId": _string("The ID of the beta group"),
            "testerId": _string("The ID of the beta tester"),
        },
        required=["groupId", "testerId"],
    ),
    _tool(
        "create_bundle_id",
        "Register a new bundle ID for app development",
        {
            "identifier": _string("The bundle ID string (e.g., 'com.example.app')"),
            "name": _string("A name for the bundle ID"),
            "platform": _string("The platform for this bundle ID", VALID_PLATFORMS),
            "seedId": _string("Your team's seed ID (optional)"),
        },
        required=["identifier", "name", "platform"],
    ),
    _tool(
        "list_bundle_ids",
        "Find and list bundle IDs that are registered to your team",
        {
            "limit": _limit("bundle IDs"),
            "sort": _string("Sort order for the results", VALID_BUNDLE_SORTS),
            "filter": {
                "type": "object",
                "properties": {
                    "identifier": _string("Filter by bundle identifier"),
                    "name": _string("Filter by name"),
                    "platform": _string("Filter by platform", VALID_PLATFORMS),
                    "seedId": _string("Filter by seed ID"),
                },
            },
            "include": _string_list(
                "Related resources to include in the response", VALID_BUNDLE_INCLUDES
            ),
        },
    ),
    _tool(
        "get_bundle_id_info",
        "Get detailed information about a specific bundle ID",
        {
            "bundleIdId": _string("The ID of the bundle ID to get information for"),
            "include": _string_list(
                "Optional relationships to include in the response", VALID_BUNDLE_INCLUDES
            ),
            "fields": {
                "type": "object",
                "properties": {
                    "bundleIds": _string_list(
                        "Fields to include for the bundle ID",
                        ["name", "platform", "identifier", "seedId"],
                    )
                },
                "description": "Specific fields to include in the response",
            },
        },
        required=["bundleIdId"],
    ),
    _tool(
        "enable_bundle_capability",
        "Enable a capability for a bundle ID",
        {
            "bundleIdId": _string("The ID of the bundle ID"),
            "capabilityType": _string("The type of capability to enable", VALID_CAPABILITIES),
            "settings": {
                "type": "array",
                "description": "Optional capability settings",
                "items": {"type": "object"},
            },
        },
        required=["bundleIdId", "capabilityType"],
    ),
    _tool(
        "disable_bundle_capability",
        "Disable a capability for a bundle ID",
        {"capabilityId": _string("The ID of the capability to disable")},
        required=["capabilityId"],
    ),
    _tool(
        "list_devices",
        "Get a list of all devices registered to your team",
        {
            "limit": _limit("devices"),
            "sort": _string("Sort order for the results", VALID_DEVICE_SORTS),
            "filter": {
                "type": "object",
                "properties": {
                    "name": _string("Filter by device name"),
                    "platform": _string("Filter by platform", ["IOS", "MAC_OS"]),
                    "status": _string("Filter by status", ["ENABLED", "DISABLED"]),
                    "udid": _string("Filter by device UDID"),
                    "deviceClass": _string(
                        "Filter by device class",
                        ["APPLE_WATCH", "IPAD", "IPHONE", "IPOD", "APPLE_TV", "MAC"],
                    ),
                },
            },
            "fields": {
                "type": "object",
                "properties": {
                    "devices": _string_list(
                        "Fields to include for each device",
                        ["name", "platform", "udid", "deviceClass", "status", "model", "addedDate"],
                    )
                },
            },
        },
    ),
    _tool(
        "list_users",
        "Get a list of all users registered on your App Store Connect team",
        {
            "limit": _limit("users"),
            "sort": _string("Sort order for the results", VALID_USER_SORTS),
            "filter": {
                "type": "object",
                "properties": {
                    "username": _string("Filter by username"),
                    "roles": _string_list("Filter by user roles", USER_ROLES),
                    "visibleApps": _string_list("Filter by apps the user can see (app IDs)"),
                },
            },
            "include": _string_list(
                "Related resources to include in the response", VALID_USER_INCLUDES
            ),
        },
    ),
    _tool(
        "create_analytics_report_request",
        "Create a new analytics report request for an app",
        {
            "appId": _string("The ID of the app to generate analytics reports for"),
            "accessType": dict(
                _string(
                    "Access type for the analytics report (ONGOING for daily data, "
                    "ONE_TIME_SNAPSHOT for historical data)",
                    VALID_ACCESS_TYPES,
                ),
                default="ONE_TIME_SNAPSHOT",
            ),
        },
        required=["appId"],
    ),
    _tool(
        "list_analytics_reports",
        "Get available analytics reports for a specific report request",
        {
            "reportRequestId": _string("The ID of the analytics report request"),
            "limit": _limit("reports"),
            "filter": {
                "type": "object",
                "properties": {
                    "category": _string("Filter by report category", VALID_REPORT_CATEGORIES)
                },
            },
        },
        required=["reportRequestId"],
    ),
    _tool(
        "list_analytics_report_segments",
        "Get segments for a specific analytics report (contains download URLs)",
        {"reportId": _string("The ID of the analytics report"), "limit": _limit("segments")},
        required=["reportId"],
    ),
    _tool(
        "download_analytics_report_segment",
        "Download data from an analytics report segment URL",
        {"segmentUrl": _string("The URL of the analytics report segment to download")},
        required=["segmentUrl"],
    ),
]

REPORT_TOOL_NAMES = ("download_sales_report", "download_finance_report")


def _report_tools(vendor_number: str) -> List[Dict[str, Any]]:
    vendor = dict(
        _string(
            "Your vendor number from App Store Connect (optional if set as environment variable)"
        ),
        default=vendor_number,
    )
    report_date = _string("Report date in YYYY-MM format (e.g., '2024-01')")
    return [
        _tool(
            "download_sales_report",
            "Download sales and trends reports",
            {
                "vendorNumber": vendor,
                "reportType": dict(
                    _string("Type of report to download", VALID_SALES_REPORT_TYPES),
                    default="SALES",
                ),
                "reportSubType": dict(
                    _string("Sub-type of the report", VALID_REPORT_SUBTYPES), default="SUMMARY"
                ),
                "frequency": dict(
                    _string("Frequency of the report", VALID_FREQUENCIES), default="MONTHLY"
                ),
                "reportDate": report_date,
                "summary": {
                    "type": "boolean",
                    "description": "Also return unit, proceeds, app and country totals",
                    "default": False,
                },
            },
            required=["reportDate"],
        ),
        _tool(
            "download_finance_report",
            "Download finance reports for a specific region",
            {
                "vendorNumber": vendor,
                "reportDate": report_date,
                "regionCode": _string("Region code (e.g., 'Z1' for worldwide, 'WW' for Europe)"),
            },
            required=["reportDate", "regionCode"],
        ),
    ]


def tool_definitions(vendor_number: Optional[str] = None) -> List[Dict[str, Any]]:
    """Return the tool catalog; report tools only when a vendor number is configured."""
    if vendor_number:
        return BASE_TOOLS + _report_tools(vendor_number)
    return list(BASE_TOOLS)
