"""
Tool dispatch boundary.

Every tool call ends here as a uniform result dictionary: either the JSON
(or text) payload, or a flagged error carrying one diagnostic string.
"""

import json
import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from .catalog import REPORT_TOOL_NAMES
from .client import AppStoreConnectClient
from .diagnostics import describe_exception
from .exceptions import ConfigurationError, ToolNotFoundError
from .handlers import (
    AnalyticsHandlers,
    AppHandlers,
    BetaHandlers,
    BundleHandlers,
    DeviceHandlers,
    UserHandlers,
)

logger = logging.getLogger(__name__)


def format_tool_response(result: Any = None, error: Optional[BaseException] = None) -> Dict[str, Any]:
    """Wrap a handler result or failure in the caller-facing response shape."""
    if error is not None:
        return {"isError": True, "content": [{"type": "text", "text": describe_exception(error)}]}

    text = result if isinstance(result, str) else json.dumps(result)
    return {"content": [{"type": "text", "text": text}]}


class ToolDispatcher:
    """
    Routes tool names to handlers.

    Args:
        client: API client shared by all handlers
        vendor_number: Configured vendor number; report tools need one
        today: Reference date provider for report date checks
    """

    def __init__(
        self,
        client: AppStoreConnectClient,
        vendor_number: Optional[str] = None,
        today: Callable[[], date] = date.today,
    ):
        self.vendor_number = vendor_number

        apps = AppHandlers(client)
        beta = BetaHandlers(client)
        bundles = BundleHandlers(client)
        devices = DeviceHandlers(client)
        users = UserHandlers(client)
        analytics = AnalyticsHandlers(client, vendor_number, today=today)

        self._tools: Dict[str, Callable[..., Any]] = {
            "list_apps": apps.list_apps,
            "get_app_info": apps.get_app_info,
            "list_beta_groups": beta.list_beta_groups,
            "list_group_testers": beta.list_group_testers,
            "add_tester_to_group": beta.add_tester_to_group,
            "remove_tester_from_group": beta.remove_tester_from_group,
            "create_bundle_id": bundles.create_bundle_id,
            "list_bundle_ids": bundles.list_bundle_ids,
            "get_bundle_id_info": bundles.get_bundle_id_info,
            "enable_bundle_capability": bundles.enable_bundle_capability,
            "disable_bundle_capability": bundles.disable_bundle_capability,
            "list_devices": devices.list_devices,
            "list_users": users.list_users,
            "create_analytics_report_request": analytics.create_analytics_report_request,
            "list_analytics_reports": analytics.list_analytics_reports,
            "list_analytics_report_segments": analytics.list_analytics_report_segments,
            "download_analytics_report_segment": analytics.download_analytics_report_segment,
            "download_sales_report": analytics.download_sales_report,
            "download_finance_report": analytics.download_finance_report,
        }

    def tool_names(self) -> List[str]:
        """Names of the tools currently offered."""
        return [
            name
            for name in self._tools
            if self.vendor_number or name not in REPORT_TOOL_NAMES
        ]

    def _check_available(self, name: str) -> None:
        if name in REPORT_TOOL_NAMES and not self.vendor_number:
            kind = "Sales" if name == "download_sales_report" else "Finance"
            raise ConfigurationError(
                f"{kind} reports are not available. "
                "Please set APP_STORE_CONNECT_VENDOR_NUMBER environment variable."
            )

    def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run a tool and return its formatted response.

        Raises:
            ToolNotFoundError: If no tool has that name
        """
        handler = self._tools.get(name)
        if handler is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")

        logger.info(f"call_tool: {name} arguments={arguments}")
        try:
            self._check_available(name)
            result = handler(**(arguments or {}))
        except Exception as e:
            logger.error(f"call_tool: {name} failed: {type(e).__name__}: {e}")
            return format_tool_response(error=e)

        return format_tool_response(result)
