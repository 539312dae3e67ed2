"""
Caller-facing diagnostics for failed API calls.

Failures are explained by looking up (status, endpoint kind) in a guidance
table first, then falling back to per-status defaults and finally to the
structured error body returned by the API.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .endpoints import Endpoint, EndpointKind
from .exceptions import ResponseError

SALES_REPORT_NOT_FOUND = (
    "Sales report not found. This typically happens when:\n"
    "- The requested date is in the future\n"
    "- No sales data exists for the requested period\n"
    "- The report hasn't been generated yet "
    "(reports are usually available 1-2 days after the period ends)"
)

FINANCE_REPORT_NOT_FOUND = (
    "Finance report not found. This typically happens when:\n"
    "- The requested date is in the future\n"
    "- No financial data exists for the requested period\n"
    "- The report hasn't been generated yet "
    "(finance reports are usually available after the 5th of the following month)"
)

INVALID_APP_INCLUDES = (
    "Bad request: Invalid relationship includes. Common issues:\n"
    '- Using "customerReviews" instead of "reviewSubmissions"\n'
    '- Using "perfPowerMetrics" which is not a valid relationship\n'
    "- Check that all include values match the API documentation exactly"
)

TOOL_NOT_FOUND = "Tool not found: {name}. Available tools: {available}"

GUIDANCE: Dict[Tuple[int, EndpointKind], str] = {
    (404, EndpointKind.SALES_REPORT): SALES_REPORT_NOT_FOUND,
    (404, EndpointKind.FINANCE_REPORT): FINANCE_REPORT_NOT_FOUND,
    (400, EndpointKind.APP_DETAIL): INVALID_APP_INCLUDES,
}

STATUS_FALLBACKS: Dict[int, Callable[[Optional[Endpoint]], str]] = {
    404: lambda endpoint: (
        f"Resource not found (404): {endpoint.path if endpoint else 'unknown path'}"
    ),
    400: lambda endpoint: (
        "Bad request: The request parameters are invalid. "
        "Check that all values match the API requirements."
    ),
}


def _effective_kind(endpoint: Optional[Endpoint], params: Mapping[str, Any]) -> EndpointKind:
    if endpoint is None:
        return EndpointKind.STANDARD
    # Include guidance only applies when relationships were actually requested
    if endpoint.kind is EndpointKind.APP_DETAIL and not params.get("include"):
        return EndpointKind.STANDARD
    return endpoint.kind


def classify_error(
    status: int,
    endpoint: Optional[Endpoint] = None,
    params: Optional[Mapping[str, Any]] = None,
    errors: Optional[List[Dict[str, Any]]] = None,
    message: str = "",
) -> str:
    """
    Produce a human-actionable diagnostic for a failed call.

    Args:
        status: HTTP status code of the failed call
        endpoint: Descriptor of the endpoint that was called
        params: Query parameters that were sent
        errors: Structured ``errors`` list from the response body
        message: Low-level error message

    Returns:
        A single diagnostic string
    """
    params = params or {}
    api_error = errors[0] if errors else None
    if api_error is not None and not isinstance(api_error, dict):
        api_error = {"detail": str(api_error)}

    guidance = GUIDANCE.get((status, _effective_kind(endpoint, params)))
    if guidance is not None:
        return guidance

    fallback = STATUS_FALLBACKS.get(status)
    if fallback is not None:
        return (api_error or {}).get("detail") or fallback(endpoint)

    if api_error:
        detail = api_error.get("detail") or api_error.get("title") or message
        return f"App Store Connect API error: {detail}"

    return f"Request failed with status {status}: {message}"


def describe_exception(error: BaseException) -> str:
    """Map any exception raised by a tool call to its diagnostic text."""
    if isinstance(error, ResponseError):
        return classify_error(
            error.status_code,
            endpoint=error.endpoint,
            params=error.params,
            errors=error.errors,
            message=str(error),
        )
    return str(error)
