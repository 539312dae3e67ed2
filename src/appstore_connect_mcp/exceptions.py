"""
Exception classes for appstore-connect-mcp.
"""

import json
from typing import Any, Dict, List, Optional


class AppStoreConnectError(Exception):
    """Base exception class for App Store Connect errors."""

    pass


class ConfigurationError(AppStoreConnectError):
    """Raised when required credential or vendor settings are missing."""

    pass


class ValidationError(AppStoreConnectError):
    """Raised when tool arguments fail validation."""

    pass


class AuthenticationError(AppStoreConnectError):
    """Raised when a bearer token cannot be generated."""

    pass


class TransportError(AppStoreConnectError):
    """Raised when the remote service cannot be reached."""

    pass


class ResponseError(AppStoreConnectError):
    """
    Raised when the API answers with an HTTP error status.

    Carries everything the diagnostics layer needs to explain the failure:
    the status code, the endpoint descriptor, the query parameters that were
    sent, and the structured ``errors`` list from the body when present.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        endpoint: Any = None,
        params: Optional[Dict[str, Any]] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint
        self.params = params or {}
        self.errors = errors or []


class UnauthorizedError(ResponseError):
    """Raised when the API rejects the bearer token (401)."""

    pass


class PermissionError(ResponseError):
    """Raised when insufficient permissions for operation (403)."""

    pass


class NotFoundError(ResponseError):
    """Raised when requested resource is not found (404)."""

    pass


class RateLimitError(ResponseError):
    """Raised when rate limits are exceeded (429)."""

    pass


class ServerError(ResponseError):
    """Raised when server returns 5xx error."""

    pass


class DomainError(AppStoreConnectError):
    """Raised when a report payload turns out to be a structured error document."""

    def __init__(self, errors: List[Any]):
        self.errors = errors
        super().__init__(f"API Error: {json.dumps(errors)}")


class DecodeError(AppStoreConnectError):
    """Raised when a report payload cannot be decompressed or decoded."""

    def __init__(self, message: str, stage: Optional[str] = None):
        self.stage = stage
        if stage:
            message = f"{message} (stage: {stage})"
        super().__init__(message)


class ToolNotFoundError(AppStoreConnectError):
    """Raised when an unknown tool name is requested."""

    pass
