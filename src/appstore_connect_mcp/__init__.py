"""
appstore-connect-mcp

Exposes Apple App Store Connect API operations as agent tools, with
authenticated requests, report payload decoding and actionable error
diagnostics.
"""

from .auth import TokenProvider
from .client import AppStoreConnectClient
from .config import Credentials, Settings
from .endpoints import Endpoint, EndpointKind
from .exceptions import (
    AppStoreConnectError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    DomainError,
    NotFoundError,
    PermissionError,
    RateLimitError,
    ResponseError,
    ServerError,
    ToolNotFoundError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from .tools import ToolDispatcher, format_tool_response

__version__ = "1.0.0"

__all__ = [
    "AppStoreConnectClient",
    "TokenProvider",
    "Credentials",
    "Settings",
    "Endpoint",
    "EndpointKind",
    "ToolDispatcher",
    "format_tool_response",
    "AppStoreConnectError",
    "AuthenticationError",
    "ConfigurationError",
    "DecodeError",
    "DomainError",
    "NotFoundError",
    "PermissionError",
    "RateLimitError",
    "ResponseError",
    "ServerError",
    "ToolNotFoundError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
]
