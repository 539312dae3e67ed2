"""
Apple App Store Connect API client.

This module issues authenticated calls against the App Store Connect API,
choosing structured or raw-byte transport from the endpoint descriptor and
resolving report payloads before they are handed back to the caller.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from ratelimit import limits, sleep_and_retry

from .auth import TokenProvider
from .endpoints import Endpoint, EndpointKind
from .exceptions import (
    DecodeError,
    NotFoundError,
    PermissionError,
    RateLimitError,
    ResponseError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from .payload import decompress_in_memory, is_gzip, resolve_payload
from .staging import decompress_staged

logger = logging.getLogger(__name__)

REPORT_ACCEPT = "application/a-gzip, application/json"

_STATUS_ERRORS = {
    401: UnauthorizedError,
    403: PermissionError,
    404: NotFoundError,
    429: RateLimitError,
}


def _parse_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        logger.error(f"_parse_json: body is not JSON ({len(response.content)} bytes)")
        raise DecodeError(f"Response body is not valid JSON: {e}", stage="parse-json")


def _error_list(response: requests.Response) -> List[Dict[str, Any]]:
    try:
        body = response.json()
    except ValueError:
        return []
    if isinstance(body, dict) and isinstance(body.get("errors"), list):
        return body["errors"]
    return []


class AppStoreConnectClient:
    """
    Authenticated App Store Connect API client.

    Args:
        token_provider: Issues the bearer token attached to every call
        timeout: Seconds to wait for the API before giving up
        stage_reports: Decompress report payloads through temp files
    """

    BASE_URL = "https://api.appstoreconnect.apple.com/v1"

    def __init__(
        self,
        token_provider: TokenProvider,
        timeout: float = 30,
        stage_reports: bool = False,
    ):
        """Initialize the client, validating credentials up front."""
        self.token_provider = token_provider
        self.token_provider.validate_config()
        self.timeout = timeout
        self.decompressor = decompress_staged if stage_reports else decompress_in_memory

    def _get_headers(self, endpoint: Optional[Endpoint] = None) -> Dict[str, str]:
        """Get headers for API requests."""
        token = self.token_provider.generate_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        if endpoint is not None and endpoint.is_report:
            headers["Accept"] = REPORT_ACCEPT
        return headers

    @sleep_and_retry
    @limits(calls=3500, period=3600)  # Apple's rate limit
    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        """Rate-limited wrapper around requests.request."""
        try:
            response = requests.request(method=method, url=url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            logger.error(f"_send: Request timed out after {self.timeout}s: {e}")
            raise TransportError(f"Request failed: {e}")
        except requests.exceptions.RequestException as e:
            logger.error(f"_send: Request failed: {e}")
            raise TransportError(f"Request failed: {e}")

        logger.info(f"_send: Response received - status={response.status_code}")
        return response

    def _raise_for_status(
        self,
        response: requests.Response,
        endpoint: Endpoint,
        params: Optional[Dict[str, Any]],
    ) -> None:
        status = response.status_code
        if status < 400:
            return

        errors = _error_list(response)
        detail = errors[0].get("detail") if errors and isinstance(errors[0], dict) else None
        message = f"API Error {status}: {detail or response.reason or 'request failed'}"
        logger.error(f"{endpoint.method} {endpoint.path}: {message}")

        if status >= 500:
            error_class = ServerError
        else:
            error_class = _STATUS_ERRORS.get(status, ResponseError)
        raise error_class(
            message, status_code=status, endpoint=endpoint, params=params, errors=errors
        )

    def request(
        self,
        endpoint: Endpoint,
        data: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Issue one authenticated call and return the decoded payload.

        Args:
            endpoint: Method, path and kind of the operation
            data: Optional JSON body
            params: Optional query parameters

        Returns:
            Parsed JSON for standard endpoints (None for empty bodies),
            report text for report endpoints
        """
        url = f"{self.BASE_URL}{endpoint.path}"
        headers = self._get_headers(endpoint)

        logger.info(f"request: {endpoint.method} {url}")
        if params:
            logger.info(f"request: params={params}")

        response = self._send(endpoint.method, url, headers=headers, params=params, json=data)
        self._raise_for_status(response, endpoint, params)

        if endpoint.is_report:
            logger.info(f"request: report body of {len(response.content)} bytes")
            return resolve_payload(response.content, True, decompressor=self.decompressor)

        if not response.content:
            return None
        return resolve_payload(_parse_json(response), False)

    def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        kind: EndpointKind = EndpointKind.STANDARD,
    ) -> Any:
        return self.request(Endpoint("GET", path, kind), params=params)

    def post(self, path: str, data: Any) -> Any:
        return self.request(Endpoint("POST", path), data=data)

    def patch(self, path: str, data: Any) -> Any:
        return self.request(Endpoint("PATCH", path), data=data)

    def delete(self, path: str, data: Optional[Any] = None) -> Any:
        return self.request(Endpoint("DELETE", path), data=data)

    def download_report(self, endpoint: Endpoint, params: Dict[str, Any]) -> str:
        """Fetch a sales or finance report and return its text."""
        return self.request(endpoint, params=params)

    def download_from_url(self, url: str) -> Dict[str, Any]:
        """
        Download from an absolute URL handed out by a previous response.

        Analytics report segments are served this way, usually gzip-compressed;
        JSON responses are returned parsed.
        """
        token = self.token_provider.generate_token()
        logger.info(f"download_from_url: GET {url}")

        response = self._send("GET", url, headers={"Authorization": f"Bearer {token}"})
        self._raise_for_status(response, Endpoint("GET", url), None)

        if is_gzip(response.content):
            data: Any = resolve_payload(response.content, True, decompressor=self.decompressor)
        elif "json" in (response.headers.get("content-type") or "").lower():
            data = _parse_json(response)
        else:
            data = response.text

        return {
            "data": data,
            "contentType": response.headers.get("content-type"),
            "size": response.headers.get("content-length"),
        }
