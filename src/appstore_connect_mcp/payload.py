"""
Report payload resolution.

Report endpoints may answer with gzip-compressed TSV, uncompressed text, or
a JSON error document, regardless of the declared content type. The body is
classified by sniffing its leading bytes.
"""

import gzip
import json
import logging
import zlib
from typing import Any, Callable, Union

from .exceptions import DecodeError, DomainError

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"

Decompressor = Callable[[bytes], str]


def is_gzip(body: bytes) -> bool:
    """Return True if the buffer starts with the gzip magic number."""
    return len(body) >= 2 and body[:2] == GZIP_MAGIC


def ensure_text(text: str) -> str:
    """Reject decompressed text carrying embedded null bytes."""
    if "\0" in text:
        raise DecodeError("Decompressed data contains invalid characters", stage="validate")
    return text


def decompress_in_memory(body: bytes) -> str:
    """Decompress a gzip buffer to UTF-8 text without touching the filesystem."""
    try:
        raw = gzip.decompress(body)
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError(f"Failed to decompress report data: {e}", stage="decompress")

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Report data is not valid UTF-8: {e}", stage="decode")

    logger.info(f"decompress_in_memory: {len(body)} bytes -> {len(text)} characters")
    return ensure_text(text)


def _raise_for_error_document(text: str) -> None:
    try:
        document = json.loads(text)
    except ValueError:
        return
    if isinstance(document, dict) and isinstance(document.get("errors"), list):
        raise DomainError(document["errors"])


def resolve_payload(
    body: Union[bytes, Any],
    is_report: bool,
    decompressor: Decompressor = decompress_in_memory,
) -> Any:
    """
    Turn a raw response body into the payload handed back to the caller.

    Args:
        body: Structured data for standard endpoints, raw bytes for reports
        is_report: Whether the originating endpoint is a report endpoint
        decompressor: Callable turning a gzip buffer into text

    Returns:
        The body unchanged for standard endpoints, otherwise report text

    Raises:
        DomainError: If an uncompressed report body is a JSON error document
        DecodeError: If decompression fails or yields non-text content
    """
    if not is_report:
        return body

    if not isinstance(body, (bytes, bytearray)):
        raise DecodeError(f"Unexpected report body type: {type(body).__name__}")

    body = bytes(body)
    if is_gzip(body):
        logger.info(f"resolve_payload: gzip report detected ({len(body)} bytes)")
        return ensure_text(decompressor(body))

    text = body.decode("utf-8", errors="replace")
    if text.lstrip().startswith("{"):
        _raise_for_error_document(text)

    logger.info(f"resolve_payload: uncompressed report ({len(text)} characters)")
    return text
