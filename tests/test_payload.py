"""
Tests for report payload resolution.
"""

import gzip
import json

import pytest

from appstore_connect_mcp.exceptions import DecodeError, DomainError
from appstore_connect_mcp.payload import (
    decompress_in_memory,
    is_gzip,
    resolve_payload,
)
from appstore_connect_mcp.staging import decompress_staged


class TestStandardPayloads:
    """Non-report bodies pass through untouched."""

    def test_structured_data_unchanged(self):
        body = {"data": [{"id": "1"}]}
        assert resolve_payload(body, is_report=False) is body

    def test_bytes_unchanged_for_standard(self):
        body = b"\x1f\x8bnot touched"
        assert resolve_payload(body, is_report=False) is body


class TestGzipPayloads:
    """Gzip magic number handling."""

    def test_hello(self):
        """A compressed "hello" resolves to the text."""
        assert resolve_payload(gzip.compress(b"hello"), is_report=True) == "hello"

    def test_never_returns_raw_bytes(self):
        tsv = "Provider\tProvider Country\tUnits\nAPPLE\tUS\t10\n"
        result = resolve_payload(gzip.compress(tsv.encode("utf-8")), is_report=True)
        assert isinstance(result, str)
        assert result == tsv

    def test_is_gzip(self):
        assert is_gzip(b"\x1f\x8b\x08")
        assert not is_gzip(b"\x1f")
        assert not is_gzip(b"")
        assert not is_gzip(b"Provider")

    def test_null_bytes_rejected(self):
        """Decompressed content with embedded nulls is a decode error."""
        with pytest.raises(DecodeError, match="invalid characters"):
            resolve_payload(gzip.compress(b"abc\x00def"), is_report=True)

    def test_corrupt_gzip(self):
        """Magic number with a broken stream fails to decompress."""
        with pytest.raises(DecodeError) as excinfo:
            resolve_payload(b"\x1f\x8b\x08\x00garbage", is_report=True)
        assert excinfo.value.stage == "decompress"

    def test_custom_decompressor_is_used(self):
        calls = []

        def decompressor(body):
            calls.append(body)
            return "from decompressor"

        body = gzip.compress(b"x")
        assert resolve_payload(body, True, decompressor=decompressor) == "from decompressor"
        assert calls == [body]

    def test_in_memory_matches_staged(self, tmp_path):
        """Both decompression paths produce identical text."""
        text = "Title\tUnits\r\nCafé\t3\r\n" * 50
        body = gzip.compress(text.encode("utf-8"))
        assert decompress_in_memory(body) == decompress_staged(body, directory=tmp_path) == text


class TestUncompressedPayloads:
    """Bodies without the gzip magic number."""

    @pytest.mark.parametrize(
        "body",
        [b"Provider\tUnits\n", b"", b"plain text", b"  [1, 2]", b"<html>Bad gateway</html>"],
    )
    def test_text_returned_unchanged(self, body):
        assert resolve_payload(body, is_report=True) == body.decode("utf-8")

    def test_error_document_raises(self):
        body = json.dumps({"errors": [{"status": "404", "detail": "missing"}]}).encode()
        with pytest.raises(DomainError) as excinfo:
            resolve_payload(body, is_report=True)
        assert excinfo.value.errors == [{"status": "404", "detail": "missing"}]
        assert "API Error" in str(excinfo.value)

    def test_error_document_with_leading_whitespace(self):
        with pytest.raises(DomainError):
            resolve_payload(b'\n  {"errors": []}', is_report=True)

    def test_json_without_errors_is_text(self):
        assert resolve_payload(b'{"data": 1}', is_report=True) == '{"data": 1}'

    def test_invalid_json_is_text(self):
        assert resolve_payload(b"{not json", is_report=True) == "{not json"

    def test_bytearray_accepted(self):
        assert resolve_payload(bytearray(b"abc"), is_report=True) == "abc"

    def test_non_bytes_report_body(self):
        with pytest.raises(DecodeError, match="Unexpected report body type"):
            resolve_payload({"data": 1}, is_report=True)
