"""
Staged decompression of report payloads through temporary files.

The compressed and decompressed bytes are written to uniquely named files
in the temporary directory and the text is read back from disk before it is
returned. Both files are removed on every exit path.
"""

import gzip
import logging
import secrets
import tempfile
import time
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from .exceptions import DecodeError
from .payload import ensure_text

logger = logging.getLogger(__name__)

FILE_PREFIX = "apple_report"


def _staging_name() -> str:
    return f"{FILE_PREFIX}_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


def _remove(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not clean up temp file {path}: {e}")


@contextmanager
def staged_report_files(
    directory: Optional[Union[str, Path]] = None,
) -> Iterator[Tuple[Path, Path]]:
    """
    Reserve a pair of temp file paths for one decompression.

    Usage:
        with staged_report_files() as (gz_path, txt_path):
            gz_path.write_bytes(body)

    Both files are removed when the context exits, whether or not an
    exception was raised. Removal problems are logged, never raised.
    """
    base = Path(directory) if directory is not None else Path(tempfile.gettempdir())
    name = _staging_name()
    gz_path = base / f"{name}.gz"
    txt_path = base / f"{name}.txt"
    try:
        yield gz_path, txt_path
    finally:
        _remove(gz_path)
        _remove(txt_path)
        logger.info(f"staged_report_files: cleaned up {name}")


def decompress_staged(body: bytes, directory: Optional[Union[str, Path]] = None) -> str:
    """
    Decompress a gzip buffer via temporary files and return the read-back text.

    Args:
        body: Raw gzip-compressed report bytes
        directory: Where to stage files (defaults to the system temp dir)

    Returns:
        The decompressed report text

    Raises:
        DecodeError: With the stage that failed
    """
    with staged_report_files(directory) as (gz_path, txt_path):
        try:
            gz_path.write_bytes(body)
        except OSError as e:
            raise DecodeError(f"Failed to stage compressed report: {e}", stage="write-compressed")
        logger.info(f"decompress_staged: wrote {len(body)} bytes to {gz_path}")

        try:
            decompressed = gzip.decompress(body)
        except (OSError, EOFError, zlib.error) as e:
            raise DecodeError(f"Failed to decompress report data: {e}", stage="decompress")
        logger.info(f"decompress_staged: decompressed to {len(decompressed)} bytes")

        try:
            txt_path.write_bytes(decompressed)
        except OSError as e:
            raise DecodeError(
                f"Failed to stage decompressed report: {e}", stage="write-decompressed"
            )

        try:
            text = txt_path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DecodeError(f"Failed to read back report data: {e}", stage="read-back")
        logger.info(f"decompress_staged: read back {len(text)} characters")

        return ensure_text(text)
