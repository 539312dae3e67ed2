"""
Configuration loading for appstore-connect-mcp.

Credentials and settings are read once from the environment at process
start and are immutable afterwards.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .exceptions import ConfigurationError

ENV_KEY_ID = "APP_STORE_CONNECT_KEY_ID"
ENV_ISSUER_ID = "APP_STORE_CONNECT_ISSUER_ID"
ENV_P8_PATH = "APP_STORE_CONNECT_P8_PATH"
ENV_VENDOR_NUMBER = "APP_STORE_CONNECT_VENDOR_NUMBER"
ENV_STAGE_REPORTS = "APP_STORE_CONNECT_STAGE_REPORTS"
ENV_TIMEOUT = "APP_STORE_CONNECT_TIMEOUT"
ENV_LOG_LEVEL = "APP_STORE_CONNECT_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Credentials:
    """
    App Store Connect API credentials.

    Args:
        key_id: Your App Store Connect API key ID
        issuer_id: Your App Store Connect API issuer ID
        private_key_path: Path to your .p8 private key file
        vendor_number: Optional vendor number, enables sales and finance reports
    """

    key_id: str
    issuer_id: str
    private_key_path: Union[str, Path]
    vendor_number: Optional[str] = None

    def missing_fields(self) -> List[str]:
        missing = []
        if not self.key_id:
            missing.append(ENV_KEY_ID)
        if not self.issuer_id:
            missing.append(ENV_ISSUER_ID)
        if not self.private_key_path:
            missing.append(ENV_P8_PATH)
        return missing

    def validate(self) -> None:
        """Raise ConfigurationError if any required field is absent."""
        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(
                f"Missing required authentication parameters: {', '.join(missing)}"
            )


@dataclass(frozen=True)
class Settings:
    """Process-level settings."""

    credentials: Credentials
    stage_reports: bool = False
    timeout: float = 30
    log_level: str = "INFO"

    @property
    def vendor_number(self) -> Optional[str]:
        return self.credentials.vendor_number

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a value cannot be interpreted
        """
        if environ is None:
            environ = os.environ

        credentials = Credentials(
            key_id=environ.get(ENV_KEY_ID, "").strip(),
            issuer_id=environ.get(ENV_ISSUER_ID, "").strip(),
            private_key_path=environ.get(ENV_P8_PATH, "").strip(),
            vendor_number=environ.get(ENV_VENDOR_NUMBER, "").strip() or None,
        )

        raw_timeout = environ.get(ENV_TIMEOUT, "").strip()
        timeout: float = 30
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_TIMEOUT} must be a number of seconds, got: {raw_timeout}"
                )
            if timeout <= 0:
                raise ConfigurationError(f"{ENV_TIMEOUT} must be positive, got: {raw_timeout}")

        return cls(
            credentials=credentials,
            stage_reports=environ.get(ENV_STAGE_REPORTS, "").strip().lower() in _TRUTHY,
            timeout=timeout,
            log_level=environ.get(ENV_LOG_LEVEL, "INFO").strip().upper() or "INFO",
        )
