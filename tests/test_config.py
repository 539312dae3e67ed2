"""
Tests for configuration loading.
"""

import pytest

from appstore_connect_mcp.config import Credentials, Settings
from appstore_connect_mcp.exceptions import ConfigurationError

ENV = {
    "APP_STORE_CONNECT_KEY_ID": "KEY123",
    "APP_STORE_CONNECT_ISSUER_ID": "issuer-uuid",
    "APP_STORE_CONNECT_P8_PATH": "/keys/AuthKey_KEY123.p8",
}


class TestSettings:
    """Test Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env(ENV)
        assert settings.credentials == Credentials("KEY123", "issuer-uuid", "/keys/AuthKey_KEY123.p8")
        assert settings.vendor_number is None
        assert settings.stage_reports is False
        assert settings.timeout == 30
        assert settings.log_level == "INFO"

    def test_optional_values(self):
        env = dict(
            ENV,
            APP_STORE_CONNECT_VENDOR_NUMBER=" 87654321 ",
            APP_STORE_CONNECT_STAGE_REPORTS="true",
            APP_STORE_CONNECT_TIMEOUT="12.5",
            APP_STORE_CONNECT_LOG_LEVEL="debug",
        )
        settings = Settings.from_env(env)
        assert settings.vendor_number == "87654321"
        assert settings.stage_reports is True
        assert settings.timeout == 12.5
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_bad_timeout(self, value):
        with pytest.raises(ConfigurationError, match="APP_STORE_CONNECT_TIMEOUT"):
            Settings.from_env(dict(ENV, APP_STORE_CONNECT_TIMEOUT=value))

    def test_credentials_are_immutable(self):
        settings = Settings.from_env(ENV)
        with pytest.raises(AttributeError):
            settings.credentials.key_id = "other"


class TestCredentials:
    """Test credential validation."""

    def test_missing_everything(self):
        credentials = Settings.from_env({}).credentials
        with pytest.raises(ConfigurationError) as excinfo:
            credentials.validate()
        message = str(excinfo.value)
        assert "APP_STORE_CONNECT_KEY_ID" in message
        assert "APP_STORE_CONNECT_ISSUER_ID" in message
        assert "APP_STORE_CONNECT_P8_PATH" in message

    def test_vendor_number_optional(self):
        Credentials("KEY123", "issuer", "/k.p8").validate()
