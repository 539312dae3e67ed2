"""
Bearer token issuance for the App Store Connect API.
"""

import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import jwt

from .config import Credentials
from .exceptions import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)

# Tokens may live at most 20 minutes (max allowed by Apple)
TOKEN_LIFETIME = 1200
REFRESH_MARGIN = 60
AUDIENCE = "appstoreconnect-v1"


class TokenProvider:
    """
    Issues short-lived ES256 bearer tokens for App Store Connect.

    Args:
        credentials: Key ID, issuer ID and private key path to sign with
    """

    def __init__(self, credentials: Credentials):
        self.credentials = credentials
        self.private_key_path = Path(credentials.private_key_path or "")
        self._token: Optional[str] = None
        self._token_expiry: Optional[int] = None
        self._lock = threading.Lock()

    def validate_config(self) -> None:
        """Fail fast when credential material is missing."""
        self.credentials.validate()

        if not self.private_key_path.exists():
            raise ConfigurationError(
                f"Private key file not found: {self.credentials.private_key_path}"
            )

    def _load_private_key(self) -> str:
        """Load the private key from file."""
        try:
            with open(self.private_key_path, "r") as f:
                return f.read()
        except IOError as e:
            raise AuthenticationError(f"Failed to load private key: {e}")

    def generate_token(self) -> str:
        """Generate a JWT token, reusing the cached one until shortly before expiry."""
        with self._lock:
            current_time = int(datetime.now(timezone.utc).timestamp())

            if self._token and self._token_expiry and current_time < self._token_expiry:
                return self._token

            private_key = self._load_private_key()

            expiry = current_time + TOKEN_LIFETIME
            payload = {
                "iss": self.credentials.issuer_id,
                "exp": expiry,
                "aud": AUDIENCE,
            }
            headers = {"alg": "ES256", "kid": self.credentials.key_id, "typ": "JWT"}

            try:
                token = jwt.encode(payload, private_key, algorithm="ES256", headers=headers)
            except Exception as e:
                raise AuthenticationError(f"Failed to generate JWT token: {e}")

            logger.info(f"generate_token: issued token for key_id={self.credentials.key_id}")
            self._token = token
            self._token_expiry = expiry - REFRESH_MARGIN
            return self._token
