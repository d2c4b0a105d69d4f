"""
Authentication manager for XRPL.Sale SDK
"""

import threading
from typing import Dict, Optional


class AuthManager:
    """Holds the API key and the session bearer token for one client

    The bearer token is the only mutable state shared between concurrent
    requests; every read and write goes through the same lock.
    """

    def __init__(self, api_key: str = "", auth_token: Optional[str] = None):
        self.api_key = api_key or ""
        self._lock = threading.Lock()
        self._auth_token = auth_token or None

    @property
    def auth_token(self) -> Optional[str]:
        with self._lock:
            return self._auth_token

    def set_auth_token(self, token: Optional[str]) -> None:
        """Replace the session token used by subsequent requests"""
        with self._lock:
            self._auth_token = token or None

    def clear_auth_token(self) -> None:
        self.set_auth_token(None)

    @property
    def is_authenticated(self) -> bool:
        return self.auth_token is not None

    def get_headers(self) -> Dict[str, str]:
        """Get authentication headers for requests

        A session token takes precedence over the static API key.
        """
        token = self.auth_token
        if token:
            return {"Authorization": f"Bearer {token}"}
        if self.api_key:
            return {"X-API-Key": self.api_key}
        return {}

    def get_api_key_info(self) -> Dict[str, object]:
        """Get API key information (masked)"""
        if len(self.api_key) <= 8:
            return {
                "length": len(self.api_key),
                "masked": "***" if self.api_key else "",
            }

        return {
            "length": len(self.api_key),
            "masked": f"{self.api_key[:8]}...{self.api_key[-4:]}",
        }
