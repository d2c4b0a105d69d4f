"""
Wallet authentication service for XRPL.Sale SDK
"""

import logging
from typing import Optional

from ..core.http import HTTPClient
from ..models.auth import AuthChallenge, AuthRequest, AuthResponse, UserProfile

logger = logging.getLogger(__name__)


class AuthService:
    """Wallet authentication service

    ``authenticate`` and ``refresh`` store the returned token on the client's
    AuthManager; every later request carries it as a bearer token. A failed
    call raises and leaves the stored token as it was.
    """

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    async def generate_challenge(self, wallet_address: str, *, deadline: Optional[float] = None) -> AuthChallenge:
        """Get a challenge for the wallet to sign"""
        response = await self.http_client.post(
            "/auth/challenge", json={"wallet_address": wallet_address}, deadline=deadline
        )
        return self.http_client.decode_as(AuthChallenge, response)

    async def authenticate(self, request: AuthRequest, *, deadline: Optional[float] = None) -> AuthResponse:
        """Authenticate with a signed wallet challenge"""
        response = await self.http_client.post("/auth/wallet", json=request, deadline=deadline)
        auth = self.http_client.decode_as(AuthResponse, response)
        self._store_token(auth)
        return auth

    async def refresh(self, refresh_token: str, *, deadline: Optional[float] = None) -> AuthResponse:
        """Exchange a refresh token for a new session token"""
        response = await self.http_client.post(
            "/auth/refresh", json={"refresh_token": refresh_token}, deadline=deadline
        )
        auth = self.http_client.decode_as(AuthResponse, response)
        self._store_token(auth)
        return auth

    async def logout(self, *, deadline: Optional[float] = None) -> None:
        """Log out the current session"""
        await self.http_client.post("/auth/logout", deadline=deadline)

    async def get_profile(self, *, deadline: Optional[float] = None) -> UserProfile:
        """Get the authenticated user's profile"""
        response = await self.http_client.get("/auth/profile", deadline=deadline)
        return self.http_client.decode_as(UserProfile, response)

    def _store_token(self, auth: AuthResponse) -> None:
        if auth.token:
            self.http_client.auth_manager.set_auth_token(auth.token)
            logger.info("Session token updated")
