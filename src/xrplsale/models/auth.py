"""
Wallet authentication models for XRPL.Sale SDK
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from .base import XRPLSaleModel


class AuthChallenge(XRPLSaleModel):
    """Challenge the wallet must sign"""
    challenge: str = Field(..., description="Challenge string to sign")
    expires_at: Optional[datetime] = Field(None, description="Challenge expiry")


class AuthRequest(XRPLSaleModel):
    """Signed challenge presented for wallet authentication"""
    wallet_address: str = Field(..., description="XRPL account address")
    signature: str = Field(..., description="Signature over the challenge")
    challenge: str = Field(..., description="Challenge that was signed")
    public_key: Optional[str] = Field(None, description="Signing public key")
    timestamp: Optional[int] = Field(None, description="Client timestamp (unix seconds)")


class AuthResponse(XRPLSaleModel):
    """Session credentials returned by authenticate/refresh"""
    token: str = Field("", description="Bearer token for subsequent requests")
    refresh_token: Optional[str] = Field(None, description="Token used to refresh the session")
    expires_at: Optional[datetime] = Field(None, description="Token expiry")
    expires_in: Optional[int] = Field(None, description="Seconds until expiry")
    user: Optional[Dict[str, Any]] = Field(None, description="Authenticated user")


class UserProfile(XRPLSaleModel):
    """Profile of the authenticated user"""
    id: str = Field(..., description="User identifier")
    wallet_address: str = Field(..., description="XRPL account address")
    email: Optional[str] = Field(None, description="Contact email")
    role: Optional[str] = Field(None, description="Platform role")
    created_at: Optional[datetime] = Field(None, description="Registration timestamp")
    last_login_at: Optional[datetime] = Field(None, description="Most recent login")
