"""
Project models for XRPL.Sale SDK
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import XRPLSaleModel


class ProjectStatus(str, Enum):
    """Project lifecycle states"""
    DRAFT = "draft"
    PENDING = "pending"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ProjectTier(XRPLSaleModel):
    """Pricing tier of a token sale"""
    tier: int = Field(..., ge=1, description="Tier number")
    price_per_token: float = Field(..., gt=0, description="Price per token in XRP")
    total_tokens: str = Field(..., description="Tokens available in this tier")
    tokens_sold: Optional[str] = Field(None, description="Tokens sold in this tier")


class Project(XRPLSaleModel):
    """Token sale project"""
    id: str = Field(..., description="Project identifier")
    name: str = Field(..., description="Project name")
    description: Optional[str] = Field(None, description="Project description")
    token_symbol: Optional[str] = Field(None, description="Token currency code")
    total_supply: Optional[str] = Field(None, description="Total token supply")
    status: Optional[str] = Field(None, description="Project status")
    owner_account: Optional[str] = Field(None, description="XRPL account of the project owner")
    tiers: List[ProjectTier] = Field(default_factory=list, description="Sale tiers")
    sale_start_date: Optional[datetime] = Field(None, description="Sale start")
    sale_end_date: Optional[datetime] = Field(None, description="Sale end")
    soft_cap: Optional[float] = Field(None, description="Soft cap in XRP")
    hard_cap: Optional[float] = Field(None, description="Hard cap in XRP")
    total_raised: Optional[float] = Field(None, description="XRP raised so far")
    investor_count: Optional[int] = Field(None, description="Number of investors")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class CreateProjectRequest(XRPLSaleModel):
    """Request model for creating a project"""
    name: str = Field(..., min_length=1, description="Project name")
    description: str = Field(..., description="Project description")
    token_symbol: str = Field(..., min_length=1, description="Token currency code")
    total_supply: str = Field(..., description="Total token supply")
    tiers: List[ProjectTier] = Field(..., min_length=1, description="Sale tiers")
    sale_start_date: datetime = Field(..., description="Sale start")
    sale_end_date: datetime = Field(..., description="Sale end")
    soft_cap: Optional[float] = Field(None, ge=0, description="Soft cap in XRP")
    hard_cap: Optional[float] = Field(None, ge=0, description="Hard cap in XRP")
    website: Optional[str] = Field(None, description="Project website")
    whitepaper_url: Optional[str] = Field(None, description="Whitepaper URL")


class ProjectStats(XRPLSaleModel):
    """Sale statistics for one project"""
    project_id: Optional[str] = Field(None, description="Project identifier")
    total_raised: float = Field(0, description="XRP raised")
    total_investors: int = Field(0, description="Distinct investors")
    tokens_sold: Optional[str] = Field(None, description="Tokens sold")
    current_tier: Optional[int] = Field(None, description="Active tier number")
    progress_percentage: Optional[float] = Field(None, description="Progress towards the hard cap")
    average_investment: Optional[float] = Field(None, description="Mean investment in XRP")
