"""
Investment models for XRPL.Sale SDK
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import XRPLSaleModel


class Investment(XRPLSaleModel):
    """Investment in a project"""
    id: str = Field(..., description="Investment identifier")
    project_id: str = Field(..., description="Project identifier")
    investor_account: str = Field(..., description="XRPL account of the investor")
    amount_xrp: float = Field(..., description="Amount invested in XRP")
    token_amount: Optional[str] = Field(None, description="Tokens allocated")
    tier: Optional[int] = Field(None, description="Tier the investment landed in")
    status: Optional[str] = Field(None, description="Investment status")
    transaction_hash: Optional[str] = Field(None, description="XRPL transaction hash")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")


class CreateInvestmentRequest(XRPLSaleModel):
    """Request model for creating an investment"""
    project_id: str = Field(..., description="Project identifier")
    amount_xrp: float = Field(..., gt=0, description="Amount to invest in XRP")
    investor_account: str = Field(..., description="XRPL account of the investor")
    transaction_hash: Optional[str] = Field(None, description="Payment transaction hash")


class SimulateInvestmentRequest(XRPLSaleModel):
    """Request model for simulating an investment"""
    project_id: str = Field(..., description="Project identifier")
    amount_xrp: float = Field(..., gt=0, description="Amount to invest in XRP")


class SimulationResult(XRPLSaleModel):
    """Outcome of an investment simulation"""
    token_amount: Optional[str] = Field(None, description="Tokens that would be allocated")
    average_price: Optional[float] = Field(None, description="Blended price per token")
    tier_breakdown: List[Dict[str, Any]] = Field(default_factory=list, description="Allocation per tier")
    fees: Optional[float] = Field(None, description="Platform fees in XRP")
    total_cost: Optional[float] = Field(None, description="Total cost in XRP")


class InvestorSummary(XRPLSaleModel):
    """Aggregate view of one investor's activity"""
    investor_account: str = Field(..., description="XRPL account of the investor")
    total_invested: float = Field(0, description="Total XRP invested")
    total_projects: int = Field(0, description="Projects invested in")
    total_investments: int = Field(0, description="Number of investments")
    tokens: Dict[str, str] = Field(default_factory=dict, description="Token balances by symbol")
    first_investment_at: Optional[datetime] = Field(None, description="First investment")
    last_investment_at: Optional[datetime] = Field(None, description="Most recent investment")
