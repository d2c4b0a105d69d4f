"""
Investment service for XRPL.Sale SDK
"""

from typing import Optional

from ..core.http import HTTPClient
from ..models.base import PaginatedResponse
from ..models.investments import (
    CreateInvestmentRequest, Investment, InvestorSummary,
    SimulateInvestmentRequest, SimulationResult
)


class InvestmentsService:
    """Investment service"""

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    async def create(self, request: CreateInvestmentRequest, *, deadline: Optional[float] = None) -> Investment:
        """Create a new investment"""
        response = await self.http_client.post("/investments", json=request, deadline=deadline)
        return self.http_client.decode_as(Investment, response)

    async def get(self, investment_id: str, *, deadline: Optional[float] = None) -> Investment:
        """Get investment details"""
        response = await self.http_client.get(f"/investments/{investment_id}", deadline=deadline)
        return self.http_client.decode_as(Investment, response)

    async def get_by_project(
        self,
        project_id: str,
        page: int = 1,
        limit: int = 10,
        *,
        deadline: Optional[float] = None,
    ) -> PaginatedResponse[Investment]:
        """List investments made in a project"""
        params = {"page": str(page), "limit": str(limit)}
        response = await self.http_client.get(
            f"/projects/{project_id}/investments", params=params, deadline=deadline
        )
        return self.http_client.decode_as(PaginatedResponse[Investment], response)

    async def get_investor_summary(
        self, investor_account: str, *, deadline: Optional[float] = None
    ) -> InvestorSummary:
        """Get an investor's aggregate activity"""
        response = await self.http_client.get(f"/investors/{investor_account}/summary", deadline=deadline)
        return self.http_client.decode_as(InvestorSummary, response)

    async def simulate(
        self, request: SimulateInvestmentRequest, *, deadline: Optional[float] = None
    ) -> SimulationResult:
        """Simulate an investment without committing it"""
        response = await self.http_client.post("/investments/simulate", json=request, deadline=deadline)
        return self.http_client.decode_as(SimulationResult, response)
