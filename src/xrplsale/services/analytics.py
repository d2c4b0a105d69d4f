"""
Analytics service for XRPL.Sale SDK
"""

from datetime import date
from typing import Optional, Union

from ..core.http import HTTPClient
from ..models.analytics import (
    ExportDataRequest, ExportResult, MarketTrends, PlatformAnalytics,
    ProjectAnalytics, TrendPeriod
)

DATE_FORMAT = "%Y-%m-%d"


class AnalyticsService:
    """Analytics service"""

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    async def get_platform_analytics(self, *, deadline: Optional[float] = None) -> PlatformAnalytics:
        """Get platform-wide analytics"""
        response = await self.http_client.get("/analytics/platform", deadline=deadline)
        return self.http_client.decode_as(PlatformAnalytics, response)

    async def get_project_analytics(
        self,
        project_id: str,
        start_date: date,
        end_date: date,
        *,
        deadline: Optional[float] = None,
    ) -> ProjectAnalytics:
        """Get analytics for one project between two dates (inclusive)"""
        params = {
            "start_date": start_date.strftime(DATE_FORMAT),
            "end_date": end_date.strftime(DATE_FORMAT),
        }
        response = await self.http_client.get(
            f"/analytics/projects/{project_id}", params=params, deadline=deadline
        )
        return self.http_client.decode_as(ProjectAnalytics, response)

    async def get_market_trends(
        self, period: Union[TrendPeriod, str] = TrendPeriod.WEEK, *, deadline: Optional[float] = None
    ) -> MarketTrends:
        """Get market trends for a period"""
        if isinstance(period, TrendPeriod):
            period = period.value
        response = await self.http_client.get("/analytics/trends", params={"period": period}, deadline=deadline)
        return self.http_client.decode_as(MarketTrends, response)

    async def export_data(self, request: ExportDataRequest, *, deadline: Optional[float] = None) -> ExportResult:
        """Request an export of analytics data"""
        response = await self.http_client.post("/analytics/export", json=request, deadline=deadline)
        return self.http_client.decode_as(ExportResult, response)
