"""
Analytics models for XRPL.Sale SDK
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import XRPLSaleModel


class TrendPeriod(str, Enum):
    """Aggregation windows for market trends"""
    DAY = "24h"
    WEEK = "7d"
    MONTH = "30d"
    QUARTER = "90d"
    YEAR = "1y"


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    XLSX = "xlsx"


class PlatformAnalytics(XRPLSaleModel):
    """Platform-wide totals"""
    total_projects: int = Field(0, description="Projects on the platform")
    active_projects: int = Field(0, description="Projects currently selling")
    total_raised_xrp: float = Field(0, description="XRP raised across all projects")
    total_investors: int = Field(0, description="Distinct investors")
    total_investments: int = Field(0, description="Investments made")
    average_investment: Optional[float] = Field(None, description="Mean investment in XRP")


class ProjectAnalytics(XRPLSaleModel):
    """Time series analytics for one project"""
    project_id: str = Field(..., description="Project identifier")
    start_date: Optional[date] = Field(None, description="Window start")
    end_date: Optional[date] = Field(None, description="Window end")
    total_raised: float = Field(0, description="XRP raised in the window")
    investor_count: int = Field(0, description="Investors in the window")
    daily_stats: List[Dict[str, Any]] = Field(default_factory=list, description="Per-day figures")


class MarketTrends(XRPLSaleModel):
    """Market-level trend figures for a period"""
    period: str = Field(..., description="Aggregation window")
    trending_projects: List[Dict[str, Any]] = Field(default_factory=list, description="Projects gaining momentum")
    volume_xrp: Optional[float] = Field(None, description="Volume in XRP")
    volume_change_percentage: Optional[float] = Field(None, description="Change against the previous window")
    new_investors: Optional[int] = Field(None, description="First-time investors in the window")


class ExportDataRequest(XRPLSaleModel):
    """Request model for exporting analytics data"""
    type: str = Field(..., description="Dataset to export (projects, investments, ...)")
    format: ExportFormat = Field(ExportFormat.CSV, description="Export file format")
    start_date: Optional[date] = Field(None, description="Window start")
    end_date: Optional[date] = Field(None, description="Window end")
    project_id: Optional[str] = Field(None, description="Restrict to one project")


class ExportResult(XRPLSaleModel):
    """Location of a generated export"""
    download_url: str = Field(..., description="Signed download URL")
    expires_at: Optional[datetime] = Field(None, description="URL expiry")
    format: Optional[str] = Field(None, description="Export file format")
    record_count: Optional[int] = Field(None, description="Exported rows")
