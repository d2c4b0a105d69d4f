"""
Models module for XRPL.Sale SDK
"""

from .base import XRPLSaleModel, Pagination, PaginatedResponse, ErrorResponse
from .projects import ProjectStatus, ProjectTier, Project, CreateProjectRequest, ProjectStats
from .investments import (
    Investment, CreateInvestmentRequest, SimulateInvestmentRequest,
    SimulationResult, InvestorSummary
)
from .analytics import (
    TrendPeriod, ExportFormat, PlatformAnalytics, ProjectAnalytics,
    MarketTrends, ExportDataRequest, ExportResult
)
from .auth import AuthChallenge, AuthRequest, AuthResponse, UserProfile
from .webhooks import WebhookEvent, Webhook, RegisterWebhookRequest, WebhookDelivery

__all__ = [
    # Base models
    "XRPLSaleModel",
    "Pagination",
    "PaginatedResponse",
    "ErrorResponse",

    # Project models
    "ProjectStatus",
    "ProjectTier",
    "Project",
    "CreateProjectRequest",
    "ProjectStats",

    # Investment models
    "Investment",
    "CreateInvestmentRequest",
    "SimulateInvestmentRequest",
    "SimulationResult",
    "InvestorSummary",

    # Analytics models
    "TrendPeriod",
    "ExportFormat",
    "PlatformAnalytics",
    "ProjectAnalytics",
    "MarketTrends",
    "ExportDataRequest",
    "ExportResult",

    # Auth models
    "AuthChallenge",
    "AuthRequest",
    "AuthResponse",
    "UserProfile",

    # Webhook models
    "WebhookEvent",
    "Webhook",
    "RegisterWebhookRequest",
    "WebhookDelivery",
]
