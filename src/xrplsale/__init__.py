"""
XRPL.Sale Python SDK
Official Python client library for the XRPL.Sale token launch platform
"""

__version__ = "1.0.0"
__author__ = "XRPL.Sale Team"
__email__ = "developers@xrpl.sale"

# Core client
from .core.client import XRPLSaleClient, create_client, client

# Configuration
from .core.config import (
    ClientConfig, RetryConfig, Environment, get_default_config, get_api_key,
    PRODUCTION_BASE_URL, TESTNET_BASE_URL
)

# Webhooks
from .core.webhooks import WebhookVerifier, SIGNATURE_HEADER

# Logging
from .core.logging import setup_logging

# Models
from .models.base import Pagination, PaginatedResponse
from .models.projects import ProjectStatus, ProjectTier, Project, CreateProjectRequest, ProjectStats
from .models.investments import (
    Investment, CreateInvestmentRequest, SimulateInvestmentRequest,
    SimulationResult, InvestorSummary
)
from .models.analytics import (
    TrendPeriod, ExportFormat, PlatformAnalytics, ProjectAnalytics,
    MarketTrends, ExportDataRequest, ExportResult
)
from .models.auth import AuthChallenge, AuthRequest, AuthResponse, UserProfile
from .models.webhooks import WebhookEvent, Webhook, RegisterWebhookRequest, WebhookDelivery

# Services (for advanced usage)
from .services.projects import ProjectsService
from .services.investments import InvestmentsService
from .services.analytics import AnalyticsService
from .services.auth import AuthService
from .services.webhooks import WebhooksService

# Exceptions
from .core.exceptions import (
    XRPLSaleError, ConfigurationError, WebhookError,
    APIError, NotFoundError, AuthenticationError, ValidationError, RateLimitError,
    TransportError, NetworkError, RequestTimeoutError, RequestCancelledError,
    UnsupportedMethodError
)

# Main exports
__all__ = [
    # Core client
    "XRPLSaleClient",
    "create_client",
    "client",

    # Configuration
    "ClientConfig",
    "RetryConfig",
    "Environment",
    "get_default_config",
    "get_api_key",
    "PRODUCTION_BASE_URL",
    "TESTNET_BASE_URL",

    # Webhooks
    "WebhookVerifier",
    "SIGNATURE_HEADER",

    # Logging
    "setup_logging",

    # Models
    "Pagination",
    "PaginatedResponse",
    "ProjectStatus",
    "ProjectTier",
    "Project",
    "CreateProjectRequest",
    "ProjectStats",
    "Investment",
    "CreateInvestmentRequest",
    "SimulateInvestmentRequest",
    "SimulationResult",
    "InvestorSummary",
    "TrendPeriod",
    "ExportFormat",
    "PlatformAnalytics",
    "ProjectAnalytics",
    "MarketTrends",
    "ExportDataRequest",
    "ExportResult",
    "AuthChallenge",
    "AuthRequest",
    "AuthResponse",
    "UserProfile",
    "WebhookEvent",
    "Webhook",
    "RegisterWebhookRequest",
    "WebhookDelivery",

    # Services
    "ProjectsService",
    "InvestmentsService",
    "AnalyticsService",
    "AuthService",
    "WebhooksService",

    # Exceptions
    "XRPLSaleError",
    "ConfigurationError",
    "WebhookError",
    "APIError",
    "NotFoundError",
    "AuthenticationError",
    "ValidationError",
    "RateLimitError",
    "TransportError",
    "NetworkError",
    "RequestTimeoutError",
    "RequestCancelledError",
    "UnsupportedMethodError",
]


# Version info
def get_version() -> str:
    """Get SDK version"""
    return __version__


def get_info() -> dict:
    """Get SDK information"""
    return {
        "name": "xrplsale",
        "version": __version__,
        "author": __author__,
        "email": __email__,
        "description": "Official Python SDK for XRPL.Sale",
        "url": "https://github.com/xrplsale/python-sdk"
    }
