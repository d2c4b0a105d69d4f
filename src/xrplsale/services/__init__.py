"""
Services module for XRPL.Sale SDK
"""

from .projects import ProjectsService
from .investments import InvestmentsService
from .analytics import AnalyticsService
from .auth import AuthService
from .webhooks import WebhooksService

__all__ = [
    "ProjectsService",
    "InvestmentsService",
    "AnalyticsService",
    "AuthService",
    "WebhooksService",
]
