"""
Core module for XRPL.Sale SDK
"""

from .client import XRPLSaleClient, create_client, client
from .config import (
    ClientConfig, RetryConfig, Environment, get_default_config, get_api_key,
    PRODUCTION_BASE_URL, TESTNET_BASE_URL
)
from .auth import AuthManager
from .http import HTTPClient, AttemptOutcome, should_retry, calculate_retry_delay
from .webhooks import WebhookVerifier, SIGNATURE_HEADER
from .logging import setup_logging
from .exceptions import (
    XRPLSaleError, ConfigurationError, WebhookError,
    APIError, NotFoundError, AuthenticationError, ValidationError, RateLimitError,
    TransportError, NetworkError, RequestTimeoutError, RequestCancelledError,
    UnsupportedMethodError
)

__all__ = [
    "XRPLSaleClient",
    "create_client",
    "client",
    "ClientConfig",
    "RetryConfig",
    "Environment",
    "get_default_config",
    "get_api_key",
    "PRODUCTION_BASE_URL",
    "TESTNET_BASE_URL",
    "AuthManager",
    "HTTPClient",
    "AttemptOutcome",
    "should_retry",
    "calculate_retry_delay",
    "WebhookVerifier",
    "SIGNATURE_HEADER",
    "setup_logging",
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
