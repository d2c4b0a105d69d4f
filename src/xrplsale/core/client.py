"""
Main client for XRPL.Sale API
Includes auto API key detection and context manager support
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional, Union

from ..core.config import ClientConfig, Environment, get_default_config
from ..core.auth import AuthManager
from ..core.http import HTTPClient
from ..core.logging import setup_logging
from ..core.webhooks import WebhookVerifier, Payload
from ..models.webhooks import WebhookEvent
from ..services.projects import ProjectsService
from ..services.investments import InvestmentsService
from ..services.analytics import AnalyticsService
from ..services.auth import AuthService
from ..services.webhooks import WebhooksService

logger = logging.getLogger(__name__)


class XRPLSaleClient:
    """Main client for XRPL.Sale API

    Use as an async context manager so the underlying HTTP session is opened
    and closed::

        async with XRPLSaleClient(api_key="...") as client:
            projects = await client.projects.get_active()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        environment: Union[Environment, str, None] = None,
        base_url: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        auth_token: Optional[str] = None,
        **options: Any,
    ):
        # Explicit arguments win over config, config over the environment
        overrides = dict(api_key=api_key, environment=environment, base_url=base_url, **options)
        if config is not None:
            self.config = config.with_overrides(**overrides)
        else:
            self.config = get_default_config(**overrides)

        if self.config.debug:
            setup_logging("DEBUG")

        self.auth_manager = AuthManager(self.config.api_key, auth_token=auth_token)
        self.http_client = HTTPClient(
            base_url=self.config.base_url,
            auth_manager=self.auth_manager,
            timeout=self.config.timeout,
            retry_config=self.config.retry_config,
            user_agent=self.config.user_agent,
            debug=self.config.debug,
        )
        self.webhook_verifier = WebhookVerifier(self.config.webhook_secret)

        # Initialize services
        self.auth = AuthService(self.http_client)
        self.projects = ProjectsService(self.http_client)
        self.investments = InvestmentsService(self.http_client)
        self.analytics = AnalyticsService(self.http_client)
        self.webhooks = WebhooksService(self.http_client)

        logger.debug(f"Initialized XRPL.Sale client for {self.config.base_url}")

    async def __aenter__(self):
        """Async context manager entry"""
        await self.http_client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.http_client.__aexit__(exc_type, exc_val, exc_tb)

    async def close(self) -> None:
        await self.http_client.close()

    @property
    def is_connected(self) -> bool:
        """Check if client is connected"""
        return self.http_client.is_connected

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def auth_token(self) -> Optional[str]:
        return self.auth_manager.auth_token

    def set_auth_token(self, token: Optional[str]) -> None:
        """Set the bearer token used for subsequent requests"""
        self.auth_manager.set_auth_token(token)

    @property
    def api_info(self) -> Dict[str, Any]:
        """Get client configuration (API key masked)"""
        return {
            "base_url": self.config.base_url,
            "environment": self.config.environment.value,
            "timeout": self.config.timeout,
            "max_retries": self.config.max_retries,
            "user_agent": self.config.user_agent,
            "api_key": self.auth_manager.get_api_key_info()["masked"] or None,
            "authenticated": self.auth_manager.is_authenticated,
        }

    # Webhook helpers delegate to the verifier configured with webhook_secret

    def verify_webhook_signature(self, payload: Payload, signature: Optional[str]) -> bool:
        """Verify a webhook signature against the configured secret"""
        return self.webhook_verifier.verify_signature(payload, signature)

    def parse_webhook_event(self, payload: Payload) -> WebhookEvent:
        """Parse a webhook body; does not verify the signature"""
        return self.webhook_verifier.parse_event(payload)

    def construct_webhook_event(self, payload: Payload, signature: Optional[str]) -> WebhookEvent:
        """Verify then parse a webhook body"""
        return self.webhook_verifier.construct_event(payload, signature)


# Factory function for easy client creation
def create_client(
    api_key: Optional[str] = None,
    environment: Union[Environment, str, None] = None,
    base_url: Optional[str] = None,
    config: Optional[ClientConfig] = None,
    **options: Any,
) -> XRPLSaleClient:
    """Create XRPL.Sale client with auto-detection"""
    return XRPLSaleClient(
        api_key=api_key, environment=environment, base_url=base_url, config=config, **options
    )


# Context manager for easy usage
@asynccontextmanager
async def client(
    api_key: Optional[str] = None,
    environment: Union[Environment, str, None] = None,
    base_url: Optional[str] = None,
    config: Optional[ClientConfig] = None,
    **options: Any,
):
    """Context manager for XRPL.Sale client"""
    async with create_client(api_key, environment, base_url, config, **options) as sdk_client:
        yield sdk_client
