"""
Webhook management service for XRPL.Sale SDK
"""

from typing import Any, Dict, List, Optional

from ..core.http import HTTPClient
from ..models.base import PaginatedResponse
from ..models.webhooks import RegisterWebhookRequest, Webhook, WebhookDelivery


class WebhooksService:
    """Webhook management service"""

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    async def register(self, request: RegisterWebhookRequest, *, deadline: Optional[float] = None) -> Webhook:
        """Register a new webhook"""
        response = await self.http_client.post("/webhooks", json=request, deadline=deadline)
        return self.http_client.decode_as(Webhook, response)

    async def list(self, *, deadline: Optional[float] = None) -> List[Webhook]:
        """List registered webhooks"""
        response = await self.http_client.get("/webhooks", deadline=deadline)
        # accept both a bare list and the {data: [...]} envelope
        if isinstance(response, dict):
            response = response.get("data", [])
        return [self.http_client.decode_as(Webhook, item) for item in response or []]

    async def get(self, webhook_id: str, *, deadline: Optional[float] = None) -> Webhook:
        """Get webhook details"""
        response = await self.http_client.get(f"/webhooks/{webhook_id}", deadline=deadline)
        return self.http_client.decode_as(Webhook, response)

    async def update(
        self, webhook_id: str, updates: Dict[str, Any], *, deadline: Optional[float] = None
    ) -> Webhook:
        """Partially update a webhook"""
        response = await self.http_client.patch(f"/webhooks/{webhook_id}", json=updates, deadline=deadline)
        return self.http_client.decode_as(Webhook, response)

    async def delete(self, webhook_id: str, *, deadline: Optional[float] = None) -> None:
        """Delete a webhook"""
        await self.http_client.delete(f"/webhooks/{webhook_id}", deadline=deadline)

    async def test(self, webhook_id: str, *, deadline: Optional[float] = None) -> None:
        """Send a test delivery to a webhook"""
        await self.http_client.post(f"/webhooks/{webhook_id}/test", deadline=deadline)

    async def get_deliveries(
        self,
        webhook_id: str,
        page: int = 1,
        limit: int = 10,
        *,
        deadline: Optional[float] = None,
    ) -> PaginatedResponse[WebhookDelivery]:
        """List delivery attempts for a webhook"""
        params = {"page": str(page), "limit": str(limit)}
        response = await self.http_client.get(
            f"/webhooks/{webhook_id}/deliveries", params=params, deadline=deadline
        )
        return self.http_client.decode_as(PaginatedResponse[WebhookDelivery], response)
