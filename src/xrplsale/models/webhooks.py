"""
Webhook models for XRPL.Sale SDK
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .base import XRPLSaleModel


class WebhookEvent(XRPLSaleModel):
    """Inbound event pushed to a registered webhook URL"""
    type: str = Field(..., description="Event type, e.g. investment.created")
    data: Dict[str, Any] = Field(default_factory=dict, description="Event payload")
    id: Optional[str] = Field(None, description="Event identifier")
    timestamp: Optional[datetime] = Field(None, description="When the event occurred")

    @field_validator("data", mode="before")
    @classmethod
    def null_data_is_empty(cls, value):
        return {} if value is None else value


class Webhook(XRPLSaleModel):
    """Registered webhook endpoint"""
    id: str = Field(..., description="Webhook identifier")
    url: str = Field(..., description="Delivery URL")
    events: List[str] = Field(default_factory=list, description="Subscribed event types")
    active: bool = Field(True, description="Whether deliveries are sent")
    secret: Optional[str] = Field(None, description="Signing secret, returned on registration only")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class RegisterWebhookRequest(XRPLSaleModel):
    """Request model for registering a webhook"""
    url: str = Field(..., min_length=1, description="Delivery URL")
    events: List[str] = Field(..., min_length=1, description="Event types to subscribe to")
    secret: Optional[str] = Field(None, description="Signing secret; generated when omitted")
    description: Optional[str] = Field(None, description="Free-form label")


class WebhookDelivery(XRPLSaleModel):
    """One delivery attempt of an event to a webhook"""
    id: str = Field(..., description="Delivery identifier")
    webhook_id: Optional[str] = Field(None, description="Webhook identifier")
    event_type: Optional[str] = Field(None, description="Delivered event type")
    status: Optional[str] = Field(None, description="Delivery status")
    response_code: Optional[int] = Field(None, description="HTTP status returned by the receiver")
    attempts: Optional[int] = Field(None, description="Attempts made")
    delivered_at: Optional[datetime] = Field(None, description="Delivery timestamp")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
