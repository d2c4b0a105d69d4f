"""
Webhook signature verification and event parsing for XRPL.Sale SDK
"""

import hashlib
import hmac
import json
import logging
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..models.webhooks import WebhookEvent
from .exceptions import WebhookError

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-XRPL-Sale-Signature"
SIGNATURE_PREFIX = "sha256="

Payload = Union[bytes, bytearray, str]


def _as_bytes(payload: Payload) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


class WebhookVerifier:
    """Verifies and decodes inbound webhook deliveries

    Verification and parsing are independent: call ``verify_signature`` on
    the raw body before trusting anything ``parse_event`` returns, or use
    ``construct_event`` to do both.
    """

    def __init__(self, secret: Optional[str] = None):
        self.secret = secret or None

    @staticmethod
    def compute_signature(payload: Payload, secret: str) -> str:
        """Compute the ``sha256=<hex>`` signature of a raw payload"""
        digest = hmac.new(
            secret.encode("utf-8"),
            _as_bytes(payload),
            hashlib.sha256,
        ).hexdigest()
        return SIGNATURE_PREFIX + digest

    def verify_signature(self, payload: Payload, signature: Optional[str]) -> bool:
        """
        Check a signature header against the raw, unparsed request body.

        Returns False when no secret is configured or no signature was sent.
        """
        if not self.secret or not signature:
            return False

        expected = self.compute_signature(payload, self.secret)
        return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))

    @staticmethod
    def parse_event(payload: Payload) -> WebhookEvent:
        """Decode a webhook body into a WebhookEvent

        Raises:
            WebhookError: If the body is not a JSON object with a ``type``.
        """
        try:
            data = json.loads(_as_bytes(payload))
        except ValueError as e:
            raise WebhookError(f"Malformed webhook payload: {e}") from e

        if not isinstance(data, dict):
            raise WebhookError("Webhook payload must be a JSON object")

        try:
            return WebhookEvent.model_validate(data)
        except PydanticValidationError as e:
            raise WebhookError("Webhook payload does not match the event shape", details={"errors": e.errors()}) from e

    def construct_event(self, payload: Payload, signature: Optional[str]) -> WebhookEvent:
        """Verify the signature, then parse the event"""
        if not self.verify_signature(payload, signature):
            logger.warning("Rejected webhook with invalid signature")
            raise WebhookError("Invalid webhook signature")
        return self.parse_event(payload)
