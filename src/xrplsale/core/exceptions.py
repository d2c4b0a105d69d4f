"""
Custom exceptions for XRPL.Sale SDK
"""

from typing import Any, Dict, Optional


class XRPLSaleError(Exception):
    """Base exception for XRPL.Sale SDK"""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self):
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(XRPLSaleError):
    """Configuration error"""

    def __init__(self, message: str = "Configuration error", details: dict = None):
        super().__init__(message, "CONFIG_ERROR", details)


class WebhookError(XRPLSaleError):
    """Inbound webhook could not be decoded or verified"""

    def __init__(self, message: str = "Invalid webhook payload", details: dict = None):
        super().__init__(message, "WEBHOOK_ERROR", details)


# API errors: the request completed with a non-2xx status


class APIError(XRPLSaleError):
    """Non-2xx response from the API"""

    def __init__(
        self,
        message: str = "API request failed",
        status_code: int = None,
        code: str = None,
        details: dict = None,
    ):
        super().__init__(message, code, details)
        self.status_code = status_code

    def __str__(self):
        base = super().__str__()
        if self.status_code:
            return f"[HTTP {self.status_code}] {base}"
        return base


class NotFoundError(APIError):
    """Resource not found"""


class AuthenticationError(APIError):
    """Missing, invalid or expired credentials"""


class ValidationError(APIError):
    """Request payload rejected; ``details`` holds the field-level errors"""


class RateLimitError(APIError):
    """Rate limit exceeded"""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        status_code: int = 429,
        code: str = None,
        details: dict = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, status_code, code, details)
        self.retry_after = retry_after

    def __str__(self):
        if self.retry_after:
            return f"{super().__str__()} (retry after {self.retry_after}s)"
        return super().__str__()


# Transport errors: the request never completed


class TransportError(XRPLSaleError):
    """Request did not produce an HTTP response"""

    def __init__(self, message: str = "Request failed", code: str = "TRANSPORT_ERROR", details: dict = None):
        super().__init__(message, code, details)


class NetworkError(TransportError):
    """Connection error"""

    def __init__(self, message: str = "Connection error", details: dict = None):
        super().__init__(message, "CONNECTION_ERROR", details)


class RequestTimeoutError(TransportError):
    """Request timeout"""

    def __init__(self, message: str = "Request timeout", timeout: float = None, details: dict = None):
        super().__init__(message, "TIMEOUT_ERROR", details)
        self.timeout = timeout

    def __str__(self):
        if self.timeout:
            return f"{super().__str__()} (after {self.timeout}s)"
        return super().__str__()


class RequestCancelledError(TransportError):
    """Request aborted because its deadline expired"""

    def __init__(self, message: str = "Request cancelled", deadline: float = None, details: dict = None):
        super().__init__(message, "CANCELLED", details)
        self.deadline = deadline


class UnsupportedMethodError(TransportError):
    """HTTP verb the transport does not issue"""

    def __init__(self, method: str, details: dict = None):
        super().__init__(f"unsupported method: {method}", "UNSUPPORTED_METHOD", details)
        self.method = method


ERRORS_BY_STATUS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    422: ValidationError,
    429: RateLimitError,
}


def error_for_status(
    status_code: int,
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    retry_after: Optional[int] = None,
) -> APIError:
    """Build the typed error for a decoded error body"""
    error_cls = ERRORS_BY_STATUS.get(status_code, APIError)
    if error_cls is RateLimitError:
        return RateLimitError(message, status_code, code, details, retry_after=retry_after)
    return error_cls(message, status_code, code, details)
