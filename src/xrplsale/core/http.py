"""
HTTP client with authentication and retry logic for XRPL.Sale SDK
"""

import asyncio
import json as jsonlib
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import aiohttp
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..models.base import ErrorResponse
from .auth import AuthManager
from .config import DEFAULT_USER_AGENT, RetryConfig
from .exceptions import (
    APIError, NetworkError, RequestCancelledError, RequestTimeoutError,
    UnsupportedMethodError, error_for_status,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

# Errors raised by aiohttp before a response is received
RETRYABLE_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


@dataclass
class AttemptOutcome:
    """Result of a single HTTP attempt: either a response or a network error"""
    status: Optional[int] = None
    reason: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status is not None and 200 <= self.status < 300


def should_retry(outcome: AttemptOutcome) -> bool:
    """Retry network failures and 5xx responses; never 4xx"""
    if outcome.error is not None:
        return isinstance(outcome.error, RETRYABLE_ERRORS)
    return outcome.status is not None and outcome.status >= 500


def calculate_retry_delay(retry_config: RetryConfig, attempt: int) -> float:
    """Exponential backoff capped at max_delay; non-decreasing in attempt"""
    if retry_config.base_delay <= 0:
        return 0.0
    try:
        delay = retry_config.base_delay * (retry_config.exponential_base ** attempt)
    except OverflowError:
        return retry_config.max_delay
    return min(delay, retry_config.max_delay)


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """
    Parse Retry-After header which may be:
    - Delta seconds (int or float string)
    - HTTP-date
    Returns seconds (int, >= 0) or None when absent or unparseable.
    """
    if not value:
        return None
    try:
        return max(0, int(float(value)))
    except (ValueError, TypeError):
        pass
    try:
        dt = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = (dt - datetime.now(timezone.utc)).total_seconds()
    return max(0, int(delta))


def build_query_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Flatten query options to a string-keyed, string-valued mapping"""
    if not params:
        return {}
    query = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[str(key)] = str(value)
    return query


class HTTPClient:
    """HTTP client with authentication and retry logic"""

    def __init__(
        self,
        base_url: str,
        auth_manager: AuthManager,
        timeout: float = 30.0,
        retry_config: Optional[RetryConfig] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        debug: bool = False,
    ):
        self.base_url = base_url.rstrip('/')
        self.auth_manager = auth_manager
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.retry_config = retry_config or RetryConfig()
        self.user_agent = user_agent
        self.debug = debug
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry"""
        self._session = aiohttp.ClientSession(
            timeout=self.timeout,
            headers={
                "User-Agent": self.user_agent,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None

    @property
    def is_connected(self) -> bool:
        """Check if client is connected"""
        return self._session is not None and not self._session.closed

    def _build_url(self, endpoint: str) -> str:
        """Build an absolute URL from base_url and endpoint (idempotent)."""
        if endpoint.startswith("http://") or endpoint.startswith("https://"):
            return endpoint
        if not endpoint.startswith("/"):
            endpoint = "/" + endpoint
        return f"{self.base_url}{endpoint}"

    @staticmethod
    def _serialize_body(body: Any) -> Any:
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", exclude_none=True, by_alias=True)
        return body

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
        deadline: Optional[float] = None,
    ) -> Any:
        """
        Execute a request and return the decoded JSON body.

        Args:
            method: One of GET, POST, PUT, PATCH, DELETE.
            endpoint: Path relative to the base URL.
            json: Optional request body (dict or pydantic model).
            params: Optional query options, flattened to strings.
            timeout: Per-attempt timeout override in seconds.
            deadline: Budget in seconds for the whole call, retries included.

        Raises:
            UnsupportedMethodError: For any other verb; nothing is sent.
            APIError: Non-2xx response (typed by status where known).
            TransportError: No response after the retry budget, or deadline hit.
        """
        verb = method.upper()
        if verb not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(method)

        call = self._make_request(verb, endpoint, json=json, params=params, timeout=timeout)
        if deadline is None:
            return await call
        try:
            return await asyncio.wait_for(call, deadline)
        except asyncio.TimeoutError:
            logger.warning(f"{verb} {endpoint} cancelled after {deadline}s deadline")
            raise RequestCancelledError(
                f"Request cancelled: deadline of {deadline}s exceeded", deadline=deadline
            )

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Make HTTP request with retry logic"""
        if not self.is_connected:
            raise NetworkError("Client not connected. Use async context manager.")

        url = self._build_url(endpoint)
        kwargs: Dict[str, Any] = {
            "headers": self.auth_manager.get_headers(),
            "timeout": aiohttp.ClientTimeout(total=timeout) if timeout else self.timeout,
        }
        query = build_query_params(params)
        if query:
            kwargs["params"] = query
        if json is not None:
            kwargs["json"] = self._serialize_body(json)

        max_retries = self.retry_config.max_retries
        for attempt in range(max_retries + 1):
            if self.debug:
                logger.debug(f"{method} {url} attempt {attempt + 1} params={query} body={kwargs.get('json')}")

            outcome = await self._send(method, url, **kwargs)

            if self.debug and outcome.error is None:
                logger.debug(f"{method} {url} -> {outcome.status} {outcome.body[:512]!r}")

            if not should_retry(outcome) or attempt == max_retries:
                break

            delay = calculate_retry_delay(self.retry_config, attempt)
            cause = outcome.error or f"HTTP {outcome.status}"
            logger.warning(
                f"{method} {url} failed ({cause}); retry {attempt + 1}/{max_retries} in {delay:.2f}s"
            )
            await asyncio.sleep(delay)

        return self._handle_outcome(method, url, outcome, attempts=attempt + 1)

    async def _send(self, method: str, url: str, **kwargs) -> AttemptOutcome:
        """Issue one attempt; network errors are returned, not raised"""
        try:
            async with self._session.request(method, url, **kwargs) as response:
                body = await response.read()
                return AttemptOutcome(
                    status=response.status,
                    reason=response.reason,
                    headers=dict(response.headers),
                    body=body,
                )
        except RETRYABLE_ERRORS as e:
            return AttemptOutcome(error=e)

    def _handle_outcome(self, method: str, url: str, outcome: AttemptOutcome, attempts: int) -> Any:
        """Turn the final attempt into a decoded body or a typed error"""
        if outcome.error is not None:
            logger.error(f"{method} {url} failed after {attempts} attempts: {outcome.error!r}")
            if isinstance(outcome.error, asyncio.TimeoutError):
                raise RequestTimeoutError(
                    f"Request timed out after {attempts} attempts",
                    timeout=self.timeout.total,
                ) from outcome.error
            raise NetworkError(
                f"Request failed after {attempts} attempts: {outcome.error}"
            ) from outcome.error

        if outcome.ok:
            return self._decode_success(outcome)

        error = self._decode_error(outcome)
        logger.error(f"{method} {url} -> {outcome.status}: {error.message}")
        raise error

    @staticmethod
    def _decode_success(outcome: AttemptOutcome) -> Any:
        if not outcome.body.strip():
            return None
        try:
            return jsonlib.loads(outcome.body)
        except ValueError:
            raise APIError(
                f"Invalid JSON in {outcome.status} response",
                status_code=outcome.status,
                details={"body": outcome.body[:512].decode("utf-8", errors="replace")},
            )

    @staticmethod
    def _decode_error(outcome: AttemptOutcome) -> APIError:
        """Structured message first; status-code fallback when it is empty"""
        decoded = ErrorResponse()
        try:
            data = jsonlib.loads(outcome.body) if outcome.body.strip() else None
            if isinstance(data, dict):
                decoded = ErrorResponse.from_body(data)
        except (ValueError, PydanticValidationError):
            pass

        if not decoded.message:
            return APIError(
                f"API error: {outcome.status} {outcome.reason or ''}".rstrip(),
                status_code=outcome.status,
            )

        retry_after = decoded.retry_after
        if retry_after is None:
            retry_after = parse_retry_after(outcome.headers.get("Retry-After"))

        return error_for_status(
            outcome.status,
            decoded.message,
            code=decoded.code,
            details=decoded.details,
            retry_after=retry_after,
        )

    @staticmethod
    def decode_as(model: Type[M], data: Any) -> M:
        """Validate a decoded body into ``model``; an empty body counts as ``{}``

        Raises:
            APIError: If the body does not fit the model.
        """
        try:
            return model.model_validate(data if data is not None else {})
        except PydanticValidationError as e:
            raise APIError(
                f"Invalid response body for {model.__name__}",
                details={"errors": e.errors(include_url=False)},
            ) from e

    # HTTP method wrappers
    async def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None, **kwargs) -> Any:
        """GET request"""
        return await self.request("GET", endpoint, params=params, **kwargs)

    async def post(self, endpoint: str, json: Any = None, **kwargs) -> Any:
        """POST request"""
        return await self.request("POST", endpoint, json=json, **kwargs)

    async def put(self, endpoint: str, json: Any = None, **kwargs) -> Any:
        """PUT request"""
        return await self.request("PUT", endpoint, json=json, **kwargs)

    async def patch(self, endpoint: str, json: Any = None, **kwargs) -> Any:
        """PATCH request"""
        return await self.request("PATCH", endpoint, json=json, **kwargs)

    async def delete(self, endpoint: str, **kwargs) -> Any:
        """DELETE request"""
        return await self.request("DELETE", endpoint, **kwargs)
