"""
Base models for XRPL.Sale SDK
"""

import math
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class XRPLSaleModel(BaseModel):
    """Base model for all XRPL.Sale entities

    Unknown response fields are kept so newer API versions do not break
    older SDKs.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        use_enum_values=True,
    )


class Pagination(XRPLSaleModel):
    """Pagination block of a list response"""
    page: int = Field(1, description="Current page")
    limit: Optional[int] = Field(None, description="Items per page")
    total: int = Field(0, description="Total number of items")
    total_pages: int = Field(
        0,
        validation_alias=AliasChoices("total_pages", "totalPages"),
        description="Total number of pages",
    )

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


class PaginatedResponse(XRPLSaleModel, Generic[T]):
    """List envelope: ``{data: [...], pagination: {...}}``"""
    data: List[T] = Field(default_factory=list, description="Page items")
    pagination: Pagination = Field(default_factory=Pagination, description="Pagination info")

    @property
    def is_last_page(self) -> bool:
        return not self.pagination.has_next


class ErrorResponse(XRPLSaleModel):
    """Error body returned with non-2xx responses"""
    message: Optional[str] = Field(None, description="Error message")
    code: Optional[str] = Field(None, description="Error code")
    details: Optional[Dict[str, Any]] = Field(None, description="Error details")
    retry_after: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("retry_after", "retryAfter"),
        description="Seconds to wait before retrying",
    )

    @field_validator("retry_after", mode="before")
    @classmethod
    def coerce_retry_after(cls, value):
        """Round fractional seconds up; unparseable hints are dropped"""
        if value is None or isinstance(value, bool):
            return None
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(seconds):
            return None
        return max(0, math.ceil(seconds))

    @classmethod
    def from_body(cls, data: Dict[str, Any]) -> "ErrorResponse":
        """Accept both flat bodies and ``{"error": {...}}`` / ``{"error": "msg"}``"""
        error = data.get("error")
        if isinstance(error, dict):
            data = error
        elif isinstance(error, str) and not data.get("message"):
            data = {**data, "message": error}
            data.pop("error")

        details = data.get("details")
        if details is not None and not isinstance(details, dict):
            data = {**data, "details": {"errors": details}}
        for name in ("message", "code"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                data = {**data, name: str(value)}
        return cls.model_validate(data)
