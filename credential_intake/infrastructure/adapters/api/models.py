"""API request and response models (no token material exposed)."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model using camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class BatchAddRequest(CamelModel):
    """Batch of credentials sharing one priority and region."""

    # Items stay untyped so each one is validated per line, not per request.
    credentials: list[Any] = Field(description="Credential records, in submission order")
    priority: StrictInt = Field(ge=0, description="Priority for every item; lower is preferred")
    region: str | None = Field(default=None, description="Optional region for every item")


class BatchAddResultItem(CamelModel):
    """Outcome of one submitted line."""

    line: int = Field(description="1-based position in the submitted array")
    success: bool
    credential_id: int | None = None
    error: str | None = None


class BatchAddResponse(CamelModel):
    """Per-line outcomes with totals."""

    total: int
    success_count: int
    failed_count: int
    results: list[BatchAddResultItem]


class CredentialStatusItem(CamelModel):
    """Stored credential metadata."""

    id: int
    priority: int
    disabled: bool
    auth_method: str
    provider: str
    region: str | None = None


class CredentialsStatusResponse(CamelModel):
    """Credential pool status."""

    total: int
    available: int
    credentials: list[CredentialStatusItem]


class ErrorDetail(BaseModel):
    """Batch-level error description."""

    type: str
    message: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: ErrorDetail
