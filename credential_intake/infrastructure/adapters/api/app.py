"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ....domain.entities import BatchRequest
from ....domain.exceptions import BatchRejectedError, InvalidPriorityError, MalformedBatchError
from .models import (
    BatchAddRequest,
    BatchAddResponse,
    BatchAddResultItem,
    CredentialsStatusResponse,
    CredentialStatusItem,
    ErrorResponse,
    HealthResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from ....application.use_cases import BatchAddCredentials, ListCredentials
    from ....domain.entities import BatchResult

logger = logging.getLogger(__name__)


def _result_to_response(result: BatchResult) -> BatchAddResponse:
    """Convert domain result to API response."""
    return BatchAddResponse(
        total=result.total,
        success_count=result.success_count,
        failed_count=result.failed_count,
        results=[
            BatchAddResultItem(
                line=outcome.line,
                success=outcome.success,
                credential_id=outcome.credential_id,
                error=outcome.error,
            )
            for outcome in result.results
        ],
    )


def _error_response(status_code: int, error_type: str, message: str) -> JSONResponse:
    """Build the batch-level error body."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"type": error_type, "message": message}},
    )


def _classify_validation_error(exc: RequestValidationError) -> tuple[str, str]:
    """Map a request schema violation to a batch-level error type and message."""
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part != "body"]
        field = loc[0] if loc else None
        if error.get("type") == "json_invalid":
            return "invalid_request", f"request body is not valid JSON: {error.get('msg')}"
        if field == "priority":
            return InvalidPriorityError.error_type, f"priority: {error.get('msg')}"
        if field == "credentials" and len(loc) == 1:
            return MalformedBatchError.error_type, f"credentials: {error.get('msg')}"

    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(part) for part in first.get("loc", ()))
    return "invalid_request", f"{where}: {first.get('msg', 'invalid request')}"


class ApiState:
    """Shared state for API endpoints."""

    def __init__(
        self,
        batch_add: BatchAddCredentials,
        list_credentials: ListCredentials,
        version: str = "1.0.0",
    ) -> None:
        """Initialize API state."""
        self.batch_add = batch_add
        self.list_credentials = list_credentials
        self.version = version


def create_app(
    batch_add: BatchAddCredentials,
    list_credentials: ListCredentials,
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        batch_add: Use case processing credential batches.
        list_credentials: Use case reporting the credential pool.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """
    state = ApiState(batch_add=batch_add, list_credentials=list_credentials, version=version)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="Credential Intake API",
        description="Batch intake of refresh-token credentials. Each submitted line is "
        "validated and stored independently and reported back with its own outcome. "
        "**No token material is returned by this API.**",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
        description="Check if the service is healthy and running.",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=state.version,
            timestamp=datetime.now(UTC),
        )

    @app.post(
        "/api/v1/credentials/batch-add",
        response_model=BatchAddResponse,
        response_model_exclude_none=True,
        tags=["Credentials"],
        summary="Add credentials in batch",
        description="Validate and store a JSON array of credentials with one shared priority. "
        "Failures are reported per line and never abort the rest of the batch.",
        responses={
            400: {"model": ErrorResponse, "description": "Batch rejected before processing"},
        },
    )
    async def batch_add_credentials(body: BatchAddRequest) -> BatchAddResponse:
        request = BatchRequest.create(
            credentials=body.credentials,
            priority=body.priority,
            region=body.region,
        )
        logger.info("API: Batch add requested for %d credentials", request.size)
        result = await state.batch_add.execute(request)
        return _result_to_response(result)

    @app.get(
        "/api/v1/credentials",
        response_model=CredentialsStatusResponse,
        response_model_exclude_none=True,
        tags=["Credentials"],
        summary="Credential pool status",
        description="List stored credentials without any token material.",
    )
    async def get_credentials() -> CredentialsStatusResponse:
        pool = await state.list_credentials.execute()
        return CredentialsStatusResponse(
            total=pool.total,
            available=pool.available,
            credentials=[
                CredentialStatusItem(
                    id=c.id,
                    priority=c.priority,
                    disabled=c.disabled,
                    auth_method=str(c.auth_method),
                    provider=str(c.provider),
                    region=c.region,
                )
                for c in pool.credentials
            ],
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,  # noqa: ARG001
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Reject malformed submissions as a single batch-level error."""
        error_type, message = _classify_validation_error(exc)
        logger.info("API: Request rejected (%s): %s", error_type, message)
        return _error_response(status.HTTP_400_BAD_REQUEST, error_type, message)

    @app.exception_handler(BatchRejectedError)
    async def batch_rejected_handler(
        request: Request,  # noqa: ARG001
        exc: BatchRejectedError,
    ) -> JSONResponse:
        """Map batch-level domain errors to 400 responses."""
        logger.info("API: Batch rejected (%s): %s", exc.error_type, exc)
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.error_type, str(exc))

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            f"Internal server error: {exc.__class__.__name__}",
        )

    return app
