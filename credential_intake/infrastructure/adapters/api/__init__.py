"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import BatchAddRequest, BatchAddResponse, HealthResponse

__all__ = [
    "BatchAddRequest",
    "BatchAddResponse",
    "HealthResponse",
    "create_app",
]
