"""Domain services - Stateless operations on domain objects."""

from .item_validator import Invalid, ItemValidator, Valid, ValidationResult
from .result_aggregator import ResultAggregator

__all__ = [
    "Invalid",
    "ItemValidator",
    "ResultAggregator",
    "Valid",
    "ValidationResult",
]
