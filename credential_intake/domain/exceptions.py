"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class BatchRejectedError(DomainError):
    """Raised when a whole batch is refused before any item is processed."""

    error_type = "invalid_batch"


class MalformedBatchError(BatchRejectedError):
    """Raised when the submitted credentials payload is not a sequence."""

    error_type = "malformed_batch"


class EmptyBatchError(BatchRejectedError):
    """Raised when a batch contains no credentials."""

    error_type = "empty_batch"


class InvalidPriorityError(BatchRejectedError):
    """Raised when the batch priority is not a non-negative integer."""

    error_type = "invalid_priority"
