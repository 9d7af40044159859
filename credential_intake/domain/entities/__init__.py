"""Domain entities - Objects with identity and lifecycle."""

from .batch_request import BatchRequest
from .batch_result import BatchResult
from .credential_item import CredentialItem
from .stored_credential import StoredCredential

__all__ = [
    "BatchRequest",
    "BatchResult",
    "CredentialItem",
    "StoredCredential",
]
