"""Application use cases."""

from .batch_add_credentials import BatchAddCredentials
from .list_credentials import CredentialPoolStatus, ListCredentials

__all__ = [
    "BatchAddCredentials",
    "CredentialPoolStatus",
    "ListCredentials",
]
