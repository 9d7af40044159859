"""Application ports - Interfaces for external adapters."""

from .credential_store import CredentialStore
from .notification_sender import NotificationSender

__all__ = [
    "CredentialStore",
    "NotificationSender",
]
