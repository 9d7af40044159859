"""Infrastructure adapters - Implementations of application ports."""

from .notifications import WebhookNotificationSender
from .storage import JsonFileCredentialStore

__all__ = [
    "JsonFileCredentialStore",
    "WebhookNotificationSender",
]
