"""Domain value objects - Immutable objects defined by their attributes."""

from .auth_method import AuthMethod
from .credential_provider import CredentialProvider
from .item_outcome import ItemOutcome

__all__ = [
    "AuthMethod",
    "CredentialProvider",
    "ItemOutcome",
]
