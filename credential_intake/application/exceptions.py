"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class CredentialStoreError(ApplicationError):
    """Raised when the credential store rejects or fails to persist an item."""


class DuplicateCredentialError(CredentialStoreError):
    """Raised when a refresh token is already present in the store."""


class NotificationError(ApplicationError):
    """Raised when notification sending fails."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
