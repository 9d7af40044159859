"""Normalized credential item produced by structural validation."""

from dataclasses import dataclass

from ..value_objects import AuthMethod, CredentialProvider


@dataclass(frozen=True, slots=True)
class CredentialItem:
    """A structurally valid credential ready to be stored."""

    refresh_token: str
    provider: CredentialProvider
    client_id: str | None = None
    client_secret: str | None = None

    @property
    def auth_method(self) -> AuthMethod:
        """Refresh flow implied by the provider."""
        return self.provider.auth_method

    def __repr__(self) -> str:
        # Never render token material.
        return f"CredentialItem(provider={self.provider!s}, has_client={self.client_id is not None})"
