"""Stored credential entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..value_objects import AuthMethod, CredentialProvider


@dataclass(slots=True)
class StoredCredential:
    """A credential accepted into the pool, as held by a credential store."""

    id: int
    refresh_token: str = field(repr=False)
    provider: CredentialProvider
    auth_method: AuthMethod
    priority: int
    region: str | None = None
    client_id: str | None = field(default=None, repr=False)
    client_secret: str | None = field(default=None, repr=False)
    disabled: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_available(self) -> bool:
        """Check if this credential can be handed out."""
        return not self.disabled
