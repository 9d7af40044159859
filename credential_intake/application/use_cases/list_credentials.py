"""Use case for summarizing the credential pool."""

from dataclasses import dataclass

from ...domain.entities import StoredCredential
from ..ports import CredentialStore


@dataclass(frozen=True, slots=True)
class CredentialPoolStatus:
    """Snapshot of the stored credentials."""

    credentials: list[StoredCredential]

    @property
    def total(self) -> int:
        """Number of stored credentials."""
        return len(self.credentials)

    @property
    def available(self) -> int:
        """Number of credentials that are not disabled."""
        return sum(1 for c in self.credentials if c.is_available)


class ListCredentials:
    """Use case returning the current credential pool status."""

    def __init__(self, credential_store: CredentialStore) -> None:
        """Initialize the use case."""
        self._store = credential_store

    async def execute(self) -> CredentialPoolStatus:
        """Read all credentials, ordered by priority then id."""
        credentials = await self._store.list_credentials()
        return CredentialPoolStatus(
            credentials=sorted(credentials, key=lambda c: (c.priority, c.id)),
        )
