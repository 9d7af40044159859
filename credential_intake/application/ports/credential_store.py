"""Port for credential persistence - driven/secondary port."""

from typing import Protocol

from ...domain.entities import CredentialItem, StoredCredential


class CredentialStore(Protocol):
    """
    Port for persisting accepted credentials.

    This is a driven (secondary) port. The store owns its own concurrency
    control, including uniqueness of refresh tokens across batches.
    """

    async def store(
        self,
        item: CredentialItem,
        priority: int,
        region: str | None,
    ) -> int:
        """
        Persist one structurally valid credential.

        Args:
            item: The normalized credential.
            priority: Batch-wide priority (lower is preferred).
            region: Optional region for the credential.

        Returns:
            The id assigned to the stored credential.

        Raises:
            CredentialStoreError: If the store rejects or cannot persist the item.
        """
        ...

    async def list_credentials(self) -> list[StoredCredential]:
        """
        Return every stored credential ordered by id.

        Raises:
            CredentialStoreError: If the store cannot be read.
        """
        ...
