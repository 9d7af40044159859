"""JSON file credential store implementation."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ....application.exceptions import CredentialStoreError, DuplicateCredentialError
from ....domain.entities import CredentialItem, StoredCredential
from ....domain.value_objects import AuthMethod, CredentialProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CredentialStoreConfig:
    """Credential store configuration."""

    path: str = ""


class JsonFileCredentialStore:
    """
    Credential store backed by a JSON file.

    Implements the CredentialStore port. Without a path the pool lives in
    memory only. Writes from concurrent batches are serialized by a lock
    and refresh tokens are unique across the pool.
    """

    def __init__(self, config: CredentialStoreConfig) -> None:
        """Initialize the store, loading any existing pool from disk."""
        self._path = Path(config.path) if config.path else None
        self._lock = asyncio.Lock()
        self._credentials: dict[int, StoredCredential] = {}

        if self._path is not None and self._path.exists():
            self._credentials = {c.id: c for c in self._load(self._path)}
            logger.info("Loaded %d credentials from %s", len(self._credentials), self._path)

    async def store(
        self,
        item: CredentialItem,
        priority: int,
        region: str | None,
    ) -> int:
        """Persist one credential and return its id."""
        async with self._lock:
            if any(c.refresh_token == item.refresh_token for c in self._credentials.values()):
                msg = "credential with this refreshToken already exists"
                raise DuplicateCredentialError(msg)

            credential = StoredCredential(
                id=max(self._credentials, default=0) + 1,
                refresh_token=item.refresh_token,
                provider=item.provider,
                auth_method=item.auth_method,
                priority=priority,
                region=region,
                client_id=item.client_id,
                client_secret=item.client_secret,
            )
            self._credentials[credential.id] = credential

            try:
                await self._flush()
            except OSError as e:
                del self._credentials[credential.id]
                msg = f"failed to persist credential: {e.strerror or e}"
                raise CredentialStoreError(msg) from e

            logger.info(
                "Stored credential %d (provider=%s, priority=%d)",
                credential.id,
                credential.provider,
                credential.priority,
            )
            return credential.id

    async def list_credentials(self) -> list[StoredCredential]:
        """Return every stored credential ordered by id."""
        async with self._lock:
            return [self._credentials[key] for key in sorted(self._credentials)]

    async def _flush(self) -> None:
        """Write the pool to disk if a path is configured."""
        if self._path is None:
            return
        payload = [self._serialize(self._credentials[key]) for key in sorted(self._credentials)]
        await asyncio.to_thread(self._write, self._path, payload)

    @staticmethod
    def _write(path: Path, payload: list[dict[str, Any]]) -> None:
        """Atomically replace the credentials file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        tmp.replace(path)

    @classmethod
    def _load(cls, path: Path) -> list[StoredCredential]:
        """Read the credentials file."""
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            msg = f"Failed to read credentials file {path}: {e}"
            raise CredentialStoreError(msg) from e

        if not isinstance(raw, list):
            msg = f"Credentials file {path} must contain a JSON array"
            raise CredentialStoreError(msg)

        return [cls._deserialize(entry) for entry in raw]

    @staticmethod
    def _serialize(credential: StoredCredential) -> dict[str, Any]:
        """Map a stored credential to its file representation."""
        return {
            "id": credential.id,
            "refreshToken": credential.refresh_token,
            "provider": str(credential.provider),
            "authMethod": str(credential.auth_method),
            "clientId": credential.client_id,
            "clientSecret": credential.client_secret,
            "priority": credential.priority,
            "region": credential.region,
            "disabled": credential.disabled,
            "createdAt": credential.created_at.isoformat(),
        }

    @staticmethod
    def _deserialize(entry: Any) -> StoredCredential:
        """Map a file entry back to a stored credential."""
        if not isinstance(entry, dict):
            msg = f"Invalid credential entry in credentials file: expected object, got {type(entry).__name__}"
            raise CredentialStoreError(msg)

        try:
            provider = CredentialProvider(entry.get("provider") or CredentialProvider.default())
            created_at = entry.get("createdAt")
            return StoredCredential(
                id=int(entry["id"]),
                refresh_token=entry["refreshToken"],
                provider=provider,
                auth_method=AuthMethod(entry.get("authMethod") or provider.auth_method),
                priority=int(entry.get("priority", 0)),
                region=entry.get("region"),
                client_id=entry.get("clientId"),
                client_secret=entry.get("clientSecret"),
                disabled=bool(entry.get("disabled", False)),
                created_at=(
                    datetime.fromisoformat(created_at) if created_at else datetime.now(UTC)
                ),
            )
        except (KeyError, TypeError, ValueError) as e:
            msg = f"Invalid credential entry in credentials file: {e}"
            raise CredentialStoreError(msg) from e
