"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from credential_intake.domain.entities import CredentialItem, StoredCredential
from credential_intake.infrastructure.adapters.storage import (
    CredentialStoreConfig,
    JsonFileCredentialStore,
)


class FakeCredentialStore:
    """In-memory credential store recording every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[CredentialItem, int, str | None]] = []
        self.failures: dict[str, Exception] = {}
        self._next_id = 100

    def fail_for(self, refresh_token: str, error: Exception) -> None:
        """Make storing the given token raise ``error``."""
        self.failures[refresh_token] = error

    async def store(self, item: CredentialItem, priority: int, region: str | None) -> int:
        self.calls.append((item, priority, region))
        if item.refresh_token in self.failures:
            raise self.failures[item.refresh_token]
        self._next_id += 1
        return self._next_id

    async def list_credentials(self) -> list[StoredCredential]:
        return []


@pytest.fixture
def fake_store() -> FakeCredentialStore:
    """Credential store double."""
    return FakeCredentialStore()


@pytest.fixture
def memory_store() -> JsonFileCredentialStore:
    """Real store adapter without a backing file."""
    return JsonFileCredentialStore(CredentialStoreConfig())


@pytest.fixture
def builder_id_item() -> dict[str, Any]:
    """A complete BuilderId record."""
    return {
        "refreshToken": "aorAAAAAGnSbUI4-builder",
        "provider": "BuilderId",
        "clientId": "BsV6HMJyIAIb1pCxuApfynVzLWVhc3QtMQ",
        "clientSecret": "eyJraWQiOiJrZXktMTU2NDAyODA5OSIsImFsZyI6IkhTMzg0In0",
    }


@pytest.fixture
def github_item() -> dict[str, Any]:
    """A complete Github record (no client fields needed)."""
    return {"refreshToken": "aorAAAAAGniZhQj-github", "provider": "Github"}


@pytest.fixture
def google_item() -> dict[str, Any]:
    """A complete Google record."""
    return {"refreshToken": "aorAAAAAGoogle-token", "provider": "Google"}

