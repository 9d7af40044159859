"""Domain service for structural validation of submitted credentials."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..entities import CredentialItem
from ..entities.batch_request import as_item_sequence
from ..value_objects import CredentialProvider


@dataclass(frozen=True, slots=True)
class Valid:
    """Item passed structural validation."""

    item: CredentialItem


@dataclass(frozen=True, slots=True)
class Invalid:
    """Item failed structural validation at the given line."""

    line: int
    reason: str


ValidationResult = Valid | Invalid


class ItemValidator:
    """
    Validates raw credential records against provider rules.

    Rules are checked in order and the first failure wins. Per-item
    problems are returned as ``Invalid`` and never raised.
    """

    @staticmethod
    def ensure_sequence(payload: Any) -> tuple[Any, ...]:
        """
        Check the top-level payload before any item is looked at.

        Raises:
            MalformedBatchError: If the payload is not an array.
        """
        return as_item_sequence(payload)

    def validate(self, item: Any, index: int) -> ValidationResult:
        """
        Validate one raw item.

        Args:
            item: The untrusted record, normally a decoded JSON object.
            index: 0-based position of the item in the batch.

        Returns:
            Valid with the normalized item, or Invalid with line ``index + 1``.
        """
        line = index + 1

        if not isinstance(item, Mapping):
            return Invalid(line=line, reason="item must be a JSON object")

        refresh_token = item.get("refreshToken")
        if not isinstance(refresh_token, str) or not refresh_token:
            return Invalid(line=line, reason="missing required field refreshToken")

        raw_provider = item.get("provider")
        if not raw_provider:
            provider = CredentialProvider.default()
        else:
            provider = CredentialProvider.parse(raw_provider)
            if provider is None:
                allowed = ", ".join(CredentialProvider.allowed_values())
                return Invalid(
                    line=line,
                    reason=f"invalid provider {raw_provider!r}, allowed values: {allowed}",
                )

        missing = [name for name in provider.required_fields if not _optional_str(item.get(name))]
        if missing:
            required = " and ".join(provider.required_fields)
            return Invalid(line=line, reason=f"provider {provider} requires {required}")

        return Valid(
            item=CredentialItem(
                refresh_token=refresh_token,
                provider=provider,
                client_id=_optional_str(item.get("clientId")),
                client_secret=_optional_str(item.get("clientSecret")),
            )
        )

    def validate_all(self, items: Any) -> list[ValidationResult]:
        """Validate every item of a payload, in order."""
        return [self.validate(item, index) for index, item in enumerate(self.ensure_sequence(items))]

    def first_invalid(self, items: Any) -> Invalid | None:
        """Return the first failing item, mirroring a client-side pre-check."""
        for result in self.validate_all(items):
            if isinstance(result, Invalid):
                return result
        return None


def _optional_str(value: Any) -> str | None:
    """Keep non-empty strings, drop everything else."""
    return value if isinstance(value, str) and value else None
