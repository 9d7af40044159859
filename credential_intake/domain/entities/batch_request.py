"""Batch submission entity."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Self

from ..exceptions import EmptyBatchError, InvalidPriorityError, MalformedBatchError


def as_item_sequence(payload: Any) -> tuple[Any, ...]:
    """
    Return the payload as a tuple of raw items.

    Raises:
        MalformedBatchError: If the payload is not an array-like sequence.
    """
    if (
        not isinstance(payload, Sequence)
        or isinstance(payload, (str, bytes, bytearray, Mapping))
    ):
        msg = f"credentials must be a JSON array, got {type(payload).__name__}"
        raise MalformedBatchError(msg)
    return tuple(payload)


@dataclass(frozen=True, slots=True)
class BatchRequest:
    """
    A single submission of credentials processed together.

    Items stay raw: each one is validated on its own so one bad entry
    cannot reject the whole batch. The position of an item in ``items``
    defines its 1-based line number in the result.
    """

    items: tuple[Any, ...]
    priority: int
    region: str | None = None

    def __post_init__(self) -> None:
        """Enforce batch-level rules."""
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            msg = f"priority must be an integer, got {type(self.priority).__name__}"
            raise InvalidPriorityError(msg)
        if self.priority < 0:
            msg = f"priority must be >= 0, got {self.priority}"
            raise InvalidPriorityError(msg)
        if not self.items:
            msg = "batch must contain at least one credential"
            raise EmptyBatchError(msg)
        if self.region is not None and (not isinstance(self.region, str) or not self.region.strip()):
            msg = "region must be a non-empty string when provided"
            raise MalformedBatchError(msg)

    @property
    def size(self) -> int:
        """Number of submitted items."""
        return len(self.items)

    @classmethod
    def create(
        cls,
        *,
        credentials: Any,
        priority: Any,
        region: str | None = None,
    ) -> Self:
        """Factory method to build a BatchRequest from an untrusted payload."""
        if isinstance(region, str) and not region.strip():
            region = None

        return cls(
            items=as_item_sequence(credentials),
            priority=priority,
            region=region,
        )
