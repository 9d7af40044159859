"""Base notification sender with common functionality."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ....domain.entities import BatchResult


class BaseNotificationSender(ABC):
    """Abstract base class for notification senders."""

    def __init__(self) -> None:
        """Initialize the notification sender."""
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def send(self, result: BatchResult) -> bool:
        """Send notification for the given batch result."""
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the sender is properly configured."""
        ...

    def format_failure_list(
        self,
        result: BatchResult,
        *,
        max_items: int = 10,
    ) -> str:
        """Format failed lines for display."""
        failures = result.failures
        lines = [f"• line {outcome.line}: {outcome.error}" for outcome in failures[:max_items]]

        if len(failures) > max_items:
            lines.append(f"... and {len(failures) - max_items} more")

        return "\n".join(lines)
