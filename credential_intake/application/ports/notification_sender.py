"""Port for notification sending - driven/secondary port."""

from typing import Protocol

from ...domain.entities import BatchResult


class NotificationSender(Protocol):
    """
    Port for sending notifications.

    This is a driven (secondary) port that defines how the application
    reports finished batches to external systems.
    """

    async def send(self, result: BatchResult) -> bool:
        """
        Send a notification about a finished batch.

        Args:
            result: The aggregated batch result.

        Returns:
            True if notification was sent successfully.

        Raises:
            NotificationError: If sending fails.
        """
        ...

    def is_configured(self) -> bool:
        """
        Check if this notification sender is properly configured.

        Returns:
            True if the sender is ready to send notifications.
        """
        ...
