"""Generic webhook notification sender."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx

from .base import BaseNotificationSender

if TYPE_CHECKING:
    from ....domain.entities import BatchResult


@dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Webhook notification configuration."""

    enabled: bool = False
    url: str = ""
    timeout: float = 30.0


class WebhookNotificationSender(BaseNotificationSender):
    """Send batch summaries via generic HTTP webhook with JSON payload."""

    def __init__(self, config: WebhookConfig) -> None:
        """Initialize the webhook sender."""
        super().__init__()
        self._config = config

    def is_configured(self) -> bool:
        """Check if webhook is properly configured."""
        return self._config.enabled and bool(self._config.url)

    async def send(self, result: BatchResult) -> bool:
        """Send webhook notification with JSON payload."""
        if not self.is_configured():
            self._logger.warning("Webhook sender not configured")
            return False

        try:
            payload = self.build_payload(result)

            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.post(
                    self._config.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()

            self._logger.info("Webhook notification sent to %s", self._config.url)
            return True

        except Exception:
            self._logger.exception("Failed to send webhook notification")
            return False

    def build_payload(self, result: BatchResult) -> dict:
        """Build the JSON payload for the webhook (no token material)."""
        return {
            "event_type": "credentials_batch_added",
            "timestamp": datetime.now(UTC).isoformat(),
            "summary": result.get_summary(),
            "text": "\n".join(filter(None, [result.get_summary(), self.format_failure_list(result)])),
            "statistics": {
                "total": result.total,
                "success_count": result.success_count,
                "failed_count": result.failed_count,
            },
            "credential_ids": result.credential_ids,
            "failures": [
                {"line": outcome.line, "error": outcome.error}
                for outcome in result.failures
            ],
        }
