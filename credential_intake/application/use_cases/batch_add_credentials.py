"""Use case for adding a batch of credentials with per-line outcomes."""

import logging

from ...domain.entities import BatchRequest, BatchResult
from ...domain.services import Invalid, ItemValidator, ResultAggregator
from ...domain.value_objects import ItemOutcome
from ..exceptions import CredentialStoreError
from ..ports import CredentialStore, NotificationSender

logger = logging.getLogger(__name__)


class BatchAddCredentials:
    """
    Use case for validating and storing a batch of credentials.

    Every item is handled in isolation: a validation or persistence
    failure is recorded against its line and the next item is processed.
    Items are stored strictly in input order, one at a time.
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        notification_senders: list[NotificationSender] | None = None,
        *,
        default_region: str | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            credential_store: Adapter persisting accepted credentials.
            notification_senders: Adapters told about finished batches.
            default_region: Region used when a batch does not name one.
        """
        self._store = credential_store
        self._senders = [s for s in notification_senders or [] if s.is_configured()]
        self._validator = ItemValidator()
        self._aggregator = ResultAggregator()
        self._default_region = default_region or None

    async def execute(self, request: BatchRequest) -> BatchResult:
        """
        Process a batch and report one outcome per submitted line.

        Returns:
            BatchResult covering every line of the request.
        """
        region = request.region or self._default_region
        logger.info(
            "Processing batch of %d credentials (priority=%d, region=%s)",
            request.size,
            request.priority,
            region or "-",
        )

        outcomes: list[ItemOutcome] = []
        for index, raw in enumerate(request.items):
            outcomes.append(await self._process_item(raw, index, request.priority, region))

        result = self._aggregator.aggregate(outcomes)
        logger.info("Batch complete: %s", result.get_summary())

        if self._senders:
            sent, failed = await self._send_notifications(result)
            logger.info("Notifications: %d sent, %d failed", sent, failed)

        return result

    async def _process_item(
        self,
        raw: object,
        index: int,
        priority: int,
        region: str | None,
    ) -> ItemOutcome:
        """Validate and store a single item, capturing any failure as data."""
        validation = self._validator.validate(raw, index)
        if isinstance(validation, Invalid):
            logger.info("Line %d rejected: %s", validation.line, validation.reason)
            return ItemOutcome.failed(validation.line, validation.reason)

        line = index + 1
        try:
            credential_id = await self._store.store(validation.item, priority, region)
        except CredentialStoreError as e:
            logger.warning("Line %d not stored: %s", line, e)
            return ItemOutcome.failed(line, str(e) or "credential store rejected the item")
        except Exception as e:
            logger.exception("Unexpected credential store failure on line %d", line)
            return ItemOutcome.failed(line, f"credential store failure: {e.__class__.__name__}")

        logger.debug("Line %d stored as credential %d", line, credential_id)
        return ItemOutcome.succeeded(line, credential_id)

    async def _send_notifications(self, result: BatchResult) -> tuple[int, int]:
        """Send the result through all configured senders."""
        sent = 0
        failed = 0

        for sender in self._senders:
            try:
                if await sender.send(result):
                    sent += 1
                    logger.info("Notification sent via %s", sender.__class__.__name__)
                else:
                    failed += 1
                    logger.warning("Notification failed via %s", sender.__class__.__name__)
            except Exception:
                failed += 1
                logger.exception("Error sending notification via %s", sender.__class__.__name__)

        return sent, failed
