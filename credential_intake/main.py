#!/usr/bin/env python3
"""
Credential Intake Service

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from . import __version__
from .application.use_cases import BatchAddCredentials, ListCredentials
from .domain.entities import BatchRequest
from .domain.exceptions import BatchRejectedError, MalformedBatchError
from .domain.services import Invalid, ItemValidator
from .infrastructure.adapters import JsonFileCredentialStore, WebhookNotificationSender
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import NotificationSender
    from .domain.entities import BatchResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self._store: JsonFileCredentialStore | None = None

    def credential_store(self) -> JsonFileCredentialStore:
        """Get the shared credential store adapter."""
        if self._store is None:
            self._store = JsonFileCredentialStore(self._settings.store_config)
        return self._store

    def create_notification_senders(self) -> list[NotificationSender]:
        """Create all configured notification sender adapters."""
        senders: list[NotificationSender] = [
            WebhookNotificationSender(self._settings.webhook_config),
        ]

        configured = [s for s in senders if s.is_configured()]
        logger.info(
            "Configured notification senders: %s",
            [s.__class__.__name__ for s in configured] or "None",
        )

        return senders

    def create_batch_add_use_case(self) -> BatchAddCredentials:
        """Create the batch intake use case with all dependencies."""
        return BatchAddCredentials(
            credential_store=self.credential_store(),
            notification_senders=self.create_notification_senders(),
            default_region=self._settings.default_region,
        )

    def create_list_use_case(self) -> ListCredentials:
        """Create the pool status use case."""
        return ListCredentials(credential_store=self.credential_store())


def read_import_file(path: Path) -> object:
    """
    Read a JSON credentials array from disk.

    Raises:
        MalformedBatchError: If the file cannot be read or is not valid JSON.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        msg = f"cannot read import file {path}: {e.strerror or e}"
        raise MalformedBatchError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"import file {path} is not valid JSON: {e}"
        raise MalformedBatchError(msg) from e


class Application:
    """
    Main application orchestrator.

    Handles run modes (API server or one-shot file import) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def run_import(self) -> BatchResult:
        """Import the configured credentials file as a single batch."""
        path = Path(self._settings.import_file)
        logger.info("Importing credentials from %s", path)

        payload = read_import_file(path)
        request = BatchRequest.create(
            credentials=payload,
            priority=self._settings.import_priority,
            region=self._settings.import_region or None,
        )

        rejected = [r for r in ItemValidator().validate_all(request.items) if isinstance(r, Invalid)]
        if rejected:
            logger.warning(
                "Pre-check: %d of %d lines will be rejected (first: line %d, %s)",
                len(rejected),
                request.size,
                rejected[0].line,
                rejected[0].reason,
            )

        result = await self._container.create_batch_add_use_case().execute(request)
        for outcome in result.failures:
            logger.warning("Line %d: %s", outcome.line, outcome.error)
        return result

    async def run_api(self) -> None:
        """Run in API server mode."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            batch_add=self._container.create_batch_add_use_case(),
            list_credentials=self._container.create_list_use_case(),
            version=__version__,
        )

        config = uvicorn.Config(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )
        await uvicorn.Server(config).serve()

    async def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        match self._settings.run_mode.lower():
            case "api":
                await self.run_api()
                return 0

            case "import":
                try:
                    result = await self.run_import()
                except BatchRejectedError as e:
                    logger.error("Import rejected (%s): %s", e.error_type, e)
                    return 1
                return 0 if result.all_succeeded else 1

            case _:
                logger.error(
                    "Invalid RUN_MODE: %s (use 'api' or 'import')",
                    self._settings.run_mode,
                )
                return 1


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("Credential Intake Service starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
