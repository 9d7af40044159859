"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ..adapters.notifications.webhook import WebhookConfig
from ..adapters.storage.json_file import CredentialStoreConfig

RUN_MODES = ("api", "import")


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "api"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # Credential store
    credentials_file: str = field(default_factory=lambda: _env_str("CREDENTIALS_FILE"))
    default_region: str = field(default_factory=lambda: _env_str("DEFAULT_REGION"))

    # Import mode
    import_file: str = field(default_factory=lambda: _env_str("IMPORT_FILE"))
    import_priority: int = field(default_factory=lambda: _env_int("IMPORT_PRIORITY", 0))
    import_region: str = field(default_factory=lambda: _env_str("IMPORT_REGION"))

    # Webhook settings
    webhook_enabled: bool = field(default_factory=lambda: _env_bool("WEBHOOK_ENABLED"))
    webhook_url: str = field(default_factory=lambda: _env_str("WEBHOOK_URL"))

    # API settings
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))

    def validate(self) -> None:
        """Validate required settings."""
        mode = self.run_mode.lower()
        if mode not in RUN_MODES:
            msg = f"Invalid RUN_MODE: {self.run_mode} (use one of: {', '.join(RUN_MODES)})"
            raise ValueError(msg)

        if mode == "import" and not self.import_file:
            msg = "Missing required environment variables: IMPORT_FILE"
            raise ValueError(msg)

        if self.import_priority < 0:
            msg = f"IMPORT_PRIORITY must be >= 0, got {self.import_priority}"
            raise ValueError(msg)

        if self.webhook_enabled and not self.webhook_url:
            msg = "Missing required environment variables: WEBHOOK_URL"
            raise ValueError(msg)

    @cached_property
    def store_config(self) -> CredentialStoreConfig:
        """Get credential store configuration."""
        return CredentialStoreConfig(path=self.credentials_file)

    @cached_property
    def webhook_config(self) -> WebhookConfig:
        """Get webhook configuration."""
        return WebhookConfig(
            enabled=self.webhook_enabled,
            url=self.webhook_url,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
