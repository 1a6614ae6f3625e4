"""
Relay configuration.

Environment-based settings with the defaults the relay has always used.
Values come from the process environment, optionally seeded from a .env
file in the working directory.
"""

import os
from dataclasses import dataclass
from typing import Literal

from dotenv import load_dotenv

from inference import (
    DEFAULT_GROQ_MODEL,
    DEFAULT_GROQ_URL,
    CompletionBackend,
    GroqCompletionBackend,
    StubCompletionBackend,
)
from transport.whatsapp import DEFAULT_TRIGGER, DeviceStore, WhatsAppClient

# Load environment variables from .env file (does not override the process env)
load_dotenv()


CompletionBackendType = Literal["groq", "stub"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RelayConfigError(ValueError):
    """An environment variable holds a value the relay cannot use."""
    pass


@dataclass
class RelayConfig:
    """Relay configuration from environment."""

    # Completion
    completion_backend: CompletionBackendType
    groq_api_key: str
    groq_model: str
    groq_api_url: str

    # Relay behaviour
    trigger: str
    fallback_message: str

    # WhatsApp session
    session_db_path: str
    connect_timeout_s: float

    # Logging
    log_level: str

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """
        Load configuration from environment variables.

        GROQ_API_KEY is read here, once. An empty key is accepted and only
        fails when the first completion is attempted.

        Raises:
            RelayConfigError: unparseable timeout or unknown log level
        """
        raw_timeout = os.getenv("WHATSAPP_CONNECT_TIMEOUT_S", "60")
        try:
            connect_timeout_s = float(raw_timeout)
        except ValueError:
            raise RelayConfigError(f"WHATSAPP_CONNECT_TIMEOUT_S must be a number, got {raw_timeout!r}")
        if connect_timeout_s <= 0:
            raise RelayConfigError(f"WHATSAPP_CONNECT_TIMEOUT_S must be positive, got {raw_timeout!r}")

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise RelayConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        return cls(
            completion_backend=os.getenv("COMPLETION_BACKEND", "groq"),  # type: ignore
            groq_api_key=os.getenv("GROQ_API_KEY", ""),
            groq_model=os.getenv("GROQ_MODEL", DEFAULT_GROQ_MODEL),
            groq_api_url=os.getenv("GROQ_API_URL", DEFAULT_GROQ_URL),

            trigger=os.getenv("RELAY_TRIGGER", DEFAULT_TRIGGER),
            fallback_message=os.getenv("RELAY_FALLBACK_MESSAGE", ""),

            session_db_path=os.getenv("WHATSAPP_SESSION_DB", "whatsapp_session.db"),
            connect_timeout_s=connect_timeout_s,

            log_level=log_level,
        )

    def create_completion_backend(self) -> CompletionBackend:
        """Create completion backend instance based on configuration."""
        if self.completion_backend == "stub":
            return StubCompletionBackend()
        return GroqCompletionBackend(
            api_key=self.groq_api_key,
            model_name=self.groq_model,
            url=self.groq_api_url,
        )

    def create_whatsapp_client(self) -> WhatsAppClient:
        """Create the neonize-backed WhatsApp client."""
        from transport.whatsapp.neonize_client import NeonizeWhatsAppClient

        return NeonizeWhatsAppClient(
            session_db=self.session_db_path,
            connect_timeout_s=self.connect_timeout_s,
        )

    def create_device_store(self) -> DeviceStore:
        """Read-only probe of the client's session database."""
        return DeviceStore(self.session_db_path)


def get_config() -> RelayConfig:
    """Get relay configuration from the current environment."""
    return RelayConfig.from_env()
