"""
Session bootstrap.

Brings the relay up: probe the stored device identity, wire the message
router into the client, pair on first run, connect, then block until the
process is told to stop.
"""

import logging
import signal
import threading
from typing import Callable, Optional

from inference import CompletionBackend
from transport.whatsapp import (
    ClientEvent,
    DeviceStore,
    DeviceStoreError,
    MessageRouter,
    PairingCodeEvent,
    WhatsAppClient,
    render_pairing_code,
)

from .config import RelayConfig, get_config

logger = logging.getLogger(__name__)


class FatalBootstrapError(Exception):
    """Identity store or connection failure at startup. Not retried."""
    pass


class SessionBootstrap:
    """
    Establish or resume the WhatsApp session and run the relay.

    Collaborators default to the ones the configuration creates; tests pass
    their own.
    """

    def __init__(
        self,
        config: Optional[RelayConfig] = None,
        client: Optional[WhatsAppClient] = None,
        backend: Optional[CompletionBackend] = None,
        store: Optional[DeviceStore] = None,
        render_code: Callable[[str], None] = render_pairing_code,
    ):
        self.config = config or get_config()
        self._client = client
        self.backend = backend or self.config.create_completion_backend()
        self.store = store or self.config.create_device_store()
        self.render_code = render_code
        self.router: Optional[MessageRouter] = None
        self.pairing = False
        # Set once pairing succeeds; callers may wait on it
        self.paired = threading.Event()

    @property
    def client(self) -> WhatsAppClient:
        if self._client is None:
            self._client = self.config.create_whatsapp_client()
        return self._client

    def start(self) -> None:
        """
        Connect, pairing first if no device identity is stored.

        Raises:
            FatalBootstrapError: store unreadable or connection failed
        """
        try:
            has_identity = self.store.has_device()
        except DeviceStoreError as e:
            raise FatalBootstrapError(str(e)) from e

        try:
            client = self.client
        except Exception as e:
            raise FatalBootstrapError(f"Cannot create WhatsApp client: {e}") from e

        self.router = MessageRouter(
            client,
            self.backend,
            trigger=self.config.trigger,
            fallback_message=self.config.fallback_message,
        )
        client.add_event_handler(self.router)

        if not has_identity:
            # No ID stored, new login
            logger.info("No stored device identity, starting pairing")
            self.pairing = True
            client.add_event_handler(self._on_pairing_event)
        else:
            logger.info("Stored device identity found, resuming session")

        try:
            client.connect()
        except Exception as e:
            raise FatalBootstrapError(f"Cannot connect to WhatsApp: {e}") from e

        logger.info("WhatsApp client connected")

    def run(self, stop: Optional[threading.Event] = None) -> None:
        """
        Start, then block until SIGINT/SIGTERM (or stop is set), then disconnect.

        Raises:
            FatalBootstrapError: see start()
        """
        stop = stop or threading.Event()
        if threading.current_thread() is threading.main_thread():
            for signum in (signal.SIGINT, signal.SIGTERM):
                signal.signal(signum, lambda *_: stop.set())

        self.start()

        while not stop.wait(1.0):
            pass

        logger.info("Shutdown requested")
        self.client.disconnect()

    def _on_pairing_event(self, event: ClientEvent) -> None:
        if not self.pairing:
            return
        if isinstance(event, PairingCodeEvent):
            self.render_code(event.code)
            return
        if event.type == "other":
            logger.info(f"Login event: {event.kind}")
            if event.kind == "success":
                logger.info(f"Device paired as {event.detail or 'unknown user'}")
                self.pairing = False
                self.paired.set()


def bootstrap_relay(config: Optional[RelayConfig] = None) -> SessionBootstrap:
    """Create a bootstrap for the given (or environment) configuration."""
    return SessionBootstrap(config)
