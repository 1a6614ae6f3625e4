"""
neonize-backed WhatsApp client.

neonize wraps whatsmeow: it owns pairing, encryption and the sqlite session
store. This adapter translates its events into the relay's schemas and
exposes the WhatsAppClient boundary.

neonize's connect() blocks for the lifetime of the connection, so it runs
on a daemon thread; connect() here returns once the socket is up or a
pairing code has been issued.
"""

import logging
import threading
from typing import Any, List, Optional

from neonize.client import NewClient
from neonize.events import ConnectedEv, LoggedOutEv, MessageEv, PairStatusEv
from neonize.utils import build_jid

from .base import EventHandler, WhatsAppClient
from .normalize import (
    NormalizationError,
    normalize_message_event,
    normalize_other_event,
    normalize_pairing_code,
)
from .schemas import ClientEvent

logger = logging.getLogger(__name__)


class NeonizeWhatsAppClient(WhatsAppClient):
    """WhatsApp multi-device client on top of neonize.NewClient."""

    def __init__(self, session_db: str, connect_timeout_s: float = 60.0):
        """
        Args:
            session_db:        sqlite path neonize uses as its device store
            connect_timeout_s: How long connect() waits for the socket
        """
        self.session_db = session_db
        self.connect_timeout_s = connect_timeout_s
        self._handlers: List[EventHandler] = []
        self._ready = threading.Event()
        self._failure: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

        self._client = NewClient(session_db)
        self._client.qr(self._on_qr)
        self._client.event(MessageEv)(self._on_message)
        self._client.event(ConnectedEv)(self._on_connected)
        self._client.event(PairStatusEv)(self._on_pair_status)
        self._client.event(LoggedOutEv)(self._on_logged_out)

    # ------------------------------------------------------------------
    # WhatsAppClient
    # ------------------------------------------------------------------

    def add_event_handler(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    def connect(self) -> None:
        self._ready.clear()
        self._failure = None
        self._thread = threading.Thread(
            target=self._run, name="neonize-connection", daemon=True
        )
        self._thread.start()

        if not self._ready.wait(self.connect_timeout_s):
            raise ConnectionError(
                f"WhatsApp connection not established after {self.connect_timeout_s}s"
            )
        if self._failure is not None:
            raise ConnectionError(f"WhatsApp connection failed: {self._failure}") from self._failure

    def disconnect(self) -> None:
        logger.info("Disconnecting WhatsApp client")
        self._client.disconnect()

    def send_text(self, chat_id: str, text: str) -> None:
        user, _, server = chat_id.partition("@")
        jid = build_jid(user, server) if server else build_jid(user)
        self._client.send_message(jid, text)

    # ------------------------------------------------------------------
    # neonize callbacks
    # ------------------------------------------------------------------

    def _run(self) -> None:
        try:
            self._client.connect()
        except Exception as e:
            logger.error(f"neonize connection crashed: {e}", exc_info=True)
            self._failure = e
        finally:
            # Unblocks connect() if we never got as far as a ready signal
            self._ready.set()

    def _on_qr(self, _: NewClient, data: bytes) -> None:
        self._ready.set()
        self._dispatch(normalize_pairing_code(data))

    def _on_message(self, _: NewClient, event: MessageEv) -> None:
        try:
            normalized = normalize_message_event(event)
        except NormalizationError as e:
            logger.warning(f"Dropping undecodable message event: {e}")
            return
        self._dispatch(normalized)

    def _on_connected(self, _: NewClient, __: ConnectedEv) -> None:
        self._ready.set()
        self._dispatch(normalize_other_event("connected"))

    def _on_pair_status(self, _: NewClient, event: PairStatusEv) -> None:
        if event.Status == PairStatusEv.SUCCESS:
            self._dispatch(normalize_other_event("success", _paired_user(event)))
        else:
            self._dispatch(normalize_other_event("error", getattr(event, "Error", None) or None))

    def _on_logged_out(self, _: NewClient, event: LoggedOutEv) -> None:
        self._dispatch(normalize_other_event("logged_out", getattr(event, "Reason", None)))

    def _dispatch(self, event: ClientEvent) -> None:
        for handler in self._handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Event handler failed on {event.type} event: {e}",
                    exc_info=True,
                )


def _paired_user(event: Any) -> Optional[str]:
    jid = getattr(event, "ID", None)
    return getattr(jid, "User", None)
