"""
Stub messaging client for testing and offline development.

Deterministic and in-memory: events are injected with emit(), sends are
recorded in sent.
"""

from typing import List, Optional, Tuple

from .base import EventHandler, WhatsAppClient
from .schemas import ClientEvent


class StubWhatsAppClient(WhatsAppClient):
    """In-memory WhatsApp client."""

    def __init__(
        self,
        connect_error: Optional[Exception] = None,
        send_error: Optional[Exception] = None,
    ):
        self.handlers: List[EventHandler] = []
        self.sent: List[Tuple[str, str]] = []
        self.connected = False
        self.connect_error = connect_error
        self.send_error = send_error

    def add_event_handler(self, handler: EventHandler) -> None:
        self.handlers.append(handler)

    def connect(self) -> None:
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    def disconnect(self) -> None:
        self.connected = False

    def send_text(self, chat_id: str, text: str) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append((chat_id, text))

    def emit(self, event: ClientEvent) -> None:
        """Deliver an event to every registered handler, in order."""
        for handler in self.handlers:
            handler(event)
