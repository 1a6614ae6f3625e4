"""
Messaging client boundary.

The relay only needs four things from a WhatsApp client: register an event
handler, connect, disconnect, and send a text message to a chat. Everything
else (pairing protocol, encryption, framing) belongs to the client library.
"""

from abc import ABC, abstractmethod
from typing import Callable

from .schemas import ClientEvent

EventHandler = Callable[[ClientEvent], None]


class WhatsAppClient(ABC):
    """
    Abstract messaging client.
    Relay code must depend ONLY on this interface.
    """

    @abstractmethod
    def add_event_handler(self, handler: EventHandler) -> None:
        """Register a callback invoked once per delivered event."""
        raise NotImplementedError

    @abstractmethod
    def connect(self) -> None:
        """
        Open the connection.

        Raises:
            ConnectionError: the connection could not be established
        """
        raise NotImplementedError

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection."""
        raise NotImplementedError

    @abstractmethod
    def send_text(self, chat_id: str, text: str) -> None:
        """Send a plain-text message to a chat ('user@server')."""
        raise NotImplementedError
