"""
Message Router

Per-event handler registered with the messaging client.
Trigger check, completion call, formatting and reply, all inline on the
client's dispatch thread. Stateless between events: concurrent invocations
share only the client, which is used for sends.
"""

import logging
from typing import Optional

from inference import CompletionBackend, CompletionError

from .base import WhatsAppClient
from .formatting import to_whatsapp_format
from .schemas import ClientEvent, MessageEvent, OutboundReply
from .sender import WhatsAppSenderError, send_reply

logger = logging.getLogger(__name__)

DEFAULT_TRIGGER = "0>"


def extract_prompt(text: str, trigger: str = DEFAULT_TRIGGER) -> Optional[str]:
    """
    Return the prompt carried by a triggered message, or None.

    Detection is a substring check, stripping removes one "<trigger> ".
    The two do not agree: "x0>y" is detected but nothing is stripped, and
    the whole text becomes the prompt.
    """
    if text == trigger:
        return ""
    if trigger not in text:
        return None
    return text.replace(f"{trigger} ", "", 1)


class MessageRouter:
    """
    Relay triggered chat messages to the completion backend.

    A failed completion produces silence unless fallback_message is set.
    """

    def __init__(
        self,
        client: WhatsAppClient,
        backend: CompletionBackend,
        trigger: str = DEFAULT_TRIGGER,
        fallback_message: str = "",
    ):
        self.client = client
        self.backend = backend
        self.trigger = trigger
        self.fallback_message = fallback_message

    def __call__(self, event: ClientEvent) -> Optional[OutboundReply]:
        return self.handle(event)

    def handle(self, event: ClientEvent) -> Optional[OutboundReply]:
        """
        Handle one client event.

        Returns:
            The reply sent to the chat, or None when nothing was sent
        """
        if not isinstance(event, MessageEvent):
            return None

        prompt = extract_prompt(event.text, self.trigger)
        if prompt is None:
            return None

        logger.info(
            f"The user name is: {event.sender_id}",
            extra={"sender_id": event.sender_id, "chat_id": event.chat_id},
        )

        try:
            completion = self.backend.complete(prompt)
        except CompletionError as e:
            logger.error(
                f"Failed to get completion: {e}",
                extra={
                    "sender_id": event.sender_id,
                    "error_type": type(e).__name__,
                },
            )
            if self.fallback_message:
                return self._send(OutboundReply(chat_id=event.chat_id, text=self.fallback_message))
            return None

        reply = OutboundReply(chat_id=event.chat_id, text=to_whatsapp_format(completion))
        return self._send(reply)

    def _send(self, reply: OutboundReply) -> Optional[OutboundReply]:
        try:
            return send_reply(self.client, reply)
        except WhatsAppSenderError:
            # Already logged by the sender; the event is done either way
            return None
