"""
WhatsApp Response Sender

Hands a formatted reply to the messaging client.
No formatting intelligence. No retries. No logic.
"""

import logging

from .base import WhatsAppClient
from .schemas import OutboundReply

logger = logging.getLogger(__name__)


class WhatsAppSenderError(Exception):
    """Failed to send response to WhatsApp."""
    pass


def send_reply(client: WhatsAppClient, reply: OutboundReply) -> OutboundReply:
    """
    Send a reply to its chat.

    Args:
        client: Connected messaging client
        reply: Chat identifier and text body

    Returns:
        The reply that was sent

    Raises:
        WhatsAppSenderError: If the client fails to send
    """
    try:
        client.send_text(reply.chat_id, reply.text)
    except Exception as e:
        logger.error(
            f"Failed to send reply to {reply.chat_id}: {e}",
            exc_info=True,
            extra={"chat_id": reply.chat_id, "error": str(e)},
        )
        raise WhatsAppSenderError(f"Send failed: {e}") from e

    logger.info(
        f"Reply sent to {reply.chat_id}",
        extra={"chat_id": reply.chat_id, "length": len(reply.text)},
    )
    return reply
