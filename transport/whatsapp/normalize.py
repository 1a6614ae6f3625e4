"""
WhatsApp Input Normalization

PURE CONVERSION - NO LOGIC, NO MODEL CALLS

Converts decoded client events (neonize/whatsmeow protobuf objects) into the
relay's event schemas. Attribute access only, so the functions work on any
object with the same shape and never import the client library.
"""

from typing import Any

from .schemas import MessageEvent, OtherEvent, PairingCodeEvent


class NormalizationError(Exception):
    """Input normalization failed."""
    pass


def jid_to_string(jid: Any) -> str:
    """Render a JID as 'user@server'."""
    try:
        user = jid.User
        server = jid.Server
    except AttributeError as e:
        raise NormalizationError(f"Invalid JID: {e}")
    return f"{user}@{server}"


def normalize_message_event(event: Any) -> MessageEvent:
    """
    Convert a MessageEv into MessageEvent.

    Only the plain conversation text is extracted. Any other payload
    (media, reactions, extended text) yields an empty text.

    Raises:
        NormalizationError: event is missing its routing info
    """
    try:
        source = event.Info.MessageSource
        sender_id = source.Sender.User
        chat_id = jid_to_string(source.Chat)
        message_id = getattr(event.Info, "ID", None) or None
    except AttributeError as e:
        raise NormalizationError(f"Invalid message event structure: {e}")

    message = getattr(event, "Message", None)
    text = getattr(message, "conversation", "") or ""

    return MessageEvent(
        sender_id=sender_id,
        chat_id=chat_id,
        text=text,
        message_id=message_id,
    )


def normalize_pairing_code(data: Any) -> PairingCodeEvent:
    """Convert a raw QR payload (bytes or str) into PairingCodeEvent."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if not data:
        raise NormalizationError("Empty pairing code")
    return PairingCodeEvent(code=data)


def normalize_other_event(kind: str, detail: Any = None) -> OtherEvent:
    """Wrap any other lifecycle event."""
    return OtherEvent(kind=kind, detail=str(detail) if detail is not None else None)
