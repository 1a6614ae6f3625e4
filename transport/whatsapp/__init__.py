"""WhatsApp Transport Layer - Module Exports

The neonize adapter (neonize_client.NeonizeWhatsAppClient) is not exported
here: importing neonize loads its native library, so it is imported only
when a real client is created.
"""

from .base import EventHandler, WhatsAppClient
from .formatting import to_whatsapp_format
from .handler import DEFAULT_TRIGGER, MessageRouter, extract_prompt
from .normalize import (
    NormalizationError,
    jid_to_string,
    normalize_message_event,
    normalize_other_event,
    normalize_pairing_code,
)
from .pairing import render_pairing_code
from .schemas import (
    ClientEvent,
    MessageEvent,
    OtherEvent,
    OutboundReply,
    PairingCodeEvent,
)
from .sender import WhatsAppSenderError, send_reply
from .store import DeviceStore, DeviceStoreError
from .stub import StubWhatsAppClient

__all__ = [
    # Schemas
    "ClientEvent",
    "MessageEvent",
    "PairingCodeEvent",
    "OtherEvent",
    "OutboundReply",
    # Client boundary
    "WhatsAppClient",
    "EventHandler",
    "StubWhatsAppClient",
    # Normalization
    "normalize_message_event",
    "normalize_pairing_code",
    "normalize_other_event",
    "jid_to_string",
    "NormalizationError",
    # Formatting
    "to_whatsapp_format",
    # Routing
    "MessageRouter",
    "extract_prompt",
    "DEFAULT_TRIGGER",
    # Sender
    "send_reply",
    "WhatsAppSenderError",
    # Session store / pairing
    "DeviceStore",
    "DeviceStoreError",
    "render_pairing_code",
]
