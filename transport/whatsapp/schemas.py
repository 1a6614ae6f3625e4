"""
WhatsApp Transport Layer - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Defines the closed set of events the messaging client delivers to the
relay, and the reply the relay hands back for delivery.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


# ============================================================================
# INBOUND EVENTS (CLIENT -> RELAY)
# ============================================================================

class MessageEvent(BaseModel):
    """
    A decoded inbound chat message.

    text is the plain conversation text. Media, reactions and other
    payloads carry an empty text.
    """

    type: Literal["message"] = "message"
    sender_id: str = Field(..., description="Sender user part, e.g. '15551234567'")
    chat_id: str = Field(..., description="Chat JID the reply goes back to")
    text: str = Field("", description="Plain conversation text")
    message_id: Optional[str] = Field(None, description="WhatsApp message ID")

    class Config:
        """Pydantic config."""
        frozen = True  # Immutable - handlers shouldn't mutate


class PairingCodeEvent(BaseModel):
    """A QR payload to show the operator during first-time pairing."""

    type: Literal["pairing_code"] = "pairing_code"
    code: str

    class Config:
        frozen = True


class OtherEvent(BaseModel):
    """
    Any other client event.

    kind follows the pairing channel vocabulary where one applies
    ("success", "timeout", ...) and otherwise names the lifecycle event
    ("connected", "logged_out").
    """

    type: Literal["other"] = "other"
    kind: str
    detail: Optional[str] = None

    class Config:
        frozen = True


ClientEvent = Union[MessageEvent, PairingCodeEvent, OtherEvent]


# ============================================================================
# OUTBOUND REPLY (RELAY -> CLIENT)
# ============================================================================

class OutboundReply(BaseModel):
    """Plain-text body addressed to a chat."""

    chat_id: str
    text: str

    class Config:
        frozen = True
