"""
Completion boundary layer.

This package provides a clean abstraction for the chat-completion call,
allowing the message router to remain agnostic of the underlying vendor.

Supported backends:
- StubCompletionBackend: Deterministic fake backend (tests / dry runs)
- GroqCompletionBackend: Groq OpenAI-compatible chat/completions endpoint

Example usage:
    from inference import GroqCompletionBackend

    backend = GroqCompletionBackend(api_key="gsk_...")
    text = backend.complete("what is 2+2")
"""

from .base import CompletionBackend
from .errors import (
    CompletionError,
    ConfigurationError,
    DecodingError,
    EmptyResponseError,
    EncodingError,
    TransportError,
)
from .groq import DEFAULT_GROQ_MODEL, DEFAULT_GROQ_URL, GroqCompletionBackend
from .stub import StubCompletionBackend
from .types import ChatMessage, CompletionRequest, CompletionResponse

__all__ = [
    "CompletionBackend",
    "GroqCompletionBackend",
    "StubCompletionBackend",
    "DEFAULT_GROQ_MODEL",
    "DEFAULT_GROQ_URL",
    # Wire types
    "ChatMessage",
    "CompletionRequest",
    "CompletionResponse",
    # Errors
    "CompletionError",
    "ConfigurationError",
    "EncodingError",
    "DecodingError",
    "TransportError",
    "EmptyResponseError",
]
