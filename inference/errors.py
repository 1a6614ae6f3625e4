"""
Completion error taxonomy.

Every failure of a completion call surfaces as a CompletionError subclass.
The message router catches the base class; callers that care about the
cause can match the concrete type.
"""


class CompletionError(Exception):
    """A completion call failed."""
    pass


class ConfigurationError(CompletionError):
    """Required configuration (the API key) is missing."""
    pass


class EncodingError(CompletionError):
    """Request payload could not be serialized."""
    pass


class DecodingError(CompletionError):
    """Response body is not the expected JSON shape."""
    pass


class TransportError(CompletionError):
    """HTTP call could not be completed or its body could not be read."""
    pass


class EmptyResponseError(CompletionError):
    """Response carried no choices."""
    pass
