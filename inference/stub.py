from typing import List, Optional

from .base import CompletionBackend
from .errors import CompletionError


class StubCompletionBackend(CompletionBackend):
    """
    Deterministic fake completion backend for testing and offline runs.

    Never touches the network. Records every prompt it receives so tests
    can assert on what the router forwarded.
    """

    def __init__(
        self,
        reply: str = "<p>This is a stubbed response.</p>",
        error: Optional[CompletionError] = None,
    ):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply
