"""
Completion wire types.

Mirror the OpenAI-compatible chat/completions request and response bodies.
Only the fields the relay reads are modelled; unknown fields are ignored.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class ChatMessage(BaseModel):
    """Single role/content pair."""
    role: Literal["system", "user", "assistant"] = "user"
    content: str


class CompletionRequest(BaseModel):
    """Request body: the conversation plus the model identifier."""
    messages: List[ChatMessage]
    model: str

    @classmethod
    def for_prompt(cls, prompt: str, model: str) -> "CompletionRequest":
        """Single user-role message carrying the prompt."""
        return cls(messages=[ChatMessage(role="user", content=prompt)], model=model)


class ChoiceMessage(BaseModel):
    content: Optional[str] = None


class CompletionChoice(BaseModel):
    message: ChoiceMessage = Field(default_factory=ChoiceMessage)

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value):
        return {} if value is None else value


class CompletionResponse(BaseModel):
    """
    Response body.

    An error body from the vendor (e.g. {"error": {...}}) or a null
    choices field parses as a response with no choices.
    """
    choices: List[CompletionChoice] = Field(default_factory=list)

    @field_validator("choices", mode="before")
    @classmethod
    def _null_choices(cls, value):
        if value is None:
            return []
        if isinstance(value, list):
            return [{} if choice is None else choice for choice in value]
        return value
