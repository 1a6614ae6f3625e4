import json
import logging

import requests
from pydantic import ValidationError

from .base import CompletionBackend
from .errors import (
    ConfigurationError,
    DecodingError,
    EmptyResponseError,
    EncodingError,
    TransportError,
)
from .types import CompletionRequest, CompletionResponse

logger = logging.getLogger(__name__)

DEFAULT_GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_GROQ_MODEL = "mixtral-8x7b-32768"


class GroqCompletionBackend(CompletionBackend):
    """
    Groq backend for chat completions.

    Uses the OpenAI-compatible /chat/completions endpoint with a single
    user message. One blocking POST per call: no retries, no streaming and
    no timeout beyond the requests default.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_GROQ_MODEL,
        url: str = DEFAULT_GROQ_URL,
    ):
        """
        Initialize Groq backend.

        Args:
            api_key:    Bearer token. May be empty; the call then fails with
                        ConfigurationError instead of the constructor.
            model_name: Model identifier sent with every request
            url:        Full chat/completions endpoint URL
        """
        self.api_key = api_key
        self.model_name = model_name
        self.url = url

    def complete(self, prompt: str) -> str:
        """
        Send the prompt and return the first choice's content.

        Flow:
          1. Build and serialize the request payload
          2. Check the API key (before any network I/O)
          3. POST and read the full body
          4. Decode into CompletionResponse
          5. Return choices[0].message.content

        Raises:
            EncodingError:      payload could not be serialized
            ConfigurationError: API key is empty
            TransportError:     request failed or body could not be read
            DecodingError:      body is not a valid completion response
            EmptyResponseError: no choices returned
        """
        payload = CompletionRequest.for_prompt(prompt, self.model_name)

        try:
            body = json.dumps(payload.model_dump())
        except (TypeError, ValueError) as e:
            raise EncodingError(f"error marshaling JSON: {e}") from e

        if not self.api_key:
            raise ConfigurationError("GROQ_API_KEY environment variable not set")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = requests.post(self.url, data=body, headers=headers, stream=True)
        except requests.RequestException as e:
            raise TransportError(f"error sending request: {e}") from e

        try:
            raw = response.content
        except requests.RequestException as e:
            raise TransportError(f"error reading response body: {e}") from e
        finally:
            response.close()

        # Non-2xx is not treated specially; the body decides the outcome
        if not 200 <= response.status_code < 300:
            logger.warning(
                f"Completion API returned {response.status_code}",
                extra={"status_code": response.status_code, "model": self.model_name},
            )

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise DecodingError(f"error unmarshaling response JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodingError(
                f"error unmarshaling response JSON: expected object, got {type(data).__name__}"
            )

        try:
            parsed = CompletionResponse(**data)
        except ValidationError as e:
            raise DecodingError(f"error unmarshaling response JSON: {e}") from e

        if parsed.choices:
            return parsed.choices[0].message.content or ""

        raise EmptyResponseError("no choices found in the response")
