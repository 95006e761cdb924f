"""Abstract base class for text-generation backends."""

from abc import ABC, abstractmethod
from typing import Any

from contentforge._types import GenerationOutput


def envelope_message(response: Any, fallback: str) -> str:
    """Extract ``error.message`` from a provider's JSON error body.

    Returns "Request failed" when the body is not JSON, and ``fallback`` when
    it is JSON but carries no message.
    """
    try:
        body = response.json()
    except ValueError:
        return "Request failed"

    error = body.get("error") if isinstance(body, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    return message or fallback


class TextBackend(ABC):
    """Base class that all text backends must implement."""

    name: str

    @abstractmethod
    def call(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> GenerationOutput:
        """Call the provider's API once, without retries.

        Args:
            model: Model name to use.
            system_prompt: System instructions.
            user_prompt: The user message.
            max_tokens: Maximum output tokens.

        Returns:
            The generated text and token usage. ``usage.input_tokens`` excludes
            cached prompt tokens, which are reported separately.

        Raises:
            ProviderError: If the provider returns a non-success status.
        """
