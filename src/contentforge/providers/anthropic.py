"""Anthropic Claude provider backend."""

from contentforge._errors import ProviderError
from contentforge._types import GenerationOutput, TokenUsage
from contentforge.providers.base import TextBackend, envelope_message

try:
    import anthropic
except ImportError:
    anthropic = None


class AnthropicBackend(TextBackend):
    """Backend for Anthropic Claude models."""

    name = "anthropic"

    def __init__(self, api_key: str):
        if anthropic is None:
            raise ImportError(
                "anthropic is required for the Anthropic provider. "
                "Install it with: pip install contentforge[anthropic]"
            )
        self._client = anthropic.Anthropic(api_key=api_key, max_retries=0)

    def call(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> GenerationOutput:
        try:
            message = self._client.messages.create(
                model=model,
                max_tokens=max_tokens,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except anthropic.APIStatusError as e:
            raise ProviderError(
                self.name,
                e.status_code,
                envelope_message(e.response, f"Anthropic returned {e.status_code}"),
            ) from e

        text = "".join(
            block.text for block in message.content if block.type == "text"
        )
        # input_tokens already excludes cache reads on this API
        return GenerationOutput(
            content=text,
            usage=TokenUsage(
                input_tokens=message.usage.input_tokens,
                output_tokens=message.usage.output_tokens,
                cached_input_tokens=message.usage.cache_read_input_tokens or 0,
            ),
        )
