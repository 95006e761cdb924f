"""OpenAI provider backend."""

import openai
from openai import OpenAI

from contentforge._errors import ProviderError
from contentforge._types import GenerationOutput, TokenUsage
from contentforge.providers.base import TextBackend, envelope_message


class OpenAIBackend(TextBackend):
    """Backend for OpenAI chat completion models."""

    name = "openai"
    label = "OpenAI"
    base_url: str | None = None

    def __init__(self, api_key: str):
        self._client = OpenAI(api_key=api_key, base_url=self.base_url, max_retries=0)

    def call(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> GenerationOutput:
        try:
            response = self._client.chat.completions.create(
                model=model,
                max_completion_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except openai.APIStatusError as e:
            raise ProviderError(
                self.name,
                e.status_code,
                envelope_message(e.response, f"{self.label} returned {e.status_code}"),
            ) from e

        usage = response.usage
        details = usage.prompt_tokens_details
        cached = (details.cached_tokens if details is not None else None) or 0

        return GenerationOutput(
            content=response.choices[0].message.content or "",
            usage=TokenUsage(
                input_tokens=usage.prompt_tokens - cached,
                output_tokens=usage.completion_tokens,
                cached_input_tokens=cached,
            ),
        )
