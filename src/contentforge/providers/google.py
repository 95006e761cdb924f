"""Google Gemini provider backend."""

from contentforge._errors import ProviderError
from contentforge._types import GenerationOutput, TokenUsage
from contentforge.providers.base import TextBackend

try:
    from google import genai
    from google.genai import errors as genai_errors
    from google.genai import types as genai_types
except ImportError:
    raise ImportError(
        "google-genai is required for the Google provider. "
        "Install it with: pip install contentforge[google]"
    )


class GoogleBackend(TextBackend):
    """Backend for Google Gemini models."""

    name = "google"

    def __init__(self, api_key: str):
        self._client = genai.Client(api_key=api_key)

    def call(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> GenerationOutput:
        try:
            result = self._client.models.generate_content(
                model=model,
                contents=user_prompt,
                config=genai_types.GenerateContentConfig(
                    system_instruction=system_prompt,
                    max_output_tokens=max_tokens,
                ),
            )
        except genai_errors.APIError as e:
            raise ProviderError(
                self.name, e.code, e.message or f"Google returned {e.code}"
            ) from e

        meta = result.usage_metadata
        cached = meta.cached_content_token_count or 0
        return GenerationOutput(
            content=result.text or "",
            usage=TokenUsage(
                input_tokens=(meta.prompt_token_count or 0) - cached,
                output_tokens=meta.candidates_token_count or 0,
                cached_input_tokens=cached,
            ),
        )
