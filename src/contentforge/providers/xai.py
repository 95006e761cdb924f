"""xAI Grok provider backend (OpenAI-compatible API)."""

from contentforge.providers.openai import OpenAIBackend


class XAIBackend(OpenAIBackend):
    """Backend for xAI Grok models."""

    name = "xai"
    label = "xAI"
    base_url = "https://api.x.ai/v1"
