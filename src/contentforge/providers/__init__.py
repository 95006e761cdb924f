"""Provider backend registry."""

import importlib

from contentforge._errors import ProviderError
from contentforge.providers.base import TextBackend
from contentforge.registry.providers import ProviderName

_BACKEND_CLASSES: dict[ProviderName, str] = {
    ProviderName.OPENAI: "contentforge.providers.openai.OpenAIBackend",
    ProviderName.ANTHROPIC: "contentforge.providers.anthropic.AnthropicBackend",
    ProviderName.XAI: "contentforge.providers.xai.XAIBackend",
    ProviderName.GOOGLE: "contentforge.providers.google.GoogleBackend",
}

SUPPORTED_PROVIDERS = {p.value for p in _BACKEND_CLASSES}


def create_backend(name: str, api_key: str) -> TextBackend:
    """Create a text backend by provider name.

    Backend modules are imported on first use so optional SDKs are only
    needed for the providers actually configured.

    Raises:
        ProviderError: With status 400 if the provider is not supported.
        ImportError: If the provider's SDK is not installed.
    """
    try:
        path = _BACKEND_CLASSES[ProviderName(name)]
    except (ValueError, KeyError):
        raise ProviderError(name, 400, f"Unsupported provider: {name}") from None

    module_path, class_name = path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls = getattr(module, class_name)
    return cls(api_key)


__all__ = ["TextBackend", "create_backend", "SUPPORTED_PROVIDERS"]
