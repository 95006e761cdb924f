from contentforge.registry.providers import (
    BASELINE_MODEL,
    DEFAULT_TASK_TYPE,
    FALLBACK_MODELS,
    TASK_PREFERENCES,
    ProviderName,
    fallback_model,
    get_preferences,
    infer_provider,
)
from contentforge.registry.pricing import DEFAULT_PRICING_RULES

__all__ = [
    "BASELINE_MODEL",
    "DEFAULT_TASK_TYPE",
    "FALLBACK_MODELS",
    "TASK_PREFERENCES",
    "ProviderName",
    "fallback_model",
    "get_preferences",
    "infer_provider",
    "DEFAULT_PRICING_RULES",
]
