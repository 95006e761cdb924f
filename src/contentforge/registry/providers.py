"""Provider identifiers and per-task model preferences."""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ProviderName(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    XAI = "xai"
    GOOGLE = "google"


DEFAULT_TASK_TYPE = "text-writing"

# Ordered by preference: the first provider with an active key wins.
TASK_PREFERENCES: Mapping[str, tuple[tuple[ProviderName, str], ...]] = MappingProxyType({
    "text-writing": (
        (ProviderName.ANTHROPIC, "claude-sonnet-4-20250514"),
        (ProviderName.OPENAI, "gpt-4o"),
        (ProviderName.XAI, "grok-3-mini"),
        (ProviderName.GOOGLE, "gemini-2.0-flash"),
    ),
    "text-chat": (
        (ProviderName.OPENAI, "gpt-4o-mini"),
        (ProviderName.ANTHROPIC, "claude-sonnet-4-20250514"),
        (ProviderName.XAI, "grok-3-mini"),
        (ProviderName.GOOGLE, "gemini-2.0-flash"),
    ),
    "image": (
        (ProviderName.OPENAI, "dall-e-3"),
    ),
    "code": (
        (ProviderName.ANTHROPIC, "claude-sonnet-4-20250514"),
        (ProviderName.OPENAI, "gpt-4o"),
        (ProviderName.XAI, "grok-3-mini"),
        (ProviderName.GOOGLE, "gemini-2.0-flash"),
    ),
})

# Model used when an active provider appears in no preference list for the task
FALLBACK_MODELS: Mapping[ProviderName, str] = MappingProxyType({
    ProviderName.OPENAI: "gpt-4o-mini",
    ProviderName.ANTHROPIC: "claude-sonnet-4-20250514",
    ProviderName.XAI: "grok-3-mini",
    ProviderName.GOOGLE: "gemini-2.0-flash",
})

BASELINE_MODEL = "gpt-4o-mini"

_MODEL_PREFIXES: tuple[tuple[re.Pattern, ProviderName], ...] = (
    (re.compile(r"^(gpt-|o\d|chatgpt-)", re.IGNORECASE), ProviderName.OPENAI),
    (re.compile(r"^claude-", re.IGNORECASE), ProviderName.ANTHROPIC),
    (re.compile(r"^grok-", re.IGNORECASE), ProviderName.XAI),
    (re.compile(r"^gemini-", re.IGNORECASE), ProviderName.GOOGLE),
)


def get_preferences(task_type: str) -> tuple[tuple[ProviderName, str], ...]:
    """Candidate (provider, model) pairs for a task type, most preferred first.

    Unknown task types use the "text-writing" list.
    """
    return TASK_PREFERENCES.get(task_type, TASK_PREFERENCES[DEFAULT_TASK_TYPE])


def fallback_model(provider: str) -> str:
    """Default model for a provider, or BASELINE_MODEL if the provider is unlisted."""
    try:
        return FALLBACK_MODELS[ProviderName(provider)]
    except ValueError:
        return BASELINE_MODEL


def infer_provider(model: str) -> ProviderName | None:
    """Guess the provider of a concrete model id from its name prefix."""
    for pattern, provider in _MODEL_PREFIXES:
        if pattern.match(model):
            return provider
    return None
