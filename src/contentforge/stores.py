"""Collaborator interfaces for credentials, pricing and generation history.

Applications back these with their own database; the in-memory versions are
used in tests and for embedding contentforge in scripts.
"""

from __future__ import annotations

import os
from typing import Any, Iterable, Protocol

from contentforge._types import Credential, PricingRule
from contentforge.registry.pricing import DEFAULT_PRICING_RULES
from contentforge.registry.providers import ProviderName

# Environment variable holding each provider's API key (see from_env)
ENV_API_KEYS: dict[ProviderName, str] = {
    ProviderName.OPENAI: "OPENAI_API_KEY",
    ProviderName.ANTHROPIC: "ANTHROPIC_API_KEY",
    ProviderName.XAI: "XAI_API_KEY",
    ProviderName.GOOGLE: "GOOGLE_API_KEY",
}


class CredentialStore(Protocol):
    def active_credentials(self) -> list[Credential]:
        """Return every active credential, in store order."""
        ...


class PricingStore(Protocol):
    def rules_for(self, provider: str) -> list[PricingRule]:
        """Return all pricing rules registered for a provider."""
        ...


class HistorySink(Protocol):
    def record(self, entry: dict[str, Any]) -> None:
        """Persist a finished generation."""
        ...


class InMemoryCredentialStore:
    def __init__(self, credentials: Iterable[Credential] = ()):
        self._credentials = list(credentials)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> InMemoryCredentialStore:
        """Build a store from OPENAI_API_KEY, ANTHROPIC_API_KEY, XAI_API_KEY and GOOGLE_API_KEY."""
        env = os.environ if environ is None else environ
        credentials = []
        for provider, var in ENV_API_KEYS.items():
            secret = env.get(var, "")
            if secret:
                credentials.append(Credential(provider.value, secret))
        return cls(credentials)

    def add(self, credential: Credential) -> None:
        self._credentials.append(credential)

    def active_credentials(self) -> list[Credential]:
        return [c for c in self._credentials if c.active]


class InMemoryPricingStore:
    def __init__(self, rules: Iterable[PricingRule] = ()):
        self._rules = list(rules)

    @classmethod
    def with_defaults(cls) -> InMemoryPricingStore:
        return cls(DEFAULT_PRICING_RULES)

    def add(self, rule: PricingRule) -> None:
        self._rules.append(rule)

    def rules_for(self, provider: str) -> list[PricingRule]:
        return [r for r in self._rules if r.provider == provider]


class InMemoryHistorySink:
    def __init__(self) -> None:
        self.entries: list[dict[str, Any]] = []

    def record(self, entry: dict[str, Any]) -> None:
        self.entries.append(entry)
