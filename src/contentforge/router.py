"""Task-based provider routing over the set of active credentials."""

from __future__ import annotations

import logging

from contentforge._errors import NoProviderAvailable, ProviderError
from contentforge._types import RouteResult
from contentforge.registry.providers import fallback_model, get_preferences, infer_provider
from contentforge.stores import CredentialStore

logger = logging.getLogger(__name__)


class ProviderRouter:
    """Picks the provider, model and API key that serve a task.

    Usage::

        router = ProviderRouter(InMemoryCredentialStore.from_env())
        route = router.route("code")
        print(route.provider, route.model)

    The router reads the credential store on every call and holds no state of
    its own, so one instance can be shared across requests.
    """

    def __init__(self, credential_store: CredentialStore):
        self._credentials = credential_store

    def _key_map(self) -> tuple[dict[str, str], list]:
        active = self._credentials.active_credentials()
        if not active:
            raise NoProviderAvailable()
        keys: dict[str, str] = {}
        for credential in active:
            keys[credential.provider] = credential.secret
        return keys, active

    def route(self, task_type: str) -> RouteResult:
        """Route a task type to the first preferred provider with an active key.

        Falls back to the first active credential and that provider's default
        model when none of the preferred providers has a key.

        Raises:
            NoProviderAvailable: If there are no active credentials.
        """
        keys, active = self._key_map()

        for provider, model in get_preferences(task_type):
            api_key = keys.get(provider.value)
            if api_key:
                logger.debug("Routed %s to %s/%s", task_type, provider.value, model)
                return RouteResult(provider=provider.value, model=model, api_key=api_key)

        first = active[0]
        model = fallback_model(first.provider)
        logger.debug(
            "No preferred provider for %s; falling back to %s/%s",
            task_type, first.provider, model,
        )
        return RouteResult(provider=first.provider, model=model, api_key=first.secret)

    def route_model(self, model: str) -> RouteResult:
        """Route an explicitly chosen model to its provider's active key.

        Raises:
            ProviderError: If the provider cannot be inferred from the model name.
            NoProviderAvailable: If the provider has no active key.
        """
        provider = infer_provider(model)
        if provider is None:
            raise ProviderError(
                "unknown",
                422,
                f'Cannot determine provider for model "{model}". '
                "Please configure the agent model correctly.",
            )

        keys, _ = self._key_map()
        api_key = keys.get(provider.value)
        if not api_key:
            raise NoProviderAvailable(
                f"No active API key configured for {provider.value}. Add one in Settings."
            )
        return RouteResult(provider=provider.value, model=model, api_key=api_key)
