"""Tests for router.py."""

import pytest

from contentforge._errors import NoProviderAvailable, ProviderError
from contentforge._types import Credential
from contentforge.router import ProviderRouter
from contentforge.stores import InMemoryCredentialStore


def _router(*providers, inactive=()):
    creds = [Credential(p, f"key-{p}") for p in providers]
    creds += [Credential(p, f"old-{p}", active=False) for p in inactive]
    return ProviderRouter(InMemoryCredentialStore(creds))


class TestRoute:
    def test_anthropic_for_text_writing(self):
        route = _router("anthropic").route("text-writing")
        assert route.provider == "anthropic"
        assert route.model == "claude-sonnet-4-20250514"
        assert route.api_key == "key-anthropic"

    def test_image_prefers_openai_over_google(self):
        route = _router("openai", "google").route("image")
        assert route.provider == "openai"
        assert route.model == "dall-e-3"

    def test_code_skips_missing_providers(self):
        route = _router("xai").route("code")
        assert route.provider == "xai"
        assert route.model == "grok-3-mini"

    def test_first_preference_wins_regardless_of_store_order(self):
        route = _router("google", "openai", "anthropic").route("text-chat")
        assert route.provider == "openai"
        assert route.model == "gpt-4o-mini"

    def test_unknown_task_uses_text_writing(self):
        route = _router("openai", "anthropic").route("poetry")
        assert route.provider == "anthropic"
        assert route.model == "claude-sonnet-4-20250514"

    def test_inactive_credentials_ignored(self):
        route = _router("google", inactive=("anthropic",)).route("text-writing")
        assert route.provider == "google"
        assert route.model == "gemini-2.0-flash"

    def test_last_credential_per_provider_wins(self):
        store = InMemoryCredentialStore([
            Credential("openai", "first"),
            Credential("openai", "second"),
        ])
        route = ProviderRouter(store).route("text-chat")
        assert route.api_key == "second"


class TestFallback:
    def test_listed_provider_uses_fallback_table(self):
        # Only openai serves "image"; anthropic is active but not preferred
        route = _router("anthropic").route("image")
        assert route.provider == "anthropic"
        assert route.model == "claude-sonnet-4-20250514"

    def test_unlisted_provider_uses_baseline(self):
        route = _router("mistral").route("text-writing")
        assert route.provider == "mistral"
        assert route.model == "gpt-4o-mini"
        assert route.api_key == "key-mistral"

    def test_fallback_takes_first_active_credential(self):
        route = _router("mistral", "google").route("image")
        assert route.provider == "mistral"


class TestNoProvider:
    def test_empty_store_raises(self):
        with pytest.raises(NoProviderAvailable, match="Configure an API key"):
            _router().route("text-writing")

    def test_only_inactive_raises(self):
        with pytest.raises(NoProviderAvailable):
            _router(inactive=("openai",)).route("image")


class TestRouteModel:
    def test_pinned_model_uses_last_credential_for_provider(self):
        store = InMemoryCredentialStore([
            Credential("anthropic", "old"),
            Credential("anthropic", "new"),
        ])
        route = ProviderRouter(store).route_model("claude-sonnet-4-20250514")
        assert route.api_key == "new"

    @pytest.mark.parametrize(
        "model,provider",
        [
            ("gpt-4.1-mini", "openai"),
            ("o3-mini", "openai"),
            ("claude-opus-4", "anthropic"),
            ("grok-4", "xai"),
            ("Gemini-2.5-pro", "google"),
        ],
    )
    def test_infers_provider(self, model, provider):
        router = _router("openai", "anthropic", "xai", "google")
        route = router.route_model(model)
        assert route.provider == provider
        assert route.model == model

    def test_unknown_model_raises_provider_error(self):
        with pytest.raises(ProviderError) as exc:
            _router("openai").route_model("llama-3")
        assert exc.value.status_code == 422

    def test_missing_key_for_provider_raises(self):
        with pytest.raises(NoProviderAvailable, match="anthropic"):
            _router("openai").route_model("claude-sonnet-4-20250514")


def test_repr_hides_api_key():
    route = _router("openai").route("image")
    assert "key-openai" not in repr(route)
