"""ContentForge: routed generation with cost accounting and readability scoring."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Callable

from contentforge._events import (
    ON_COST,
    ON_GENERATION,
    ON_HISTORY,
    ON_IMAGE,
    ON_ROUTE,
    EventBus,
    EventData,
    EventName,
    emit_event,
)
from contentforge._types import (
    GenerationResult,
    ImageGenerationRequest,
    ImageResult,
    ImageSize,
    RouteResult,
)
from contentforge.cost import CostCalculator
from contentforge.metrics import compute_metrics
from contentforge.providers import create_backend
from contentforge.providers.images import generate_image
from contentforge.registry.providers import DEFAULT_TASK_TYPE
from contentforge.router import ProviderRouter
from contentforge.stores import CredentialStore, HistorySink, PricingStore
from contentforge.tips import get_tips

logger = logging.getLogger(__name__)


class ContentForge:
    """Routes generation requests to a provider and accounts for the result.

    Usage::

        import contentforge as cf

        forge = cf.ContentForge(
            cf.InMemoryCredentialStore.from_env(),
            cf.InMemoryPricingStore.with_defaults(),
        )
        result = forge.generate("Write a blog post about tide pools",
                                content_type="blog")
        print(result.content)
        print(f"{result.provider}/{result.model}: ${result.cost}")
        print(result.metrics.readability_score)

    Each call reads the stores afresh; the instance itself holds no
    per-request state.
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        pricing_store: PricingStore,
        history_sink: HistorySink | None = None,
        *,
        rng: random.Random | None = None,
    ):
        """Initialize the pipeline.

        Args:
            credential_store: Source of active provider API keys.
            pricing_store: Source of per-provider pricing rules.
            history_sink: Receives one record per finished generation. Optional.
            rng: Random source for tip selection; seed it for reproducible tips.
        """
        self._router = ProviderRouter(credential_store)
        self._costs = CostCalculator(pricing_store)
        self._history = history_sink
        self._rng = rng
        self._event_bus = EventBus()

    def event(self, event_name: EventName) -> Callable:
        """Register an instance-level event handler.

        Usage::

            @forge.event("on_cost")
            def track(data: EventData):
                print(data.result.cost)
        """
        def decorator(fn: Callable[[EventData], None]) -> Callable[[EventData], None]:
            self._event_bus.on(event_name, fn)
            return fn
        return decorator

    def _emit(self, event_name: EventName, data: EventData) -> None:
        emit_event(event_name, data)
        self._event_bus.emit(event_name, data)

    def _resolve(self, task_type: str, model: str | None) -> RouteResult:
        route = self._router.route_model(model) if model else self._router.route(task_type)
        self._emit(
            ON_ROUTE,
            EventData(event=ON_ROUTE, task_type=task_type, provider=route.provider, model=route.model),
        )
        return route

    def _record(self, task_type: str, entry: dict, result) -> None:
        if self._history is None:
            return
        self._history.record(entry)
        self._emit(
            ON_HISTORY,
            EventData(
                event=ON_HISTORY,
                task_type=task_type,
                provider=entry["provider"],
                model=entry["model"],
                result=result,
            ),
        )

    def generate(
        self,
        prompt: str,
        *,
        system_prompt: str = "",
        task_type: str = DEFAULT_TASK_TYPE,
        model: str | None = None,
        max_tokens: int = 4096,
        content_type: str | None = None,
        score: bool = True,
    ) -> GenerationResult:
        """Generate text with the provider routed for ``task_type``.

        Args:
            prompt: The user prompt.
            system_prompt: System instructions for the model.
            task_type: Task category used to pick the provider.
            model: Pin a concrete model instead of routing by task type.
            max_tokens: Maximum output tokens.
            content_type: If given, 3-5 writing tips for it are attached.
            score: Attach readability metrics to the result.

        Returns:
            A GenerationResult with content, token usage, cost and metrics.

        Raises:
            NoProviderAvailable: If no active credential can serve the request.
            ProviderError: If the provider rejects the call.
        """
        route = self._resolve(task_type, model)

        backend = create_backend(route.provider, route.api_key)
        output = backend.call(route.model, system_prompt, prompt, max_tokens)
        usage = output.usage
        self._emit(
            ON_GENERATION,
            EventData(
                event=ON_GENERATION,
                task_type=task_type,
                provider=route.provider,
                model=route.model,
                metadata={"usage": usage},
            ),
        )

        breakdown = self._costs.estimate(
            route.provider,
            route.model,
            usage.input_tokens,
            usage.output_tokens,
            usage.cached_input_tokens,
        )

        result = GenerationResult(
            content=output.content,
            provider=route.provider,
            model=route.model,
            task_type=task_type,
            usage=usage,
            cost=breakdown.cost,
            priced=breakdown.priced,
            metrics=compute_metrics(output.content) if score else None,
            tips=get_tips(content_type, self._rng) if content_type else [],
        )
        self._emit(
            ON_COST,
            EventData(
                event=ON_COST,
                task_type=task_type,
                provider=route.provider,
                model=route.model,
                result=result,
                metadata={"priced": breakdown.priced},
            ),
        )
        logger.info(
            "Generated %s with %s/%s: %d tokens, $%s",
            task_type, route.provider, route.model, usage.total_tokens, breakdown.cost,
        )

        self._record(
            task_type,
            {
                "kind": "text",
                "task_type": task_type,
                "provider": route.provider,
                "model": route.model,
                "content": result.content,
                "input_tokens": usage.input_tokens,
                "cached_input_tokens": usage.cached_input_tokens,
                "output_tokens": usage.output_tokens,
                "total_tokens": usage.total_tokens,
                "cost_usd": result.cost,
                "priced": result.priced,
                "metrics": asdict(result.metrics) if result.metrics else None,
                "created_at": datetime.now(timezone.utc).isoformat(),
            },
            result,
        )
        return result

    def chat(
        self,
        prompt: str,
        *,
        system_prompt: str = "",
        model: str | None = None,
        max_tokens: int = 4096,
    ) -> GenerationResult:
        """Generate a chat reply. Routed as "text-chat" and not scored."""
        return self.generate(
            prompt,
            system_prompt=system_prompt,
            task_type="text-chat",
            model=model,
            max_tokens=max_tokens,
            score=False,
        )

    def generate_image(
        self,
        prompt: str,
        *,
        width: int = 1024,
        height: int = 1024,
        style: str | None = None,
    ) -> ImageResult:
        """Generate one image with the provider routed for the "image" task.

        Raises:
            NoProviderAvailable: If there are no active credentials.
            ProviderError: If the routed provider cannot generate images or
                rejects the call.
        """
        route = self._resolve("image", None)
        response = generate_image(
            ImageGenerationRequest(
                prompt=prompt,
                provider=route.provider,
                model=route.model,
                api_key=route.api_key,
                size=ImageSize(width, height),
                style=style,
            )
        )

        result = ImageResult(
            image_data=response.image_data,
            content_type=response.content_type,
            provider=route.provider,
            model=route.model,
            prompt=prompt,
            revised_prompt=response.revised_prompt,
        )
        self._emit(
            ON_IMAGE,
            EventData(
                event=ON_IMAGE,
                task_type="image",
                provider=route.provider,
                model=route.model,
                result=result,
            ),
        )

        self._record(
            "image",
            {
                "kind": "image",
                "task_type": "image",
                "provider": route.provider,
                "model": route.model,
                "prompt": prompt,
                "revised_prompt": result.revised_prompt,
                "width": width,
                "height": height,
                "style": style,
                "image_data": result.image_data,
                "content_type": result.content_type,
                "created_at": datetime.now(timezone.utc).isoformat(),
            },
            result,
        )
        return result
