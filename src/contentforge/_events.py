"""Event system for contentforge generation lifecycle hooks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

# ---------------------------------------------------------------------------
# Event name type
# ---------------------------------------------------------------------------

EventName = Literal[
    "on_route",       # after provider/model/key are chosen
    "on_generation",  # after the provider call returns
    "on_cost",        # after pricing (metadata["priced"])
    "on_image",       # after an image is generated
    "on_history",     # after the history sink accepted the record
]

ON_ROUTE: EventName = "on_route"
ON_GENERATION: EventName = "on_generation"
ON_COST: EventName = "on_cost"
ON_IMAGE: EventName = "on_image"
ON_HISTORY: EventName = "on_history"


@dataclass
class EventData:
    """Data passed to every event handler.

    Fields are read-only by convention. ``api_key`` is never included.
    """

    event: EventName
    task_type: str
    provider: str | None = None
    model: str | None = None
    result: Any = None  # GenerationResult | ImageResult | None
    metadata: dict = field(default_factory=dict)


class EventBus:
    """Holds event handlers and dispatches events to them."""

    def __init__(self) -> None:
        self._handlers: dict[EventName, list[Callable[[EventData], None]]] = {}

    def on(self, event_name: EventName, handler: Callable[[EventData], None]) -> None:
        """Register a handler for an event name."""
        self._handlers.setdefault(event_name, []).append(handler)

    def emit(self, event_name: EventName, data: EventData) -> None:
        """Fire all handlers registered for event_name."""
        for handler in self._handlers.get(event_name, []):
            handler(data)


# ---------------------------------------------------------------------------
# Global bus + public API
# ---------------------------------------------------------------------------

_global_bus = EventBus()


def register_event(event_name: EventName) -> Callable:
    """Decorator: registers a handler on the global event bus.

    Usage::

        @register_event("on_cost")
        def log_cost(data: EventData):
            print(f"{data.model}: ${data.result.cost}")
    """
    def decorator(fn: Callable[[EventData], None]) -> Callable[[EventData], None]:
        _global_bus.on(event_name, fn)
        return fn
    return decorator


def emit_event(event_name: EventName, data: EventData) -> None:
    """Internal helper: fires the global bus for event_name."""
    _global_bus.emit(event_name, data)
