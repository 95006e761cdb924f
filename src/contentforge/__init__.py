"""contentforge - provider routing, cost accounting and readability scoring for AI content."""

from contentforge.forge import ContentForge
from contentforge.router import ProviderRouter
from contentforge.cost import CostCalculator
from contentforge.metrics import compute_metrics
from contentforge.tips import get_tips
from contentforge.providers.images import generate_image
from contentforge.stores import (
    InMemoryCredentialStore,
    InMemoryHistorySink,
    InMemoryPricingStore,
)
from contentforge._errors import NoProviderAvailable, ProviderError
from contentforge._events import register_event, EventData, EventName
from contentforge._types import (
    ContentMetrics,
    CostBreakdown,
    Credential,
    GenerationResult,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageResult,
    ImageSize,
    PricingRule,
    RouteResult,
    TokenUsage,
    WritingTip,
)

__all__ = [
    "ContentForge",
    "ProviderRouter",
    "CostCalculator",
    "compute_metrics",
    "get_tips",
    "generate_image",
    "InMemoryCredentialStore",
    "InMemoryHistorySink",
    "InMemoryPricingStore",
    "NoProviderAvailable",
    "ProviderError",
    "register_event",
    "EventData",
    "EventName",
    "ContentMetrics",
    "CostBreakdown",
    "Credential",
    "GenerationResult",
    "ImageGenerationRequest",
    "ImageGenerationResponse",
    "ImageResult",
    "ImageSize",
    "PricingRule",
    "RouteResult",
    "TokenUsage",
    "WritingTip",
]
__version__ = "0.1.0"
