"""Dataclasses shared by the router, cost, metrics and provider modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Credential:
    """An API key registered for a provider."""

    provider: str
    secret: str
    active: bool = True


@dataclass(frozen=True)
class PricingRule:
    """Per-million-token prices for every model whose name starts with ``model_pattern``."""

    provider: str
    model_pattern: str
    input_price_per_million: Decimal
    cached_input_price_per_million: Decimal
    output_price_per_million: Decimal

    def __post_init__(self) -> None:
        # Accept floats/strings from seed data but compute in Decimal.
        for name in (
            "input_price_per_million",
            "cached_input_price_per_million",
            "output_price_per_million",
        ):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))


@dataclass(frozen=True)
class RouteResult:
    """Provider, model and key chosen for one request. Never persisted."""

    provider: str
    model: str
    api_key: str

    def __repr__(self) -> str:
        return f"RouteResult(provider={self.provider!r}, model={self.model!r}, api_key='***')"


@dataclass(frozen=True)
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    cached_input_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.cached_input_tokens + self.output_tokens


@dataclass(frozen=True)
class ContentMetrics:
    readability_score: float
    grade_level: float
    word_count: int
    sentence_count: int
    avg_sentence_length: float
    read_time_minutes: float


@dataclass(frozen=True)
class CostBreakdown:
    """Result of pricing a generation.

    ``rule`` is None when no pricing rule matched; ``cost`` is then zero and
    means "not computed" rather than "free".
    """

    cost: Decimal
    rule: PricingRule | None = None

    @property
    def priced(self) -> bool:
        return self.rule is not None


@dataclass(frozen=True)
class ImageSize:
    width: int = 1024
    height: int = 1024


@dataclass
class ImageGenerationRequest:
    prompt: str
    provider: str
    model: str
    api_key: str
    size: ImageSize = field(default_factory=ImageSize)
    style: str | None = None


@dataclass
class ImageGenerationResponse:
    image_data: bytes
    content_type: str
    revised_prompt: str | None = None


@dataclass(frozen=True)
class WritingTip:
    title: str
    description: str
    example: str | None = None


@dataclass
class GenerationOutput:
    """Raw output of a text backend call."""

    content: str
    usage: TokenUsage


@dataclass
class GenerationResult:
    """Result of ContentForge.generate() or ContentForge.chat()."""

    content: str
    provider: str
    model: str
    task_type: str
    usage: TokenUsage
    cost: Decimal
    priced: bool
    metrics: ContentMetrics | None = None
    tips: list[WritingTip] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"GenerationResult(provider={self.provider}, model={self.model}, "
            f"cost=${self.cost:.6f}, tokens={self.usage.total_tokens})\n"
            f"{self.content[:200]}{'...' if len(self.content) > 200 else ''}"
        )


@dataclass
class ImageResult:
    """Result of ContentForge.generate_image()."""

    image_data: bytes
    content_type: str
    provider: str
    model: str
    prompt: str
    revised_prompt: str | None = None
    cost: Decimal = Decimal("0")
    priced: bool = False
