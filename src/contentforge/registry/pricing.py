"""Seed pricing rules (USD per 1M tokens: input, cached input, output).

Patterns are matched as prefixes of the model name and the longest match
wins, so "gpt-4o-mini" shadows "gpt-4o" for mini models.
"""

from contentforge._types import PricingRule

_SEED: tuple[tuple[str, str, str, str, str], ...] = (
    # OpenAI: cached input at 50% (GPT-4o / o-series) or 25% (GPT-4.1)
    ("openai", "gpt-4o-mini", "0.15", "0.075", "0.60"),
    ("openai", "gpt-4o", "2.50", "1.25", "10.00"),
    ("openai", "gpt-4.1-nano", "0.10", "0.025", "0.40"),
    ("openai", "gpt-4.1-mini", "0.40", "0.10", "1.60"),
    ("openai", "gpt-4.1", "2.00", "0.50", "8.00"),
    ("openai", "o1-mini", "1.10", "0.55", "4.40"),
    ("openai", "o1", "15.00", "7.50", "60.00"),
    ("openai", "o3-mini", "1.10", "0.55", "4.40"),
    ("openai", "o3", "2.00", "1.00", "8.00"),
    ("openai", "o4-mini", "1.10", "0.55", "4.40"),
    # Anthropic: cache reads at 10%
    ("anthropic", "claude-3-5-haiku", "0.80", "0.08", "4.00"),
    ("anthropic", "claude-3-5-sonnet", "3.00", "0.30", "15.00"),
    ("anthropic", "claude-sonnet-4", "3.00", "0.30", "15.00"),
    ("anthropic", "claude-opus-4", "15.00", "1.50", "75.00"),
    ("anthropic", "claude-haiku-4.5", "1.00", "0.10", "5.00"),
    ("anthropic", "claude-sonnet-4.5", "3.00", "0.30", "15.00"),
    ("anthropic", "claude-opus-4.5", "5.00", "0.50", "25.00"),
    # xAI
    ("xai", "grok-3-mini", "0.30", "0.03", "0.50"),
    ("xai", "grok-3", "3.00", "0.30", "15.00"),
    ("xai", "grok-4.1-fast", "0.20", "0.02", "0.50"),
    ("xai", "grok-4", "3.00", "0.30", "15.00"),
    # Google: context caching at 25%
    ("google", "gemini-2.0-flash-lite", "0.075", "0.01875", "0.30"),
    ("google", "gemini-2.0-flash", "0.10", "0.025", "0.40"),
    ("google", "gemini-2.5-flash-lite", "0.10", "0.025", "0.40"),
    ("google", "gemini-2.5-flash", "0.15", "0.0375", "0.60"),
    ("google", "gemini-2.5-pro", "1.25", "0.3125", "10.00"),
    ("google", "gemini-3-flash", "0.50", "0.125", "3.00"),
    ("google", "gemini-3-pro", "2.00", "0.50", "12.00"),
)

DEFAULT_PRICING_RULES: tuple[PricingRule, ...] = tuple(
    PricingRule(provider, pattern, inp, cached, out)  # type: ignore[arg-type]
    for provider, pattern, inp, cached, out in _SEED
)
