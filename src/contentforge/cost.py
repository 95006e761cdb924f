"""Token-usage pricing with longest-prefix rule matching."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from contentforge._types import CostBreakdown, PricingRule
from contentforge.stores import PricingStore

logger = logging.getLogger(__name__)

_PER_MILLION = Decimal(1_000_000)
_MICRO = Decimal("0.000001")
ZERO = Decimal("0")


def find_pricing_rule(rules: Iterable[PricingRule], model: str) -> PricingRule | None:
    """Return the rule with the longest model_pattern that prefixes model.

    Among equally long patterns the first one wins. An empty pattern never
    matches.
    """
    best = None
    best_len = 0
    for rule in rules:
        pattern_len = len(rule.model_pattern)
        if model.startswith(rule.model_pattern) and pattern_len > best_len:
            best = rule
            best_len = pattern_len
    return best


def calculate_cost(
    rule: PricingRule,
    input_tokens: int,
    output_tokens: int,
    cached_input_tokens: int = 0,
) -> Decimal:
    """Cost in dollars under a rule, rounded half away from zero to 6 places."""
    cost = (
        Decimal(input_tokens) * rule.input_price_per_million
        + Decimal(cached_input_tokens) * rule.cached_input_price_per_million
        + Decimal(output_tokens) * rule.output_price_per_million
    ) / _PER_MILLION
    return cost.quantize(_MICRO, rounding=ROUND_HALF_UP)


class CostCalculator:
    """Prices completed generations against a pricing store.

    Unresolvable pricing is not an error: compute_cost() returns 0, and
    estimate() reports ``priced=False`` so callers can tell it from a free call.
    """

    def __init__(self, pricing_store: PricingStore):
        self._pricing = pricing_store

    def estimate(
        self,
        provider: str,
        model: str,
        input_tokens: int,
        output_tokens: int,
        cached_input_tokens: int = 0,
    ) -> CostBreakdown:
        rules = self._pricing.rules_for(provider)
        rule = find_pricing_rule(rules, model) if rules else None
        if rule is None:
            logger.warning("No pricing rule for %s/%s; cost not computed", provider, model)
            return CostBreakdown(cost=ZERO)

        cost = calculate_cost(rule, input_tokens, output_tokens, cached_input_tokens)
        logger.debug(
            "Priced %s/%s with pattern %r: $%s", provider, model, rule.model_pattern, cost
        )
        return CostBreakdown(cost=cost, rule=rule)

    def compute_cost(
        self,
        provider: str,
        model: str,
        input_tokens: int,
        output_tokens: int,
        cached_input_tokens: int = 0,
    ) -> Decimal:
        return self.estimate(
            provider, model, input_tokens, output_tokens, cached_input_tokens
        ).cost
