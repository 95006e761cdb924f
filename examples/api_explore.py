"""API explore: walk through contentforge's routing, pricing and scoring.

No API keys needed: this script only exercises the router, the pricing
table and the readability metrics with placeholder credentials.

Run: python examples/api_explore.py
"""

import contentforge as cf
from contentforge.registry import TASK_PREFERENCES

print(f"contentforge v{cf.__version__}\n")

# ── Routing ──────────────────────────────────────────────────────────────────

print("=" * 70)
print("ROUTING (which provider serves each task type)")
print("=" * 70)

key_sets = [
    ["anthropic"],
    ["openai", "google"],
    ["xai"],
    ["google"],
]
for providers in key_sets:
    store = cf.InMemoryCredentialStore(cf.Credential(p, "placeholder") for p in providers)
    router = cf.ProviderRouter(store)
    print(f"\n  keys: {', '.join(providers)}")
    for task_type in TASK_PREFERENCES:
        route = router.route(task_type)
        print(f"    {task_type:<14} -> {route.provider}/{route.model}")

# ── Pricing ──────────────────────────────────────────────────────────────────

print(f"\n{'=' * 70}")
print("PRICING (100k input, 20k cached, 5k output tokens)")
print("=" * 70)

calculator = cf.CostCalculator(cf.InMemoryPricingStore.with_defaults())
for provider, model in [
    ("anthropic", "claude-sonnet-4-20250514"),
    ("openai", "gpt-4o"),
    ("openai", "gpt-4o-mini"),
    ("xai", "grok-3-mini"),
    ("google", "gemini-2.0-flash"),
    ("openai", "dall-e-3"),
]:
    breakdown = calculator.estimate(provider, model, 100_000, 5_000, 20_000)
    price = f"${breakdown.cost}" if breakdown.priced else "unknown"
    print(f"  {provider + '/' + model:<36} {price}")

# ── Readability ──────────────────────────────────────────────────────────────

print(f"\n{'=' * 70}")
print("READABILITY")
print("=" * 70)

samples = {
    "Simple": "The cat sat on the mat. It was warm. The sun was out.",
    "Dense": (
        "Institutional considerations notwithstanding, the committee's "
        "deliberations necessitated comprehensive reevaluation of "
        "organizational responsibilities."
    ),
}
for label, text in samples.items():
    m = cf.compute_metrics(text)
    print(
        f"  {label:<8} ease={m.readability_score:<5} grade={m.grade_level:<5} "
        f"words={m.word_count} sentences={m.sentence_count}"
    )
