"""Readability metrics for generated text (Flesch Reading Ease and Flesch-Kincaid grade)."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

from contentforge._types import ContentMetrics

VOWELS = frozenset("aeiouy")
WORDS_PER_MINUTE = 200

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_NON_LETTERS = re.compile(r"[^a-z]")
_TENTH = Decimal("0.1")
_WHITESPACE = re.compile(r"\s+")

# Applied in order. Code fences go before inline code, images before links.
_MARKUP_RULES = (
    (re.compile(r"<[^>]+>"), " "),
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\*{1,3}([^*]+)\*{1,3}"), r"\1"),
    (re.compile(r"_{1,3}([^_]+)_{1,3}"), r"\1"),
    (re.compile(r"~~([^~]+)~~"), r"\1"),
    (re.compile(r"!\[([^\]]*)\]\([^)]+\)"), r"\1"),
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (re.compile(r"^[-*_]{3,}\s*$", re.MULTILINE), ""),
    (re.compile(r"```[\s\S]*?```"), " "),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"^>\s*", re.MULTILINE), ""),
    (re.compile(r"^\s*[-*+]\s+", re.MULTILINE), ""),
    (re.compile(r"^\s*\d+\.\s+", re.MULTILINE), ""),
)


def _round1(value: float) -> float:
    return float(Decimal(repr(value)).quantize(_TENTH, rounding=ROUND_HALF_UP))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def count_syllables(word: str) -> int:
    """Estimate the syllables in a word from its vowel groups.

    A syllable starts at each consonant-to-vowel transition ("y" counts as a
    vowel). A trailing silent "e" is dropped when more than one syllable was
    found, and a trailing consonant + "le" ("ta-ble") adds one back.
    """
    word = _NON_LETTERS.sub("", word.lower())
    if len(word) <= 2:
        return 1

    count = 0
    prev_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not prev_vowel:
            count += 1
        prev_vowel = is_vowel

    if word.endswith("e") and count > 1:
        count -= 1
    if word.endswith("le") and word[-3] not in VOWELS:
        count += 1

    return max(1, count)


def _strip_markup(text: str) -> str:
    """Reduce markdown/HTML to plain prose so formatting does not skew the scores."""
    for pattern, replacement in _MARKUP_RULES:
        text = pattern.sub(replacement, text)
    return _WHITESPACE.sub(" ", text).strip()


def compute_metrics(text: str) -> ContentMetrics:
    """Score the readability of a block of text.

    ``word_count`` and read time use the raw text. Everything else is computed
    on the text with markdown and HTML markup stripped. Words are
    whitespace-separated tokens; sentences are the non-blank pieces between
    runs of ``.``, ``!`` and ``?``. The sentence count is at least 1, so empty
    text yields zero words and the formulas' clamped extremes.
    """
    word_count = len(text.split())

    prose = _strip_markup(text)
    prose_words = prose.split()
    prose_word_count = len(prose_words)

    sentences = [s for s in _SENTENCE_SPLIT.split(prose) if s.strip()]
    sentence_count = max(1, len(sentences))

    total_syllables = sum(count_syllables(w) for w in prose_words)

    avg_sentence_length = prose_word_count / sentence_count
    avg_syllables_per_word = total_syllables / prose_word_count if prose_word_count else 1

    reading_ease = 206.835 - 1.015 * avg_sentence_length - 84.6 * avg_syllables_per_word
    grade_level = 0.39 * avg_sentence_length + 11.8 * avg_syllables_per_word - 15.59

    return ContentMetrics(
        readability_score=_round1(_clamp(reading_ease, 0, 100)),
        grade_level=_round1(_clamp(grade_level, 1, 20)),
        word_count=word_count,
        sentence_count=sentence_count,
        avg_sentence_length=_round1(avg_sentence_length),
        read_time_minutes=_round1(word_count / WORDS_PER_MINUTE),
    )
