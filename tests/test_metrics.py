"""Tests for metrics.py."""

import pytest

from contentforge.metrics import compute_metrics, count_syllables

SAMPLE = (
    "The committee postponed the important decision. "
    "Members wanted more information."
)


class TestCountSyllables:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("a", 1),
            ("on", 1),
            ("cat", 1),
            ("the", 1),
            ("make", 1),
            ("happy", 2),
            ("Hello!", 2),
            ("table", 2),
            ("apple", 2),
            ("little", 2),
            ("information", 4),
            ("readability", 5),
        ],
    )
    def test_estimates(self, word, expected):
        assert count_syllables(word) == expected

    def test_non_letters_only_counts_one(self):
        assert count_syllables("1234") == 1

    def test_never_below_one(self):
        assert count_syllables("rhythm") == 1
        assert count_syllables("bcd") == 1


class TestComputeMetrics:
    def test_sample_text(self):
        m = compute_metrics(SAMPLE)
        assert m.word_count == 10
        assert m.sentence_count == 2
        assert m.avg_sentence_length == 5.0
        assert m.readability_score == pytest.approx(15.6)
        assert m.grade_level == pytest.approx(12.3)
        assert m.read_time_minutes == pytest.approx(0.1)

    def test_simple_text_clamps_high(self):
        m = compute_metrics("The cat sat on the mat.")
        assert m.word_count == 6
        assert m.sentence_count == 1
        assert m.readability_score == 100.0
        assert m.grade_level == 1.0
        assert m.read_time_minutes == 0.0

    def test_empty_text(self):
        m = compute_metrics("")
        assert m.word_count == 0
        assert m.sentence_count == 1
        assert m.avg_sentence_length == 0.0
        assert m.readability_score == 100.0
        assert m.grade_level == 1.0
        assert m.read_time_minutes == 0.0

    def test_whitespace_only(self):
        m = compute_metrics("   \n\t  ")
        assert m.word_count == 0
        assert m.sentence_count == 1

    def test_sentence_runs_and_blank_fragments(self):
        m = compute_metrics("Wait... what?! Really?   !")
        assert m.sentence_count == 3

    def test_no_terminal_punctuation_is_one_sentence(self):
        m = compute_metrics("just some words without an ending")
        assert m.sentence_count == 1
        assert m.word_count == 6

    def test_read_time(self):
        m = compute_metrics(" ".join(["word"] * 450))
        assert m.read_time_minutes == 2.3

    def test_deterministic(self):
        assert compute_metrics(SAMPLE) == compute_metrics(SAMPLE)

    @pytest.mark.parametrize(
        "text",
        [
            "ba" * 50,
            "Go. " * 200,
            "Antidisestablishmentarianism " * 120,
            "!!!",
            "a",
        ],
    )
    def test_scores_stay_in_range(self, text):
        m = compute_metrics(text)
        assert 0 <= m.readability_score <= 100
        assert 1 <= m.grade_level <= 20
        assert m.sentence_count >= 1

    def test_long_nonsense_word_hits_bounds(self):
        m = compute_metrics("ba" * 50)
        assert m.readability_score == 0.0
        assert m.grade_level == 20.0


class TestMarkup:
    def test_markdown_scored_as_prose(self):
        m = compute_metrics("# Title\n\n**The cat** sat on the mat. The *dog* ran.")
        assert m.word_count == 11
        assert m.sentence_count == 2
        assert m.avg_sentence_length == 5.0
        assert m.readability_score == 100.0
        assert m.grade_level == 1.0

    def test_markdown_matches_plain_equivalent(self):
        marked = compute_metrics("# Title\n\n**The cat** sat on the mat. The *dog* ran.")
        plain = compute_metrics("Title The cat sat on the mat. The dog ran.")
        assert marked.avg_sentence_length == plain.avg_sentence_length
        assert marked.sentence_count == plain.sentence_count
        assert marked.readability_score == plain.readability_score

    def test_code_fence_periods_do_not_split_sentences(self):
        m = compute_metrics("Intro text.\n\n```python\nx = 1. y = 2.\n```\n\nDone.")
        assert m.word_count == 11
        assert m.sentence_count == 2
        assert m.avg_sentence_length == 1.5

    def test_links_html_and_list_markers(self):
        m = compute_metrics("- Read the [guide](https://x.test/a.b).\n- <b>Then</b> rest.")
        assert m.sentence_count == 2
        assert m.avg_sentence_length == 2.5

    def test_read_time_uses_raw_word_count(self):
        m = compute_metrics("**bold** " * 400)
        assert m.word_count == 400
        assert m.read_time_minutes == 2.0
