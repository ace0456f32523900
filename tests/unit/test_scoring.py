"""Unit tests for importance and sentiment scoring."""

import pytest

from reviewly.contexts.analysis import analyze_sentiment, assess_importance, importance_score
from reviewly.contexts.analysis.scoring import count_present, length_points

LONG_FILLER = "a" * 200


class TestImportance:
    """Importance = 3 x achievement words + keywords + length points."""

    @pytest.mark.unit
    def test_two_achievement_words_long_text_is_high(self):
        text = "Completed and delivered. " + LONG_FILLER
        assert importance_score(text, ["migration", "rollout"]) == 10
        assert assess_importance(text, ["migration", "rollout"]) == "high"

    @pytest.mark.unit
    def test_one_achievement_word_long_text_is_medium(self):
        text = "Completed. " + LONG_FILLER
        assert importance_score(text, ["migration", "rollout"]) == 7
        assert assess_importance(text, ["migration", "rollout"]) == "medium"

    @pytest.mark.unit
    def test_threshold_boundaries(self):
        assert assess_importance("short", ["a", "b", "c", "d", "e", "f", "g", "h"]) == "high"
        assert assess_importance("short", ["a", "b", "c", "d", "e", "f", "g"]) == "medium"
        assert assess_importance("short", ["a", "b", "c", "d"]) == "medium"
        assert assess_importance("short", ["a", "b", "c"]) == "low"

    @pytest.mark.unit
    def test_empty_text_is_low(self):
        assert assess_importance("", []) == "low"

    @pytest.mark.unit
    def test_each_achievement_word_counts_once(self):
        assert importance_score("delivered delivered delivered", []) == 3

    @pytest.mark.unit
    def test_achievement_words_match_as_substrings(self):
        # "learned" contains "earned"
        assert count_present(["earned"], "I learned a lot") == 1

    @pytest.mark.unit
    def test_length_points(self):
        assert length_points("x" * 100) == 0
        assert length_points("x" * 101) == 1
        assert length_points("x" * 200) == 1
        assert length_points("x" * 201) == 2


class TestSentiment:
    """Sentiment compares counts of positive and negative words present."""

    @pytest.mark.unit
    def test_empty_text_is_neutral(self):
        assert analyze_sentiment("") == "neutral"

    @pytest.mark.unit
    def test_positive(self):
        assert analyze_sentiment("Excellent, efficient work") == "positive"

    @pytest.mark.unit
    def test_negative(self):
        assert analyze_sentiment("The launch failed and support was poor") == "negative"

    @pytest.mark.unit
    def test_tie_is_neutral(self):
        assert analyze_sentiment("Great idea, difficult rollout") == "neutral"

    @pytest.mark.unit
    def test_substring_semantics(self):
        # "unsuccessful" contains both "successful" and "unsuccessful"
        assert analyze_sentiment("The attempt was unsuccessful") == "neutral"
        # "issues" contains "issue"
        assert analyze_sentiment("Several issues remain") == "negative"
