"""
Importance and sentiment scoring.

Both scorers use substring presence: each listed word counts once if it
occurs anywhere in the lowercased text ("improved" also matches
"unimproved"). The categorizer, by contrast, matches whole words.
"""

from typing import Iterable, List, Sequence

from reviewly.contexts.analysis.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from reviewly.contexts.intake.item_data_structure import Importance, Sentiment

ACHIEVEMENT_WEIGHT = 3
HIGH_IMPORTANCE_THRESHOLD = 8
MEDIUM_IMPORTANCE_THRESHOLD = 4

# (minimum length exclusive, points), checked longest first
LENGTH_POINTS = ((200, 2), (100, 1))


def count_present(words: Iterable[str], text: str) -> int:
    """Number of distinct words that occur as substrings of text (case-insensitive)."""
    lowered = text.lower()
    return sum(1 for word in words if word in lowered)


def mentions_any(words: Iterable[str], text: str) -> bool:
    """True if any word occurs as a substring of text (case-insensitive)."""
    lowered = text.lower()
    return any(word in lowered for word in words)


def length_points(text: str) -> int:
    """0 points up to 100 characters, 1 up to 200, 2 beyond."""
    for min_length, points in LENGTH_POINTS:
        if len(text) > min_length:
            return points
    return 0


def importance_score(
    text: str, keywords: Sequence[str], vocabulary: Vocabulary = DEFAULT_VOCABULARY
) -> int:
    """
    Raw importance score: 3 per achievement word present, 1 per keyword,
    plus 0-2 points for length.
    """
    achievement_hits = count_present(vocabulary.achievement_words, text)
    return achievement_hits * ACHIEVEMENT_WEIGHT + len(keywords) + length_points(text)


def assess_importance(
    text: str, keywords: Sequence[str], vocabulary: Vocabulary = DEFAULT_VOCABULARY
) -> Importance:
    """
    Rate how significant an item is.

    Args:
        text: Raw item text
        keywords: The item's keyword list
        vocabulary: Word tables (achievement words)

    Returns:
        "high" for a score of 8 or more, "medium" for 4 or more, else "low"

    Example:
        >>> assess_importance("Delivered and launched the release.", ["release"])
        'medium'
    """
    score = importance_score(text, keywords, vocabulary)
    if score >= HIGH_IMPORTANCE_THRESHOLD:
        return "high"
    if score >= MEDIUM_IMPORTANCE_THRESHOLD:
        return "medium"
    return "low"


def analyze_sentiment(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Sentiment:
    """
    Classify polarity by counting positive and negative words present.

    The side with strictly more words wins; equal counts (including 0-0) are neutral.
    """
    positive = count_present(vocabulary.positive_words, text)
    negative = count_present(vocabulary.negative_words, text)
    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"


def words_present(words: Iterable[str], text: str) -> List[str]:
    """The words from a list that occur in text, in list order."""
    lowered = text.lower()
    return [word for word in words if word in lowered]
