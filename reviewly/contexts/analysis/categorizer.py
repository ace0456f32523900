"""
Bag-of-keywords categorizer.

Scores text against every category dictionary and picks the best fit.
"""

import re
from functools import lru_cache
from typing import Dict, List, Tuple

from reviewly.contexts.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    GENERAL_CATEGORY,
    Vocabulary,
)


def _compile_keyword_pattern(keyword: str) -> re.Pattern:
    """Whole-word, case-insensitive pattern for one dictionary term."""
    return re.compile(r"\b" + re.escape(keyword) + r"\b", re.IGNORECASE)


@lru_cache(maxsize=8)
def _category_patterns(vocabulary: Vocabulary) -> Tuple[Tuple[str, Tuple[re.Pattern, ...]], ...]:
    return tuple(
        (name, tuple(_compile_keyword_pattern(keyword) for keyword in keywords))
        for name, keywords in vocabulary.categories
    )


def score_categories(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Dict[str, int]:
    """
    Score text against each category dictionary.

    A category's score is the total number of whole-word matches of all its
    terms, so a repeated term counts every time it appears.

    Returns:
        Dict mapping category name -> score, in vocabulary order

    Example:
        >>> score_categories("programming programming")["Technical Skills"]
        2
    """
    return {
        name: sum(len(pattern.findall(text)) for pattern in patterns)
        for name, patterns in _category_patterns(vocabulary)
    }


def categorize_content(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """
    Assign the best-fitting category to a text.

    The highest-scoring category wins; ties go to the category declared first.

    Args:
        text: Raw item text
        vocabulary: Word tables to score against

    Returns:
        Category name, or "General" when no category scores above zero
    """
    best_category = GENERAL_CATEGORY
    best_score = 0
    for name, score in score_categories(text, vocabulary).items():
        if score > best_score:
            best_category = name
            best_score = score
    return best_category


def matched_terms(text: str, category: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> List[str]:
    """Dictionary terms of one category that occur in text, in dictionary order."""
    return [
        keyword
        for keyword in vocabulary.keywords_for(category)
        if _compile_keyword_pattern(keyword).search(text)
    ]
