"""
Analysis Context

Responsibilities:
- Extracts frequency-ranked keywords from item text
- Assigns items to competency categories from keyword dictionaries
- Scores item importance and sentiment
- Measures growth trends within a category over time
- Owns the word tables (vocabulary) behind all of the above

Owns: Pure scoring functions over plain text and word tables
Never: Groups items, builds summaries, or reads item files
"""

from reviewly.contexts.analysis.categorizer import (
    categorize_content,
    matched_terms,
    score_categories,
)
from reviewly.contexts.analysis.exceptions import InvalidVocabularyError
from reviewly.contexts.analysis.keywords import extract_keywords
from reviewly.contexts.analysis.scoring import (
    analyze_sentiment,
    assess_importance,
    importance_score,
)
from reviewly.contexts.analysis.trends import Growth, TrendSummary, analyze_growth_trends
from reviewly.contexts.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    GENERAL_CATEGORY,
    Vocabulary,
    load_vocabulary,
)

__all__ = [
    # Text scoring
    "extract_keywords",
    "categorize_content",
    "score_categories",
    "matched_terms",
    "assess_importance",
    "importance_score",
    "analyze_sentiment",
    # Trends
    "analyze_growth_trends",
    "TrendSummary",
    "Growth",
    # Vocabulary
    "Vocabulary",
    "DEFAULT_VOCABULARY",
    "GENERAL_CATEGORY",
    "load_vocabulary",
    "InvalidVocabularyError",
]
