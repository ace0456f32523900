"""Frequency-ranked keyword extraction."""

import re
from collections import Counter
from typing import List

NON_WORD = re.compile(r"[^\w\s]")

MAX_KEYWORDS = 10
MIN_KEYWORD_LENGTH = 3


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> List[str]:
    """
    Rank the terms of a text by how often they occur.

    Lowercases, replaces punctuation with spaces, drops tokens shorter than
    three characters, and returns the most frequent tokens. Ties keep the
    order in which the tokens first appear. No stopword list is applied.

    Args:
        text: Raw item text
        limit: Maximum number of keywords (default: 10)

    Returns:
        Up to `limit` keywords, most frequent first

    Example:
        >>> extract_keywords("Fixed the API. The API now caches responses.")
        ['the', 'api', 'fixed', 'now', 'caches', 'responses']
    """
    tokens = NON_WORD.sub(" ", text.lower()).split()
    counts = Counter(token for token in tokens if len(token) >= MIN_KEYWORD_LENGTH)
    return [token for token, _ in counts.most_common(limit)]
