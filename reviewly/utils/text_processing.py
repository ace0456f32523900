"""
Text processing utilities for highlights and display.
"""

import re

SENTENCE_TERMINATORS = re.compile(r"[.!?]+")


def first_sentence(text: str) -> str:
    """
    First sentence of text, split on runs of '.', '!' or '?' and trimmed.

    Example:
        >>> first_sentence("Shipped v2! Customers were thrilled.")
        'Shipped v2'
    """
    return SENTENCE_TERMINATORS.split(text, maxsplit=1)[0].strip()


def up_to_first_period(text: str) -> str:
    """
    Text up to (not including) the first period, with a period appended.

    Unlike first_sentence(), only '.' ends the highlight and nothing is trimmed.

    Example:
        >>> up_to_first_period("Delivered the API. Then rested.")
        'Delivered the API.'
        >>> up_to_first_period("No period here")
        'No period here.'
    """
    return text.split(".", 1)[0] + "."


def snippet(text: str, length: int = 100) -> str:
    """
    First `length` characters of text followed by "...".

    The ellipsis is always appended, even for short text.
    """
    return text[:length] + "..."


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def pluralize(count: int, noun: str) -> str:
    """
    "1 item", "2 items". Counts below two stay singular.
    """
    return f"{count} {noun}{'s' if count > 1 else ''}"
