"""
Per-category prose summaries and key points.
"""

from typing import List, Sequence

from reviewly.contexts.analysis.trends import analyze_growth_trends
from reviewly.contexts.intake.item_data_structure import Importance, SummaryItem
from reviewly.contexts.summarizing.summary_data_structure import CategorySummary
from reviewly.utils.text_processing import first_sentence, pluralize, snippet

MAX_HIGHLIGHTS = 3
MAX_KEY_POINTS = 5
HIGHLIGHT_LENGTH = 100
FALLBACK_POINT_LENGTH = 80
MIN_KEY_POINT_LENGTH = 10

# Minimum high-importance members for each category tier
HIGH_CATEGORY_THRESHOLD = 3
MEDIUM_CATEGORY_THRESHOLD = 1


def _high_importance(items: Sequence[SummaryItem]) -> List[SummaryItem]:
    return [item for item in items if item.is_high_importance]


def generate_category_summary(items: Sequence[SummaryItem]) -> str:
    """
    Prose summary of a category.

    Example output:
        "This category contains 4 items, with 2 high-importance items. Key
        highlights include: Completed the migration...; Led the audit...."

    Args:
        items: Items of one category

    Returns:
        Summary text, or "" for an empty category
    """
    if not items:
        return ""

    high = _high_importance(items)
    summary = f"This category contains {pluralize(len(items), 'item')}"
    if high:
        summary += f", with {pluralize(len(high), 'high-importance item')}"
    summary += ". "

    highlights = [snippet(item.content, HIGHLIGHT_LENGTH) for item in high[:MAX_HIGHLIGHTS]]
    if highlights:
        summary += "Key highlights include: " + "; ".join(highlights) + "."

    return summary


def extract_key_points(items: Sequence[SummaryItem]) -> List[str]:
    """
    First sentences of up to five high-importance items.

    Points of ten characters or fewer are dropped, so fewer than five may be
    returned even when more high-importance items exist.
    """
    points = []
    for item in _high_importance(items)[:MAX_KEY_POINTS]:
        point = first_sentence(item.content) or snippet(item.content, FALLBACK_POINT_LENGTH)
        if len(point) > MIN_KEY_POINT_LENGTH:
            points.append(point)
    return points


def category_importance(items: Sequence[SummaryItem]) -> Importance:
    """high with 3+ high-importance members, medium with 1+, else low."""
    high_count = len(_high_importance(items))
    if high_count >= HIGH_CATEGORY_THRESHOLD:
        return "high"
    if high_count >= MEDIUM_CATEGORY_THRESHOLD:
        return "medium"
    return "low"


def summarize_category(category: str, items: Sequence[SummaryItem]) -> CategorySummary:
    """
    Build the full rollup for one category.

    Args:
        category: Category label
        items: Resolved member items in input order

    Returns:
        CategorySummary with prose, key points, tier and trends
    """
    return CategorySummary(
        category=category,
        items=list(items),
        summary=generate_category_summary(items),
        key_points=extract_key_points(items),
        total_items=len(items),
        importance=category_importance(items),
        trends=analyze_growth_trends(items),
    )
