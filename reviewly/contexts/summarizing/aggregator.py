"""
Auto-summary aggregation.

Entry point of the engine: generate_auto_summary() takes raw SummaryItems and
returns an AutoSummaryResult. The run has three phases:

1. Resolve: fill each item's missing category, keywords, importance and
   sentiment from its content (resolve_item).
2. Roll up: group resolved items by category, summarize each group, and
   order groups by importance tier.
3. Synthesize: derive achievements, skills highlights, improvement areas,
   the overall paragraph and run metadata across all items.

The engine is pure: inputs are never mutated, nothing is cached between
calls, and no input raises.
"""

from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from reviewly.contexts.analysis.categorizer import categorize_content
from reviewly.contexts.analysis.keywords import extract_keywords
from reviewly.contexts.analysis.scoring import analyze_sentiment, assess_importance, mentions_any
from reviewly.contexts.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    GENERAL_CATEGORY,
    IMPROVEMENT_MARKER,
    Vocabulary,
)
from reviewly.contexts.intake.item_data_structure import SummaryItem
from reviewly.contexts.summarizing.category_summarizer import summarize_category
from reviewly.contexts.summarizing.logger import _log_debug, _log_info, log_summary_result
from reviewly.contexts.summarizing.summary_data_structure import (
    AutoSummaryResult,
    CategorySummary,
    SummaryMetadata,
)
from reviewly.utils.text_processing import up_to_first_period
from reviewly.utils.timestamp import now as current_time

MAX_KEY_ACHIEVEMENTS = 5
MAX_SKILLS_HIGHLIGHTS = 3
MAX_IMPROVEMENT_AREAS = 3

BASE_CONFIDENCE = 0.5
CONFIDENCE_PER_ITEM = 0.05
MAX_CONFIDENCE = 0.95

IMPORTANCE_RANK = {"high": 3, "medium": 2, "low": 1}


def resolve_item(item: SummaryItem, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> SummaryItem:
    """
    Return a copy of item with every derived field populated.

    Fields the caller supplied are kept. Missing ones are computed from the
    content. Importance is assessed against the keywords the caller supplied
    (none, when keywords were extracted here).
    """
    resolved = replace(
        item,
        category=item.category or categorize_content(item.content, vocabulary),
        keywords=list(item.keywords) or extract_keywords(item.content),
        importance=item.importance or assess_importance(item.content, item.keywords, vocabulary),
        sentiment=item.sentiment or analyze_sentiment(item.content, vocabulary),
    )
    _log_debug(
        f"  {item.id}: category={resolved.category}, importance={resolved.importance}, "
        f"sentiment={resolved.sentiment}"
    )
    return resolved


def group_by_category(items: Sequence[SummaryItem]) -> Dict[str, List[SummaryItem]]:
    """Group resolved items by category, in order of first appearance."""
    groups: Dict[str, List[SummaryItem]] = {}
    for item in items:
        groups.setdefault(item.category or GENERAL_CATEGORY, []).append(item)
    return groups


def rank_categories(categories: Sequence[CategorySummary]) -> List[CategorySummary]:
    """Order categories by importance tier, high first; ties keep their order."""
    return sorted(categories, key=lambda summary: IMPORTANCE_RANK[summary.importance], reverse=True)


def _highlights(items: Sequence[SummaryItem], limit: int) -> List[str]:
    return [up_to_first_period(item.content) for item in items[:limit]]


def key_achievements(
    items: Sequence[SummaryItem], vocabulary: Vocabulary = DEFAULT_VOCABULARY
) -> List[str]:
    """High-importance items that use achievement language."""
    matches = [
        item
        for item in items
        if item.is_high_importance and mentions_any(vocabulary.achievement_words, item.content)
    ]
    return _highlights(matches, MAX_KEY_ACHIEVEMENTS)


def skills_highlights(
    items: Sequence[SummaryItem], vocabulary: Vocabulary = DEFAULT_VOCABULARY
) -> List[str]:
    """High-importance items that use skill-growth verbs."""
    matches = [
        item
        for item in items
        if item.is_high_importance and mentions_any(vocabulary.skill_words, item.content)
    ]
    return _highlights(matches, MAX_SKILLS_HIGHLIGHTS)


def areas_for_improvement(items: Sequence[SummaryItem]) -> List[str]:
    """Items of any importance that are negative or mention "improve"."""
    matches = [
        item
        for item in items
        if item.sentiment == "negative" or IMPROVEMENT_MARKER in item.content.lower()
    ]
    return _highlights(matches, MAX_IMPROVEMENT_AREAS)


def compute_confidence(total_items: int) -> float:
    """0.5 plus 0.05 per item, capped at 0.95."""
    return round(min(MAX_CONFIDENCE, BASE_CONFIDENCE + CONFIDENCE_PER_ITEM * total_items), 2)


def compose_overall_summary(
    total_items: int, categories: Sequence[CategorySummary], achievement_count: int
) -> str:
    """
    Templated overview paragraph.

    Example:
        "Based on 8 items analyzed, you have demonstrated strong performance
        across 6 key areas. Your highest activity is in Project Management with
        1 items. Notable achievements include significant progress in 4 key areas."

    Without achievements the paragraph keeps its trailing space ("... items. ").
    """
    leading = categories[0] if categories else None
    sentences = [
        f"Based on {total_items} items analyzed, you have demonstrated strong performance "
        f"across {len(categories)} key areas.",
        f"Your highest activity is in {leading.category if leading else 'various areas'} "
        f"with {leading.total_items if leading else 0} items.",
        (
            f"Notable achievements include significant progress in {achievement_count} key areas."
            if achievement_count > 0
            else ""
        ),
    ]
    return " ".join(sentences)


def generate_auto_summary(
    items: Sequence[SummaryItem],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    now: Optional[datetime] = None,
) -> AutoSummaryResult:
    """
    Turn a collection of items into a structured performance summary.

    Args:
        items: Raw items; missing category, keywords, importance and sentiment
            are computed. The sequence and its items are left unchanged.
        vocabulary: Word tables to categorize and score with
        now: Timestamp recorded as metadata.processed_at (default: current time)

    Returns:
        AutoSummaryResult with categories ordered by importance tier

    Example:
        >>> result = generate_auto_summary(items)
        >>> [category.category for category in result.categories][:2]
        ['Project Management', 'Technical Skills']
        >>> result.metadata.confidence
        0.9
    """
    _log_info(f"Summarizing {len(items)} items")

    resolved = [resolve_item(item, vocabulary) for item in items]

    categories = rank_categories(
        [summarize_category(name, members) for name, members in group_by_category(resolved).items()]
    )

    achievements = key_achievements(resolved, vocabulary)

    result = AutoSummaryResult(
        categories=categories,
        overall_summary=compose_overall_summary(len(resolved), categories, len(achievements)),
        key_achievements=achievements,
        skills_highlights=skills_highlights(resolved, vocabulary),
        areas_for_improvement=areas_for_improvement(resolved),
        recommendations=list(vocabulary.recommendations),
        metadata=SummaryMetadata(
            total_items=len(resolved),
            processed_at=now or current_time(),
            confidence=compute_confidence(len(resolved)),
        ),
    )

    log_summary_result(result)
    return result
