"""
Summarizing Context

Responsibilities:
- Resolves missing item fields using the Analysis context
- Groups items by category and builds per-category rollups
- Ranks categories and synthesizes the executive summary

Owns: Output records and aggregation policy
Never: Parses item files or defines scoring word tables
"""

from reviewly.contexts.summarizing.aggregator import (
    areas_for_improvement,
    compose_overall_summary,
    compute_confidence,
    generate_auto_summary,
    group_by_category,
    key_achievements,
    rank_categories,
    resolve_item,
    skills_highlights,
)
from reviewly.contexts.summarizing.category_summarizer import (
    category_importance,
    extract_key_points,
    generate_category_summary,
    summarize_category,
)
from reviewly.contexts.summarizing.summary_data_structure import (
    AutoSummaryResult,
    CategorySummary,
    SummaryMetadata,
)

__all__ = [
    # Entry point
    "generate_auto_summary",
    # Aggregation steps
    "resolve_item",
    "group_by_category",
    "rank_categories",
    "key_achievements",
    "skills_highlights",
    "areas_for_improvement",
    "compose_overall_summary",
    "compute_confidence",
    # Category rollups
    "summarize_category",
    "generate_category_summary",
    "extract_key_points",
    "category_importance",
    # Records
    "AutoSummaryResult",
    "CategorySummary",
    "SummaryMetadata",
]
