"""
Output records of the summarizing context.

All records convert to plain, YAML/JSON-safe dicts with camelCase keys via
to_dict(), so dashboards and exporters can treat them as value types.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from reviewly.contexts.analysis.trends import TrendSummary
from reviewly.contexts.intake.item_data_structure import Importance, SummaryItem


@dataclass
class CategorySummary:
    """
    Rollup of every item sharing one category.

    Attributes:
        category: Category label (one of the vocabulary categories, "General",
            or any label pre-assigned by the caller)
        items: Member items, fully resolved, in input order
        summary: Generated prose summary
        key_points: Up to 5 short highlights from high-importance items
        total_items: Number of member items
        importance: Category tier from the count of high-importance members
        trends: Growth direction, frequency and timespan
    """

    category: str
    items: List[SummaryItem]
    summary: str
    key_points: List[str]
    total_items: int
    importance: Importance
    trends: TrendSummary = field(default_factory=TrendSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "items": [item.to_dict() for item in self.items],
            "summary": self.summary,
            "keyPoints": list(self.key_points),
            "totalItems": self.total_items,
            "importance": self.importance,
            "trends": self.trends.to_dict(),
        }


@dataclass
class SummaryMetadata:
    """
    Run metadata.

    Attributes:
        total_items: Number of items summarized
        processed_at: When the summary was generated
        confidence: 0.5 plus 0.05 per item, capped at 0.95
    """

    total_items: int
    processed_at: datetime
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalItems": self.total_items,
            "processedAt": self.processed_at.isoformat(),
            "confidence": self.confidence,
        }


@dataclass
class AutoSummaryResult:
    """
    Structured performance summary produced by generate_auto_summary().

    Attributes:
        categories: Category rollups, most important tier first
        overall_summary: One synthesized paragraph
        key_achievements: Up to 5 achievement highlights
        skills_highlights: Up to 3 skill-growth highlights
        areas_for_improvement: Up to 3 negative or "improve" highlights
        recommendations: Fixed guidance strings
        metadata: Item count, processing time and confidence
    """

    categories: List[CategorySummary]
    overall_summary: str
    key_achievements: List[str]
    skills_highlights: List[str]
    areas_for_improvement: List[str]
    recommendations: List[str]
    metadata: SummaryMetadata

    @property
    def leading_category(self) -> CategorySummary | None:
        return self.categories[0] if self.categories else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": [category.to_dict() for category in self.categories],
            "overallSummary": self.overall_summary,
            "keyAchievements": list(self.key_achievements),
            "skillsHighlights": list(self.skills_highlights),
            "areasForImprovement": list(self.areas_for_improvement),
            "recommendations": list(self.recommendations),
            "metadata": self.metadata.to_dict(),
        }
