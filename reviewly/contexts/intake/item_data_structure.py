"""
Summary item data structure for the Intake context.

Provides the SummaryItem record: one unit of self-reported or externally
sourced text that the Analysis and Summarizing contexts operate on.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Literal, Mapping, Optional, get_args

from reviewly.contexts.intake.exceptions import InvalidItemError
from reviewly.utils.timestamp import parse_timestamp

Source = Literal["self-entered", "imported", "external"]
Importance = Literal["high", "medium", "low"]
Sentiment = Literal["positive", "neutral", "negative"]

SOURCES = get_args(Source)
IMPORTANCE_LEVELS = get_args(Importance)
SENTIMENTS = get_args(Sentiment)

REQUIRED_FIELDS = ("id", "content", "source", "timestamp")

# camelCase keys accepted in raw data, mapped to attribute names
_KEY_ALIASES = {
    "sourceDetails": "source_details",
}


@dataclass
class SummaryItem:
    """
    One piece of self-reported or imported activity text.

    `source` and `source_details` are provenance only and never affect scoring.
    `category`, `importance`, `keywords` and `sentiment` are optional inputs;
    the summarizer fills in whichever are missing.

    Attributes:
        id: Opaque unique identifier
        content: Free text
        source: Provenance tag ("self-entered", "imported", "external")
        timestamp: Point in time the item represents
        source_details: Human-readable origin label (e.g., "Jira Integration")
        category: Pre-assigned category label
        subcategory: Pre-assigned subcategory label
        importance: "high", "medium" or "low"
        keywords: Significant terms, most significant first
        sentiment: "positive", "neutral" or "negative"
    """

    id: str
    content: str
    source: Source
    timestamp: datetime
    source_details: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    importance: Optional[Importance] = None
    keywords: List[str] = field(default_factory=list)
    sentiment: Optional[Sentiment] = None

    @property
    def is_high_importance(self) -> bool:
        return self.importance == "high"

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SummaryItem":
        """
        Build a SummaryItem from a plain mapping (parsed YAML/JSON, API payload).

        Accepts camelCase (sourceDetails) or snake_case (source_details) keys.
        Timestamps may be datetime, date, or ISO 8601 strings.

        Args:
            data: Raw item mapping

        Returns:
            Validated SummaryItem

        Raises:
            InvalidItemError: If a required field is missing, an enumerated
                field has an unknown value, or the timestamp is unparsable
        """
        if not isinstance(data, Mapping):
            raise InvalidItemError(f"Item must be a mapping, got {type(data).__name__}")

        normalized = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        item_id = normalized.get("id")

        for required in REQUIRED_FIELDS:
            if normalized.get(required) is None:
                raise InvalidItemError(
                    "Missing required field",
                    item_id=None if item_id is None else str(item_id),
                    field=required,
                )
        item_id = str(item_id)

        source = normalized["source"]
        if source not in SOURCES:
            raise InvalidItemError(
                f"Unknown source {source!r}. Expected one of {list(SOURCES)}",
                item_id=item_id,
                field="source",
            )

        importance = normalized.get("importance")
        if importance is not None and importance not in IMPORTANCE_LEVELS:
            raise InvalidItemError(
                f"Unknown importance {importance!r}. Expected one of {list(IMPORTANCE_LEVELS)}",
                item_id=item_id,
                field="importance",
            )

        sentiment = normalized.get("sentiment")
        if sentiment is not None and sentiment not in SENTIMENTS:
            raise InvalidItemError(
                f"Unknown sentiment {sentiment!r}. Expected one of {list(SENTIMENTS)}",
                item_id=item_id,
                field="sentiment",
            )

        try:
            timestamp = parse_timestamp(normalized["timestamp"])
        except ValueError as e:
            raise InvalidItemError(str(e), item_id=item_id, field="timestamp") from e

        keywords = normalized.get("keywords") or []
        if isinstance(keywords, str) or not isinstance(keywords, (list, tuple)):
            raise InvalidItemError(
                "Keywords must be a list of strings", item_id=item_id, field="keywords"
            )

        return cls(
            id=item_id,
            content=str(normalized["content"]),
            source=source,
            timestamp=timestamp,
            source_details=normalized.get("source_details"),
            category=normalized.get("category"),
            subcategory=normalized.get("subcategory"),
            importance=importance,
            keywords=[str(keyword) for keyword in keywords],
            sentiment=sentiment,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain, YAML/JSON-safe representation with camelCase keys.

        The timestamp is rendered as an ISO 8601 string.
        """
        return {
            "id": self.id,
            "content": self.content,
            "source": self.source,
            "sourceDetails": self.source_details,
            "timestamp": self.timestamp.isoformat(),
            "category": self.category,
            "subcategory": self.subcategory,
            "importance": self.importance,
            "keywords": list(self.keywords),
            "sentiment": self.sentiment,
        }
