"""
Intake Context

Responsibilities:
- Defines the SummaryItem record
- Collects items from self-review forms, integrations, and feedback
- Loads and validates items from YAML/JSON files

Owns: Item records and boundary validation
Never: Scores, categorizes, or summarizes item text
"""

from reviewly.contexts.intake.collectors import (
    collect_all,
    collect_from_feedback,
    collect_from_integrations,
    collect_from_self_review,
)
from reviewly.contexts.intake.exceptions import InvalidItemError
from reviewly.contexts.intake.item_data_structure import (
    IMPORTANCE_LEVELS,
    SENTIMENTS,
    SOURCES,
    Importance,
    Sentiment,
    Source,
    SummaryItem,
)
from reviewly.contexts.intake.item_loader import items_from_data, load_items

__all__ = [
    # Records
    "SummaryItem",
    "Source",
    "Importance",
    "Sentiment",
    "SOURCES",
    "IMPORTANCE_LEVELS",
    "SENTIMENTS",
    # Collectors
    "collect_from_self_review",
    "collect_from_integrations",
    "collect_from_feedback",
    "collect_all",
    # Loading
    "load_items",
    "items_from_data",
    "InvalidItemError",
]
