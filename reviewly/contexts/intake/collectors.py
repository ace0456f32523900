"""
Collectors that turn raw review, integration, and feedback payloads into SummaryItems.

Each collector accepts the plain data a form or importer produces and returns
a list of SummaryItems ready for generate_auto_summary(). Entries without
usable text are skipped.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence

from reviewly.contexts.intake.exceptions import InvalidItemError
from reviewly.contexts.intake.item_data_structure import SummaryItem
from reviewly.contexts.intake.logger import _log_debug, _log_warning
from reviewly.utils.timestamp import millis, now, parse_timestamp

NOT_SPECIFIED = "Not specified"

# Integration type -> source details label
INTEGRATION_LABELS = {
    "github": "GitHub Integration",
    "jira": "Jira Integration",
    "notion": "Notion Integration",
}


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _entry_timestamp(entry: Mapping[str, Any], fallback: datetime, item_id: str) -> datetime:
    """Use the entry's own date when present, otherwise the collection time."""
    raw = entry.get("date")
    if not raw:
        return fallback
    try:
        return parse_timestamp(raw)
    except ValueError as e:
        raise InvalidItemError(str(e), item_id=item_id, field="date") from e


def collect_from_self_review(
    review: Mapping[str, Any], collected_at: Optional[datetime] = None
) -> List[SummaryItem]:
    """
    Collect items from a self-review form.

    Args:
        review: Mapping with optional "tasks", "achievements" and "skills" lists.
            Tasks carry description/results, achievements description/impact,
            skills name/description/application.
        collected_at: Timestamp for all collected items (default: now)

    Returns:
        Items for every entry with a non-blank description, tasks first,
        then achievements, then skills. Achievements are high importance,
        everything else medium.

    Example:
        >>> items = collect_from_self_review({
        ...     "achievements": [{"description": "Shipped v2", "impact": "2x signups"}]
        ... })
        >>> items[0].content
        'Achievement: Shipped v2. Impact: 2x signups'
    """
    collected_at = collected_at or now()
    stamp = millis(collected_at)
    items = []

    for index, task in enumerate(review.get("tasks") or []):
        if not _has_text(task.get("description")):
            continue
        items.append(
            SummaryItem(
                id=f"task-{index}-{stamp}",
                content=f"Task: {task['description']}. {task.get('results') or ''}",
                source="self-entered",
                source_details="Self Review - Tasks",
                timestamp=collected_at,
                importance="medium",
            )
        )

    for index, achievement in enumerate(review.get("achievements") or []):
        if not _has_text(achievement.get("description")):
            continue
        impact = achievement.get("impact") or NOT_SPECIFIED
        items.append(
            SummaryItem(
                id=f"achievement-{index}-{stamp}",
                content=f"Achievement: {achievement['description']}. Impact: {impact}",
                source="self-entered",
                source_details="Self Review - Achievements",
                timestamp=collected_at,
                importance="high",
            )
        )

    for index, skill in enumerate(review.get("skills") or []):
        if not _has_text(skill.get("description")):
            continue
        application = skill.get("application") or NOT_SPECIFIED
        items.append(
            SummaryItem(
                id=f"skill-{index}-{stamp}",
                content=(
                    f"Skill Development: {skill.get('name', '')} - {skill['description']}. "
                    f"Application: {application}"
                ),
                source="self-entered",
                source_details="Self Review - Skills",
                timestamp=collected_at,
                importance="medium",
            )
        )

    _log_debug(f"Collected {len(items)} self-review items")
    return items


def _integration_entry_text(integration_type: str, entry: Mapping[str, Any]) -> str:
    """Content line for one integration entry, by integration type."""
    if integration_type == "github":
        return f"Code Contribution: {entry.get('title') or entry.get('message') or ''}"
    if integration_type == "jira":
        return f"Project Task: {entry.get('summary', '')} - {entry.get('status', '')}"
    if integration_type == "notion":
        return f"Documentation: {entry.get('title', '')}"
    return entry.get("title") or entry.get("description") or "Imported item"


def collect_from_integrations(
    integrations: Sequence[Mapping[str, Any]], collected_at: Optional[datetime] = None
) -> List[SummaryItem]:
    """
    Collect items from connected integrations (GitHub, Jira, Notion, others).

    Args:
        integrations: Each mapping has "type", optional "name", and a "data" list
        collected_at: Fallback timestamp for entries without a "date" (default: now)

    Returns:
        Imported, medium-importance items in integration then entry order

    Raises:
        InvalidItemError: If an entry's "date" cannot be parsed
    """
    collected_at = collected_at or now()
    stamp = millis(collected_at)
    items = []

    for integration in integrations:
        integration_type = integration.get("type", "")
        label = INTEGRATION_LABELS.get(
            integration_type, f"{integration.get('name', integration_type)} Integration"
        )
        for index, entry in enumerate(integration.get("data") or []):
            content = _integration_entry_text(integration_type, entry)
            if not content.strip():
                continue
            item_id = f"integration-{integration_type}-{index}-{stamp}"
            items.append(
                SummaryItem(
                    id=item_id,
                    content=content,
                    source="imported",
                    source_details=label,
                    timestamp=_entry_timestamp(entry, collected_at, item_id),
                    importance="medium",
                )
            )

    _log_debug(f"Collected {len(items)} integration items")
    return items


def collect_from_feedback(
    feedback: Sequence[Mapping[str, Any]], collected_at: Optional[datetime] = None
) -> List[SummaryItem]:
    """
    Collect items from third-party feedback.

    Feedback rated 4 or higher is high importance; everything else is medium.

    Args:
        feedback: Mappings with "content", optional "from", "rating" and "date"
        collected_at: Fallback timestamp for entries without a "date" (default: now)

    Returns:
        External items for every entry with non-blank content

    Raises:
        InvalidItemError: If an entry's "date" cannot be parsed
    """
    collected_at = collected_at or now()
    stamp = millis(collected_at)
    items = []

    for index, entry in enumerate(feedback):
        if not _has_text(entry.get("content")):
            continue
        item_id = f"feedback-{index}-{stamp}"
        rating = entry.get("rating")
        if rating is not None and not isinstance(rating, (int, float)):
            _log_warning(f"Ignoring non-numeric rating {rating!r} on {item_id}")
            rating = None
        items.append(
            SummaryItem(
                id=item_id,
                content=f"Feedback: {entry['content']}",
                source="external",
                source_details=f"Feedback from {entry.get('from') or 'Anonymous'}",
                timestamp=_entry_timestamp(entry, collected_at, item_id),
                importance="high" if rating is not None and rating >= 4 else "medium",
            )
        )

    _log_debug(f"Collected {len(items)} feedback items")
    return items


def collect_all(
    review: Optional[Mapping[str, Any]] = None,
    integrations: Optional[Sequence[Mapping[str, Any]]] = None,
    feedback: Optional[Sequence[Mapping[str, Any]]] = None,
    collected_at: Optional[datetime] = None,
) -> List[SummaryItem]:
    """
    Run every collector and concatenate the results.

    Order is self-review, then integrations, then feedback.
    """
    collected_at = collected_at or now()
    items: List[SummaryItem] = []
    if review:
        items.extend(collect_from_self_review(review, collected_at))
    if integrations:
        items.extend(collect_from_integrations(integrations, collected_at))
    if feedback:
        items.extend(collect_from_feedback(feedback, collected_at))
    return items
