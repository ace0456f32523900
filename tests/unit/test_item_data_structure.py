"""Unit tests for the SummaryItem record."""

from datetime import date, datetime

import pytest

from reviewly.contexts.intake import InvalidItemError, SummaryItem

BASE = {
    "id": "item-1",
    "content": "Completed the audit.",
    "source": "self-entered",
    "timestamp": "2024-12-15",
}


@pytest.mark.unit
def test_from_dict_minimal():
    item = SummaryItem.from_dict(BASE)

    assert item.id == "item-1"
    assert item.timestamp == datetime(2024, 12, 15)
    assert item.keywords == []
    assert item.category is None
    assert item.importance is None
    assert item.sentiment is None


@pytest.mark.unit
def test_from_dict_accepts_camel_and_snake_case():
    camel = SummaryItem.from_dict({**BASE, "sourceDetails": "Jira Integration"})
    snake = SummaryItem.from_dict({**BASE, "source_details": "Jira Integration"})
    assert camel.source_details == snake.source_details == "Jira Integration"


@pytest.mark.unit
def test_from_dict_timestamp_types():
    assert SummaryItem.from_dict({**BASE, "timestamp": date(2024, 1, 2)}).timestamp == datetime(2024, 1, 2)
    utc = SummaryItem.from_dict({**BASE, "timestamp": "2024-01-02T10:00:00Z"})
    assert utc.timestamp == datetime(2024, 1, 2, 10, 0)


@pytest.mark.unit
def test_from_dict_numeric_id_becomes_string():
    assert SummaryItem.from_dict({**BASE, "id": 42}).id == "42"


@pytest.mark.unit
@pytest.mark.parametrize("missing", ["id", "content", "source", "timestamp"])
def test_from_dict_missing_required_field(missing):
    data = {key: value for key, value in BASE.items() if key != missing}
    with pytest.raises(InvalidItemError) as exc_info:
        SummaryItem.from_dict(data)
    assert exc_info.value.field == missing


@pytest.mark.unit
@pytest.mark.parametrize(
    "field, value",
    [("source", "slack"), ("importance", "urgent"), ("sentiment", "angry")],
)
def test_from_dict_rejects_unknown_enumerated_values(field, value):
    with pytest.raises(InvalidItemError) as exc_info:
        SummaryItem.from_dict({**BASE, field: value})
    assert exc_info.value.field == field
    assert exc_info.value.item_id == "item-1"


@pytest.mark.unit
def test_from_dict_rejects_unparsable_timestamp():
    with pytest.raises(InvalidItemError, match="Unparsable timestamp"):
        SummaryItem.from_dict({**BASE, "timestamp": "last tuesday"})


@pytest.mark.unit
def test_from_dict_rejects_string_keywords():
    with pytest.raises(InvalidItemError):
        SummaryItem.from_dict({**BASE, "keywords": "audit, compliance"})


@pytest.mark.unit
def test_invalid_item_error_is_value_error():
    with pytest.raises(ValueError):
        SummaryItem.from_dict("not a mapping")


@pytest.mark.unit
def test_to_dict_uses_camel_case_and_iso_timestamp():
    item = SummaryItem.from_dict({**BASE, "sourceDetails": "Self Review", "keywords": ["audit"]})
    data = item.to_dict()

    assert data["sourceDetails"] == "Self Review"
    assert data["timestamp"] == "2024-12-15T00:00:00"
    assert data["keywords"] == ["audit"]
    assert set(data) == {
        "id", "content", "source", "sourceDetails", "timestamp",
        "category", "subcategory", "importance", "keywords", "sentiment",
    }
