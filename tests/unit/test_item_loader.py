"""Unit tests for loading items from YAML and JSON files."""

import json

import pytest

from reviewly.contexts.intake import InvalidItemError, items_from_data, load_items

ITEM = {
    "id": "item-1",
    "content": "Completed the audit.",
    "source": "self-entered",
    "timestamp": "2024-12-15",
}


@pytest.mark.unit
def test_items_from_list_and_mapping():
    assert [item.id for item in items_from_data([ITEM])] == ["item-1"]
    assert [item.id for item in items_from_data({"items": [ITEM]})] == ["item-1"]


@pytest.mark.unit
def test_items_from_mapping_without_items_key():
    with pytest.raises(InvalidItemError, match="'items' list"):
        items_from_data({"entries": [ITEM]})


@pytest.mark.unit
def test_items_from_data_rejects_scalar():
    with pytest.raises(InvalidItemError, match="Expected a list of items"):
        items_from_data("item-1")


@pytest.mark.unit
def test_entry_index_reported_when_id_missing():
    broken = {key: value for key, value in ITEM.items() if key != "id"}
    with pytest.raises(InvalidItemError) as exc_info:
        items_from_data([ITEM, broken])
    assert "(entry 1)" in str(exc_info.value)
    assert exc_info.value.field == "id"


@pytest.mark.unit
def test_item_id_reported_when_known():
    with pytest.raises(InvalidItemError) as exc_info:
        items_from_data([{**ITEM, "source": "fax"}])
    assert exc_info.value.item_id == "item-1"
    assert "(entry" not in str(exc_info.value)


@pytest.mark.unit
def test_load_yaml(tmp_path):
    path = tmp_path / "items.yaml"
    path.write_text(
        "items:\n"
        "  - id: item-1\n"
        "    content: Completed the audit.\n"
        "    source: imported\n"
        "    sourceDetails: Jira Integration\n"
        '    timestamp: "2024-12-15"\n'
        "    keywords: [audit, compliance]\n",
        encoding="utf-8",
    )
    items = load_items(path)

    assert len(items) == 1
    assert items[0].source_details == "Jira Integration"
    assert items[0].keywords == ["audit", "compliance"]


@pytest.mark.unit
def test_load_json(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps([ITEM, {**ITEM, "id": "item-2"}]), encoding="utf-8")

    assert [item.id for item in load_items(str(path))] == ["item-1", "item-2"]


@pytest.mark.unit
def test_load_keeps_dollar_braces_literal(tmp_path):
    path = tmp_path / "items.yaml"
    path.write_text(
        "- id: item-1\n"
        "  content: Cut cloud cost to ${spend} per month\n"
        "  source: self-entered\n"
        "  timestamp: \"2024-12-15\"\n",
        encoding="utf-8",
    )
    assert load_items(path)[0].content == "Cut cloud cost to ${spend} per month"


@pytest.mark.unit
def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_items(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_load_malformed_yaml(tmp_path):
    path = tmp_path / "items.yaml"
    path.write_text("items: [unclosed\n", encoding="utf-8")
    with pytest.raises(InvalidItemError, match="Could not read item file"):
        load_items(path)


@pytest.mark.unit
def test_load_reference_fixture(reference_items):
    assert len(reference_items) == 8
    assert reference_items[0].id == "item-1"
    assert all(item.category is None for item in reference_items)
