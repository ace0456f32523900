"""Shared fixtures for Reviewly tests."""

from datetime import datetime
from pathlib import Path

import pytest

from reviewly.contexts.intake import SummaryItem, load_items

FIXTURES_PATH = Path(__file__).parent / "fixtures"
REFERENCE_ITEMS_PATH = FIXTURES_PATH / "reference_items.yaml"


@pytest.fixture
def make_item():
    """Factory for SummaryItems with sensible defaults."""
    counter = {"n": 0}

    def _make(content="", timestamp=None, **overrides):
        counter["n"] += 1
        fields = {
            "id": f"item-{counter['n']}",
            "content": content,
            "source": "self-entered",
            "timestamp": timestamp or datetime(2024, 12, 1),
        }
        fields.update(overrides)
        return SummaryItem(**fields)

    return _make


@pytest.fixture
def reference_items():
    """The eight-item reference dataset."""
    return load_items(REFERENCE_ITEMS_PATH)
