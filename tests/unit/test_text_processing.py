"""Unit tests for text and timestamp utilities."""

from datetime import date, datetime, timedelta, timezone

import pytest

from reviewly.utils.text_processing import (
    first_sentence,
    pluralize,
    snippet,
    truncate_display,
    up_to_first_period,
)
from reviewly.utils.timestamp import days_between, millis, parse_timestamp


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("Shipped v2! Customers were thrilled.", "Shipped v2"),
        ("  Led the review...  and more", "Led the review"),
        ("No terminator", "No terminator"),
        ("", ""),
    ],
)
def test_first_sentence(text, expected):
    assert first_sentence(text) == expected


@pytest.mark.unit
def test_up_to_first_period():
    assert up_to_first_period("Delivered the API. Then rested.") == "Delivered the API."
    assert up_to_first_period("Is it done? Yes.") == "Is it done? Yes."
    assert up_to_first_period("No period") == "No period."


@pytest.mark.unit
def test_snippet_always_appends_ellipsis():
    assert snippet("short") == "short..."
    assert snippet("x" * 120) == "x" * 100 + "..."
    assert snippet("abcdef", 3) == "abc..."


@pytest.mark.unit
def test_truncate_display():
    assert truncate_display("short", 10) == "short"
    assert truncate_display("this is a very long string", 10) == "this is..."


@pytest.mark.unit
@pytest.mark.parametrize("count, expected", [(0, "0 item"), (1, "1 item"), (2, "2 items")])
def test_pluralize(count, expected):
    assert pluralize(count, "item") == expected


class TestTimestamps:

    @pytest.mark.unit
    def test_parse_variants(self):
        assert parse_timestamp("2024-12-15") == datetime(2024, 12, 15)
        assert parse_timestamp("2024-12-15T10:30:00Z") == datetime(2024, 12, 15, 10, 30)
        assert parse_timestamp("2024-12-15T12:30:00+02:00") == datetime(2024, 12, 15, 10, 30)
        assert parse_timestamp(date(2024, 12, 15)) == datetime(2024, 12, 15)
        aware = datetime(2024, 12, 15, 10, 30, tzinfo=timezone.utc)
        assert parse_timestamp(aware) == datetime(2024, 12, 15, 10, 30)

    @pytest.mark.unit
    def test_parse_epoch_milliseconds(self):
        assert parse_timestamp(1735689600000) == datetime(2025, 1, 1)
        assert parse_timestamp(1735689600500.0) == datetime(2025, 1, 1, 0, 0, 0, 500000)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["yesterday", "", None, True])
    def test_parse_rejects(self, value):
        with pytest.raises(ValueError):
            parse_timestamp(value)

    @pytest.mark.unit
    def test_days_between_rounds_up(self):
        start = datetime(2024, 12, 1)
        assert days_between(start, start) == 0
        assert days_between(start, start + timedelta(days=3)) == 3
        assert days_between(start, start + timedelta(days=3, hours=1)) == 4

    @pytest.mark.unit
    def test_millis(self):
        moment = datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert millis(moment) == 1735689600000
