"""
Shared utilities for Reviewly.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamp parsing and formatting
- Sentence and snippet helpers
"""

from reviewly.utils.text_processing import first_sentence, truncate_display
from reviewly.utils.timestamp import now, parse_timestamp

__all__ = ["first_sentence", "truncate_display", "now", "parse_timestamp"]
