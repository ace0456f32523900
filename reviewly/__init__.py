"""
Reviewly - rule-based categorization and auto-summarization of performance notes

Turns a user's self-reported activity (tasks, achievements, skills, feedback)
into a structured performance summary.

Architecture:
- Intake Context: Summary item records, collectors, and file loading
- Analysis Context: Keyword, category, importance, sentiment, and trend scoring
- Summarizing Context: Per-category rollups and the executive summary
"""

__version__ = "0.1.0"

from reviewly.contexts.intake import SummaryItem, load_items
from reviewly.contexts.summarizing import AutoSummaryResult, generate_auto_summary

__all__ = ["SummaryItem", "AutoSummaryResult", "generate_auto_summary", "load_items"]
