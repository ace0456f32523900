#!/usr/bin/env python3
"""
Command-line interface for the Reviewly summarization engine.

Commands:
    summarize  - Summarize an item file (YAML or JSON) into structured output
    categorize - Show how a single piece of text would be scored
    vocabulary - List categories or the keywords of one category

Examples:
    # Summarize to stdout as YAML
    reviewly summarize items.yaml

    # Write JSON to a file with a custom vocabulary
    reviewly summarize items.yaml -o summary.json --format json --vocabulary vocab.yaml

    # Inspect scoring of one sentence
    reviewly categorize "Delivered the new API ahead of schedule."
"""

import json
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from omegaconf import OmegaConf
from typing_extensions import Annotated

from reviewly.contexts.analysis import (
    analyze_sentiment,
    assess_importance,
    categorize_content,
    extract_keywords,
    load_vocabulary,
    matched_terms,
)
from reviewly.contexts.analysis.exceptions import InvalidVocabularyError
from reviewly.contexts.analysis.scoring import words_present
from reviewly.contexts.intake import InvalidItemError, load_items
from reviewly.contexts.summarizing import generate_auto_summary
from reviewly.contexts.summarizing.logger import setup_summary_logger
from reviewly.utils.text_processing import truncate_display
from reviewly.utils.timestamp import session_stamp

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="Categorize and summarize self-reported activity into a performance summary",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    yaml = "yaml"
    json = "json"


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _load_vocabulary_or_exit(vocabulary_path: Optional[Path]):
    try:
        return load_vocabulary(vocabulary_path)
    except (FileNotFoundError, InvalidVocabularyError) as e:
        _fail(f"Error: {e}")


def _quiet_logging() -> None:
    """Drop loguru's default DEBUG sink; only warnings reach stderr."""
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@app.command("summarize")
def summarize_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="YAML or JSON file with a list of items (or an 'items' key)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output path (defaults to stdout)"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.yaml,
    vocabulary_path: Annotated[
        Optional[Path],
        typer.Option("--vocabulary", help="Vocabulary override YAML (default: $REVIEWLY_VOCABULARY_PATH)"),
    ] = None,
    log: Annotated[
        bool,
        typer.Option("--log/--no-log", help="Write a session log under $REVIEWLY_LOGS_PATH"),
    ] = True,
):
    """
    Summarize an item file into categories, highlights, and recommendations.

    Examples:\n
        $ reviewly summarize items.yaml

        $ reviewly summarize items.json -o summary.json --format json
    """
    if log:
        logs_root = Path(os.getenv("REVIEWLY_LOGS_PATH", "outs/logs"))
        log_file = setup_summary_logger(
            logs_root / f"summary_{session_stamp()}", input_name=str(input_path)
        )
    else:
        log_file = None
        _quiet_logging()

    vocabulary = _load_vocabulary_or_exit(vocabulary_path)

    try:
        items = load_items(input_path)
    except (FileNotFoundError, InvalidItemError) as e:
        _fail(f"Error: {e}")

    result = generate_auto_summary(items, vocabulary=vocabulary)
    data = result.to_dict()

    if output_format == OutputFormat.json:
        rendered = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        rendered = OmegaConf.to_yaml(OmegaConf.create(data))

    if output is None:
        typer.echo(rendered.rstrip())
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered.rstrip() + "\n", encoding="utf-8")
    typer.secho("✓ Summary written", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {output}")
    if log_file:
        typer.echo(f"  Log: {log_file}")


@app.command("categorize")
def categorize_command(
    text: Annotated[str, typer.Argument(help="Text to score")],
    vocabulary_path: Annotated[
        Optional[Path],
        typer.Option("--vocabulary", help="Vocabulary override YAML"),
    ] = None,
):
    """
    Show the category, keywords, importance, and sentiment for one text.

    Examples:\n
        $ reviewly categorize "Mentored two new hires on the deployment process."
    """
    _quiet_logging()
    vocabulary = _load_vocabulary_or_exit(vocabulary_path)

    keywords = extract_keywords(text)
    category = categorize_content(text, vocabulary)

    typer.secho(truncate_display(text, 80), bold=True)
    typer.echo(f"  Category:   {category}")
    terms = matched_terms(text, category, vocabulary)
    if terms:
        typer.echo(f"  Matched:    {', '.join(terms)}")
    typer.echo(f"  Keywords:   {', '.join(keywords) if keywords else '(none)'}")
    typer.echo(f"  Importance: {assess_importance(text, [], vocabulary)}")
    achievements = words_present(vocabulary.achievement_words, text)
    if achievements:
        typer.echo(f"  Achievement words: {', '.join(achievements)}")
    typer.echo(f"  Sentiment:  {analyze_sentiment(text, vocabulary)}")


@app.command("vocabulary")
def vocabulary_command(
    category: Annotated[
        Optional[str],
        typer.Argument(help="Category to show keywords for (e.g., 'Leadership')"),
    ] = None,
    vocabulary_path: Annotated[
        Optional[Path],
        typer.Option("--vocabulary", help="Vocabulary override YAML"),
    ] = None,
):
    """
    List categories of the active vocabulary, or one category's keywords.

    Examples:\n
        $ reviewly vocabulary

        $ reviewly vocabulary "Problem Solving"
    """
    _quiet_logging()
    vocabulary = _load_vocabulary_or_exit(vocabulary_path)

    if category is None:
        for name, keywords in vocabulary.categories:
            typer.echo(f"{name} ({len(keywords)} keywords)")
        return

    if category not in vocabulary.category_names:
        _fail(f"Unknown category '{category}'. Available: {', '.join(vocabulary.category_names)}")

    typer.secho(category, bold=True)
    for keyword in vocabulary.keywords_for(category):
        typer.echo(f"  {keyword}")


if __name__ == "__main__":
    app()
