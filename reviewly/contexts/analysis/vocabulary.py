"""
Word tables for rule-based categorization and scoring.

All dictionaries live here as data so that adding a category or a word is a
table edit, not a code change. Category order matters: when two categories
tie, the one declared first wins.

Tables can be overridden from YAML (see load_vocabulary()):

    categories:
      Technical Skills: [programming, coding, python]
      Leadership: [mentor, lead]
    achievement_words: [achieved, delivered]
    recommendations:
      - Keep a brag document

Missing keys keep their defaults; a "categories" key replaces the whole table.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from reviewly.contexts.analysis.exceptions import InvalidVocabularyError
from reviewly.contexts.analysis.logger import _log_debug, _log_info

load_dotenv()

GENERAL_CATEGORY = "General"

# =============================================================================
# DEFAULT TABLES
# =============================================================================

CATEGORY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "Technical Skills": (
        "programming", "coding", "development", "software", "algorithm", "database",
        "api", "framework", "library", "debugging", "testing", "deployment",
        "javascript", "python", "react", "node", "sql", "git", "docker",
    ),
    "Leadership": (
        "leadership", "management", "team", "mentor", "guide", "lead", "supervise",
        "delegate", "motivate", "inspire", "coordinate", "organize", "facilitate",
    ),
    "Communication": (
        "communication", "presentation", "meeting", "discussion", "explain",
        "document", "write", "speak", "collaborate", "negotiate", "feedback",
    ),
    "Problem Solving": (
        "problem", "solution", "solve", "troubleshoot", "debug", "fix", "resolve",
        "analyze", "investigate", "optimize", "improve", "enhance",
    ),
    "Project Management": (
        "project", "planning", "schedule", "deadline", "milestone", "timeline",
        "budget", "resource", "scope", "requirement", "stakeholder", "delivery",
    ),
    "Innovation": (
        "innovation", "creative", "new", "idea", "invention", "design", "prototype",
        "experiment", "research", "explore", "discover", "breakthrough",
    ),
    "Customer Focus": (
        "customer", "client", "user", "service", "support", "satisfaction",
        "experience", "feedback", "requirement", "need", "expectation",
    ),
    "Quality Assurance": (
        "quality", "testing", "review", "validation", "verification", "standard",
        "compliance", "audit", "process", "procedure", "best practice",
    ),
    "Learning & Development": (
        "learn", "training", "course", "certification", "skill", "knowledge",
        "education", "workshop", "seminar", "conference", "study", "research",
    ),
    "Collaboration": (
        "collaborate", "teamwork", "partnership", "cooperation", "support",
        "help", "assist", "share", "contribute", "participate", "engage",
    ),
}

ACHIEVEMENT_WORDS = (
    "achieved", "accomplished", "completed", "delivered", "implemented",
    "launched", "released", "improved", "increased", "reduced", "optimized",
    "exceeded", "surpassed", "won", "earned", "gained", "success",
)

SKILL_WORDS = (
    "learned", "developed", "acquired", "mastered", "improved", "enhanced",
    "strengthened", "practiced", "applied", "utilized", "demonstrated",
)

POSITIVE_WORDS = (
    "excellent", "great", "good", "successful", "achieved", "improved",
    "effective", "efficient", "outstanding", "exceptional", "positive",
)

NEGATIVE_WORDS = (
    "failed", "poor", "bad", "difficult", "challenging", "problem",
    "issue", "struggle", "negative", "disappointing", "unsuccessful",
)

RECOMMENDATIONS = (
    "Continue building on your strongest skill areas",
    "Consider documenting your achievements for future reference",
    "Look for opportunities to apply your skills in new contexts",
)

# Substring flagging an item as an area for improvement regardless of sentiment
IMPROVEMENT_MARKER = "improve"


@dataclass(frozen=True)
class Vocabulary:
    """
    Immutable set of word tables used by the analysis functions.

    Attributes:
        categories: (category name, keywords) pairs in tie-break order
        achievement_words: Achievement language for importance and key achievements
        skill_words: Skill verbs for skills highlights
        positive_words: Positive sentiment words
        negative_words: Negative sentiment words
        recommendations: Fixed guidance strings for every summary
    """

    categories: Tuple[Tuple[str, Tuple[str, ...]], ...]
    achievement_words: Tuple[str, ...] = ACHIEVEMENT_WORDS
    skill_words: Tuple[str, ...] = SKILL_WORDS
    positive_words: Tuple[str, ...] = POSITIVE_WORDS
    negative_words: Tuple[str, ...] = NEGATIVE_WORDS
    recommendations: Tuple[str, ...] = RECOMMENDATIONS

    @property
    def category_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.categories)

    def keywords_for(self, category: str) -> Tuple[str, ...]:
        """Keywords of one category (empty for unknown categories)."""
        for name, keywords in self.categories:
            if name == category:
                return keywords
        return ()


DEFAULT_VOCABULARY = Vocabulary(categories=tuple(CATEGORY_KEYWORDS.items()))

_LIST_KEYS = (
    "achievement_words",
    "skill_words",
    "positive_words",
    "negative_words",
    "recommendations",
)


def _as_word_tuple(value, key: str, config_path: Path, lowercase: bool = True) -> Tuple[str, ...]:
    if not isinstance(value, list):
        raise InvalidVocabularyError(
            f"Expected a list of words, got {type(value).__name__}",
            config_path=config_path,
            key=key,
        )
    words = tuple(str(word) for word in value)
    return tuple(word.lower() for word in words) if lowercase else words


def load_vocabulary(path: Optional[Union[str, Path]] = None) -> Vocabulary:
    """
    Load a vocabulary override file on top of the defaults.

    Args:
        path: YAML file to load. Defaults to the REVIEWLY_VOCABULARY_PATH
            environment variable; when neither is set, returns DEFAULT_VOCABULARY.

    Returns:
        Vocabulary with overridden tables replaced

    Raises:
        FileNotFoundError: If the vocabulary file does not exist
        InvalidVocabularyError: If the file is not a mapping of word lists
    """
    if path is None:
        env_path = os.getenv("REVIEWLY_VOCABULARY_PATH")
        if not env_path:
            return DEFAULT_VOCABULARY
        path = env_path

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {config_path}")

    try:
        data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=False)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise InvalidVocabularyError(f"Could not read vocabulary: {e}", config_path) from e

    if not isinstance(data, dict):
        raise InvalidVocabularyError("Vocabulary must be a mapping at root level", config_path)

    overrides = {}

    if "categories" in data:
        categories = data["categories"]
        if not isinstance(categories, dict) or not categories:
            raise InvalidVocabularyError(
                "Expected a non-empty mapping of category name to keywords",
                config_path=config_path,
                key="categories",
            )
        overrides["categories"] = tuple(
            (str(name), _as_word_tuple(words, f"categories.{name}", config_path))
            for name, words in categories.items()
        )

    for key in _LIST_KEYS:
        if key in data:
            overrides[key] = _as_word_tuple(
                data[key], key, config_path, lowercase=(key != "recommendations")
            )

    unknown = set(data) - set(_LIST_KEYS) - {"categories"}
    if unknown:
        _log_debug(f"Ignoring unknown vocabulary keys: {sorted(unknown)}")

    _log_info(f"Loaded vocabulary overrides from {config_path.name}: {sorted(overrides)}")
    return replace(DEFAULT_VOCABULARY, **overrides)
