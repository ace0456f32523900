"""Unit tests for the vocabulary tables and override loading."""

import pytest

from reviewly.contexts.analysis import (
    DEFAULT_VOCABULARY,
    InvalidVocabularyError,
    Vocabulary,
    load_vocabulary,
)
from reviewly.contexts.analysis.vocabulary import CATEGORY_KEYWORDS


@pytest.fixture(autouse=True)
def no_vocabulary_env(monkeypatch):
    monkeypatch.delenv("REVIEWLY_VOCABULARY_PATH", raising=False)


@pytest.mark.unit
def test_default_category_order():
    assert DEFAULT_VOCABULARY.category_names == (
        "Technical Skills",
        "Leadership",
        "Communication",
        "Problem Solving",
        "Project Management",
        "Innovation",
        "Customer Focus",
        "Quality Assurance",
        "Learning & Development",
        "Collaboration",
    )


@pytest.mark.unit
def test_keywords_for():
    assert DEFAULT_VOCABULARY.keywords_for("Leadership") == CATEGORY_KEYWORDS["Leadership"]
    assert DEFAULT_VOCABULARY.keywords_for("Astrology") == ()


@pytest.mark.unit
def test_vocabulary_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_VOCABULARY.skill_words = ("juggled",)


@pytest.mark.unit
def test_load_without_path_or_env_returns_default():
    assert load_vocabulary() is DEFAULT_VOCABULARY


@pytest.mark.unit
def test_partial_override_keeps_other_defaults(tmp_path):
    path = tmp_path / "vocab.yaml"
    path.write_text("achievement_words: [Shipped, Landed]\n", encoding="utf-8")

    vocabulary = load_vocabulary(path)

    assert isinstance(vocabulary, Vocabulary)
    assert vocabulary.achievement_words == ("shipped", "landed")
    assert vocabulary.categories == DEFAULT_VOCABULARY.categories
    assert vocabulary.recommendations == DEFAULT_VOCABULARY.recommendations


@pytest.mark.unit
def test_categories_replace_whole_table(tmp_path):
    path = tmp_path / "vocab.yaml"
    path.write_text(
        "categories:\n"
        "  Ops: [oncall, incident]\n"
        "  Sales: [quota]\n"
        "recommendations:\n"
        "  - Keep a Brag Document\n",
        encoding="utf-8",
    )
    vocabulary = load_vocabulary(path)

    assert vocabulary.categories == (("Ops", ("oncall", "incident")), ("Sales", ("quota",)))
    assert vocabulary.recommendations == ("Keep a Brag Document",)


@pytest.mark.unit
def test_env_variable_used_when_no_path(tmp_path, monkeypatch):
    path = tmp_path / "vocab.yaml"
    path.write_text("skill_words: [juggled]\n", encoding="utf-8")
    monkeypatch.setenv("REVIEWLY_VOCABULARY_PATH", str(path))

    assert load_vocabulary().skill_words == ("juggled",)


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_vocabulary(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_root_must_be_mapping(tmp_path):
    path = tmp_path / "vocab.yaml"
    path.write_text("- achieved\n- delivered\n", encoding="utf-8")
    with pytest.raises(InvalidVocabularyError, match="mapping at root level"):
        load_vocabulary(path)


@pytest.mark.unit
def test_word_list_must_be_list(tmp_path):
    path = tmp_path / "vocab.yaml"
    path.write_text("positive_words: great\n", encoding="utf-8")
    with pytest.raises(InvalidVocabularyError) as exc_info:
        load_vocabulary(path)
    assert exc_info.value.key == "positive_words"
    assert exc_info.value.config_path == path


@pytest.mark.unit
def test_categories_must_be_non_empty_mapping(tmp_path):
    path = tmp_path / "vocab.yaml"
    path.write_text("categories: {}\n", encoding="utf-8")
    with pytest.raises(InvalidVocabularyError) as exc_info:
        load_vocabulary(path)
    assert exc_info.value.key == "categories"


@pytest.mark.unit
def test_dollar_braces_kept_literal(tmp_path):
    path = tmp_path / "vocab.yaml"
    path.write_text("recommendations: [\"Budget ${amount} for training\"]\n", encoding="utf-8")
    assert load_vocabulary(path).recommendations == ("Budget ${amount} for training",)


@pytest.mark.unit
def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "vocab.yaml"
    path.write_text("colour: blue\nnegative_words: [blocked]\n", encoding="utf-8")
    assert load_vocabulary(path).negative_words == ("blocked",)
