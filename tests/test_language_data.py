"""Morphology, function words and configuration loading."""

from __future__ import annotations

import textwrap

import pytest

from relevantwords.config import ConfigurationError, load_config
from relevantwords.function_words import FunctionWordProvider, load_function_words
from relevantwords.morphology import MorphologyData, MorphologyProvider, load_morphology


def test_english_morphology_stems_inflections(engine_config):
    data = MorphologyProvider.from_config(engine_config).data_for("en")

    assert data is not None
    assert data.stem("dogs") == data.stem("dog") == "dog"
    assert data.stem("running") == "run"
    assert data.stem("linking") == data.stem("links") == "link"


def test_irregular_forms_share_a_stem(engine_config):
    data = MorphologyProvider.from_config(engine_config).data_for("en")

    assert data.stem("children") == data.stem("child")
    assert data.stem("mice") == data.stem("mouse")


def test_unknown_language_has_no_morphology(engine_config):
    provider = MorphologyProvider.from_config(engine_config)

    assert provider.data_for("xx") is None
    assert "en" in provider.languages


def test_disabled_language_has_no_morphology(engine_config):
    engine_config.raw["morphology"]["disabled_languages"] = ["EN"]

    provider = MorphologyProvider.from_config(engine_config)

    assert provider.data_for("en") is None
    assert provider.data_for("de") is not None


def test_unknown_algorithm_is_rejected(tmp_path):
    path = tmp_path / "morphology.yaml"
    path.write_text("en:\n  algorithm: klingon\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_morphology(path)


def test_missing_morphology_file_is_rejected(tmp_path):
    with pytest.raises(ConfigurationError):
        load_morphology(tmp_path / "absent.yaml")


def test_custom_irregular_forms(tmp_path):
    path = tmp_path / "morphology.yaml"
    path.write_text(
        textwrap.dedent(
            """
            en:
              algorithm: english
              irregular:
                Oxen: ox
            """
        ),
        encoding="utf-8",
    )

    table = load_morphology(path)

    assert isinstance(table["en"], MorphologyData)
    assert table["en"].stem("oxen") == "ox"


def test_function_words_for_english(engine_config):
    provider = FunctionWordProvider.from_config(engine_config)

    words = provider.words_for("en")
    assert {"the", "and", "of", "no", "on"} <= words
    assert "dog" not in words
    assert provider.words_for("xx") == frozenset()


def test_function_words_can_be_disabled(engine_config):
    engine_config.raw["function_words"]["enabled"] = False

    provider = FunctionWordProvider.from_config(engine_config)

    assert provider.words_for("en") == frozenset()


def test_function_words_accept_lists(tmp_path):
    path = tmp_path / "function_words.yaml"
    path.write_text("en:\n  - The\n  - of\nde: der die das\n", encoding="utf-8")

    table = load_function_words(path)

    assert table["en"] == frozenset({"the", "of"})
    assert table["de"] == frozenset({"der", "die", "das"})


def test_load_config_defaults():
    config = load_config(None)

    assert config.default_locale == "en_US"
    assert config.function_words_enabled is True
    assert config.abbreviations_enabled is True
    assert config.abbreviation_length == (2, 4)
    assert config.morphology_path.name == "morphology.yaml"
    assert config.disabled_languages == frozenset()


def test_load_config_merges_nested_sections(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        textwrap.dedent(
            """
            default_locale: nl_NL
            abbreviations:
              max_length: 5
            """
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.default_locale == "nl_NL"
    assert config.abbreviation_length == (2, 5)
    assert config.abbreviations_enabled is True


def test_load_config_missing_file_uses_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yaml")

    assert config.default_locale == "en_US"


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_defaults_are_not_shared_between_configs():
    first = load_config(None)
    first.raw["morphology"]["disabled_languages"].append("en")

    assert load_config(None).disabled_languages == frozenset()
