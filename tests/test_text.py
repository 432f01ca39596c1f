"""Tokenizer and subheading helpers."""

from __future__ import annotations

from relevantwords.language import get_language
from relevantwords.text import remove_top_level_subheadings, strip_tags, tokenize, top_level_subheadings


def test_tokenize_strips_markup_and_normalises_quotes():
    tokens = tokenize("The Yoast <strong>SEO</strong> plugin's ‘quoted’ text")

    assert tokens == ["The", "Yoast", "SEO", "plugin's", "quoted", "text"]


def test_tokenize_keeps_hyphenated_words_and_numbers():
    assert tokenize("well-known x-ray 2024") == ["well-known", "x-ray", "2024"]


def test_tokenize_separates_adjacent_blocks():
    assert tokenize("<p>one</p><p>two</p>") == ["one", "two"]


def test_tokenize_empty_text():
    assert tokenize("") == []
    assert tokenize("   ") == []
    assert tokenize("-- ' __") == []


def test_strip_tags_leaves_plain_text_untouched():
    assert strip_tags("no markup here") == "no markup here"


def test_top_level_subheadings_reads_h2_and_h3_only():
    html = "<h2>First heading</h2><p>Body</p><h3>Second <em>one</em></h3><h4>Deep</h4>"

    assert top_level_subheadings(html) == ["First heading", "Second one"]


def test_remove_top_level_subheadings():
    html = "<h2>First heading</h2><p>Body</p><h3>Second</h3><h4>Deep</h4>"

    stripped = remove_top_level_subheadings(html)

    assert "First heading" not in stripped
    assert "Second" not in stripped
    assert tokenize(stripped) == ["Body", "Deep"]


def test_text_without_subheadings_is_returned_as_is():
    text = "<p>Just a paragraph</p>"

    assert top_level_subheadings(text) == []
    assert remove_top_level_subheadings(text) == text


def test_get_language_from_locale():
    assert get_language("en_US") == "en"
    assert get_language("nl-BE") == "nl"
    assert get_language("DE") == "de"
    assert get_language("") == "en"
    assert get_language("", "fr_FR") == "fr"


def test_entities_are_decoded_without_tags():
    plain = "cats&nbsp;cats&nbsp;cats &amp; dogs"

    assert tokenize(plain) == ["cats", "cats", "cats", "dogs"]
    assert tokenize(plain) == tokenize(f"<p>{plain}</p>")


def test_stray_angle_bracket_keeps_following_words():
    assert tokenize("a<b camera camera") == ["a", "b", "camera", "camera"]
    assert tokenize("size<b then camera camera") == ["size", "b", "then", "camera", "camera"]
    assert tokenize("<p>x</p> if a<b camera camera") == ["x", "if", "a", "b", "camera", "camera"]


def test_stray_angle_bracket_survives_subheading_removal():
    stripped = remove_top_level_subheadings("<h2>Heading</h2><p>a<b camera camera</p>")

    assert tokenize(stripped) == ["a", "b", "camera", "camera"]
