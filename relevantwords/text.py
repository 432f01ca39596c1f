"""Shared text utilities: HTML stripping, tokenization and subheadings."""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup, FeatureNotFound  # type: ignore

# Headings treated as the top level of a post body (h1 is the post title).
SUBHEADING_TAGS: tuple[str, ...] = ("h2", "h3")

_TOKEN_RE = re.compile(r"[\w']+(?:-[\w']+)*")
_MARKUP_RE = re.compile(r"<[a-zA-Z/!][^<>]*>|&(?:#\d+|#[xX][0-9a-fA-F]+|[a-zA-Z][a-zA-Z0-9]*);")
# A "<" that does not open a closed tag is literal text, e.g. "a<b".
_STRAY_LT_RE = re.compile(r"<(?![a-zA-Z/!][^<>]*>)")
_SUBHEADING_RE = re.compile(r"<h[23][\s>]", re.IGNORECASE)
_APOSTROPHES = str.maketrans({"‘": "'", "’": "'", "ʼ": "'", "`": "'"})


def _make_soup(html: str) -> BeautifulSoup:
    markup = _STRAY_LT_RE.sub("&lt;", html)
    try:
        return BeautifulSoup(markup, "lxml")
    except FeatureNotFound:
        # Fallback to html.parser if lxml isn't installed
        return BeautifulSoup(markup, "html.parser")


def strip_tags(text: str) -> str:
    """Return the visible text of an HTML fragment, tags replaced by spaces.

    Entities are decoded whether or not the fragment holds any tags.
    """

    if not text:
        return ""
    if not _MARKUP_RE.search(text):
        return text
    return _make_soup(text).get_text(" ")


def tokenize(text: str) -> List[str]:
    """Return word tokens from the provided text, preserving their case.

    Markup is removed first so tag names and attributes never become words.
    Curly apostrophes are normalised and apostrophes at token edges dropped,
    so ``‘quoted’`` and ``quoted`` produce the same token.
    """

    plain = strip_tags(text).translate(_APOSTROPHES)
    tokens: List[str] = []
    for match in _TOKEN_RE.findall(plain):
        token = match.strip("'_-")
        if token and any(char.isalnum() for char in token):
            tokens.append(token)
    return tokens


def top_level_subheadings(text: str) -> List[str]:
    """Return the text content of every top-level subheading in ``text``."""

    if not text or not _SUBHEADING_RE.search(text):
        return []
    soup = _make_soup(text)
    return [heading.get_text(" ", strip=True) for heading in soup.find_all(list(SUBHEADING_TAGS))]


def remove_top_level_subheadings(text: str) -> str:
    """Return ``text`` with top-level subheadings (and their content) removed."""

    if not text or not _SUBHEADING_RE.search(text):
        return text
    soup = _make_soup(text)
    for heading in soup.find_all(list(SUBHEADING_TAGS)):
        heading.decompose()
    return str(soup)
