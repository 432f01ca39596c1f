"""Turn text into relevant-word records."""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import FrozenSet, Iterable, List, Optional

from .morphology import MorphologyData
from .text import tokenize
from .types import PaperAttributes, RelevantWord

logger = logging.getLogger(__name__)

# Words from title, meta description, keyphrase, synonyms and subheadings
# count three times as much as words from the body.
ATTRIBUTE_WEIGHT = 3

_NUMERIC_RE = re.compile(r"^[\d.,'\-]+$")


def find_abbreviations(
    texts: Iterable[str],
    min_length: int = 2,
    max_length: int = 4,
) -> FrozenSet[str]:
    """Return lower-cased forms of short tokens written entirely in capitals."""

    found = set()
    for text in texts:
        for token in tokenize(text):
            if min_length <= len(token) <= max_length and token.isalpha() and token.isupper():
                found.add(token.lower())
    return frozenset(found)


def extract_relevant_words(
    text: str,
    language: str,
    morphology_data: Optional[MorphologyData],
    *,
    function_words: FrozenSet[str] = frozenset(),
    abbreviations: FrozenSet[str] = frozenset(),
) -> List[RelevantWord]:
    """Return one record per distinct surface form found in ``text``.

    Tokens are lower-cased, function words and bare numbers dropped, and the
    rest stemmed with ``morphology_data``. Without morphology data the stem
    is the word itself. Abbreviations keep their capitals and are never
    stemmed. Records come out in order of first appearance.
    """

    if morphology_data is None:
        logger.debug("Extracting %r words with identity stems", language)

    counts = Counter(
        word
        for word in (token.lower() for token in tokenize(text))
        if word not in function_words and not _NUMERIC_RE.match(word)
    )
    return [_relevant_word(word, occurrences, morphology_data, abbreviations) for word, occurrences in counts.items()]


def extract_from_attributes(
    attributes: PaperAttributes,
    language: str,
    morphology_data: Optional[MorphologyData],
    *,
    function_words: FrozenSet[str] = frozenset(),
    abbreviations: FrozenSet[str] = frozenset(),
) -> List[RelevantWord]:
    """Extract words from paper attributes and apply the attribute weight."""

    words = extract_relevant_words(
        attributes.as_text(),
        language,
        morphology_data,
        function_words=function_words,
        abbreviations=abbreviations,
    )
    return [word.with_occurrences(word.occurrences * ATTRIBUTE_WEIGHT) for word in words]


def _relevant_word(
    word: str,
    occurrences: int,
    morphology_data: Optional[MorphologyData],
    abbreviations: FrozenSet[str],
) -> RelevantWord:
    if word in abbreviations:
        upper = word.upper()
        return RelevantWord(word=upper, stem=upper, occurrences=occurrences)
    stem = morphology_data.stem(word) if morphology_data is not None else word
    return RelevantWord(word=word, stem=stem, occurrences=occurrences)
