"""Collapse relevant words that share a stem."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from .types import Number, RelevantWord


def combine(words: Iterable[RelevantWord]) -> List[RelevantWord]:
    """Merge records sharing a stem into one record per stem.

    Occurrences are summed. The merged record carries the surface form with
    the most occurrences inside the group, the alphabetically first one on a
    tie, so the result does not depend on input order. Groups are returned
    sorted by stem.
    """

    by_stem: Dict[str, Dict[str, Number]] = defaultdict(dict)
    for word in words:
        forms = by_stem[word.stem]
        forms[word.word] = forms.get(word.word, 0) + word.occurrences

    combined: List[RelevantWord] = []
    for stem in sorted(by_stem):
        forms = by_stem[stem]
        combined.append(
            RelevantWord(
                word=representative_form(forms),
                stem=stem,
                occurrences=sum(forms.values()),
            )
        )
    return combined


def representative_form(forms: Dict[str, Number]) -> str:
    """Return the most frequent form, breaking ties alphabetically."""

    return min(forms, key=lambda form: (-forms[form], form))
