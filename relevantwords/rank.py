"""Ordering, thresholds and caps for combined relevant words."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .types import Number, RankedWord, RelevantWord


@dataclass(frozen=True)
class RankingPolicy:
    """Minimum occurrences and maximum result size for one mode."""

    name: str
    min_occurrences: int
    max_count: int


INTERNAL_LINKING = RankingPolicy(name="internal_linking", min_occurrences=2, max_count=100)
INSIGHTS = RankingPolicy(name="insights", min_occurrences=5, max_count=20)


def sort_key(word: RelevantWord) -> tuple:
    return (-word.occurrences, word.word)


def rank(
    words: Iterable[RelevantWord],
    min_occurrences: int,
    max_count: Optional[int] = None,
) -> List[RelevantWord]:
    """Return words sorted by occurrences (descending) then word (ascending).

    Words below ``min_occurrences`` are dropped before the list is cut to
    ``max_count`` entries.
    """

    ranked = sorted((word for word in words if word.occurrences >= min_occurrences), key=sort_key)
    if max_count is not None:
        ranked = ranked[: max(max_count, 0)]
    return ranked


def rank_for_policy(words: Iterable[RelevantWord], policy: RankingPolicy) -> List[RelevantWord]:
    return rank(words, policy.min_occurrences, policy.max_count)


def format_number(value: Number) -> Number:
    """Round to four decimals unless the value is already integral."""

    if value == math.floor(value):
        return value
    # Half away from zero, not Python's round-half-to-even.
    return math.copysign(math.floor(abs(value) * 10000 + 0.5), value) / 10000


def to_result(words: Iterable[RelevantWord]) -> List[RankedWord]:
    return [
        RankedWord(word=word.word, stem=word.stem, occurrences=format_number(word.occurrences))
        for word in words
    ]
