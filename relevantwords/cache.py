"""Memoization of relevant-word results, one slot per mode."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Tuple

from .rank import INSIGHTS, INTERNAL_LINKING
from .types import DEFAULT_LOCALE, CacheEntry, Paper, RankedWord, RelevanceResult

logger = logging.getLogger(__name__)

INTERNAL_LINKING_FIELDS: Tuple[str, ...] = ("text", "locale", "description", "keyword", "synonyms", "title")
INSIGHTS_FIELDS: Tuple[str, ...] = ("text", "locale")

ComputeFn = Callable[[Paper, bool], RelevanceResult]


def initial_entry(tracked: Tuple[str, ...], default_locale: str = DEFAULT_LOCALE) -> CacheEntry:
    return CacheEntry(fields={name: default_locale if name == "locale" else "" for name in tracked})


class _Slot:
    """A single cache entry guarded by its own lock."""

    def __init__(self, mode: str, tracked: Tuple[str, ...], default_locale: str) -> None:
        self.mode = mode
        self.tracked = tracked
        self.default_locale = default_locale
        self._lock = threading.Lock()
        self._entry = initial_entry(tracked, default_locale)

    @property
    def entry(self) -> CacheEntry:
        with self._lock:
            return self._entry

    def get_or_compute(self, paper: Paper, compute: Callable[[Paper], RelevanceResult]) -> List[RankedWord]:
        current = {name: getattr(paper, name) for name in self.tracked}
        with self._lock:
            if current == self._entry.fields:
                logger.debug("Relevant words cache hit for %s", self.mode)
                return list(self._entry.result)

            logger.debug("Relevant words cache miss for %s; recomputing", self.mode)
            result = tuple(compute(paper))
            self._entry = CacheEntry(fields=current, result=result)
            return list(result)

    def clear(self) -> None:
        with self._lock:
            self._entry = initial_entry(self.tracked, self.default_locale)


class RelevanceCache:
    """Keep the last result for internal linking and for insights.

    Each mode holds exactly one entry. A call whose tracked paper fields
    equal the stored ones returns the stored result; any difference
    recomputes and replaces the entry. The two modes never touch each
    other's entry or lock.
    """

    def __init__(self, compute: ComputeFn, default_locale: str = DEFAULT_LOCALE) -> None:
        self._compute = compute
        self._slots: Dict[str, _Slot] = {
            INTERNAL_LINKING.name: _Slot(INTERNAL_LINKING.name, INTERNAL_LINKING_FIELDS, default_locale),
            INSIGHTS.name: _Slot(INSIGHTS.name, INSIGHTS_FIELDS, default_locale),
        }

    def get_for_internal_linking(self, paper: Paper) -> List[RankedWord]:
        return self._slots[INTERNAL_LINKING.name].get_or_compute(paper, lambda item: self._compute(item, True))

    def get_for_insights(self, paper: Paper) -> List[RankedWord]:
        return self._slots[INSIGHTS.name].get_or_compute(paper, lambda item: self._compute(item, False))

    def entry(self, mode: str) -> CacheEntry:
        """Return the current entry for ``"internal_linking"`` or ``"insights"``."""

        try:
            return self._slots[mode].entry
        except KeyError:
            raise ValueError(f"Unknown relevance mode: {mode}") from None

    def clear(self) -> None:
        for slot in self._slots.values():
            slot.clear()
