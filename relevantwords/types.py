"""Typed data structures used by the relevant-words pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Dict, List, Tuple, Union

DEFAULT_LOCALE = "en_US"

Number = Union[int, float]


@dataclass(frozen=True)
class Paper:
    """Document under analysis, owned by the caller and never mutated."""

    text: str = ""
    locale: str = DEFAULT_LOCALE
    title: str = ""
    description: str = ""
    keyword: str = ""
    synonyms: str = ""

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if not isinstance(value, str):
                raise TypeError(f"Paper.{item.name} must be a string, got {type(value).__name__}")


@dataclass(frozen=True)
class PaperAttributes:
    """Metadata strings that count towards internal linking with extra weight."""

    keyphrase: str = ""
    synonyms: str = ""
    metadescription: str = ""
    title: str = ""
    subheadings: Tuple[str, ...] = ()

    def as_text(self) -> str:
        parts = [self.keyphrase, self.synonyms, self.metadescription, self.title, *self.subheadings]
        return " ".join(part for part in parts if part)


@dataclass(frozen=True)
class RelevantWord:
    """A surface form, its stem and how often it was seen."""

    word: str
    stem: str
    occurrences: Number = 0

    def with_occurrences(self, occurrences: Number) -> "RelevantWord":
        return replace(self, occurrences=occurrences)


@dataclass(frozen=True)
class RankedWord:
    """One element of a relevance result, in rank order."""

    word: str
    stem: str
    occurrences: Number

    def as_dict(self) -> Dict[str, object]:
        return {"word": self.word, "stem": self.stem, "occurrences": self.occurrences}


RelevanceResult = List[RankedWord]


@dataclass(frozen=True)
class CacheEntry:
    """Last-seen tracked fields for one mode together with their result."""

    fields: Dict[str, str]
    result: Tuple[RankedWord, ...] = field(default_factory=tuple)
