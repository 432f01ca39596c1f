"""Per-language morphology data used to stem words.

Each supported language maps to one of the Snowball stemmers shipped with
NLTK, plus an optional table of irregular forms that the suffix-stripping
algorithm cannot reduce on its own ("children" to "child"). Irregular forms
are rewritten to their base form first and the base form is then stemmed,
so "mice" and "mouse" share a stem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

from nltk.stem.snowball import SnowballStemmer

from .config import ConfigurationError, EngineConfig, load_yaml_mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MorphologyData:
    """Stemming rules for a single language."""

    language: str
    algorithm: str
    irregular: Mapping[str, str] = field(default_factory=dict)
    stemmer: SnowballStemmer = field(default=None, repr=False, compare=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.stemmer is None:
            object.__setattr__(self, "stemmer", _build_stemmer(self.algorithm))

    def stem(self, word: str) -> str:
        base = self.irregular.get(word, word)
        return self.stemmer.stem(base)


class MorphologyProvider:
    """Resolve language codes to :class:`MorphologyData`.

    Languages without data, and languages switched off in configuration,
    resolve to ``None``; callers then fall back to identity stemming.
    """

    def __init__(self, table: Mapping[str, MorphologyData], disabled: Iterable[str] = ()) -> None:
        self._table: Dict[str, MorphologyData] = dict(table)
        self._disabled = frozenset(disabled)

    @property
    def languages(self) -> frozenset[str]:
        return frozenset(self._table) - self._disabled

    def data_for(self, language: str) -> Optional[MorphologyData]:
        if language in self._disabled:
            logger.debug("Morphology disabled for language %r", language)
            return None
        data = self._table.get(language)
        if data is None:
            logger.debug("No morphology data for language %r; using identity stems", language)
        return data

    @classmethod
    def from_config(cls, config: EngineConfig) -> "MorphologyProvider":
        return cls(load_morphology(config.morphology_path), disabled=config.disabled_languages)


def load_morphology(path: Path) -> Dict[str, MorphologyData]:
    """Parse a morphology YAML file into per-language data."""

    raw = load_yaml_mapping(path)
    table: Dict[str, MorphologyData] = {}
    for language, entry in raw.items():
        if not isinstance(entry, dict) or not entry.get("algorithm"):
            raise ConfigurationError(f"Morphology entry for {language!r} needs an 'algorithm'")
        irregular = entry.get("irregular") or {}
        if not isinstance(irregular, dict):
            raise ConfigurationError(f"Irregular forms for {language!r} must be a mapping")
        code = str(language).lower()
        table[code] = MorphologyData(
            language=code,
            algorithm=str(entry["algorithm"]),
            irregular={str(key).lower(): str(value).lower() for key, value in irregular.items()},
        )
    return table


def _build_stemmer(algorithm: str) -> SnowballStemmer:
    if algorithm not in SnowballStemmer.languages:
        raise ConfigurationError(f"Unknown Snowball algorithm: {algorithm}")
    return SnowballStemmer(algorithm)
