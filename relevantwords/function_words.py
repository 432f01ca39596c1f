"""Function-word lists keyed by language code."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Mapping

from .config import ConfigurationError, EngineConfig, load_yaml_mapping

logger = logging.getLogger(__name__)

EMPTY: FrozenSet[str] = frozenset()


class FunctionWordProvider:
    """Look up the function words to skip for a language."""

    def __init__(self, table: Mapping[str, Iterable[str]]) -> None:
        self._table: Dict[str, FrozenSet[str]] = {
            language: frozenset(word.lower() for word in words) for language, words in table.items()
        }

    def words_for(self, language: str) -> FrozenSet[str]:
        words = self._table.get(language)
        if words is None:
            logger.debug("No function words for language %r", language)
            return EMPTY
        return words

    @classmethod
    def from_config(cls, config: EngineConfig) -> "FunctionWordProvider":
        if not config.function_words_enabled:
            return cls({})
        return cls(load_function_words(config.function_words_path))


def load_function_words(path: Path) -> Dict[str, FrozenSet[str]]:
    """Parse a function-word YAML file.

    Values may be a whitespace separated string or a list of words.
    """

    raw = load_yaml_mapping(path)
    table: Dict[str, FrozenSet[str]] = {}
    for language, value in raw.items():
        if isinstance(value, str):
            words = value.split()
        elif isinstance(value, list):
            words = [str(word) for word in value]
        else:
            raise ConfigurationError(f"Function words for {language!r} must be a string or a list")
        table[str(language).lower()] = frozenset(word.lower() for word in words)
    return table
