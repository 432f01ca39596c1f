"""Relevant-word extraction and caching for internal linking and insights."""

from .cache import RelevanceCache
from .config import ConfigurationError, EngineConfig, load_config
from .index import (
    RelevanceEngine,
    build_cache,
    build_engine,
    calculate_relevant_words,
    default_cache,
    relevant_words_for_insights,
    relevant_words_for_internal_linking,
    reset_default_cache,
)
from .types import Paper, RankedWord, RelevantWord

__all__ = [
    "ConfigurationError",
    "EngineConfig",
    "Paper",
    "RankedWord",
    "RelevanceCache",
    "RelevanceEngine",
    "RelevantWord",
    "build_cache",
    "build_engine",
    "calculate_relevant_words",
    "default_cache",
    "load_config",
    "relevant_words_for_insights",
    "relevant_words_for_internal_linking",
    "reset_default_cache",
]
