"""Coordinator for the relevant-words pipeline."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import List, Optional

from .cache import RelevanceCache
from .combine import combine
from .config import EngineConfig, load_config_from_env
from .extract import extract_from_attributes, extract_relevant_words, find_abbreviations
from .function_words import FunctionWordProvider
from .language import get_language
from .morphology import MorphologyProvider
from .rank import INSIGHTS, INTERNAL_LINKING, rank_for_policy, to_result
from .text import remove_top_level_subheadings, top_level_subheadings
from .types import Paper, PaperAttributes, RelevanceResult, RelevantWord


@dataclass(frozen=True)
class RelevanceEngine:
    """Language resources and configuration shared by every pipeline run."""

    config: EngineConfig
    morphology: MorphologyProvider
    function_words: FunctionWordProvider


def build_engine(config: EngineConfig | None = None) -> RelevanceEngine:
    """Load morphology and function-word data for the given configuration."""

    engine_config = config or load_config_from_env()
    return RelevanceEngine(
        config=engine_config,
        morphology=MorphologyProvider.from_config(engine_config),
        function_words=FunctionWordProvider.from_config(engine_config),
    )


def build_cache(engine: RelevanceEngine) -> RelevanceCache:
    """Return an empty cache that computes results with ``engine``."""

    def compute(paper: Paper, internal_linking: bool) -> RelevanceResult:
        return calculate_relevant_words(paper, internal_linking, engine)

    return RelevanceCache(compute, default_locale=engine.config.default_locale)


def calculate_relevant_words(
    paper: Paper,
    internal_linking: bool,
    engine: RelevanceEngine | None = None,
) -> RelevanceResult:
    """Compute relevant words for internal linking (True) or insights (False).

    Internal linking strips top-level subheadings from the body and counts
    them, together with keyphrase, synonyms, meta description and title,
    as weighted attribute words. Insights looks at the body only.
    """

    engine = engine or default_engine()
    config = engine.config
    language = get_language(paper.locale, config.default_locale)
    morphology_data = engine.morphology.data_for(language)
    function_words = engine.function_words.words_for(language)

    text = paper.text
    attributes: Optional[PaperAttributes] = None
    if internal_linking:
        attributes = PaperAttributes(
            keyphrase=paper.keyword,
            synonyms=paper.synonyms,
            metadescription=paper.description,
            title=paper.title,
            subheadings=tuple(top_level_subheadings(text)),
        )
        text = remove_top_level_subheadings(text)

    abbreviations = frozenset()
    if config.abbreviations_enabled:
        min_length, max_length = config.abbreviation_length
        sources = [paper.text] if attributes is None else [paper.text, attributes.as_text()]
        abbreviations = find_abbreviations(sources, min_length, max_length)

    words: List[RelevantWord] = []
    if attributes is not None:
        words.extend(
            extract_from_attributes(
                attributes,
                language,
                morphology_data,
                function_words=function_words,
                abbreviations=abbreviations,
            )
        )
    words.extend(
        extract_relevant_words(
            text,
            language,
            morphology_data,
            function_words=function_words,
            abbreviations=abbreviations,
        )
    )

    policy = INTERNAL_LINKING if internal_linking else INSIGHTS
    return to_result(rank_for_policy(combine(words), policy))


_DEFAULTS_LOCK = threading.RLock()
_default_engine: RelevanceEngine | None = None
_default_cache: RelevanceCache | None = None


def default_engine() -> RelevanceEngine:
    """Return the process-wide engine, building it on first use."""

    global _default_engine
    with _DEFAULTS_LOCK:
        if _default_engine is None:
            _default_engine = build_engine()
        return _default_engine


def default_cache() -> RelevanceCache:
    """Return the process-wide cache used when callers do not pass one."""

    global _default_cache
    with _DEFAULTS_LOCK:
        if _default_cache is None:
            _default_cache = build_cache(default_engine())
        return _default_cache


def reset_default_cache() -> None:
    """Forget the process-wide engine and cache; the next call rebuilds them."""

    global _default_engine, _default_cache
    with _DEFAULTS_LOCK:
        _default_engine = None
        _default_cache = None


def relevant_words_for_internal_linking(paper: Paper, cache: RelevanceCache | None = None) -> RelevanceResult:
    """Return relevant words for internal linking, cached per input."""

    return (cache or default_cache()).get_for_internal_linking(paper)


def relevant_words_for_insights(paper: Paper, cache: RelevanceCache | None = None) -> RelevanceResult:
    """Return relevant words for insights (body text only), cached per input."""

    return (cache or default_cache()).get_for_insights(paper)
