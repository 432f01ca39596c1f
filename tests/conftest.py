"""Shared fixtures for relevant-words tests."""

from __future__ import annotations

import pytest

from relevantwords.config import CONFIG_ENV_VAR, load_config
from relevantwords.index import build_cache, build_engine, reset_default_cache
from relevantwords.types import Paper


@pytest.fixture(autouse=True)
def _isolated_default_cache(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_default_cache()
    yield
    reset_default_cache()


@pytest.fixture()
def engine_config():
    """Provide a mutable copy of the default engine configuration."""

    return load_config(None)


@pytest.fixture()
def engine(engine_config):
    return build_engine(engine_config)


@pytest.fixture()
def cache(engine):
    return build_cache(engine)


def make_paper(
    text: str = "",
    *,
    locale: str = "en_US",
    title: str = "",
    description: str = "",
    keyword: str = "",
    synonyms: str = "",
) -> Paper:
    return Paper(
        text=text,
        locale=locale,
        title=title,
        description=description,
        keyword=keyword,
        synonyms=synonyms,
    )
