"""Configuration helpers for the relevant-words engine."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable

import yaml

CONFIG_ENV_VAR = "RELEVANTWORDS_CONFIG"
DATA_DIR = Path(__file__).resolve().parent / "data"


class ConfigurationError(ValueError):
    """Raised when configuration or bundled data cannot be used."""


@dataclass(frozen=True)
class EngineConfig:
    """Typed wrapper around the engine configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    def section(self, name: str) -> Dict[str, Any]:
        value = self.raw.get(name, {})
        return value if isinstance(value, dict) else {}

    @property
    def default_locale(self) -> str:
        return str(self.raw.get("default_locale") or "en_US")

    @property
    def morphology_path(self) -> Path:
        return _data_path(self.section("morphology").get("path"), "morphology.yaml")

    @property
    def disabled_languages(self) -> frozenset[str]:
        return frozenset(_lowered(self.section("morphology").get("disabled_languages") or []))

    @property
    def function_words_enabled(self) -> bool:
        return bool(self.section("function_words").get("enabled", True))

    @property
    def function_words_path(self) -> Path:
        return _data_path(self.section("function_words").get("path"), "function_words.yaml")

    @property
    def abbreviations_enabled(self) -> bool:
        return bool(self.section("abbreviations").get("enabled", True))

    @property
    def abbreviation_length(self) -> tuple[int, int]:
        section = self.section("abbreviations")
        return int(section.get("min_length", 2)), int(section.get("max_length", 4))


DEFAULTS: Dict[str, Any] = {
    "default_locale": "en_US",
    "morphology": {
        "path": None,
        "disabled_languages": [],
    },
    "function_words": {
        "enabled": True,
        "path": None,
    },
    "abbreviations": {
        "enabled": True,
        "min_length": 2,
        "max_length": 4,
    },
}


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML, merging with defaults."""

    data: Dict[str, Any] = copy.deepcopy(DEFAULTS)

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            user = yaml.safe_load(stream) or {}
        if not isinstance(user, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        merge_into(data, user)

    return EngineConfig(data)


def load_config_from_env() -> EngineConfig:
    """Load the configuration file named by ``RELEVANTWORDS_CONFIG``, if any."""

    return load_config(os.getenv(CONFIG_ENV_VAR) or None)


def merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override into base dict."""

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value


def load_yaml_mapping(path: Path) -> Dict[str, Any]:
    """Read a YAML data file that must hold a top-level mapping."""

    if not path.exists():
        raise ConfigurationError(f"Data file not found: {path}")
    with path.open("r", encoding="utf-8") as stream:
        data = yaml.safe_load(stream) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Data file {path} must contain a mapping")
    return data


def _data_path(configured: Any, bundled_name: str) -> Path:
    if configured:
        return Path(str(configured)).expanduser()
    return DATA_DIR / bundled_name


def _lowered(values: Iterable[Any]) -> Iterable[str]:
    return (str(value).lower() for value in values)
