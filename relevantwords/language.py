"""Locale handling."""

from __future__ import annotations

import re

from .types import DEFAULT_LOCALE

_SEPARATOR_RE = re.compile(r"[_\-]")


def get_language(locale: str, default_locale: str = DEFAULT_LOCALE) -> str:
    """Return the language code of a locale tag, e.g. ``"en"`` for ``"en_US"``."""

    tag = (locale or "").strip() or default_locale
    return _SEPARATOR_RE.split(tag, maxsplit=1)[0].lower()
