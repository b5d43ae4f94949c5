"""
Locale negotiation used to pick a default language.
"""

from __future__ import annotations

__all__ = ["preset_language", "normalize_locale", "system_locale_preferences"]

import locale
import logging
import os
from collections.abc import Sequence

from langer.errors import NoMatchError

logger = logging.getLogger(__name__)

# Environment variables consulted in order, mirroring gettext's lookup.
_LOCALE_ENVVARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def preset_language(
    available_languages: Sequence[str],
    priorities: Sequence[str],
) -> str:
    """Pick the first available language from an ordered preference list.

    Each preference is tried as-is, then with its region subtag stripped
    (the text before the first ``-``), before moving on to the next one.
    Matching is case-sensitive.

    Args:
        available_languages: Language keys of the active dictionary.
        priorities: Locale tags ordered by preference, e.g.
            ``["en-US", "en", "zh-TW", "zh"]``.

    Returns:
        str: The matched language key.

    Raises:
        NoMatchError: If no preference matches any available language.
    """
    for lang in priorities:
        if lang in available_languages:
            return lang
        base = lang.split("-", 1)[0]
        if base in available_languages:
            return base
    raise NoMatchError()


def normalize_locale(tag: str | None) -> str | None:
    """Convert a POSIX locale name into a ``lang-REGION`` tag.

    ``"en_US.UTF-8"`` becomes ``"en-US"`` and ``"zh_TW@euro"`` becomes
    ``"zh-TW"``. ``C``, ``POSIX`` and empty values yield ``None``.
    """
    if not tag:
        return None
    tag = tag.split(".", 1)[0].split("@", 1)[0].strip()
    if not tag or tag in ("C", "POSIX"):
        return None
    return tag.replace("_", "-")


def system_locale_preferences() -> list[str]:
    """Return the host's ordered locale preferences.

    Reads ``LANGUAGE`` (colon separated), ``LC_ALL``, ``LC_MESSAGES`` and
    ``LANG`` in that order, then falls back to :func:`locale.getlocale`.
    Duplicates are dropped while keeping the first occurrence.

    Returns:
        list[str]: Locale tags such as ``["en-US", "zh-TW"]``; may be empty.
    """
    raw: list[str] = []
    for name in _LOCALE_ENVVARS:
        value = os.environ.get(name)
        if not value:
            continue
        raw.extend(value.split(":") if name == "LANGUAGE" else [value])

    if not raw:
        try:
            current = locale.getlocale()[0]
        except ValueError:
            current = None
        if current:
            raw.append(current)

    result: list[str] = []
    for item in raw:
        tag = normalize_locale(item)
        if tag and tag not in result:
            result.append(tag)

    logger.debug("System locale preferences: %s", result)
    return result
