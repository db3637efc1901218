"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale normalization and validation used by the localization
layer. Babel supplies the CLDR data that decides whether a locale code is
known and what its parent locales are.

Python 3.12+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_fallback_chain",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def locale_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Expand a locale code into itself followed by its less specific parents.

    Script and territory subtags are dropped one at a time, so
    ``zh-Hant-TW`` yields ``("zh_Hant_TW", "zh_Hant", "zh")``.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale_fallback_chain("fr-CA")
        ('fr_CA', 'fr')
    """
    locale = get_babel_locale(locale_code)
    candidates = [
        str(locale),
        "_".join(part for part in (locale.language, locale.script) if part),
        locale.language,
    ]
    return tuple(dict.fromkeys(candidates))
