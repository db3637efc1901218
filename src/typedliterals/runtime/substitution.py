"""Placeholder substitution for raw templates.

Placeholders are written ``{key}``; whitespace inside the braces is
tolerated, so ``{ key }`` matches too.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Mapping

__all__ = ["placeholder_pattern", "substitute"]


@functools.lru_cache(maxsize=256)
def placeholder_pattern(key: str) -> re.Pattern[str]:
    """Compile the pattern matching the placeholder for ``key``."""
    return re.compile(r"\{\s*" + re.escape(key) + r"\s*\}")


def substitute(values: Mapping[str, str], template: str) -> str:
    """Replace every ``{key}`` placeholder with its value.

    Keys are applied in the mapping's iteration order. Placeholders without
    a value are left verbatim; values without a placeholder are ignored.

    Args:
        values: Placeholder key to replacement value
        template: Raw template

    Returns:
        Template with placeholders replaced

    Example:
        >>> substitute({"name": "Dave"}, "Je m'appelle {name}")
        "Je m'appelle Dave"
    """
    result = template
    for key, value in values.items():
        # Callable replacement inserts the value literally (no backslash escapes).
        result = placeholder_pattern(key).sub(lambda _match, v=value: v, result)
    return result
