"""JSON codec for translation dictionaries.

A translation file is a top-level JSON object mapping literal ids to raw
template strings. Decoding validates that shape; encoding writes the
dictionary back out. Key order is not significant.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from typedliterals.errors import TranslationDecodeError
from typedliterals.localization.types import TranslationSource

__all__ = ["decode_translations", "encode_translations"]


def decode_translations(source: TranslationSource | bytes) -> dict[str, str]:
    """Decode a translation file.

    Args:
        source: JSON text

    Returns:
        Literal id to raw template

    Raises:
        TranslationDecodeError: If the text is not valid JSON, is not an
            object, or holds a non-string value
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        msg = f"Invalid translation JSON: {e}"
        raise TranslationDecodeError(msg) from e

    if not isinstance(data, dict):
        msg = f"Translation file must be a JSON object, got {type(data).__name__}"
        raise TranslationDecodeError(msg)

    for key, value in data.items():
        if not isinstance(value, str):
            msg = f"Translation for '{key}' must be a string, got {type(value).__name__}"
            raise TranslationDecodeError(msg)
    return data


def encode_translations(dictionary: Mapping[str, str], *, indent: int | None = 2) -> str:
    """Encode a translation dictionary as JSON text.

    Non-ASCII characters are written as-is (UTF-8 files are expected).
    """
    return json.dumps(dict(dictionary), ensure_ascii=False, indent=indent)
