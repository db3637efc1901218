"""Multi-locale localization package.

Submodules:
    types        - Type aliases (LiteralId, LocaleCode, TranslationSource)
    codec        - JSON decoding/encoding of translation dictionaries
    loading      - DictionaryLoader protocol, PathDictionaryLoader, FallbackInfo,
                   ResourceLoadResult, LoadSummary
    orchestrator - Localization (locale fallback chain over a Translator)
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from typedliterals.enums import LoadStatus
from typedliterals.localization.codec import decode_translations, encode_translations
from typedliterals.localization.loading import (
    DictionaryLoader,
    FallbackInfo,
    LoadSummary,
    PathDictionaryLoader,
    ResourceLoadResult,
)
from typedliterals.localization.orchestrator import Localization
from typedliterals.localization.types import LiteralId, LocaleCode, TranslationSource

__all__ = [
    # Main orchestrator
    "Localization",
    # Codec
    "decode_translations",
    "encode_translations",
    # Loader protocol and implementations
    "DictionaryLoader",
    "PathDictionaryLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Fallback observability
    "FallbackInfo",
    # Type aliases
    "LiteralId",
    "LocaleCode",
    "TranslationSource",
]
