"""Multi-locale orchestration over a Translator.

Localization owns a locale fallback chain, loads each locale's translation
file eagerly at construction and keeps the resulting Translator. The first
locale in the chain is the top of the stack, so its dictionary takes
precedence and later locales act as fallbacks.

Load failures do not raise. They are recorded in ResourceLoadResult objects
(NOT_FOUND, ERROR) and exposed through get_load_summary():

    l10n = Localization(["fr", "en"], PathDictionaryLoader("i18n/{locale}.json"))
    summary = l10n.get_load_summary()
    if summary.errors > 0:
        raise RuntimeError(f"Failed to load {summary.errors} translation files")

Python 3.12+. Depends on Babel for locale validation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping

from babel.core import UnknownLocaleError

from typedliterals.enums import LoadStatus
from typedliterals.locale_utils import get_babel_locale, locale_fallback_chain, normalize_locale
from typedliterals.localization.codec import decode_translations
from typedliterals.localization.loading import (
    DictionaryLoader,
    FallbackInfo,
    LoadSummary,
    ResourceLoadResult,
)
from typedliterals.localization.types import LiteralId, LocaleCode
from typedliterals.runtime.literal import Literal
from typedliterals.runtime.resolver import resolve_id, translate
from typedliterals.runtime.store import Translator

__all__ = ["Localization"]

logger = logging.getLogger(__name__)


class Localization:
    """Literal translation with a locale fallback chain.

    Example - Disk-based translations:
        >>> loader = PathDictionaryLoader("translations/{locale}.json")
        >>> l10n = Localization(["fr", "en"], loader)
        >>> l10n.translate(literals.yes())
        # Tries 'fr' first, then 'en', then the literal's default

    Example - Direct dictionaries:
        >>> l10n = Localization(["fr", "en"])
        >>> l10n.add_translations("en", {"Yes": "Yes"})
        >>> l10n.add_translations("fr", {"Yes": "Oui"})
        >>> l10n.translate(Literal.of("Yes"))
        'Oui'

    Attributes:
        locales: Immutable tuple of normalized locale codes in priority order
    """

    __slots__ = (
        "_dictionaries",
        "_load_results",
        "_loader",
        "_locales",
        "_on_fallback",
        "_strict",
        "_translator",
    )

    def __init__(
        self,
        locales: Iterable[LocaleCode],
        loader: DictionaryLoader | None = None,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
        strict: bool = False,
    ) -> None:
        """Initialize multi-locale translation.

        Args:
            locales: Locale codes in fallback order (e.g., ['fr_CA', 'fr', 'en'])
            loader: Loader for translation files (optional)
            on_fallback: Called when a literal resolves from a locale other
                than the first one
            strict: Reject pluralised templates that do not split into
                exactly two clauses

        Raises:
            ValueError: If locales is empty or contains an unknown locale
        """
        # dict.fromkeys() removes duplicates while maintaining insertion order
        locale_list = tuple(dict.fromkeys(normalize_locale(code) for code in locales))
        if not locale_list:
            msg = "At least one locale is required"
            raise ValueError(msg)

        for locale in locale_list:
            self._validate_locale(locale)

        self._locales: tuple[LocaleCode, ...] = locale_list
        self._loader = loader
        self._on_fallback = on_fallback
        self._strict = strict
        self._dictionaries: dict[LocaleCode, Mapping[str, str]] = {}
        self._load_results: list[ResourceLoadResult] = []

        if loader is not None:
            for locale in self._locales:
                self._load_locale(loader, locale)

        self._translator = self._build_translator()

    @classmethod
    def for_locale(
        cls,
        locale: LocaleCode,
        loader: DictionaryLoader | None = None,
        *,
        default_locale: LocaleCode | None = "en",
        on_fallback: Callable[[FallbackInfo], None] | None = None,
        strict: bool = False,
    ) -> Localization:
        """Build a Localization from one locale and its parents.

        ``fr-CA`` with the default ``default_locale`` yields the chain
        ``("fr_CA", "fr", "en")``.
        """
        try:
            chain = list(locale_fallback_chain(locale))
        except (UnknownLocaleError, ValueError) as e:
            msg = f"Unknown locale '{locale}': {e}"
            raise ValueError(msg) from e
        if default_locale is not None:
            chain.append(normalize_locale(default_locale))
        return cls(chain, loader, on_fallback=on_fallback, strict=strict)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Check the locale code against CLDR data.

        Raises:
            ValueError: If Babel does not know the locale
        """
        try:
            get_babel_locale(locale)
        except (UnknownLocaleError, ValueError) as e:
            msg = f"Unknown locale '{locale}': {e}"
            raise ValueError(msg) from e

    def _load_locale(self, loader: DictionaryLoader, locale: LocaleCode) -> None:
        """Load and decode one locale's file, recording the outcome."""
        source_path = loader.describe_path(locale)
        try:
            dictionary = decode_translations(loader.load(locale))
        except FileNotFoundError:
            logger.debug("Translation file not found: %s", source_path)
            self._load_results.append(
                ResourceLoadResult(locale, LoadStatus.NOT_FOUND, source_path=source_path)
            )
            return
        except (OSError, ValueError) as e:  # TranslationDecodeError is a ValueError
            logger.error("Failed to load translations %s: %s", source_path, e)
            self._load_results.append(
                ResourceLoadResult(locale, LoadStatus.ERROR, error=e, source_path=source_path)
            )
            return

        self._dictionaries[locale] = dictionary
        self._load_results.append(
            ResourceLoadResult(
                locale,
                LoadStatus.SUCCESS,
                source_path=source_path,
                entry_count=len(dictionary),
            )
        )
        logger.info("Loaded %d translation(s) for %s", len(dictionary), locale)

    def _build_translator(self) -> Translator:
        """Push dictionaries lowest priority first so the first locale ends on top."""
        translator = Translator.empty()
        for locale in reversed(self._locales):
            dictionary = self._dictionaries.get(locale)
            if dictionary is not None:
                translator = translator.push(dictionary)
        return translator

    def _locale_at(self, index: int) -> LocaleCode:
        """Map a translator precedence index back to its locale."""
        loaded = [locale for locale in self._locales if locale in self._dictionaries]
        return loaded[index]

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locale codes in fallback priority order."""
        return self._locales

    @property
    def translator(self) -> Translator:
        """Current translator; a new value after every add_translations call."""
        return self._translator

    def add_translations(self, locale: LocaleCode, dictionary: Mapping[str, str]) -> None:
        """Set the dictionary for a locale in the chain.

        Entries are merged over any dictionary already loaded for the locale.

        Raises:
            ValueError: If locale is not in the fallback chain
        """
        locale = normalize_locale(locale)
        if locale not in self._locales:
            msg = f"Locale '{locale}' not in fallback chain {self._locales}"
            raise ValueError(msg)
        merged = {**self._dictionaries.get(locale, {}), **dictionary}
        self._dictionaries[locale] = merged
        self._translator = self._build_translator()
        logger.debug("Added %d translation(s) for %s", len(dictionary), locale)

    def has_literal(self, literal_id: LiteralId) -> bool:
        """Check whether any locale in the chain translates ``literal_id``."""
        return self._translator.lookup(literal_id) is not None

    def translate(self, literal: Literal) -> str:
        """Resolve a literal to its display string.

        Never raises unless strict mode is on and a pluralised template is
        malformed.
        """
        self._report_fallback(literal.id)
        return translate(literal, self._translator, strict=self._strict)

    def translate_id(self, literal_id: LiteralId, default: str | None = None) -> str:
        """Resolve a run-time id to its raw template (no substitution)."""
        self._report_fallback(literal_id)
        return resolve_id(literal_id, self._translator, default)

    def _report_fallback(self, literal_id: LiteralId) -> None:
        if self._on_fallback is None:
            return
        found = self._translator.lookup(literal_id)
        if found is None:
            return
        resolved_locale = self._locale_at(found[0])
        if resolved_locale != self._locales[0]:
            self._on_fallback(
                FallbackInfo(
                    requested_locale=self._locales[0],
                    resolved_locale=resolved_locale,
                    literal_id=literal_id,
                )
            )

    def get_load_summary(self) -> LoadSummary:
        """Return the results of every load attempt made at construction."""
        return LoadSummary(results=tuple(self._load_results))

    def __repr__(self) -> str:
        return f"Localization(locales={self._locales!r}, dictionaries={len(self._translator)})"
