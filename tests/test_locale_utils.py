"""Tests for locale_utils.py - normalization and Babel-backed chains."""

from __future__ import annotations

import pytest
from babel.core import UnknownLocaleError

from typedliterals.locale_utils import get_babel_locale, locale_fallback_chain, normalize_locale


class TestNormalizeLocale:
    def test_hyphen_to_underscore(self) -> None:
        assert normalize_locale("pt-BR") == "pt_BR"

    def test_already_normalized(self) -> None:
        assert normalize_locale("en") == "en"


class TestGetBabelLocale:
    def test_parses_bcp47(self) -> None:
        locale = get_babel_locale("en-US")

        assert locale.language == "en"
        assert locale.territory == "US"

    def test_cached(self) -> None:
        assert get_babel_locale("fr") is get_babel_locale("fr")

    def test_unknown_raises(self) -> None:
        with pytest.raises((UnknownLocaleError, ValueError)):
            get_babel_locale("xx")


class TestLocaleFallbackChain:
    def test_language_only(self) -> None:
        assert locale_fallback_chain("fr") == ("fr",)

    def test_territory(self) -> None:
        assert locale_fallback_chain("pt-BR") == ("pt_BR", "pt")

    def test_script_and_territory(self) -> None:
        assert locale_fallback_chain("sr_Latn_RS") == ("sr_Latn_RS", "sr_Latn", "sr")
