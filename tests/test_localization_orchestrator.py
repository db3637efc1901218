"""Tests for localization/orchestrator.py - Localization fallback chains."""

from __future__ import annotations

from pathlib import Path

import pytest

from typedliterals.errors import MalformedPluralTemplateError
from typedliterals.localization import (
    FallbackInfo,
    Localization,
    LoadStatus,
    PathDictionaryLoader,
)
from typedliterals.runtime.literal import Literal


class MemoryLoader:
    """In-memory DictionaryLoader."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files = files

    def load(self, locale: str) -> str:
        try:
            return self.files[locale]
        except KeyError:
            raise FileNotFoundError(locale) from None

    def describe_path(self, locale: str) -> str:
        return f"memory:{locale}"


class TestLocalizationBasics:
    """Construction and validation."""

    def test_locales_normalized_and_deduplicated(self) -> None:
        l10n = Localization(["fr-CA", "fr_CA", "en"])

        assert l10n.locales == ("fr_CA", "en")

    def test_empty_locales_raises(self) -> None:
        with pytest.raises(ValueError, match="At least one locale is required"):
            Localization([])

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale"):
            Localization(["xx"])

    def test_without_loader_uses_defaults(self) -> None:
        l10n = Localization(["fr"])

        assert l10n.translate(Literal.of("No", "Non")) == "Non"
        assert l10n.translate(Literal.of("No")) == "..."
        assert len(l10n.translator) == 0


class TestLoading:
    """Eager loading from a loader."""

    def test_loads_from_disk(self, translations_dir: Path) -> None:
        loader = PathDictionaryLoader(str(translations_dir / "{locale}.json"))
        l10n = Localization(["fr", "en"], loader)

        assert l10n.translate(Literal.of("Yes")) == "Oui"
        assert l10n.translate(Literal.of("No")) == "No"
        assert l10n.translate(Literal.of("People", count=5)) == "Il y a 5 personnes"
        assert l10n.get_load_summary().all_successful

    def test_missing_locale_recorded(self) -> None:
        l10n = Localization(["de", "en"], MemoryLoader({"en": '{"Yes": "Yes"}'}))

        summary = l10n.get_load_summary()
        assert summary.not_found == 1
        assert summary.get_not_found()[0].source_path == "memory:de"
        assert l10n.translate(Literal.of("Yes")) == "Yes"

    def test_bad_file_recorded_as_error(self) -> None:
        l10n = Localization(["fr", "en"], MemoryLoader({"fr": "[1, 2]", "en": "{}"}))

        errors = l10n.get_load_summary().get_errors()
        assert len(errors) == 1
        assert errors[0].locale == "fr"
        assert errors[0].status is LoadStatus.ERROR

    def test_success_records_entry_count(self) -> None:
        l10n = Localization(["en"], MemoryLoader({"en": '{"a": "1", "b": "2"}'}))

        assert l10n.get_load_summary().results[0].entry_count == 2


class TestTranslation:
    """Translation through the chain."""

    def test_add_translations_updates_translator(self) -> None:
        l10n = Localization(["fr", "en"])
        l10n.add_translations("en", {"Yes": "Yes"})
        before = l10n.translator
        l10n.add_translations("fr", {"Yes": "Oui"})

        assert l10n.translate(Literal.of("Yes")) == "Oui"
        assert before.lookup("Yes") == (0, "Yes")

    def test_add_translations_merges(self) -> None:
        l10n = Localization(["fr"])
        l10n.add_translations("fr", {"Yes": "Oui"})
        l10n.add_translations("fr", {"No": "Non"})

        assert l10n.has_literal("Yes")
        assert l10n.has_literal("No")

    def test_add_translations_unknown_locale_raises(self) -> None:
        l10n = Localization(["fr"])

        with pytest.raises(ValueError, match="not in fallback chain"):
            l10n.add_translations("de", {"Yes": "Ja"})

    def test_translate_id_is_verbatim(self) -> None:
        l10n = Localization(["fr"])
        l10n.add_translations("fr", {"MyNameIs": "Je m'appelle {name}"})

        assert l10n.translate_id("MyNameIs") == "Je m'appelle {name}"
        assert l10n.translate_id("Other", "Autre") == "Autre"

    def test_strict_mode(self) -> None:
        l10n = Localization(["fr"], strict=True)
        l10n.add_translations("fr", {"People": "personnes"})

        with pytest.raises(MalformedPluralTemplateError):
            l10n.translate(Literal.of("People", count=2))


class TestFallbackCallback:
    """on_fallback reporting."""

    def test_reports_fallback_locale(self) -> None:
        events: list[FallbackInfo] = []
        l10n = Localization(["fr", "en"], on_fallback=events.append)
        l10n.add_translations("fr", {"Yes": "Oui"})
        l10n.add_translations("en", {"Yes": "Yes", "No": "No"})

        l10n.translate(Literal.of("Yes"))
        l10n.translate(Literal.of("No"))
        l10n.translate_id("Missing")

        assert events == [FallbackInfo(requested_locale="fr", resolved_locale="en", literal_id="No")]

    def test_skipped_locale_does_not_shift_index(self) -> None:
        events: list[FallbackInfo] = []
        loader = MemoryLoader({"en": '{"No": "No"}', "de": '{"No": "Nein"}'})
        l10n = Localization(["fr", "de", "en"], loader, on_fallback=events.append)

        assert l10n.translate(Literal.of("No")) == "Nein"
        assert events[0].resolved_locale == "de"


class TestForLocale:
    """Babel parent chain expansion."""

    def test_expands_territory(self) -> None:
        l10n = Localization.for_locale("fr-CA")

        assert l10n.locales == ("fr_CA", "fr", "en")

    def test_no_default_locale(self) -> None:
        l10n = Localization.for_locale("de_DE", default_locale=None)

        assert l10n.locales == ("de_DE", "de")

    def test_default_already_in_chain(self) -> None:
        assert Localization.for_locale("en_GB").locales == ("en_GB", "en")

    def test_unknown_locale(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale"):
            Localization.for_locale("xx")
