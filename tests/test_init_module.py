"""Tests for the top-level typedliterals package API."""

from __future__ import annotations

import typedliterals
from typedliterals import (
    Literal,
    Translator,
    add_translations,
    decode_translations,
    default_translator,
    encode_translations,
    translate,
    update_translations,
)


class TestPublicApi:
    def test_all_names_resolve(self) -> None:
        for name in typedliterals.__all__:
            assert hasattr(typedliterals, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(typedliterals.__version__, str)


class TestEndToEnd:
    """Default translations plus a swappable language on top."""

    def test_default_then_update(self) -> None:
        english = decode_translations('{"Yes": "Yes", "No": "No"}')
        french = decode_translations('{"Yes": "Oui"}')
        german = decode_translations('{"Yes": "Ja", "No": "Nein"}')

        translator = add_translations(english, default_translator())
        translator = add_translations(french, translator)
        assert translate(Literal.of("Yes"), translator) == "Oui"
        assert translate(Literal.of("No"), translator) == "No"

        translator = update_translations(german, translator)
        assert len(translator) == 2
        assert translate(Literal.of("No"), translator) == "Nein"

    def test_round_trip_into_translator(self) -> None:
        dictionary = {"MyNameIs": "Je m'appelle {name}"}
        translator = Translator.empty().push(decode_translations(encode_translations(dictionary)))

        literal = Literal.of("MyNameIs", substitutions={"name": "Dave"})
        assert translate(literal, translator) == "Je m'appelle Dave"
