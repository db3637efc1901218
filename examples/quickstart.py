"""Quickstart Example - Generate accessors, then translate with them.

Generates an accessor module from literals.json in memory (without the
external formatter), loads translations/fr.json and translations/en.json,
and prints a few translated literals.

Run from the repository root:
    python examples/quickstart.py

Python 3.12+.
"""

from __future__ import annotations

from pathlib import Path
from types import ModuleType

from typedliterals import Localization, Translator, translate
from typedliterals.codegen import GeneratorConfig, generate_source, load_specification
from typedliterals.localization import FallbackInfo, PathDictionaryLoader

HERE = Path(__file__).parent


def build_literals_module() -> ModuleType:
    """Generate the accessor module and import it from source."""
    specification = load_specification(HERE / "literals.json")
    source = generate_source(specification, GeneratorConfig(format_output=False))
    module = ModuleType("literals")
    exec(compile(source, "literals.py", "exec"), module.__dict__)  # noqa: S102
    return module


def report_fallback(info: FallbackInfo) -> None:
    print(f"  [fallback] {info.literal_id}: {info.requested_locale} -> {info.resolved_locale}")


def main() -> None:
    literals = build_literals_module()

    print("Without translations (compile-time defaults):")
    empty = Translator.empty()
    print(" ", translate(literals.my_name_is(name="Dave"), empty))
    print(" ", translate(literals.people(3), empty))

    print("\nFrench with English fallback:")
    loader = PathDictionaryLoader(str(HERE / "translations" / "{locale}.json"))
    l10n = Localization(["fr", "en"], loader, on_fallback=report_fallback)
    print(" ", l10n.get_load_summary())
    print(" ", l10n.translate(literals.yes()))
    print(" ", l10n.translate(literals.no()))
    print(" ", l10n.translate(literals.my_name_is(name="Dave")))
    print(" ", l10n.translate(literals.people(1)))
    print(" ", l10n.translate(literals.people(5)))


if __name__ == "__main__":
    main()
