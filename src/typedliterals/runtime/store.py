"""Immutable translation store.

A Translator is an ordered stack of translation dictionaries. The first
dictionary has the highest precedence. Every operation returns a new
Translator; existing values are never modified, so a Translator can be
shared freely between threads.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "TranslationDictionary",
    "Translator",
    "add_translations",
    "default_translator",
    "update_translations",
]

type TranslationDictionary = Mapping[str, str]
"""Mapping from literal id to raw template."""


def _freeze(dictionary: Mapping[str, str]) -> Mapping[str, str]:
    """Copy a dictionary into a read-only view nobody else holds."""
    return MappingProxyType(dict(dictionary))


@dataclass(frozen=True, slots=True)
class Translator:
    """Ordered stack of translation dictionaries, highest precedence first.

    Example:
        >>> fr = Translator.empty().push({"Yes": "Oui"})
        >>> fr.lookup("Yes")
        (0, 'Oui')
    """

    _stack: tuple[Mapping[str, str], ...] = ()
    # Read-only mapping proxies cannot be hashed, so neither can the stack.
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def empty(cls) -> Translator:
        """Return a translator holding no dictionaries."""
        return cls()

    def push(self, dictionary: Mapping[str, str]) -> Translator:
        """Return a translator with ``dictionary`` on top of the stack."""
        return Translator((_freeze(dictionary), *self._stack))

    def replace_top(self, dictionary: Mapping[str, str]) -> Translator:
        """Return a translator with the top dictionary replaced.

        Equivalent to ``push`` when the stack is empty. Lower dictionaries
        (typically the default translations) are kept.
        """
        if not self._stack:
            return self.push(dictionary)
        return Translator((_freeze(dictionary), *self._stack[1:]))

    @property
    def dictionaries(self) -> tuple[Mapping[str, str], ...]:
        """All dictionaries, highest precedence first."""
        return self._stack

    def lookup(self, literal_id: str) -> tuple[int, str] | None:
        """Find the first dictionary containing ``literal_id``.

        Returns:
            (precedence index, raw template), or None if no dictionary has it
        """
        for index, dictionary in enumerate(self._stack):
            template = dictionary.get(literal_id)
            if template is not None:
                return index, template
        return None

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Mapping[str, str]]:
        return iter(self._stack)


def default_translator() -> Translator:
    """Return an empty translator."""
    return Translator.empty()


def add_translations(dictionary: Mapping[str, str], translator: Translator) -> Translator:
    """Push ``dictionary`` onto ``translator`` with the highest precedence."""
    return translator.push(dictionary)


def update_translations(dictionary: Mapping[str, str], translator: Translator) -> Translator:
    """Replace the currently loaded (top) dictionary of ``translator``."""
    return translator.replace_top(dictionary)
