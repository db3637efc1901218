"""Literal specification parsing.

A specification is a JSON object. Each key is a literal name, each value
an object with optional fields:

    default        string, the compile-time default template
    substitutions  array of distinct placeholder names
    pluralise      boolean, default false

Example:
    {
        "Yes": {"default": "Yes"},
        "MyNameIs": {"default": "My name is {name}", "substitutions": ["name"]},
        "People": {"default": "{count} person|{count} people", "pluralise": true}
    }

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import json
import keyword
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from typedliterals.constants import COUNT_KEY
from typedliterals.errors import SpecificationError

__all__ = [
    "LiteralSpec",
    "Specification",
    "load_specification",
    "parse_specification",
]

_KNOWN_FIELDS = frozenset({"default", "substitutions", "pluralise"})

# Names the generated module binds; a parameter with one of these names would shadow it.
_RESERVED_NAMES = frozenset({COUNT_KEY, "Literal"})


@dataclass(frozen=True, slots=True)
class LiteralSpec:
    """One specification entry.

    Attributes:
        name: Literal name, also its id in translation files
        default: Compile-time default template (None if not specified)
        substitutions: Placeholder names in declaration order
        pluralise: Whether the literal takes a count
    """

    name: str
    default: str | None = None
    substitutions: tuple[str, ...] = ()
    pluralise: bool = False


@dataclass(frozen=True, slots=True)
class Specification:
    """Parsed specification, entries in file order."""

    literals: tuple[LiteralSpec, ...]

    def __iter__(self) -> Iterator[LiteralSpec]:
        return iter(self.literals)

    def __len__(self) -> int:
        return len(self.literals)

    def get(self, name: str) -> LiteralSpec | None:
        """Return the entry called ``name``, or None."""
        for literal in self.literals:
            if literal.name == name:
                return literal
        return None


def _parse_substitutions(name: str, raw: object) -> tuple[str, ...]:
    if not isinstance(raw, list):
        msg = f"'substitutions' must be an array, got {type(raw).__name__}"
        raise SpecificationError(msg, name)

    seen: dict[str, None] = {}
    for key in raw:
        if not isinstance(key, str):
            msg = f"substitution names must be strings, got {key!r}"
            raise SpecificationError(msg, name)
        if not key.isidentifier() or keyword.iskeyword(key):
            msg = f"substitution name {key!r} is not a valid identifier"
            raise SpecificationError(msg, name)
        if key in seen:
            msg = f"duplicate substitution name {key!r}"
            raise SpecificationError(msg, name)
        if key in _RESERVED_NAMES:
            msg = f"substitution name {key!r} is reserved by the generated module"
            raise SpecificationError(msg, name)
        seen[key] = None
    return tuple(seen)


def _parse_entry(name: str, raw: object) -> LiteralSpec:
    if not isinstance(raw, Mapping):
        msg = f"entry must be an object, got {type(raw).__name__}"
        raise SpecificationError(msg, name)

    unknown = sorted(set(raw) - _KNOWN_FIELDS)
    if unknown:
        msg = f"unknown field(s): {', '.join(unknown)}"
        raise SpecificationError(msg, name)

    default = raw.get("default")
    if default is not None and not isinstance(default, str):
        msg = f"'default' must be a string, got {type(default).__name__}"
        raise SpecificationError(msg, name)

    pluralise = raw.get("pluralise", False)
    if not isinstance(pluralise, bool):
        msg = f"'pluralise' must be a boolean, got {type(pluralise).__name__}"
        raise SpecificationError(msg, name)

    substitutions = _parse_substitutions(name, raw.get("substitutions", []))
    return LiteralSpec(name, default, substitutions, pluralise)


def parse_specification(data: object) -> Specification:
    """Validate decoded specification JSON.

    Raises:
        SpecificationError: If the data does not have the specification shape
    """
    if not isinstance(data, Mapping):
        msg = f"Specification must be a JSON object, got {type(data).__name__}"
        raise SpecificationError(msg)

    literals = []
    for name, raw in data.items():
        if not name:
            msg = "Literal names must not be empty"
            raise SpecificationError(msg)
        literals.append(_parse_entry(name, raw))
    return Specification(tuple(literals))


def load_specification(path: str | Path) -> Specification:
    """Read and parse a specification file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        SpecificationError: If the JSON does not have the specification shape
    """
    text = Path(path).read_text(encoding="utf-8")
    return parse_specification(json.loads(text))
