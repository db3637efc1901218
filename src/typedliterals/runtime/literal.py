"""Typed literal values produced by generated accessor functions.

A Literal is an explicit tagged value: the id used to look up a template,
the compile-time default, the substitution values and the optional
pluralisation count. Accessors construct it directly, so nothing has to be
discovered by introspection at translation time.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = ["Literal"]


@dataclass(frozen=True, slots=True)
class Literal:
    """Reference to a translatable string.

    Substitutions are stored as a tuple of (key, value) pairs so the value
    stays hashable and immutable. Use ``Literal.of`` to build one from a
    mapping.

    Attributes:
        id: Literal identifier, stable across a build
        default: Compile-time default template (None if not specified)
        substitutions: Named substitution values in declaration order
        count: Pluralisation count (None for non-pluralised literals)

    Example:
        >>> lit = Literal.of("People", "{count} person|{count} people", count=3)
        >>> lit.count
        3
    """

    id: str
    default: str | None = None
    substitutions: tuple[tuple[str, str], ...] = ()
    count: int | None = None

    @classmethod
    def of(
        cls,
        literal_id: str,
        default: str | None = None,
        *,
        substitutions: Mapping[str, str] | None = None,
        count: int | None = None,
    ) -> Literal:
        """Build a Literal from a substitution mapping.

        Args:
            literal_id: Literal identifier
            default: Compile-time default template
            substitutions: Placeholder key to replacement value
            count: Pluralisation count

        Returns:
            New Literal
        """
        pairs = tuple(substitutions.items()) if substitutions else ()
        return cls(literal_id, default, pairs, count)

    @property
    def values(self) -> dict[str, str]:
        """Substitution values as a fresh dict."""
        return dict(self.substitutions)

    @property
    def is_pluralised(self) -> bool:
        """Whether a count was supplied."""
        return self.count is not None
