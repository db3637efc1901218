"""Singular/plural clause selection.

A pluralised template holds two clauses separated by ``|``: the singular
clause, used when the count is exactly 1, and the plural clause, used for
every other integer including 0 and negatives. The count is substituted
into whichever clause is chosen under the ``count`` key.

Templates that do not split into exactly two clauses resolve to two empty
clauses. Pass ``strict=True`` to raise MalformedPluralTemplateError
instead; this deviates from the legacy behaviour and is opt-in.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping

from typedliterals.constants import COUNT_KEY, PLURAL_SEPARATOR
from typedliterals.enums import PluralClause
from typedliterals.errors import MalformedPluralTemplateError
from typedliterals.runtime.substitution import substitute

__all__ = ["pluralize", "select_clause", "split_clauses"]


def split_clauses(template: str, *, strict: bool = False) -> tuple[str, str]:
    """Split a template into (singular, plural) clauses.

    Args:
        template: Raw template
        strict: Raise instead of returning empty clauses for bad templates

    Returns:
        (singular clause, plural clause); ("", "") if malformed

    Raises:
        MalformedPluralTemplateError: If strict and the template does not
            contain exactly one separator
    """
    parts = template.split(PLURAL_SEPARATOR)
    if len(parts) != 2:
        if strict:
            raise MalformedPluralTemplateError(template)
        return "", ""
    return parts[0], parts[1]


def select_clause(count: int) -> PluralClause:
    """Return the clause used for ``count``."""
    return PluralClause.SINGULAR if count == 1 else PluralClause.PLURAL


def pluralize(
    count: int | None,
    template: str,
    substitutions: Mapping[str, str] | None = None,
    *,
    strict: bool = False,
) -> str:
    """Select and substitute the clause of ``template`` matching ``count``.

    Args:
        count: Pluralisation count, or None for non-pluralised literals
        template: Raw template
        substitutions: Other substitution values of the literal
        strict: Reject templates without exactly one separator

    Returns:
        The chosen clause with ``{count}`` and the other placeholders
        substituted, or ``template`` unchanged when ``count`` is None

    Examples:
        >>> pluralize(1, "Il y a {count} personne|Il y a {count} personnes")
        'Il y a 1 personne'
        >>> pluralize(5, "Il y a {count} personne|Il y a {count} personnes")
        'Il y a 5 personnes'
        >>> pluralize(None, "A|B")
        'A|B'
    """
    if count is None:
        return template

    singular, plural = split_clauses(template, strict=strict)
    values = {**substitutions} if substitutions else {}
    values[COUNT_KEY] = str(count)

    clause = singular if select_clause(count) is PluralClause.SINGULAR else plural
    return substitute(values, clause)
