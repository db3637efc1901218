"""Literal resolution against a translator.

Resolution is total: it never raises in the default mode. A literal whose
id is missing from every dictionary resolves to its compile-time default,
and a literal without a default resolves to the "..." sentinel. A UI
render path can therefore call ``translate`` without error handling.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from typedliterals.constants import FALLBACK_MISSING_LITERAL
from typedliterals.runtime.literal import Literal
from typedliterals.runtime.plural import pluralize
from typedliterals.runtime.store import Translator
from typedliterals.runtime.substitution import substitute

__all__ = ["resolve", "resolve_id", "translate"]

logger = logging.getLogger(__name__)


def resolve(literal_id: str, default: str | None, translator: Translator) -> str:
    """Find the raw template for ``literal_id``.

    Walks the translator's dictionaries in precedence order and returns the
    first match. Falls back to ``default``, then to "...".

    Args:
        literal_id: Literal identifier
        default: Compile-time default template (None if absent)
        translator: Dictionaries to search

    Returns:
        Raw (unsubstituted) template
    """
    found = translator.lookup(literal_id)
    if found is not None:
        return found[1]
    if default is not None:
        logger.debug("Literal '%s' not translated, using default", literal_id)
        return default
    logger.warning("Literal '%s' not found and has no default", literal_id)
    return FALLBACK_MISSING_LITERAL


def resolve_id(literal_id: str, translator: Translator, default: str | None = None) -> str:
    """Resolve an id only known at run time.

    No structured literal is available, so the template is returned
    verbatim: no substitution and no pluralisation.
    """
    return resolve(literal_id, default, translator)


def translate(literal: Literal, translator: Translator, *, strict: bool = False) -> str:
    """Resolve a literal to its display string.

    Args:
        literal: Literal built by a generated accessor
        translator: Dictionaries to search
        strict: Raise MalformedPluralTemplateError for pluralised templates
            that do not split into exactly two clauses

    Returns:
        Display string with placeholders and plural clause applied

    Example:
        >>> fr = Translator.empty().push({"Name": "Je m'appelle {name}"})
        >>> translate(Literal.of("Name", substitutions={"name": "Dave"}), fr)
        "Je m'appelle Dave"
    """
    template = resolve(literal.id, literal.default, translator)
    values = literal.values
    if literal.count is None:
        return substitute(values, template)
    return pluralize(literal.count, template, values, strict=strict)
