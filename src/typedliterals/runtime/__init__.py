"""Runtime resolution: translator store, substitution and pluralisation.

Submodules:
    literal      - Literal value type
    store        - Translator (immutable dictionary stack)
    substitution - Placeholder substitution
    plural       - Singular/plural clause selection
    resolver     - resolve, resolve_id, translate

Python 3.12+. Zero external dependencies.
"""

from .literal import Literal
from .plural import pluralize, split_clauses
from .resolver import resolve, resolve_id, translate
from .store import (
    TranslationDictionary,
    Translator,
    add_translations,
    default_translator,
    update_translations,
)
from .substitution import substitute

__all__ = [
    "Literal",
    "TranslationDictionary",
    "Translator",
    "add_translations",
    "default_translator",
    "pluralize",
    "resolve",
    "resolve_id",
    "split_clauses",
    "substitute",
    "translate",
    "update_translations",
]
