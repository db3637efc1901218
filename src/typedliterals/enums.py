"""Enumerations for typedliterals type-safe constants.

Uses StrEnum for automatic string conversion.

Python 3.12+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading one locale's translation file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File loaded and decoded."""

    NOT_FOUND = "not_found"
    """File does not exist (expected for optional locales)."""

    ERROR = "error"
    """File exists but could not be read or decoded."""


class PluralClause(StrEnum):
    """Clause of a pluralised template selected for a count.

    StrEnum provides automatic string conversion: str(PluralClause.SINGULAR) == "singular"
    """

    SINGULAR = "singular"
    """Left of the separator, used when count == 1."""

    PLURAL = "plural"
    """Right of the separator, used for every other count."""


__all__ = [
    "LoadStatus",
    "PluralClause",
]
