"""Type aliases for the localization domain.

Python 3.12+. Zero external dependencies.
"""

__all__ = [
    "LiteralId",
    "LocaleCode",
    "TranslationSource",
]

type LiteralId = str
"""Identifier for a literal (e.g., 'Yes', 'WelcomeMessage')."""

type LocaleCode = str
"""BCP-47 or POSIX locale code (e.g., 'fr', 'pt-BR', 'zh_Hant')."""

type TranslationSource = str
"""Raw JSON translation file content."""
