"""Shared constants for typedliterals.

Placing constants here avoids circular imports between the runtime,
localization and codegen packages and provides a single source of truth.

Constants are grouped by domain:
- Resolution: Fallback sentinel and template syntax
- Generation: Defaults for the accessor module generator
- Input limits: Size constraints for translation files

Python 3.12+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resolution
    "FALLBACK_MISSING_LITERAL",
    "PLURAL_SEPARATOR",
    "COUNT_KEY",
    # Generation
    "DEFAULT_MODULE_NAME",
    "DEFAULT_FORMATTER_COMMAND",
    "LITERAL_IMPORT_PATH",
    # Input limits
    "MAX_TRANSLATION_FILE_SIZE",
]

# ============================================================================
# RESOLUTION
# ============================================================================

# Returned when no dictionary contains the literal and it has no default.
FALLBACK_MISSING_LITERAL: str = "..."

# Separates the singular clause from the plural clause in a raw template.
PLURAL_SEPARATOR: str = "|"

# Placeholder key bound to the pluralisation count.
COUNT_KEY: str = "count"

# ============================================================================
# GENERATION
# ============================================================================

DEFAULT_MODULE_NAME: str = "Literals"

# Reads source on stdin, writes formatted source on stdout.
DEFAULT_FORMATTER_COMMAND: tuple[str, ...] = ("ruff", "format", "-")

# Module the generated accessors import Literal from.
LITERAL_IMPORT_PATH: str = "typedliterals"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Translation files larger than this (in bytes) are rejected by the loader.
MAX_TRANSLATION_FILE_SIZE: int = 10 * 1024 * 1024
