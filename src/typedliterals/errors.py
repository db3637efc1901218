"""Exception hierarchy for typedliterals.

Resolution never raises in its default (lenient) mode: missing literals,
malformed plural templates and absent counts all resolve to defined
fallback strings. The exceptions below cover the boundaries where failing
loudly is correct: decoding translation files, strict-mode pluralisation,
reading specifications and running the external formatter.

Hierarchy:
    TranslatorError (base)
    ├─ TranslationDecodeError (translation file is not an object of strings)
    ├─ MalformedPluralTemplateError (strict mode only)
    ├─ SpecificationError (specification file has the wrong shape)
    └─ FormatterError (external formatter failed)
       └─ FormatterNotFoundError (formatter executable missing)

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "FormatterError",
    "FormatterNotFoundError",
    "MalformedPluralTemplateError",
    "SpecificationError",
    "TranslationDecodeError",
    "TranslatorError",
]


class TranslatorError(Exception):
    """Base exception for all typedliterals errors."""


class TranslationDecodeError(TranslatorError, ValueError):
    """Translation file content is not a JSON object of string templates."""


class MalformedPluralTemplateError(TranslatorError, ValueError):
    """Pluralised template does not split into exactly two clauses.

    Only raised when strict pluralisation is requested. The default
    behaviour treats both clauses as empty strings.

    Attributes:
        template: The offending raw template
    """

    def __init__(self, template: str) -> None:
        """Initialize MalformedPluralTemplateError.

        Args:
            template: Raw template that failed to split
        """
        self.template = template
        parts = template.count("|") + 1
        super().__init__(
            f"Plural template must contain exactly one '|' separator, "
            f"got {parts} clause(s): {template!r}"
        )


class SpecificationError(TranslatorError, ValueError):
    """Literal specification has an invalid shape.

    Attributes:
        literal_name: Specification entry at fault (None for top-level errors)
    """

    def __init__(self, message: str, literal_name: str | None = None) -> None:
        """Initialize SpecificationError.

        Args:
            message: Human-readable error description
            literal_name: Name of the offending specification entry
        """
        self.literal_name = literal_name
        if literal_name is not None:
            message = f"{literal_name}: {message}"
        super().__init__(message)


class FormatterError(TranslatorError):
    """External source formatter failed.

    Carries the unformatted source so callers can still show what was
    generated.

    Attributes:
        source: Generated source text before formatting
        detail: Formatter error output or the reason it could not run
    """

    def __init__(self, detail: str, source: str) -> None:
        """Initialize FormatterError.

        Args:
            detail: Error output or failure reason
            source: Unformatted generated source
        """
        self.detail = detail
        self.source = source
        super().__init__(detail)


class FormatterNotFoundError(FormatterError):
    """Formatter executable could not be found.

    Attributes:
        command: Executable that was looked up
    """

    def __init__(self, command: str, source: str) -> None:
        """Initialize FormatterNotFoundError.

        Args:
            command: Missing executable
            source: Unformatted generated source
        """
        self.command = command
        super().__init__(f"Formatter not found: {command}", source)
