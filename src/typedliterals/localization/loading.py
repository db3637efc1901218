"""Translation file loading infrastructure for Localization.

Provides the protocol for translation loaders, a filesystem implementation
with path-traversal checks, and result/summary records for tracking load
attempts.

Components:
    DictionaryLoader - Protocol for loading translation files (structural typing)
    PathDictionaryLoader - Disk-based loader with path-traversal prevention
    FallbackInfo - Immutable record of a locale fallback event
    ResourceLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of all load results from initialization

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from typedliterals.constants import MAX_TRANSLATION_FILE_SIZE
from typedliterals.enums import LoadStatus
from typedliterals.localization.types import LiteralId, LocaleCode, TranslationSource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DictionaryLoader",
    # Concrete loader
    "PathDictionaryLoader",
    # Fallback observability
    "FallbackInfo",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
]


class DictionaryLoader(Protocol):
    """Protocol for loading the translation file of one locale.

    Example:
        >>> class MemoryLoader:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def load(self, locale: str) -> str:
        ...         try:
        ...             return self.files[locale]
        ...         except KeyError:
        ...             raise FileNotFoundError(locale) from None
        ...     def describe_path(self, locale: str) -> str:
        ...         return f"memory:{locale}"
    """

    def load(self, locale: LocaleCode) -> TranslationSource:
        """Load the raw JSON translation file for ``locale``.

        Raises:
            FileNotFoundError: If no file exists for this locale
            OSError: If file cannot be read
        """

    def describe_path(self, locale: LocaleCode) -> str:
        """Return human-readable path for diagnostics."""
        return locale


@dataclass(frozen=True, slots=True)
class PathDictionaryLoader:
    """File system loader using a path template.

    Security:
        Locale codes containing path separators or ".." are rejected, and the
        resolved path must stay within a fixed root directory.

    Example:
        >>> loader = PathDictionaryLoader("translations/{locale}.json")
        >>> source = loader.load("fr")
        # Loads from: translations/fr.json

    Attributes:
        path_template: Path with {locale} placeholder
        root_dir: Fixed root directory for traversal checks. Defaults to the
                  static prefix of path_template.
        max_size: Files larger than this many bytes are rejected
    """

    path_template: str
    root_dir: str | None = None
    max_size: int = MAX_TRANSLATION_FILE_SIZE
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template.

        Raises:
            ValueError: If path_template lacks the {locale} placeholder
        """
        if "{locale}" not in self.path_template:
            msg = (
                f"path_template must contain '{{locale}}' placeholder, "
                f"got: '{self.path_template}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            # "translations/{locale}.json" -> "translations"
            static_prefix = self.path_template.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Reject locale codes that could escape the translation directory.

        Raises:
            ValueError: If locale contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the locale-substituted path."""
        return self.path_template.replace("{locale}", locale)

    def load(self, locale: LocaleCode) -> TranslationSource:
        """Read the translation file for ``locale``.

        Raises:
            ValueError: If locale is unsafe, the path escapes the root
                directory, or the file exceeds max_size
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
        """
        self._validate_locale(locale)
        full_path = Path(self.describe_path(locale)).resolve()

        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: resolved path escapes root directory. locale='{locale}'"
            raise ValueError(msg) from None

        size = full_path.stat().st_size
        if size > self.max_size:
            msg = f"Translation file {full_path} is {size} bytes, limit is {self.max_size}"
            raise ValueError(msg)

        return full_path.read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Passed to the on_fallback callback when Localization resolves a literal
    from a locale other than the primary one.

    Attributes:
        requested_locale: The primary (first) locale in the chain
        resolved_locale: The locale whose dictionary contained the literal
        literal_id: The literal identifier that was resolved
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    literal_id: LiteralId


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading one locale's translation file.

    Attributes:
        locale: Locale code
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to the file (if available)
        entry_count: Number of translations decoded
    """

    locale: LocaleCode
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if the file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if loading failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of load results from Localization initialization.

    Example:
        >>> summary = l10n.get_load_summary()
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of files not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results where the file was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_by_locale(self, locale: LocaleCode) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)

    @property
    def all_successful(self) -> bool:
        """True if no errors occurred and every file was found."""
        return self.errors == 0 and self.not_found == 0
