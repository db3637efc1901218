"""typedliterals - Typed, runtime-loadable translation literals.

Literals are typed references to translatable strings. A code generator
turns a JSON specification into accessor functions returning Literal
values, and the runtime resolves them against an immutable stack of
translation dictionaries with placeholder substitution and singular/plural
clause selection.

Public API:
    Literal - Typed literal value built by generated accessors
    Translator - Immutable stack of translation dictionaries
    translate - Resolve a Literal to its display string
    resolve / resolve_id - Raw template lookup with fallbacks
    substitute / pluralize - Template processing
    Localization - Locale fallback chain backed by translation files

Exceptions:
    TranslatorError - Base exception class
    TranslationDecodeError - Bad translation file
    MalformedPluralTemplateError - Strict pluralisation failure
    SpecificationError - Bad specification file
    FormatterError - External formatter failure
    FormatterNotFoundError - Formatter executable not installed

Submodules:
    typedliterals.runtime - Store, resolver, substitution, pluralisation
    typedliterals.localization - Codec, loaders and Localization
    typedliterals.codegen - Specification parsing and accessor generation
"""

from .errors import (
    FormatterError,
    FormatterNotFoundError,
    MalformedPluralTemplateError,
    SpecificationError,
    TranslationDecodeError,
    TranslatorError,
)
from .localization import Localization, decode_translations, encode_translations
from .runtime import (
    Literal,
    Translator,
    add_translations,
    default_translator,
    pluralize,
    resolve,
    resolve_id,
    substitute,
    translate,
    update_translations,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("typedliterals")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormatterError",
    "FormatterNotFoundError",
    "Literal",
    "Localization",
    "MalformedPluralTemplateError",
    "SpecificationError",
    "TranslationDecodeError",
    "Translator",
    "TranslatorError",
    "__version__",
    "add_translations",
    "decode_translations",
    "default_translator",
    "encode_translations",
    "pluralize",
    "resolve",
    "resolve_id",
    "substitute",
    "translate",
    "update_translations",
]
