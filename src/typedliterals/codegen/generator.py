"""Emit a typed Python accessor module from a specification.

Each specification entry becomes one function returning a Literal. The
function name is the literal name in snake_case; substitution names become
keyword-only ``str`` parameters and pluralised literals take a leading
``count: int`` parameter:

    def my_name_is(*, name: str) -> Literal:
        return Literal.of("MyNameIs", "My name is {name}", substitutions={"name": name})

Python 3.12+.
"""

from __future__ import annotations

import keyword
import logging
import re

from typedliterals.codegen.config import GeneratorConfig
from typedliterals.codegen.formatter import format_source
from typedliterals.codegen.specification import LiteralSpec, Specification
from typedliterals.constants import COUNT_KEY
from typedliterals.errors import FormatterNotFoundError, SpecificationError

__all__ = ["accessor_name", "generate", "generate_source"]

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATOR_RUN = re.compile(r" +")


def accessor_name(literal_name: str) -> str:
    """Convert a literal name to a Python function name.

    Examples:
        >>> accessor_name("MyNameIs")
        'my_name_is'
        >>> accessor_name("HTTPError")
        'http_error'
        >>> accessor_name("class")
        'class_'
        >>> accessor_name("a²")
        'a'

    Raises:
        SpecificationError: If no valid identifier can be derived
    """
    name = _CAMEL_BOUNDARY.sub("_", literal_name)
    # Characters that cannot continue an identifier (punctuation, "²", "½") separate words.
    name = "".join(ch if f"_{ch}".isidentifier() else " " for ch in name)
    name = _SEPARATOR_RUN.sub("_", name).strip("_").lower()
    if not name:
        name = "literal"
    if not name.isidentifier():
        name = f"literal_{name}"
    if keyword.iskeyword(name):
        name = f"{name}_"
    if not name.isidentifier():
        msg = f"cannot derive a function name, got {name!r}"
        raise SpecificationError(msg, literal_name)
    return name


def _signature(literal: LiteralSpec) -> str:
    params = []
    if literal.pluralise:
        params.append(f"{COUNT_KEY}: int")
    if literal.substitutions:
        params.append("*")
        params.extend(f"{key}: str" for key in literal.substitutions)
    return ", ".join(params)


def _constructor(literal: LiteralSpec) -> str:
    args = [repr(literal.name), repr(literal.default)]
    if literal.substitutions:
        pairs = ", ".join(f"{key!r}: {key}" for key in literal.substitutions)
        args.append(f"substitutions={{{pairs}}}")
    if literal.pluralise:
        args.append(f"{COUNT_KEY}={COUNT_KEY}")
    return f"Literal.of({', '.join(args)})"


def _accessor(name: str, literal: LiteralSpec) -> list[str]:
    return [
        f"def {name}({_signature(literal)}) -> Literal:",
        f"    return {_constructor(literal)}",
    ]


def generate_source(specification: Specification, config: GeneratorConfig | None = None) -> str:
    """Render the accessor module for ``specification`` (unformatted).

    Raises:
        SpecificationError: If two literal names map to the same function name
    """
    config = config or GeneratorConfig()

    names: dict[str, str] = {}
    for literal in specification:
        name = accessor_name(literal.name)
        if name in names:
            msg = f"accessor name '{name}' collides with literal '{names[name]}'"
            raise SpecificationError(msg, literal.name)
        names[name] = literal.name

    lines = [
        f'"""{config.module_name}: typed accessors for translatable literals.',
        "",
        "Generated by typedliterals from a literal specification. Do not edit.",
        '"""',
        "",
        f"from {config.literal_import_path} import Literal",
        "",
        "__all__ = [",
        *(f"    {name!r}," for name in sorted(names)),
        "]",
    ]
    for name, literal in zip(names, specification, strict=True):
        lines.extend(["", ""])
        lines.extend(_accessor(name, literal))

    logger.debug("Rendered %d accessor(s) for %s", len(names), config.module_name)
    return "\n".join(lines) + "\n"


def generate(specification: Specification, config: GeneratorConfig | None = None) -> str:
    """Render the accessor module and run the formatter if configured.

    Raises:
        SpecificationError: If two literal names map to the same function name
        FormatterError: If formatting is enabled and the formatter fails. A
            missing formatter is only an error when ``require_formatter`` is set.
    """
    config = config or GeneratorConfig()
    source = generate_source(specification, config)
    if not config.format_output:
        return source
    try:
        return format_source(source, config.formatter_command, timeout=config.formatter_timeout)
    except FormatterNotFoundError as e:
        if config.require_formatter:
            raise
        logger.warning("%s; writing unformatted source", e)
        return source
