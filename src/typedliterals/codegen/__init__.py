"""Accessor module generation from literal specifications.

Submodules:
    specification - Specification parsing and validation
    generator     - Python source emission
    formatter     - External formatter invocation
    config        - GeneratorConfig
    cli           - ``typedliterals generate`` command
"""

from .config import GeneratorConfig
from .formatter import format_source
from .generator import accessor_name, generate, generate_source
from .specification import LiteralSpec, Specification, load_specification, parse_specification

__all__ = [
    "GeneratorConfig",
    "LiteralSpec",
    "Specification",
    "accessor_name",
    "format_source",
    "generate",
    "generate_source",
    "load_specification",
    "parse_specification",
]
