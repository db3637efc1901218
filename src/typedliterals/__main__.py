"""Allow ``python -m typedliterals``."""

from typedliterals.codegen.cli import run

run()
