"""Configuration for the accessor module generator.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from typedliterals.constants import (
    DEFAULT_FORMATTER_COMMAND,
    DEFAULT_MODULE_NAME,
    LITERAL_IMPORT_PATH,
)

__all__ = ["GeneratorConfig"]


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Settings for generating an accessor module.

    Examples:
        >>> GeneratorConfig()  # "Literals", formatted with ruff
        >>> GeneratorConfig(module_name="Messages", format_output=False)

    Attributes:
        module_name: Name recorded in the generated module's docstring
        format_output: Pipe generated source through the external formatter
        formatter_command: Command reading source on stdin, writing to stdout
        literal_import_path: Module the generated code imports Literal from
        formatter_timeout: Seconds to wait for the formatter
        require_formatter: Fail when the formatter executable is missing.
            When False, the unformatted source is returned with a warning.
    """

    module_name: str = DEFAULT_MODULE_NAME
    format_output: bool = True
    formatter_command: tuple[str, ...] = DEFAULT_FORMATTER_COMMAND
    literal_import_path: str = LITERAL_IMPORT_PATH
    formatter_timeout: float = 30.0
    require_formatter: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If module_name is empty, or formatting is enabled
                with an empty formatter command
        """
        if not self.module_name:
            msg = "module_name must not be empty"
            raise ValueError(msg)
        if self.format_output and not self.formatter_command:
            msg = "formatter_command must not be empty when format_output is enabled"
            raise ValueError(msg)
        if self.formatter_timeout <= 0:
            msg = f"formatter_timeout must be positive, got {self.formatter_timeout}"
            raise ValueError(msg)
