"""External source formatter invocation.

Python 3.12+.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from typedliterals.constants import DEFAULT_FORMATTER_COMMAND
from typedliterals.errors import FormatterError, FormatterNotFoundError

__all__ = ["format_source"]

logger = logging.getLogger(__name__)


def format_source(
    source: str,
    command: Sequence[str] = DEFAULT_FORMATTER_COMMAND,
    *,
    timeout: float = 30.0,
) -> str:
    """Pipe ``source`` through a formatter command.

    The command must read source on stdin and write the formatted source
    to stdout.

    Raises:
        FormatterNotFoundError: If the command's executable does not exist
        FormatterError: If the command times out or exits with a non-zero
            status. The error carries ``source``.
    """
    argv = list(command)
    logger.debug("Running formatter: %s", " ".join(argv))
    try:
        completed = subprocess.run(  # noqa: S603 - command comes from configuration
            argv,
            input=source,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise FormatterNotFoundError(argv[0], source) from e
    except subprocess.TimeoutExpired as e:
        msg = f"Formatter timed out after {timeout}s: {' '.join(argv)}"
        raise FormatterError(msg, source) from e

    if completed.returncode != 0:
        detail = completed.stderr.strip() or f"exit status {completed.returncode}"
        msg = f"Formatter failed ({' '.join(argv)}): {detail}"
        raise FormatterError(msg, source)
    return completed.stdout
