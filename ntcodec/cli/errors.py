"""
Error handling for the ntcodec command line tools.

Any failure (unreadable input, invalid JSON, NestedText syntax errors,
values that cannot be serialized) ends the process with a non-zero exit
status and a message on standard error.
"""

import os
import sys
import traceback
from typing import Optional

from rich.console import Console
from rich.text import Text

from ..errors import NTError

# Maximum length for traceback output in CLI
_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """
    Base exception for command line failures that are not codec errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def __str__(self) -> str:
        return self.message


class CLIInputError(CLIError):
    """
    Input could not be read or decoded.

    Raised when:
    - The input file does not exist or cannot be read
    - The input is not valid UTF-8
    - JSON input is malformed
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_INPUT_ERROR')
        super().__init__(message, **kwargs)


def format_cli_error(exc: BaseException, *, include_traceback: bool = False) -> str:
    """
    Format an exception for display on standard error.

    Codec errors already carry their position in ``str()``; CLI errors add
    their hint; anything else is shown with its type name.
    """
    lines = []

    if isinstance(exc, NTError):
        lines.append(str(exc))
    elif isinstance(exc, CLIError):
        lines.append(exc.message)
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
    else:
        lines.append(f"{exc.__class__.__name__}: {exc}")

    if include_traceback:
        lines.append("")
        lines.append(format_traceback_excerpt())

    return "\n".join(lines)


def format_traceback_excerpt() -> str:
    """
    Format the current exception traceback, truncated to a sane size.

    Note:
        Should only be called within an exception handler context.
    """
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_debug_enabled(debug_flag: bool = False) -> bool:
    """
    Determine whether tracebacks should accompany error messages.

    Respects an explicit flag and the NTCODEC_DEBUG/DEBUG environment
    variables.
    """
    return debug_flag or _env_flag("NTCODEC_DEBUG") or _env_flag("DEBUG")


def handle_cli_exception(exc: BaseException, *, debug: bool = False, exit_code: int = 1) -> None:
    """
    Report an exception on standard error and exit.

    Note:
        This function calls sys.exit() and does not return.
    """
    message = format_cli_error(exc, include_traceback=cli_debug_enabled(debug))
    console = Console(stderr=True, highlight=False)
    console.print(Text(message, style="red"), soft_wrap=True)
    sys.exit(exit_code)


__all__ = [
    "CLIError",
    "CLIInputError",
    "format_cli_error",
    "format_traceback_excerpt",
    "cli_debug_enabled",
    "handle_cli_exception",
]
