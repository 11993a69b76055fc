"""Print a clear pass/fail banner for a finished subcommand."""

import sys
from typing import TextIO

from trycmd.constants import BOLD_GREEN, BOLD_RED, DIVIDER, RESET
from trycmd.models import ColorMode, TryOptions
from trycmd.quoting import print_arg_list


def use_color(mode: ColorMode, stream: TextIO) -> bool:
    """Return whether ANSI color should be written to stream."""
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def show_exit_status(options: TryOptions, exit_status: int, stream: TextIO | None = None) -> int:
    """Write the result banner for exit_status and return it unchanged."""
    out = stream if stream is not None else sys.stderr
    if exit_status == 0:
        label, color = "Success:", BOLD_GREEN
    else:
        label, color = f"Failed (status={exit_status}):", BOLD_RED
    if not use_color(options.color, out):
        color = reset = ""
    else:
        reset = RESET

    out.write(f"{color}{DIVIDER}\n{label}{reset}")
    print_arg_list("", options.command, out)
    out.write(f"{color}{DIVIDER}{reset}\n")
    out.flush()
    return exit_status
