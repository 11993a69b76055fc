"""Build the shell invocation that runs a subcommand.

The subcommand is not joined into one shell string. Instead the shell runs
``<argv0> "$@"`` and receives the subcommand's argv as its own positional
parameters, so argument boundaries survive exactly::

    /bin/sh -c -- 'echo "$@"' echo 'a  b' c

Sizes are computed the way a single C allocation would lay the command out:
a pointer table (with its NULL terminator) followed by every copied string
and its NUL byte, plus one guard byte, rounded up to pointer alignment.
Subcommand arguments are referenced, not copied.
"""

import logging
import os
import struct

from trycmd.align import align_size
from trycmd.errors import ContractViolation
from trycmd.models import BuiltCommand, TryOptions

log = logging.getLogger(__name__)

POINTER_SIZE = struct.calcsize("P")

SHELL_OPT_INTERACTIVE = "-i"
SHELL_OPT_COMMAND = "-c"
SHELL_OPTS_END = "--"
SCRIPT_ARGS = '"$@"'


def _script(options: TryOptions) -> str:
    return f"{options.command[0]} {SCRIPT_ARGS}"


def _shell_prefix(options: TryOptions) -> list[str]:
    """Return the argv elements that precede the subcommand's own argv."""
    prefix = [options.shell]
    if options.interactive:
        prefix.append(SHELL_OPT_INTERACTIVE)
    prefix += [SHELL_OPT_COMMAND, SHELL_OPTS_END, _script(options)]
    return prefix


def _require_command(options: TryOptions) -> None:
    if not options.command:
        raise ContractViolation("a shell command needs at least one subcommand argument")


def measure_shell_command(options: TryOptions) -> int:
    """Return the exact size needed to hold the built command."""
    _require_command(options)
    prefix = _shell_prefix(options)
    pointer_slots = len(prefix) + len(options.command) + 1
    strings = sum(len(os.fsencode(part)) + 1 for part in prefix)
    required = align_size(pointer_slots * POINTER_SIZE + strings + 1, POINTER_SIZE)
    log.debug("measure_shell_command: slots=%d required=%d", pointer_slots, required)
    return required


def build_shell_command(options: TryOptions, capacity: int | None = None) -> BuiltCommand:
    """Build the argv to exec the shell with the subcommand wrapped safely.

    When ``capacity`` is given it must be at least the size reported by
    :func:`measure_shell_command`.
    """
    required = measure_shell_command(options)
    if capacity is not None and capacity < required:
        raise ContractViolation(
            f"capacity {capacity} is smaller than the required {required}"
        )
    return BuiltCommand(argv=_shell_prefix(options) + list(options.command), size=required)
