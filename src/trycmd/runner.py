"""Spawn the shell, wait for it and translate its exit status."""

import logging
import os
import signal
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from trycmd.command import build_shell_command, measure_shell_command
from trycmd.constants import COMMAND_NOT_FOUND
from trycmd.models import ExitOutcome, TryOptions
from trycmd.quoting import print_arg_list

log = logging.getLogger(__name__)

_INTERRUPT_SIGNALS = (signal.SIGINT, signal.SIGQUIT)


def normalize_wait_status(status: int) -> int:
    """Return the shell-style exit code for a raw ``waitpid`` status."""
    return ExitOutcome.from_wait_status(status).code


@contextmanager
def _ignoring_interrupts() -> Iterator[None]:
    """Leave keyboard interrupts to the child while the parent waits."""
    previous = {signum: signal.signal(signum, signal.SIG_IGN) for signum in _INTERRUPT_SIGNALS}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def _exec_child(argv: list[str]) -> None:
    """Replace the child image with the shell. Never returns."""
    try:
        # Ignored signals survive exec; the shell must see interrupts.
        for signum in _INTERRUPT_SIGNALS:
            signal.signal(signum, signal.SIG_DFL)
        os.execv(argv[0], argv)
    except OSError as e:
        log.debug("exec %s failed: %s", argv[0], e)
    finally:
        os._exit(COMMAND_NOT_FOUND)


def run_subcommand(options: TryOptions, stream: TextIO | None = None) -> int:
    """Run the subcommand through the shell and return its exit code.

    The result matches what the shell itself would report in ``$?``: the
    exit code, 128+n for a child killed by signal n, 255 otherwise, and 127
    when the shell could not be started.
    """
    out = stream if stream is not None else sys.stderr
    required = measure_shell_command(options)
    command = build_shell_command(options, capacity=required)

    if options.verbose or options.debug:
        print_arg_list("try:", command.argv, out)
        out.flush()

    log.debug("run_subcommand: spawning %s", command.executable)
    sys.stdout.flush()
    sys.stderr.flush()
    with _ignoring_interrupts():
        try:
            pid = os.fork()
        except OSError as e:
            log.debug("run_subcommand: fork failed: %s", e)
            return COMMAND_NOT_FOUND

        if pid == 0:
            _exec_child(command.argv)

        log.debug("run_subcommand: waitpid(%d)", pid)
        _, status = os.waitpid(pid, 0)
    outcome = ExitOutcome.from_wait_status(status)
    log.debug("run_subcommand: child status %d, returning %d", outcome.raw_status, outcome.code)
    return outcome.code
