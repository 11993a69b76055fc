"""Command-line and environment option parsing."""

import argparse
import logging
from typing import TextIO

from trycmd.constants import DEFAULT_SHELL
from trycmd.env import get_env_int, get_env_string
from trycmd.errors import UsageError
from trycmd.models import ColorMode, TryOptions

log = logging.getLogger(__name__)

ENVIRONMENT_HELP = f"""\
environment:
  TRY_INTERACTIVE=1     always execute commands in an interactive subshell
  TRY_COLOR=WHEN        colorize the result: never, always or auto
  TRY_DEBUG=1           print diagnostic messages
  SHELL={DEFAULT_SHELL:<15} the shell used to execute the command
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


class _HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Show optional option values attached, as in --color[=WHEN]."""

    def _format_action_invocation(self, action: argparse.Action) -> str:
        if action.option_strings and action.nargs == argparse.OPTIONAL:
            (metavar,) = self._metavar_formatter(action, action.dest.upper())(1)
            return ", ".join(f"{option}[={metavar}]" for option in action.option_strings)
        return super()._format_action_invocation(action)


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the options preceding COMMAND."""
    parser = _ArgumentParser(
        prog="try",
        usage="%(prog)s [-ivh] [--color[=WHEN]] [--] COMMAND [ARG]...",
        description="Run COMMAND with its ARGs, show a clear result and pass on its exit status.",
        epilog=ENVIRONMENT_HELP,
        formatter_class=_HelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="execute the command in an interactive subshell (needed for aliases)",
    )
    parser.add_argument(
        "--color",
        "--colour",
        dest="color",
        nargs="?",
        const=ColorMode.ALWAYS.value,
        choices=[mode.value for mode in ColorMode],
        metavar="WHEN",
        help="colorize the result: never, always (default) or auto",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="verbose output (echo the command being run)",
    )
    parser.add_argument("-h", "--help", action="store_true", help="show this message")
    return parser


def split_command(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv into (options, COMMAND [ARG]...).

    Options end at the first token that is not an option, or after ``--``.
    """
    for idx, token in enumerate(argv):
        if token == "--":
            return argv[:idx], argv[idx + 1 :]
        if token == "-" or not token.startswith("-"):
            return argv[:idx], argv[idx:]
    return list(argv), []


def _color_from_env() -> ColorMode:
    value = get_env_string("TRY_COLOR")
    if value is None:
        return ColorMode.NEVER
    try:
        return ColorMode(value)
    except ValueError:
        log.debug("ignoring invalid TRY_COLOR=%r", value)
        return ColorMode.NEVER


def read_options(argv: list[str], debug: bool = False) -> TryOptions:
    """Resolve the command line and environment into TryOptions.

    Command-line options take precedence over the environment. Raises
    UsageError for an unknown option or an invalid WHEN.
    """
    option_args, command = split_command(argv)
    args = build_parser().parse_args(option_args)
    options = TryOptions(
        interactive=args.interactive or get_env_int("TRY_INTERACTIVE") != 0,
        color=ColorMode(args.color) if args.color else _color_from_env(),
        shell=get_env_string("SHELL"),
        verbose=args.verbose,
        debug=debug,
        help=args.help,
        command=command,
    )
    log.debug("read_options: %s", options)
    return options


def print_usage(out: TextIO) -> None:
    out.write(build_parser().format_help())
    out.flush()
