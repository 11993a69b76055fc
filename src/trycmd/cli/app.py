"""Top-level CLI flow: parse, run, report."""

import logging
import sys

from trycmd.cli.parser import print_usage, read_options
from trycmd.env import get_env_int
from trycmd.errors import UsageError
from trycmd.report import show_exit_status
from trycmd.runner import run_subcommand

log = logging.getLogger("trycmd")


def main(argv: list[str] | None = None) -> int:
    """Run ``try`` for the given arguments and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    debug = get_env_int("TRY_DEBUG") != 0
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        options = read_options(args, debug=debug)
    except UsageError as e:
        print(f"try: error: {e}", file=sys.stderr)
        print_usage(sys.stdout)
        return 1

    if options.help:
        print_usage(sys.stdout)
        return 0
    if not options.has_command:
        print_usage(sys.stdout)
        return 1

    result = run_subcommand(options)
    result = show_exit_status(options, result, sys.stderr)
    log.debug("exiting with status %d", result)
    return result


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
