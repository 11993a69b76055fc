"""Render command-line arguments the way a POSIX shell would read them back."""

from collections.abc import Iterable
from typing import TextIO

SAFE_PUNCTUATION = frozenset("_-./")


def needs_quoting(char: str) -> bool:
    """Return whether char forces an argument to be single-quoted."""
    if char.isascii() and char.isalnum():
        return False
    return char not in SAFE_PUNCTUATION


def quote_arg(arg: str) -> str:
    """Return arg, single-quoted if any of its characters need it."""
    if not any(needs_quoting(c) for c in arg):
        return arg
    # Each embedded quote closes the quoted run, is escaped, then reopens it.
    segments = arg.split("'")
    return "\\'".join(f"'{segment}'" if segment else "" for segment in segments)


def pretty_print_arg(arg: str, out: TextIO) -> None:
    out.write(quote_arg(arg))


def print_arg_list(prefix: str, args: Iterable[str], out: TextIO) -> None:
    """Write prefix followed by each quoted argument, then a newline."""
    out.write(prefix)
    for arg in args:
        out.write(" ")
        pretty_print_arg(arg, out)
    out.write("\n")
