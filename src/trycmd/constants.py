"""Shared constants for trycmd."""

BOLD_GREEN = "\033[1;32m"
BOLD_RED = "\033[1;31m"
RESET = "\033[0m"

DIVIDER = "=" * 78

# Shells report a signal-terminated child as 128+n.
SIGNAL_BASE = 128
CATCH_ALL_STATUS = 255
COMMAND_NOT_FOUND = 127

DEFAULT_SHELL = "/bin/sh"
