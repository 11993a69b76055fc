"""Model package for trycmd."""

from trycmd.models.built_command import BuiltCommand
from trycmd.models.exit_outcome import ExitOutcome
from trycmd.models.try_options import ColorMode, TryOptions

__all__ = [
    "BuiltCommand",
    "ColorMode",
    "ExitOutcome",
    "TryOptions",
]
