"""Exit status model for a finished subcommand."""

import os
from dataclasses import dataclass

from trycmd.constants import CATCH_ALL_STATUS, SIGNAL_BASE


@dataclass
class ExitOutcome:
    """A raw wait status and the shell-style exit code derived from it."""

    raw_status: int
    code: int

    @classmethod
    def from_wait_status(cls, status: int) -> "ExitOutcome":
        if os.WIFEXITED(status):
            code = os.WEXITSTATUS(status)
        elif os.WIFSIGNALED(status):
            code = SIGNAL_BASE + os.WTERMSIG(status)
        else:
            code = CATCH_ALL_STATUS
        return cls(raw_status=status, code=code)

    @property
    def succeeded(self) -> bool:
        return self.code == 0
