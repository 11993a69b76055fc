"""Shell invocation model for the subprocess runner."""

from dataclasses import dataclass


@dataclass
class BuiltCommand:
    """An argv ready for ``os.execv``.

    ``size`` is the exact byte count of a single C-style allocation holding
    the argv pointer table (NULL terminator included) and its copied strings.
    """

    argv: list[str]
    size: int

    @property
    def executable(self) -> str:
        return self.argv[0]
