"""Run a command, show a clear result and pass on its exit status."""

__version__ = "1.0.0"
