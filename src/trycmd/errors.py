"""Exceptions raised by trycmd."""


class TryError(Exception):
    """Base class for trycmd errors."""


class UsageError(TryError):
    """The command line could not be parsed."""


class ContractViolation(AssertionError):
    """An internal precondition was broken by the caller."""
