class Error(Exception):
    """Base class for errors in the bignumber package."""

    def __init__(self, *params: object) -> None:
        self.msg = params[0] if params else ''
        self.params = params[1:]


class ContractViolation(Error, ValueError):
    """Caller misuse, such as a numeric base other than 2, 10 or 16."""


class FormatError(Error, ValueError):
    """Numeral string failed syntax normalization."""


class BitOverflowError(Error, OverflowError):
    """Normalized numeral is too long to fit in the fixed bit width."""


class UnsupportedPathError(Error, NotImplementedError):
    """Conversion path that has no defined algorithm (decimal strings)."""
