"""
Fixed-width bit vectors and a 128-bit value with binary/hex string conversion.

BitVector -- byte-packed bits with storage-order and magnitude-order addressing.
Float128 -- a 128-bit pattern parsed from and rendered to base 2 and 16 numerals.
"""

__version__ = "0.1.0"

from bignumber.bitvector import BitVector, BitView
from bignumber.exceptions import (
    Error,
    ContractViolation,
    FormatError,
    BitOverflowError,
    UnsupportedPathError,
)
from bignumber.float128 import Float128, ParseResult, ParseErrorKind
from bignumber.options import options
from bignumber.syntax import syntax_check, max_input_length

__all__ = [
    "BitVector",
    "BitView",
    "Float128",
    "ParseResult",
    "ParseErrorKind",
    "Error",
    "ContractViolation",
    "FormatError",
    "BitOverflowError",
    "UnsupportedPathError",
    "options",
    "syntax_check",
    "max_input_length",
]
