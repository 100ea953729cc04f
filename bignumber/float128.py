from __future__ import annotations

import enum
from typing import NamedTuple, Optional, Union

from bignumber.bitvector import BitVector
from bignumber.exceptions import (
    BitOverflowError,
    ContractViolation,
    FormatError,
    UnsupportedPathError,
)
from bignumber.options import options
from bignumber.syntax import DIGIT_VALUES, check_base, max_input_length, syntax_check
from bignumber.utils.logging import get_logger


class ParseErrorKind(enum.Enum):
    FORMAT = 'format'
    OVERFLOW = 'overflow'
    CONTRACT = 'contract'
    UNSUPPORTED = 'unsupported'


_ERROR_TYPES = {
    ParseErrorKind.FORMAT: FormatError,
    ParseErrorKind.OVERFLOW: BitOverflowError,
    ParseErrorKind.CONTRACT: ContractViolation,
    ParseErrorKind.UNSUPPORTED: UnsupportedPathError,
}


class ParseResult(NamedTuple):
    """Outcome of Float128.parse(): either a value or the kind of failure."""
    value: Optional['Float128'] = None
    error: Optional[ParseErrorKind] = None
    message: str = ''

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> 'Float128':
        """Return the parsed value, or raise the exception matching the failure kind."""
        if self.error is None:
            return self.value
        raise _ERROR_TYPES[self.error](self.message)


class Float128(BitVector):
    """A 128-bit value held as an opaque bit pattern.

    The documented layout is 1 sign bit, 15 exponent bits and 112 mantissa
    bits, most significant first in storage order, but the bits are never
    decomposed or interpreted numerically.

    Construct with Float128() for an all-zero value, Float128.all_one(), or
    from a numeral with Float128.parse() / Float128.from_string().

    """
    __slots__ = ()

    TOTAL_BITS: int = 128
    TOTAL_BYTES: int = 16
    SIGN_BITS: int = 1
    EXPONENT_BITS: int = 15
    MANTISSA_BITS: int = 112

    def __init__(self) -> None:
        super().__init__(self.TOTAL_BITS)

    @classmethod
    def all_zero(cls) -> Float128:
        result = cls()
        result._setall(0)
        return result

    @classmethod
    def all_one(cls) -> Float128:
        result = cls()
        result._setall(1)
        return result

    @classmethod
    def frombytes(cls, data: Union[bytes, bytearray]) -> Float128:
        """Create a value whose buffer is a copy of exactly 16 bytes of data."""
        if len(data) != cls.TOTAL_BYTES:
            raise ValueError(f"Float128 needs exactly {cls.TOTAL_BYTES} bytes, not {len(data)}.")
        result = cls()
        result._setbytes(bytes(data))
        return result

    @classmethod
    def parse(cls, text: str, base: int) -> ParseResult:
        """Convert a numeral in base 2, 10 or 16 into a value.

        Surrounding whitespace is ignored. Leading signs are collapsed, pairs
        of '-' cancel. Binary and hex numerals shorter than the full width are
        left-padded with zeros and fill the buffer most significant byte first.

        Never raises for bad input, the failure kind is returned instead:

        CONTRACT -- base is not 2, 10 or 16.
        FORMAT -- text is not a valid numeral for the base, or is a negative
                  binary/hex numeral (a raw bit pattern has no sign).
        OVERFLOW -- more than 128 binary or 32 hex characters.
        UNSUPPORTED -- a valid decimal numeral; decimal conversion is undefined.

        No value is created unless every check passes.

        >>> Float128.parse('ff', 16).unwrap().hex[-4:]
        '00FF'

        """
        if not isinstance(text, str):
            raise TypeError(f"Can only parse a str, not {type(text).__name__}.")
        log = get_logger()
        try:
            check_base(base)
        except ContractViolation as e:
            log.parse_outcome(text, base, 'contract violation')
            return ParseResult(error=ParseErrorKind.CONTRACT, message=e.msg)

        normalized = syntax_check(text.strip(), base)
        if normalized is None:
            log.parse_outcome(text, base, 'format error')
            return ParseResult(error=ParseErrorKind.FORMAT,
                               message=f"{text!r} is not a valid base {base} numeral.")

        bound = max_input_length(base, cls.TOTAL_BITS)
        if bound is not None and len(normalized) > bound:
            log.parse_outcome(text, base, 'overflow', length=len(normalized), bound=bound)
            return ParseResult(error=ParseErrorKind.OVERFLOW,
                               message=f"Base {base} numeral of length {len(normalized)} "
                                       f"does not fit in {cls.TOTAL_BITS} bits (max length {bound}).")

        if base == 10:
            log.parse_outcome(text, base, 'unsupported', normalized=normalized)
            return ParseResult(error=ParseErrorKind.UNSUPPORTED,
                               message="Decimal numerals cannot be converted to Float128 yet.")

        if normalized.startswith('-'):
            log.parse_outcome(text, base, 'format error', reason='negative bit pattern')
            return ParseResult(error=ParseErrorKind.FORMAT,
                               message=f"Base {base} numerals are raw bit patterns and cannot be negative.")

        result = cls()
        if base == 2:
            result._setbin(normalized)
        else:
            result._sethex(normalized)
        log.parse_outcome(text, base, 'ok', normalized=normalized)
        return ParseResult(value=result)

    @classmethod
    def from_string(cls, text: str, base: int) -> Float128:
        """Same as parse(), but raises the matching bignumber exception on failure."""
        return cls.parse(text, base).unwrap()

    def _setbin(self, binstring: str) -> None:
        """Fill from a validated, unsigned binary numeral of at most 128 digits."""
        binstring = binstring.rjust(self.TOTAL_BITS, '0')
        for byte_index, start in enumerate(range(0, self.TOTAL_BITS, 8)):
            group = binstring[start:start + 8]
            value = 0
            for k, ch in enumerate(group):
                value |= DIGIT_VALUES[ch] << (7 - k)
            self.set_byte(byte_index, value, reverse=False)

    def _sethex(self, hexstring: str) -> None:
        """Fill from a validated, unsigned hex numeral of at most 32 digits."""
        hexstring = hexstring.rjust(self.TOTAL_BYTES * 2, '0')
        for byte_index in range(self.TOTAL_BYTES):
            high, low = hexstring[2 * byte_index], hexstring[2 * byte_index + 1]
            self.set_byte(byte_index, (DIGIT_VALUES[high] << 4) | DIGIT_VALUES[low], reverse=False)

    def to_string(self, base: int, sep: Optional[str] = None) -> str:
        """Render the bit pattern in base 2 or 16.

        base 2 -- 128 characters in storage order, drawn with the characters
                  chosen by options.bit_rendering.
        base 16 -- 16 two-digit upper-case groups in storage order, joined by
                   sep (defaults to options.hex_separator).

        Raises ContractViolation for a base other than 2, 10 or 16 and
        UnsupportedPathError for base 10.

        """
        check_base(base)
        if base == 2:
            chars = options.bit_chars
            return ''.join(chars[self.get_bit(i, reverse=False)] for i in range(self.TOTAL_BITS))
        if base == 16:
            if sep is None:
                sep = options.hex_separator
            return sep.join(format(self.get_byte(i, reverse=False), '02X') for i in range(self.TOTAL_BYTES))
        raise UnsupportedPathError("Decimal rendering of Float128 is not defined.")

    @property
    def bin(self) -> str:
        """The 128 bits as '0'/'1' characters in storage order, 1-bits drawn as '1'."""
        return self._getbin()

    @property
    def hex(self) -> str:
        """The 32 upper-case hex digits in storage order, without separators."""
        return self._gethex()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"
