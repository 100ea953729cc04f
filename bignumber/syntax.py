"""
Numeral syntax normalization.

syntax_check() turns free-form user input into a canonical numeral made of an
optional leading '-', digits valid for the base and, for base 10 only, at most
one '.' delimiter. Anything else is rejected by returning None.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional

from bignumber.exceptions import ContractViolation

SUPPORTED_BASES: FrozenSet[int] = frozenset((2, 10, 16))

SIGN_CHARS: FrozenSet[str] = frozenset('+-')
DELIMITER_CHARS: FrozenSet[str] = frozenset(',.')
CANONICAL_DELIMITER: str = '.'

_digit_values: Dict[str, int] = {c: int(c, 16) for c in '0123456789abcdef'}
_digit_values.update({c.upper(): v for c, v in _digit_values.items()})
DIGIT_VALUES: Mapping[str, int] = MappingProxyType(_digit_values)
del _digit_values


def check_base(base: int) -> int:
    """Return base unchanged, raise ContractViolation if it isn't 2, 10 or 16."""
    if not isinstance(base, int) or isinstance(base, bool) or base not in SUPPORTED_BASES:
        raise ContractViolation(f"Base must be one of {sorted(SUPPORTED_BASES)}, not {base!r}.")
    return base


def max_input_length(base: int, totalbits: int) -> Optional[int]:
    """Longest normalized numeral that fits in totalbits, or None if there's no length bound.

    Base 10 has no length bound: its digits don't map onto whole bits.
    """
    check_base(base)
    if base == 2:
        return totalbits
    if base == 16:
        return ((totalbits + 7) // 8) * 2
    return None


def _collapse_signs(text: str) -> tuple:
    """Split off the leading run of sign characters.

    Returns (sign, rest) where sign is '-' for an odd number of minus signs
    and '' otherwise. Plus signs contribute nothing.
    """
    i = 0
    negative = False
    while i < len(text) and text[i] in SIGN_CHARS:
        if text[i] == '-':
            negative = not negative
        i += 1
    return ('-' if negative else ''), text[i:]


def syntax_check(text: str, base: int) -> Optional[str]:
    """Return the canonical form of text for the given base, or None if it is invalid.

    text is expected to be trimmed already. Raises ContractViolation for an
    unsupported base.

    >>> syntax_check('+--12,', 10)
    '12.0'
    >>> syntax_check('1.0', 2) is None
    True

    """
    check_base(base)
    if not text:
        return None
    sign, rest = _collapse_signs(text)
    out = [sign]
    seen_delimiter = False
    seen_digit = False
    for ch in rest:
        try:
            value = DIGIT_VALUES[ch]
        except KeyError:
            # Not a digit: a delimiter, a misplaced sign or an unknown character.
            if ch in DELIMITER_CHARS and base == 10 and not seen_delimiter:
                seen_delimiter = True
                out.append(CANONICAL_DELIMITER)
                continue
            return None
        if value >= base:
            return None
        seen_digit = True
        out.append(ch)
    if not seen_digit:
        return None
    if out[-1] == CANONICAL_DELIMITER:
        out.append('0')
    return ''.join(out)
