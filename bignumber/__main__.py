import argparse
import logging
import random
import sys
from typing import Optional, TextIO

from bignumber.float128 import Float128
from bignumber.options import options
from bignumber.utils.logging import get_logger

_DIGITS = {2: '01', 16: '0123456789ABCDEF'}
# Characters that make a numeral invalid in any base, mixed in to exercise rejection.
_NOISE = '+-.,G '


def print_low_bits(value: Float128, count: int, stream: Optional[TextIO] = None) -> None:
    """Print bits count-1 down to 0 in magnitude order, most significant on the left."""
    if stream is None:
        stream = sys.stdout
    stream.write(''.join('1' if value.get_bit(i) else '0' for i in range(count - 1, -1, -1)) + '\n')


def random_numeral(rng: random.Random, base: int) -> str:
    max_length = Float128.TOTAL_BITS if base == 2 else Float128.TOTAL_BYTES * 2
    length = rng.randint(1, max_length + 2)
    chars = [rng.choice(_DIGITS[base]) for _ in range(length)]
    if rng.random() < 0.2:
        chars[rng.randrange(length)] = rng.choice(_NOISE)
    return ''.join(chars)


def cli(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='bignumber', description='Float128 bit pattern demonstration')
    parser.add_argument('-n', '--count', type=int, default=50, help='Number of bits to walk and numerals to parse')
    parser.add_argument('-s', '--seed', type=int, default=None, help='Random seed for generated numerals')
    parser.add_argument('-b', '--base', type=int, choices=(2, 16), default=16, help='Base of generated numerals')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log every parse outcome')
    args = parser.parse_args(argv)

    options.log_level = logging.DEBUG if args.verbose else logging.INFO
    log = get_logger()

    count = max(0, min(args.count, Float128.TOTAL_BITS))
    log.info(f"Setting bits 0..{count - 1} in magnitude order")
    value = Float128()
    for i in range(count):
        value.set_bit(i, True)
        print_low_bits(value, count)

    rng = random.Random(args.seed)
    log.info(f"Parsing {args.count} random base {args.base} numerals")
    failures = 0
    for _ in range(args.count):
        text = random_numeral(rng, args.base)
        result = Float128.parse(text, args.base)
        if result.ok:
            print(f"{text!r} -> {result.value.to_string(args.base)}")
        else:
            failures += 1
            print(f"{text!r} -> {result.error.value} error: {result.message}")
    log.info(f"{args.count - failures} parsed, {failures} rejected")
    return 0


if __name__ == '__main__':
    sys.exit(cli())
