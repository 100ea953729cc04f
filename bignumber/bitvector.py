from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO, Tuple, Type, TypeVar, Union

import bitarray
import bitarray.util

TBitVector = TypeVar('TBitVector', bound='BitVector')

# Single-bit masks indexed by distance from the most significant bit.
BYTE_WITH_BIT_ONE_AT: Tuple[int, ...] = (128, 64, 32, 16, 8, 4, 2, 1)

MAX_CHARS: int = 250


class BitVector:
    """A fixed-length sequence of bits stored as packed bytes.

    The width is chosen at construction and never changes. Bits and bytes can
    be addressed in two ways over the same buffer:

    direct (reverse=False) -- byte 0 is the first byte of the buffer and bit 0
        is the most significant logical bit. This is storage order.
    reverse (reverse=True) -- byte 0 is the last byte of the buffer and bit 0
        is its least significant bit. This is magnitude order, bit i has
        weight 2**i when the buffer is read as a big-endian integer.

    When the width isn't a whole number of bytes the unused padding bits are
    the most significant bits of the first byte, so the logical bits are the
    low totalbits bits of the buffer and direct bit i is reverse bit
    totalbits - 1 - i.

    Indices are never out of range: bit indices wrap modulo the bit width and
    byte indices modulo the byte width.

    Methods:

    get_bit() / set_bit() -- Read or write a single bit.
    turn_on_bit() / turn_off_bit() -- Set a single bit to 1 or 0.
    get_byte() / set_byte() -- Read or write a whole byte.
    count() -- Count the number of bits set to 1 or 0.
    copy() -- Return a copy of the vector.
    tobytes() -- Return the buffer as bytes, in storage order.
    pp() -- Pretty print the raw bit pattern.

    Properties:

    storage -- direct-order view of the bits.
    magnitude -- reverse-order view of the bits.
    totalbits -- width in bits. Read only.
    totalbytes -- width in bytes. Read only.

    """
    __slots__ = ('_bitstore', '_totalbits', '_totalbytes')

    def __init__(self, totalbits: int = 0) -> None:
        if totalbits < 0:
            raise ValueError(f"Cannot create a BitVector with a negative width ({totalbits}).")
        self._totalbits = int(totalbits)
        self._totalbytes = (self._totalbits + 7) // 8
        self._bitstore = bitarray.bitarray(self._totalbytes * 8, endian='big')
        self._bitstore.setall(0)

    @classmethod
    def all_zero(cls: Type[TBitVector], totalbits: int) -> TBitVector:
        """Create an instance with every bit set to 0."""
        result = cls(totalbits)
        result._setall(0)
        return result

    @classmethod
    def all_one(cls: Type[TBitVector], totalbits: int) -> TBitVector:
        """Create an instance with every bit set to 1."""
        result = cls(totalbits)
        result._setall(1)
        return result

    @classmethod
    def frombytes(cls: Type[TBitVector], data: Union[bytes, bytearray], totalbits: Optional[int] = None) -> TBitVector:
        """Create an instance whose buffer is a copy of data.

        totalbits -- the logical width. Defaults to len(data) * 8 and must need
                     exactly len(data) bytes.

        """
        if totalbits is None:
            totalbits = len(data) * 8
        result = cls(totalbits)
        if len(data) != result._totalbytes:
            raise ValueError(f"{len(data)} bytes cannot hold exactly {totalbits} bits.")
        result._setbytes(bytes(data))
        return result

    @property
    def totalbits(self) -> int:
        return self._totalbits

    @property
    def totalbytes(self) -> int:
        return self._totalbytes

    @property
    def storage(self) -> BitView:
        """Direct-order view: bit 0 is the most significant logical bit."""
        return BitView(self, reverse=False)

    @property
    def magnitude(self) -> BitView:
        """Reverse-order view: bit 0 is the least significant bit of the last byte."""
        return BitView(self, reverse=True)

    def _setall(self, value: int) -> None:
        self._bitstore.setall(value)

    def _setbytes(self, data: bytes) -> None:
        self._bitstore = bitarray.bitarray(endian='big')
        self._bitstore.frombytes(data)

    def _byte_index(self, i: int, reverse: bool) -> int:
        i %= self._totalbytes
        return self._totalbytes - 1 - i if reverse else i

    @property
    def _pad(self) -> int:
        return self._totalbytes * 8 - self._totalbits

    def _locate(self, i: int, reverse: bool) -> Tuple[int, int]:
        """Return (storage-order byte index, single-bit mask) of bit i."""
        i %= self._totalbits
        position = self._totalbytes * 8 - 1 - i if reverse else self._pad + i
        return position // 8, BYTE_WITH_BIT_ONE_AT[position % 8]

    def get_byte(self, i: int, reverse: bool = True) -> int:
        """Return the byte at index i (wrapped modulo the byte width)."""
        if not self._totalbytes:
            return 0
        start = self._byte_index(i, reverse) * 8
        return bitarray.util.ba2int(self._bitstore[start:start + 8])

    def set_byte(self, i: int, value: int, reverse: bool = True) -> None:
        """Overwrite the byte at index i (wrapped modulo the byte width).

        Only the low 8 bits of value are stored.

        """
        if not self._totalbytes:
            return
        start = self._byte_index(i, reverse) * 8
        self._bitstore[start:start + 8] = bitarray.util.int2ba(value & 0xff, length=8, endian='big')

    def get_bit(self, i: int, reverse: bool = True) -> bool:
        """Return True if bit i (wrapped modulo the bit width) is 1."""
        if not self._totalbits:
            return False
        byte_index, mask = self._locate(i, reverse)
        return bool(self.get_byte(byte_index, reverse=False) & mask)

    def set_bit(self, i: int, state: bool, reverse: bool = True) -> None:
        """Set bit i (wrapped modulo the bit width) to 1 if state is truthy, otherwise 0."""
        if state:
            self.turn_on_bit(i, reverse)
        else:
            self.turn_off_bit(i, reverse)

    def turn_on_bit(self, i: int, reverse: bool = True) -> None:
        if not self._totalbits:
            return
        byte_index, mask = self._locate(i, reverse)
        self.set_byte(byte_index, self.get_byte(byte_index, reverse=False) | mask, reverse=False)

    def turn_off_bit(self, i: int, reverse: bool = True) -> None:
        if not self._totalbits:
            return
        byte_index, mask = self._locate(i, reverse)
        self.set_byte(byte_index, self.get_byte(byte_index, reverse=False) & ~mask, reverse=False)

    def count(self, value: object) -> int:
        """Return count of the logical bits equal to bool(value).

        >>> BitVector.all_one(12).count(1)
        12

        """
        ones = self._bitstore.count(1, self._pad, len(self._bitstore))
        return ones if value else self._totalbits - ones

    def tobytes(self) -> bytes:
        """Return the buffer as bytes, in storage order."""
        return self._bitstore.tobytes()

    def copy(self: TBitVector) -> TBitVector:
        """Return a copy with its own buffer."""
        new_vector = object.__new__(self.__class__)
        new_vector._totalbits = self._totalbits
        new_vector._totalbytes = self._totalbytes
        new_vector._bitstore = self._bitstore.copy()
        return new_vector

    def __copy__(self: TBitVector) -> TBitVector:
        return self.copy()

    def __len__(self) -> int:
        """Return the width in bits."""
        return self._totalbits

    def __iter__(self) -> Iterator[bool]:
        """Yield the logical bits in storage order."""
        return (bool(b) for b in self._bitstore[self._pad:])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._totalbits == other._totalbits and self._bitstore[self._pad:] == other._bitstore[other._pad:]

    __hash__ = None

    def _getbin(self) -> str:
        return self._bitstore[self._pad:].to01()

    def _gethex(self) -> str:
        return self.tobytes().hex().upper()

    def __str__(self) -> str:
        """Return approximate string representation for printing.

        Byte-multiple widths are shown in hexadecimal, others in binary. Very
        long vectors are truncated with '...'.

        """
        if not self._totalbits:
            return ''
        if self._totalbits % 8:
            s = self._getbin()
            return '0b' + (s[:MAX_CHARS] + '...' if len(s) > MAX_CHARS else s)
        s = self._gethex()
        return '0x' + (s[:MAX_CHARS] + '...' if len(s) > MAX_CHARS else s)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}', totalbits={self._totalbits})"

    def pp(self, fmt: str = 'bin', width: int = 120, sep: str = ' ', show_offset: bool = True,
           stream: Optional[TextIO] = None) -> None:
        """Pretty print the raw bit pattern, one group per byte.

        fmt -- 'bin' or 'hex'.
        width -- Max width of printed lines. A single group is always printed
                 per line even if it exceeds the max width.
        sep -- A separator string to insert between groups.
        show_offset -- If True shows the storage-order logical bit offset of the
                       first group on each line.
        stream -- A TextIO object with a write() method. Defaults to sys.stdout.

        >>> BitVector.all_one(16).pp('hex', show_offset=False)
        FF FF

        """
        if fmt not in ('bin', 'hex'):
            raise ValueError(f"pp format must be 'bin' or 'hex', not {fmt!r}.")
        if stream is None:
            stream = sys.stdout
        data = self.tobytes()
        if fmt == 'bin':
            groups = [format(byte, '08b') for byte in data]
            if self._pad and groups:
                groups[0] = groups[0][self._pad:]
        else:
            groups = [format(byte, '02X') for byte in data]
        offset_width = len(str(self._totalbits)) if show_offset else 0
        group_width = (8 if fmt == 'bin' else 2) + len(sep)
        available = width - (offset_width + 2 if show_offset else 0)
        per_line = max(1, (available + len(sep)) // group_width)
        for start in range(0, len(groups), per_line):
            line = sep.join(groups[start:start + per_line])
            if show_offset:
                line = f"{max(0, start * 8 - self._pad):>{offset_width}}: {line}"
            stream.write(line + '\n')


class BitView:
    """One addressing convention over a BitVector's buffer.

    Holds no bits of its own, reads and writes go straight to the owner.
    """
    __slots__ = ('_owner', '_reverse')

    def __init__(self, owner: BitVector, reverse: bool) -> None:
        self._owner = owner
        self._reverse = reverse

    def __getitem__(self, i: int) -> bool:
        return self._owner.get_bit(i, self._reverse)

    def __setitem__(self, i: int, state: bool) -> None:
        self._owner.set_bit(i, state, self._reverse)

    def __len__(self) -> int:
        return len(self._owner)

    def byte(self, i: int) -> int:
        return self._owner.get_byte(i, self._reverse)

    def set_byte(self, i: int, value: int) -> None:
        self._owner.set_byte(i, value, self._reverse)

    def __repr__(self) -> str:
        kind = 'magnitude' if self._reverse else 'storage'
        return f"<{kind} view of {self._owner!r}>"
