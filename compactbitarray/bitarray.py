"""
Fixed-capacity bit array packed eight bits per byte.

This module provides the CompactBitArray storage, its bit accessors and
the population counter. Absence of an array is represented by None; a
concrete array always holds at least one bit.

Bit Numbering Convention:
- Bit i lives in byte i // 8
- Within a byte, bit 0 = MSB and bit 7 = LSB
- Unused low bits of the final byte are always zero
"""

# Largest byte count a bit array may occupy. Requests needing more
# storage are rejected rather than allocated.
MAX_ELEMS = 2**31 - 1


def _popcount(byte: int) -> int:
    return bin(byte).count("1")


class CompactBitArray:
    """Fixed-length bit array storing the valid bit count of its last byte."""

    def __init__(self, extra_bits_stored: int, elems: bytearray) -> None:
        """
        Wrap already-sized storage.

        Use new_compact_bit_array() to build an array from a bit count;
        this initializer trusts its arguments.

        Args:
            extra_bits_stored: Valid bits in the final byte (1-8)
            elems: Packed storage, at least one byte
        """
        self.extra_bits_stored = extra_bits_stored
        self.elems = elems

    def count(self) -> int:
        """
        Number of bits in the array.

        Returns:
            Total bit count
        """
        return (len(self.elems) - 1) * 8 + self.extra_bits_stored

    def size(self) -> int:
        """Number of bytes used for storage."""
        return len(self.elems)

    def __len__(self) -> int:
        return self.count()

    def get_index(self, i: int) -> bool:
        """
        Get the bit at position i.

        Args:
            i: Bit position (0 = MSB of the first byte)

        Returns:
            Bit value, or False when i is outside [0, count())
        """
        if i < 0 or i >= self.count():
            return False

        return (self.elems[i >> 3] & (1 << (7 - (i & 7)))) > 0

    def set_index(self, i: int, value: bool) -> bool:
        """
        Set the bit at position i.

        Args:
            i: Bit position (0 = MSB of the first byte)
            value: New bit value

        Returns:
            True if the bit was written, False when i is out of range
        """
        if i < 0 or i >= self.count():
            return False

        if value:
            self.elems[i >> 3] |= 1 << (7 - (i & 7))
        else:
            self.elems[i >> 3] &= ~(1 << (7 - (i & 7))) & 0xFF

        return True

    def num_true_bits_before(self, index: int) -> int:
        """
        Count set bits in positions [0, index).

        Index is clamped to the array length, so any value past the end
        counts the whole array.

        Args:
            index: Exclusive upper bound

        Returns:
            Number of bits set to True before index
        """
        if index <= 0:
            return 0
        index = min(index, self.count())

        full_bytes = index // 8
        ones = 0
        for elem in range(full_bytes):
            ones += _popcount(self.elems[elem])

        # High-order bits of the boundary byte
        remainder = index % 8
        if remainder:
            ones += _popcount(self.elems[full_bytes] >> (8 - remainder))

        return ones

    def copy(self) -> "CompactBitArray":
        """
        Create an independent copy of this bit array.

        Returns:
            New CompactBitArray with duplicated storage
        """
        return CompactBitArray(self.extra_bits_stored, bytearray(self.elems))

    def __eq__(self, other: object) -> bool:
        if other is not None and not isinstance(other, CompactBitArray):
            return NotImplemented
        return equal(self, other)

    __hash__ = None  # mutable

    def __str__(self) -> str:
        from compactbitarray.textcodec import to_string

        return to_string(self)

    def __repr__(self) -> str:
        from compactbitarray.textcodec import string_indented

        return string_indented(self, "")


def new_compact_bit_array(bits: int) -> "CompactBitArray | None":
    """
    Create a zeroed bit array holding the given number of bits.

    Args:
        bits: Requested bit count, any integer

    Returns:
        New CompactBitArray, or None if bits <= 0 or the storage would
        exceed MAX_ELEMS bytes
    """
    if bits <= 0:
        return None

    num_elems = (bits + 7) // 8
    if num_elems > MAX_ELEMS:
        return None

    return CompactBitArray(bits - (num_elems - 1) * 8, bytearray(num_elems))


def equal(a: "CompactBitArray | None", b: "CompactBitArray | None") -> bool:
    """
    Compare two bit arrays, either of which may be absent.

    Args:
        a: First bit array or None
        b: Second bit array or None

    Returns:
        True if both are None, or both hold the same bits
    """
    if a is None or b is None:
        return a is None and b is None

    return a.extra_bits_stored == b.extra_bits_stored and a.elems == b.elems
