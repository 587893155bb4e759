"""
Compact binary encoding of a bit array.

Wire format:
- Absent array: the four ASCII bytes 'null'
- Otherwise: uvarint(bit count) || packed bytes

Packed bytes follow the storage layout exactly (MSB-first within each
byte, zero padding in the low bits of the final byte).
"""

from compactbitarray.bitarray import new_compact_bit_array
from compactbitarray.errors import DecodeError
from compactbitarray.textcodec import NULL_TOKEN
from compactbitarray.varint import put_uvarint, uvarint

# Import for type hints only
if False:  # noqa: SIM108
    from compactbitarray.bitarray import CompactBitArray


def compact_marshal(ba: "CompactBitArray | None") -> bytes:
    """
    Encode a bit array in compact binary form.

    Args:
        ba: Bit array, or None

    Returns:
        b'null' for None, otherwise the length-prefixed packed bytes
    """
    if ba is None:
        return NULL_TOKEN

    return put_uvarint(ba.count()) + bytes(ba.elems)


def compact_unmarshal(data: bytes) -> "CompactBitArray | None":
    """
    Decode the output of compact_marshal.

    Args:
        data: Encoded bytes

    Returns:
        Decoded CompactBitArray, or None for the null token

    Raises:
        DecodeError: If the varint prefix is truncated or overlong, or
            the payload length does not match the encoded bit count
    """
    if len(data) < 1:
        raise DecodeError("compact bit array: invalid compact unmarshal size")

    if data == NULL_TOKEN:
        return None

    size, n = uvarint(data)
    if n <= 0 or n >= len(data):
        raise DecodeError(
            f"compact bit array: n={n} is out of range of len(bz)={len(data)}"
        )

    payload = data[n:]
    if len(payload) != (size + 7) // 8:
        raise DecodeError("compact bit array: invalid compact unmarshal size")

    ba = new_compact_bit_array(size)
    if ba is None:
        raise DecodeError(f"compact bit array: unsupported bit count {size}")

    ba.elems[:] = payload
    return ba
