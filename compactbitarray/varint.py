"""
Unsigned LEB128 variable-length integers.

Each byte carries 7 payload bits, least significant group first. The
high bit of a byte is set when more bytes follow.

The decoder follows the 64-bit convention used by the wire peers:
- n > 0: value decoded from the first n bytes
- n == 0: buffer ended before the varint did
- n < 0: value overflows 64 bits; -n bytes were examined
"""

MAX_VARINT_LEN64 = 10


def put_uvarint(value: int) -> bytes:
    """
    Encode a non-negative integer as an unsigned varint.

    Args:
        value: Integer to encode

    Returns:
        Encoded bytes

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"uvarint value {value} must be non-negative")

    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)

    return bytes(out)


def uvarint(data: bytes) -> tuple:
    """
    Decode an unsigned varint from the start of data.

    Args:
        data: Bytes beginning with a varint

    Returns:
        Tuple (value, n); see the module docstring for the meaning of n.
        value is 0 whenever n <= 0.
    """
    x = 0
    s = 0
    for i, b in enumerate(data):
        if i == MAX_VARINT_LEN64:
            # Too many continuation bytes
            return 0, -(i + 1)

        if b < 0x80:
            if i == MAX_VARINT_LEN64 - 1 and b > 1:
                return 0, -(i + 1)
            return x | (b << s), i + 1

        x |= (b & 0x7F) << s
        s += 7

    return 0, 0
