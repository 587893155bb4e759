"""
Human-readable and JSON forms of a bit array.

Text form uses one character per bit in index order:
- 'x' = bit set
- '_' = bit clear

JSON form is either the null token or the text form as a JSON string.
"""

import re

from compactbitarray.bitarray import new_compact_bit_array
from compactbitarray.errors import DecodeError

NULL_TOKEN = b"null"

_JSON_PATTERN = rb'\A"([_x]*)"\Z'
_JSON_RE = re.compile(_JSON_PATTERN)

# Import for type hints only
if False:  # noqa: SIM108
    from compactbitarray.bitarray import CompactBitArray


def to_string(ba: "CompactBitArray | None") -> str:
    """
    Render each bit as 'x' (set) or '_' (clear).

    Args:
        ba: Bit array, or None

    Returns:
        String of exactly ba.count() characters; empty for None
    """
    if ba is None:
        return ""

    return "".join("x" if ba.get_index(i) else "_" for i in range(ba.count()))


def string_indented(ba: "CompactBitArray | None", indent: str) -> str:
    """
    Render a bit array for diagnostics as BA{<count>:<bits>}.

    Bits are grouped in tens separated by indent (doubled every fifty)
    and broken into lines of one hundred joined by indent.

    Args:
        ba: Bit array, or None
        indent: Separator inserted between groups and lines

    Returns:
        Diagnostic string, or 'nil-BitArray' for None
    """
    if ba is None:
        return "nil-BitArray"

    lines = []
    bits = ""
    size = ba.count()
    for i in range(size):
        bits += "x" if ba.get_index(i) else "_"
        if i % 100 == 99:
            lines.append(bits)
            bits = ""
        elif i % 50 == 49:
            bits += indent + indent
        elif i % 10 == 9:
            bits += indent
    if bits:
        lines.append(bits)

    return f"BA{{{size}:{indent.join(lines)}}}"


def marshal_json(ba: "CompactBitArray | None") -> bytes:
    """
    Encode a bit array as a JSON value.

    Args:
        ba: Bit array, or None

    Returns:
        b'null' for None, otherwise the quoted text form
    """
    if ba is None:
        return NULL_TOKEN

    return b'"' + to_string(ba).encode("ascii") + b'"'


def unmarshal_json(data: "bytes | str") -> "CompactBitArray | None":
    """
    Decode a JSON value produced by marshal_json.

    Args:
        data: JSON text, as bytes or str

    Returns:
        Decoded CompactBitArray, or None for null and the empty string

    Raises:
        DecodeError: If data is neither null nor a string of 'x'/'_'
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    data = data.strip()

    if data == NULL_TOKEN:
        return None

    match = _JSON_RE.match(data)
    if match is None:
        raise DecodeError(
            "bit array in JSON should be a string of format "
            f"{_JSON_PATTERN.decode()!r} but got {data!r}"
        )

    bits = match.group(1)
    ba = new_compact_bit_array(len(bits))
    # Zero-length strings have no concrete array
    if ba is None:
        return None

    for i, ch in enumerate(bits):
        if ch == ord("x"):
            ba.set_index(i, True)

    return ba
