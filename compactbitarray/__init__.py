"""
Compact bit array

Fixed-capacity bit array packed eight bits per byte, with a
human-readable JSON form and a length-prefixed compact binary form.
An absent array is represented by None in every operation.
"""

__version__ = "1.0.0"

from compactbitarray.bitarray import CompactBitArray, equal, new_compact_bit_array
from compactbitarray.compact import compact_marshal, compact_unmarshal
from compactbitarray.errors import DecodeError
from compactbitarray.textcodec import marshal_json, string_indented, to_string, unmarshal_json

__all__ = [
    "CompactBitArray",
    "DecodeError",
    "compact_marshal",
    "compact_unmarshal",
    "equal",
    "marshal_json",
    "new_compact_bit_array",
    "string_indented",
    "to_string",
    "unmarshal_json",
    "__version__",
]
