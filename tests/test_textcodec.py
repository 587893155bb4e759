"""Tests for the text and JSON forms."""

import json

import pytest

from compactbitarray.bitarray import new_compact_bit_array
from compactbitarray.errors import DecodeError
from compactbitarray.textcodec import (
    marshal_json,
    string_indented,
    to_string,
    unmarshal_json,
)


def build(bits: int, *indices: int):
    """Create a bit array with the given indices set."""
    ba = new_compact_bit_array(bits)
    for i in indices:
        ba.set_index(i, True)
    return ba


class TestToString:
    """Test the plain text form."""

    def test_one_char_per_bit(self) -> None:
        """Test length matches the bit count for many sizes."""
        for bits in range(1, 40):
            ba = new_compact_bit_array(bits)
            assert to_string(ba) == "_" * bits
            assert str(ba) == "_" * bits

    def test_set_bits(self) -> None:
        """Test set bits render as 'x'."""
        assert to_string(build(1, 0)) == "x"
        assert to_string(build(5, 0, 1)) == "xx___"
        assert to_string(build(9, 0, 1, 8)) == "xx______x"

    def test_absent(self) -> None:
        """Test None renders as an empty string."""
        assert to_string(None) == ""


class TestStringIndented:
    """Test the diagnostic form."""

    def test_repr(self) -> None:
        """Test repr wraps the bits with the count."""
        assert repr(build(5, 0, 1)) == "BA{5:xx___}"

    def test_absent(self) -> None:
        """Test None has a sentinel form."""
        assert string_indented(None, "  ") == "nil-BitArray"

    def test_groups_of_ten(self) -> None:
        """Test indent separates groups of ten bits."""
        ba = build(25, *range(10), *range(20, 25))
        assert string_indented(ba, " ") == "BA{25:xxxxxxxxxx __________ xxxxx}"

    def test_lines_of_hundred(self) -> None:
        """Test a new line starts after one hundred bits."""
        group = "_" * 10
        line = "|".join([group] * 5) + "||" + "|".join([group] * 5)
        ba = new_compact_bit_array(105)
        assert string_indented(ba, "|") == "BA{105:" + line + "|_____}"


class TestMarshalJSON:
    """Test JSON encoding and decoding."""

    @pytest.mark.parametrize(
        "ba, expected",
        [
            (None, b"null"),
            (new_compact_bit_array(0), b"null"),
            (build(1), b'"_"'),
            (build(1, 0), b'"x"'),
            (build(5, 0, 1), b'"xx___"'),
            (build(9, 0, 1, 8), b'"xx______x"'),
            (build(16, 0, 1, 15), b'"xx_____________x"'),
        ],
    )
    def test_marshal_unmarshal(self, ba, expected: bytes) -> None:
        """Test known encodings and their round trip."""
        encoded = marshal_json(ba)
        assert encoded == expected

        decoded = unmarshal_json(encoded)
        if ba is None:
            assert decoded is None
        else:
            assert decoded is not None
            assert decoded.elems == ba.elems
            assert decoded.extra_bits_stored == ba.extra_bits_stored
            assert str(decoded) == str(ba)

    def test_output_is_valid_json(self) -> None:
        """Test the encoding parses as a JSON value."""
        assert json.loads(marshal_json(build(5, 0, 1))) == "xx___"
        assert json.loads(marshal_json(None)) is None

    def test_unmarshal_str(self) -> None:
        """Test str input is accepted."""
        ba = unmarshal_json('"_x_"')
        assert str(ba) == "_x_"
        assert unmarshal_json("null") is None

    def test_unmarshal_surrounding_whitespace(self) -> None:
        """Test whitespace around the JSON value is ignored."""
        assert str(unmarshal_json(b' "x_" \n')) == "x_"

    def test_unmarshal_empty_string(self) -> None:
        """Test a zero-length bit string decodes to None."""
        assert unmarshal_json(b'""') is None

    @pytest.mark.parametrize(
        "data",
        [b'"xy"', b"xx", b'"x', b'x"', b"nul", b'"X"', b'"x_"x', b"", b"0", b"[]"],
    )
    def test_unmarshal_rejects(self, data: bytes) -> None:
        """Test malformed input raises DecodeError."""
        with pytest.raises(DecodeError) as excinfo:
            unmarshal_json(data)
        assert "should be a string of format" in str(excinfo.value)

    def test_decode_error_is_value_error(self) -> None:
        """Test DecodeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            unmarshal_json(b'"?"')
