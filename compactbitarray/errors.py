"""Exceptions raised by the bit array codecs."""


class DecodeError(ValueError):
    """Raised when textual or compact input does not describe a bit array."""
