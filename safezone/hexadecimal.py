"""Fixed-width hexadecimal encoding of 128-bit unsigned integers."""

from __future__ import annotations

_BITS = 128
_MASK = (1 << _BITS) - 1
_DIGITS = {ch: int(ch, 16) for ch in "0123456789abcdefABCDEF"}
# One leading digit plus up to 32 more are read; anything after is ignored.
_MAX_DIGITS = 33


class HexParseError(ValueError):
    """Raised when text cannot be read as a hexadecimal number."""

    def __init__(self, character: str | None = None) -> None:
        self.character = character
        if character is None:
            message = "Empty string"
        else:
            message = f"'{character}' is not a hexadecimal base"
        super().__init__(message)


def to_hexadecimal(value: int) -> str:
    """Render a 128-bit unsigned integer as 32 upper-case hex digits."""
    if not 0 <= value <= _MASK:
        raise ValueError(f"{value} does not fit in an unsigned 128-bit integer")
    return f"{value:032X}"


def _digit(character: str) -> int:
    try:
        return _DIGITS[character]
    except KeyError:
        raise HexParseError(character) from None


def from_hexadecimal(text: str) -> int:
    """Parse hex digits (either case) into a 128-bit unsigned integer.

    Values wider than 128 bits keep only their low 128 bits, and
    characters past the 33rd are not examined.
    """
    if not text:
        raise HexParseError()
    result = 0
    for character in text[:_MAX_DIGITS]:
        result = ((result << 4) | _digit(character)) & _MASK
    return result