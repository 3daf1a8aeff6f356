"""Mappings between small integers and codec symbols.

Base64 uses ``A-Z a-z 0-9 + /`` for the values 0..63. Hex uses ``0-9 a-f`` for
0..15 and accepts ``A-F`` when decoding. The Base64 padding character is not
part of the alphabet; block decoding handles it.
"""
from .constants import (
    B64_MAX,
    B64_UPPER,
    B64_LOWER,
    B64_DIGITS,
    B64_PLUS_VALUE,
    B64_SLASH_VALUE,
    HEX_MAX,
)
from .errors import InvalidCharacterError, PreconditionError
from .utils import add_to_char, char_diff

_B64_RANGES: tuple[tuple[int, str, str], ...] = (B64_UPPER, B64_LOWER, B64_DIGITS)


def base64_encode_char(value: int) -> str:
    if not isinstance(value, int) or not (0 <= value <= B64_MAX):
        raise PreconditionError(f"Base64 value must be in range 0..{B64_MAX}, got {value}")

    if value == B64_PLUS_VALUE:
        return "+"
    if value == B64_SLASH_VALUE:
        return "/"
    for first, low, high in _B64_RANGES:
        if first <= value <= first + char_diff(high, low):
            return add_to_char(low, value - first)
    # 0..63 is fully covered above
    raise PreconditionError(f"no Base64 symbol for {value}")


def base64_decode_char(c: str, position: int | None = None) -> int:
    """Return the 6-bit value of a Base64 symbol.

    The padding character is rejected here like any other non-alphabet character.

    :param position: Reported on the error if the character is rejected.
    """
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError("expected a single character")
    if c == "+":
        return B64_PLUS_VALUE
    if c == "/":
        return B64_SLASH_VALUE
    for first, low, high in _B64_RANGES:
        if low <= c <= high:
            return first + char_diff(c, low)
    raise InvalidCharacterError(f"invalid Base64 character {c!r}", position)


def hex_encode_char(value: int) -> str:
    if not isinstance(value, int) or not (0 <= value <= HEX_MAX):
        raise PreconditionError(f"hex value must be in range 0..{HEX_MAX}, got {value}")
    if value < 10:
        return add_to_char("0", value)
    return add_to_char("a", value - 10)


def hex_decode_char(c: str, position: int | None = None) -> int:
    """Return the 4-bit value of a hex digit, either case."""
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError("expected a single character")
    if "0" <= c <= "9":
        return char_diff(c, "0")
    if "a" <= c <= "f":
        return char_diff(c, "a") + 10
    if "A" <= c <= "F":
        return char_diff(c, "A") + 10
    raise InvalidCharacterError(f"invalid hex character {c!r}", position)
