"""Hexadecimal encoder and decoder: one byte per two characters, no padding."""
import logging

from .blocks import HexBlock, blocks_to_bytes, blocks_to_str
from .constants import HEX_BLOCK_BITS, HEX_BLOCK_CHARS, HEX_CHAR_BITS
from .errors import InvalidStringError
from .utils import exact_div, first_non_ascii

logger = logging.getLogger(__name__)


def hex_encode(data: bytes) -> str:
    """Encode bytes as lowercase hex."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("hex_encode expects a bytes-like object")
    return blocks_to_str(HexBlock.from_bytes(bytes((b,))) for b in bytes(data))


def hex_decode(text: str) -> bytes:
    """Decode hex digits of either case; the length must be even.

    :raises InvalidStringError: The string is not pure ASCII.
    :raises CodecArithmeticError: The length is odd.
    :raises InvalidCharacterError: A character is not a hex digit.
    """
    if not isinstance(text, str):
        raise TypeError("hex_decode expects a str")

    position = first_non_ascii(text)
    if position is not None:
        raise InvalidStringError(f"hex input must be ASCII, found {text[position]!r}", position)

    # Each 8 bit block turns 2 characters into 1 byte; the division must be exact
    byte_count = exact_div(len(text) * HEX_CHAR_BITS, HEX_BLOCK_BITS)
    logger.debug("decoding %d hex blocks", byte_count)

    return blocks_to_bytes(
        HexBlock.from_str(text[offset:offset + HEX_BLOCK_CHARS], offset)
        for offset in range(0, len(text), HEX_BLOCK_CHARS)
    )
