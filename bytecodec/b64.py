"""Base64 stream encoder and decoder (standard alphabet, padding required)."""
import logging

from .blocks import Base64Block, blocks_to_bytes, blocks_to_str
from .constants import BYTE_BITS, B64_BLOCK_BITS, B64_BLOCK_BYTES, B64_BLOCK_CHARS
from .errors import BlockAlignmentError, InvalidStringError, MidStreamPaddingError
from .utils import ceil_div, exact_div, first_non_ascii

logger = logging.getLogger(__name__)


def base64_encode(data: bytes) -> str:
    """Encode bytes as a padded Base64 string.

    The output is always 4 * ceil(len(data) / 3) characters; empty input gives "".
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("base64_encode expects a bytes-like object")
    data = bytes(data)

    # Each 24 bit block turns 3 bytes into 4 characters
    block_count = ceil_div(len(data) * BYTE_BITS, B64_BLOCK_BITS)
    blocks = [Base64Block.from_bytes(data[i:i + B64_BLOCK_BYTES]) for i in range(0, len(data), B64_BLOCK_BYTES)]
    logger.debug("encoding %d bytes as %d Base64 blocks (final pad count %d)",
                 len(data), block_count, blocks[-1].pad_count if blocks else 0)
    return blocks_to_str(blocks)


def base64_decode(text: str) -> bytes:
    """Decode a padded Base64 string.

    :raises InvalidStringError: The string is not pure ASCII.
    :raises BlockAlignmentError: The length is not a multiple of 4.
    :raises MidStreamPaddingError: A padded block is followed by another block.
    :raises InvalidPaddingError, InvalidCharacterError, TrailingBitsError: From block decoding.
    """
    if not isinstance(text, str):
        raise TypeError("base64_decode expects a str")

    position = first_non_ascii(text)
    if position is not None:
        raise InvalidStringError(f"Base64 input must be ASCII, found {text[position]!r}", position)

    remainder = len(text) % B64_BLOCK_CHARS
    if remainder:
        raise BlockAlignmentError(
            f"Base64 input length {len(text)} is not a multiple of {B64_BLOCK_CHARS}", len(text) - remainder
        )

    block_count = exact_div(len(text), B64_BLOCK_CHARS)
    logger.debug("decoding %d Base64 blocks", block_count)

    blocks: list[Base64Block] = []
    for offset in range(0, len(text), B64_BLOCK_CHARS):
        if blocks and blocks[-1].pad_count:
            raise MidStreamPaddingError("padding is only allowed in the final block", offset)
        blocks.append(Base64Block.from_str(text[offset:offset + B64_BLOCK_CHARS], offset))

    return blocks_to_bytes(blocks)
