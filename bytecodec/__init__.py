"""bytecodec package

Public API: Base64, hex and UTF-8 codecs, the block and alphabet layers, numeric helpers, and error types.
All operations are pure functions over fully materialized bytes or strings.
"""

from .b64 import base64_encode, base64_decode
from .hexcodec import hex_encode, hex_decode
from .utf8 import utf8_encode, utf8_decode
from .blocks import Block, Base64Block, HexBlock, blocks_to_bytes, blocks_to_str
from .alphabet import (
    base64_encode_char,
    base64_decode_char,
    hex_encode_char,
    hex_decode_char,
)
from .utils import (
    ceil_div,
    exact_div,
    add_to_char,
    char_diff,
)
from .vectors import check_test_vector
from .errors import (
    CodecError,
    CodecArithmeticError,
    PreconditionError,
    BlockSizeError,
    InvalidCharacterError,
    InvalidStringError,
    InvalidPaddingError,
    MidStreamPaddingError,
    TrailingBitsError,
    BlockAlignmentError,
    InvalidUtf8Error,
    PaddingInvariantError,
)

__all__ = [
    # codecs
    "base64_encode",
    "base64_decode",
    "hex_encode",
    "hex_decode",
    "utf8_encode",
    "utf8_decode",
    # blocks
    "Block",
    "Base64Block",
    "HexBlock",
    "blocks_to_bytes",
    "blocks_to_str",
    # alphabet
    "base64_encode_char",
    "base64_decode_char",
    "hex_encode_char",
    "hex_decode_char",
    # helpers
    "ceil_div",
    "exact_div",
    "add_to_char",
    "char_diff",
    "check_test_vector",
    # errors
    "CodecError",
    "CodecArithmeticError",
    "PreconditionError",
    "BlockSizeError",
    "InvalidCharacterError",
    "InvalidStringError",
    "InvalidPaddingError",
    "MidStreamPaddingError",
    "TrailingBitsError",
    "BlockAlignmentError",
    "InvalidUtf8Error",
    "PaddingInvariantError",
]
