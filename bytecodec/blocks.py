from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from .alphabet import base64_encode_char, base64_decode_char, hex_encode_char, hex_decode_char
from .constants import (
    B64_BLOCK_BYTES,
    B64_BLOCK_CHARS,
    MAX_B64_PAD_CHARS,
    B64_PAD_CHAR,
    HEX_BLOCK_BYTES,
    HEX_BLOCK_CHARS,
)
from .errors import (
    BlockSizeError,
    InvalidPaddingError,
    PaddingInvariantError,
    PreconditionError,
    TrailingBitsError,
)


class Block:
    """
    A fixed-size unit of conversion between bytes and characters.

    Subclasses set BYTES and CHARS: one block of BYTES bytes encodes to exactly CHARS
    characters. A short final chunk of input is zero-filled up to BYTES bytes and the
    number of synthetic bytes is kept as pad_count, so only the meaningful bytes come
    back out of bytes(block).

    Attributes:
        data (bytes): Exactly BYTES bytes, zero-fill included.
        pad_count (int): Number of trailing zero-fill bytes in data.
    """
    BYTES: int = 0
    CHARS: int = 0
    MAX_PAD: int = 0

    def __init__(self, data: bytes, pad_count: int = 0) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be a bytes-like object")
        data = bytes(data)
        if len(data) != self.BYTES:
            raise BlockSizeError(f"{type(self).__name__} holds exactly {self.BYTES} bytes, got {len(data)}")
        if not isinstance(pad_count, int) or not (0 <= pad_count <= self.MAX_PAD):
            raise PreconditionError(f"pad_count must be in range 0..{self.MAX_PAD}, got {pad_count}")
        self.data: bytes = data
        self.pad_count: int = pad_count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r}, pad_count={self.pad_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return type(self) is type(other) and self.data == other.data and self.pad_count == other.pad_count

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.data, self.pad_count))

    def __len__(self) -> int:
        return self.BYTES - self.pad_count

    def __bytes__(self) -> bytes:
        return self.data[:len(self)]

    to_bytes = __bytes__

    def __str__(self) -> str:
        return self.encode()

    to_str = __str__

    def encode(self) -> str:
        raise NotImplementedError

    @classmethod
    def from_bytes(cls, chunk: bytes) -> Self:
        """Create a block from one chunk of input, zero-filling a short final chunk."""
        if not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise TypeError("chunk must be a bytes-like object")
        chunk = bytes(chunk)
        pad_count = cls.BYTES - len(chunk)
        if not chunk or not (0 <= pad_count <= cls.MAX_PAD):
            raise BlockSizeError(
                f"{cls.__name__} chunk must be {cls.BYTES - cls.MAX_PAD}..{cls.BYTES} bytes, got {len(chunk)}"
            )
        return cls(chunk + b"\x00" * pad_count, pad_count)

    @classmethod
    def from_str(cls, text: str, offset: int = 0) -> Self:
        raise NotImplementedError

    @classmethod
    def _check_text(cls, text: str, offset: int) -> None:
        if not isinstance(text, str):
            raise TypeError("text must be a str")
        if len(text) != cls.CHARS:
            raise BlockSizeError(f"{cls.__name__} decodes exactly {cls.CHARS} characters, got {len(text)}", offset)


class Base64Block(Block):
    BYTES = B64_BLOCK_BYTES
    CHARS = B64_BLOCK_CHARS
    MAX_PAD = MAX_B64_PAD_CHARS

    def encode(self) -> str:
        b0, b1, b2 = self.data

        cb0 = (b0 & 0b11111100) >> 2
        cb1 = (b0 & 0b00000011) << 4 | (b1 & 0b11110000) >> 4
        cb2 = (b1 & 0b00001111) << 2 | (b2 & 0b11000000) >> 6
        cb3 = b2 & 0b00111111

        chars = [base64_encode_char(cb0), base64_encode_char(cb1)]
        if self.pad_count == 2:
            if cb2 != 0:
                raise PaddingInvariantError(f"zero-filled bits of {self!r} are not zero")
            chars.append(B64_PAD_CHAR)
        else:
            chars.append(base64_encode_char(cb2))
        if self.pad_count >= 1:
            if cb3 != 0:
                raise PaddingInvariantError(f"zero-filled bits of {self!r} are not zero")
            chars.append(B64_PAD_CHAR)
        else:
            chars.append(base64_encode_char(cb3))

        return "".join(chars)

    @staticmethod
    def padding_count(text: str, offset: int = 0) -> int:
        """Classify where the padding sits in a 4-character block.

        The checks run in order and the first match wins:
        padding in either of the first two positions is invalid, ``xx==`` is two
        pad characters, ``xx=x`` is invalid, ``xxx=`` is one, and anything else none.

        :param offset: Position of the block within the whole string, used for errors.
        """
        for i in (0, 1):
            if text[i] == B64_PAD_CHAR:
                raise InvalidPaddingError(f"padding character at block position {i}", offset + i)
        if text[2] == B64_PAD_CHAR:
            if text[3] == B64_PAD_CHAR:
                return 2
            raise InvalidPaddingError("padding character followed by data", offset + 2)
        if text[3] == B64_PAD_CHAR:
            return 1
        return 0

    @classmethod
    def from_str(cls, text: str, offset: int = 0) -> Base64Block:
        """Decode a 4-character Base64 block.

        :param text: Exactly four characters.
        :param offset: Position of the block within the whole string; error positions are absolute.
        :raises InvalidPaddingError: Padding in a disallowed position.
        :raises InvalidCharacterError: A character outside the Base64 alphabet.
        :raises TrailingBitsError: Bits declared unused by the padding are not zero.
        """
        cls._check_text(text, offset)
        # Padding is validated before any character value is looked at
        pad_count = cls.padding_count(text, offset)

        first_pad = cls.CHARS - pad_count
        c0, c1, c2, c3 = (
            0 if i >= first_pad else base64_decode_char(c, offset + i)
            for i, c in enumerate(text)
        )

        b0 = (c0 << 2 | c1 >> 4) & 0xFF
        b1 = (c1 << 4 | c2 >> 2) & 0xFF
        b2 = (c2 << 6 | c3) & 0xFF

        if pad_count == 2 and b1 != 0:
            raise TrailingBitsError(f"non-canonical Base64 block {text!r}: unused bits are set", offset + 1)
        if pad_count >= 1 and b2 != 0:
            raise TrailingBitsError(f"non-canonical Base64 block {text!r}: unused bits are set", offset + 2)

        return cls(bytes((b0, b1, b2)), pad_count)


class HexBlock(Block):
    BYTES = HEX_BLOCK_BYTES
    CHARS = HEX_BLOCK_CHARS

    def encode(self) -> str:
        (b0,) = self.data
        return hex_encode_char((b0 & 0b11110000) >> 4) + hex_encode_char(b0 & 0b00001111)

    @classmethod
    def from_str(cls, text: str, offset: int = 0) -> HexBlock:
        """Decode two hex digits, either case, into one byte."""
        cls._check_text(text, offset)
        high = hex_decode_char(text[0], offset)
        low = hex_decode_char(text[1], offset + 1)
        return cls(bytes((high << 4 | low,)))


def blocks_to_bytes(blocks: Iterable[Block]) -> bytes:
    """Concatenate the meaningful bytes of each Block in the iterable.

    Raises:
        TypeError: If any element is not a Block (index included in message).
    """
    parts: list[bytes] = []
    for i, block in enumerate(blocks):
        if not isinstance(block, Block):
            raise TypeError(f"blocks[{i}] expected Block, got {type(block).__name__}")
        parts.append(block.to_bytes())
    return b"".join(parts)


def blocks_to_str(blocks: Iterable[Block]) -> str:
    """Concatenate the encoded characters of each Block in the iterable."""
    parts: list[str] = []
    for i, block in enumerate(blocks):
        if not isinstance(block, Block):
            raise TypeError(f"blocks[{i}] expected Block, got {type(block).__name__}")
        parts.append(block.to_str())
    return "".join(parts)
