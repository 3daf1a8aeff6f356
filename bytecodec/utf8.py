from .errors import InvalidCharacterError, InvalidUtf8Error


def utf8_encode(text: str) -> bytes:
    """Return the UTF-8 bytes of text.

    Raises:
        InvalidCharacterError: If text holds a lone surrogate, which has no UTF-8 form.
    """
    if not isinstance(text, str):
        raise TypeError("utf8_encode expects a str")
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidCharacterError(f"cannot encode {text[e.start]!r} as UTF-8: {e.reason}", e.start) from e


def utf8_decode(data: bytes | bytearray | memoryview) -> str:
    """Decode strict UTF-8; overlong forms, truncated sequences and stray bytes are rejected."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("utf8_decode expects a bytes-like object")
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error(f"invalid UTF-8 at byte {e.start}: {e.reason}", e.start) from e
