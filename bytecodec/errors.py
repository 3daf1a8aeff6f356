class CodecError(Exception):
    """Base exception for codec errors

    :param position: Index of the offending character, byte or block start, if any.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position: int | None = position


class CodecArithmeticError(CodecError, ArithmeticError):
    """Raised on division by zero, word overflow, or a non-exact division"""
    pass


class PreconditionError(CodecError, ValueError):
    """Raised when a value falls outside the range an operation accepts"""
    pass


class BlockSizeError(CodecError):
    """Raised when a block is built from the wrong number of bytes or characters"""
    pass


class InvalidCharacterError(CodecError, ValueError):
    """Raised when a character is not part of the codec alphabet"""
    pass


class InvalidStringError(CodecError, ValueError):
    """Raised when a string to decode is not pure ASCII"""
    pass


class InvalidPaddingError(CodecError, ValueError):
    """Raised when the padding character appears in a disallowed block position"""
    pass


class MidStreamPaddingError(CodecError, ValueError):
    """Raised when a padded block is followed by another block"""
    pass


class TrailingBitsError(CodecError, ValueError):
    """Raised when bits masked by padding decode to a nonzero value"""
    pass


class BlockAlignmentError(CodecError, ValueError):
    """Raised when the input length is not a multiple of the block character count"""
    pass


class InvalidUtf8Error(CodecError, UnicodeError):
    """Raised when a byte sequence is not valid UTF-8"""
    pass


class PaddingInvariantError(CodecError, AssertionError):
    """Raised when zero-filled bits are found nonzero while encoding; indicates a bug, not bad input"""
    pass
