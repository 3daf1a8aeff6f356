from .constants import ASCII_MAX, WORD_MAX
from .errors import CodecArithmeticError, PreconditionError


def _check_operands(n: int, d: int) -> None:
    if not isinstance(n, int) or not isinstance(d, int):
        raise TypeError("operands must be integers")
    if n < 0 or d < 0:
        raise PreconditionError(f"operands must be non-negative, got {n} and {d}")
    if d == 0:
        raise CodecArithmeticError("The divisor must not be zero")


def ceil_div(n: int, d: int) -> int:
    """Return n / d rounded up.

    Raises:
        CodecArithmeticError: If d is zero or n + d would exceed the machine word.
    """
    _check_operands(n, d)
    if n > WORD_MAX - d:
        raise CodecArithmeticError(
            f"The sum of the numerator {n} and divisor {d} must be less than or equal to {WORD_MAX}"
        )
    return (n + d - 1) // d


def exact_div(n: int, d: int) -> int:
    """Return n / d, requiring that d divides n evenly.

    Raises:
        CodecArithmeticError: If d is zero or the division leaves a remainder.
    """
    _check_operands(n, d)
    quotient, remainder = divmod(n, d)
    if remainder:
        raise CodecArithmeticError(f"Expected exact division, but {n} / {d} has remainder {remainder}")
    return quotient


def _require_ascii_char(c: str, name: str) -> int:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"{name} must be a single character")
    code = ord(c)
    if code > ASCII_MAX:
        raise PreconditionError(f"{name} {c!r} is not ASCII")
    return code


def add_to_char(c: str, n: int) -> str:
    """Offset an ASCII character by n; the result must still be ASCII."""
    code = _require_ascii_char(c, "c")
    if not isinstance(n, int) or not (0 <= n <= ASCII_MAX):
        raise PreconditionError(f"offset must be in range 0..{ASCII_MAX}, got {n}")
    result = code + n
    if result > ASCII_MAX:
        raise PreconditionError(f"{c!r} + {n} is outside the ASCII range")
    return chr(result)


def char_diff(c: str, base: str) -> int:
    """Distance from ASCII character base up to ASCII character c."""
    code = _require_ascii_char(c, "c")
    base_code = _require_ascii_char(base, "base")
    if code < base_code:
        raise PreconditionError(f"{c!r} precedes base character {base!r}")
    return code - base_code


def first_non_ascii(text: str) -> int | None:
    """Index of the first non-ASCII character in text, or None if it is all ASCII."""
    if text.isascii():
        return None
    return next(i for i, c in enumerate(text) if not c.isascii())
