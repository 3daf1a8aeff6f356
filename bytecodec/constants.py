import sys

BYTE_BITS: int = 8
ASCII_MAX: int = 0x7F
# ceil_div refuses numerators that would overflow a machine word
WORD_MAX: int = sys.maxsize

B64_CHAR_BITS: int = 6
B64_MAX: int = (1 << B64_CHAR_BITS) - 1
B64_BLOCK_BYTES: int = 3
B64_BLOCK_CHARS: int = 4
B64_BLOCK_BITS: int = B64_BLOCK_BYTES * BYTE_BITS
MAX_B64_PAD_CHARS: int = B64_BLOCK_BYTES - 1
B64_PAD_CHAR: str = "="

# Alphabet ranges as (first value, first char, last char)
B64_UPPER: tuple[int, str, str] = (0, "A", "Z")
B64_LOWER: tuple[int, str, str] = (26, "a", "z")
B64_DIGITS: tuple[int, str, str] = (52, "0", "9")
B64_PLUS_VALUE: int = 62
B64_SLASH_VALUE: int = 63

HEX_CHAR_BITS: int = 4
HEX_MAX: int = (1 << HEX_CHAR_BITS) - 1
HEX_BLOCK_BYTES: int = 1
HEX_BLOCK_CHARS: int = 2
HEX_BLOCK_BITS: int = HEX_BLOCK_BYTES * BYTE_BITS

# Cryptopals set 1, challenge 1
HEX_TEST: str = (
    "49276d206b696c6c696e6720796f757220627261696e206c696b65206120706f69736f6e6f7573206d757368726f6f6d"
)
B64_EXPECTED: str = "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t"
