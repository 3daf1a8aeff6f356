"""Known-answer check: Cryptopals set 1, challenge 1 (hex to Base64)."""
import logging

from .b64 import base64_encode
from .constants import HEX_TEST, B64_EXPECTED
from .hexcodec import hex_decode

logger = logging.getLogger(__name__)


def run_vector(hex_text: str = HEX_TEST) -> tuple[bytes, str]:
    """Hex-decode hex_text and Base64-encode the result; returns both steps."""
    decoded = hex_decode(hex_text)
    return decoded, base64_encode(decoded)


def check_test_vector() -> bool:
    _, encoded = run_vector()
    matched = encoded == B64_EXPECTED
    logger.debug("test vector %s: got %r, expected %r", "matched" if matched else "MISMATCH", encoded, B64_EXPECTED)
    return matched
