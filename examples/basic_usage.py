"""Basic usage example for bytecodec.

Run: python examples/basic_usage.py
"""

import bytecodec


def main() -> None:
    raw = bytecodec.utf8_encode("Hello, World!")
    print("Hex:", bytecodec.hex_encode(raw))

    encoded = bytecodec.base64_encode(raw)
    print("Base64:", encoded)

    recovered = bytecodec.utf8_decode(bytecodec.base64_decode(encoded))
    print("Decoded text:", recovered)

    # Non-canonical input is rejected, with the position of the offending character
    try:
        bytecodec.base64_decode("gB==")
    except bytecodec.TrailingBitsError as e:
        print(f"Rejected at position {e.position}: {e}")


if __name__ == "__main__":
    main()
