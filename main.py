import bytecodec

def main() -> None:
    bytes_test = bytecodec.hex_decode(bytecodec.constants.HEX_TEST)
    print(f"Hex decoded test: {bytes_test!r}")
    b64_test = bytecodec.base64_encode(bytes_test)
    print(f"Base64 encoded test: {b64_test}")
    if not bytecodec.check_test_vector():
        raise SystemExit("Base64 output does not match the expected test vector")

if __name__ == '__main__':
    main()
