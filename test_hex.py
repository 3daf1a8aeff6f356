import unittest

from bytecodec import (
	hex_encode,
	hex_decode,
	HexBlock,
	CodecArithmeticError,
	InvalidCharacterError,
	InvalidStringError,
)
from bytecodec.constants import HEX_TEST


class TestHex(unittest.TestCase):
	def test_encode(self):
		self.assertEqual(hex_encode(b"\x00\x0f\xf0\xff"), "000ff0ff")
		self.assertEqual(hex_encode(b""), "")

	def test_decode_either_case(self):
		self.assertEqual(hex_decode("ff"), b"\xff")
		self.assertEqual(hex_decode("FF"), b"\xff")
		self.assertEqual(hex_decode("fF"), b"\xff")
		self.assertEqual(hex_decode(""), b"")

	def test_test_vector(self):
		self.assertEqual(hex_decode(HEX_TEST), b"I'm killing your brain like a poisonous mushroom")

	def test_length_law_and_round_trip(self):
		data = bytes(range(256))
		encoded = hex_encode(data)
		self.assertEqual(len(encoded), 2 * len(data))
		self.assertEqual(hex_decode(encoded), data)

	def test_odd_length(self):
		with self.assertRaises(CodecArithmeticError):
			hex_decode("abc")

	def test_invalid_character(self):
		with self.assertRaises(InvalidCharacterError) as ctx:
			hex_decode("zz")
		self.assertEqual(ctx.exception.position, 0)
		with self.assertRaises(InvalidCharacterError) as ctx:
			hex_decode("000g")
		self.assertEqual(ctx.exception.position, 3)

	def test_non_ascii(self):
		with self.assertRaises(InvalidStringError) as ctx:
			hex_decode("0é")
		self.assertEqual(ctx.exception.position, 1)

	def test_block(self):
		self.assertEqual(str(HexBlock.from_bytes(b"\xab")), "ab")
		self.assertEqual(bytes(HexBlock.from_str("AB")), b"\xab")


if __name__ == '__main__':
	unittest.main()
