import unittest

from bytecodec import utf8_encode, utf8_decode, InvalidUtf8Error, InvalidCharacterError


class TestUtf8(unittest.TestCase):
	def test_round_trip(self):
		for text in ("", "hello", "héllo", "日本", "\U0001f600"):
			self.assertEqual(utf8_decode(utf8_encode(text)), text)

	def test_encode_bytes(self):
		self.assertEqual(utf8_encode("hé"), b"h\xc3\xa9")

	def test_invalid_utf8(self):
		cases = {b"\xc0\xaf": 0, b"ab\xe2\x82": 2, b"ab\xff": 2}
		for data, position in cases.items():
			with self.subTest(data=data):
				with self.assertRaises(InvalidUtf8Error) as ctx:
					utf8_decode(data)
				self.assertEqual(ctx.exception.position, position)

	def test_lone_surrogate(self):
		with self.assertRaises(InvalidCharacterError) as ctx:
			utf8_encode("a\ud800")
		self.assertEqual(ctx.exception.position, 1)

	def test_types(self):
		with self.assertRaises(TypeError):
			utf8_encode(b"abc")
		with self.assertRaises(TypeError):
			utf8_decode("abc")


if __name__ == '__main__':
	unittest.main()
