import io
import contextlib
import unittest
from unittest import mock

from bytecodec import check_test_vector
from bytecodec.cli import main
from bytecodec.constants import HEX_TEST, B64_EXPECTED


def run_cli(argv: list[str]) -> tuple[int, str, str]:
	out, err = io.StringIO(), io.StringIO()
	with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
		try:
			main(argv)
		except SystemExit as e:
			code = e.code
	return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
	def test_hex_to_base64(self):
		code, out, _ = run_cli(["convert", "--from", "hex", "--to", "base64", HEX_TEST])
		self.assertEqual(code, 0)
		self.assertEqual(out, B64_EXPECTED + "\n")

	def test_base64_to_utf8_from_stdin(self):
		with mock.patch("sys.stdin", io.StringIO("SGVsbG8=\n")):
			code, out, _ = run_cli(["convert", "--from", "base64", "--to", "utf8"])
		self.assertEqual(code, 0)
		self.assertEqual(out, "Hello\n")

	def test_codec_error_exit_code(self):
		code, out, err = run_cli(["convert", "--from", "base64", "--to", "hex", "gB=="])
		self.assertEqual(code, 2)
		self.assertEqual(out, "")
		self.assertTrue(err.startswith("error:"))

	def test_check(self):
		code, out, _ = run_cli(["check"])
		self.assertEqual(code, 0)
		self.assertIn(B64_EXPECTED, out)
		self.assertTrue(check_test_vector())


if __name__ == '__main__':
	unittest.main()
