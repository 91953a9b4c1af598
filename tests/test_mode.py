import unittest
from argparse import ArgumentTypeError
from itertools import product

from chmodrt.errors import InvalidMode, UsageError
from chmodrt.mode import format_mode, octal_mode, parse_mode


class ParseModeTests(unittest.TestCase):
    def test_all_lengths_roundtrip(self) -> None:
        for length in range(1, 5):
            for digits in product("0157", repeat=length):
                text = "".join(digits)
                mode = parse_mode(text)
                self.assertEqual(mode, int(text, 8))
                self.assertEqual(format_mode(mode), format(int(text, 8), "o"))

    def test_common_modes(self) -> None:
        self.assertEqual(parse_mode("755"), 0o755)
        self.assertEqual(parse_mode("0644"), 0o644)
        self.assertEqual(parse_mode("4755"), 0o4755)
        self.assertEqual(parse_mode("7"), 0o7)
        self.assertEqual(parse_mode("7777"), 0o7777)

    def test_invalid(self) -> None:
        for text in ("", "01234", "77777", "8", "648", "rwx", "u+x", "-755", " 755", "0o755", "7.5"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidMode):
                    parse_mode(text)

    def test_invalid_mode_is_usage_error(self) -> None:
        with self.assertRaises(UsageError):
            parse_mode("9")

    def test_octal_mode_argparse_type(self) -> None:
        self.assertEqual(octal_mode("700"), 0o700)
        with self.assertRaises(ArgumentTypeError):
            octal_mode("a+r")

    def test_format_mode_out_of_range(self) -> None:
        with self.assertRaises(ValueError):
            format_mode(0o10000)


if __name__ == "__main__":
    unittest.main()
