import unittest

from binarytext import (
    ByteBuffer,
    ConfigurationError,
    ParseError,
    ascii85,
    base16,
    base32,
    base64,
    registry,
)
from binarytext.base32 import BASE32
from binarytext.base64 import BASE64

SAMPLES = [
    b"",
    b"f",
    b"fo",
    b"foo",
    b"foob",
    b"fooba",
    b"foobar",
    b"\x00\x00\x00\x00",
    b"    ",
    b"\x00\x00\x00\x00    tail",
    bytes(range(256)),
    "flag{binärtext}".encode("utf-8"),
]


class TestVectors(unittest.TestCase):
    def test_base16(self) -> None:
        self.assertEqual(base16.encode(b"\x7a"), "7A")
        self.assertEqual(base16.encode(b"\x7a\xbc", case="lowercase"), "7abc")
        self.assertEqual(base16.decode("7aBC"), b"\x7a\xbc")

    def test_base32(self) -> None:
        self.assertEqual(base32.encode(b"f"), "MY======")
        self.assertEqual(base32.encode(b"fo"), "MZXQ====")
        self.assertEqual(base32.encode(b"foobar"), "MZXW6YTBOI======")
        self.assertEqual(base32.hex_encode(b"f"), "CO======")
        self.assertEqual(base32.hex_encode(b"foobar"), "CPNMUOJ1E8======")
        self.assertEqual(base32.decode("MZXW6YTBOI======"), b"foobar")

    def test_base64(self) -> None:
        self.assertEqual(base64.encode(b"Man"), "TWFu")
        self.assertEqual(base64.encode(b"Ma"), "TWE=")
        self.assertEqual(base64.encode(b"M"), "TQ==")
        self.assertEqual(base64.encode(b"\xfb\xff"), "+/8=")
        self.assertEqual(base64.url_encode(b"\xfb\xff"), "-_8=")
        self.assertEqual(base64.url_decode("-_8="), b"\xfb\xff")

    def test_ascii85(self) -> None:
        self.assertEqual(ascii85.encode(b"\x00\x00\x00\x00"), "z")
        self.assertEqual(ascii85.encode(b"Man "), "9jqo^")
        self.assertEqual(ascii85.encode(b"    "), "+<VdL")
        self.assertEqual(ascii85.encode(b"    ", fold_spaces=True), "y")
        self.assertEqual(ascii85.encode(b"Man ", adobe_mode=True), "<~9jqo^~>")
        self.assertEqual(ascii85.decode("z"), b"\x00\x00\x00\x00")
        self.assertEqual(ascii85.decode("y", fold_spaces=True), b"    ")
        self.assertEqual(ascii85.decode("9jqo^"), b"Man ")

    def test_ascii85_short_zero_group_is_not_abbreviated(self) -> None:
        self.assertEqual(ascii85.encode(b"\x00\x00"), "!!!")
        self.assertEqual(ascii85.decode("!!!"), b"\x00\x00")


class TestRoundTrip(unittest.TestCase):
    def test_rfc4648_codecs(self) -> None:
        pairs = [
            (base32.encode, base32.decode),
            (base32.hex_encode, base32.hex_decode),
            (base64.encode, base64.decode),
            (base64.url_encode, base64.url_decode),
        ]
        for encode, decode in pairs:
            for padding in (True, False):
                for sample in SAMPLES:
                    with self.subTest(encode=encode.__name__, padding=padding, sample=sample):
                        self.assertEqual(decode(encode(sample, padding=padding)), sample)

    def test_base16(self) -> None:
        for encode_case in ("lowercase", "uppercase"):
            for decode_case in (encode_case, "mixed"):
                for sample in SAMPLES:
                    with self.subTest(encode_case=encode_case, decode_case=decode_case, sample=sample):
                        encoded = base16.encode(sample, case=encode_case)
                        self.assertEqual(base16.decode(encoded, case=decode_case), sample)

    def test_ascii85(self) -> None:
        for fold_spaces in (False, True):
            for adobe_mode in (False, True):
                for sample in SAMPLES:
                    with self.subTest(fold_spaces=fold_spaces, adobe_mode=adobe_mode, sample=sample):
                        encoded = ascii85.encode(sample, fold_spaces, adobe_mode)
                        self.assertEqual(ascii85.decode(encoded, fold_spaces, adobe_mode), sample)

    def test_text_and_buffer_entry_points(self) -> None:
        text = "flag{round trip}"
        for name, codec in registry().items():
            with self.subTest(algorithm=name):
                self.assertEqual(codec.decode_text(codec.encode_text(text)), text)
                buffer = ByteBuffer(text.encode("utf-8"))
                self.assertEqual(codec.decode_buffer(codec.encode_buffer(buffer)), buffer)

    def test_empty_in_empty_out(self) -> None:
        for name, codec in registry().items():
            with self.subTest(algorithm=name):
                self.assertEqual(codec.encode(b""), "")
                self.assertEqual(codec.decode(""), b"")
                self.assertTrue(codec.decode_buffer("").is_empty())


class TestLengths(unittest.TestCase):
    def test_padded_length(self) -> None:
        for size in range(0, 16):
            data = bytes(range(size))
            self.assertEqual(len(base32.encode(data)), -(-size // 5) * 8)
            self.assertEqual(len(base64.encode(data)), -(-size // 3) * 4)
            self.assertEqual(BASE32.encoded_length(size), -(-size // 5) * 8)
            self.assertEqual(BASE64.encoded_length(size), -(-size // 3) * 4)

    def test_unpadded_output_still_decodes(self) -> None:
        self.assertEqual(base64.encode(b"M", padding=False), "TQ")
        self.assertEqual(base64.decode("TQ"), b"M")
        self.assertEqual(base32.encode(b"f", padding=False), "MY")
        self.assertEqual(base32.decode("MY"), b"f")
        self.assertEqual(BASE64.encoded_length(4, padding=False), 6)


class TestRejections(unittest.TestCase):
    def test_base64_invalid_symbol(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            base64.decode("TW!u")
        self.assertEqual(ctx.exception.position, 2)
        with self.assertRaises(ParseError):
            base64.decode("TW Fu")
        with self.assertRaises(ParseError):
            base64.url_decode("+/8=")

    def test_base64_group_of_one_symbol(self) -> None:
        with self.assertRaises(ParseError):
            base64.decode("T===")

    def test_base32_symbol_after_padding(self) -> None:
        with self.assertRaises(ParseError):
            base32.decode("MZ=XW6==")
        with self.assertRaises(ParseError):
            base32.decode("========")

    def test_base32_invalid_count(self) -> None:
        # three real symbols can not come from any whole number of bytes
        with self.assertRaises(ParseError):
            base32.decode("MZX=====")

    def test_base16(self) -> None:
        with self.assertRaises(ParseError):
            base16.decode("7a", case="uppercase")
        with self.assertRaises(ParseError):
            base16.decode("7G")
        with self.assertRaises(ConfigurationError):
            base16.encode(b"x", case="mixed")

    def test_ascii85_y_without_folding(self) -> None:
        with self.assertRaises(ParseError):
            ascii85.decode("y")

    def test_ascii85_z_inside_group(self) -> None:
        with self.assertRaises(ParseError):
            ascii85.decode("9jz")

    def test_ascii85_single_symbol_group(self) -> None:
        with self.assertRaises(ParseError):
            ascii85.decode("9jqo^9")

    def test_ascii85_overflowing_group(self) -> None:
        with self.assertRaises(ParseError):
            ascii85.decode("uuuuu")

    def test_ascii85_adobe_delimiters(self) -> None:
        self.assertEqual(ascii85.decode(" <~9jqo^~>\n", adobe_mode=True), b"Man ")
        with self.assertRaises(ParseError):
            ascii85.decode("9jqo^", adobe_mode=True)
        with self.assertRaises(ParseError):
            ascii85.decode("<~9jqo^", adobe_mode=True)

    def test_decode_text_requires_valid_text(self) -> None:
        with self.assertRaises(ParseError):
            base16.decode_text("FF")


class TestLeniency(unittest.TestCase):
    def test_base16_skips_whitespace(self) -> None:
        self.assertEqual(base16.decode("7A 4\n2"), b"\x7a\x42")

    def test_base16_odd_trailing_digit(self) -> None:
        self.assertEqual(base16.decode("7"), b"\x70")

    def test_ascii85_skips_whitespace(self) -> None:
        self.assertEqual(ascii85.decode("9j\nqo ^"), b"Man ")


if __name__ == "__main__":
    unittest.main()
