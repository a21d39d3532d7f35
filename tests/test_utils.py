import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from binarytext import OpenFileError, read_encoded_file, read_file, write_file


class TestFileHelpers(unittest.TestCase):
    def test_bytes_are_kept(self) -> None:
        payload = b"\xff\xe9\r\n\x00text"
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "data.txt"
            write_file(payload, path)
            self.assertEqual(path.read_bytes(), payload)
            self.assertEqual(read_file(path), payload)
            self.assertEqual(read_file(str(path)), payload)

    def test_empty_payload(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "empty.txt"
            write_file(b"", path)
            self.assertTrue(path.exists())
            self.assertEqual(read_file(path), b"")

    def test_encoded_file_maps_bytes_to_characters(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "encoded.txt"
            path.write_bytes(b"TWFu\n\xff")
            self.assertEqual(read_encoded_file(path), "TWFu\nÿ")

    def test_missing_paths(self) -> None:
        with TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "missing" / "file.txt"
            with self.assertRaises(OpenFileError) as ctx:
                read_file(missing)
            self.assertIn("file.txt", str(ctx.exception))
            with self.assertRaises(OpenFileError):
                write_file(b"x", missing)


if __name__ == "__main__":
    unittest.main()
