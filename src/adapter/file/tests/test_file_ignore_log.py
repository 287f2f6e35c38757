"""Unit tests for FileIgnoreLog."""

import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from adapter.file.ignore_log import FileIgnoreLog


class TestFileIgnoreLog(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "nested" / "dir" / "ignore.txt"
        self.log = FileIgnoreLog(self.path)

    def tearDown(self):
        self.tmp.cleanup()

    def test_append_creates_file_and_parents(self):
        self.log.append("foo")

        self.assertTrue(self.path.exists())
        self.assertEqual(self.path.read_bytes(), b"foo\n")

    def test_append_keeps_duplicates(self):
        self.log.append("foo")
        self.log.append("bar")
        self.log.append("foo")

        self.assertEqual(self.path.read_text(encoding="utf-8"), "foo\nbar\nfoo\n")

    def test_utf8_encoding(self):
        self.log.append("über")

        self.assertEqual(self.path.read_bytes(), "über\n".encode("utf-8"))

    def test_read_all_missing_file(self):
        self.assertEqual(self.log.read_all(), set())

    def test_read_all_skips_blank_lines(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("foo\n\n  bar  \nfoo\n", encoding="utf-8")

        self.assertEqual(self.log.read_all(), {"foo", "bar"})

    def test_read_all_rejects_non_utf8(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_bytes(b"caf\xe9\n")

        with self.assertRaises(UnicodeDecodeError):
            self.log.read_all()

    def test_append_to_directory_raises(self):
        self.path.mkdir(parents=True)

        with self.assertRaises(OSError):
            self.log.append("foo")


if __name__ == "__main__":
    unittest.main()
