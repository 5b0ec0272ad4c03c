from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from hexpane.core.buffer import Buffer, Nibble, clamp_offset


class NibbleTests(unittest.TestCase):
    def test_toggled_alternates(self) -> None:
        self.assertIs(Nibble.BEGINNING.toggled(), Nibble.END)
        self.assertIs(Nibble.END.toggled(), Nibble.BEGINNING)


class BufferBehaviorTests(unittest.TestCase):
    def test_new_buffer_starts_at_first_high_nibble(self) -> None:
        buf = Buffer(b'abc')

        self.assertEqual(buf.offset, 0)
        self.assertIs(buf.nibble, Nibble.BEGINNING)
        self.assertFalse(buf.modified)

    def test_empty_initial_data_becomes_single_zero_byte(self) -> None:
        self.assertEqual(bytes(Buffer(b'').contents), b'\x00')

    def test_clamp_offset(self) -> None:
        self.assertEqual(clamp_offset(-3, 5), 0)
        self.assertEqual(clamp_offset(2, 5), 2)
        self.assertEqual(clamp_offset(9, 5), 4)

    def test_replace_byte_rejects_out_of_range_value(self) -> None:
        buf = Buffer(b'abc')
        with self.assertRaises(ValueError):
            buf.replace_byte(0, 256)

    def test_replace_byte_with_same_value_is_not_a_modification(self) -> None:
        buf = Buffer(b'abc')
        buf.replace_byte(0, ord('a'))
        self.assertFalse(buf.modified)

    def test_delete_byte_keeps_last_byte(self) -> None:
        buf = Buffer(b'a')
        self.assertFalse(buf.delete_byte(0))
        self.assertEqual(len(buf), 1)

    def test_delete_byte_clamps_cursor(self) -> None:
        buf = Buffer(b'abc')
        buf.offset = 2

        self.assertTrue(buf.delete_byte(2))
        self.assertEqual(buf.offset, 1)
        self.assertTrue(buf.modified)

    def test_get_line_renders_unprintable_as_dots(self) -> None:
        buf = Buffer(b'AB\x00\x7fCD')

        self.assertEqual(buf.get_line(0, 4), (b'AB\x00\x7f', 'AB..'))
        self.assertEqual(buf.get_line(1, 4), (b'CD', 'CD'))
        self.assertEqual(buf.get_line_count(4), 2)

    def test_tail_starts_at_cursor(self) -> None:
        buf = Buffer(b'abcdef')
        buf.offset = 4
        self.assertEqual(buf.tail(), b'ef')


class BufferFileTests(unittest.TestCase):
    def test_load_and_save_round_trip_resets_modified(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.bin"
            path.write_bytes(b'\x01\x02\x03')

            buf = Buffer()
            buf.load_file(str(path))
            self.assertEqual(bytes(buf.contents), b'\x01\x02\x03')

            buf.replace_byte(1, 0xFF)
            self.assertTrue(buf.modified)
            self.assertTrue(buf.save_file())

            self.assertFalse(buf.modified)
            self.assertEqual(path.read_bytes(), b'\x01\xff\x03')

    def test_loading_empty_file_gives_one_byte(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.bin"
            path.write_bytes(b'')

            buf = Buffer()
            buf.load_file(str(path))
            self.assertEqual(bytes(buf.contents), b'\x00')

    def test_save_without_filename_returns_false(self) -> None:
        self.assertFalse(Buffer(b'abc').save_file())

    def test_save_failure_raises_ioerror(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            buf = Buffer(b'abc')
            with self.assertRaises(IOError):
                buf.save_file(str(Path(tmp) / "missing" / "out.bin"))


if __name__ == "__main__":
    unittest.main()
