from __future__ import annotations

import unittest

from hexpane.core.labels import LABEL_ORDER, LabelHandler, MISSING_VALUE, stream_length


class LabelHandlerTests(unittest.TestCase):
    def test_refresh_interprets_little_endian_by_default(self) -> None:
        labels = LabelHandler()
        labels.refresh(b'\xff\x01\x00\x00\x00\x00\x00\x00')

        self.assertEqual(labels.labels["Signed 8 bit"], "-1")
        self.assertEqual(labels.labels["Unsigned 8 bit"], "255")
        self.assertEqual(labels.labels["Unsigned 16 bit"], "511")
        self.assertEqual(labels.labels["Unsigned 32 bit"], "511")
        self.assertEqual(labels.labels["Unsigned 64 bit"], "511")
        self.assertEqual(labels.labels["Hexadecimal"], "0xFF")
        self.assertEqual(labels.labels["Octal"], "0o377")
        self.assertEqual(labels.labels["Binary"], "0b11111111")

    def test_short_slice_marks_wide_values_missing(self) -> None:
        labels = LabelHandler()
        labels.refresh(b'\x10\x00')

        self.assertEqual(labels.labels["Unsigned 16 bit"], "16")
        self.assertEqual(labels.labels["Unsigned 32 bit"], MISSING_VALUE)
        self.assertEqual(labels.labels["Float 64 bit"], MISSING_VALUE)

    def test_toggle_endianness_recomputes(self) -> None:
        labels = LabelHandler()
        labels.refresh(b'\x00\x01')
        self.assertEqual(labels.labels["Unsigned 16 bit"], "256")

        self.assertEqual(labels.toggle_endianness(), "big")
        self.assertEqual(labels.labels["Unsigned 16 bit"], "1")

    def test_float_labels(self) -> None:
        labels = LabelHandler('big')
        labels.refresh(b'\x3f\x80\x00\x00\x00\x00\x00\x00')

        self.assertEqual(labels.labels["Float 32 bit"], "1")

    def test_warning_is_cleared_by_next_refresh(self) -> None:
        labels = LabelHandler()
        labels.set_warning("Invalid Hex: G")
        self.assertEqual(labels.notification, "Invalid Hex: G")

        labels.refresh(b'\x00')
        self.assertIsNone(labels.notification)

    def test_items_follow_display_order(self) -> None:
        labels = LabelHandler()
        self.assertEqual([name for name, _ in labels.items()], LABEL_ORDER)

    def test_unknown_endianness_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            LabelHandler('middle')

    def test_stream_length_stops_at_unprintable(self) -> None:
        self.assertEqual(stream_length(b'abc\x00def'), 3)
        self.assertEqual(stream_length(b'\x00abc'), 0)


if __name__ == "__main__":
    unittest.main()
