import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_booking.exceptions import ValidationError
from event_booking.utils import (
    is_valid_email,
    normalize_date,
    normalize_email,
    normalize_time,
    slugify,
)


class TestSlugify(unittest.TestCase):

    def test_spaces_and_underscores_become_dashes(self):
        self.assertEqual(slugify("Python Meetup_Berlin"), "python-meetup-berlin")

    def test_invalid_characters_removed_and_dashes_collapsed(self):
        self.assertEqual(slugify("  React & Vue: 2025 -- Edition!  "), "react-vue-2025-edition")

    def test_leading_and_trailing_dashes_trimmed(self):
        self.assertEqual(slugify("--Hello--"), "hello")

    def test_only_symbols_gives_empty_slug(self):
        self.assertEqual(slugify("!!!"), "")


class TestNormalizeDate(unittest.TestCase):

    def test_iso_date_unchanged(self):
        self.assertEqual(normalize_date("2025-03-07"), "2025-03-07")

    def test_free_form_date(self):
        self.assertEqual(normalize_date("March 7, 2025"), "2025-03-07")

    def test_aware_datetime_converted_to_utc(self):
        self.assertEqual(normalize_date("2025-03-07T23:30:00-05:00"), "2025-03-08")

    def test_invalid_date_raises(self):
        with self.assertRaises(ValidationError) as ctx:
            normalize_date("not a date")
        self.assertEqual(str(ctx.exception), "Invalid event date")
        self.assertEqual(ctx.exception.field, "date")

    def test_time_only_input_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            normalize_date("10:00")
        self.assertEqual(str(ctx.exception), "Invalid event date")

    def test_partial_dates_rejected(self):
        for value in ("2025", "March 2025", "2025-03"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    normalize_date(value)


class TestNormalizeTime(unittest.TestCase):

    def test_pads_single_digit_hour(self):
        self.assertEqual(normalize_time("9:05"), "09:05")

    def test_drops_seconds(self):
        self.assertEqual(normalize_time(" 18:30:45 "), "18:30")

    def test_bad_shape_raises(self):
        with self.assertRaises(ValidationError) as ctx:
            normalize_time("6pm")
        self.assertEqual(str(ctx.exception), "Invalid event time; expected HH:mm")

    def test_out_of_range_raises(self):
        for value in ("24:00", "12:60"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError) as ctx:
                    normalize_time(value)
                self.assertIn("hour must be 0-23", str(ctx.exception))

    def test_non_ascii_digits_rejected(self):
        with self.assertRaises(ValidationError):
            normalize_time("٩:٠٠")


class TestEmail(unittest.TestCase):

    def test_normalize_email(self):
        self.assertEqual(normalize_email("  Jane.Doe@Example.COM "), "jane.doe@example.com")

    def test_is_valid_email(self):
        self.assertTrue(is_valid_email("jane@example.com"))
        self.assertFalse(is_valid_email("jane@example"))
        self.assertFalse(is_valid_email("jane doe@example.com"))
        self.assertFalse(is_valid_email("@example.com"))

    def test_trailing_newline_is_not_valid_email(self):
        self.assertFalse(is_valid_email("jane@example.com\n"))


if __name__ == '__main__':
    unittest.main()
