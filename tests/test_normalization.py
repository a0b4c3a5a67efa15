import unittest
import os
import re
import sys

from bson import ObjectId

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from devevent.errors import ValidationError
from devevent.services.normalization import (
    dedupe,
    normalize_date,
    normalize_email,
    normalize_time,
    require_items,
    require_text,
    slugify,
    to_object_id,
)

SLUG_SHAPE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class TestSlugify(unittest.TestCase):

    def test_basic_title(self):
        self.assertEqual(slugify("React Conf 2024"), "react-conf-2024")

    def test_quotes_are_removed_not_hyphenated(self):
        self.assertEqual(slugify("Don't Miss “It”"), "dont-miss-it")
        self.assertEqual(slugify("O’Reilly's \"Open\" Day"), "oreillys-open-day")

    def test_runs_and_edges_collapse(self):
        self.assertEqual(slugify("  --Next.js   Conf!! 2024--  "), "next-js-conf-2024")

    def test_no_alphanumerics_gives_empty_slug(self):
        self.assertEqual(slugify("!!! ??? ---"), "")

    def test_slug_is_deterministic_and_well_formed(self):
        titles = [
            "React Conf 2024",
            "JSConf EU 2024",
            "PyCon   US // 2025",
            "C++ & Rust: Systems Day",
            "Café Meetup",
            "__init__ talks",
        ]
        for title in titles:
            first = slugify(title)
            self.assertEqual(first, slugify(title))
            self.assertRegex(first, SLUG_SHAPE)
            self.assertNotIn("--", first)


class TestNormalizeDate(unittest.TestCase):

    def test_equivalent_inputs_share_one_canonical_form(self):
        for value in ("2024-12-10", "Dec 10, 2024", "December 10, 2024", "12/10/2024",
                      "2024/12/10", "10 Dec 2024", " 2024-12-10 "):
            self.assertEqual(normalize_date(value), "2024-12-10", value)

    def test_datetime_with_offset_is_taken_in_utc(self):
        self.assertEqual(normalize_date("2024-12-10T23:30:00-05:00"), "2024-12-11")
        self.assertEqual(normalize_date("2024-12-10T08:00:00Z"), "2024-12-10")

    def test_two_digit_year_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            normalize_date("12/10/24")
        self.assertEqual(ctx.exception.field, "date")

    def test_garbage_is_rejected(self):
        for value in ("next tuesday", "2024-13-01", "31/12/2024"):
            with self.assertRaises(ValidationError):
                normalize_date(value)


class TestNormalizeTime(unittest.TestCase):

    def test_accepted_forms(self):
        cases = {
            "9:00 AM": "09:00",
            "9:00am": "09:00",
            "12:30 am": "00:30",
            "12:05 PM": "12:05",
            "6:00 pm": "18:00",
            "21:05:30": "21:05",
            "7:15": "07:15",
            "00:00": "00:00",
        }
        for value, expected in cases.items():
            self.assertEqual(normalize_time(value), expected, value)

    def test_rejected_forms(self):
        for value in ("13:00 PM", "24:00", "9 AM", "09:60", "noon", "09:0٥", "٠9:00 am"):
            with self.assertRaises(ValidationError) as ctx:
                normalize_time(value)
            self.assertEqual(ctx.exception.field, "time")


class TestNormalizeEmail(unittest.TestCase):

    def test_trims_and_lowercases(self):
        self.assertEqual(normalize_email("User@Example.com "), "user@example.com")

    def test_rejects_malformed(self):
        for value in ("user@example", "user example@x.com", "@example.com",
                      "user@@example.com", "usér@example.com", "", None):
            with self.assertRaises(ValidationError) as ctx:
                normalize_email(value)
            self.assertEqual(ctx.exception.field, "email")


class TestRequiredValues(unittest.TestCase):

    def test_require_text_trims(self):
        self.assertEqual(require_text("venue", "  Moscone Center "), "Moscone Center")

    def test_require_text_names_the_field(self):
        with self.assertRaises(ValidationError) as ctx:
            require_text("venue", "   ")
        self.assertEqual(ctx.exception.field, "venue")

    def test_require_items_drops_blank_entries(self):
        self.assertEqual(require_items("agenda", [" Keynote ", "", "Panel"]), ["Keynote", "Panel"])

    def test_require_items_rejects_empty_and_non_lists(self):
        for value in ([], ["  "], "Keynote", None):
            with self.assertRaises(ValidationError):
                require_items("agenda", value)

    def test_dedupe_keeps_first_occurrence(self):
        self.assertEqual(dedupe(["react", "js", "react"]), ["react", "js"])

    def test_to_object_id(self):
        oid = ObjectId()
        self.assertIs(to_object_id("event_id", oid), oid)
        self.assertEqual(to_object_id("event_id", str(oid)), oid)
        with self.assertRaises(ValidationError):
            to_object_id("event_id", "not-an-id")


if __name__ == '__main__':
    unittest.main()
