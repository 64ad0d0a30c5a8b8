"""Tests for header normalization and date segmentation."""
import unittest

from statementflow.parser.markers import MarkerSet
from statementflow.parser.models import Segment
from statementflow.parser.normalizer import HeaderNormalizer
from statementflow.parser.patterns import split_amount
from statementflow.parser.segmenter import DateSegmenter


class TestDateSegmenter(unittest.TestCase):
    """Test DateSegmenter functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.segmenter = DateSegmenter()

    def test_no_dates(self):
        """Test text without dates yields nothing."""
        self.assertEqual(self.segmenter.segment("no dates here"), [])

    def test_bodies_and_offsets(self):
        """Test segment bodies and offsets."""
        segments = self.segmenter.segment("01.02.2020 abc 03.04.2021def")

        self.assertEqual(segments, [
            Segment(date="01.02.2020", body="abc", start=0, end=10),
            Segment(date="03.04.2021", body="def", start=15, end=25),
        ])

    def test_adjacent_dates(self):
        """Test adjacent dates give an empty body."""
        segments = self.segmenter.segment("01.01.202002.02.2020x")
        self.assertEqual([(s.date, s.body) for s in segments], [("01.01.2020", ""), ("02.02.2020", "x")])

    def test_dates_not_validated(self):
        """Test dates are not calendar-validated."""
        segments = self.segmenter.segment("99.99.9999x")
        self.assertEqual(segments[0].date, "99.99.9999")

    def test_body_keeps_information_separators(self):
        """Test trimming keeps control characters that are not whitespace."""
        segments = self.segmenter.segment("03.03.2020\x1c12,34\n")
        self.assertEqual(segments[0].body, "\x1c12,34")


class TestHeaderNormalizer(unittest.TestCase):
    """Test HeaderNormalizer functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.normalizer = HeaderNormalizer()

    def test_cuts_marker_before_first_date(self):
        """Test the preamble up to the marker is cut."""
        self.assertEqual(self.normalizer.normalize("HEADER Valuta01.01.2020x"), "01.01.2020x")

    def test_keeps_marker_after_first_date(self):
        """Test a marker after the first date is kept."""
        text = "01.01.2020 Shop Valuta x"
        self.assertEqual(self.normalizer.normalize(text), text)

    def test_cuts_without_any_date(self):
        """Test the marker is cut even without a date."""
        self.assertEqual(self.normalizer.normalize("abc Valuta rest"), " rest")

    def test_without_marker(self):
        """Test text without the marker is unchanged."""
        self.assertEqual(self.normalizer.normalize("01.01.2020 Shop"), "01.01.2020 Shop")
        self.assertEqual(self.normalizer.normalize(""), "")

    def test_disabled_marker(self):
        """Test a disabled header marker leaves text unchanged."""
        normalizer = HeaderNormalizer(MarkerSet(header_marker=None))
        self.assertEqual(normalizer.normalize("Valuta01.01.2020"), "Valuta01.01.2020")


class TestSplitAmount(unittest.TestCase):
    """Test splitting a fragment at its trailing amount."""

    def test_grouped_negative(self):
        """Test splitting a grouped negative amount."""
        self.assertEqual(split_amount("Shop -1.234,56"), ("Shop", "-1.234,56"))

    def test_amount_only(self):
        """Test a fragment holding only an amount."""
        self.assertEqual(split_amount("-0,01"), ("", "-0,01"))

    def test_amount_not_at_end(self):
        """Test amounts not at the end are ignored."""
        self.assertIsNone(split_amount("abc 1,23 x"))
        self.assertIsNone(split_amount("12,345"))


if __name__ == "__main__":
    unittest.main()
