"""Tests for the conversion façade."""

import unittest

from iran_hijri.calendars import tabular
from iran_hijri.calendars.julian_calc import gregorian_to_jdn, jdn_to_gregorian
from iran_hijri.calendars.types import (
    GregorianDate,
    HijriDate,
    JalaaliDate,
    OfficialRange,
    Source,
)
from iran_hijri.calendars.validation import is_valid_hijri_date
from iran_hijri.converter import HijriConverter
from iran_hijri.errors import InvalidDateError, YearOutOfSupportedRangeError
from iran_hijri.official import OFFICIAL_MONTH_LENGTHS, OfficialTable


def _partial_table(first, last):
    return OfficialTable(
        {y: m for y, m in OFFICIAL_MONTH_LENGTHS.items() if first <= y <= last}
    )


class TestIntoHijri(unittest.TestCase):
    """Test case for Jalaali/Gregorian -> Hijri conversion."""

    def setUp(self):
        self.converter = HijriConverter()

    def test_jalaali_to_hijri_official(self):
        """Test a Jalaali date inside the official table."""
        result = self.converter.jalaali_to_hijri(1403, 9, 15)
        self.assertEqual(result.date, HijriDate(1446, 6, 4))
        self.assertEqual(result.source, Source.OFFICIAL)
        self.assertEqual(result.jdn, 2460650)
        self.assertEqual(result.weekday.number, result.jdn % 7)
        self.assertEqual(result.weekday.english, "Thursday")

    def test_gregorian_to_hijri_official(self):
        """Test that the same day gives the same answer from Gregorian."""
        result = self.converter.gregorian_to_hijri(2024, 12, 5)
        self.assertEqual(result.date, HijriDate(1446, 6, 4))
        self.assertEqual(result.source, Source.OFFICIAL)

    def test_gregorian_to_hijri_outside_table(self):
        """Test the tabular fallback when the table does not cover the date."""
        converter = HijriConverter(_partial_table(1423, 1430))
        result = converter.gregorian_to_hijri(2024, 12, 5)
        self.assertEqual(result.source, Source.TABULAR)
        self.assertEqual(result.date, HijriDate(1446, 6, 3))
        self.assertEqual(result.date, tabular.jdn_to_hijri(result.jdn))
        self.assertEqual(result.weekday.number, 3)

    def test_empty_table_is_always_tabular(self):
        converter = HijriConverter(OfficialTable({}))
        result = converter.jalaali_to_hijri(1403, 9, 15)
        self.assertEqual(result.source, Source.TABULAR)
        self.assertEqual(result.date, HijriDate(1446, 6, 3))

    def test_far_from_table_is_tabular(self):
        result = self.converter.jalaali_to_hijri(1300, 1, 1)
        self.assertEqual(result.source, Source.TABULAR)
        self.assertEqual(result.date, tabular.jdn_to_hijri(result.jdn))

    def test_day_before_table_is_tabular(self):
        """Test the day before the anchor, whose probe window touches the table."""
        anchor = self.converter.table.anchor_jdn
        day_before = jdn_to_gregorian(anchor - 1)
        result = self.converter.gregorian_to_hijri(*day_before.as_tuple())
        self.assertEqual(result.source, Source.TABULAR)
        self.assertEqual(result.date, HijriDate(1422, 12, 29))

        first = self.converter.gregorian_to_hijri(*jdn_to_gregorian(anchor).as_tuple())
        self.assertEqual(first.source, Source.OFFICIAL)
        self.assertEqual(first.date, HijriDate(1423, 1, 1))

    def test_new_year_across_estimate_boundary(self):
        """Test an official new year the tabular calendar places in the old year."""
        result = self.converter.gregorian_to_hijri(2024, 7, 6)
        self.assertEqual(result.source, Source.OFFICIAL)
        self.assertEqual(result.date, HijriDate(1446, 1, 1))
        self.assertEqual(tabular.jdn_to_hijri(result.jdn).year, 1445)

    def test_past_partial_year_is_tabular(self):
        """Test days after the last recorded month of the newest year."""
        table = self.converter.table
        last = table.hijri_to_jdn(1448, 10, table.month_length(1448, 10))
        inside = self.converter.gregorian_to_hijri(*jdn_to_gregorian(last).as_tuple())
        self.assertEqual(inside.source, Source.OFFICIAL)
        self.assertEqual(inside.date.as_tuple()[:2], (1448, 10))

        after = self.converter.gregorian_to_hijri(*jdn_to_gregorian(last + 1).as_tuple())
        self.assertEqual(after.source, Source.TABULAR)

    def test_invalid_input(self):
        """Test that invalid dates are rejected before converting."""
        with self.assertRaises(InvalidDateError):
            self.converter.gregorian_to_hijri(2024, 2, 30)
        with self.assertRaises(InvalidDateError):
            self.converter.jalaali_to_hijri(1404, 12, 30)
        with self.assertRaises(InvalidDateError):
            self.converter.jalaali_to_hijri(1403, 13, 1)

    def test_before_hijri_epoch(self):
        with self.assertRaises(YearOutOfSupportedRangeError):
            self.converter.gregorian_to_hijri(600, 1, 1)


class TestFromHijri(unittest.TestCase):
    """Test case for Hijri -> Jalaali/Gregorian conversion."""

    def setUp(self):
        self.converter = HijriConverter()

    def test_hijri_to_gregorian_official(self):
        result = self.converter.hijri_to_gregorian(1446, 6, 3)
        self.assertEqual(result.date, GregorianDate(2024, 12, 4))
        self.assertEqual(result.source, Source.OFFICIAL)
        self.assertEqual(result.jdn, 2460649)
        self.assertEqual(result.weekday.english, "Wednesday")

    def test_hijri_to_jalaali_official(self):
        result = self.converter.hijri_to_jalaali(1446, 6, 4)
        self.assertEqual(result.date, JalaaliDate(1403, 9, 15))
        self.assertEqual(result.source, Source.OFFICIAL)

    def test_official_month_always_official(self):
        """Test that every recorded month converts with official data."""
        table = self.converter.table
        for year in table.years():
            for month in range(1, 13):
                if not table.has_data(year, month):
                    continue
                result = self.converter.hijri_to_gregorian(year, month, 1)
                self.assertEqual(result.source, Source.OFFICIAL, (year, month))

    def test_unrecorded_month_is_tabular(self):
        for year, month in ((1400, 1), (1422, 12), (1448, 11), (1449, 1)):
            result = self.converter.hijri_to_jalaali(year, month, 1)
            self.assertEqual(result.source, Source.TABULAR, (year, month))
            self.assertEqual(result.jdn, tabular.hijri_to_jdn(year, month, 1))

    def test_gap_falls_back_to_tabular(self):
        """Test that a year unreachable across a gap uses the tabular calendar."""
        converter = HijriConverter(
            OfficialTable(
                {
                    1440: OFFICIAL_MONTH_LENGTHS[1440],
                    1442: OFFICIAL_MONTH_LENGTHS[1442],
                }
            )
        )
        with self.assertLogs("iran_hijri.converter", level="WARNING"):
            result = converter.hijri_to_gregorian(1442, 1, 1)
        self.assertEqual(result.source, Source.TABULAR)
        self.assertEqual(result.jdn, tabular.hijri_to_jdn(1442, 1, 1))

    def test_day_beyond_official_month_length(self):
        """Test that day 30 of a 29-day official month does not exist."""
        self.assertEqual(self.converter.table.month_length(1446, 4), 29)
        with self.assertRaises(InvalidDateError):
            self.converter.hijri_to_gregorian(1446, 4, 30)
        # Outside the table, day 30 is accepted for any month
        self.converter.hijri_to_gregorian(1400, 2, 30)

    def test_invalid_input(self):
        with self.assertRaises(InvalidDateError):
            self.converter.hijri_to_gregorian(1445, 13, 1)
        with self.assertRaises(InvalidDateError):
            self.converter.hijri_to_jalaali(1445, 1, 0)
        with self.assertRaises(YearOutOfSupportedRangeError):
            self.converter.hijri_to_gregorian(5001, 1, 1)
        with self.assertRaises(YearOutOfSupportedRangeError):
            self.converter.hijri_to_jalaali(0, 1, 1)

    def test_past_last_jalaali_year(self):
        """Test a valid Hijri year whose date lies beyond the Jalaali break table."""
        self.assertTrue(is_valid_hijri_date(4000, 1, 1))
        with self.assertRaises(YearOutOfSupportedRangeError):
            self.converter.hijri_to_jalaali(4000, 1, 1)
        # The same day still converts to Gregorian
        result = self.converter.hijri_to_gregorian(4000, 1, 1)
        self.assertEqual(result.source, Source.TABULAR)


class TestRoundTrips(unittest.TestCase):
    """Test case for conversions in both directions."""

    def setUp(self):
        self.converter = HijriConverter()

    def test_hijri_gregorian_roundtrip(self):
        """Test recovering a Hijri date through Gregorian with the same source."""
        there = self.converter.hijri_to_gregorian(1446, 6, 3)
        back = self.converter.gregorian_to_hijri(*there.date.as_tuple())
        self.assertEqual(back.date, HijriDate(1446, 6, 3))
        self.assertEqual(back.source, there.source)

    def test_every_official_day_roundtrips(self):
        """Test Gregorian -> Hijri -> Gregorian across the whole table."""
        table = self.converter.table
        start = table.anchor_jdn
        end = table.hijri_to_jdn(1448, 10, table.month_length(1448, 10))
        for jdn in range(start, end + 1):
            gregorian = jdn_to_gregorian(jdn)
            hijri = self.converter.gregorian_to_hijri(*gregorian.as_tuple())
            self.assertEqual(hijri.source, Source.OFFICIAL, gregorian)
            back = self.converter.hijri_to_gregorian(*hijri.date.as_tuple())
            self.assertEqual(back.date, gregorian)
            self.assertEqual(back.weekday, hijri.weekday)

    def test_tabular_roundtrip_through_jalaali(self):
        converter = HijriConverter(OfficialTable({}))
        for jdn in range(gregorian_to_jdn(1990, 1, 1), gregorian_to_jdn(1992, 1, 1)):
            jalaali = converter.hijri_to_jalaali(*tabular.jdn_to_hijri(jdn).as_tuple())
            back = converter.jalaali_to_hijri(*jalaali.date.as_tuple())
            self.assertEqual(back.jdn, jdn)


class TestSourceInfo(unittest.TestCase):
    """Test case for source reporting."""

    def setUp(self):
        self.converter = HijriConverter()

    def test_covered_month(self):
        info = self.converter.get_source_info(1446)
        self.assertTrue(info.has_official_data)
        self.assertEqual(info.source, Source.OFFICIAL)
        self.assertEqual(info.official_data_range, OfficialRange(1423, 1448))

    def test_uncovered_month(self):
        info = self.converter.get_source_info(1448, 11)
        self.assertFalse(info.has_official_data)
        self.assertEqual(info.source, Source.TABULAR)
        self.assertEqual(self.converter.get_source_info(1300).source, Source.TABULAR)

    def test_empty_table(self):
        info = HijriConverter(OfficialTable({})).get_source_info(1446)
        self.assertIsNone(info.official_data_range)
        self.assertEqual(info.to_dict()["official_data_range"], None)

    def test_to_dict(self):
        data = self.converter.get_source_info(1446, 2).to_dict()
        self.assertEqual(
            data,
            {
                "has_official_data": True,
                "source": "official",
                "official_data_range": {"min_year": 1423, "max_year": 1448},
            },
        )


class TestConversionResult(unittest.TestCase):
    """Test case for the result payload."""

    def test_to_dict(self):
        result = HijriConverter().jalaali_to_hijri(1403, 9, 15)
        data = result.to_dict()
        self.assertEqual((data["year"], data["month"], data["day"]), (1446, 6, 4))
        self.assertEqual(data["source"], "official")
        self.assertEqual(data["weekday"]["en"], "Thursday")
        self.assertEqual(data["jdn"], 2460650)
        self.assertEqual((result.year, result.month, result.day), (1446, 6, 4))


if __name__ == "__main__":
    unittest.main()
