"""Tests for the module-level API and the short compatibility aliases."""

import os
import unittest
from unittest.mock import patch

import iran_hijri
from iran_hijri import compat
from iran_hijri.calendars.types import GregorianDate, HijriDate, Source
from iran_hijri.converter import get_default_converter
from iran_hijri.official.loader import TABLE_ENV_VAR


class DefaultConverterTestCase(unittest.TestCase):
    """Runs each test against a default converter over the bundled table."""

    def setUp(self):
        env = patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop(TABLE_ENV_VAR, None)
        get_default_converter.cache_clear()
        self.addCleanup(get_default_converter.cache_clear)


class TestModuleFunctions(DefaultConverterTestCase):
    """Test case for the functions re-exported by the package."""

    def test_default_converter_is_shared(self):
        self.assertIs(get_default_converter(), get_default_converter())

    def test_conversions(self):
        result = iran_hijri.jalaali_to_hijri(1403, 9, 15)
        self.assertEqual(result.date, HijriDate(1446, 6, 4))
        self.assertEqual(result.source, Source.OFFICIAL)

        result = iran_hijri.hijri_to_gregorian(1446, 6, 3)
        self.assertEqual(result.date, GregorianDate(2024, 12, 4))
        self.assertEqual(iran_hijri.gregorian_to_hijri(2024, 12, 4).date, HijriDate(1446, 6, 3))
        self.assertEqual(iran_hijri.hijri_to_jalaali(1446, 6, 4).date.as_tuple(), (1403, 9, 15))

    def test_source_info(self):
        self.assertTrue(iran_hijri.get_source_info(1446).has_official_data)
        self.assertFalse(iran_hijri.get_source_info(1448, 12).has_official_data)

    def test_validators(self):
        self.assertFalse(iran_hijri.is_valid_gregorian_date(2024, 2, 30))
        self.assertFalse(iran_hijri.is_valid_hijri_date(1445, 13, 1))
        self.assertTrue(iran_hijri.is_valid_jalaali_date(1403, 9, 15))


class TestCompat(DefaultConverterTestCase):
    """Test case for to_hijri / to_gregorian."""

    def test_to_hijri(self):
        self.assertEqual(compat.to_hijri(2024, 12, 4), HijriDate(1446, 6, 3))

    def test_to_gregorian(self):
        self.assertEqual(compat.to_gregorian(1446, 6, 3), GregorianDate(2024, 12, 4))

    def test_roundtrip(self):
        hijri = compat.to_hijri(2025, 3, 1)
        self.assertEqual(compat.to_gregorian(*hijri.as_tuple()), GregorianDate(2025, 3, 1))


if __name__ == "__main__":
    unittest.main()
