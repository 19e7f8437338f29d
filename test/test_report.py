#
# This file is part of hidreport.
#

import unittest

from hidreport.errors import TruncatedItem
from hidreport.report import Report, build_report
from hidreport.types  import HIDItemType, HIDMainTag, HIDCollection


# Boot protocol mouse, from HID1.11 [Appendix B.2].
BOOT_MOUSE = bytes.fromhex(
    '05 01 09 02 a1 01 09 01 a1 00 05 09 19 01 29 03'
    '15 00 25 01 95 03 75 01 81 02 95 01 75 05 81 01'
    '05 01 09 30 09 31 15 81 25 7f 75 08 95 02 81 06'
    'c0 c0'
)


class TestBuildReport(unittest.TestCase):

    def test_empty_descriptor(self):
        report = build_report(b'')

        self.assertEqual(len(report), 0)
        self.assertTrue(report.complete)
        self.assertEqual(report.raw, b'')

    def test_mouse_application_collection(self):
        report = build_report(bytes.fromhex('05010902a101c0'))

        self.assertTrue(report.complete)
        self.assertEqual(len(report), 4)
        self.assertEqual(report[2].collection, HIDCollection.APPLICATION)
        self.assertIs(report[3].main_tag, HIDMainTag.END_COLLECTION)

    def test_items_cover_input(self):
        report = build_report(BOOT_MOUSE)

        self.assertTrue(report.complete)
        self.assertEqual(sum(len(item.raw) for item in report), len(BOOT_MOUSE))
        self.assertEqual(report.raw, BOOT_MOUSE)

    def test_items_follow_input_order(self):
        report = build_report(BOOT_MOUSE)

        position = 0
        for item in report:
            self.assertEqual(item.raw, BOOT_MOUSE[position:position + len(item.raw)])
            position += len(item.raw)

    def test_truncated_descriptor(self):
        report = build_report(bytes([0x05, 0x01, 0x09, 0x02, 0x26, 0xFF]))

        self.assertFalse(report.complete)
        self.assertIsInstance(report.error, TruncatedItem)
        self.assertEqual(report.error.offset, 4)
        self.assertEqual(len(report), 2)
        self.assertEqual(report.raw, bytes([0x05, 0x01, 0x09, 0x02]))

    def test_unbalanced_collections_are_accepted(self):
        report = build_report(bytes([0xC0, 0xC0, 0xA1, 0x01]))

        self.assertTrue(report.complete)
        self.assertEqual(len(report), 3)

    def test_long_item(self):
        report = build_report(bytes([0xFE, 0x02, 0x01, 0xAA, 0xBB]))

        self.assertEqual(len(report), 1)
        self.assertTrue(report[0].is_long)
        self.assertEqual(report[0].item_type, HIDItemType.RESERVED)
        self.assertEqual(len(report[0].raw), 5)

    def test_report_is_immutable(self):
        report = build_report(b'\xc0')

        self.assertIsInstance(report, Report)
        with self.assertRaises(AttributeError):
            report.items = ()


if __name__ == "__main__":
    unittest.main()
