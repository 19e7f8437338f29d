#
# This file is part of hidreport.
#

import io
import os
import tempfile
import unittest

from contextlib    import redirect_stdout
from unittest.mock import patch

from hidreport     import cli
from hidreport.device import HIDDeviceInfo


MOUSE_REPORT_DESCRIPTOR = bytes.fromhex('05010902a101c0')


class CLITestCase(unittest.TestCase):

    def setUp(self):
        # Keep prompt_toolkit away from the (non-terminal) test output.
        self.headers = []
        patcher = patch.object(cli, 'print_html', side_effect=self.headers.append)
        patcher.start()
        self.addCleanup(patcher.stop)

        # Leave the hidreport logger alone, so assertLogs sees every record.
        patcher = patch.object(cli, 'configure_default_logging')
        self.configure_default_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def run_main(self, *argv):
        output = io.StringIO()
        with redirect_stdout(output):
            status = cli.main(list(argv))
        return status, output.getvalue()


class TestParseHex(unittest.TestCase):

    def test_formats(self):
        self.assertEqual(cli.parse_hex("05 01 09 02"), b'\x05\x01\x09\x02')
        self.assertEqual(cli.parse_hex("0x05, 0x01,\n0xA1"), b'\x05\x01\xa1')
        self.assertEqual(cli.parse_hex("0X050X01"), b'\x05\x01')
        self.assertEqual(cli.parse_hex(""), b'')

    def test_invalid(self):
        with self.assertRaises(ValueError):
            cli.parse_hex("zz")


class TestOfflineDecoding(CLITestCase):

    def test_hex_argument(self):
        status, output = self.run_main('--hex', '05 01 09 02 a1 01 c0')

        self.assertEqual(status, 0)
        self.assertIn("0x05 0x01 0x09 0x02 0xA1 0x01 0xC0", output)
        self.assertIn("0xa1, 0x01, // Collection (Application)", output)
        self.assertIn("0xc0,       // End Collection", output)
        self.assertIn("\n<b>USB HID report descriptor:</b>", self.headers)

    def test_file_argument(self):
        with tempfile.NamedTemporaryFile(delete=False) as f:
            f.write(MOUSE_REPORT_DESCRIPTOR)
        self.addCleanup(os.unlink, f.name)

        status, output = self.run_main('--file', f.name)

        self.assertEqual(status, 0)
        self.assertIn("// Usage = 0x02 (Mouse)", output)

    def test_truncated_descriptor(self):
        with self.assertLogs('hidreport', level='ERROR') as logs:
            status, output = self.run_main('--hex', '05 01 26 ff')

        self.assertEqual(status, 1)
        self.assertIn("Usage Page = 0x01", output)
        self.assertIn("offset 2", "\n".join(logs.output))

    def test_unbalanced_collections_warn(self):
        with self.assertLogs('hidreport', level='WARNING') as logs:
            status, _ = self.run_main('--hex', 'a1 01 09 30')

        self.assertEqual(status, 0)
        self.assertIn("unbalanced", "\n".join(logs.output))

    def test_verbosity_sets_log_level(self):
        self.run_main('-v', '5', '--hex', 'c0')
        self.configure_default_logging.assert_called_once_with(level=5)

        self.configure_default_logging.reset_mock()
        self.run_main('-v', '0', '--hex', 'c0')
        self.configure_default_logging.assert_called_once_with(level=50)

    def test_invalid_hex(self):
        with self.assertLogs('hidreport', level='ERROR'):
            status, _ = self.run_main('--hex', 'not hex')

        self.assertEqual(status, 1)

    def test_missing_file(self):
        with self.assertLogs('hidreport', level='ERROR'):
            status, _ = self.run_main('--file', '/nonexistent/descriptor.bin')

        self.assertEqual(status, 1)


class TestDeviceSelection(CLITestCase):

    def setUp(self):
        super().setUp()

        self.devices = [
            HIDDeviceInfo(0, 0x046d, 0xc077, None, "Logitech", "USB Optical Mouse", device="mouse"),
            HIDDeviceInfo(1, 0x1209, 0x0001, "1234", None, "Keyboard", device="keyboard"),
        ]

        for name, kwargs in (
                ('find_hid_devices',      dict(return_value=self.devices)),
                ('get_report_descriptor', dict(return_value=MOUSE_REPORT_DESCRIPTOR))):
            patcher = patch.object(cli, name, **kwargs)
            setattr(self, name, patcher.start())
            self.addCleanup(patcher.stop)

    def test_no_devices(self):
        self.find_hid_devices.return_value = []

        status, output = self.run_main()

        self.assertEqual(status, 0)
        self.assertIn("No USB HID devices found.", output)
        self.get_report_descriptor.assert_not_called()

    def test_list_only(self):
        status, _ = self.run_main('--list')

        self.assertEqual(status, 0)
        self.assertIn("0 046d:c077 [SN: None] [Manu: Logitech] [Name: USB Optical Mouse]", self.headers)
        self.get_report_descriptor.assert_not_called()

    def test_device_argument(self):
        status, output = self.run_main('--device', '1', '--interface', '0', '--detach')

        self.assertEqual(status, 0)
        self.get_report_descriptor.assert_called_once_with("keyboard", interface=0, detach_kernel_driver=True)
        self.assertIn("// Collection (Application)", output)

    def test_vendor_and_product_filters(self):
        self.run_main('--vid', '046d', '--pid', 'c077', '--device', '0')

        self.find_hid_devices.assert_called_once_with(idVendor=0x046d, idProduct=0xc077)

    def test_filters_from_environment(self):
        with patch.dict(os.environ, {'HIDREPORT_VID': '1209'}):
            self.run_main('--device', '1')

        self.find_hid_devices.assert_called_once_with(idVendor=0x1209)

    def test_interactive_selection(self):
        with patch.object(cli, 'prompt', return_value=" 0\n") as prompt:
            status, _ = self.run_main()

        self.assertEqual(status, 0)
        prompt.assert_called_once()
        self.get_report_descriptor.assert_called_once_with("mouse", interface=None, detach_kernel_driver=False)

    def test_invalid_selection(self):
        with patch.object(cli, 'prompt', return_value="mouse"):
            with self.assertLogs('hidreport', level='ERROR'):
                status, _ = self.run_main()

        self.assertEqual(status, 1)
        self.get_report_descriptor.assert_not_called()

    def test_out_of_range_selection(self):
        with self.assertLogs('hidreport', level='ERROR'):
            status, _ = self.run_main('--device', '7')

        self.assertEqual(status, 1)


if __name__ == "__main__":
    unittest.main()
