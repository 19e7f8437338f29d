#
# This file is part of hidreport.
#
""" Command-line front-end: pick a HID device and dump its report descriptor. """

import os
import re
import sys
import argparse

from html import escape

from prompt_toolkit import HTML, print_formatted_text, prompt

from .device  import find_hid_devices, get_report_descriptor, select_device
from .errors  import HIDReportError, DeviceNotFoundError
from .logging import configure_default_logging, verbosity_to_level, log
from .nesting import final_depth
from .render  import render, render_bytes
from .report  import build_report


def print_html(data):
    print_formatted_text(HTML(data))


def parse_hex(text):
    """ Converts hex text such as "05 01 09 02" or "0x05, 0x01" into bytes. """
    cleaned = re.sub(r"0[xX]", "", text)
    cleaned = re.sub(r"[\s,]", "", cleaned)
    return bytes.fromhex(cleaned)


def _hex_int(value):
    return int(value, 16)


def _env_hex(name):
    value = os.environ.get(name)
    return _hex_int(value) if value else None


def build_argument_parser():
    parser = argparse.ArgumentParser(description="Decode and display USB HID report descriptors.")
    parser.add_argument('--list', action='store_true', help="List HID devices and exit.")
    parser.add_argument('-d', '--device', type=int, help="Index of the device to read; prompts if omitted.")
    parser.add_argument('-i', '--interface', type=int, help="HID interface number to read; defaults to the first.")
    parser.add_argument('--vid', type=_hex_int, default=_env_hex('HIDREPORT_VID'),
        help="Only consider devices with this vendor ID (hex). Defaults to $HIDREPORT_VID.")
    parser.add_argument('--pid', type=_hex_int, default=_env_hex('HIDREPORT_PID'),
        help="Only consider devices with this product ID (hex). Defaults to $HIDREPORT_PID.")
    parser.add_argument('--detach', action='store_true', help="Temporarily detach the kernel driver while reading.")
    parser.add_argument('--hex', help="Decode a descriptor given as hex text instead of reading a device.")
    parser.add_argument('--file', help="Decode a descriptor read from a binary file instead of a device.")
    parser.add_argument('-v', '--verbose', type=int, default=3, help="Controls verbosity. 0=silent, 3=default, 5=spammy")
    return parser


def print_devices(devices):
    for info in devices:
        print_html(escape(str(info)))


def choose_device(devices, index=None):
    """ Returns the chosen device; prompting for an index if none was given. """

    if index is None:
        answer = prompt("Select device to read HID descriptor from: ")
        try:
            index = int(answer.strip())
        except ValueError:
            raise DeviceNotFoundError(f"invalid selection: {answer!r}") from None

    return select_device(devices, index)


def read_from_device(args):
    """ Reads a descriptor from a connected device; returns None if there's nothing to read. """

    filters = {}
    if args.vid is not None:
        filters['idVendor'] = args.vid
    if args.pid is not None:
        filters['idProduct'] = args.pid

    devices = find_hid_devices(**filters)
    if not devices:
        print("No USB HID devices found.")
        return None

    print_devices(devices)
    if args.list:
        return None

    info = choose_device(devices, args.device)
    log.info(f"Reading report descriptor from {info.vidpid()}.")

    return get_report_descriptor(info.device, interface=args.interface, detach_kernel_driver=args.detach)


def dump_descriptor(data):
    """ Prints a descriptor and its decoding; returns the process exit status. """

    print_html("\n<b>USB HID report descriptor bytes:</b>")
    print(render_bytes(data))

    report = build_report(data)

    print_html("\n<b>USB HID report descriptor:</b>")
    if report.items:
        print(render(report))

    depth = final_depth(report.items)
    if depth:
        log.warning(f"Collections are unbalanced; final nesting depth is {depth}.")

    if not report.complete:
        log.error(f"Decoding stopped early: {report.error}")
        return 1

    return 0


def main(argv=None):
    args = build_argument_parser().parse_args(argv)

    configure_default_logging(level=verbosity_to_level(args.verbose))

    try:
        if args.hex is not None:
            data = parse_hex(args.hex)
        elif args.file is not None:
            with open(args.file, 'rb') as f:
                data = f.read()
        else:
            data = read_from_device(args)
            if data is None:
                return 0

    except (HIDReportError, ValueError, OSError) as e:
        log.error(f"Error reading HID descriptor: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        return 1

    return dump_descriptor(data)


if __name__ == "__main__":
    sys.exit(main())
