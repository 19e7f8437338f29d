#
# This file is part of hidreport.
#
""" Locates HID devices via libusb and reads their report descriptors. """

# Support annotations on Python < 3.9
from __future__  import annotations

from dataclasses import dataclass, field
from typing      import Any, List, Tuple

import usb.core
import usb.util

from .errors  import DeviceNotFoundError, HIDDescriptorNotFoundError, DescriptorFetchError
from .logging import log


# bInterfaceClass for HID interfaces.
HID_CLASS_CODE = 3

# Class-specific descriptor types; from HID1.11 [7.1].
HID_DESCRIPTOR_TYPE    = 0x21
REPORT_DESCRIPTOR_TYPE = 0x22

# GET_DESCRIPTOR, as a standard request directed at an interface.
REQUEST_TYPE_IN_STANDARD_INTERFACE = 0x81
GET_DESCRIPTOR = 0x06

TRANSFER_TIMEOUT_MS = 1000


@dataclass
class HIDDeviceInfo:
    """ Summary of a HID-capable device, as shown to the user when choosing one. """

    index         : int
    vendor_id     : int
    product_id    : int
    serial_number : str | None = None
    manufacturer  : str | None = None
    product_name  : str | None = None

    #: The underlying pyusb device.
    device        : Any = field(default=None, repr=False, compare=False)

    def vidpid(self):
        return f"{self.vendor_id:04x}:{self.product_id:04x}"

    def __str__(self):
        return (f"{self.index} {self.vidpid()} [SN: {self.serial_number}] "
            f"[Manu: {self.manufacturer}] [Name: {self.product_name}]")


def _first_configuration(device):
    try:
        return device[0]
    except (usb.core.USBError, IndexError) as e:
        log.debug(f"could not read configuration of {device.idVendor:04x}:{device.idProduct:04x}: {e}")
        return None


def hid_interfaces(device):
    """ Returns the HID interfaces of the device's first configuration. """

    configuration = _first_configuration(device)
    if configuration is None:
        return []

    return [interface for interface in configuration
        if interface.bInterfaceClass == HID_CLASS_CODE]


def is_hid_device(device):
    """ Returns true iff any interface of the device's first configuration is a HID interface. """
    return bool(hid_interfaces(device))


def _read_string(device, index):
    """ Reads a string descriptor; any failure is treated as there being no string. """

    if not index:
        return None

    try:
        return usb.util.get_string(device, index)
    except (usb.core.USBError, ValueError, NotImplementedError) as e:
        log.debug(f"could not read string {index} from {device.idVendor:04x}:{device.idProduct:04x}: {e}")
        return None


def find_hid_devices(**kwargs) -> List[HIDDeviceInfo]:
    """ Enumerates attached HID devices.

    Args:
        kwargs : Additional pyusb match criteria, such as idVendor / idProduct.
    """

    devices = usb.core.find(find_all=True, custom_match=is_hid_device, **kwargs)

    found = []
    for index, device in enumerate(devices):
        info = HIDDeviceInfo(
            index         = index,
            vendor_id     = device.idVendor,
            product_id    = device.idProduct,
            serial_number = _read_string(device, device.iSerialNumber),
            manufacturer  = _read_string(device, device.iManufacturer),
            product_name  = _read_string(device, device.iProduct),
            device        = device,
        )
        log.debug(f"found HID device {info.vidpid()}")
        found.append(info)

    return found


def select_device(devices, index):
    """ Returns the device with the given index, or raises DeviceNotFoundError. """

    for info in devices:
        if info.index == index:
            return info

    raise DeviceNotFoundError(f"no HID device with index {index}")


def parse_hid_class_descriptor(extra) -> List[Tuple[int, int]]:
    """ Extracts the (bDescriptorType, wDescriptorLength) entries of a HID class descriptor.

    Args:
        extra : The class-specific bytes that follow an interface descriptor.
    """

    extra  = bytes(extra)
    offset = 0

    # Walk the descriptor chain until we find the HID descriptor.
    while offset + 2 <= len(extra):
        length, descriptor_type = extra[offset], extra[offset + 1]

        if length < 2:
            raise HIDDescriptorNotFoundError(f"invalid descriptor length {length} at offset {offset}")

        if descriptor_type == HID_DESCRIPTOR_TYPE:
            descriptor = extra[offset:offset + length]

            # bLength, bDescriptorType, bcdHID, bCountryCode, bNumDescriptors; then three bytes per entry.
            if len(descriptor) < 6:
                raise HIDDescriptorNotFoundError("HID descriptor is truncated")

            count   = descriptor[5]
            entries = []
            for i in range(count):
                start = 6 + (i * 3)
                entry = descriptor[start:start + 3]
                if len(entry) < 3:
                    raise HIDDescriptorNotFoundError("HID descriptor is truncated")

                entries.append((entry[0], int.from_bytes(entry[1:3], byteorder='little')))

            return entries

        offset += length

    raise HIDDescriptorNotFoundError("no HID descriptor found")


def report_descriptor_length(extra) -> int:
    """ Returns the declared length of the report descriptor described in `extra`. """

    for descriptor_type, length in parse_hid_class_descriptor(extra):
        if descriptor_type == REPORT_DESCRIPTOR_TYPE:
            return length

    raise HIDDescriptorNotFoundError("HID descriptor declares no report descriptor")


def get_report_descriptor(device, interface=None, detach_kernel_driver=False) -> bytes:
    """ Reads the raw report descriptor from a HID device.

    Args:
        device               : The pyusb device to read from.
        interface            : The interface number to read; or None for the first HID interface.
        detach_kernel_driver : If true, temporarily detach any kernel driver bound to the
                               interface while reading.
    """

    interfaces = hid_interfaces(device)
    if interface is not None:
        interfaces = [i for i in interfaces if i.bInterfaceNumber == interface]

    if not interfaces:
        raise HIDDescriptorNotFoundError("device has no matching HID interface")

    target = interfaces[0]
    number = target.bInterfaceNumber
    length = report_descriptor_length(target.extra_descriptors)

    log.debug(f"reading {length}-byte report descriptor from interface {number}")

    detached = False
    try:
        if detach_kernel_driver and device.is_kernel_driver_active(number):
            device.detach_kernel_driver(number)
            detached = True

        data = device.ctrl_transfer(
            REQUEST_TYPE_IN_STANDARD_INTERFACE,
            GET_DESCRIPTOR,
            REPORT_DESCRIPTOR_TYPE << 8,
            number,
            length,
            TRANSFER_TIMEOUT_MS,
        )
    except usb.core.USBError as e:
        raise DescriptorFetchError(f"could not read report descriptor: {e}") from e
    finally:
        if detached:
            try:
                device.attach_kernel_driver(number)
            except usb.core.USBError as e:
                log.warning(f"could not reattach kernel driver to interface {number}: {e}")

    data = bytes(data)
    log.trace(f"read report descriptor: {data.hex()}")

    if len(data) != length:
        log.warning(f"device returned {len(data)} bytes; expected {length}")

    return data
