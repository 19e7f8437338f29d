#
# This file is part of hidreport.
#

class HIDReportError(Exception):
    """ Base class for all errors raised by hidreport. """
    pass


class DecodeError(HIDReportError):
    """ Error indicating a report descriptor could not be fully decoded. """
    pass


class TruncatedItem(DecodeError):
    """ An item's declared payload runs past the end of the descriptor.

    Args:
        offset    : Index of the prefix byte of the dangling item.
        expected  : Number of bytes the item declares (prefix included).
        available : Number of bytes actually left in the buffer.
    """

    def __init__(self, offset, expected, available):
        self.offset    = offset
        self.expected  = expected
        self.available = available

        super().__init__(f"truncated item at offset {offset}: "
            f"needs {expected} bytes, only {available} available")


class DeviceNotFoundError(IOError):
    """ Error indicating a device was not found. """
    pass


class HIDDescriptorNotFoundError(HIDReportError):
    """ The interface carries no usable HID class descriptor. """
    pass


class DescriptorFetchError(HIDReportError):
    """ Reading the report descriptor from the device failed. """
    pass
