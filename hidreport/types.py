#
# This file is part of hidreport.
#
""" HID item types -- enumerations describing the tag grammar of report descriptors. """

from enum import IntEnum


#: Prefix byte that introduces a long item; HID1.11 [6.2.2.3].
LONG_ITEM_PREFIX = 0xFE

#: Maps an item's two-bit size code onto its payload length, in bytes.
ITEM_SIZES = (0, 1, 2, 4)


class HIDItemType(IntEnum):
    """ The bType field of an item prefix; from HID1.11 [6.2.2.2]. """
    MAIN     = 0
    GLOBAL   = 1
    LOCAL    = 2
    RESERVED = 3

    @classmethod
    def from_prefix(cls, prefix):
        """ Helper method that extracts the item type from a prefix byte. """
        return cls((prefix >> 2) & 0b11)


class HIDMainTag(IntEnum):
    """ Main item tags; from HID1.11 [6.2.2.4]. """
    INPUT          = 0b1000
    OUTPUT         = 0b1001
    COLLECTION     = 0b1010
    FEATURE        = 0b1011
    END_COLLECTION = 0b1100

    def is_io(self):
        """ Returns true iff this tag describes a report field. """
        return self in (self.INPUT, self.OUTPUT, self.FEATURE)


class HIDGlobalTag(IntEnum):
    """ Global item tags; from HID1.11 [6.2.2.7]. """
    USAGE_PAGE       = 0b0000
    LOGICAL_MINIMUM  = 0b0001
    LOGICAL_MAXIMUM  = 0b0010
    PHYSICAL_MINIMUM = 0b0011
    PHYSICAL_MAXIMUM = 0b0100
    UNIT_EXPONENT    = 0b0101
    UNIT             = 0b0110
    REPORT_SIZE      = 0b0111
    REPORT_ID        = 0b1000
    REPORT_COUNT     = 0b1001
    PUSH             = 0b1010
    POP              = 0b1011


class HIDLocalTag(IntEnum):
    """ Local item tags; from HID1.11 [6.2.2.8]. """
    USAGE              = 0b0000
    USAGE_MINIMUM      = 0b0001
    USAGE_MAXIMUM      = 0b0010
    DESIGNATOR_INDEX   = 0b0011
    DESIGNATOR_MINIMUM = 0b0100
    DESIGNATOR_MAXIMUM = 0b0101
    STRING_INDEX       = 0b0111
    STRING_MINIMUM     = 0b1000
    STRING_MAXIMUM     = 0b1001
    DELIMITER          = 0b1010


# Global items whose payload is a two's complement number.
SIGNED_GLOBAL_TAGS = frozenset({
    HIDGlobalTag.LOGICAL_MINIMUM,
    HIDGlobalTag.LOGICAL_MAXIMUM,
    HIDGlobalTag.PHYSICAL_MINIMUM,
    HIDGlobalTag.PHYSICAL_MAXIMUM,
    HIDGlobalTag.UNIT_EXPONENT,
})


class HIDCollection(IntEnum):
    """ HID collection kinds; from HID1.11 [6.2.2.6].

    Values 0x07-0x7F are reserved and 0x80 upwards are vendor-defined; those
    map onto RESERVED and VENDOR respectively, with the raw byte kept by
    the item that carried it.
    """
    PHYSICAL       = 0x00
    APPLICATION    = 0x01
    LOGICAL        = 0x02
    REPORT         = 0x03
    NAMED_ARRAY    = 0x04
    USAGE_SWITCH   = 0x05
    USAGE_MODIFIER = 0x06
    RESERVED       = 0x07
    VENDOR         = 0x80

    @classmethod
    def from_value(cls, value):
        """ Special factory that correctly handles reserved and vendor values. """

        if value >= cls.VENDOR:
            return cls.VENDOR

        if value >= cls.RESERVED:
            return cls.RESERVED

        return cls(value)


class HIDMainFlags(IntEnum):
    """ Bit positions within an Input/Output/Feature payload; HID1.11 [6.2.2.5]. """
    CONSTANT       = 0
    VARIABLE       = 1
    RELATIVE       = 2
    WRAP           = 3
    NONLINEAR      = 4
    NO_PREFERRED   = 5
    NULL_STATE     = 6
    VOLATILE       = 7
    BUFFERED_BYTES = 8

    def is_set(self, flags):
        return bool(flags & (1 << self))
