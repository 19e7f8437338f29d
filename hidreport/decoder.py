#
# This file is part of hidreport.
#
""" Splits a raw report descriptor into its individual items. """

# Support annotations on Python < 3.9
from __future__  import annotations

from dataclasses import dataclass
from typing      import Iterator

from .errors import TruncatedItem
from .types  import HIDItemType, ITEM_SIZES, LONG_ITEM_PREFIX


@dataclass(frozen=True)
class RawItem:
    """ One undecoded item, exactly as it appeared in the descriptor. """

    #: Offset of the prefix byte within the descriptor.
    offset  : int

    #: The item's prefix byte.
    prefix  : int

    #: The item's data bytes; for long items, only the data after the tag.
    payload : bytes

    #: For long items, the bLongItemTag byte.
    long_tag : int | None = None

    @property
    def is_long(self) -> bool:
        return self.long_tag is not None

    @property
    def tag_code(self) -> int:
        return self.prefix >> 4

    @property
    def type_code(self) -> int:
        return (self.prefix >> 2) & 0b11

    @property
    def item_type(self) -> HIDItemType:
        return HIDItemType.from_prefix(self.prefix)

    @property
    def size_code(self) -> int:
        return self.prefix & 0b11

    @property
    def consumed_len(self) -> int:
        # Long items carry an extra bDataSize and bLongItemTag byte.
        header = 3 if self.is_long else 1
        return header + len(self.payload)


def decode_raw_items(buffer: bytes) -> Iterator[RawItem]:
    """ Yields each item in a report descriptor, in order.

    Every complete item is yielded before a TruncatedItem is raised for an
    item whose declared length runs past the end of the buffer, so callers
    keep everything decoded up to the failure.
    """

    buffer = bytes(buffer)
    offset = 0

    while offset < len(buffer):
        prefix    = buffer[offset]
        available = len(buffer) - offset

        if prefix == LONG_ITEM_PREFIX:

            # A long item needs its size and tag bytes before we know its length.
            if available < 3:
                raise TruncatedItem(offset, expected=3, available=available)

            data_size = buffer[offset + 1]
            long_tag  = buffer[offset + 2]
            length    = 3 + data_size

            if available < length:
                raise TruncatedItem(offset, expected=length, available=available)

            yield RawItem(offset, prefix, buffer[offset + 3:offset + length], long_tag)

        else:
            length = 1 + ITEM_SIZES[prefix & 0b11]

            if available < length:
                raise TruncatedItem(offset, expected=length, available=available)

            yield RawItem(offset, prefix, buffer[offset + 1:offset + length])

        offset += length


def decode_value(payload: bytes, signed: bool = False) -> int:
    """ Interprets a little-endian item payload; an empty payload means zero. """
    return int.from_bytes(payload, byteorder='little', signed=signed)
