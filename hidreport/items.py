#
# This file is part of hidreport.
#
""" Gives meaning to raw items: tag identities and decoded values. """

# Support annotations on Python < 3.9
from __future__  import annotations

from dataclasses import dataclass

from .decoder import RawItem, decode_value
from .types   import HIDItemType, HIDMainTag, HIDGlobalTag, HIDLocalTag
from .types   import HIDCollection, SIGNED_GLOBAL_TAGS


@dataclass(frozen=True)
class DescriptorItem:
    """ A single decoded report descriptor item.

    At most one of main_tag, global_tag and local_tag is set, matching
    item_type. If none is set the tag code isn't one we know; the item
    still carries its raw bytes and codes so it can be displayed.
    """

    #: The exact bytes this item consumed from the descriptor.
    raw        : bytes

    #: The bType field of the prefix.
    item_type  : HIDItemType

    #: The bTag field of the prefix; for long items, the bLongItemTag.
    tag_code   : int

    main_tag   : HIDMainTag   | None = None
    global_tag : HIDGlobalTag | None = None
    local_tag  : HIDLocalTag  | None = None

    #: Decoded payload; sign-extended for signed global items.
    value      : int  = 0

    #: True for long (0xFE-prefixed) items.
    is_long    : bool = False

    @property
    def size(self) -> int:
        """ Length of the item's data, excluding any header bytes. """
        header = 3 if self.is_long else 1
        return len(self.raw) - header

    @property
    def tag(self):
        """ Whichever of the three tag fields is populated, or None. """

        # Can't rely on truthiness here: USAGE_PAGE and USAGE are both zero.
        for tag in (self.main_tag, self.global_tag, self.local_tag):
            if tag is not None:
                return tag

        return None

    @property
    def recognized(self) -> bool:
        return self.tag is not None

    @property
    def collection(self) -> HIDCollection | None:
        """ The collection kind, for Collection items. """
        if self.main_tag is not HIDMainTag.COLLECTION:
            return None
        return HIDCollection.from_value(self.value)

    def opens_collection(self) -> bool:
        return self.main_tag is HIDMainTag.COLLECTION

    def closes_collection(self) -> bool:
        return self.main_tag is HIDMainTag.END_COLLECTION


# Tag tables for each short item type.
_TAG_TABLES = {
    HIDItemType.MAIN:   HIDMainTag,
    HIDItemType.GLOBAL: HIDGlobalTag,
    HIDItemType.LOCAL:  HIDLocalTag,
}

_TAG_FIELDS = {
    HIDItemType.MAIN:   'main_tag',
    HIDItemType.GLOBAL: 'global_tag',
    HIDItemType.LOCAL:  'local_tag',
}


def _lookup_tag(item_type, tag_code):
    table = _TAG_TABLES.get(item_type)
    if table is None:
        return None

    try:
        return table(tag_code)
    except ValueError:
        return None


def interpret(raw: RawItem) -> DescriptorItem:
    """ Converts a RawItem into a DescriptorItem. Never raises. """

    data = bytes([raw.prefix])

    # Long items are reserved; we only keep their tag and bytes around.
    if raw.is_long:
        data += bytes([len(raw.payload), raw.long_tag]) + raw.payload
        return DescriptorItem(
            raw       = data,
            item_type = HIDItemType.RESERVED,
            tag_code  = raw.long_tag,
            value     = decode_value(raw.payload),
            is_long   = True,
        )

    data += raw.payload
    tag  = _lookup_tag(raw.item_type, raw.tag_code)

    signed = tag in SIGNED_GLOBAL_TAGS and raw.item_type == HIDItemType.GLOBAL
    fields = {_TAG_FIELDS[raw.item_type]: tag} if tag is not None else {}

    return DescriptorItem(
        raw       = data,
        item_type = raw.item_type,
        tag_code  = raw.tag_code,
        value     = decode_value(raw.payload, signed=signed),
        **fields
    )
