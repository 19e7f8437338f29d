#
# This file is part of hidreport.
#
""" Formats a decoded Report as an annotated, indented listing. """

from typing import List

from .items   import DescriptorItem
from .nesting import iter_depths
from .report  import Report
from .types   import HIDItemType, HIDMainTag, HIDGlobalTag, HIDLocalTag
from .types   import HIDCollection, HIDMainFlags
from .usage   import usage_page_name, usage_name


# Columns taken up by each displayed byte: "0x05, ".
BYTE_COLUMNS = 6

# Columns of indentation per level of collection nesting.
INDENT_COLUMNS = 2

COMMENT_MARKER = "// "

# Items whose values are identifiers, and so read best in hex.
_HEX_TAGS = {
    (HIDItemType.GLOBAL, HIDGlobalTag.USAGE_PAGE),
    (HIDItemType.GLOBAL, HIDGlobalTag.UNIT),
    (HIDItemType.LOCAL,  HIDLocalTag.USAGE),
    (HIDItemType.LOCAL,  HIDLocalTag.USAGE_MINIMUM),
    (HIDItemType.LOCAL,  HIDLocalTag.USAGE_MAXIMUM),
}

# Items whose payload, if any, carries no meaning.
_VALUELESS_TAGS = {
    (HIDItemType.GLOBAL, HIDGlobalTag.PUSH),
    (HIDItemType.GLOBAL, HIDGlobalTag.POP),
}

_COLLECTION_NAMES = {
    HIDCollection.PHYSICAL:       "Physical",
    HIDCollection.APPLICATION:    "Application",
    HIDCollection.LOGICAL:        "Logical",
    HIDCollection.REPORT:         "Report",
    HIDCollection.NAMED_ARRAY:    "Named Array",
    HIDCollection.USAGE_SWITCH:   "Usage Switch",
    HIDCollection.USAGE_MODIFIER: "Usage Modifier",
}

# Names that don't survive a simple title-casing of the enum member.
_TAG_NAMES = {
    HIDGlobalTag.REPORT_ID: "Report ID",
}


def tag_name(tag):
    """ Returns the display name for a main, global or local tag. """
    if isinstance(tag, HIDGlobalTag) and tag in _TAG_NAMES:
        return _TAG_NAMES[tag]
    return tag.name.replace('_', ' ').title()


def _hex(value, size):
    digits = max(2, size * 2)
    return f"0x{value:0{digits}X}"


def describe_main_flags(tag, flags):
    """ Describes the bitfield carried by an Input, Output or Feature item. """

    variable = HIDMainFlags.VARIABLE.is_set(flags)

    fields = [
        "Constant" if HIDMainFlags.CONSTANT.is_set(flags) else "Data",
        "Variable" if variable                            else "Array",
        "Relative" if HIDMainFlags.RELATIVE.is_set(flags) else "Absolute",
    ]

    # The remaining bits only mean something for variable items.
    if variable:
        fields += [
            "Wrap"               if HIDMainFlags.WRAP.is_set(flags)         else "No Wrap",
            "Non Linear"         if HIDMainFlags.NONLINEAR.is_set(flags)    else "Linear",
            "No Preferred State" if HIDMainFlags.NO_PREFERRED.is_set(flags) else "Preferred State",
            "Null State"         if HIDMainFlags.NULL_STATE.is_set(flags)   else "No Null Position",
        ]

        # Bit 7 is reserved on Input items.
        if tag != HIDMainTag.INPUT:
            fields.append("Volatile" if HIDMainFlags.VOLATILE.is_set(flags) else "Non Volatile")

        fields.append("Buffered Bytes" if HIDMainFlags.BUFFERED_BYTES.is_set(flags) else "Bit Field")

    return ", ".join(fields)


def describe_collection(item):
    kind = item.collection

    if kind is HIDCollection.VENDOR:
        return f"Vendor Defined {_hex(item.value, item.size)}"
    if kind is HIDCollection.RESERVED:
        return f"Reserved {_hex(item.value, item.size)}"

    return _COLLECTION_NAMES[kind]


def _describe_unrecognized(item):
    if item.is_long:
        return f"Long Item (tag {_hex(item.tag_code, 1)}, {item.size} bytes)"

    text = (f"Unknown {item.item_type.name.title()} item "
        f"(type {int(item.item_type)}, tag {_hex(item.tag_code, 1)})")

    if item.size:
        text += f" = {_hex(item.value, item.size)}"

    return text


def _describe_usage(item, usage_page):

    # Four-byte usages carry their own usage page in the upper half.
    if item.size == 4:
        usage_page = item.value >> 16
        usage      = item.value & 0xFFFF
    else:
        usage = item.value

    if usage_page is None:
        return None

    return usage_name(usage_page, usage)


def describe(item: DescriptorItem, usage_page=None) -> str:
    """ Returns the annotation text for a single item.

    Args:
        item       : The item to describe.
        usage_page : The usage page in effect, if known; used to name usages.
    """

    if not item.recognized:
        return _describe_unrecognized(item)

    if item.main_tag is not None:
        if item.main_tag.is_io():
            return f"{tag_name(item.main_tag)} ({describe_main_flags(item.main_tag, item.value)})"
        if item.main_tag is HIDMainTag.COLLECTION:
            return f"Collection ({describe_collection(item)})"
        return tag_name(item.main_tag)

    key  = (item.item_type, item.tag)
    name = tag_name(item.tag)

    if key in _VALUELESS_TAGS:
        return name

    if key not in _HEX_TAGS:
        return f"{name} = {item.value}"

    text = f"{name} = {_hex(item.value, item.size)}"

    if item.global_tag is HIDGlobalTag.USAGE_PAGE:
        label = usage_page_name(item.value)
    elif item.local_tag is not None:
        label = _describe_usage(item, usage_page)
    else:
        label = None

    if label:
        text += f" ({label})"

    return text


def _track_usage_page(item, usage_page, stack):
    """ Returns the usage page in effect after the given item. """

    if item.global_tag is HIDGlobalTag.USAGE_PAGE:
        return item.value
    if item.global_tag is HIDGlobalTag.PUSH:
        stack.append(usage_page)
    elif item.global_tag is HIDGlobalTag.POP and stack:
        return stack.pop()

    return usage_page


def format_item_bytes(item: DescriptorItem) -> str:
    return "".join(f"{byte:#04x}, " for byte in item.raw)


def render(report: Report) -> str:
    """ Renders a Report as one annotated line per item.

    Each line shows the item's bytes, padded so the annotations line up,
    followed by the annotation indented by collection depth. A depth driven
    below zero by an unmatched End Collection is displayed as zero.
    """

    max_len = max((len(item.raw) for item in report.items), default=0)

    lines : List[str] = []
    usage_page = None
    page_stack = []

    for item, depth in iter_depths(report.items):
        padding = " " * ((max_len - len(item.raw)) * BYTE_COLUMNS)
        indent  = " " * (max(depth, 0) * INDENT_COLUMNS)

        lines.append(f"{format_item_bytes(item)}{padding}{COMMENT_MARKER}{indent}{describe(item, usage_page)}")

        usage_page = _track_usage_page(item, usage_page, page_stack)

    return "\n".join(lines)


def render_bytes(buffer: bytes) -> str:
    """ Renders a flat dump of a raw descriptor: "0x05 0x01 ...". """
    return " ".join(f"0x{byte:02X}" for byte in buffer)
