# Core types.
from .decoder import RawItem, decode_raw_items, decode_value
from .items   import DescriptorItem, interpret
from .report  import Report, build_report
from .render  import render, render_bytes, describe

# Raw types.
from .types   import HIDItemType, HIDMainTag, HIDGlobalTag, HIDLocalTag, HIDCollection
from .usage   import HIDUsagePage, HIDGenericDesktopUsage

# Errors.
from .errors  import HIDReportError, DecodeError, TruncatedItem

# Wildcard import.
__all__ = [
    'RawItem', 'decode_raw_items', 'decode_value', 'DescriptorItem', 'interpret',
    'Report', 'build_report', 'render', 'render_bytes', 'describe',
    'HIDItemType', 'HIDMainTag', 'HIDGlobalTag', 'HIDLocalTag', 'HIDCollection',
    'HIDUsagePage', 'HIDGenericDesktopUsage',
    'HIDReportError', 'DecodeError', 'TruncatedItem',
]
