#
# This file is part of hidreport.
#
""" Builds a complete Report from a raw report descriptor. """

# Support annotations on Python < 3.9
from __future__  import annotations

from dataclasses import dataclass
from typing      import Tuple

from .decoder import decode_raw_items
from .errors  import DecodeError
from .items   import DescriptorItem, interpret


@dataclass(frozen=True)
class Report:
    """ A decoded report descriptor.

    Items are kept in the order they appear in the descriptor. If decoding
    stopped early, `error` holds the reason and `items` holds everything
    decoded before it.
    """

    items : Tuple[DescriptorItem, ...] = ()
    error : DecodeError | None         = None

    @property
    def complete(self) -> bool:
        return self.error is None

    @property
    def raw(self) -> bytes:
        """ The concatenated bytes of every decoded item. """
        return b''.join(item.raw for item in self.items)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


def build_report(buffer: bytes) -> Report:
    """ Decodes a report descriptor into a Report.

    Never raises for malformed input; a truncated descriptor produces a
    Report whose `error` is set.
    """

    items = []

    try:
        for raw_item in decode_raw_items(buffer):
            items.append(interpret(raw_item))
    except DecodeError as e:
        return Report(items=tuple(items), error=e)

    return Report(items=tuple(items))
