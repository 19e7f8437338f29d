#
# This file is part of hidreport.
#
""" Collection nesting depth, as used when rendering a descriptor.

The depth is a plain counter rather than a stack of collection kinds. It is
never clamped: an unmatched End Collection takes it below zero, and it
recovers once the descriptor balances again. Display code clamps it.
"""

from typing import Iterable, Iterator, Tuple

from .items import DescriptorItem


def depth_before(depth: int, item: DescriptorItem) -> int:
    """ Returns the depth an item is displayed at, given the depth before it. """
    if item.closes_collection():
        return depth - 1
    return depth


def depth_after(depth: int, item: DescriptorItem) -> int:
    """ Returns the depth following an item, given the depth it was displayed at. """
    if item.opens_collection():
        return depth + 1
    return depth


def iter_depths(items: Iterable[DescriptorItem]) -> Iterator[Tuple[DescriptorItem, int]]:
    """ Yields (item, depth) for each item, in order. """

    depth = 0
    for item in items:
        depth = depth_before(depth, item)
        yield item, depth
        depth = depth_after(depth, item)


def final_depth(items: Iterable[DescriptorItem]) -> int:
    """ Returns the depth left after the last item; zero for a balanced descriptor. """

    depth = 0
    for item in items:
        depth = depth_after(depth_before(depth, item), item)

    return depth
