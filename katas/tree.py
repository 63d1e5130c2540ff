"""Binary trees and minimum-difference queries over binary search trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

# Values are bounded by 0 <= val <= 10**5, so these sentinels never win.
_START_PREVIOUS = -1_000_000
_START_MINIMUM = 1_000_000


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def in_order(self) -> Iterator[int]:
        """Yield the values of this subtree in in-order sequence."""
        if self.left is not None:
            yield from self.left.in_order()
        yield self.val
        if self.right is not None:
            yield from self.right.in_order()


def _min_gap(root: Optional[TreeNode]) -> int:
    previous = _START_PREVIOUS
    minimum = _START_MINIMUM
    if root is not None:
        for value in root.in_order():
            minimum = min(minimum, value - previous)
            previous = value
    return minimum


def minimum_difference(root: Optional[TreeNode]) -> int:
    """Smallest difference between any two values of a binary search tree."""
    return _min_gap(root)


def min_diff_in_bst(root: Optional[TreeNode]) -> int:
    """Smallest difference between two nodes of a binary search tree."""
    return _min_gap(root)