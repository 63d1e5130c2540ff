"""Array puzzles: pair sums, in-place compaction, searching and merging."""

from __future__ import annotations

from bisect import bisect_left
from heapq import merge
from itertools import groupby


def two_sum(nums: list[int], target: int) -> list[int]:
    """Indices [i, j] of two distinct positions summing to target, or [] if none.

    i is the smallest index that has a partner; j is that partner's first index.
    """
    first_two: dict[int, list[int]] = {}
    for index, value in enumerate(nums):
        positions = first_two.setdefault(value, [])
        if len(positions) < 2:
            positions.append(index)
    for i, value in enumerate(nums):
        partners = [j for j in first_two.get(target - value, ()) if j != i]
        if partners:
            return [i, partners[0]]
    return []


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of sorted nums to its front and return their count.

    Items after the returned count are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every occurrence of val from nums in place and return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def _find(nums: list[int], target: int, lo: int, hi: int) -> int:
    index = bisect_left(nums, target, lo, hi)
    return index if index < hi and nums[index] == target else -1


def search_rotated(nums: list[int], target: int) -> int:
    """Index of target in a rotated ascending list of distinct values, or -1."""
    if not nums:
        return -1
    last = nums[-1]
    lo, hi = 0, len(nums) - 1
    if nums[0] < last:
        hi = 0
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > last:
            lo = mid + 1
        else:
            hi = mid
    pivot = lo
    if pivot > 0 and target >= nums[0]:
        return _find(nums, target, 0, pivot)
    return _find(nums, target, pivot, len(nums))


def search_insert(nums: list[int], target: int) -> int:
    """Index of target in sorted nums, or where it would be inserted."""
    return bisect_left(nums, target)


def merge_sorted(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the first n items of nums2 into the first m items of nums1, in place.

    nums1 must have room for m + n items.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n items and nums2 at least n")
    nums1[: m + n] = list(merge(nums2[:n], nums1[:m]))