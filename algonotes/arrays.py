"""Array puzzles: monotonic stacks, rotated search, selection and sorting."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

__all__ = [
    "valid_subarrays",
    "find_buildings",
    "visible_mountains",
    "search_rotated",
    "find_kth_largest",
    "heap_sort",
    "merge_sort",
]


def valid_subarrays(nums: Sequence[int]) -> int:
    """Count the non-empty subarrays whose first element is not larger than any other."""
    total = 0
    # Pairs of (value, number of valid subarrays starting at that value),
    # with values strictly increasing towards the top.
    stack: list[tuple[int, int]] = []
    for num in reversed(nums):
        count = 1
        while stack and num <= stack[-1][0]:
            count += stack.pop()[1]
        stack.append((num, count))
        total += count
    return total


def find_buildings(heights: Sequence[int]) -> list[int]:
    """Return, in increasing order, the indices of buildings that see the ocean on the right."""
    tallest = -1
    seen: list[int] = []
    for index in range(len(heights) - 1, -1, -1):
        if heights[index] > tallest:
            seen.append(index)
            tallest = heights[index]
    seen.reverse()
    return seen


def visible_mountains(peaks: Iterable[Sequence[int]]) -> int:
    """Count the mountains whose peak is not inside or on another mountain.

    Each peak ``(x, y)`` is a right isosceles triangle with base ``[x - y, x + y]``.
    Identical mountains hide one another.
    """
    intervals = sorted(
        ((x - y, x + y) for x, y in peaks),
        key=lambda interval: (interval[0], -interval[1]),
    )
    count = 0
    max_end: int | None = None
    for position, interval in enumerate(intervals):
        end = interval[1]
        if max_end is not None and end <= max_end:
            continue
        following = intervals[position + 1] if position + 1 < len(intervals) else None
        if interval != following:
            count += 1
        max_end = end
    return count


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending array of distinct values, or -1."""
    left, right = 0, len(nums)
    while left < right:
        mid = left + (right - left) // 2
        value = nums[mid]
        if value == target:
            return mid
        if nums[left] <= value:
            if nums[left] <= target < value:
                right = mid
            else:
                left = mid + 1
        elif value < target <= nums[right - 1]:
            left = mid + 1
        else:
            right = mid
    return -1


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums`` (counting from 1, duplicates included).

    Raises ValueError unless ``1 <= k <= len(nums)``.
    """
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def _sift_down(items: list[int], root: int, end: int) -> None:
    """Restore the max-heap property below ``root`` within ``items[:end]``."""
    while True:
        left = 2 * root + 1
        if left >= end:
            return
        child = left + 1 if left + 1 < end and items[left + 1] > items[left] else left
        if items[root] >= items[child]:
            return
        items[root], items[child] = items[child], items[root]
        root = child


def heap_sort(nums: Iterable[int]) -> list[int]:
    """Return the values of ``nums`` in ascending order, sorted with a binary max-heap."""
    items = list(nums)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, root, n)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def merge_sort(nums: Iterable[int]) -> list[int]:
    """Return the values of ``nums`` in ascending order, sorted by top-down merging."""
    items = list(nums)
    if len(items) < 2:
        return items
    middle = len(items) // 2
    left = merge_sort(items[:middle])
    right = merge_sort(items[middle:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged