"""Rearranging, combining and pair-finding over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from heapq import merge
from itertools import groupby


def max_card_score(card_points: Sequence[int], k: int) -> int:
    """Return the best total of ``k`` cards taken from either end of the row."""
    n = len(card_points)
    if not 0 <= k <= n:
        raise ValueError(f"k must be between 0 and {n}, got {k}")
    left = sum(card_points[:k])
    right = 0
    best = left
    for dropped, taken in zip(reversed(card_points[:k]), reversed(card_points[n - k:])):
        left -= dropped
        right += taken
        best = max(best, left + right)
    return best


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeroes to the end in place, keeping the order of other values."""
    write = 0
    for value in nums:
        if value != 0:
            nums[write] = value
            write += 1
    nums[write:] = [0] * (len(nums) - write)


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps round to the first (ascending) one.
    """
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    successor = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def rearrange_by_sign(nums: Iterable[int]) -> list[int]:
    """Interleave positive and non-positive values, starting with a positive one.

    Relative order within each sign is kept. Both groups must be the same size.
    """
    positives: list[int] = []
    negatives: list[int] = []
    for value in nums:
        (positives if value > 0 else negatives).append(value)
    if len(positives) != len(negatives):
        raise ValueError("need as many positive as non-positive values")
    return [value for pair in zip(positives, negatives) for value in pair]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its distinct values lead it.

    Returns the number of distinct values; the remainder is left as it was.
    """
    if not nums:
        return 0
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps in place (negative ``k`` rotates left)."""
    n = len(nums)
    if not n:
        return
    k %= n
    if k:
        nums[:] = list(nums[n - k:]) + list(nums[:n - k])


def count_subarrays_with_sum(nums: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays whose values sum to ``k``."""
    prefix_counts = {0: 1}
    total = 0
    count = 0
    for value in nums:
        total += value
        count += prefix_counts.get(total - k, 0)
        prefix_counts[total] = prefix_counts.get(total, 0) + 1
    return count


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)`` with ``i < j`` whose values sum to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def has_pair_with_sum(nums: Iterable[int], target: int) -> bool:
    """Return True if two distinct entries of ``nums`` sum to ``target``."""
    values = sorted(nums)
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total == target:
            return True
        if total > target:
            high -= 1
        else:
            low += 1
    return False


def sorted_union(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values of both inputs in ascending order."""
    return [value for value, _ in groupby(merge(sorted(nums1), sorted(nums2)))]