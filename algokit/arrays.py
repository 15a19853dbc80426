"""Searching, counting and summarising over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Extremes:
    """The largest and smallest values of a sequence and their distinct runners-up.

    A runner-up is None when the sequence has no distinct second value.
    """

    largest: int
    second_largest: int | None
    smallest: int
    second_smallest: int | None


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` is a non-decreasing sequence rotated by some amount."""
    n = len(nums)
    if n == 1:
        return True
    doubled = list(nums) * 2
    run = 0
    for prev, cur in zip(doubled[1:], doubled[2:]):
        run = run + 1 if prev <= cur else 0
        if run == n - 1:
            return True
    return False


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass.

    Any value other than 0 or 1 is treated as belonging to the high partition.
    """
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def extreme_elements(nums: Iterable[int]) -> Extremes:
    """Find the largest, second largest, smallest and second smallest values."""
    largest = second_largest = smallest = second_smallest = None
    for value in nums:
        if largest is None or value > largest:
            second_largest = largest
            largest = value
        elif value != largest and (second_largest is None or value > second_largest):
            second_largest = value
        if smallest is None or value < smallest:
            second_smallest = smallest
            smallest = value
        elif value != smallest and (second_smallest is None or value < second_smallest):
            second_smallest = value
    if largest is None or smallest is None:
        raise ValueError("extreme_elements() requires a non-empty sequence")
    return Extremes(largest, second_largest, smallest, second_smallest)


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of 1s."""
    run = best = 0
    for value in nums:
        if value == 1:
            run += 1
            best = max(best, run)
        else:
            run = 0
    return best


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``0..len(nums)`` that is absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def single_number(nums: Iterable[int]) -> int:
    """Return the value that occurs exactly once.

    Raises ValueError if no value occurs exactly once.
    """
    for value, count in Counter(nums).items():
        if count == 1:
            return value
    raise ValueError("no value occurs exactly once")


def count_substrings_with_abc(s: str) -> int:
    """Count the substrings of ``s`` that contain each of 'a', 'b' and 'c'.

    ``s`` may only consist of the letters 'a', 'b' and 'c'.
    """
    invalid = set(s) - {"a", "b", "c"}
    if invalid:
        raise ValueError(f"unexpected characters: {''.join(sorted(invalid))!r}")
    counts = {"a": 0, "b": 0, "c": 0}
    n = len(s)
    left = 0
    total = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        while all(counts.values()):
            total += n - right
            counts[s[left]] -= 1
            left += 1
    return total


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of any non-empty contiguous subarray (Kadane)."""
    best: int | None = None
    running = 0
    for value in nums:
        if running < 0:
            running = 0
        running += value
        best = running if best is None else max(best, running)
    if best is None:
        raise ValueError("max_subarray_sum() requires a non-empty sequence")
    return best


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both inputs, in order of appearance in ``nums2``."""
    first = set(nums1)
    return list(dict.fromkeys(value for value in nums2 if value in first))


def linear_search(nums: Iterable[int], target: int) -> int | None:
    """Return the index of the first occurrence of ``target``, or None if absent."""
    return next((i for i, value in enumerate(nums) if value == target), None)


def longest_subarray_with_sum(nums: Iterable[int], k: int) -> int:
    """Return the length of the longest contiguous subarray summing to ``k``.

    Works with positive, negative and zero values; returns 0 when none exists.
    """
    first_seen: dict[int, int] = {}
    total = 0
    best = 0
    for i, value in enumerate(nums):
        total += value
        if total == k:
            best = max(best, i + 1)
        start = first_seen.get(total - k)
        if start is not None:
            best = max(best, i - start)
        first_seen.setdefault(total, i)
    return best


def majority_element(nums: Iterable[int]) -> int:
    """Return the majority element using Boyer-Moore voting.

    The result is only meaningful if a value occurs more than half the time.
    """
    candidate: int | None = None
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is None:
        raise ValueError("majority_element() requires a non-empty sequence")
    return candidate