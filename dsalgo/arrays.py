"""Array puzzles: cyclic sort, binary searches, subarrays and counting."""

from __future__ import annotations

from collections import Counter


def _cyclic_sort(nums) -> list[int]:
    arr = list(nums)
    n = len(arr)
    for value in arr:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} is outside 1..{n}")
    i = 0
    while i < n:
        target = arr[i] - 1
        if arr[i] != arr[target]:
            arr[i], arr[target] = arr[target], arr[i]
        else:
            i += 1
    return arr


def find_duplicate(nums):
    """Return the repeated value in ``nums``, whose values lie in 1..len(nums)."""
    arr = _cyclic_sort(nums)
    for index, value in enumerate(arr):
        if value != index + 1:
            return value
    raise ValueError("no duplicate value")


def find_disappeared_numbers(nums):
    """Return the values of 1..len(nums) that do not occur in ``nums``."""
    arr = _cyclic_sort(nums)
    return [index + 1 for index, value in enumerate(arr) if value != index + 1]


def find_error_nums(nums):
    """Return (duplicated, missing) for a broken permutation of 1..n, or None."""
    arr = _cyclic_sort(nums)
    for index, value in enumerate(arr):
        if value != index + 1:
            return value, index + 1
    return None


def _peak(values) -> int:
    if len(values) == 0:
        raise ValueError("sequence is empty")
    start, end = 0, len(values) - 1
    while start < end:
        mid = (start + end) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def peak_element(values):
    """Return the largest value of an increasing-then-decreasing sequence."""
    return values[_peak(values)]


def peak_index(mountain):
    """Return the index of the peak of a mountain sequence."""
    return _peak(mountain)


def order_agnostic_search(values, target, start, end, ascending):
    """Binary-search ``values[start..end]`` sorted either way; return an index or None."""
    while start <= end:
        mid = (start + end) // 2
        current = values[mid]
        if current == target:
            return mid
        if (current < target) == ascending:
            start = mid + 1
        else:
            end = mid - 1
    return None


def find_in_mountain_array(target, mountain):
    """Return the smallest index holding ``target`` in a mountain sequence, or None."""
    if len(mountain) == 0:
        return None
    peak = peak_index(mountain)
    found = order_agnostic_search(mountain, target, 0, peak, True)
    if found is None:
        found = order_agnostic_search(mountain, target, peak, len(mountain) - 1, False)
    return found


def max_subarray(values):
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("sequence is empty")
    best = current = items[0]
    for value in items[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_product_difference(nums):
    """Return the product of the two largest values minus that of the two smallest."""
    ordered = sorted(nums)
    if len(ordered) < 2:
        raise ValueError("at least two values are needed")
    return ordered[-1] * ordered[-2] - ordered[0] * ordered[1]


def min_moves_to_seat(seats, students):
    """Return the fewest single-step moves that seat every student."""
    if len(seats) != len(students):
        raise ValueError("there must be as many seats as students")
    return sum(abs(s - p) for s, p in zip(sorted(seats), sorted(students)))


def occurrences(values, target):
    """Return every index at which ``target`` occurs."""
    return [index for index, value in enumerate(values) if value == target]


def unique_occurrences(values):
    """Return whether every distinct value occurs a different number of times."""
    counts = list(Counter(values).values())
    return len(set(counts)) == len(counts)


def most_frequent(values):
    """Return the values with the highest count, in order of first appearance."""
    counts = Counter(values)
    if not counts:
        return []
    top = max(counts.values())
    return [value for value, count in counts.items() if count == top]


def flip_and_invert(image):
    """Mirror each row of a 0/1 image and invert every bit; the input is not changed."""
    return [[cell ^ 1 for cell in reversed(row)] for row in image]