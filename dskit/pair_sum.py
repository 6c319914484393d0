"""Find two numbers in a sequence that add up to a target."""

from __future__ import annotations

from typing import Sequence

from dskit.linear_probing import LinearProbingHashTable

_LOAD_FACTOR_THRESHOLD = 0.75


def find_pair(nums: Sequence[int], target_sum: int) -> tuple[int, int] | None:
    """Return the first pair ``(earlier, later)`` summing to ``target_sum``.

    Zeros never take part in a pair. Return None if no pair exists.
    """
    seen = LinearProbingHashTable(max(len(nums), 1), _LOAD_FACTOR_THRESHOLD)
    for num in nums:
        difference = target_sum - num
        if difference != 0 and difference in seen:
            return difference, num
        if num != 0:
            seen.insert(num)
    return None