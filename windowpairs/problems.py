"""Interval dynamic programs evaluated with `sliding_window`."""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .memo import WindowMemo
from .sliding_window import sliding_window
from .window_types import ResolvedChildren, WindowConfig, IndexBounds, WindowPayload

#=============================================================================#
# longest palindromic substring

@dataclass
class PalindromeTracker:
    # longest palindrome inside the window
    longest: Optional[str] = None
    # the window itself, if it is a palindrome
    current: Optional[str] = None

def _longer(candidate: Optional[str], incumbent: Optional[str]) -> bool:
    return bool(candidate) and len(candidate) > len(incumbent or '')

def longest_palindromic_substring(s: str) -> WindowMemo[PalindromeTracker]:
    """Memo of PalindromeTracker over every window (i, j) of `s`, 0 <= i <= j < len(s).
    `memo[0][len(s) - 1].longest` is the longest palindrome in `s`.
    Strings shorter than two characters have no windows to traverse; see `longest_palindrome`."""
    config = WindowConfig(index = IndexBounds(to = len(s) - 1))

    def handler(
        payload: WindowPayload,
        memo: WindowMemo[PalindromeTracker],
        child: ResolvedChildren[PalindromeTracker],
    ) -> PalindromeTracker:
        i, j = payload.pair
        tracker = PalindromeTracker()
        are_bookends_equal = s[i] == s[j]
        # windows of one and two characters have no middle to examine.
        if payload.iteration < 2:
            if are_bookends_equal:
                tracker.current = tracker.longest = s[i:j + 1]
            return tracker
        if are_bookends_equal and child.middle.current:
            tracker.longest = tracker.current = s[i:j + 1]
        else:
            if _longer(child.left.longest, tracker.longest):
                tracker.longest = child.left.longest
            if _longer(child.right.longest, tracker.longest):
                tracker.longest = child.right.longest
        return tracker

    return sliding_window(handler, config)

def longest_palindrome(s: str) -> str:
    "The longest palindromic substring of `s`; the first character when no longer one exists."
    if len(s) < 2:
        return s
    memo = longest_palindromic_substring(s)
    # single characters are not tracked past the first tier.
    return memo[0][len(s) - 1].longest or s[0]

#=============================================================================#
# matrix chain multiplication

def matrix_chain_order(dimensions) -> WindowMemo[int]:
    """Minimal number of scalar multiplications for every chain of consecutive matrices.

    :dimensions: sequence of n + 1 integers; matrix k has shape dimensions[k] x dimensions[k + 1].
    :return: memo where memo[i][j] is the cost of multiplying matrices i through j."""
    dims = np.asarray(dimensions, dtype = np.int64)
    n = len(dims) - 1
    if n < 2:
        raise ValueError("matrix chain needs at least two matrices.")
    config = WindowConfig(index = IndexBounds(to = n - 1))

    def handler(payload, memo, child):
        i, j = payload.pair
        if i == j:
            return 0
        return min(
            memo[i][k] + memo[k + 1][j] + int(dims[i] * dims[k + 1] * dims[j + 1])
            for k in range(i, j))

    return sliding_window(handler, config)

def matrix_chain_cost(dimensions) -> int:
    memo = matrix_chain_order(dimensions)
    return memo[0][len(dimensions) - 2]

#=============================================================================#
# merging adjacent piles

def merge_cost(piles) -> WindowMemo[int]:
    """Minimal total cost of merging each run of adjacent piles into a single pile,
    where merging two piles costs their combined size.

    :piles: sequence of pile sizes.
    :return: memo where memo[i][j] is the cost of merging piles i through j."""
    piles = np.asarray(piles, dtype = np.int64)
    n = len(piles)
    if n < 2:
        raise ValueError("merging needs at least two piles.")
    prefix = np.concatenate(([0], np.cumsum(piles)))
    config = WindowConfig(index = IndexBounds(to = n - 1))

    def handler(payload, memo, child):
        i, j = payload.pair
        if i == j:
            return 0
        total = int(prefix[j + 1] - prefix[i])
        return total + min(memo[i][k] + memo[k + 1][j] for k in range(i, j))

    return sliding_window(handler, config)

def minimum_merge_cost(piles) -> int:
    memo = merge_cost(piles)
    return memo[0][len(piles) - 1]
