"""Puzzles that work over strings and lists of numbers."""

import string
from itertools import accumulate

_ALPHABET = frozenset(string.ascii_lowercase)


def unused_letter_exists(first, second):
    """True when some lowercase letter appears in neither string."""
    used = set(first) | set(second)
    if not used <= _ALPHABET:
        raise ValueError("strings must contain lowercase letters only")
    return len(used) < len(_ALPHABET)


def array_state(values, k):
    """Fold the first k elements into the last one and return what remains.

    Each step removes the front element and adds it to the last element.
    """
    items = list(values)
    if k < 0 or k > len(items):
        raise ValueError("k must be between 0 and the number of values")
    for index in range(k):
        items[-1] += items[index]
    return items[k:]


def sweets_eaten(calories, limit):
    """Number of sweets eaten in order before the running total exceeds limit."""
    count = 0
    for total in accumulate(calories):
        if total > limit:
            break
        count += 1
    return count


def longest_even_sum_subarray(values):
    """Length of the longest contiguous run whose sum is even."""
    n = len(values)
    if sum(values) % 2 == 0:
        return n
    odd_positions = [i for i, value in enumerate(values) if value % 2 != 0]
    if not odd_positions:
        return 0
    first, last = odd_positions[0], odd_positions[-1]
    return max(n - 1 - first, last)


def can_win_election(a_votes, b_votes, budget):
    """True when a majority of states can be won by spending at most budget votes."""
    if len(a_votes) != len(b_votes):
        raise ValueError("vote lists must have the same length")
    n = len(a_votes)
    current_wins = 0
    needed = []
    for mine, theirs in zip(a_votes, b_votes):
        if mine > theirs:
            current_wins += 1
        else:
            needed.append(theirs - mine + 1)
    if current_wins > n // 2:
        return True
    required = n // 2 + 1 - current_wins
    for cost in sorted(needed):
        if required <= 0 or budget < cost:
            break
        budget -= cost
        required -= 1
    return required <= 0