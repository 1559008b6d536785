import string

import pytest

from chefsolve.sequences import (
    array_state,
    can_win_election,
    longest_even_sum_subarray,
    sweets_eaten,
    unused_letter_exists,
)


def test_unused_letter_exists():
    assert unused_letter_exists("abc", "def")
    assert not unused_letter_exists(string.ascii_lowercase[:13], string.ascii_lowercase[13:])


def test_unused_letter_rejects_other_characters():
    with pytest.raises(ValueError):
        unused_letter_exists("abC", "def")


def test_array_state_worked_example():
    assert array_state([1, 2, 3], 1) == [2, 4]


def test_array_state_no_operations():
    assert array_state([4, 5, 6], 0) == [4, 5, 6]


@pytest.mark.parametrize("k", range(0, 5))
def test_array_state_preserves_sum(k):
    values = [3, 1, 4, 1, 5]
    result = array_state(values, k)
    assert len(result) == len(values) - k
    assert sum(result) == sum(values)


def test_array_state_all_folded():
    assert array_state([1, 2], 2) == []


@pytest.mark.parametrize("k", [-1, 4])
def test_array_state_bad_k(k):
    with pytest.raises(ValueError):
        array_state([1, 2, 3], k)


def test_sweets_eaten_example():
    assert sweets_eaten([1, 2, 3], 3) == 2


def test_sweets_eaten_invariants():
    calories = [5, 1, 7, 2, 9]
    for limit in range(0, 30):
        count = sweets_eaten(calories, limit)
        assert sum(calories[:count]) <= limit
        if count < len(calories):
            assert sum(calories[: count + 1]) > limit


def test_sweets_eaten_everything():
    assert sweets_eaten([1, 2, 3], 100) == len([1, 2, 3])


def _brute_longest(values):
    return max(
        (j - i for i in range(len(values) + 1) for j in range(i, len(values) + 1)
         if sum(values[i:j]) % 2 == 0),
        default=0,
    )


@pytest.mark.parametrize(
    "values",
    [[1], [2, 4, 6], [1, 2, 3, 4], [2, 1, 2, 2], [1, 1, 1], [4, 3, 2, 2, 2, 2, 1, 1], [-3, 2, 2]],
)
def test_longest_even_sum_subarray_matches_search(values):
    assert longest_even_sum_subarray(values) == _brute_longest(values)


def test_can_win_election_already_winning():
    assert can_win_election([5, 5, 1], [1, 1, 9], 0)


def test_can_win_election_with_budget():
    assert can_win_election([1, 1, 1], [2, 2, 2], 4)
    assert not can_win_election([1, 1, 1], [2, 2, 2], 3)


def test_can_win_election_tie_needs_a_vote():
    assert not can_win_election([3], [3], 0)
    assert can_win_election([3], [3], 1)


def test_can_win_election_length_mismatch():
    with pytest.raises(ValueError):
        can_win_election([1, 2], [1], 5)