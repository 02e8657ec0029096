import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.dynamic import (
    edit_distance,
    knapsack,
    longest_common_subsequence,
    max_product_subarray,
    max_sum_increasing_subsequence,
)

short_text = st.text(alphabet="abcd", max_size=8)


def test_knapsack_worked_example():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_zero_capacity():
    assert knapsack(0, [1, 2], [5, 6]) == 0


def test_knapsack_no_items():
    assert knapsack(10, [], []) == 0


def test_knapsack_items_too_heavy():
    assert knapsack(5, [6, 7, 8], [10, 20, 30]) == 0


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [3])


@given(st.lists(st.tuples(st.integers(1, 10), st.integers(1, 50)), max_size=8))
def test_knapsack_everything_fits(items):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    assert knapsack(sum(weights), weights, values) == sum(values)


@given(
    st.lists(st.tuples(st.integers(1, 10), st.integers(0, 50)), max_size=8),
    st.integers(0, 40),
)
def test_knapsack_monotone_in_capacity(items, capacity):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    small = knapsack(capacity, weights, values)
    large = knapsack(capacity + 1, weights, values)
    assert small <= large <= sum(values)


def test_edit_distance_worked_example():
    assert edit_distance("sunday", "saturday") == 3


@given(short_text)
def test_edit_distance_identity(text):
    assert edit_distance(text, text) == 0


@given(short_text)
def test_edit_distance_from_empty(text):
    assert edit_distance("", text) == len(text)
    assert edit_distance(text, "") == len(text)


@given(short_text, short_text)
def test_edit_distance_bounds_and_symmetry(a, b):
    distance = edit_distance(a, b)
    assert distance == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= distance <= max(len(a), len(b))


@given(short_text, short_text)
def test_edit_distance_bounded_by_lcs(a, b):
    common = longest_common_subsequence(a, b)
    assert edit_distance(a, b) <= len(a) + len(b) - 2 * common


def test_lcs_worked_example():
    assert longest_common_subsequence("AGGTAB", "GXTXAYB") == 4


@given(short_text)
def test_lcs_with_itself(text):
    assert longest_common_subsequence(text, text) == len(text)


@given(short_text, short_text)
def test_lcs_bounds_and_symmetry(a, b):
    common = longest_common_subsequence(a, b)
    assert common == longest_common_subsequence(b, a)
    assert 0 <= common <= min(len(a), len(b))


@given(short_text, short_text)
def test_lcs_of_concatenation(a, b):
    assert longest_common_subsequence(a + b, b) == len(b)


def test_max_product_needs_two_numbers():
    with pytest.raises(ValueError):
        max_product_subarray([5])
    with pytest.raises(ValueError):
        max_product_subarray([])


@given(st.integers(-20, 20), st.integers(-20, 20))
def test_max_product_of_pair(a, b):
    assert max_product_subarray([a, b]) == a * b


@given(st.lists(st.integers(1, 9), min_size=2, max_size=8))
def test_max_product_all_positive_takes_everything(nums):
    assert max_product_subarray(nums) == math.prod(nums)


@given(st.lists(st.integers(-9, 9), min_size=2, max_size=8))
def test_max_product_at_least_any_adjacent_pair(nums):
    best = max_product_subarray(nums)
    assert all(best >= x * y for x, y in zip(nums, nums[1:]))


def test_msis_empty():
    assert max_sum_increasing_subsequence([]) == 0


@given(st.lists(st.integers(-50, -1), max_size=8))
def test_msis_all_negative_is_zero(nums):
    assert max_sum_increasing_subsequence(nums) == 0


@given(st.sets(st.integers(0, 100), max_size=8))
def test_msis_increasing_takes_everything(values):
    nums = sorted(values)
    assert max_sum_increasing_subsequence(nums) == sum(nums)


@given(st.sets(st.integers(1, 100), min_size=1, max_size=8))
def test_msis_decreasing_takes_largest(values):
    nums = sorted(values, reverse=True)
    assert max_sum_increasing_subsequence(nums) == max(nums)


@given(st.lists(st.integers(0, 50), max_size=8))
def test_msis_bounds(nums):
    result = max_sum_increasing_subsequence(nums)
    assert max(nums, default=0) <= result <= sum(nums)