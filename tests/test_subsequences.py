import math

import pytest

from cpalgos.dp import MOD
from cpalgos.subsequences import (
    count_increasing_subsequences,
    elevator_rides,
    longest_common_subsequence,
    longest_increasing_subsequence,
    max_project_reward,
    minimal_grid_path,
    mountain_range,
)


def _is_subsequence(part, whole):
    remaining = iter(whole)
    return all(x in remaining for x in part)


def test_lis_of_sorted_values_is_whole_length():
    assert longest_increasing_subsequence(range(1, 11)) == 10


def test_lis_is_strict():
    assert longest_increasing_subsequence([4, 4, 4, 4]) == 1


def test_lis_of_decreasing_values():
    assert longest_increasing_subsequence([9, 7, 5, 3]) == 1


def test_lis_empty():
    assert longest_increasing_subsequence([]) == 0


def test_lis_example():
    assert longest_increasing_subsequence([3, 1, 4, 1, 5, 9, 2, 6]) == 4


@pytest.mark.parametrize("values", [[5, 1, 2], [2, 2, 3, 1], [10, 20, 5, 30, 7]])
def test_lis_bounded_by_length(values):
    assert 1 <= longest_increasing_subsequence(values) <= len(values)


def test_count_decreasing_counts_singletons():
    assert count_increasing_subsequences([5, 4, 3, 2, 1]) == 5


def test_count_increasing_counts_all_subsets():
    assert count_increasing_subsequences(range(10)) == 2**10 - 1


def test_count_equal_values_are_not_increasing():
    assert count_increasing_subsequences([7, 7, 7]) == 3


def test_count_is_reduced_modulo():
    assert count_increasing_subsequences(range(1, 41)) == (2**40 - 1) % MOD


def test_count_empty():
    assert count_increasing_subsequences([]) == 0


def test_lcs_of_identical_sequences():
    assert longest_common_subsequence([1, 2, 3], [1, 2, 3]) == [1, 2, 3]


def test_lcs_of_disjoint_sequences():
    assert longest_common_subsequence([1, 2], [3, 4]) == []


def test_lcs_picks_shared_elements():
    assert longest_common_subsequence([1, 2, 3, 4, 5], [2, 4, 6]) == [2, 4]


def test_lcs_is_common_and_symmetric_in_length():
    a, b = "ABCBDAB", "BDCABA"
    result = longest_common_subsequence(a, b)
    assert _is_subsequence(result, a)
    assert _is_subsequence(result, b)
    assert len(result) == len(longest_common_subsequence(b, a))


def test_projects_single():
    assert max_project_reward([(1, 5, 7)]) == 7


def test_projects_disjoint_all_taken():
    projects = [(1, 2, 3), (3, 4, 5), (5, 6, 7)]
    assert max_project_reward(projects) == sum(r for _, _, r in projects)


def test_projects_touching_days_overlap():
    assert max_project_reward([(1, 2, 4), (2, 3, 6)]) == 6


def test_projects_same_interval_takes_best():
    assert max_project_reward([(1, 3, 2), (1, 3, 9), (1, 3, 5)]) == 9


def test_projects_empty():
    assert max_project_reward([]) == 0


def test_projects_reject_reversed_interval():
    with pytest.raises(ValueError):
        max_project_reward([(5, 1, 3)])


def test_elevator_everyone_fits_once():
    assert elevator_rides([1, 2, 3], 10) == 1


def test_elevator_full_weights_ride_alone():
    assert elevator_rides([10, 10, 10], 10) == 3


def test_elevator_example():
    assert elevator_rides([4, 8, 6, 1], 10) == 2


@pytest.mark.parametrize("weights", [[3, 5, 7, 2, 9], [6, 6, 6, 6], [1, 9, 2, 8, 5]])
def test_elevator_bounds(weights):
    rides = elevator_rides(weights, 10)
    assert math.ceil(sum(weights) / 10) <= rides <= len(weights)


def test_elevator_rejects_empty():
    with pytest.raises(ValueError):
        elevator_rides([], 10)


def test_elevator_rejects_overweight():
    with pytest.raises(ValueError):
        elevator_rides([11], 10)


def test_mountain_increasing_heights_all_visited():
    assert mountain_range([1, 2, 3, 4, 5]) == 5


def test_mountain_equal_heights():
    assert mountain_range([7, 7, 7]) == 1


def test_mountain_single_and_empty():
    assert mountain_range([4]) == 1
    assert mountain_range([]) == 0


def test_mountain_is_mirror_symmetric():
    heights = [20, 15, 17, 35, 25, 40, 12, 19, 13, 12]
    assert mountain_range(heights) == mountain_range(heights[::-1])


def test_minimal_path_single_cell():
    assert minimal_grid_path(["Q"]) == "Q"


def test_minimal_path_uniform_grid():
    assert minimal_grid_path(["CCC", "CCC", "CCC"]) == "C" * 5


def test_minimal_path_prefers_smaller_letter():
    assert minimal_grid_path(["AB", "CA"]) == "ABA"


def test_minimal_path_shape():
    grid = ["DBC", "ACZ", "QRS"]
    path = minimal_grid_path(grid)
    assert len(path) == 2 * len(grid) - 1
    assert path[0] == grid[0][0]
    assert path[-1] == grid[-1][-1]


def test_minimal_path_rejects_non_square():
    with pytest.raises(ValueError):
        minimal_grid_path(["AB", "C"])