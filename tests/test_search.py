from collections import Counter
from itertools import permutations

import pytest

from cpalgos.introductory import NoSolutionError
from cpalgos.search import (
    creating_strings,
    gray_code,
    grid_paths,
    palindrome_reorder,
    queen_placements,
    tower_of_hanoi,
)

FULL_PATH = (
    "R" * 6
    + "D"
    + "D" * 5
    + "L"
    + "U" * 5
    + "L"
    + "D" * 5
    + "L"
    + "U" * 5
    + "L"
    + "D" * 5
    + "L"
    + "U" * 5
    + "L"
    + "D" * 5
)

EMPTY_BOARD = ["." * 8] * 8


@pytest.mark.parametrize("text", ["AAAACACBA", "ABBA", "Z", "AABBC", "QQQ"])
def test_palindrome_reorder_gives_palindrome_of_same_letters(text):
    result = palindrome_reorder(text)
    assert result == result[::-1]
    assert Counter(result) == Counter(text)


def test_palindrome_reorder_without_solution():
    with pytest.raises(NoSolutionError):
        palindrome_reorder("ABC")


def test_palindrome_reorder_rejects_lower_case():
    with pytest.raises(ValueError):
        palindrome_reorder("abba")


@pytest.mark.parametrize("text", ["aabac", "abc", "zzz", "dcba"])
def test_creating_strings_lists_distinct_permutations_sorted(text):
    result = creating_strings(text)
    assert result == sorted({"".join(p) for p in permutations(text)})


def test_creating_strings_is_strictly_increasing():
    result = creating_strings("bbaac")
    assert all(a < b for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_gray_code_neighbours_differ_in_one_bit(n):
    codes = gray_code(n)
    assert len(codes) == 2**n
    assert len(set(codes)) == len(codes)
    assert codes[0] == "0" * n
    for a, b in zip(codes, codes[1:]):
        assert sum(x != y for x, y in zip(a, b)) == 1


def test_gray_code_rejects_zero_bits():
    with pytest.raises(ValueError):
        gray_code(0)


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_tower_of_hanoi_moves_are_legal(n):
    moves = tower_of_hanoi(n)
    assert len(moves) == 2**n - 1
    stacks = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for source, target in moves:
        disk = stacks[source].pop()
        assert not stacks[target] or stacks[target][-1] > disk
        stacks[target].append(disk)
    assert stacks[3] == list(range(n, 0, -1))


def test_tower_of_hanoi_single_disk():
    assert tower_of_hanoi(1) == [(1, 3)]


def test_grid_paths_fully_specified_path():
    assert grid_paths(FULL_PATH) == 1


def test_grid_paths_one_free_step_keeps_count():
    pattern = "?" + FULL_PATH[1:]
    assert grid_paths(pattern) == grid_paths(FULL_PATH)


def test_grid_paths_broken_path():
    assert grid_paths(FULL_PATH[:-1] + "L") == 0


def test_grid_paths_rejects_wrong_length():
    with pytest.raises(ValueError):
        grid_paths(FULL_PATH[:-1])


def test_queen_placements_empty_board():
    assert queen_placements(EMPTY_BOARD) == 92


def test_queen_placements_mirror_symmetry():
    board = [
        "........",
        "........",
        "..*.....",
        "........",
        "........",
        ".....**.",
        "...*....",
        "........",
    ]
    mirrored = [row[::-1] for row in board]
    assert queen_placements(board) == queen_placements(mirrored)
    assert queen_placements(board) <= queen_placements(EMPTY_BOARD)


def test_queen_placements_rejects_bad_board():
    with pytest.raises(ValueError):
        queen_placements(["." * 8] * 7)