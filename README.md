# cpalgos

A library of classic competitive-programming algorithms, written as plain
Python functions. Each function takes ordinary Python values (integers,
strings, lists and tuples) and returns its result. Nothing is read from
standard input and nothing is printed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Conventions

- In graph functions, vertices are numbered from 1 to `n` and edges are given
  as tuples: `(a, b)` for unweighted edges, `(a, b, weight)` for weighted ones.
- Results that count ways are taken modulo 1 000 000 007 (`cpalgos.dp.MOD`).
- When an instance has no answer, most functions raise
  `cpalgos.introductory.NoSolutionError`, a subclass of `ValueError`. A few
  return `None` instead, as noted below.
- Malformed input, such as a vertex outside `1..n` or a grid that is not
  rectangular, raises `ValueError`.

## Modules

- `cpalgos.geometry`: `point_location` (returns `"LEFT"`, `"RIGHT"` or
  `"TOUCH"`), `segments_intersect`, `doubled_polygon_area`.
- `cpalgos.introductory`: `NoSolutionError`, `weird_algorithm`, `missing_number`,
  `longest_repetition`, `increasing_array_moves`, `beautiful_permutation`,
  `number_spiral`, `two_knights`, `two_sets`, `coin_piles`, `trailing_zeros`,
  `digit_query`.
- `cpalgos.search`: `palindrome_reorder`, `creating_strings`, `gray_code`,
  `tower_of_hanoi`, `grid_paths` (48-step patterns on a 7x7 grid),
  `queen_placements`.
- `cpalgos.dp`: `dice_combinations`, `minimizing_coins`, `ordered_coin_combinations`,
  `unordered_coin_combinations`, `removing_digits`, `grid_paths`, `book_shop`,
  `array_description`, `counting_towers`, `edit_distance`, `rectangle_cutting`,
  `money_sums`, `removal_game`, `two_sets_ways`.
- `cpalgos.subsequences`: `longest_increasing_subsequence`,
  `count_increasing_subsequences`, `longest_common_subsequence`, `max_project_reward`,
  `elevator_rides`, `mountain_range`, `minimal_grid_path`.
- `cpalgos.maths`: `mod_pow`, `power_tower`, `common_divisor`, `count_divisors`,
  `divisor_analysis`.
- `cpalgos.trees`: `prufer_decode`, `postorder_from_pre_in`, `nearest_shops`.
- `cpalgos.grids`: `labyrinth`.
- `cpalgos.structure`: `building_roads`, `course_schedule`, `flight_route_check`
  (returns `None` when every route exists), `planets_and_kingdoms`,
  `road_construction`, `game_routes`, `longest_flight_route`, `planet_queries`.
- `cpalgos.traversal`: `building_teams`, `message_route`, `round_trip`,
  `directed_round_trip`.
- `cpalgos.weighted`: `negative_cycle` (returns `None` when there is none),
  `investigation`, `road_reparation`.
- `cpalgos.paths`: `shortest_routes` (`None` for unreachable cities),
  `all_pairs_shortest_routes` (`-1` for unreachable pairs), `flight_discount`,
  `k_shortest_routes`, `high_score` (returns `None` when the score is unbounded).

## Example

```python
from cpalgos.dp import dice_combinations, edit_distance
from cpalgos.geometry import point_location
from cpalgos.introductory import NoSolutionError, beautiful_permutation

dice_combinations(3)                     # 4
edit_distance("LOVE", "MOVIE")           # 2
point_location((1, 1), (5, 3), (2, 3))   # "LEFT"

try:
    beautiful_permutation(3)
except NoSolutionError:
    print("no permutation exists")
```

## What this package does not do

It is a library only: there is no command-line program that reads problem
input and writes answers, so solving a problem from a text file means parsing
the input yourself and calling the matching function.