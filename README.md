# algodrills

Solutions to classic algorithm exercises, written as plain functions that
take Python values and return Python values. Useful for study, for checking
your own answers, and as a reference for the standard techniques.

## Installation

```
pip install algodrills
```

To run the test suite:

```
pip install "algodrills[test]"
pytest
```

## Modules

### `algodrills.graphs`

- `dfs_bfs_order(n, edges, start)`: depth-first and breadth-first visit
  orders of an undirected graph on vertices `1..n`, smaller neighbours first.
- `count_reachable(n, edges, start=1)`: how many vertices can be reached from
  `start`, not counting `start` itself.
- `count_components(n, edges)`: number of connected components.
- `reachability_matrix(graph)`: for a square directed adjacency matrix, a
  matrix with 1 where a path of length at least one exists. Self-loops are
  not followed.
- `paintings(grid)`: number of 4-connected regions of 1s and the area of the
  largest (0 when there is none).
- `housing_complexes(grid)`: sizes of all regions of 1s in ascending order.
  Rows may be digit strings such as `"0110"` or sequences of ints.
- `can_escape(k, lanes)`: whether the two-lane jump game can be won. Each
  second the player moves one cell forward, one back, or jumps to the other
  lane `k` cells ahead; cells behind the elapsed time collapse.

### `algodrills.dynamic`

- `max_increasing_sum(values)`: largest sum of a strictly increasing subsequence.
- `longest_decreasing_length(values)`: length of the longest strictly
  decreasing subsequence.
- `longest_consecutive_run(values)`: longest subsequence whose terms rise by
  exactly one each step (values must be positive).
- `min_square_terms(n)`: fewest perfect squares summing to `n`.
- `knapsack(capacity, items)`: best value of `(weight, value)` items, each
  taken at most once.
- `fractional_knapsack(capacity, items)`: best value when items may be split,
  taken by value per unit of weight.
- `range_sums(values, queries)`: inclusive 1-based `(start, end)` sums.
- `grid_range_sums(matrix, queries)`: 1-based `(x1, y1, x2, y2)` rectangle sums.

### `algodrills.strings`

- `letter_positions(word)`: first index of each letter `a..z` in a lowercase
  word, or -1.
- `most_frequent_letter(word)`: most used letter in upper case, ignoring case,
  or `"?"` on a tie.
- `repeat_chars(times, word)`: every character repeated `times` times.
- `dial_time(word)`: seconds to dial an uppercase word on a rotary phone.
- `min_max(values)`: smallest and largest value.

### `algodrills.containers`

- `run_queue_commands(lines)`: runs `push X`, `pop`, `size`, `empty`, `front`
  and `back` on a queue and returns the printed values; reading an empty
  queue gives -1 and unknown lines are ignored.
- `run_stack_commands(commands)`: runs numbered stack commands — `(1, X)`
  push, `(2,)` pop, `(3,)` size, `(4,)` empty, any other code peeks.
- `echo_pushes(lines)`: the values of the `push X` lines, in order.

### `algodrills.trees`

- `traversals(nodes)`: preorder, inorder and postorder strings of a binary
  tree rooted at `"A"`, given `(parent, left, right)` triples with `"."` for
  a missing child.

### `algodrills.numtheory`

- `primes_up_to(limit)`: primes not greater than `limit`.
- `prime_game_winner(first_range, second_range)`: `"yj"` or `"yt"` for the
  prime-calling game over two inclusive ranges, shared primes being called
  first.
- `pisano_period(modulus)`: period of the Fibonacci sequence modulo `modulus`.
- `fibonacci_mod(n)`: the `n`-th Fibonacci number modulo 1,000,000
  (available as `FIBONACCI_MODULUS`).

### `algodrills.robot`

- `last_cleaning_turn(dirty_rules, clean_rules, row, col, direction)`: the
  turn on which a cleaning robot last cleans a cell. Directions are 0 north,
  1 east, 2 south, 3 west; the robot stops when it leaves the grid or repeats
  a cell and direction without cleaning in between. Turns count from 1, and
  digit rows may be strings or sequences of ints.

## Examples

```python
from algodrills.graphs import dfs_bfs_order, count_components
from algodrills.dynamic import min_square_terms, range_sums
from algodrills.strings import dial_time

dfs_bfs_order(4, [(1, 2), (1, 3), (1, 4), (2, 4), (3, 4)], 1)
# ([1, 2, 4, 3], [1, 2, 3, 4])
count_components(6, [(1, 2), (2, 5), (5, 1), (3, 4), (4, 6)])
# 2
min_square_terms(7)
# 4
range_sums([5, 4, 3, 2, 1], [(1, 3), (2, 4), (5, 5)])
# [12, 9, 1]
dial_time("WA")
# 13
```

Invalid input, such as a vertex outside `1..n`, a negative capacity or a
query outside the data, raises `ValueError` or `IndexError`.

## What it does not do

The package is a library of functions only. It has no command-line program:
it does not read exercise input from standard input or print answers in a
judge's output format. Parse the input yourself and pass Python values in.