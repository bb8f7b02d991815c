# dsalgo

Classic data structures and algorithms in plain Python, with no
third-party dependencies.

## Modules

- `dsalgo.graph`
  - `Graph(size)`: undirected graph over vertices `0 .. size - 1`.
    It offers `add_edge`, `remove_edge`, `neighbours`, `format`, `bfs`,
    `dfs_recursive`, `dfs_iterative`, `count_components`,
    `largest_component` and `shortest_path`. `shortest_path` gives the
    edge count, or `None` when the destination cannot be reached.
    An unknown vertex raises `IndexError`.
  - `DirectedGraph(size)`: offers `add_edge` and `topological_sort`.
  - `Edge` and `Vertex`: simple dataclasses for describing weighted,
    named vertices.
- `dsalgo.weighted`
  - `dijkstra(matrix, source)`: distances from `source`. A zero matrix
    entry means there is no edge, and an unreachable vertex gets `math.inf`.
  - `prim(matrix, source)`: minimum spanning tree as `WeightedEdge` values.
    A disconnected graph raises `ValueError`.
  - `kruskal(vertex_count, edges)`: minimum spanning forest. The edges may
    be given as `WeightedEdge` values or as `(u, v, weight)` tuples.
- `dsalgo.cash_flow`
  - `net_amounts(debts)`: the net balance of each person.
  - `min_cash_flow(debts)`: the `Payment(debtor, creditor, amount)` list
    that settles all debts. Here `debts[i][j]` is what person `i` owes
    person `j`.
- `dsalgo.islands`
  - `island_count(grid)`: counts 4-connected groups of cells that are
    not `"W"`.
- `dsalgo.hashing`
  - `ChainedHashTable(size=10)`: hash `value % size` with separate chaining.
    It offers `insert`, `search`, `remove`, `buckets` and `format`.
    `search` returns the position of the value in its bucket, or `None`.
    `remove` raises `KeyError` for a missing value.
- `dsalgo.open_addressing`
  - `DoubleHashTable(size=17, prime=11)` and `LinearProbingTable(size=128)`
    both offer `insert`, `search`, `remove` and `slots`.
  - `insert` returns the slot it used, and raises `TableFullError` when
    there is no free slot.
  - `slots()` shows empty slots as `None`.
- `dsalgo.heap`
  - `MinHeap(capacity)` and `MaxHeap(capacity)` both offer `insert`,
    `peek`, `search`, `delete` and `items`.
  - `MinHeap` has `extract_min`. `MaxHeap` has `extract_max` and
    `heap_sort`, which returns the values in ascending order and leaves
    the heap unchanged.
  - Errors: `HeapFullError` when inserting at capacity, `IndexError` when
    the heap is empty, and `KeyError` when deleting a missing value.
- `dsalgo.linked_list`
  - `LinkedList(values)`: offers `push_front`, `push_back`, `pop_front`,
    `pop_back`, `insert`, `assign`, `remove_duplicates` and `format`.
    It also supports iteration and `len`.
  - Functions on chains of `Node`: `from_iterable`, `to_list`,
    `merge_sorted`, `middle`, `merge_sort`, `reverse`, `is_palindrome`,
    `has_cycle` and `link_tail_to`.
- `dsalgo.stack`
  - `LinkedStack`: offers `push`, `pop` and `peek`. An empty stack raises
    `StackUnderflowError`.
  - `run_menu(lines, out)`: runs the interactive menu described below.
  - `main()`: runs the menu on standard input and output.
- `dsalgo.maze`
  - `count_ways(rows, columns)`: number of right/down paths across a grid.
  - `paths(rows, columns)` and `diagonal_paths(rows, columns)`: list those
    paths. Moves are written as `R` (right), `D` (down) and `M` (diagonal).
  - `restricted_paths(maze)`: right/down paths that avoid blocked (truthy)
    cells.
  - `all_paths(maze)`: paths that may also move up and left.
  - `numbered_paths(maze)`: like `all_paths`, paired with a grid that
    numbers each visited cell in order.
  - `unique_paths_with_obstacles(grid)` and `unique_paths_iii(grid)`.
- `dsalgo.chess`
  - `count_queens(n)`, `queen_boards(n)` and `solve_queens(n)`: the
    n-queens problem. `solve_queens` returns `None` when there is no
    solution.
  - `knight_boards(n, knights)`: every placement of mutually safe knights.
  - `format_board(board, mark)`: draws a board as text.
- `dsalgo.arrays`
  - Cyclic sort: `find_duplicate`, `find_disappeared_numbers` and
    `find_error_nums`.
  - Peaks and mountain arrays: `peak_element`, `peak_index`,
    `order_agnostic_search` and `find_in_mountain_array`.
  - Other array problems: `max_subarray`, `max_product_difference`,
    `min_moves_to_seat`, `occurrences`, `unique_occurrences`,
    `most_frequent` and `flip_and_invert`.
- `dsalgo.combinatorics`
  - Dice: `dice_rolls`, `dice_rolls_of_length` and `count_dice_rolls`.
    `count_dice_rolls` counts modulo `MODULUS = 10**9 + 7`.
  - `letter_combinations(digits)`: the words a phone keypad can spell.
  - `subsets(values)`: every subset of the values.
- `dsalgo.primes`
  - `sieve(n)`: all primes below `n`.
  - `is_prime(n)`: trial division.
- `dsalgo.text`
  - `is_palindrome`, `remove_digit`, `reverse_digits` and
    `is_reverse_palindrome`.
  - `main()`: the palindrome command described below.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsalgo.chess import count_queens
from dsalgo.maze import count_ways
from dsalgo.islands import island_count

count_queens(5)    # 10
count_ways(4, 4)   # 20

grid = [
    ["W", "L", "W", "W", "W"],
    ["W", "L", "W", "W", "W"],
    ["W", "W", "W", "L", "W"],
    ["W", "W", "L", "L", "W"],
    ["L", "W", "W", "L", "L"],
    ["L", "L", "W", "W", "W"],
]
island_count(grid)  # 3
```

```python
from dsalgo.graph import Graph
from dsalgo.weighted import dijkstra

g = Graph(6)
g.add_edge(1, 2)
g.add_edge(1, 0)
g.add_edge(2, 3)
g.bfs(0)                 # [0, 1, 2, 3]
g.shortest_path(0, 5)    # None

matrix = [
    [0, 4, 0],
    [4, 0, 1],
    [0, 1, 0],
]
dijkstra(matrix, 0)      # [0, 4, 5]
```

## Command-line tools

### dsalgo-stack

```
dsalgo-stack
```

This is an interactive stack. It reads whitespace-separated tokens from
standard input and understands these choices:

- `1`: push; the next token is the value to push.
- `2`: pop.
- `3`: display.
- `4`: exit.

Any other choice prints `Incorrect Choice`. The menu also stops at the end
of input.

### dsalgo-palindrome

```
dsalgo-palindrome
```

Without options, the command reads a count from standard input, followed
by that many integers. It prints `1` if each number is the digit reversal
of its mirror number, and `0` otherwise.

```
dsalgo-palindrome --text
```

With `--text`, the command reads a single word instead. It prints
`Palindrome` or `Non-palindrome`.

Both forms exit with status 1 and a message on standard error when the
input is missing or malformed.

## Limits

- Both commands read standard input only. They take no files and do not
  save any state between runs.
- Every data structure lives in memory.