# algobook

Classic algorithms as plain Python functions: dynamic programming, graph
searches and modular arithmetic. It uses only the standard library.

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

- Counting functions return their results modulo 1,000,000,007.
- Graph functions take the number of nodes `n` and an iterable of edges whose
  nodes are numbered from 1. Routes and cycles come back as lists of 1-based
  nodes.
- Where no answer exists (an unreachable target, an impossible order), the
  function returns `None`. Invalid arguments such as negative sizes or nodes
  outside `1..n` raise `ValueError`.

## What is inside

### `algobook.dp`

- `coins`
  - `min_coins(coins, target)`: fewest coins summing to `target`, or `None`.
  - `count_ordered_ways(coins, target)`: ordered coin sequences summing to `target`.
  - `count_unordered_ways(coins, target)`: coin multisets summing to `target`.
  - `dice_combinations(total)`: ordered throws of a six-sided die adding up to `total`.
  - `removing_digits_steps(number)`: steps to reach zero by subtracting one of the
    number's digits each time (the largest digit is always taken).
- `subsets`
  - `two_sets_ways(n)`: splits of `1..n` into two sets of equal sum, each split
    counted once.
  - `money_sums(coins)`: every positive sum some subset of the coins makes, ascending.
  - `max_pages(prices, pages, budget)`: 0/1 knapsack; most pages within the budget.
- `paths`
  - `grid_paths(grid)`: right/down paths from the top-left to the bottom-right
    cell of a grid of `.` (free) and `*` (trap) cells.
- `sequences`
  - `edit_distance(source, target)`: Levenshtein distance.
  - `longest_increasing_subsequence(values)`: length of the longest strictly
    increasing subsequence.
  - `Project(start, end, reward)` and `max_project_reward(projects)`: best total
    reward from projects whose inclusive day ranges do not overlap.
  - `removal_game(values)`: first player's score when both players take numbers
    from either end optimally.
- `counting`
  - `count_numbers(low, high)`: integers in `low..high` with no two equal
    adjacent digits.
  - `count_tilings(height, width)`: domino tilings of a `height` x `width` grid.
  - `count_towers(height)`: ways to build a width-2 tower of the given height.
  - `count_arrays(values, upper)`: arrays with entries in `1..upper` matching
    `values` (0 marks an unknown) whose neighbours differ by at most one.
- `optimisation`
  - `min_elevator_rides(weights, capacity)`: fewest rides carrying everyone; an
    empty list of weights still counts as one ride.
  - `min_cuts(height, width)`: fewest straight cuts turning a rectangle into squares.

### `algobook.maths`

- `modular`
  - `power_mod(base, exponent, modulus)`.
  - `tower_power(a, b, c)`: `a ** (b ** c)` modulo 1,000,000,007.
  - `FactorialTable(limit, modulus=1_000_000_007)` with `factorial(n)`,
    `inverse_factorial(n)` and `binomial(n, r)`.
  - `distinct_arrangements(word)`: distinct strings formed from the letters of `word`.
- `divisors`
  - `count_divisors(number)` and `sum_of_divisors(number)`, by trial division.

### `algobook.graphs`

- `rooms`
  - `count_rooms(grid)`: groups of `.` cells joined up, down, left or right.
- `grids` (grids of strings; `#` is a wall)
  - `find_path(grid)`: a shortest route from `A` to `B` as `U`/`R`/`D`/`L`
    moves, or `None`.
  - `escape_monsters(grid)`: moves taking `A` to a border cell strictly before
    any `M` can reach it, or `None`.
- `components`
  - `connect_components(n, edges)`: the fewest new roads connecting every node.
  - `two_color(n, edges)`: team 1 or 2 for each node so every edge joins
    different teams, or `None` if the graph is not bipartite.
- `dsu`
  - `DisjointSet(size)` with `find`, `union`, `component_size`,
    `largest_component` and a `components` count.
  - `road_construction(n, edges)`: yields `(components, largest component)`
    after each road is added.
  - `minimum_spanning_cost(n, edges)`: Kruskal's algorithm; `None` if disconnected.
- `cycles`
  - `find_undirected_cycle(n, edges)`, `find_directed_cycle(n, edges)` and
    `find_negative_cycle(n, edges)`: a closed cycle, or `None`.
- `shortest`
  - `dijkstra(n, edges)`: distances from node 1 along one-way edges.
  - `all_pairs_distances(n, edges)`: Floyd-Warshall over two-way roads.
  - `shortest_message_route(n, edges)`: fewest-hop route from node 1 to node n.
  - `high_score(n, edges)`: largest score of a walk from node 1 to node n;
    `None` if unbounded, `ValueError` if node n is unreachable.
- `routes`
  - `discounted_price(n, edges)`: cheapest fare when one flight may be halved
    (rounded down).
  - `k_cheapest_routes(n, edges, k)`: prices of the `k` cheapest routes, ascending.
  - `investigate(n, edges)`: a `RouteStats` with `price`, `count`,
    `min_flights` and `max_flights` of the cheapest routes, or `None`.
- `dag`
  - `course_order(n, edges)`: a topological order, or `None` if there is a cycle.
  - `longest_route(n, edges)`: route from node 1 to node n visiting the most nodes.
  - `count_routes(n, edges)`: number of routes from node 1 to node n.
- `euler`
  - `mail_route(n, edges)`: a circuit from node 1 using every two-way street
    once, or `None`.

## Examples

```python
from algobook.dp.coins import dice_combinations
from algobook.dp.sequences import edit_distance
from algobook.maths.modular import power_mod
from algobook.maths.divisors import count_divisors

dice_combinations(3)            # 4
edit_distance("LOVE", "MOVIE")  # 2
power_mod(2, 10, 1000)          # 24
count_divisors(16)              # 5
```

## What it does not do

This is a library only. There is no command-line program, and nothing reads
problem input from standard input or prints answers: every function takes
Python values and returns Python values.