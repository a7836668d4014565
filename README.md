# algokit

Classic algorithms and data structures in plain Python, with no runtime
dependencies. Every function takes ordinary Python values (lists, tuples,
strings, integers) and returns new ones; where a search finds nothing the
result is `None`, and unreachable distances are `math.inf`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.numbers`: `prime_sieve`, `primes_up_to`, `nth_prime`, `lcm_up_to`,
  `factorial`, `gcd`, `fibonacci`, `fibonacci_series`, `decimal_to_binary`,
  `sum_to`, `is_armstrong`, `to_roman`.
- `algokit.puzzles`: `hanoi_moves` (a generator of `(from, to)` moves),
  `mod_pow`, `rod_cutting_top_down`, `rod_cutting_bottom_up`.
- `algokit.geometry`: `Point`, `distance`, `brute_force_closest`,
  `closest_pair_distance`.
- `algokit.strings`: `precedence`, `infix_to_postfix`, `prefix_function`,
  `kmp_search`, `is_palindrome`, `is_valid_brackets`, `brute_force_search`,
  `SuffixTrie`, `substring_search`.
- `algokit.arrays`: `binary_search`, `two_sum`, `next_smaller_naive`,
  `next_smaller`, `previous_smaller`, `count_occurrences`, `delete_value`.
- `algokit.linked`: `LinkedList` (1-based `insert_at`/`remove_at`,
  `push_front`, `push_back`, `remove_front`, `remove_back`, `reverse`,
  `reverse_recursive`, iteration and `len`), `ListNode`, `TreeNode` and the
  `postorder` generator.
- `algokit.graphs.traversal`: `DirectedGraph` and `UndirectedGraph` with
  `bfs`/`dfs`, `bfs_order`, `dfs_order`, `adjacency_rows`,
  `can_visit_all_rooms`, `find_judge`, `Employee`, `total_importance`,
  `minutes_to_inform`.
- `algokit.graphs.coloring`: `is_bipartite`, `possible_bipartition`,
  `EulerKind` and `euler_kind`.
- `algokit.graphs.ordering`: `topological_sort_dfs`, `topological_sort_kahn`
  (shorter than the vertex count exactly when the graph has a cycle),
  `can_finish`, `find_order`, `eventual_safe_nodes`,
  `count_strongly_connected`.
- `algokit.graphs.disjoint`: `DisjointSet` (union by rank, path compression,
  `find`, `union`, `connected`, `set_count`) and `has_cycle` for undirected
  edge lists.
- `algokit.graphs.shortest`: `WeightedGraph`, `dijkstra`, `dijkstra_matrix`,
  `bellman_ford`, `has_negative_cycle`, `floyd_warshall`,
  `shortest_path_faster`, `bfs_distances`, `dag_shortest_paths`,
  `network_delay_time`, `cheapest_price`, `find_the_city`. Negative cycles
  raise `NegativeCycleError`.
- `algokit.graphs.spanning`: `Edge`, `minimum_spanning_tree` (Kruskal),
  `prim_parents`, `spanning_tree_weight` (Prim with a heap).
- `algokit.graphs.unions`: `find_circle_num`, `find_redundant_connection`,
  `remove_stones`, `make_connected`, `equations_possible`, `accounts_merge`.
- `algokit.graphs.grids`: `flood_fill`, `num_islands`, `max_area_of_island`,
  `closed_island`, `num_enclaves`, `solve_surrounded`, `color_border`,
  `update_matrix`, `max_distance`, `oranges_rotting`,
  `shortest_path_binary_matrix`, `find_paths`. Grid inputs are never modified.

## Examples

```python
from algokit.numbers import lcm_up_to, to_roman
from algokit.strings import infix_to_postfix, kmp_search
from algokit.graphs.disjoint import DisjointSet
from algokit.graphs.shortest import WeightedGraph

lcm_up_to(7)                      # 420
to_roman(1994)                    # "MCMXCIV"
infix_to_postfix("a+b*c")         # "abc*+"
kmp_search("ABABCABAB", "ABABDABACDABABCABAB")  # [10]

sets = DisjointSet(range(4))
sets.union(0, 1)                  # True
sets.connected(0, 1)              # True
sets.set_count                    # 3

g = WeightedGraph(3)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 3)
g.shortest_paths(0)               # [0, 4, 7]
```

## What it does not do

`algokit` is a library only: it has no command-line program and reads no
input of its own. It offers no general-purpose sorting routines beyond the
orderings listed above, and directed cycle detection is available only
through `topological_sort_kahn` and `can_finish`.