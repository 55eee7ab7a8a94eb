# heurograph

Small graph algorithms and search heuristics, usable as a library or from
the command line. Every command reads its problem from standard input and
writes its answer to standard output. Malformed input is reported on standard
error as `error: ...` with exit status 1.

The package has no runtime dependencies beyond the Python standard library
(Python 3.10 or later).

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

### Bastion route planning

    heurograph-bastions [--duration SECONDS] [--seed N] < input.txt

Input: the number of bastions `n`, then `n` triples `x y value`, then
`speed T_realise T_empty`. The route starts at the origin and visits bastions
in order. A bastion's gold keeps its full value until `T_realise`, decays
linearly after that and is worth nothing from `T_empty` on; a route stops
collecting once the elapsed time reaches `T_empty`.

A greedy route (best gold per unit of travel time first) is refined by
simulated annealing for `--duration` seconds (default 1.8). The output is the
number of bastions in the route, then their indices on one line. `--seed`
makes the annealing reproducible.

### Hamiltonian cycle

    heurograph-hamiltonian [--method {annealing,backtracking,hill-climbing}] [--seed N] < graph.txt

Input: `n m` followed by `m` undirected edges `u v` (0-indexed). Prints `1`
and the cycle, ending back at its first vertex, if one is found, otherwise
`-1`.

- `backtracking` (default): exhaustive depth-first search from vertex 0; it
  finds a cycle whenever one exists.
- `hill-climbing`: up to 500000 random vertex swaps, keeping any swap that
  does not lose edges.
- `annealing`: 100000 steps of simulated annealing over swaps, with vertex 0
  kept at the start of the tour.

The two heuristic methods may report `-1` for a graph that does have a cycle.

### Weighted directed graph analysis

    heurograph-graph < graph.txt

Input: `V E`, then `E` triples `u v weight`, then a source and a destination
vertex. The command prints:

- whether the graph has a directed cycle,
- the shortest path length from source to destination, or that no path exists,
- the minimum spanning tree weight with edges treated as undirected (`-1` if
  the edges do not connect every vertex),
- the strongly connected components, numbered in discovery order,
- a topological order of the component DAG, by component number.

## Library use

```python
from heurograph.graph import Graph
from heurograph.hamiltonian import build_adjacency, backtracking_cycle

g = Graph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)])
g.dijkstra(0, 2)       # 5  (None when unreachable)
g.kruskal_mst()        # 5  (None when the graph is not connected)
g.has_cycle()          # False
g.scc_and_topological_order()  # (components, order of component numbers)

adj = build_adjacency(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
backtracking_cycle(adj)  # [0, 1, 2, 3, 0]
```

Modules:

- `heurograph.graph` — `Graph` with `has_cycle`, `dijkstra`, `kruskal_mst`
  and `scc_and_topological_order`.
- `heurograph.hamiltonian` — `build_adjacency`, `has_edge`,
  `count_cycle_edges`, `is_valid_cycle`, `backtracking_cycle`,
  `hill_climbing_cycle`, `annealing_cycle`, `parse_graph`, `format_result`.
  The cycle searches return the closed cycle as a list, or `None`.
- `heurograph.bastions` — `Bastion`, `Schedule` (with `travel_time` and
  `value_at`), `compute_score`, `greedy_initial`, `simulated_annealing` and
  `parse_input`.

Vertex numbers outside the graph raise `ValueError`, as does malformed text
given to the parsing functions.

The heuristic functions `hill_climbing_cycle`, `annealing_cycle` and
`simulated_annealing` accept a `random.Random` instance so runs can be made
reproducible.