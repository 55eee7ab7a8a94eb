"""Search for Hamiltonian cycles in undirected graphs.

Three strategies are offered: exhaustive backtracking from vertex 0, hill
climbing over random vertex swaps, and simulated annealing with vertex 0
held fixed at the start of the tour.
"""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Iterable, Sequence

Adjacency = list[list[int]]

DEFAULT_HILL_ITERATIONS = 500000
DEFAULT_ANNEALING_ITERATIONS = 100000
_COOLING = 0.995


def build_adjacency(n: int, edges: Iterable[tuple[int, int]]) -> Adjacency:
    """Build undirected adjacency lists for ``n`` vertices."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    adj: Adjacency = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 0..{n - 1}")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def has_edge(u: int, v: int, adj: Adjacency) -> bool:
    """Whether ``u`` and ``v`` are joined."""
    return v in adj[u]


def _closing_pairs(path: Sequence[int]):
    return zip(path, [*path[1:], *path[:1]])


def count_cycle_edges(path: Sequence[int], adj: Adjacency) -> int:
    """Number of consecutive pairs of ``path``, wrapping round, that are edges."""
    return sum(has_edge(u, v, adj) for u, v in _closing_pairs(path))


def is_valid_cycle(path: Sequence[int], adj: Adjacency) -> bool:
    """Whether ``path``, closed back to its start, uses only existing edges."""
    return bool(path) and all(has_edge(u, v, adj) for u, v in _closing_pairs(path))


def _closed(path: Sequence[int]) -> list[int]:
    return [*path, path[0]]


def backtracking_cycle(adj: Adjacency) -> list[int] | None:
    """Find a Hamiltonian cycle from vertex 0 by depth-first backtracking.

    The returned list ends with its first vertex; ``None`` means no cycle.
    """
    n = len(adj)
    if n == 0:
        return None
    if n == 1:
        return [0, 0] if has_edge(0, 0, adj) else None

    path = [0]
    visited = {0}
    frontier = [iter(adj[0])]
    while frontier:
        step = next((v for v in frontier[-1] if v not in visited), None)
        if step is None:
            frontier.pop()
            visited.discard(path.pop())
            continue
        path.append(step)
        visited.add(step)
        if len(path) == n:
            if has_edge(step, path[0], adj):
                return _closed(path)
            path.pop()
            visited.discard(step)
        else:
            frontier.append(iter(adj[step]))
    return None


def hill_climbing_cycle(
    adj: Adjacency,
    max_iterations: int = DEFAULT_HILL_ITERATIONS,
    rng: random.Random | None = None,
) -> list[int] | None:
    """Look for a Hamiltonian cycle by random swaps that never lose edges."""
    if rng is None:
        rng = random.Random()
    n = len(adj)
    if n == 0:
        return None
    path = list(range(n))
    rng.shuffle(path)
    score = count_cycle_edges(path, adj)

    for _ in range(max_iterations):
        if score == n:
            break
        i = rng.randrange(n)
        j = rng.randrange(n)
        path[i], path[j] = path[j], path[i]
        new_score = count_cycle_edges(path, adj)
        if new_score >= score:
            score = new_score
        else:
            path[i], path[j] = path[j], path[i]

    return _closed(path) if score == n else None


def annealing_cycle(
    adj: Adjacency,
    iterations: int = DEFAULT_ANNEALING_ITERATIONS,
    rng: random.Random | None = None,
) -> list[int] | None:
    """Look for a Hamiltonian cycle by simulated annealing over vertex swaps."""
    if rng is None:
        rng = random.Random()
    n = len(adj)
    if n == 0:
        return None
    current = list(range(n))
    best = list(current)
    best_score = count_cycle_edges(current, adj)
    temperature = 1.0

    if n >= 2:
        for _ in range(iterations):
            a = 1 + rng.randrange(n - 1)
            b = 1 + rng.randrange(n - 1)
            if a == b:
                continue
            current[a], current[b] = current[b], current[a]
            score = count_cycle_edges(current, adj)
            delta = score - best_score
            if delta > 0 or (
                temperature > 0 and rng.random() < math.exp(delta / temperature)
            ):
                if score > best_score:
                    best_score = score
                    best = list(current)
            else:
                current[a], current[b] = current[b], current[a]
            temperature *= _COOLING

    if best_score == n and is_valid_cycle(best, adj):
        return _closed(best)
    return None


def parse_graph(text: str) -> Adjacency:
    """Read ``n m`` followed by ``m`` undirected edges ``u v``."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"malformed graph: {exc}") from exc
    if len(numbers) < 2:
        raise ValueError("expected vertex and edge counts")
    n, m = numbers[0], numbers[1]
    if m < 0:
        raise ValueError("edge count must not be negative")
    endpoints = numbers[2 : 2 + 2 * m]
    if len(endpoints) < 2 * m:
        raise ValueError(f"expected {m} edges, got {len(endpoints) // 2}")
    ends = iter(endpoints)
    return build_adjacency(n, zip(ends, ends))


def format_result(cycle: Sequence[int] | None) -> str:
    """Render a search result: ``-1`` for none, else ``1`` and the cycle."""
    if cycle is None:
        return "-1"
    return "1\n" + " ".join(map(str, cycle))


_METHODS = {
    "backtracking": lambda adj, rng: backtracking_cycle(adj),
    "hill-climbing": lambda adj, rng: hill_climbing_cycle(adj, DEFAULT_HILL_ITERATIONS, rng),
    "annealing": lambda adj, rng: annealing_cycle(adj, DEFAULT_ANNEALING_ITERATIONS, rng),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print a Hamiltonian cycle or ``-1``."""
    parser = argparse.ArgumentParser(
        prog="heurograph-hamiltonian",
        description="Search an undirected graph for a Hamiltonian cycle.",
    )
    parser.add_argument("--method", choices=sorted(_METHODS), default="backtracking")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        adj = parse_graph(sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    cycle = _METHODS[args.method](adj, random.Random(args.seed))
    print(format_result(cycle))
    return 0


if __name__ == "__main__":
    sys.exit(main())