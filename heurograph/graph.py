"""Classic algorithms on a weighted directed graph.

Covers cycle detection, Dijkstra shortest paths, Kruskal minimum spanning
tree (edges treated as undirected), and Kosaraju strongly connected
components with a topological order of the condensation.
"""

from __future__ import annotations

import heapq
import sys
from collections import deque
from typing import Iterable, Sequence

Edge = tuple[int, int, int]


class Graph:
    """A directed graph with integer edge weights."""

    def __init__(self, vertex_count: int, edges: Iterable[Edge]) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.edges: list[Edge] = []
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
        for u, v, w in edges:
            self._check_vertex(u)
            self._check_vertex(v)
            self.edges.append((u, v, w))
            self._adj[u].append((v, w))

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(
                f"vertex {vertex} is outside 0..{self.vertex_count - 1}"
            )

    def has_cycle(self) -> bool:
        """Whether the graph contains a directed cycle."""
        visited = [False] * self.vertex_count
        on_stack = [False] * self.vertex_count
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = on_stack[root] = True
            stack = [(root, iter(self._adj[root]))]
            while stack:
                u, neighbours = stack[-1]
                for v, _ in neighbours:
                    if on_stack[v]:
                        return True
                    if not visited[v]:
                        visited[v] = on_stack[v] = True
                        stack.append((v, iter(self._adj[v])))
                        break
                else:
                    on_stack[u] = False
                    stack.pop()
        return False

    def dijkstra(self, source: int, destination: int) -> int | None:
        """Length of the shortest path, or ``None`` if ``destination`` is unreachable."""
        self._check_vertex(source)
        self._check_vertex(destination)
        dist: list[int | None] = [None] * self.vertex_count
        dist[source] = 0
        queue = [(0, source)]
        while queue:
            d, u = heapq.heappop(queue)
            if u == destination:
                return d
            base = dist[u]
            for v, w in self._adj[u]:
                candidate = base + w
                if dist[v] is None or candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(queue, (candidate, v))
        return None

    def kruskal_mst(self) -> int | None:
        """Weight of a minimum spanning tree, treating edges as undirected.

        Returns ``None`` when the edges do not connect every vertex.
        """
        parent = list(range(self.vertex_count))
        rank = [0] * self.vertex_count

        def find(u: int) -> int:
            root = u
            while parent[root] != root:
                root = parent[root]
            while parent[u] != root:
                parent[u], u = root, parent[u]
            return root

        def unite(u: int, v: int) -> bool:
            u, v = find(u), find(v)
            if u == v:
                return False
            if rank[u] < rank[v]:
                parent[u] = v
            elif rank[u] > rank[v]:
                parent[v] = u
            else:
                parent[v] = u
                rank[u] += 1
            return True

        needed = self.vertex_count - 1
        weight = 0
        used = 0
        for u, v, w in sorted(self.edges, key=lambda edge: edge[2]):
            if unite(u, v):
                weight += w
                used += 1
                if used == needed:
                    break
        return weight if used == needed else None

    def _finish_order(self) -> list[int]:
        visited = [False] * self.vertex_count
        order: list[int] = []
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, iter(self._adj[root]))]
            while stack:
                u, neighbours = stack[-1]
                for v, _ in neighbours:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, iter(self._adj[v])))
                        break
                else:
                    order.append(u)
                    stack.pop()
        return order

    def scc_and_topological_order(self) -> tuple[list[list[int]], list[int]]:
        """Strongly connected components and a topological order of their DAG.

        Components are numbered in discovery order; the order lists their
        numbers.
        """
        reverse_adj: list[list[int]] = [[] for _ in range(self.vertex_count)]
        for u, v, _ in self.edges:
            reverse_adj[v].append(u)

        visited = [False] * self.vertex_count
        sccs: list[list[int]] = []
        for root in reversed(self._finish_order()):
            if visited[root]:
                continue
            visited[root] = True
            component = [root]
            stack = [iter(reverse_adj[root])]
            while stack:
                for v in stack[-1]:
                    if not visited[v]:
                        visited[v] = True
                        component.append(v)
                        stack.append(iter(reverse_adj[v]))
                        break
                else:
                    stack.pop()
            sccs.append(component)

        component_of = {
            node: number for number, component in enumerate(sccs) for node in component
        }
        dag: list[set[int]] = [set() for _ in sccs]
        for u, v, _ in self.edges:
            cu, cv = component_of[u], component_of[v]
            if cu != cv:
                dag[cu].add(cv)

        indegree = [0] * len(sccs)
        for successors in dag:
            for v in successors:
                indegree[v] += 1

        ready = deque(number for number, count in enumerate(indegree) if count == 0)
        order: list[int] = []
        while ready:
            u = ready.popleft()
            order.append(u)
            for v in sorted(dag[u]):
                indegree[v] -= 1
                if indegree[v] == 0:
                    ready.append(v)
        return sccs, order


def _parse(text: str) -> tuple[Graph, int, int]:
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from exc
    if len(numbers) < 2:
        raise ValueError("expected vertex and edge counts")
    vertex_count, edge_count = numbers[0], numbers[1]
    if edge_count < 0:
        raise ValueError("edge count must not be negative")
    needed = 2 + 3 * edge_count + 2
    if len(numbers) < needed:
        raise ValueError("input ends before all edges and the query are given")
    fields = iter(numbers[2 : 2 + 3 * edge_count])
    graph = Graph(vertex_count, zip(fields, fields, fields))
    source, destination = numbers[needed - 2 : needed]
    return graph, source, destination


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph and a query from standard input and report on it."""
    del argv
    try:
        graph, source, destination = _parse(sys.stdin.read())
        distance = graph.dijkstra(source, destination)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Cycle Detected? {'Yes' if graph.has_cycle() else 'No'}")
    if distance is not None:
        print(f"Shortest Path {source} -> {destination}: {distance}")
    else:
        print(f"No path exists from {source} to {destination}")
    mst = graph.kruskal_mst()
    print(f"MST Weight (undirected assumption): {-1 if mst is None else mst}")

    sccs, order = graph.scc_and_topological_order()
    print("\nStrongly Connected Components:")
    for number, component in enumerate(sccs):
        print(f"SCC {number}: " + " ".join(map(str, component)))
    print("\nTopological Order of SCC-DAG: " + " ".join(map(str, order)))
    return 0


if __name__ == "__main__":
    sys.exit(main())