"""Maximum clique search on an undirected graph."""

from __future__ import annotations

from collections.abc import Iterable

_SEARCH_LIMIT = 10000


class MclqSolver:
    """Finds large cliques greedily or by bounded branch and bound."""

    def __init__(self, node_num: int, edges: Iterable[tuple[int, int]]) -> None:
        if node_num < 0:
            raise ValueError(f"node_num must not be negative: {node_num}")
        self.node_num = node_num
        adj: list[list[int]] = [[] for _ in range(node_num)]
        for id1, id2 in edges:
            for node_id in (id1, id2):
                if not 0 <= node_id < node_num:
                    raise ValueError(f"node id out of range: {node_id}")
            adj[id1].append(id2)
            adj[id2].append(id1)
        self._adj = [tuple(a) for a in adj]
        self._count = 0

    def greedy(self) -> list[int]:
        """Return a clique built by repeatedly taking the best-connected node."""
        adj = self._adj
        adj_num = [len(a) for a in adj]
        alive = [True] * self.node_num
        remaining = list(range(self.node_num))
        node_set: list[int] = []

        while remaining:
            best = max(remaining, key=lambda i: (adj_num[i], -i))
            alive[best] = False
            node_set.append(best)

            marked = set(adj[best])
            kept: list[int] = []
            for node in remaining:
                if node == best:
                    continue
                if node in marked:
                    kept.append(node)
                    continue
                alive[node] = False
                for node1 in adj[node]:
                    if alive[node1]:
                        adj_num[node1] -= 1
            remaining = kept

        return node_set

    def exact(self) -> list[int]:
        """Return a maximum clique by branch and bound.

        The search stops after a fixed number of steps, so on large graphs
        the result may be smaller than the true maximum.
        """
        self._count = 0
        return self._recur([], list(range(self.node_num)), 0)

    def _recur(self, selected: list[int], rest: list[int], best_so_far: int) -> list[int]:
        if len(selected) + len(rest) <= best_so_far:
            return []

        self._count += 1
        if self._count >= _SEARCH_LIMIT:
            return []

        if not rest:
            return list(selected)

        rest_set = set(rest)
        scored = [
            (node, sum(1 for n in self._adj[node] if n in rest_set))
            for node in rest
        ]
        scored.sort(key=lambda p: p[1], reverse=True)

        max_val = best_so_far
        node_set: list[int] = []
        for node1, _ in scored:
            neighbours = set(self._adj[node1])
            new_rest = [n for n in rest if n in neighbours]
            found = self._recur(selected + [node1], new_rest, max_val)
            if len(found) > max_val:
                max_val = len(found)
                node_set = found
        return node_set


def max_clique(
    node_num: int,
    edges: Iterable[tuple[int, int]],
    algorithm: str = "greedy",
) -> list[int]:
    """Return a large clique; ``algorithm`` is ``exact`` or ``greedy`` (default)."""
    solver = MclqSolver(node_num, edges)
    if algorithm == "exact":
        return solver.exact()
    return solver.greedy()