"""Graph representation shared by the graph coloring heuristics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class ColGraph:
    """An undirected graph together with a (possibly partial) node coloring.

    Colors are positive integers; ``0`` marks an uncolored node.  Self loops
    are dropped, since such a node could never be colored.  Edges whose two
    ends are both already colored are dropped as well.
    """

    def __init__(
        self,
        node_num: int,
        edges: Iterable[tuple[int, int]],
        color_map: Sequence[int] | None = None,
    ) -> None:
        if node_num < 0:
            raise ValueError(f"node_num must not be negative: {node_num}")
        colors = [0] * node_num if color_map is None else list(color_map)
        if len(colors) != node_num:
            raise ValueError(
                f"color_map has {len(colors)} entries, expected {node_num}"
            )
        if any(c < 0 for c in colors):
            raise ValueError("colors must not be negative")

        self.node_num = node_num
        self._colors = colors
        self.color_num = max(colors, default=0)
        # Nodes that were uncolored when the graph was built.
        self.node_list = tuple(i for i, c in enumerate(colors) if c == 0)

        adj: list[list[int]] = [[] for _ in range(node_num)]
        edge_num = 0
        for id1, id2 in edges:
            for node_id in (id1, id2):
                if not 0 <= node_id < node_num:
                    raise ValueError(f"node id out of range: {node_id}")
            if id1 == id2:
                continue
            if colors[id1] > 0 and colors[id2] > 0:
                continue
            edge_num += 1
            adj[id1].append(id2)
            adj[id2].append(id1)
        self._adj = [tuple(a) for a in adj]
        self.edge_num = edge_num

    def color(self, node_id: int) -> int:
        """Return the color of a node (0 when uncolored)."""
        return self._colors[node_id]

    def set_color(self, node_id: int, color: int) -> None:
        """Assign a color to one node."""
        self._colors[node_id] = color

    def set_colors(self, node_ids: Iterable[int], color: int) -> None:
        """Assign the same color to several nodes."""
        for node_id in node_ids:
            self._colors[node_id] = color

    def new_color(self) -> int:
        """Allocate and return a fresh color number."""
        self.color_num += 1
        return self.color_num

    def adj_list(self, node_id: int) -> tuple[int, ...]:
        """Return the nodes adjacent to ``node_id``."""
        return self._adj[node_id]

    def color_map(self) -> list[int]:
        """Return a copy of the current coloring."""
        return list(self._colors)

    def is_colored(self) -> bool:
        """Return True when every node has a color."""
        return all(c != 0 for c in self._colors)

    def verify(self) -> bool:
        """Return True when no two adjacent nodes share a color.

        Uncolored nodes are not treated specially.
        """
        return all(
            self._colors[id1] != self._colors[id2]
            for id1 in range(self.node_num)
            for id2 in self._adj[id1]
        )