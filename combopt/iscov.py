"""Partial graph coloring by independent set covering."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .colgraph import ColGraph


class IsCov:
    """Repeatedly builds an independent set of low-degree nodes and colors it."""

    def __init__(
        self,
        node_num: int,
        edges: Iterable[tuple[int, int]],
        seed: int | None = None,
    ) -> None:
        self._graph = ColGraph(node_num, edges)
        self._rng = random.Random(seed)

    def covering(self, limit: int) -> tuple[int, list[int]]:
        """Color until at most ``limit`` nodes remain uncolored.

        Returns the number of colors used and the (partial) color map.
        """
        if limit < 0:
            raise ValueError(f"limit must not be negative: {limit}")
        graph = self._graph
        remain_num = graph.node_num
        while remain_num > limit:
            cand_list = [
                n for n in range(graph.node_num) if graph.color(n) == 0
            ]
            iset: list[int] = []
            while cand_list:
                node_id = self._select_node(cand_list)
                iset.append(node_id)
                cand_list = self._update_cand_list(cand_list, node_id)
            graph.set_colors(iset, graph.new_color())
            remain_num -= len(iset)
        return graph.color_num, graph.color_map()

    def _select_node(self, cand_list: list[int]) -> int:
        graph = self._graph
        min_num = min(len(graph.adj_list(n)) for n in cand_list)
        best = [n for n in cand_list if len(graph.adj_list(n)) == min_num]
        if len(best) == 1:
            return best[0]
        return self._rng.choice(best)

    def _update_cand_list(self, cand_list: list[int], node_id: int) -> list[int]:
        excluded = {node_id, *self._graph.adj_list(node_id)}
        return [n for n in cand_list if n not in excluded]