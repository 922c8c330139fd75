"""Partial graph coloring by repeated independent set extraction."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .colgraph import ColGraph


class Isx(ColGraph):
    """Repeatedly extracts a maximal independent set and gives it a new color."""

    def __init__(
        self,
        node_num: int,
        edges: Iterable[tuple[int, int]],
        seed: int | None = None,
    ) -> None:
        super().__init__(node_num, edges)
        self._rng = random.Random(seed)
        self._cand_list: list[int] = []
        self._cand_mark = [False] * node_num
        self._adj_count = [0] * node_num
        self._indep_set: list[int] = []

    def coloring(self, limit: int) -> tuple[int, list[int]]:
        """Color until at most ``limit`` nodes remain uncolored.

        Returns the number of colors used and the (partial) color map.
        """
        remain_num = self.node_num
        while remain_num > limit:
            self._get_indep_set()
            self.set_colors(self._indep_set, self.new_color())
            remain_num -= len(self._indep_set)
        return self.color_num, self.color_map()

    def _get_indep_set(self) -> None:
        self._init_cand_list()
        self._indep_set = []
        node_id = self._rng.choice(self._cand_list)
        while True:
            self._indep_set.append(node_id)
            self._update_cand_list(node_id)
            if not self._cand_list:
                break
            min_num = min(self._adj_count[n] for n in self._cand_list)
            best = [n for n in self._cand_list if self._adj_count[n] == min_num]
            node_id = self._rng.choice(best)

    def _init_cand_list(self) -> None:
        self._cand_list = [n for n in range(self.node_num) if self.color(n) == 0]
        for node_id in self._cand_list:
            self._cand_mark[node_id] = True
            self._adj_count[node_id] = 0
        for node_id in self._cand_list:
            for node1_id in self.adj_list(node_id):
                self._adj_count[node1_id] += 1

    def _update_cand_list(self, node_id: int) -> None:
        mark = self._cand_mark
        mark[node_id] = False
        for node1_id in self.adj_list(node_id):
            if mark[node1_id]:
                mark[node1_id] = False
                for node2_id in self.adj_list(node1_id):
                    self._adj_count[node2_id] -= 1

        remaining = []
        for node1_id in self._cand_list:
            if not mark[node1_id]:
                continue
            if self._adj_count[node1_id] == 0:
                # No remaining candidate is adjacent: it joins the set at once.
                mark[node1_id] = False
                self._indep_set.append(node1_id)
            else:
                remaining.append(node1_id)
        self._cand_list = remaining