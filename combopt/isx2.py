"""Partial graph coloring from pairwise disjoint independent sets."""

from __future__ import annotations

import bisect
import random
from collections.abc import Iterable

from .colgraph import ColGraph

_DUP_LIMIT = 100
_DISJOINT_TRIALS = 100


class Isx2(ColGraph):
    """Collects many maximal independent sets and colors a disjoint family of them."""

    def __init__(
        self,
        node_num: int,
        edges: Iterable[tuple[int, int]],
        seed: int | None = None,
    ) -> None:
        super().__init__(node_num, edges)
        self._rng = random.Random(seed)
        self.rand_ratio = 0.5
        self._cand_list: list[int] = []
        self._cand_mark = [False] * node_num
        self._adj_count = [0] * node_num
        self._indep_sets: list[list[int]] = []

    def coloring(self, limit: int) -> tuple[int, list[int]]:
        """Color until at most ``limit`` nodes remain uncolored.

        Returns the number of colors used and the (partial) color map.
        """
        remain_num = self.node_num
        denom = self.node_num - 1
        slimit = max(1, int(self.edge_num * 2.0 / denom)) if denom > 0 else 1

        while remain_num > limit:
            self._indep_sets = []
            dcount = 0
            while dcount < _DUP_LIMIT and len(self._indep_sets) < slimit:
                if self._add_indep_set(self._get_indep_set()):
                    dcount = 0
                else:
                    dcount += 1

            best: list[int] = []
            for _ in range(_DISJOINT_TRIALS):
                tmp = self._get_max_disjoint_set()
                if len(tmp) > len(best):
                    best = tmp

            for i in best:
                iset = self._indep_sets[i]
                self.set_colors(iset, self.new_color())
                remain_num -= len(iset)

        return self.color_num, self.color_map()

    def _get_indep_set(self) -> list[int]:
        self._init_cand_list()
        node0 = self._rng.choice(self._cand_list)
        indep_set = [node0]
        self._update_cand_list(node0)
        while self._cand_list:
            node_id = self._select_node()
            indep_set.append(node_id)
            self._update_cand_list(node_id)
        indep_set.sort()
        return indep_set

    def _add_indep_set(self, indep_set: list[int]) -> bool:
        sets = self._indep_sets
        pos = bisect.bisect_left(sets, indep_set)
        if pos < len(sets) and sets[pos] == indep_set:
            return False
        sets.insert(pos, indep_set)
        return True

    def _get_max_disjoint_set(self) -> list[int]:
        sets = self._indep_sets
        i0 = self._rng.randrange(len(sets))
        chosen = [i0]

        used = set(sets[i0])
        cand_list = [
            i for i, iset in enumerate(sets)
            if i != i0 and used.isdisjoint(iset)
        ]
        cand_list.sort(key=lambda i: len(sets[i]), reverse=True)

        while cand_list:
            n0 = len(sets[cand_list[0]])
            top = [i for i in cand_list if len(sets[i]) == n0]
            i1 = self._rng.choice(top)
            chosen.append(i1)
            used1 = set(sets[i1])
            cand_list = [i for i in cand_list if used1.isdisjoint(sets[i])]
        return chosen

    def _init_cand_list(self) -> None:
        self._cand_list = [n for n in range(self.node_num) if self.color(n) == 0]
        for node_id in self._cand_list:
            self._cand_mark[node_id] = True
            self._adj_count[node_id] = 0
        for node_id in self._cand_list:
            for node1_id in self.adj_list(node_id):
                self._adj_count[node1_id] += 1

    def _select_node(self) -> int:
        if self._rng.random() < self.rand_ratio:
            return self._rng.choice(self._cand_list)
        min_num = min(self._adj_count[n] for n in self._cand_list)
        best = [n for n in self._cand_list if self._adj_count[n] == min_num]
        return self._rng.choice(best)

    def _update_cand_list(self, node_id: int) -> None:
        mark = self._cand_mark
        mark[node_id] = False
        for node1_id in self.adj_list(node_id):
            if mark[node1_id]:
                mark[node1_id] = False
                for node2_id in self.adj_list(node1_id):
                    self._adj_count[node2_id] -= 1
        self._cand_list = [n for n in self._cand_list if mark[n]]