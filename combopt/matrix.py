"""Sparse 0/1 matrices for unate covering problems."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from .headlist import Cell, Head, HeadList, check_containment

ColComp = Callable[[int, int], bool]


@dataclass
class ReduceResult:
    """Outcome of a reduction step.

    ``selected_cols`` were chosen as essential, ``deleted_cols`` were removed
    as dominated or empty, and ``reduced`` tells whether anything changed.
    """

    selected_cols: list[int] = field(default_factory=list)
    deleted_cols: list[int] = field(default_factory=list)
    reduced: bool = False


class McMatrix:
    """A sparse covering matrix with row and column deletion that can be undone.

    Each column carries a cost (1 by default).  Deleted rows and columns are
    pushed on a stack; :meth:`save` sets a marker and :meth:`restore` undoes
    everything back to the last marker.
    """

    def __init__(
        self,
        row_size: int = 0,
        col_size: int | None = None,
        elem_list: Iterable[tuple[int, int]] = (),
        cost_array: Sequence[int] | None = None,
    ) -> None:
        costs: list[int] | None = None
        if cost_array is not None:
            costs = list(cost_array)
            if col_size is None:
                col_size = len(costs)
            elif col_size != len(costs):
                raise ValueError(
                    f"cost_array has {len(costs)} entries, expected {col_size}"
                )
        if col_size is None:
            col_size = 0
        self.resize(row_size, col_size)
        if costs is not None:
            self._costs = costs
        self.insert_elems(elem_list)

    # Size and structure.

    @property
    def row_size(self) -> int:
        """The number of rows, deleted ones included."""
        return len(self._row_heads)

    @property
    def col_size(self) -> int:
        """The number of columns, deleted ones included."""
        return len(self._col_heads)

    def resize(self, row_size: int, col_size: int) -> None:
        """Make the matrix an empty ``row_size`` x ``col_size`` matrix."""
        if row_size < 0 or col_size < 0:
            raise ValueError(f"negative size: {row_size} x {col_size}")
        self._row_heads = [Head(pos, False) for pos in range(row_size)]
        self._col_heads = [Head(pos, True) for pos in range(col_size)]
        self._row_head_list = HeadList()
        self._col_head_list = HeadList()
        self._costs = [1] * col_size
        self._stack: list[Head | None] = []

    def clear(self) -> None:
        """Remove every element, keeping the size; costs go back to 1."""
        self.resize(self.row_size, self.col_size)

    def copy(self) -> McMatrix:
        """Return an independent matrix with the same elements and costs."""
        other = McMatrix(self.row_size, cost_array=self._costs)
        for row_pos, head in enumerate(self._row_heads):
            for col_pos in head:
                other.insert_elem(row_pos, col_pos)
        return other

    def _row_head(self, row_pos: int) -> Head:
        if not 0 <= row_pos < self.row_size:
            raise IndexError(f"row position out of range: {row_pos}")
        return self._row_heads[row_pos]

    def _col_head(self, col_pos: int) -> Head:
        if not 0 <= col_pos < self.col_size:
            raise IndexError(f"column position out of range: {col_pos}")
        return self._col_heads[col_pos]

    # Queries.

    def active_row_num(self) -> int:
        """Return the number of active rows."""
        return len(self._row_head_list)

    def active_col_num(self) -> int:
        """Return the number of active columns."""
        return len(self._col_head_list)

    def row_head_list(self) -> HeadList:
        """Return the list of active rows."""
        return self._row_head_list

    def col_head_list(self) -> HeadList:
        """Return the list of active columns."""
        return self._col_head_list

    def row_list(self, row_pos: int) -> list[int]:
        """Return the column positions of the elements in a row."""
        return list(self._row_head(row_pos))

    def row_elem_num(self, row_pos: int) -> int:
        """Return the number of elements in a row."""
        return self._row_head(row_pos).num

    def row_deleted(self, row_pos: int) -> bool:
        """Return True when the row has been deleted."""
        return self._row_head(row_pos).deleted

    def col_list(self, col_pos: int) -> list[int]:
        """Return the row positions of the elements in a column."""
        return list(self._col_head(col_pos))

    def col_elem_num(self, col_pos: int) -> int:
        """Return the number of elements in a column."""
        return self._col_head(col_pos).num

    def col_deleted(self, col_pos: int) -> bool:
        """Return True when the column has been deleted."""
        return self._col_head(col_pos).deleted

    def col_cost(self, col_pos: int) -> int:
        """Return the cost of a column."""
        self._col_head(col_pos)
        return self._costs[col_pos]

    def cost(self, col_list: Iterable[int]) -> int:
        """Return the total cost of a set of columns."""
        return sum(self.col_cost(col_pos) for col_pos in col_list)

    def verify(self, col_list: Iterable[int]) -> bool:
        """Return True when the columns cover every row."""
        covered: set[int] = set()
        for col_pos in col_list:
            covered.update(self._col_head(col_pos))
        return all(row_pos in covered for row_pos in range(self.row_size))

    def dump(self, stream: TextIO | None = None) -> None:
        """Write the costs that differ from 1 and the rows to ``stream``."""
        out = sys.stdout if stream is None else stream
        for col_pos, c in enumerate(self._costs):
            if c != 1:
                out.write(f"Col#{col_pos}: {c}\n")
        for row_pos, head in enumerate(self._row_heads):
            cols = "".join(f" {col_pos}" for col_pos in head)
            out.write(f"Row#{row_pos}:{cols}\n")

    # Building.

    def insert_elem(self, row_pos: int, col_pos: int) -> bool:
        """Add an element; return False if it was already present."""
        row_head = self._row_head(row_pos)
        col_head = self._col_head(col_pos)
        cell = Cell(row_pos, col_pos)
        if not row_head.row_insert(cell):
            return False
        col_head.col_insert(cell)
        if row_head.prev is None:
            self._row_head_list.insert(row_head)
        if col_head.prev is None:
            self._col_head_list.insert(col_head)
        return True

    def insert_elems(self, elem_list: Iterable[tuple[int, int]]) -> None:
        """Add several ``(row, column)`` elements."""
        for row_pos, col_pos in elem_list:
            self.insert_elem(row_pos, col_pos)

    # Deletion and restoration.

    def delete_row(self, row_pos: int) -> None:
        """Delete a row, unlinking its elements from their columns."""
        head = self._row_head(row_pos)
        if head.prev is None:
            raise ValueError(f"row {row_pos} has no elements")
        self._row_head_list.exclude(head)
        self._stack.append(head)
        for cell in head.cells():
            self._col_heads[cell.col_pos].col_delete(cell)

    def delete_col(self, col_pos: int) -> None:
        """Delete a column, unlinking its elements from their rows."""
        head = self._col_head(col_pos)
        if head.prev is None:
            raise ValueError(f"column {col_pos} has no elements")
        self._col_head_list.exclude(head)
        self._stack.append(head)
        for cell in head.cells():
            self._row_heads[cell.row_pos].row_delete(cell)

    def _restore_row(self, head: Head) -> None:
        self._row_head_list.restore(head)
        for cell in head.cells():
            self._col_heads[cell.col_pos].col_restore(cell)

    def _restore_col(self, head: Head) -> None:
        self._col_head_list.restore(head)
        for cell in head.cells():
            self._row_heads[cell.row_pos].row_restore(cell)

    def _push(self, head: Head | None) -> None:
        self._stack.append(head)

    def _pop(self) -> Head | None:
        return self._stack.pop()

    def _stack_empty(self) -> bool:
        return not self._stack

    def save(self) -> None:
        """Mark the current state so that :meth:`restore` can return to it."""
        self._stack.append(None)

    def restore(self) -> None:
        """Undo deletions back to the last marker (or to the start)."""
        while self._stack:
            head = self._stack.pop()
            if head is None:
                break
            if head.is_row:
                self._restore_row(head)
            else:
                self._restore_col(head)

    def set_row_dirty(self, row_pos: int) -> None:
        """Flag a row for the next dominance check."""
        self._row_head(row_pos).dirty = True

    def set_col_dirty(self, col_pos: int) -> None:
        """Flag a column for the next dominance check."""
        self._col_head(col_pos).dirty = True

    def select_col(self, col_pos: int) -> None:
        """Delete the rows a column covers, then the column itself."""
        head = self._col_head(col_pos)
        if head.deleted:
            raise ValueError(f"column {col_pos} is already deleted")
        for row_pos in list(head):
            self.delete_row(row_pos)
        self.delete_col(col_pos)

    # Reduction.

    def reduce(self, col_comp: ColComp | None = None) -> ReduceResult:
        """Apply column dominance, essential columns and row dominance once.

        ``col_comp(col1, col2)`` tells whether replacing ``col1`` by ``col2``
        never raises the total cost; without it every replacement is allowed.
        """
        result = ReduceResult()
        if self._col_dominance(result.deleted_cols, col_comp):
            result.reduced = True
        if self._essential_col(result.selected_cols):
            result.reduced = True
        if self._row_dominance():
            result.reduced = True
        return result

    def reduce_loop(self, col_comp: ColComp | None = None) -> ReduceResult:
        """Call :meth:`reduce` until nothing changes; collect all results."""
        total = ReduceResult()
        while True:
            step = self.reduce(col_comp)
            total.selected_cols.extend(step.selected_cols)
            total.deleted_cols.extend(step.deleted_cols)
            if not step.reduced:
                return total
            total.reduced = True

    def _row_dominance(self) -> bool:
        marked: set[int] = set()
        del_list: list[int] = []
        for row1 in list(self._row_head_list):
            if row1 in marked:
                continue
            head1 = self._row_heads[row1]
            cols = list(head1)
            if not cols:
                continue
            min_col = min(cols, key=lambda c: self._col_heads[c].num)
            for row2 in list(self._col_heads[min_col]):
                if row2 == row1 or row2 in marked:
                    continue
                head2 = self._row_heads[row2]
                if head2.num < head1.num:
                    continue
                if not head1.dirty and not head2.dirty:
                    continue
                if check_containment(head2, head1):
                    marked.add(row2)
                    del_list.append(row2)
        for head in self._row_head_list.heads():
            head.dirty = False
        for row_pos in del_list:
            self.delete_row(row_pos)
        return bool(del_list)

    def _col_dominance(
        self, deleted_cols: list[int], col_comp: ColComp | None
    ) -> bool:
        marked: set[int] = set()
        del_list: list[int] = []
        for col1 in list(self._col_head_list):
            head1 = self._col_heads[col1]
            if head1.num == 0:
                del_list.append(col1)
                continue
            min_row = min(head1, key=lambda r: self._row_heads[r].num)
            for col2 in list(self._row_heads[min_row]):
                if col2 == col1 or col2 in marked:
                    continue
                head2 = self._col_heads[col2]
                if head2.num < head1.num:
                    continue
                if not head1.dirty and not head2.dirty:
                    continue
                if check_containment(head2, head1) and (
                    col_comp is None or col_comp(col1, col2)
                ):
                    marked.add(col1)
                    del_list.append(col1)
                    break
        for head in self._col_head_list.heads():
            head.dirty = False
        for col_pos in del_list:
            self.delete_col(col_pos)
            deleted_cols.append(col_pos)
        return bool(del_list)

    def _essential_col(self, selected_cols: list[int]) -> bool:
        new_cols: list[int] = []
        for head in self._row_head_list.heads():
            if head.num == 1:
                col_pos = head.front()
                if col_pos not in new_cols:
                    new_cols.append(col_pos)
        for col_pos in new_cols:
            self.select_col(col_pos)
        selected_cols.extend(new_cols)
        return bool(new_cols)