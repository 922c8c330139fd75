"""Linked cells, row/column heads and head lists for sparse covering matrices."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Cell:
    """A matrix element linked into both its row list and its column list.

    ``left``/``right`` link the cell along its row (ordered by column),
    ``up``/``down`` along its column (ordered by row).
    """

    __slots__ = ("row_pos", "col_pos", "left", "right", "up", "down")

    def __init__(self, row_pos: int, col_pos: int) -> None:
        self.row_pos = row_pos
        self.col_pos = col_pos
        self.left: Cell | None = None
        self.right: Cell | None = None
        self.up: Cell | None = None
        self.down: Cell | None = None

    def __repr__(self) -> str:
        return f"Cell({self.row_pos}, {self.col_pos})"


class Head:
    """The head of one row or one column: a sorted circular list of cells.

    Heads are also the elements of a :class:`HeadList`, through ``prev`` and
    ``next``.  Iterating a row head yields column positions; iterating a
    column head yields row positions.
    """

    def __init__(self, pos: int, is_col: bool = False) -> None:
        self.pos = pos
        self.is_col = is_col
        self.num = 0
        self.deleted = False
        self.dirty = True
        self.prev: Head | None = None
        self.next: Head | None = None
        if is_col:
            dummy = Cell(-1, pos)
        else:
            dummy = Cell(pos, -1)
        dummy.left = dummy.right = dummy.up = dummy.down = dummy
        self.dummy = dummy

    @property
    def is_row(self) -> bool:
        """True for a row head."""
        return not self.is_col

    def __repr__(self) -> str:
        kind = "col" if self.is_col else "row"
        return f"Head({kind} {self.pos}: {list(self)})"

    # Row-direction operations.

    def row_insert(self, cell: Cell) -> bool:
        """Insert a cell into this row, keeping column order.

        Returns False, leaving the row unchanged, when a cell with the same
        column is already present.
        """
        if not self.is_row:
            raise ValueError("row_insert on a column head")
        col_pos = cell.col_pos
        dummy = self.dummy
        if self.num == 0 or dummy.left.col_pos < col_pos:
            ncell = dummy
            pcell = dummy.left
        else:
            pcell = dummy
            while True:
                ncell = pcell.right
                if ncell.col_pos == col_pos:
                    return False
                if ncell.col_pos > col_pos:
                    break
                pcell = ncell
        cell.left = pcell
        cell.right = ncell
        self.row_restore(cell)
        return True

    def row_delete(self, cell: Cell) -> None:
        """Unlink a cell from this row; its own links are kept for restoring."""
        cell.left.right = cell.right
        cell.right.left = cell.left
        self.num -= 1

    def row_restore(self, cell: Cell) -> None:
        """Relink a cell removed by :meth:`row_delete`."""
        cell.left.right = cell
        cell.right.left = cell
        self.num += 1

    # Column-direction operations.

    def col_insert(self, cell: Cell) -> bool:
        """Insert a cell into this column, keeping row order.

        Returns False, leaving the column unchanged, when a cell with the
        same row is already present.
        """
        if not self.is_col:
            raise ValueError("col_insert on a row head")
        row_pos = cell.row_pos
        dummy = self.dummy
        if self.num == 0 or dummy.up.row_pos < row_pos:
            ncell = dummy
            pcell = dummy.up
        else:
            pcell = dummy
            while True:
                ncell = pcell.down
                if ncell.row_pos == row_pos:
                    return False
                if ncell.row_pos > row_pos:
                    break
                pcell = ncell
        cell.up = pcell
        cell.down = ncell
        self.col_restore(cell)
        return True

    def col_delete(self, cell: Cell) -> None:
        """Unlink a cell from this column; its own links are kept for restoring."""
        cell.up.down = cell.down
        cell.down.up = cell.up
        self.num -= 1

    def col_restore(self, cell: Cell) -> None:
        """Relink a cell removed by :meth:`col_delete`."""
        cell.up.down = cell
        cell.down.up = cell
        self.num += 1

    # Traversal.

    def cells(self) -> Iterator[Cell]:
        """Yield the cells of this row or column in order."""
        dummy = self.dummy
        if self.is_col:
            cell = dummy.down
            while cell is not dummy:
                nxt = cell.down
                yield cell
                cell = nxt
        else:
            cell = dummy.right
            while cell is not dummy:
                nxt = cell.right
                yield cell
                cell = nxt

    def __iter__(self) -> Iterator[int]:
        if self.is_col:
            return (cell.row_pos for cell in self.cells())
        return (cell.col_pos for cell in self.cells())

    def front(self) -> int:
        """Return the first position in this list."""
        for pos in self:
            return pos
        raise IndexError("empty list")


class HeadList:
    """A sorted doubly linked list of heads supporting cheap exclude/restore."""

    def __init__(self) -> None:
        dummy = Head(-1)
        dummy.prev = dummy
        dummy.next = dummy
        self._dummy = dummy
        self._num = 0

    def set(self, heads: Iterable[Head]) -> None:
        """Replace the contents with the given heads, in the given order."""
        dummy = self._dummy
        num = 0
        prev = dummy
        for head in heads:
            prev.next = head
            head.prev = prev
            prev = head
            num += 1
        prev.next = dummy
        dummy.prev = prev
        self._num = num

    def insert(self, head: Head) -> None:
        """Insert a head at the place given by its position."""
        dummy = self._dummy
        prev = dummy.prev
        nxt = dummy
        pos = head.pos
        if not (prev is nxt or prev.pos < pos):
            prev = dummy
            while True:
                nxt = prev.next
                if nxt.pos == pos:
                    raise ValueError(f"position {pos} is already in the list")
                if nxt.pos > pos:
                    break
                prev = nxt
        prev.next = head
        head.prev = prev
        head.next = nxt
        nxt.prev = head
        self._num += 1

    def exclude(self, head: Head) -> None:
        """Unlink a head and mark it deleted; it can be brought back by restore."""
        if head.deleted:
            raise ValueError(f"head {head.pos} is already excluded")
        head.deleted = True
        self._num -= 1
        head.prev.next = head.next
        head.next.prev = head.prev

    def restore(self, head: Head) -> None:
        """Relink a head removed by :meth:`exclude`."""
        if not head.deleted:
            raise ValueError(f"head {head.pos} is not excluded")
        head.deleted = False
        self._num += 1
        head.prev.next = head
        head.next.prev = head

    def merge(self, src1: HeadList, src2: HeadList) -> None:
        """Set the contents to the sorted union of two disjoint lists."""
        merged: list[Head] = []
        it1 = src1.heads()
        it2 = src2.heads()
        h1 = next(it1, None)
        h2 = next(it2, None)
        while h1 is not None and h2 is not None:
            if h1.pos < h2.pos:
                merged.append(h1)
                h1 = next(it1, None)
            elif h1.pos > h2.pos:
                merged.append(h2)
                h2 = next(it2, None)
            else:
                raise ValueError(f"position {h1.pos} is in both lists")
        if h1 is not None:
            merged.append(h1)
            merged.extend(it1)
        if h2 is not None:
            merged.append(h2)
            merged.extend(it2)
        self.set(merged)

    def heads(self) -> Iterator[Head]:
        """Yield the heads in order; excluding the current one is allowed."""
        dummy = self._dummy
        head = dummy.next
        while head is not dummy:
            yield head
            head = head.next

    def front(self) -> Head:
        """Return the first head."""
        if self._num == 0:
            raise IndexError("empty list")
        return self._dummy.next

    def __iter__(self) -> Iterator[int]:
        return (head.pos for head in self.heads())

    def __len__(self) -> int:
        return self._num

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeadList):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]


def check_containment(list1: Iterable[int], list2: Iterable[int]) -> bool:
    """Return True when the sorted sequence ``list1`` holds every element of ``list2``."""
    it1 = iter(list1)
    it2 = iter(list2)
    v2 = next(it2, None)
    if v2 is None:
        return True
    for v1 in it1:
        if v1 > v2:
            return False
        if v1 == v2:
            v2 = next(it2, None)
            if v2 is None:
                return True
    return False