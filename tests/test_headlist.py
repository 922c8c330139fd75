import pytest

from combopt.headlist import Cell, Head, HeadList, check_containment


def _row(pos, cols):
    head = Head(pos, False)
    for c in cols:
        head.row_insert(Cell(pos, c))
    return head


def _col(pos, rows):
    head = Head(pos, True)
    for r in rows:
        head.col_insert(Cell(r, pos))
    return head


def test_row_insert_keeps_order():
    head = _row(0, [5, 1, 3, 7, 0])
    assert list(head) == [0, 1, 3, 5, 7]
    assert head.num == 5


def test_row_insert_duplicate_rejected():
    head = _row(0, [2, 4])
    assert head.row_insert(Cell(0, 4)) is False
    assert list(head) == [2, 4]
    assert head.num == 2


def test_col_insert_keeps_order_and_rejects_duplicate():
    head = _col(3, [9, 2, 6])
    assert list(head) == [2, 6, 9]
    assert head.col_insert(Cell(6, 3)) is False
    assert head.num == 3


def test_insert_wrong_direction_raises():
    with pytest.raises(ValueError):
        Head(0, True).row_insert(Cell(0, 1))
    with pytest.raises(ValueError):
        Head(0, False).col_insert(Cell(1, 0))


def test_row_delete_and_restore():
    head = Head(0, False)
    cells = [Cell(0, c) for c in (1, 2, 3)]
    for cell in cells:
        head.row_insert(cell)
    head.row_delete(cells[1])
    assert list(head) == [1, 3]
    assert head.num == 2
    head.row_restore(cells[1])
    assert list(head) == [1, 2, 3]
    assert head.num == 3


def test_cell_shared_between_row_and_col():
    row = Head(1, False)
    col = Head(4, True)
    cell = Cell(1, 4)
    assert row.row_insert(cell)
    assert col.col_insert(cell)
    col.col_delete(cell)
    assert list(col) == []
    assert list(row) == [4]
    assert row.front() == 4


def test_front_of_empty_head_raises():
    with pytest.raises(IndexError):
        Head(0, False).front()


def test_headlist_set_and_iter():
    heads = [Head(i) for i in (0, 2, 5)]
    hl = HeadList()
    hl.set(heads)
    assert list(hl) == [0, 2, 5]
    assert len(hl) == 3
    assert hl.front() is heads[0]


def test_headlist_insert_sorted():
    hl = HeadList()
    for p in (4, 1, 7, 3):
        hl.insert(Head(p))
    assert list(hl) == [1, 3, 4, 7]
    assert len(hl) == 4


def test_headlist_insert_duplicate_raises():
    hl = HeadList()
    hl.insert(Head(2))
    hl.insert(Head(5))
    with pytest.raises(ValueError):
        hl.insert(Head(2))


def test_exclude_restore_roundtrip():
    heads = [Head(i) for i in range(4)]
    hl = HeadList()
    hl.set(heads)
    hl.exclude(heads[2])
    hl.exclude(heads[1])
    assert list(hl) == [0, 3]
    assert heads[1].deleted and heads[2].deleted
    hl.restore(heads[1])
    hl.restore(heads[2])
    assert list(hl) == [0, 1, 2, 3]
    assert len(hl) == 4
    assert not heads[1].deleted


def test_exclude_twice_and_restore_live_raise():
    head = Head(0)
    hl = HeadList()
    hl.set([head])
    with pytest.raises(ValueError):
        hl.restore(head)
    hl.exclude(head)
    with pytest.raises(ValueError):
        hl.exclude(head)


def test_exclude_during_iteration():
    heads = [Head(i) for i in range(5)]
    hl = HeadList()
    hl.set(heads)
    seen = []
    for head in hl.heads():
        seen.append(head.pos)
        if head.pos % 2 == 1:
            hl.exclude(head)
    assert seen == [0, 1, 2, 3, 4]
    assert list(hl) == [0, 2, 4]


def test_merge():
    all_heads = [Head(i) for i in range(6)]
    a = HeadList()
    a.set([all_heads[i] for i in (0, 3, 4)])
    b = HeadList()
    b.set([all_heads[i] for i in (1, 2, 5)])
    out = HeadList()
    out.merge(a, b)
    assert list(out) == [0, 1, 2, 3, 4, 5]
    assert len(out) == 6


def test_merge_overlap_raises():
    a = HeadList()
    a.set([Head(1)])
    b = HeadList()
    b.set([Head(1)])
    with pytest.raises(ValueError):
        HeadList().merge(a, b)


def test_headlist_equality():
    a = HeadList()
    a.set([Head(i) for i in (1, 2)])
    b = HeadList()
    b.set([Head(i) for i in (1, 2)])
    c = HeadList()
    c.set([Head(i) for i in (1, 3)])
    assert a == b
    assert not (a == c)
    assert HeadList() == HeadList()


@pytest.mark.parametrize(
    "list1, list2, expected",
    [
        ([1, 2, 3, 4], [2, 4], True),
        ([1, 2, 3], [1, 2, 3], True),
        ([1, 3], [1, 2, 3], False),
        ([1, 2], [2, 5], False),
        ([], [], True),
        ([1], [], True),
        ([], [1], False),
        ([5, 6], [1], False),
    ],
)
def test_check_containment(list1, list2, expected):
    assert check_containment(list1, list2) is expected


def test_check_containment_on_heads():
    big = _row(0, [0, 2, 4, 6])
    small = _row(1, [2, 6])
    assert check_containment(big, small) is True
    assert check_containment(small, big) is False