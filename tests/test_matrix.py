import io

import pytest

from combopt.matrix import McMatrix, ReduceResult


def _sample():
    return McMatrix(3, 3, [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2)])


def test_construction_sorted_and_counts():
    m = McMatrix(3, 3, [(1, 2), (1, 0), (0, 1), (1, 1)])
    assert m.row_list(1) == [0, 1, 2]
    assert m.col_list(1) == [0, 1]
    assert m.row_elem_num(1) == 3
    assert m.col_elem_num(2) == 1
    assert m.active_row_num() == 2
    assert m.active_col_num() == 3
    assert list(m.row_head_list()) == [0, 1]


def test_duplicate_insert_ignored():
    m = McMatrix(2, 2)
    assert m.insert_elem(0, 1) is True
    assert m.insert_elem(0, 1) is False
    assert m.row_elem_num(0) == 1
    assert m.col_elem_num(1) == 1


def test_out_of_range_raises():
    m = McMatrix(2, 2)
    with pytest.raises(IndexError):
        m.insert_elem(2, 0)
    with pytest.raises(IndexError):
        m.col_list(5)
    with pytest.raises(IndexError):
        m.set_col_dirty(2)


def test_cost_array():
    m = McMatrix(1, cost_array=[2, 5, 1], elem_list=[(0, 1)])
    assert m.col_size == 3
    assert m.col_cost(1) == 5
    assert m.cost([0, 1]) == 7
    with pytest.raises(ValueError):
        McMatrix(1, 2, cost_array=[1, 2, 3])


def test_delete_and_restore_round_trip():
    m = _sample()
    m.save()
    m.delete_row(1)
    assert m.row_deleted(1)
    assert m.col_list(0) == [0]
    assert m.col_list(1) == [2]
    m.delete_col(1)
    assert m.col_deleted(1)
    assert m.row_list(2) == [2]
    m.restore()
    assert not m.row_deleted(1)
    assert not m.col_deleted(1)
    assert m.col_list(1) == [1, 2]
    assert m.row_list(2) == [1, 2]
    assert m.active_row_num() == 3


def test_restore_stops_at_marker():
    m = _sample()
    m.delete_row(0)
    m.save()
    m.delete_row(2)
    m.restore()
    assert m.row_deleted(0)
    assert not m.row_deleted(2)
    m.restore()
    assert not m.row_deleted(0)


def test_delete_twice_raises():
    m = _sample()
    m.delete_row(0)
    with pytest.raises(ValueError):
        m.delete_row(0)


def test_select_col():
    m = _sample()
    m.select_col(1)
    assert m.row_deleted(1) and m.row_deleted(2)
    assert m.col_deleted(1)
    assert list(m.row_head_list()) == [0]
    with pytest.raises(ValueError):
        m.select_col(1)


def test_reduce_loop_selects_cover():
    m = _sample()
    original = m.copy()
    result = m.reduce_loop()
    assert isinstance(result, ReduceResult)
    assert result.reduced
    assert m.active_row_num() == 0
    assert original.verify(result.selected_cols)
    assert sorted(result.selected_cols) == [0, 1]
    assert result.deleted_cols == [2]


def test_col_comp_blocks_dominance():
    m = _sample()
    result = m.reduce(lambda c1, c2: False)
    assert 2 not in result.deleted_cols


@pytest.mark.parametrize(
    "rows, cols, elems",
    [
        (2, 3, [(0, 0), (0, 1), (1, 0), (1, 1), (1, 2)]),
        (4, 4, [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2), (2, 3), (3, 3), (3, 0)]),
        (3, 2, [(0, 0), (1, 1), (2, 0), (2, 1)]),
    ],
)
def test_reduce_loop_invariant(rows, cols, elems):
    m = McMatrix(rows, cols, elems)
    original = m.copy()
    result = m.reduce_loop()
    assert set(result.selected_cols).isdisjoint(result.deleted_cols)
    if m.active_row_num() == 0:
        assert original.verify(result.selected_cols)
    second = m.reduce()
    assert not second.reduced


def test_copy_is_independent():
    m = McMatrix(2, cost_array=[3, 1], elem_list=[(0, 0), (1, 1)])
    c = m.copy()
    c.delete_row(0)
    assert not m.row_deleted(0)
    assert c.col_cost(0) == 3
    assert c.row_list(1) == m.row_list(1)


def test_resize_and_clear():
    m = _sample()
    m.resize(4, 1)
    assert (m.row_size, m.col_size) == (4, 1)
    assert m.active_row_num() == 0
    m.insert_elem(3, 0)
    m.clear()
    assert m.row_list(3) == []
    assert m.row_size == 4


def test_dump_format():
    m = McMatrix(3, cost_array=[1, 3], elem_list=[(0, 0), (0, 1), (1, 1)])
    buf = io.StringIO()
    m.dump(buf)
    assert buf.getvalue() == "Col#1: 3\nRow#0: 0 1\nRow#1: 1\nRow#2:\n"