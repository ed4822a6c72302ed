import pytest

from indexset.slice import Slice

VEC = [i * i for i in range(10)]


def test_slice_index():
    sl = Slice(VEC)
    full = sl[:]
    assert list(full) == VEC
    assert full == sl
    assert full[:] == sl

    for i in range(10):
        assert sl[i] == VEC[i]
        assert list(sl[i:]) == VEC[i:]
        assert list(sl[:i]) == VEC[:i]
        assert list(sl[: i + 1]) == VEC[: i + 1]
        # excluded start, unbounded end
        assert list(sl[i + 1 :]) == VEC[i + 1 :]
        for j in range(i, 11):
            assert list(sl[i:j]) == VEC[i:j]
            assert sl[range(i, j)] == sl[i:j]
        for j in range(i, 10):
            assert list(sl[i : j + 1]) == VEC[i : j + 1]


def test_index_out_of_bounds():
    sl = Slice([1, 2, 3])
    assert sl[2] == 3
    assert sl.get_index(3) is None
    assert sl.get_range(slice(2, 5)) is None
    assert sl.get_range(slice(2, 1)) is None
    with pytest.raises(IndexError):
        sl[3]
    with pytest.raises(IndexError):
        sl[-1]
    with pytest.raises(IndexError):
        sl[2:5]
    with pytest.raises(IndexError):
        sl[2:1]
    assert list(sl) == [1, 2, 3]


def test_empty_slice():
    empty = Slice()
    assert len(empty) == 0
    assert empty.first() is None
    assert empty.last() is None
    assert empty.split_first() is None
    assert empty.split_last() is None
    assert empty.get_index(0) is None
    assert list(empty) == []


def test_get_index_and_ends():
    sl = Slice(VEC)
    assert sl.get_index(3) == VEC[3]
    assert sl.get_index(len(VEC)) is None
    assert sl.get_index(-1) is None
    assert sl.first() == VEC[0]
    assert sl.last() == VEC[-1]


def test_get_range():
    sl = Slice(VEC)
    assert sl.get_range(slice(2, 5)) == Slice(VEC[2:5])
    assert sl.get_range(None) == sl
    assert sl.get_range(slice(2, 11)) is None
    assert sl.get_range(slice(5, 2)) is None


def test_split_at():
    sl = Slice(VEC)
    for i in range(len(VEC) + 1):
        left, right = sl.split_at(i)
        assert list(left) == VEC[:i]
        assert list(right) == VEC[i:]
    with pytest.raises(IndexError):
        sl.split_at(len(VEC) + 1)


def test_split_first_and_last():
    sl = Slice(VEC)
    first, rest = sl.split_first()
    assert first == VEC[0]
    assert list(rest) == VEC[1:]
    last, rest = sl.split_last()
    assert last == VEC[-1]
    assert list(rest) == VEC[:-1]


def test_equality_order_and_hash():
    a = Slice([1, 2, 3])
    b = Slice([1, 2, 3])
    c = Slice([3, 2, 1])
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a < c
    assert c > a
    assert Slice([1, 2]) < a
    assert len({a, b, c}) == 2


def test_repr():
    assert repr(Slice([1, 2])) == "Slice([1, 2])"


def test_reversed():
    assert list(reversed(Slice(VEC))) == VEC[::-1]


def _cmp_to(target):
    return lambda x: (x > target) - (x < target)


def test_binary_search_by():
    b = Slice([])
    assert b.binary_search_by(_cmp_to(5)) == (False, 0)

    b = Slice([4])
    assert b.binary_search_by(_cmp_to(3)) == (False, 0)
    assert b.binary_search_by(_cmp_to(4)) == (True, 0)
    assert b.binary_search_by(_cmp_to(5)) == (False, 1)

    b = Slice([1, 2, 4, 6, 8, 9])
    assert b.binary_search_by(_cmp_to(5)) == (False, 3)
    assert b.binary_search_by(_cmp_to(6)) == (True, 3)
    assert b.binary_search_by(_cmp_to(7)) == (False, 4)
    assert b.binary_search_by(_cmp_to(8)) == (True, 4)

    b = Slice([1, 2, 4, 5, 6, 8])
    assert b.binary_search_by(_cmp_to(9)) == (False, 6)

    b = Slice([1, 2, 4, 6, 7, 8, 9])
    assert b.binary_search_by(_cmp_to(6)) == (True, 3)
    assert b.binary_search_by(_cmp_to(5)) == (False, 3)
    assert b.binary_search_by(_cmp_to(8)) == (True, 5)

    b = Slice([1, 2, 4, 5, 6, 8, 9])
    assert b.binary_search_by(_cmp_to(7)) == (False, 5)
    assert b.binary_search_by(_cmp_to(0)) == (False, 0)

    b = Slice([1, 3, 7])
    assert b.binary_search_by(_cmp_to(0)) == (False, 0)
    assert b.binary_search_by(_cmp_to(1)) == (True, 0)
    assert b.binary_search_by(_cmp_to(2)) == (False, 1)
    assert b.binary_search_by(_cmp_to(3)) == (True, 1)
    assert b.binary_search_by(_cmp_to(4)) == (False, 2)
    assert b.binary_search_by(_cmp_to(7)) == (True, 2)
    assert b.binary_search_by(_cmp_to(8)) == (False, 3)


def test_binary_search_with_duplicates():
    b = Slice([1, 3, 3, 3, 7])
    found, index = b.binary_search(3)
    assert found
    assert 1 <= index <= 3


def test_binary_search():
    b = Slice([1, 2, 4, 6, 8, 9])
    assert b.binary_search(5) == (False, 3)
    assert b.binary_search(6) == (True, 3)
    assert b.binary_search(0) == (False, 0)
    assert b.binary_search(10) == (False, 6)


def test_binary_search_by_key():
    ident = lambda x: x  # noqa: E731
    b = Slice([])
    assert b.binary_search_by_key(5, ident) == (False, 0)

    b = Slice([4])
    assert b.binary_search_by_key(3, ident) == (False, 0)
    assert b.binary_search_by_key(4, ident) == (True, 0)
    assert b.binary_search_by_key(5, ident) == (False, 1)

    b = Slice([1, 2, 4, 6, 8, 9])
    assert b.binary_search_by_key(5, ident) == (False, 3)
    assert b.binary_search_by_key(6, ident) == (True, 3)
    assert b.binary_search_by_key(7, ident) == (False, 4)
    assert b.binary_search_by_key(8, ident) == (True, 4)

    b = Slice([1, 3, 7])
    assert b.binary_search_by_key(2, ident) == (False, 1)
    assert b.binary_search_by_key(4, ident) == (False, 2)
    assert b.binary_search_by_key(7, ident) == (True, 2)
    assert b.binary_search_by_key(8, ident) == (False, 3)


def test_partition_point():
    b = Slice([])
    assert b.partition_point(lambda x: x < 5) == 0

    b = Slice([4])
    assert b.partition_point(lambda x: x < 3) == 0
    assert b.partition_point(lambda x: x < 4) == 0
    assert b.partition_point(lambda x: x < 5) == 1

    b = Slice([1, 2, 4, 6, 8, 9])
    assert b.partition_point(lambda x: x < 5) == 3
    assert b.partition_point(lambda x: x < 6) == 3
    assert b.partition_point(lambda x: x < 7) == 4
    assert b.partition_point(lambda x: x < 8) == 4

    b = Slice([1, 2, 4, 5, 6, 8])
    assert b.partition_point(lambda x: x < 9) == 6

    b = Slice([1, 2, 4, 6, 7, 8, 9])
    assert b.partition_point(lambda x: x < 6) == 3
    assert b.partition_point(lambda x: x < 5) == 3
    assert b.partition_point(lambda x: x < 8) == 5

    b = Slice([1, 2, 4, 5, 6, 8, 9])
    assert b.partition_point(lambda x: x < 7) == 5
    assert b.partition_point(lambda x: x < 0) == 0

    b = Slice([1, 3, 7])
    assert b.partition_point(lambda x: x < 0) == 0
    assert b.partition_point(lambda x: x < 1) == 0
    assert b.partition_point(lambda x: x < 2) == 1
    assert b.partition_point(lambda x: x < 3) == 1
    assert b.partition_point(lambda x: x < 4) == 2
    assert b.partition_point(lambda x: x < 5) == 2
    assert b.partition_point(lambda x: x < 6) == 2
    assert b.partition_point(lambda x: x < 7) == 2
    assert b.partition_point(lambda x: x < 8) == 3