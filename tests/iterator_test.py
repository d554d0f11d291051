import pytest

from chainlist.datastructures import LinkedList, LinkedListIter


def test_iteration_round_trip():
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    assert list(LinkedList(data)) == data


def test_iterating_empty_list():
    assert list(LinkedList()) == []


def test_iterator_is_single_pass():
    lst = LinkedList([1, 2, 3])
    it = iter(lst)
    assert isinstance(it, LinkedListIter)
    assert iter(it) is it
    assert list(it) == [1, 2, 3]
    assert list(it) == []
    with pytest.raises(StopIteration):
        next(it)
    # a fresh cursor starts over
    assert list(lst) == [1, 2, 3]


def test_iterator_walks_lazily():
    lst = LinkedList(["a", "b"])
    it = iter(lst)
    assert next(it) == "a"
    assert next(it) == "b"
    with pytest.raises(StopIteration):
        next(it)


def test_independent_cursors():
    lst = LinkedList(range(4))
    a, b = iter(lst), iter(lst)
    assert next(a) == 0
    assert next(a) == 1
    assert next(b) == 0
    assert list(zip(a, b)) == [(2, 1), (3, 2)]


def test_iteration_does_not_mutate():
    lst = LinkedList(range(5))
    for _ in lst:
        pass
    assert lst.to_py() == [0, 1, 2, 3, 4]
    assert len(lst) == 5
