import pytest

from tdalib.comun import EmptyError, NotFoundError, natural_compare
from tdalib.lista_circular import CircularList


def build(values, method="push_back"):
    ring = CircularList()
    for value in values:
        getattr(ring, method)(value)
    return ring


def by_key(a, b):
    return natural_compare(a[0], b[0])


def test_insert_sorted_orders_unsorted_input():
    values = [5, 3, 9, 1, 7, 3, 8]
    ring = build(values, "insert_sorted")
    assert list(ring) == sorted(values)
    assert len(ring) == len(values)


def test_insert_sorted_with_reverse_compare():
    values = [4, 1, 6, 2]
    ring = CircularList()
    for value in values:
        ring.insert_sorted(value, lambda a, b: natural_compare(b, a))
    assert list(ring) == sorted(values, reverse=True)


def test_insert_sorted_equal_to_first_goes_before_it():
    ring = CircularList()
    ring.insert_sorted((1, "a"), by_key)
    ring.insert_sorted((2, "b"), by_key)
    ring.insert_sorted((1, "c"), by_key)
    assert list(ring) == [(1, "c"), (1, "a"), (2, "b")]


def test_insert_sorted_equal_to_last_goes_after_it():
    ring = CircularList()
    ring.insert_sorted((1, "a"), by_key)
    ring.insert_sorted((2, "b"), by_key)
    ring.insert_sorted((2, "c"), by_key)
    assert list(ring) == [(1, "a"), (2, "b"), (2, "c")]
    assert ring.last() == (2, "c")


def test_push_front_and_back():
    ring = CircularList()
    ring.push_back(2)
    ring.push_front(1)
    ring.push_back(3)
    assert list(ring) == [1, 2, 3]
    assert ring.first() == 1
    assert ring.last() == 3


def test_pop_front_and_back():
    ring = build([10, 20, 30])
    assert ring.pop_front() == 10
    assert ring.pop_back() == 30
    assert list(ring) == [20]
    assert ring.pop_back() == 20
    assert len(ring) == 0


@pytest.mark.parametrize("method", ["pop_front", "pop_back", "first", "last"])
def test_empty_access_raises(method):
    with pytest.raises(EmptyError):
        getattr(CircularList(), method)()


def test_remove_returns_element_and_keeps_rest():
    ring = build([1, 2, 3, 2])
    assert ring.remove(2) == 2
    assert list(ring) == [1, 3, 2]


def test_remove_last_element_updates_last():
    ring = build([1, 2, 3])
    ring.remove(3)
    assert ring.last() == 2
    ring.push_back(4)
    assert list(ring) == [1, 2, 4]


def test_remove_only_element_empties_ring():
    ring = build([7])
    assert ring.remove(7) == 7
    with pytest.raises(EmptyError):
        ring.first()


def test_remove_missing_raises_not_found():
    ring = build([1, 2])
    with pytest.raises(NotFoundError):
        ring.remove(5)
    assert list(ring) == [1, 2]


def test_remove_from_empty_raises_empty():
    with pytest.raises(EmptyError):
        CircularList().remove(1)


def test_format_uses_separator_and_formatter():
    ring = build([1, 2, 3])
    assert ring.format() == "1 | 2 | 3"
    assert ring.format(lambda v: f"<{v}>") == "<1> | <2> | <3>"
    assert CircularList().format() == ""


def test_clear_empties_ring():
    ring = build([1, 2, 3])
    ring.clear()
    assert len(ring) == 0
    assert list(ring) == []