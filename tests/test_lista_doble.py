import pytest

from tdalib.comun import EmptyError, NotFoundError, Order, natural_compare
from tdalib.lista_doble import DoublyLinkedList


def build(values, method="push_back"):
    dlist = DoublyLinkedList()
    for value in values:
        getattr(dlist, method)(value)
    return dlist


def by_key(a, b):
    return natural_compare(a[0], b[0])


def test_insert_sorted_orders_input():
    values = [5, 2, 8, 1, 9, 4]
    dlist = build(values, "insert_sorted")
    assert list(dlist) == sorted(values)
    assert list(reversed(dlist)) == sorted(values, reverse=True)


def test_insert_sorted_moves_cursor_to_new_element():
    dlist = build([1, 5, 9], "insert_sorted")
    dlist.insert_sorted(4)
    assert dlist.current() == 4
    dlist.insert_sorted(7)
    assert dlist.current() == 7
    assert list(dlist) == [1, 4, 5, 7, 9]


def test_duplicates_rejected_by_default():
    dlist = build([3, 1, 3, 2, 1], "insert_sorted")
    assert list(dlist) == [1, 2, 3]


def test_duplicates_allowed_go_after_existing():
    dlist = DoublyLinkedList()
    dlist.insert_sorted((1, "a"), True, by_key)
    dlist.insert_sorted((2, "b"), True, by_key)
    dlist.insert_sorted((1, "c"), True, by_key)
    assert list(dlist) == [(1, "a"), (1, "c"), (2, "b")]
    assert dlist.current() == (1, "c")


def test_on_duplicate_merges_into_existing():
    dlist = DoublyLinkedList()
    merge = lambda existing, new: (existing[0], existing[1] + new[1])
    for entry in [("x", 1), ("y", 1), ("x", 1)]:
        dlist.insert_sorted(entry, False, by_key, merge)
    assert list(dlist) == [("x", 2), ("y", 1)]


def test_push_front_and_back_set_cursor():
    dlist = DoublyLinkedList()
    dlist.push_back(2)
    dlist.push_front(1)
    assert dlist.current() == 1
    dlist.push_back(3)
    assert dlist.current() == 3
    assert list(dlist) == [1, 2, 3]


def test_pop_front_moves_cursor_to_new_first():
    dlist = build([1, 2, 3])
    assert dlist.pop_front() == 1
    assert dlist.current() == 2
    assert list(dlist) == [2, 3]


def test_pop_back_moves_cursor_to_new_last():
    dlist = build([1, 2, 3])
    dlist.go_first()
    assert dlist.pop_back() == 3
    assert dlist.current() == 2
    assert list(dlist) == [1, 2]


@pytest.mark.parametrize("method", ["pop_front", "pop_back", "go_first", "go_last", "current"])
def test_empty_operations_raise(method):
    with pytest.raises(EmptyError):
        getattr(DoublyLinkedList(), method)()


def test_remove_moves_cursor_to_following_element():
    dlist = build([1, 2, 3, 4], "insert_sorted")
    assert dlist.remove(2) == 2
    assert dlist.current() == 3
    assert list(dlist) == [1, 3, 4]


def test_remove_last_moves_cursor_back():
    dlist = build([1, 2, 3], "insert_sorted")
    dlist.go_first()
    assert dlist.remove(3) == 3
    assert dlist.current() == 2


def test_remove_only_element_empties_list():
    dlist = build([5])
    dlist.remove(5)
    assert len(dlist) == 0
    with pytest.raises(EmptyError):
        dlist.current()


def test_remove_missing_and_empty():
    dlist = build([1, 3, 5], "insert_sorted")
    with pytest.raises(NotFoundError):
        dlist.remove(4)
    assert list(dlist) == [1, 3, 5]
    with pytest.raises(EmptyError):
        DoublyLinkedList().remove(1)


def test_go_first_and_last():
    dlist = build([7, 8, 9])
    dlist.go_first()
    assert dlist.current() == 7
    dlist.go_last()
    assert dlist.current() == 9


def test_format_both_directions():
    dlist = build([1, 2, 3])
    assert dlist.format(Order.ASCENDING) == "1 | 2 | 3"
    assert dlist.format(Order.DESCENDING) == "3 | 2 | 1"
    assert dlist.format(Order.ASCENDING, lambda v: f"[{v}]") == "[1] | [2] | [3]"
    assert DoublyLinkedList().format() == ""


def test_clear_resets_list():
    dlist = build([1, 2])
    dlist.clear()
    assert list(dlist) == []
    with pytest.raises(EmptyError):
        dlist.current()