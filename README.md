# tdalib

Classic container types in plain Python (a stack, a queue, and singly,
circular and doubly linked lists), along with an interactive terminal menu
for trying them out. The package needs only the standard library.

## Data types

| Module                  | Class              | Operations                                                                                   |
|-------------------------|--------------------|----------------------------------------------------------------------------------------------|
| `tdalib.pila`           | `Stack`            | `push`, `pop`, `peek`, `clear`, `is_empty`, `is_full`                                        |
| `tdalib.cola`           | `Queue`            | `enqueue`, `dequeue`, `peek`, `clear`, `is_empty`, `is_full`                                 |
| `tdalib.lista`          | `LinkedList`       | `push_front`, `push_back`, `insert_sorted`, `pop_front`, `pop_back`, `remove_all`, `remove_sorted`, `sort`, `first`, `last`, `clear`, `is_empty`, `is_full`, `format` |
| `tdalib.lista_circular` | `CircularList`     | `insert_sorted`, `push_front`, `push_back`, `remove`, `pop_front`, `pop_back`, `first`, `last`, `clear`, `format` |
| `tdalib.lista_doble`    | `DoublyLinkedList` | `insert_sorted`, `push_front`, `push_back`, `remove`, `pop_front`, `pop_back`, `go_first`, `go_last`, `current`, `clear`, `format` |

All of them support `len()` and iteration. A `Stack` iterates from the top
down. The other types iterate from front to back. `DoublyLinkedList` also
supports `reversed()`. `is_full()` always returns `False`, because none of
the containers has a capacity limit.

`tdalib.comun` holds the parts the types share:

- `Order`, an enum with the members `ASCENDING` and `DESCENDING`;
- `EmptyError` (an `IndexError`), raised when something is taken from an empty container;
- `NotFoundError` (a `LookupError`), raised when the element to remove is not present;
- `natural_compare(a, b)`, a three-way comparison that returns -1, 0 or 1.

Methods that search or order take an optional `compare` function that
follows the same convention. It defaults to `natural_compare`.

### Notes on behaviour

- `LinkedList.insert_sorted(item, allow_duplicates, compare, on_duplicate)`
  inserts the item before the first element that is not less than it. If an
  equal element exists, `on_duplicate(existing, item)` is called (when given)
  and its result replaces that element. Without `allow_duplicates`, the new
  item is then not inserted.
- `LinkedList.remove_all` removes every equal element. `remove_sorted`
  assumes the list is in ascending order and stops at the first greater
  element. Both return how many elements they removed.
- `LinkedList.sort` raises `EmptyError` on an empty list.
- `format(formatter)` joins the rendered elements with `" | "`.
  `DoublyLinkedList.format(order, formatter)` also takes an `Order`.
- `DoublyLinkedList` keeps a cursor on the element it last inserted.
  `insert_sorted` and `remove` start their search from the cursor. After a
  removal, the cursor moves to the next element, or to the previous one when
  the last element was removed. `current()` returns the element under the
  cursor.

## Example

```python
from tdalib.comun import EmptyError, Order, natural_compare
from tdalib.lista import LinkedList
from tdalib.lista_doble import DoublyLinkedList
from tdalib.pila import Stack

stack = Stack()
stack.push(1)
stack.push(2)
assert stack.pop() == 2

numbers = LinkedList()
for value in (5, 1, 3):
    numbers.insert_sorted(value, False, natural_compare, None)
assert list(numbers) == [1, 3, 5]
print(numbers.format(str))                      # 1 | 3 | 5

both_ways = DoublyLinkedList()
for value in (2, 9, 4):
    both_ways.insert_sorted(value)
print(both_ways.format(Order.DESCENDING, str))  # 9 | 4 | 2

try:
    Stack().pop()
except EmptyError:
    print("nothing to pop")
```

## Interactive menu

```
tdalib-menu
```

This command (`tdalib.menu.main`) opens a coloured text menu. From it you can
fill each container with whole numbers you type in, remove numbers again and
show the contents. You can also start it with `python -m tdalib.menu`.
Options are read as integers. Input that is not a number is skipped. The menu
ends when you choose `0` or when the input runs out. It clears the screen
only when the output is a terminal. To drive the menu from other streams,
create `Menu(stdin, stdout)` and call `run()`.

## Tests

```
pip install -e .[test]
pytest
```