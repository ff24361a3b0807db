# dsakit

Compact implementations of the data structures and algorithms usually met
first in a data-structures course: fixed-capacity arrays, searching, singly,
circular and doubly linked lists, array- and list-backed stacks, an array
queue, infix-to-postfix conversion, sparse-matrix triplets and a couple of
recursive exercises.

The structures behave like ordinary Python containers: they can be iterated,
measured with `len()`, and they raise exceptions when an operation cannot be
carried out (for example, popping an empty stack or inserting into a full
array). The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules at a glance

| Module | What it provides |
| --- | --- |
| `dsakit.arrays` | `BoundedArray`, `linear_search`, `binary_search`, `count_occurrences` |
| `dsakit.array_menu` | `run_menu` and `main`: an interactive insert/delete/display menu over a small array |
| `dsakit.sparse` | `is_sparse`, `to_triplets` for integer matrices |
| `dsakit.recursion` | `count_up`, `tower_of_hanoi` |
| `dsakit.linked_list` | `Node`, `LinkedList` |
| `dsakit.circular` | `CircularLinkedList` |
| `dsakit.doubly` | `DoublyLinkedList` |
| `dsakit.stack` | `ArrayStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.linked_stack` | `LinkedStack` |
| `dsakit.postfix` | `precedence`, `is_operator`, `infix_to_postfix`, `main` |
| `dsakit.array_queue` | `ArrayQueue`, `QueueFullError`, `QueueEmptyError` |

## Examples

### Arrays and searching

```python
from dsakit.arrays import BoundedArray, binary_search, count_occurrences, linear_search

arr = BoundedArray(100, [45, 47, 96, 54])
arr.insert(2, 50)
print(list(arr))            # [45, 47, 50, 96, 54]
print(arr.delete(2))        # 50

print(linear_search([58, 95, 97, 45, 78, 85, 12, 74, 96], 96))   # 8
print(binary_search([12, 14, 16, 25, 36, 46, 95], 16))          # 2
print(count_occurrences([2, 2, 4, 7, 7, 4, 2, 5, 6], 2))        # 3
```

`insert` raises `OverflowError` when the array is full and `IndexError` for
an index outside the array; `delete` raises `IndexError` likewise. Both
searches return `-1` when the element is absent; `binary_search` expects
sorted input.

### Linked lists

```python
from dsakit.linked_list import LinkedList

items = LinkedList([7, 25, 37, 40])
items.push_front(1)
items.append(99)
items.reverse()
print(list(items))          # [99, 40, 37, 25, 7, 1]
```

`LinkedList` also offers `insert_at`, `insert_after`, `node_at`, `pop_front`,
`pop_back`, `delete_at`, `delete_after`, `remove_value` (which returns whether
a node was removed) and `reverse_recursive`.

```python
from dsakit.circular import CircularLinkedList
from dsakit.doubly import DoublyLinkedList

ring = CircularLinkedList([7, 25, 37, 40])
ring.insert_at(2, 255)
print(list(ring))           # [7, 25, 255, 37, 40]

both = DoublyLinkedList([56, 78, 99])
print(list(reversed(both))) # [99, 78, 56]
```

`CircularLinkedList` has `insert_first`, `insert_at`, `append`,
`delete_first` and `delete_last`; `DoublyLinkedList` has `insert_first`,
`append`, `insert_at`, `delete_first`, `delete_last` and `delete_at`.

### Stacks and queues

```python
from dsakit.stack import ArrayStack

stack = ArrayStack(5)
for value in (90, 85, 97, 71):
    stack.push(value)
print(stack.pop())          # 71
print(stack.peek(1))        # 97, the value at the top
print(stack.bottom())       # 90
```

Pushing onto a full `ArrayStack` raises `StackOverflowError`; popping or
reading the top or bottom of an empty one raises `StackUnderflowError`.
`peek` counts positions from 1 at the top and raises `IndexError` outside
the stack.

`LinkedStack` has `push`, `pop`, `peek` and `is_empty` without a fixed
capacity; iterating it goes from the top down.

```python
from dsakit.array_queue import ArrayQueue

queue = ArrayQueue(3)
queue.enqueue(56)
queue.enqueue(12)
print(queue.dequeue())      # 56
```

`ArrayQueue` is a linear queue: slots freed by `dequeue` are not reused, so it
reports full after `capacity` enqueues in total and then raises
`QueueFullError`. Dequeueing an empty queue raises `QueueEmptyError`.

### Infix to postfix

```python
from dsakit.postfix import infix_to_postfix

print(infix_to_postfix("a-b+t/6"))   # ab-t6/+
```

Only `+ - * /` are operators; every other character, parentheses and spaces
included, is copied through as an operand.

### Sparse matrices and recursion

```python
from dsakit.sparse import is_sparse, to_triplets
from dsakit.recursion import count_up, tower_of_hanoi

print(to_triplets([[0, 0, 3], [0, 0, 0], [4, 0, 0]]))
# ([0, 2], [2, 0], [3, 4])
print(is_sparse([[0, 5, 3], [0, 0, 2], [7, 2, 2]]))   # False

print(count_up(3))                        # [1, 2, 3]
print(tower_of_hanoi(2, "A", "B", "C"))
# [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

A matrix counts as sparse when it has at least as many zeros as non-zero
entries; `to_triplets` raises `ValueError` otherwise.

## Command-line tools

Two commands are installed with the package.

Convert an infix expression to postfix (with no argument it converts
`a-b+t/6`):

```
dsakit-postfix "a-b+t/6"
```

Start the interactive array menu, which lets you fill the array, delete an
element by index and display the contents; `--size` sets the number of
elements (5 by default):

```
dsakit-array-menu --size 5
```

The menu keeps the array in memory only; nothing is saved when it exits.