# dsakit

A small collection of classic data structures and algorithms, with a
command-line tool for trying some of them out interactively.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library

### Searching

`dsakit.searching` provides:

- `linear_search(values, target)`: the index of the first item equal to
  `target`, or `None`.
- `binary_search(values, target)`: an index of `target` in an ascending
  sequence, or `None`.
- `find_min_max(values)`: `(minimum, maximum)` in one pass; raises
  `ValueError` on empty input.

```python
from dsakit.searching import binary_search, find_min_max, linear_search

binary_search([1, 2, 3, 4, 5], 3)        # 2
linear_search([12, 34, 56, 78, 98], 98)  # 4
find_min_max([12, 3, 19, 5, 6])          # (3, 19)
```

### Numbers and expressions

`dsakit.numeric.factorial(n)` returns `n!`; any `n` of one or less gives 1.

`dsakit.expressions.infix_to_postfix(expression)` converts an infix
expression of single-character operands (letters and digits) to postfix.
Whitespace is ignored, every other character is treated as an operator,
operators of equal precedence (`^` included) associate to the left, and
unbalanced parentheses raise `ValueError`. `precedence(operator)` gives 1 for
`+ -`, 2 for `* /`, 3 for `^` and 0 for anything else.

```python
from dsakit.expressions import infix_to_postfix, precedence
from dsakit.numeric import factorial

factorial(5)                      # 120
infix_to_postfix("a+b*(c^d-e)")   # "abcd^e-*+"
precedence("*")                   # 2
```

### Linked lists and binary search trees

`dsakit.linked_list.LinkedList` is a singly linked list that grows by
`append`; it supports `len()`, iteration, equality with other linked lists,
and prints as `a -> b -> NULL`. `merge_lists(first, second)` returns a new
list of the items of `first` followed by those of `second`.

`dsakit.bst.BinarySearchTree` is an unbalanced search tree of distinct
values: inserting a value already present does nothing. It supports `in`,
`len()` and ascending iteration; `minimum()` and `maximum()` raise
`ValueError` on an empty tree.

```python
from dsakit.bst import BinarySearchTree
from dsakit.linked_list import LinkedList, merge_lists

items = LinkedList([-5, 8, 9])
items.append(7)
str(items)                          # "-5 -> 8 -> 9 -> 7 -> NULL"
merge_lists([3, 1, 5], [8, 2, 6, 4])  # [3, 1, 5, 8, 2, 6, 4]

tree = BinarySearchTree([20, 10, 30, 5, 15])
tree.minimum(), tree.maximum()   # (5, 30)
15 in tree                       # True
list(tree)                       # [5, 10, 15, 20, 30]
```

### Bounded containers

`dsakit.bounded` holds fixed-capacity containers. Adding to a full one raises
`CapacityError`; taking from an empty one raises `EmptyError`; a negative
capacity raises `ValueError`.

- `BoundedArray(values=(), capacity=100)`: `insert(index, value)` with
  `0 <= index <= len`, `delete(index)` returning the removed item (a bad
  index raises `IndexError`); prints as its items separated by spaces.
- `BoundedStack(capacity=5)`: `push(value)`, `pop()`; iterates bottom to top.
- `BoundedQueue(capacity=5)`: `enqueue(value)`, `dequeue()`. The queue is
  linear: slots freed by `dequeue` are not reused, so at most `capacity`
  items can ever pass through it.

```python
from dsakit.bounded import BoundedArray, BoundedStack

stack = BoundedStack(5)
stack.push(6)
stack.push(1)
stack.pop()      # 1

array = BoundedArray([1, 2, 3])
array.insert(3, 4)
array.delete(0)  # 1
str(array)       # "2 3 4"
```

## Command line

The `dsakit` command runs small interactive exercises that read
whitespace-separated integers from standard input:

```
dsakit --help
dsakit array [--capacity N]     # menu: insert, delete, print (default capacity 100)
dsakit stack [--capacity N]     # menu: push, pop, print (default capacity 5)
dsakit queue [--capacity N]     # menu: enqueue, dequeue (default capacity 5)
dsakit minmax                   # smallest and largest of some numbers
dsakit linked-list              # build a linked list and print it
```

Running out of input at a menu ends the session normally. Running out in the
middle of a question, or giving something that is not an integer, prints a
message on standard error and exits with status 1.

## What it does not do

The command line covers only the exercises listed above; the searching,
expression, factorial and tree functions are available from Python only.