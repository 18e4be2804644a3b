# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### `dsakit.sorting`

Every sort takes an iterable and returns a new sorted list, leaving the input
untouched:

- `heap_sort(values)`
- `bubble_sort(values)`: stops early once a pass makes no exchange
- `insertion_sort(values)`
- `merge_sort(values)`: stable
- `quick_sort(values)`: last element of each range as pivot
- `shell_sort(values)`: gaps halve from half the length down to one
- `selection_sort(values, descending=False)`
- `radix_sort(values)`: non-negative integers; a negative value raises
  `ValueError`
- `counting_sort(values, lower=None, upper=None)`: integers in
  `[lower, upper]`; missing bounds are taken from the data, and a value
  outside the bounds (or `upper < lower`) raises `ValueError`
- `bucket_sort(values)`: numbers in `[0, 1)`; anything else raises
  `ValueError`
- `count_sort_chars(text)`: returns the characters of a string sorted by code
  point; characters above code point 255 raise `ValueError`

```python
from dsakit.sorting import merge_sort, count_sort_chars

merge_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
count_sort_chars("array")           # "aarry"
```

### `dsakit.arrays`

- `remove_duplicates(values)`: keeps the first occurrence of each value, in order
- `union(first, second)`: the distinct values of `first`, followed by the
  values of `second` not already seen

### `dsakit.heap`

`MinHeap(capacity)` is a fixed-capacity binary min-heap supporting `len()`,
`insert(key)`, `peek()`, `extract_min()`, `decrease_key(index, new_value)` and
`delete_key(index)`.

- Inserting into a full heap raises `HeapOverflowError`.
- `peek()` and `extract_min()` on an empty heap raise `IndexError`.
- An index outside the heap raises `IndexError`; `decrease_key` with a larger
  value raises `ValueError`.

```python
from dsakit.heap import MinHeap

heap = MinHeap(11)
for key in (3, 2, 15, 5, 4, 45):
    heap.insert(key)
heap.extract_min()   # 2
heap.peek()          # 3
```

### `dsakit.linkedlist`

- `SinglyLinkedList(values=())`: `push` to the front, iteration, `len()`
- `DoublyLinkedList()`: `push` and `append` return the new `DoublyNode`;
  `node_at(index)` fetches a node, `insert_after(node, value)` inserts after
  it (a `None` node raises `ValueError`); iterate forwards or with
  `reversed()`
- `XorLinkedList()`: each node keeps a single combined link to its
  neighbours; `insert` adds to the front, and the list supports iteration and
  `len()`

### `dsakit.linkedqueue`

`LinkedQueue()` is a first-in, first-out queue with `enqueue(key)`,
`dequeue()` and `front()`, plus `len()` and iteration from front to rear.
`dequeue()` and `front()` on an empty queue raise `IndexError`.

### `dsakit.stacks`

- `BoundedStack(capacity=10)`: `push`, `pop`, `peek`, `clear`, `is_empty`,
  `is_full`, `len()` and iteration from bottom to top. Pushing onto a full
  stack raises `StackOverflowError`; `pop`, `peek` or `clear` on an empty
  stack raise `StackUnderflowError`.
- `LinkedStack()`: an unbounded stack with `push`, `pop` (raising
  `StackUnderflowError` when empty), `len()`, iteration from top to bottom,
  and `render()`, which gives text such as `"2-> 1-> NULL"`
- `largest_rectangle_area(heights)`: the largest rectangle under a histogram;
  an empty histogram raises `ValueError`

```python
from dsakit.stacks import largest_rectangle_area

largest_rectangle_area([6, 2, 5, 4, 5, 1, 6])  # 12
```

### `dsakit.backtracking`

- `knight_tour(size=8)`: a knight's tour starting at the top-left corner, as
  rows of move numbers (the start square holds 0)
- `n_queens(size=5)`: a placement of `size` non-attacking queens, as rows of 0
  and 1
- `format_board(board, width=1)`: a board as text, one row per line, each cell
  right-aligned to `width` and followed by a space

Both searches raise `ValueError` when no solution exists or the size is
invalid.

```python
from dsakit.backtracking import n_queens, format_board

print(format_board(n_queens(5)))
# 1 0 0 0 0
# 0 0 0 1 0
# 0 1 0 0 0
# 0 0 0 0 1
# 0 0 1 0 0
```

### `dsakit.patterns`

Text figures returned as strings, one line per row:

- `pyramid(rows)`: a centred triangle of `"* "` cells; line `i` (from 0)
  holds `i` stars
- `star_pyramid(rows=5)`: rows of `" * "` cells, one more per row
- `number_square(n)`: a concentric square of numbers, `n` on the border down
  to 1 in the centre
- `hourglass(size=5)`: left-aligned star rows shrinking from `size` to 1 and
  growing back

```python
from dsakit.patterns import number_square

print(number_square(3))
# 3 3 3 3 3
# 3 2 2 2 3
# 3 2 1 2 3
# 3 2 2 2 3
# 3 3 3 3 3
```

## What it does not do

`dsakit` is a library only. It has no command-line program and no
interactive menus for driving the stacks or queue; call the functions and
classes from your own code.