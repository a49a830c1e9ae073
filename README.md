# dsadrills

A small, dependency-free Python library of classic data-structure and
algorithm exercises: array and matrix walks, in-place sorts, string puzzles,
fixed-capacity queues, linked lists with loop detection, and binary trees.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsadrills.arrays`

- `is_present(matrix, target)`: whether `target` occurs anywhere in the matrix.
- `row_sums(matrix)`, `column_sums(matrix)`: lists of per-row and per-column sums.
- `largest_row_sum(matrix)`: `(row_index, row_sum)` of the row with the
  largest sum; the earliest row wins a tie. Raises `ValueError` for a matrix
  with no rows.
- `array_sum(values)`: the sum, `0` for an empty sequence.
- `find_min(values)`, `find_max(values)`: raise `ValueError` when empty.
- `reverse_in_place(values)`: reverses a mutable sequence in place.
- `binary_search(values, key)`: an index of `key` in a sorted sequence, or `-1`.
- `find_peak(values)`: index of the peak of a mountain-shaped sequence;
  raises `ValueError` when empty.
- `search_matrix(matrix, target)`: binary search over a matrix whose rows,
  read in order, form one sorted sequence.
- `spiral_order(matrix)`: elements in clockwise spiral order.
- `wave_order(matrix)`: columns read alternately top-to-bottom and
  bottom-to-top, starting downward.

### `dsadrills.sorting`

`bubble_sort(values)` (stops early once a pass makes no swap),
`insertion_sort(values)` and `selection_sort(values)`. Each sorts the given
list in place and returns `None`.

### `dsadrills.strings`

- `to_lower(ch)`: lower-cases an ASCII capital; other characters pass through.
- `is_palindrome_ignoring_case(text)`: palindrome check, ignoring ASCII case.
- `is_alnum_palindrome(text)`: palindrome check over ASCII letters and digits
  only, ignoring case.
- `max_occurring_char(text)`: the most frequent lower-case letter, the
  earliest letter on a tie, `'a'` for an empty string. Raises `ValueError` if
  the text holds anything other than lower-case ASCII letters.
- `remove_occurrences(text, part)`: repeatedly removes the leftmost
  occurrence of `part`; raises `ValueError` for an empty `part`.
- `replace_spaces(text)`: replaces every space with `@40`.
- `reverse_chars(chars)`: reverses a list of characters in place.
- `min_bracket_reversals(text)`: fewest brace reversals needed to balance
  the text (any character other than `{` counts as a closing brace); raises
  `ValueError` for odd-length text.

### `dsadrills.queues`

Taking from an empty container raises `QueueEmpty`; adding to a full one
raises `QueueFull`.

- `CircularQueue(capacity)`: `enqueue(value)`, `dequeue()`, `len()`,
  `capacity`.
- `BoundedDeque(capacity)`: `push_front`, `push_rear`, `pop_front`,
  `pop_rear`, `peek_front`, `peek_rear`, `is_empty`, `is_full`, `len()`.
- `ArrayQueue(capacity=100001)`: `enqueue`, `dequeue`, `front`, `is_empty`,
  `len()`. Dequeued slots are reclaimed only once the queue drains, so it can
  report being full while holding fewer than `capacity` elements.
- `KQueues(n, k)`: `k` FIFO queues, numbered from 1, sharing `n` slots;
  `enqueue(value, queue_number)` and `dequeue(queue_number)`. An out-of-range
  queue number raises `ValueError`.
- `PetrolPump(petrol, distance)` and `circular_tour(pumps)`: the first pump
  index from which the whole circle can be driven, or `None`.
- `first_negatives(values, k)`: the first negative number in each window of
  size `k`, or `0` where a window has none.
- `sum_window_extremes(values, k)`: the sum of maximum plus minimum over every
  window of size `k`. Both window functions raise `ValueError` unless
  `1 <= k <= len(values)`.
- `delete_middle(stack)`: removes and returns the middle element of a list
  used as a stack (top is the last item); raises `IndexError` when empty.

### `dsadrills.linkedlists`

- `ListNode(value, next=None, prev=None)`.
- `SinglyLinkedList(values=())` and `DoublyLinkedList(values=())`, with
  `head` and `tail`, `insert_at_head`, `insert_at_tail`,
  `insert_at_position(position, value)` and `delete_at(position)` (which
  returns the removed value). Positions start at 1; a bad position raises
  `IndexError`. Both are iterable and support `len()`; the doubly linked list
  also supports `reversed()`.
- `CircularLinkedList()`, addressed through its `tail`:
  `insert_after(element, value)` (in an empty list `value` becomes the only
  node) and `delete(value)`; a missing element raises `ValueError`. Iteration
  starts at the tail and goes once round.
- Loop helpers on raw `ListNode` chains: `is_circular(head)` (an empty list
  counts as circular), `detect_loop(head)`, `floyd_detect_loop(head)` (the
  meeting node or `None`), `loop_start(head)` and `remove_loop(head)`.

### `dsadrills.trees`

- `TreeNode(value, left=None, right=None)`.
- Builders: `build_tree(text)` from space-separated level-order tokens with
  `N` for a missing child; `build_from_level_order(values)` and
  `build_preorder(values)` from integers with `-1` for a missing child. The
  last two raise `ValueError` if the values run out.
- Traversals: `level_order(root)` (a list of levels), `inorder`, `preorder`,
  `postorder`.
- Checks: `height` and `diameter` (both counted in nodes), `is_balanced`,
  `is_identical(first, second)`, `is_sum_tree`.

## Examples

```python
from dsadrills.arrays import binary_search, spiral_order
from dsadrills.queues import CircularQueue, QueueEmpty
from dsadrills.sorting import insertion_sort
from dsadrills.strings import min_bracket_reversals
from dsadrills.trees import build_tree, diameter, is_balanced

binary_search([2, 4, 6, 8, 12, 18], 6)          # 2
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]

values = [5, 2, 8, 1, 9]
insertion_sort(values)                            # values is now [1, 2, 5, 8, 9]

min_bracket_reversals("{{{}")                     # 1

queue = CircularQueue(2)
queue.enqueue(10)
queue.dequeue()                                   # 10
try:
    queue.dequeue()
except QueueEmpty:
    pass

root = build_tree("1 2 3 N N 4 5")
diameter(root)                                    # 4
is_balanced(root)                                 # True
```

## What it does not do

This is a library only. It installs no command, reads nothing from standard
input and prints nothing; callers pass in data and get results back.