# dsakit

Classic data structures and algorithms in plain Python, of the kind a
data-structures course works through. It uses only the standard library.

## What is inside

| Module                 | Contents |
|------------------------|----------|
| `dsakit.arrays`        | `merge_sorted`, `insert_at`, `delete_at`, `linear_search`, `binary_search`, `reversed_copy` |
| `dsakit.sparse`        | `triplets`, `format_triplets`, `linked_representation`, `format_linked` and the `SparseNode` chain |
| `dsakit.graph`         | `Graph` with `add_edge` and an explicit-stack `dfs` |
| `dsakit.timing`        | `timed_sum`, returning a `TimedSum(total, seconds)` |
| `dsakit.expressions`   | `check_brackets` (returns a `BracketCheck`), `is_balanced`, `precedence`, `infix_to_postfix` |
| `dsakit.sorting`       | `bubble_sort`, `selection_sort`, `insertion_sort`, `exchange_sort`, `quicksort_hoare`, `quicksort_lomuto`, `quicksort_randomized`, `merge_sort` |
| `dsakit.stack`         | `BoundedStack`, `TwoStacks`, `reverse_string`, and the `StackOverflow` / `StackUnderflow` exceptions |
| `dsakit.stack_ops`     | `delete_middle`, `insert_at_bottom`, `reverse_stack`, `sort_stack` on a list used as a stack |
| `dsakit.queues`        | `CircularQueue`, `LinearQueue`, `LinkedQueue`, `PriorityQueue`, and `QueueOverflow` / `QueueUnderflow` |
| `dsakit.circular_list` | `CircularLinkedList` |
| `dsakit.linked_list`   | `LinkedList` |
| `dsakit.bst`           | `BinarySearchTree` |

## Notes on behaviour

- **Arrays.** `insert_at` and `delete_at` return new lists and raise
  `IndexError` for a position out of range. `linear_search` returns the index
  of the first match or `None`. `binary_search` sorts a copy and returns
  `True` or `False`. `merge_sorted` keeps elements of the first sequence ahead
  of equal ones from the second.
- **Sparse matrices.** `triplets` lists `(row, col, value)` for every
  non-zero entry, row by row. `linked_representation` builds a chain of
  `SparseNode` objects, or returns `None` when the matrix has no non-zero
  entries. The `format_*` functions render either form as text.
- **Graph.** `Graph.dfs` marks vertices as visited when they are pushed, so
  the most recently added neighbour is explored first.
- **Expressions.** `infix_to_postfix` drops whitespace, treats every operator,
  `^` included, as left-associative, and raises `ValueError` on unbalanced
  parentheses.
- **Sorting.** Every sort returns a new ascending list and leaves its input
  alone. `quicksort_randomized` takes an optional `random.Random` so that runs
  can be repeated.
- **Stacks.** `BoundedStack(capacity=10)` and `TwoStacks(capacity)` raise
  `StackOverflow` when full and `StackUnderflow` when empty. The functions in
  `dsakit.stack_ops` change the given list in place, with its last element as
  the top; `delete_middle` raises `StackUnderflow` on an empty list.
- **Queues.** `CircularQueue` (default capacity 5) reuses its slots in a ring.
  `LinearQueue` (default capacity 5) does not reuse freed slots until it
  empties. `LinkedQueue` is unbounded. `PriorityQueue` serves the highest
  priority first, and equal priorities in arrival order.
- **Linked lists.** `LinkedList` and `CircularLinkedList` both support
  `insert_after(value, location)`, where location 0 means "at the front", and
  `search`, which returns a 1-based location or `None`. `LinkedList` also has
  `insert_middle`, `delete_at`, `delete_middle` and an in-place `reverse`.
  Invalid locations and deletes from an empty list raise `IndexError`.
- **Binary search tree.** Inserting a value that is already present does
  nothing. `delete` replaces a node with two children by its in-order
  successor. `minimum` raises `ValueError` on an empty tree. `inorder`,
  `preorder` and `postorder` return lists.

## Examples

```python
from dsakit.arrays import merge_sorted, binary_search
from dsakit.expressions import infix_to_postfix, is_balanced
from dsakit.sorting import merge_sort
from dsakit.bst import BinarySearchTree

print(merge_sorted([1, 3, 5], [2, 4, 6]))   # [1, 2, 3, 4, 5, 6]
print(binary_search([5, 1, 9], 9))          # True

print(is_balanced("{[(a+b)]}"))             # True
print(infix_to_postfix("a+b*c"))            # abc*+

print(merge_sort([12, 31, 25, 8, 32, 17, 40, 42]))

tree = BinarySearchTree([50, 30, 70, 20, 40])
print(tree.inorder())                       # [20, 30, 40, 50, 70]
print(tree.preorder())                      # [50, 30, 20, 40, 70]
```

Bounded containers raise exceptions instead of silently overflowing:

```python
from dsakit.stack import BoundedStack, StackOverflow

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflow:
    print("stack is full")
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menu for driving the structures; you call them from your own Python code.
Nothing is saved to disk.

## Tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e ".[test]"
pytest
```