# dsakit

A small collection of classic data-structure and algorithm routines, written
as plain Python functions and classes. It is meant for study and practice:
each routine is short, self-contained and easy to read. It has no
dependencies beyond the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `maximum`, `minimum`, `intersection`, `sorted_intersection`, `find_duplicates`, `xor_duplicate`, `largest_rectangle_area`, `merge_sorted`, `move_zeros`, `reversed_copy`, `rotate`, `array_sum`, `swap_alternate`, `pairs_with_sum`, `unique_element` |
| `dsakit.array_search` | `grid_contains`, `is_sorted_rotated`, `peak_in_mountain`, `pivot_index`, `binary_search`, `search_rotated` |
| `dsakit.strings` | `string_length`, `max_occurring_char`, `is_alnum_palindrome`, `remove_stars`, `reverse_string`, `reverse_words` |
| `dsakit.stacks` | `ArrayStack`, `TwoStack`, `StackFullError`, `StackEmptyError`, `is_valid_parentheses`, `delete_middle`, `insert_at_bottom`, `reverse_stack`, `sort_stack`, `reverse_with_stack` |
| `dsakit.graphs` | `bfs`, `is_cyclic`, `min_cost_connect_points`, `shortest_path_dag`, `shortest_path_undirected`, `topological_sort` |
| `dsakit.heap` | `MaxHeap`, `HeapFullError`, `heap_sort` |
| `dsakit.linked_queue` | `LinkedQueue` |
| `dsakit.recursion` | `power`, `fast_power`, `factorial`, `fibonacci`, `power_of_two`, `is_sorted`, `linear_search`, `recursive_sum`, `binary_search_recursive`, `is_palindrome`, `say_digits`, `reversed_chars` |
| `dsakit.sorting` | `bubble_sort`, `merge_sort`, `quick_sort` |
| `dsakit.backtracking` | `permutations`, `rat_in_maze`, `letter_combinations`, `subsequences`, `subsets` |

Functions that rearrange a sequence return a new list and leave their input
alone. The functions in `dsakit.stacks` take a stack as a list whose last
item is the top. Graph functions take adjacency lists indexed by node number.

## Examples

```python
from dsakit.arrays import merge_sorted, rotate
from dsakit.array_search import search_rotated
from dsakit.stacks import ArrayStack, is_valid_parentheses
from dsakit.heap import MaxHeap
from dsakit.backtracking import letter_combinations

merge_sorted([1, 3, 5, 7, 9], [2, 4, 6])   # [1, 2, 3, 4, 5, 6, 7, 9]
rotate([1, 2, 3, 4, 5], 3)                 # [3, 4, 5, 1, 2]
search_rotated([3, 4, 7, 1, 2], 2)         # 4

is_valid_parentheses("{[()]}")             # True

stack = ArrayStack(10)
stack.push(20)
stack.push(300)
stack.top()                                # 300

heap = MaxHeap()                           # holds at most 100 items by default
for value in (12, 70, 20, 25, 3, 99):
    heap.insert(value)
heap.pop()                                 # 99

letter_combinations("23")                  # ['ad', 'ae', 'af', 'bd', ...]
```

```python
from dsakit.graphs import bfs, topological_sort
from dsakit.linked_queue import LinkedQueue

bfs([[1, 2], [0], [0]])                    # [0, 1, 2]
topological_sort([[1], [2], []])           # [0, 1, 2]

queue = LinkedQueue()
for value in (10, 20, 30, 50):
    queue.push(value)
queue.front(), queue.back()                # (10, 50)
```

## Errors

Operations that cannot proceed raise exceptions rather than returning
sentinel values:

- `ArrayStack` and `TwoStack` raise `StackFullError` when there is no room
  and `StackEmptyError` when there is nothing to pop or read.
- `MaxHeap.insert` raises `HeapFullError` at capacity; `MaxHeap.pop`,
  `MaxHeap.peek` and the `LinkedQueue` readers raise `IndexError` when empty.
- `topological_sort` and `shortest_path_dag` raise `ValueError` on a cycle.
- `maximum`, `minimum`, `peak_in_mountain` and `max_occurring_char` raise
  `ValueError` on input they have nothing to find in; `letter_combinations`
  raises `ValueError` for a digit other than 2 to 9; the functions in
  `dsakit.recursion` raise `ValueError` for a negative exponent or count.

Searches that find nothing return `-1` (the binary searches) or `False`.

## What it does not do

dsakit is a library only. It installs no command and does not read input
from the terminal; call its functions from your own code or from the Python
prompt.