# algokit

A small library of classic algorithms and data structures in plain Python. It uses
only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.linked_list`

`ListNode` is a singly linked node with `val` and `next` fields. Nodes compare by
identity. Iterating over a node yields the values from that node to the end of the
list.

- `build_list(values)` builds a list and returns its head, or `None` if `values` is empty.
- `to_values(head)` returns the values as a Python list.
- `has_cycle`, `binary_to_int`, `add_two_numbers` (digits stored least significant
  first), `remove_elements`, `reverse_list` (works in place), `merge_two_lists`
  (splices two sorted lists together), `is_palindrome`, `middle_node` (for an even
  length it returns the second of the two middle nodes).

### `algokit.containers`

- `QueueBackedStack` is a stack stored in a single queue. It has `push`, `pop`, `top`,
  `empty` and `len()`.
- `StackBackedQueue` is a queue stored in two stacks. It has `push`, `pop`, `peek`,
  `empty` and `len()`.

Calling `pop`, `top` or `peek` on an empty container raises `IndexError`.

### `algokit.arrays`

`two_sum`, `max_profit`, `max_profit_multiple`, `three_consecutive_odds`,
`majority_element`, `rotate`, `build_array`, `find_even_numbers`, `remove_duplicates`,
`remove_duplicates_keep_two`, `remove_element`, `min_equal_sum`, `final_state`,
`stable_mountains`, `is_zero_array`, `can_jump`, `set_zeroes`, `sort_colors`,
`merge_sorted`.

Some of these modify the list they are given:
- `rotate`, `set_zeroes`, `sort_colors` and `merge_sorted` rearrange it and return `None`.
- `remove_duplicates`, `remove_duplicates_keep_two` and `remove_element` compact the
  kept values to the front and return how many there are.
- `final_state` changes the list and also returns it.

### `algokit.strings`

`longest_common_prefix`, `merge_alternately`, `is_valid_parentheses`, `find_index`
(returns -1 when the needle is absent and 0 for an empty needle),
`find_the_difference`, `length_of_last_word`, `find_words_containing`,
`longest_alternating_subsequence`, `longest_hamming_subsequence`.

### `algokit.dominoes`

- `min_domino_rotations` returns -1 when no rotation works.
- `num_equiv_domino_pairs`.
- `num_tilings` works modulo 1e9+7 and raises `ValueError` for a negative length.
- `push_dominoes`.

### `algokit.numbers`

`subtract_product_and_sum`, `integer_sqrt`, `climb_stairs`, `triangle_type` (returns
`"equilateral"`, `"isosceles"`, `"scalene"` or `"none"`),
`length_after_transformations`, `length_after_custom_transformations`,
`count_balanced_permutations`. The last three work modulo 1e9+7.

### `algokit.search`

- `find_center`.
- `max_task_assign`.
- `maximum_value_sum`.
- `min_time_to_reach` uses Dijkstra over a grid of room opening times.
- `min_time_to_reach_alternating` is the same, except that moves take one and two
  seconds in turn. It returns -1 if the last room is never reached.

## Examples

```python
from algokit.arrays import two_sum, max_profit, rotate
from algokit.linked_list import build_list, reverse_list, to_values
from algokit.strings import is_valid_parentheses
from algokit.containers import StackBackedQueue

two_sum([2, 7, 11, 15], 9)                       # [0, 1]
max_profit([7, 1, 5, 3, 6, 4])                   # 5
to_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
is_valid_parentheses("()[]{}")                   # True

nums = [1, 2, 3, 4, 5]
rotate(nums, 2)
nums                                             # [4, 5, 1, 2, 3]

queue = StackBackedQueue()
queue.push(1)
queue.push(2)
queue.pop()                                      # 1
```

## What it does not do

algokit is a library to import and nothing more. It has no command-line program. It
does not read input files, and it keeps no storage of its own.