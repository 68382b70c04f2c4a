# algokit

This is a small library of classic algorithms. It works on lists, strings,
integers and singly linked lists. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.arrays`: `two_sum`, `max_area`, `max_profit`, `max_profit_unlimited`,
  `majority_element`, `majority_elements`, `product_except_self`, `find_duplicate`,
  `max_subarray_sum`, `max_absolute_sum`, `increasing_triplet`, `can_jump`,
  `merge_intervals`, `array_pair_sum`, `sort_colors`, `merge_sorted`,
  `rotate_matrix`, `find_content_children`, `maximum_triplet_value`
- `algokit.counting`: `count_good_triplets`, `count_pairs`, `count_partitions`
  (the result is taken modulo `MOD`, which is 10**9 + 7), and
  `count_interesting_subarrays`
- `algokit.search`: `search_rotated`, `search_range`, `search_insert`, `search_matrix`
- `algokit.numbers`: `divide`, `int_sqrt`, `count_symmetric_integers`
- `algokit.strings`: `reverse_words`, `longest_palindrome`, `kth_character`,
  `possible_string_count`
- `algokit.linked_list`: `ListNode`, `build_list`, `to_list`, `intersection_node`,
  `remove_nth_from_end`, `reverse_list`, `merge_two_lists`, `rotate_right`,
  `middle_node`

## Examples

```python
from algokit.arrays import two_sum, merge_intervals
from algokit.search import search_range
from algokit.strings import longest_palindrome
from algokit.linked_list import build_list, reverse_list, to_list

two_sum([2, 7, 11, 15], 9)                     # (0, 1)
merge_intervals([[1, 3], [2, 6], [8, 10]])     # [[1, 6], [8, 10]]
search_range([5, 7, 7, 8, 8, 10], 8)           # (3, 4)
longest_palindrome("cbbd")                     # "bb"
to_list(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
```

`two_sum` returns `()` when no pair exists. `search_range` returns `(-1, -1)`
when the target is absent.

## Linked lists

Linked-list functions take and return `ListNode` heads. `None` stands for the
empty list. `build_list` and `to_list` convert between Python lists and nodes.
Iterating over a `ListNode` yields the values from that node to the end.
Nodes compare by identity, so `intersection_node` finds a node that both
lists share, not two nodes that merely hold equal values.

## In-place changes and errors

Some functions change their arguments in place and return `None`:

- `sort_colors`
- `merge_sorted`
- `rotate_matrix`

The linked-list functions that relink nodes also change their input. These are
`remove_nth_from_end`, `reverse_list`, `merge_two_lists` and `rotate_right`.

Invalid input raises an exception instead of returning a sentinel value:

| Function | Input | Exception |
| --- | --- | --- |
| `divide` | divisor of zero | `ZeroDivisionError` |
| `count_pairs` | `k` of zero | `ZeroDivisionError` |
| `int_sqrt` | negative number | `ValueError` |
| `kth_character` | non-positive `k` | `ValueError` |
| `max_profit`, `majority_element`, `max_subarray_sum` | empty sequence | `ValueError` |
| `remove_nth_from_end` | out-of-range `n` | `ValueError` |
| `merge_sorted` | `nums1` too short to hold the merged values | `ValueError` |
| `rotate_matrix` | non-square matrix | `ValueError` |
| `count_partitions` | negative values | `ValueError` |

## What it does not do

`algokit` is only a library of functions. It has no command-line program.