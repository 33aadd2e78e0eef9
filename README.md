# algonotes

A small library of well-known algorithm problems solved in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algonotes.strings`

- `repeated_substring_pattern(s)`: whether `s` is one of its proper prefixes
  repeated two or more times. Strings shorter than two characters give `False`.
- `rotate_string(s, goal)`: whether `goal` is a rotation of `s`. The two
  strings must have the same length, and two empty strings count as a rotation.
- `repeated_string_match(a, b)`: the least number of copies of `a` whose
  concatenation contains `b`, or `-1` if no number of copies does. Raises
  `ValueError` if `a` is empty and `b` is not.

```python
from algonotes.strings import repeated_string_match, rotate_string

rotate_string("abcde", "cdeab")        # True
repeated_string_match("abcd", "cdab")  # 2
repeated_string_match("abc", "wxyz")   # -1
```

### `algonotes.arrays`

- `valid_subarrays(nums)`: how many non-empty subarrays have a first element
  that is no larger than any other element in them.
- `find_buildings(heights)`: the indices, in increasing order, of buildings
  that are strictly taller than every building to their right.
- `visible_mountains(peaks)`: how many peaks, given as `(x, y)` pairs, do not
  lie inside or on the edge of another mountain. Each peak stands for a
  triangle with base `[x - y, x + y]`. Identical mountains hide each other, so
  none of them is counted.
- `search_rotated(nums, target)`: the index of `target` in a rotated ascending
  list of distinct values, or `-1`.
- `find_kth_largest(nums, k)`: the k-th largest value, counting from 1 and
  including duplicates. Raises `ValueError` unless `1 <= k <= len(nums)`.
- `heap_sort(nums)` and `merge_sort(nums)`: take any iterable of numbers and
  return a new list in ascending order; the input is left unchanged.

```python
from algonotes.arrays import find_kth_largest, search_rotated, valid_subarrays

search_rotated([4, 5, 6, 7, 0, 1, 2], 0)  # 4
find_kth_largest([3, 2, 1, 5, 6, 4], 2)   # 5
valid_subarrays([1, 4, 2, 5, 3])          # 11
```

### `algonotes.linked_list`

`ListNode(val, next=None)` is a node of a singly linked list. Iterating over a
node yields its value and the values of the nodes after it. An empty list is
represented by `None`.

- `from_values(values)`: builds a list from any iterable of values.
- `to_values(head)`: returns the values of a list as a Python list (`[]` for `None`).
- `odd_even_list(head)`: puts the nodes at odd positions (counting from 1)
  before those at even positions, keeping the order within each group.
- `reverse_list(head)`: reverses the list.
- `insertion_sort_list(head)`: sorts the list in ascending order; equal values
  keep their relative order.

These three functions relink the existing nodes rather than copying them, and
return the new head.

```python
from algonotes.linked_list import from_values, odd_even_list, reverse_list, to_values

to_values(reverse_list(from_values([1, 2, 3])))       # [3, 2, 1]
to_values(odd_even_list(from_values([1, 2, 3, 4, 5])))  # [1, 3, 5, 2, 4]
```

### `algonotes.tree`

- `TreeNode(val, left=None, right=None)`: a binary tree node.
- `build_tree(inorder, postorder)`: rebuilds a tree from its in-order and
  post-order traversals, which are expected to hold distinct values. Returns
  `None` if the traversals are empty or differ in length, and raises
  `ValueError` if the post-order holds a value the in-order does not.
- `inorder_values(root)` and `postorder_values(root)`: the traversals of a
  tree as lists (`[]` for `None`).

```python
from algonotes.tree import build_tree, inorder_values, postorder_values

root = build_tree([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
root.val                # 3
inorder_values(root)    # [9, 3, 15, 20, 7]
postorder_values(root)  # [9, 15, 7, 20, 3]
```

## What it does not do

The package is a library only: it has no command-line program, and its
functions work on in-memory values without reading input or printing results.