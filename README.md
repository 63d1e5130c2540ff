# katas

Small, self-contained solutions to well-known algorithm puzzles, grouped by the
data they work on. The package uses only the standard library.

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

### `katas.linked_list`

`ListNode` is a singly linked list node with `val` (default `0`) and `next`
(default `None`). `ListNode.from_values(iterable)` builds a list and returns
its head, or `None` for an empty iterable. Iterating over a node yields the
nodes from it to the end, and `to_list()` returns their values.

- `add_two_numbers(l1, l2)`: adds two numbers stored as reversed digit lists
  and returns a new list.
- `remove_nth_from_end(head, n)`: unlinks the n-th node from the end and
  returns the new head; raises `ValueError` unless `1 <= n <= length`.
- `merge_two_lists(list1, list2)`: splices two sorted lists into one sorted
  list, reusing their nodes; on equal values the node from `list2` comes first.
- `delete_duplicates(head)`: removes adjacent repeated values from a sorted
  list, in place.

```python
from katas.linked_list import ListNode, add_two_numbers

total = add_two_numbers(ListNode.from_values([2, 4, 3]), ListNode.from_values([5, 6, 4]))
assert total.to_list() == [7, 0, 8]
```

### `katas.tree`

`TreeNode` is a binary tree node with `val`, `left` and `right`. `in_order()`
yields the subtree's values in in-order sequence.

- `minimum_difference(root)` and `min_diff_in_bst(root)`: the smallest
  difference between consecutive in-order values of a binary search tree.
  Values are expected to lie between 0 and 100000 and the tree to have at least
  two nodes; for a smaller tree the result is the starting bound `1000000`.

### `katas.numbers`

Functions here follow signed or unsigned 32-bit integer limits
(`INT32_MAX`, `INT32_MIN`).

- `reverse_integer(x)`: reverses the decimal digits, keeping the sign; returns
  `0` when the result would exceed `INT32_MAX`.
- `atoi(s)`: skips leading spaces, reads an optional sign and the digits that
  follow, and clamps the result to the 32-bit range.
- `is_palindrome_number(x)`: negative numbers are never palindromes.
- `add_binary(a, b)`: adds two binary strings; raises `ValueError` on any
  character other than `0` or `1`.
- `integer_sqrt(x)`: the floor of the square root; values up to 1 are returned
  unchanged.
- `reverse_bits(n)`: reverses the 32 bits of an unsigned value; raises
  `ValueError` outside `0..0xFFFFFFFF`.

### `katas.roman`

- `int_to_roman(num)`: thousands are written as repeated `M` without limit;
  zero and negative numbers give `""`.
- `roman_to_int(s)`: characters that are not Roman numerals are ignored.

```python
from katas.roman import int_to_roman, roman_to_int

assert int_to_roman(1994) == "MCMXCIV"
assert roman_to_int("LVIII") == 58
```

### `katas.strings`

- `zigzag_convert(s, num_rows)`: writes `s` in a zigzag over `num_rows` rows
  and reads it back row by row; raises `ValueError` if `num_rows < 1`.
- `longest_common_prefix(strs)`: `""` for an empty list.
- `letter_combinations(digits)`: every word a phone keypad spells from the
  digits, in keypad order; digits without letters (such as `0` and `1`) give no
  combinations.
- `is_valid_brackets(s)`: true only if `s` holds nothing but `()[]{}` opened and
  closed in proper order.
- `is_alphanumeric_palindrome(s)`: compares only ASCII letters and digits,
  ignoring case.

### `katas.arrays`

- `two_sum(nums, target)`: indices `[i, j]` of two distinct positions whose
  values sum to `target`, or `[]`.
- `remove_duplicates(nums)`: moves the distinct values of a sorted list to its
  front and returns their count; later items are left as they were.
- `remove_element(nums, val)`: removes every occurrence of `val` in place and
  returns the new length.
- `search_rotated(nums, target)`: index of `target` in a rotated ascending list
  of distinct values, or `-1`.
- `search_insert(nums, target)`: index of `target` in a sorted list, or where
  it would be inserted.
- `merge_sorted(nums1, m, nums2, n)`: merges the first `n` items of `nums2`
  into the first `m` items of `nums1` in place; raises `ValueError` if either
  count is negative or the lists are too short.

## What it does not do

This is a library only: it has no command-line program, and it reads or writes
no files.