# algokit

A small collection of classic algorithms written as plain Python functions. It covers
array problems, conversions between infix, prefix and postfix notation, fast
exponentiation, binary-tree traversal and text patterns.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Modules

### `algokit.arrays`

- `is_sorted_and_rotated(nums)`: whether `nums` is a rotation of a non-decreasing list.
- `sort_colors(nums)`: sorts a list of 0s, 1s and 2s in place in one pass (Dutch
  national flag). Values other than 0 and 1 go to the high end.
- `extreme_elements(nums)`: returns an `Extremes` with `largest`, `second_largest`,
  `smallest` and `second_smallest`. A runner-up is `None` when there is no distinct
  second value. An empty input raises `ValueError`.
- `max_consecutive_ones(nums)`: the length of the longest run of 1s.
- `missing_number(nums)`: the one number of `0..len(nums)` absent from `nums`.
- `single_number(nums)`: the value that occurs exactly once; raises `ValueError` if
  there is none.
- `count_substrings_with_abc(s)`: counts substrings that contain each of `a`, `b` and
  `c`. Any other character raises `ValueError`.
- `max_subarray_sum(nums)`: the largest sum of a non-empty contiguous subarray
  (Kadane's algorithm); an empty input raises `ValueError`.
- `intersection(nums1, nums2)`: the distinct values found in both, in order of first
  appearance in `nums2`.
- `linear_search(nums, target)`: the index of the first match, or `None`.
- `longest_subarray_with_sum(nums, k)`: the length of the longest contiguous subarray
  summing to `k` (negative values allowed), or 0.
- `majority_element(nums)`: Boyer-Moore voting; the result is meaningful only if some
  value occurs more than half the time. An empty input raises `ValueError`.

```python
from algokit.arrays import extreme_elements

extreme_elements([12, -32, 34, 113, -22, 67, -98, 62, 82, -90])
# Extremes(largest=113, second_largest=82, smallest=-98, second_smallest=-90)
```

### `algokit.sequences`

- `max_card_score(card_points, k)`: the best total from taking `k` cards off the two
  ends; `k` outside `0..len(card_points)` raises `ValueError`.
- `move_zeroes(nums)`: moves zeroes to the end in place, keeping the order of the rest.
- `next_permutation(nums)`: the next lexicographic permutation, in place; the last one
  wraps round to ascending order.
- `rotate(nums, k)`: rotates right by `k` steps in place (negative `k` rotates left).
- `rearrange_by_sign(nums)`: a new list alternating positive and non-positive values,
  starting with a positive one and keeping the order within each group. Groups of
  different sizes raise `ValueError`.
- `remove_duplicates(nums)`: moves the distinct values of a sorted list to its front in
  place and returns how many there are; the rest of the list is left as it was.
- `count_subarrays_with_sum(nums, k)`: the number of contiguous subarrays summing to `k`.
- `two_sum(nums, target)`: a tuple of indices `(i, j)` with `i < j` whose values sum to
  `target`, or `None`.
- `has_pair_with_sum(nums, target)`: whether two distinct entries sum to `target`.
- `sorted_union(nums1, nums2)`: the distinct values of both inputs in ascending order.

### `algokit.notation`

```python
from algokit.notation import infix_to_postfix, infix_to_prefix, postfix_to_infix

infix_to_postfix("a+b*(c^d-e)")   # 'abcd^e-*+'
infix_to_prefix("(A+B)*C-D+E")    # '+-*+ABCDE'
postfix_to_infix("AB-DE+F*/")     # '((A-B)/((D+E)*F))'
```

Operands are single ASCII letters or digits, operators are `^ * / + -`, and whitespace
is ignored. In `infix_to_postfix` every operator associates left; in `infix_to_prefix`
`^` associates right. A malformed expression (an unexpected character, unbalanced
parentheses, an operator short of operands) raises `ExpressionError`, a subclass of
`ValueError`. The module also has `precedence(op)`, `postfix_to_prefix(expr)`,
`prefix_to_infix(expr)` and `prefix_to_postfix(expr)`.

### `algokit.power`

`power(x, n)` computes `x` to an integer power `n` by repeated squaring and returns a
float. A negative `n` gives the reciprocal; `power(0, n)` with negative `n` raises
`ZeroDivisionError`.

### `algokit.trees`

```python
from algokit.trees import TreeNode, preorder

root = TreeNode(1, None, TreeNode(2, TreeNode(3)))
preorder(root)   # [1, 2, 3]
```

`preorder(None)` returns an empty list.

### `algokit.patterns`

`rectangle(n, m)`, `triangle(n)`, `number_triangle(n)`, `row_number_triangle(n)`,
`inverted_triangle(n)` and `inverted_number_triangle(n)` return the pattern as a list
of rows, each a string of space-separated cells:

```python
from algokit.patterns import number_triangle

number_triangle(3)   # ['1', '1 2', '1 2 3']
```

## What it does not do

algokit is a library only: it has no command-line program, and the pattern functions
return strings rather than printing them.

## Running the tests

```
pip install ".[test]"
pytest
```