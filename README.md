# dsadrills

A small library of classic interview problems on arrays, singly linked
lists and strings. Each problem is a plain function (or a method of
`LinkedList`) that takes ordinary Python values and returns ordinary
Python values. A `dsadrills` command runs a few of them from the
terminal.

The package has no dependencies beyond the standard library.

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

Functions accept any iterable of integers unless noted. Where a problem
has no answer for empty input, a `ValueError` is raised.

### `dsadrills.arrays_basic`

| Function | Problem |
| --- | --- |
| `min_max(values)` | largest and smallest element, as a `MinMax` with `maximum` and `minimum` |
| `reversed_values(values)` | the values in reverse order, as a new list |
| `max_subarray_sum(values)` | largest sum of a non-empty contiguous subarray |
| `contains_duplicate(values)` | whether any value appears at least twice |
| `min_chocolate_difference(packets, students)` | smallest max-min spread when giving one packet to each student; `ValueError` if `students` is below 1 or exceeds the number of packets |
| `search_rotated(values, key)` | index of `key` in a rotated ascending list of distinct values, or `None` |
| `next_permutation(values)` | the next lexicographic permutation as a new list, wrapping round to the smallest |
| `max_profit(prices)` | best profit from one buy and one later sell, or 0 |
| `repeat_and_missing(values)` | for a list meant to hold `1..n`, the value that appears twice and the one that is absent, as a `RepeatMissing` with `repeated` and `missing` |

### `dsadrills.arrays_advanced`

| Function | Problem |
| --- | --- |
| `kth_largest(values, k)` | k-th largest element, counting repeats separately; `ValueError` if `k` is out of range |
| `trapped_water(heights)` | units of rain water trapped by an elevation map |
| `product_except_self(values)` | for each position, the product of all other elements, without division |
| `max_product_subarray(values)` | largest product of a non-empty contiguous subarray |
| `rotated_minimum(values)` | minimum of a rotated ascending list of distinct values |
| `search_rotated_unique(values, key)` | index of `key` in a rotated list of unique values, or `None` |
| `three_sum(values)` | every distinct ascending triplet summing to zero, as a list of tuples |
| `max_area(heights)` | most water a container formed by two lines can hold; needs at least two heights |
| `has_pair_with_sum(values, total)` | whether two elements of a rotated sorted list of distinct values add up to `total` |

```python
from dsadrills.arrays_advanced import three_sum, trapped_water

three_sum([-1, 0, 1, 2, -1, -4])                 # [(-1, -1, 2), (-1, 0, 1)]
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
```

### `dsadrills.linked`

`LinkedList` is a singly linked list of `Node` objects (each with
`value` and `next`), reachable from its `head`. It can be built from any
iterable, iterated over, and printed (values separated by spaces). Its
methods:

- `append(value)` adds a value at the end and returns the new node;
- `reverse()` reverses the list in place;
- `has_cycle()` tells whether following `next` ever revisits a node;
- `maximum()` returns the largest value;
- `remove_duplicates()` drops every node whose value appeared earlier;
- `sort_012()` sorts a list of 0s, 1s and 2s by counting them
  (`ValueError` for any other value);
- `to_number()` reads the values as decimal digits, head first.

Two module functions complete it:

- `merge_sorted(first, second)` merges two ascending sequences into a new
  `LinkedList`;
- `delete_node(node)` removes a node given only that node, by copying in
  the next node's value; the last node of a list cannot be removed this
  way and raises `ValueError`.

Iterating a list whose nodes form a cycle never ends, so check
`has_cycle()` first.

```python
from dsadrills.linked import LinkedList

numbers = LinkedList([1, 2, 3, 4, 5])
numbers.reverse()
print(numbers)          # 5 4 3 2 1
```

### `dsadrills.strings`

| Function | Problem |
| --- | --- |
| `is_palindrome(text)` | palindrome check over ASCII letters and digits, ignoring case and everything else |
| `is_anagram(first, second)` | whether two strings use exactly the same characters |
| `is_valid_brackets(text)` | whether `()[]{}` are balanced and properly nested; any other character makes the text invalid |
| `remove_consecutive_duplicates(text)` | collapse each run of a repeated character to one |
| `longest_common_prefix(words)` | longest prefix shared by all words; needs at least one word |
| `keypad_sequence(text)` | upper-case letters `A`-`Z` as mobile keypad presses; `ValueError` for anything else |
| `duplicate_counts(text)` | characters occurring more than once, mapped to their counts, in character order |

```python
from dsadrills.strings import is_anagram, is_palindrome, keypad_sequence

is_palindrome("A man, a plan, a canal: Panama")   # True
is_anagram("listen", "silent")                    # True
keypad_sequence("GFG")                            # "43334"
```

## Command line

Installing the package provides a `dsadrills` command with four
sub-commands:

```
dsadrills minmax 3 9 -2 7          # largest and smallest value
dsadrills pair-sum --sum 16 11 15 6 8 9 10   # prints true or false
dsadrills multiply 946 84          # multiplies two numbers held digit by digit in linked lists
dsadrills duplicates "test string" # each repeated character with its count
```

The command exits with status 1 and a message on standard error when a
drill rejects its input. See everything it offers with:

```
dsadrills --help
```

## What it does not do

Only the four drills above are reachable from the command line; every
other problem is available through the Python functions alone.