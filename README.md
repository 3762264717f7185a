# pushswap

Sorts a list of distinct integers with two stacks, `a` and `b`. It prints
each operation it uses on its own line.

## Operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` at once                         |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top goes to the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` at once                         |
| `rra` | rotate `a` down: the bottom goes to the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` at once                       |

## Usage

You can give the numbers as separate arguments or as one quoted string:

```
pushswap 3 1 2
pushswap "4 8 2 9 12 1"
```

Before sorting, each value is replaced by its rank. The smallest value gets
rank 0. The operations act on these ranks.

### Errors and exit status

In the following cases `Error` goes to standard error and the exit status
is 1:

- An argument is not an integer. An integer here means an optional `-`
  followed by digits, so `+5` is rejected.
- A value is repeated. Values are compared through a fixed-size hash of
  their 32-bit value, so values such as `1` and `1000001` are also
  reported as repeated.
- A value does not fit in a 32-bit signed integer.

In the following cases nothing is printed and the exit status is 1:

- The input is already in ascending order.
- No arguments are given.
- A single quoted string holds only one number.

### Sorting strategies

- Five values or fewer: the smallest values are pushed to `b` until three
  remain. Those three are sorted and the pushed values are brought back.
- Longer lists: the longest greedy increasing run stays in `a` and every
  other value is pushed to `b`. The values in `b` are then inserted back one
  at a time, each by the cheapest of three rotation plans. Finally `a` is
  rotated until 0 is on top.

The strategy for longer lists also writes listings of the stacks and its
move counts to standard output, mixed in with the operations.

## From Python

```python
import io
from pushswap.parsing import parse_values
from pushswap.stacks import Stacks
from pushswap.small_sort import sort_five

out = io.StringIO()
stacks = Stacks(parse_values(["3", "1", "2"]), [], out)
sort_five(stacks)
print(out.getvalue())   # "ra\n"
print(stacks.a)         # [0, 1, 2]
```

### `pushswap.parsing`

This module splits, checks and ranks the input:

- `atoi`
- `split_words`
- `check_if_num`
- `check_duplicates`
- `check_if_sorted`
- `rank_values`
- `parse_values`

`parse_values` raises `InputError` for input that cannot be used. The
error's `show` attribute tells whether the failure should be reported.

### `pushswap.stacks.Stacks`

`Stacks` holds the lists `a` and `b`, with the top of each stack at index 0.
It has one method per operation:

- `push_a`, `push_b`
- `swap_a`, `swap_b`, `swap_both`
- `rotate_a`, `rotate_b`, `rotate_both`
- `reverse_rotate_a`, `reverse_rotate_b`, `reverse_rotate_both`

It also has `describe_a` and `describe_b`, which produce stack listings.

### Sorting functions

- `pushswap.small_sort.sort_five` sorts stacks of up to five values.
- `pushswap.cluster.cluster_sort` sorts longer stacks.
- `pushswap.cli.main(argv=None)` runs the command and returns its exit
  status.

## What it does not do

There is no checker. The package does not read a list of operations back
in, and it does not verify that a sequence of operations sorts a stack.

## Tests

```
pip install -e .[test]
pytest
```