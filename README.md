# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed set
of instructions. It then prints the instructions it used, one per line.

## Instructions

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom goes to the top     |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

A move on a single stack that has fewer than the elements it needs changes
nothing and is not recorded.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

Each argument is either a single integer or several integers separated by spaces.
An integer may carry one leading `+` or `-`. The first number is the top of
stack `a`. If the numbers are already sorted, nothing is printed.

The command writes `Error` to standard error and exits with status 1 in these cases:

- an argument is empty;
- a number is not an integer;
- a number does not fit in a 32-bit signed integer;
- a number is repeated;
- the arguments hold no numbers at all.

With no arguments it prints nothing and exits with status 0.

## Library use

```python
from pushswap.parser import parse_args, ParseError
from pushswap.stacks import Stacks
from pushswap.sorting import sort_stack

values = parse_args(["5 1 4", "2", "3"])
stacks = Stacks(values)
sort_stack(stacks)
print(stacks.a)         # [1, 2, 3, 4, 5]
print(stacks.moves)     # instructions recorded while sorting
```

`parse_args` raises `ParseError` (a `ValueError`) for the same inputs the
command rejects. Each move is a method of `Stacks` (`sa`, `pb`, `rra`, ...). Each
one takes `record` (default true), which decides whether the move's name is
appended to `Stacks.moves`.

Lists of two to five numbers use dedicated short routines, `sort_2` to `sort_5`
in `pushswap.sorting`. Longer lists go through `sort_large`. It pushes values to
`b` while following a sliding window over their sorted order, whose width comes
from `get_range`. It then brings the values back to `a` largest first.

## Limits

The package only produces instructions. It does not read a list of
instructions and check whether they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```