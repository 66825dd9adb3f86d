# cfsolve

Python solutions to classic competitive-programming warm-up problems.
Each problem is a plain function. It takes ordinary Python values and
returns its answer, so you can reuse the solutions, combine them and
check them without parsing any input. Invalid input raises
`ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

The functions are grouped by the kind of data they work on.

### `cfsolve.text`

These functions work on strings and characters:

- `anton_and_danik`
- `bit_plus_plus`
- `boy_or_girl`
- `chat_room`
- `football`
- `hq9`
- `helpful_maths`
- `hulk`
- `magnets`
- `nearly_lucky`
- `petya_and_strings`
- `stones_on_the_table`
- `string_task`
- `translation`
- `ultra_fast_mathematician`
- `word`
- `capitalize`
- `caps_lock`
- `normal_problem`
- `queue_at_the_school`

Yes/no problems return `bool`. The other functions return the answer
string or number.

### `cfsolve.arithmetic`

These functions work on a single number or a few of them:

- `bear_and_big_brother`
- `beautiful_year`
- `calculating_function`
- `domino_piling`
- `easy_problem`
- `elephant`
- `even_odds`
- `expression`
- `lucky_division`
- `minimize`
- `plus_or_minus`
- `soldier_and_bananas`
- `sum_check`
- `theatre_square`
- `watermelon`
- `wrong_subtraction`
- `is_t_prime`

### `cfsolve.sequences`

These functions work on lists, grids and collections of values:

- `beautiful_matrix`
- `george_and_accommodation`
- `amazing_performances`
- `easy_or_hard`
- `horseshoes`
- `kefa_first_steps`
- `next_round`
- `presents`
- `team`
- `tram`
- `twins`
- `vanya_and_fence`
- `young_physicist`
- `drinks`
- `taxi`
- `vanya_and_lanterns`

Example:

```python
from cfsolve.arithmetic import theatre_square, is_t_prime
from cfsolve.text import translation

theatre_square(6, 6, 4)        # 4 flagstones
is_t_prime(4)                  # True: 1, 2 and 4
translation("code", "edoc")    # True
```

## Command line

Installing the package provides the `cfsolve` command. It reads
whitespace-separated integers from standard input and prints one answer
per line. The first integer is the number of test cases, and the
arguments of each case follow it.

```
cfsolve --help
cfsolve PROBLEM < input.txt
```

`PROBLEM` is one of the following:

| Problem         | Numbers per case | Answer                                          |
|-----------------|------------------|-------------------------------------------------|
| `easy-problem`  | 1 (`n`)          | `n - 1`                                         |
| `minimize`      | 2 (`a b`)        | `b - a`                                         |
| `plus-or-minus` | 3 (`a b c`)      | `+` if `a + b == c`, otherwise `-`              |
| `sum`           | 3 (`a b c`)      | `YES` if one number is the sum of the other two, otherwise `NO` |

Example:

```
$ printf '2\n1 2 3\n3 2 1\n' | cfsolve plus-or-minus
+
-
```

In these cases the command reports the problem as a usage error and
exits with status 2:

- the input is missing
- the input holds a token that is not an integer
- the case count is negative
- there are fewer numbers than the case count needs

## What the package does not do

Only the four problems above can be run from the command line. For all
other problems the package does no input parsing. Import the function
and call it with Python values.