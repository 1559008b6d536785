# chefsolve

Solutions to a collection of short competitive-programming problems. Each
problem is a plain Python function, and a command-line runner reads a
problem's input in its usual contest format and prints the answers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the functions

The solutions are grouped by the kind of input they take:

- `chefsolve.simple`: problems answered from one to three numbers, such as
  `ice_cones`, `movie_price`, `diwali_payment` and `problem_setter`.
  Yes/no questions return `True` or `False`; the others return a number
  or the answer text (for example `advitiya_message` or `off_by_one`).
- `chefsolve.arithmetic`: problems with a few numbers per test case, such as
  `butterfly_possible`, `ratio_operations`, `even_odd_divisors` and
  `max_rectangle_area`.
- `chefsolve.sequences`: problems over lists or strings:
  `unused_letter_exists`, `array_state`, `sweets_eaten`,
  `longest_even_sum_subarray` and `can_win_election`. Invalid input
  (non-lowercase letters, an out-of-range `k`, vote lists of different
  lengths) raises `ValueError`.
- `chefsolve.nim`: `nim_sum`, `mod_inverse`, `win_probability` and
  `win_probability_over_two_d`, which give a probability as a residue
  modulo 1 000 000 007 (`chefsolve.nim.MOD`).

```python
from chefsolve.simple import movie_price
from chefsolve.sequences import sweets_eaten
from chefsolve.nim import nim_sum

movie_price(100, 20, 50)           # cheaper of the two ways to pay: 120
sweets_eaten([3, 4, 5], 8)         # sweets eaten before passing the limit: 2
nim_sum([1, 2, 3])                 # XOR of the pile sizes: 0
```

## Command line

```
chefsolve PROBLEM [INPUT]
```

`PROBLEM` is the problem code, for example `FLOW001`, `ARRAYSTATE`,
`USELEC` or `RANDOM_NIM`; case does not matter. `RANDOM_NIM_2D` answers the
Nim problem with `win_probability_over_two_d` instead of `win_probability`.
The input is read from the file `INPUT`, or from standard input when it is
left out, in the layout the problem statement uses, and one answer is printed
per line. Yes/no answers are printed as `YES` or `NO`.

If the input ends early or holds a token that is not a number where one is
expected, the command prints an error to standard error and exits with
status 1.

From Python, `chefsolve.cli.run(problem, text)` does the same work on a
string and returns the output as a string; an unknown problem code raises
`ValueError`.