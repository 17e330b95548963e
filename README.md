# spojkit

Solutions to a set of classic online-judge problems, each usable as a
Python function or as a command that reads the problem's input and prints
the answers. There are also random input generators for stress testing.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Problems

| Command               | Module                 | Problem                                              |
|-----------------------|------------------------|------------------------------------------------------|
| `spojkit-acpc10e`     | `spojkit.acpc10e`      | Number of matches in a group-and-knockout tournament |
| `spojkit-alphacode`   | `spojkit.alphacode`    | Counting the decodings of a digit string             |
| `spojkit-beads`       | `spojkit.beads`        | Lexicographically smallest rotation of a necklace    |
| `spojkit-binstirl`    | `spojkit.binstirl`     | Parity of Stirling numbers of the second kind        |
| `spojkit-bureaucracy` | `spojkit.bureaucracy`  | Orders still in effect after cancellations           |
| `spojkit-divsum`      | `spojkit.divsum`       | Sum of proper divisors                               |
| `spojkit-factorial`   | `spojkit.factorial`    | Trailing zeros of n!                                 |
| `spojkit-spelling`    | `spojkit.spelling`     | Removing a mistyped letter                           |
| `spojkit-labyrinth`   | `spojkit.labyrinth`    | Longest rope needed in a labyrinth                   |
| `spojkit-squares`     | `spojkit.squares`      | Whether a number is a sum of two squares             |
| `spojkit-stamps`      | `spojkit.stamps`       | Fewest friends needed to collect enough stamps       |
| `spojkit-surprise`    | `spojkit.surprise`     | Reversing lines of text                              |
| `spojkit-trip`        | `spojkit.trip`         | All longest common subsequences of two strings       |
| `spojkit-generate`    | `spojkit.generators`   | Random test inputs                                   |

Every problem module offers `solve(text)`, which takes the whole input as a
string and returns the whole output as a string, and `main(argv=None)`,
which the command calls. A problem command reads the file named by its
first argument, or standard input when there is none, and writes the
answers to standard output:

```
spojkit-factorial input.txt
echo "2 3 100" | spojkit-factorial
```

## Using the functions

```python
from spojkit.alphacode import count_decodings
from spojkit.factorial import trailing_zeros
from spojkit.divsum import proper_divisor_sum
from spojkit.squares import is_sum_of_two_squares

count_decodings("25114")      # 6
trailing_zeros(100)           # 24
proper_divisor_sum(12)        # 16
is_sum_of_two_squares(5)      # True
```

Other entry points:

- `spojkit.acpc10e.match_count(groups, teams, advance, extra)` returns
  `(matches, byes)`.
- `spojkit.alphacode.count_decodings_recursive(code)` gives the same count
  as `count_decodings`, computed top-down.
- `spojkit.beads.minimal_rotation(necklace)` and
  `spojkit.beads.minimal_rotation_brute(necklace)` return the 1-based start
  of the smallest rotation.
- `spojkit.binstirl.stirling_parity(n, m)` returns `S(n, m) mod 2`.
- `spojkit.bureaucracy.effective_orders(commands)` takes `None` for a
  declaration or the number of the order cancelled, and returns the numbers
  of the orders still in effect.
- `spojkit.spelling.remove_letter(word, position)` drops the letter at a
  1-based position.
- `spojkit.labyrinth.longest_rope(rows)` takes the grid rows, `#` for rock.
- `spojkit.stamps.min_friends(needed, offers)` returns the count, or `None`
  when it is impossible.
- `spojkit.trip.lcs_table(first, second)` and `spojkit.trip.all_lcs(first, second)`;
  the latter returns every distinct longest common subsequence in
  alphabetical order.

Invalid arguments, such as a non-digit code or an out-of-range position,
raise `ValueError`.

## Generating inputs

`spojkit.generators` builds random inputs from a `random.Random`
instance, so results can be reproduced with a fixed seed:

```python
import random
from spojkit.generators import beads_input

text = beads_input(random.Random(1))
```

`divsum_input` and `trip_input` work the same way. From the command line:

```
spojkit-generate beads --seed 1 -o test
```

The problem is one of `beads`, `divsum`, `acpc10e` or `trip`; `-o/--output`
names the file to write (default `test`) and `--seed` fixes the random seed.
`acpc10e` produces the same kind of output as `divsum`.

## Limitations

Generators exist only for the problems listed above. The `divsum` (and
`acpc10e`) generator writes a list of numbers with no leading count line, so
its output is not directly in the form `spojkit-divsum` reads.