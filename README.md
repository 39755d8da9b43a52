# bookscan

Greedy solvers for the book-scanning scheduling problem. There is a set of
books, each worth some score, and a set of libraries. Each library takes some
days to sign up and ships a fixed number of books per day once it is signed
up. Libraries sign up one at a time. Within a budget of days, the goal is to
scan the set of distinct books with the highest total score.

## Installation

```
pip install .
```

## Input format

All numbers are separated by whitespace:

```
B L D
S_0 S_1 ... S_{B-1}
N_0 T_0 M_0
book ids of library 0
...
```

`B` is the number of books, `L` the number of libraries and `D` the number of
days. `S` holds the book scores. Each library gives its book count `N`, its
sign-up time `T` and the number of books it ships per day `M`, then its book
ids.

Input that ends early, or a negative book id, raises `ValueError`.

## Output format

```
A
library_id book_count
book ids in shipping order
...
```

Each book id on a line is followed by a space.

## Commands

Each solver reads a problem from standard input, writes a solution to
standard output and writes a one-line report to standard error. The commands
take no options besides `--help`.

```
bookscan-c  < input.txt > output.txt
bookscan-d  < input.txt > output.txt
bookscan-bf < input.txt > output.txt
bookscan-e  < input.txt > output.txt
```

- `bookscan-c` ranks libraries by the total score of their books, less a
  charge for sign-up time, divided by a sign-up-time term. As books are taken,
  the other libraries holding them lose value. The report is
  `Actual score: N`, found by simulating sign-ups and daily shipping.
- `bookscan-d` ranks libraries by their count of untaken books, with a bonus
  for books held by exactly two libraries. Book scores play no part in the
  ranking, and every sign-up is counted as two days while choosing. The report
  is `Actual score: N`, found by shipping each library's books in order after
  its real sign-up, up to its shipping capacity.
- `bookscan-bf` ranks libraries by the score of the books they can reach in
  time, less a charge for sign-up time. Once time runs short, a library is
  valued again from its untaken books, with a penalty for the spread of their
  scores. The report is the total score of the books listed in the solution.
- `bookscan-e` works like `bookscan-bf` but divides each value by a term that
  grows as a power of the sign-up time.

`bookscan-bf` and `bookscan-e` raise `ValueError` when the total sign-up time
of all libraries is zero.

## Library use

```python
import sys

from bookscan.problem import read_problem, write_solution
from bookscan import solver_c

problem = read_problem(sys.stdin)
solution = solver_c.solve(problem)
write_solution(sys.stdout, solution)
print(solver_c.simulated_score(problem, solution), file=sys.stderr)
```

- `bookscan.problem.parse_problem(text)` builds a `Problem` from a string and
  `read_problem(stream)` from a text stream.
- `Problem` holds `days`, `scores`, `sizes`, `signup`, `rate`, `books` (the
  book ids of each library) and `holders` (the libraries holding each book),
  with `num_books` and `num_libraries`.
- `Solution` holds `libraries` and, for each, a list in `books`; the two
  lists must have the same length or `ValueError` is raised.
  `Solution.format()` gives the text of the output file and
  `write_solution(stream, solution)` writes it.
- Each of `solver_c`, `solver_d`, `solver_bf` and `solver_e` has
  `solve(problem)` returning a `Solution`, and `main(argv=None)` for the
  command.
- `solver_c.simulated_score(problem, solution)` and
  `solver_d.sequential_score(problem, solution)` score a solution.

## Running the tests

```
pip install ".[test]"
pytest
```