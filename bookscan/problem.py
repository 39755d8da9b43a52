"""Problem instances and solutions for the book-scanning task."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, TextIO


@dataclass
class Problem:
    """A book-scanning instance.

    ``books[i]`` lists the books held by library ``i`` in input order, and
    ``holders[b]`` lists the libraries holding book ``b`` in library order.
    """

    days: int
    scores: list[int]
    sizes: list[int]
    signup: list[int]
    rate: list[int]
    books: list[list[int]]
    holders: list[list[int]]

    @property
    def num_books(self) -> int:
        return len(self.scores)

    @property
    def num_libraries(self) -> int:
        return len(self.books)


@dataclass
class Solution:
    """An ordered list of signed-up libraries and the books each ships."""

    libraries: list[int] = field(default_factory=list)
    books: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.libraries) != len(self.books):
            raise ValueError("every library needs exactly one book list")

    def format(self) -> str:
        """Render the solution in the submission format."""
        lines = [f"{len(self.libraries)}\n"]
        for library, shipped in zip(self.libraries, self.books):
            lines.append(f"{library} {len(shipped)}\n")
            lines.append("".join(f"{book} " for book in shipped) + "\n")
        return "".join(lines)


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def parse_problem(text: str) -> Problem:
    """Parse a whitespace-separated problem description."""
    numbers = _integers(text)

    def take() -> int:
        try:
            return next(numbers)
        except StopIteration:
            raise ValueError("unexpected end of problem input") from None

    num_books, num_libraries, days = take(), take(), take()
    scores = [take() for _ in range(num_books)]
    sizes: list[int] = []
    signup: list[int] = []
    rate: list[int] = []
    books: list[list[int]] = []
    holders: list[list[int]] = [[] for _ in range(num_books)]

    for library in range(num_libraries):
        size, days_to_sign, per_day = take(), take(), take()
        sizes.append(size)
        signup.append(days_to_sign)
        rate.append(per_day)
        held = []
        for _ in range(size):
            book = take()
            if book < 0:
                raise ValueError(f"negative book id {book} in library {library}")
            if book < num_books:
                holders[book].append(library)
            held.append(book)
        books.append(held)

    return Problem(
        days=days,
        scores=scores,
        sizes=sizes,
        signup=signup,
        rate=rate,
        books=books,
        holders=holders,
    )


def read_problem(stream: TextIO) -> Problem:
    """Read a problem description from a text stream."""
    return parse_problem(stream.read())


def write_solution(stream: TextIO, solution: Solution) -> None:
    """Write a solution to a text stream in the submission format."""
    stream.write(solution.format())