import io
import sys

import pytest

from bookscan.problem import Solution, parse_problem
from bookscan.solver_c import main, simulated_score, solve

STATEMENT = "6 2 7\n1 2 3 6 5 4\n5 2 2\n0 1 2 3 4\n4 3 1\n3 2 5 0\n"


@pytest.fixture
def statement():
    return parse_problem(STATEMENT)


def test_statement_is_solved_fully(statement):
    solution = solve(statement)
    assert (solution.libraries, solution.books) == ([0, 1], [[0, 1, 2, 3, 4], [5]])
    assert simulated_score(statement, solution) == 21


def test_no_book_or_library_repeats(statement):
    solution = solve(statement)
    shipped = [b for batch in solution.books for b in batch]
    assert len(shipped) == len(set(shipped))
    assert len(solution.libraries) == len(set(solution.libraries))


@pytest.mark.parametrize(
    "text, libraries",
    [
        ("2 2 5\n3 4\n1 10 1\n0\n1 1 1\n1\n", [1]),
        ("1 1 3\n9\n1 2 1\n0\n", []),
    ],
)
def test_libraries_unable_to_sign_up_in_time_are_skipped(text, libraries):
    assert solve(parse_problem(text)).libraries == libraries


@pytest.mark.parametrize(
    "text, solution, expected",
    [
        (STATEMENT, Solution(), 0),
        # library 1 signs up by day 3; library 0 would finish on day 5 > 4
        (STATEMENT.replace("6 2 7", "6 2 4", 1), Solution([1, 0], [[3], [4]]), 6),
        ("3 1 3\n1 2 4\n3 2 1\n0 1 2\n", Solution([0], [[0, 1, 2]]), 1),
    ],
)
def test_simulated_score(text, solution, expected):
    assert simulated_score(parse_problem(text), solution) == expected


def test_main_prints_solution_and_score(statement, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(STATEMENT))
    assert main([]) == 0
    out, err = capsys.readouterr()
    assert out == solve(statement).format()
    assert err == "Actual score: 21\n"