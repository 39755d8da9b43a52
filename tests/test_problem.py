import io

import pytest

from bookscan.problem import Problem, Solution, parse_problem, read_problem, write_solution

EXAMPLE = """6 2 7
1 2 3 6 5 4
5 2 2
0 1 2 3 4
4 3 1
3 2 5 0
"""


def test_parse_fields():
    problem = parse_problem(EXAMPLE)
    assert problem.num_books == 6
    assert problem.num_libraries == 2
    assert problem.days == 7
    assert problem.scores == [1, 2, 3, 6, 5, 4]
    assert problem.sizes == [5, 4]
    assert problem.signup == [2, 3]
    assert problem.rate == [2, 1]
    assert problem.books == [[0, 1, 2, 3, 4], [3, 2, 5, 0]]


def test_holders_follow_library_order():
    problem = parse_problem(EXAMPLE)
    assert problem.holders[0] == [0, 1]
    assert problem.holders[1] == [0]
    assert problem.holders[5] == [1]
    for library, held in enumerate(problem.books):
        for book in held:
            assert library in problem.holders[book]


def test_out_of_range_book_kept_in_library_but_not_indexed():
    problem = parse_problem("2 1 5\n1 1\n2 1 1\n0 7\n")
    assert problem.books == [[0, 7]]
    assert problem.holders == [[0], []]


def test_truncated_input_raises():
    with pytest.raises(ValueError):
        parse_problem("6 2 7\n1 2 3\n")


def test_negative_book_raises():
    with pytest.raises(ValueError):
        parse_problem("1 1 3\n5\n1 1 1\n-1\n")


def test_non_integer_raises():
    with pytest.raises(ValueError):
        parse_problem("1 x 3\n")


def test_read_problem_matches_parse():
    assert read_problem(io.StringIO(EXAMPLE)) == parse_problem(EXAMPLE)


def test_format_pinned():
    solution = Solution([1, 0], [[5, 2, 3], [0, 1]])
    assert solution.format() == "2\n1 3\n5 2 3 \n0 2\n0 1 \n"


def test_empty_solution_format():
    assert Solution().format() == "0\n"


def test_write_solution_matches_format():
    solution = Solution([0], [[4, 2]])
    out = io.StringIO()
    write_solution(out, solution)
    assert out.getvalue() == solution.format()


def test_mismatched_solution_raises():
    with pytest.raises(ValueError):
        Solution([0, 1], [[0]])


def test_problem_is_plain_data():
    problem = Problem(3, [1], [1], [1], [1], [[0]], [[0]])
    assert problem.num_books == 1
    assert problem.num_libraries == 1