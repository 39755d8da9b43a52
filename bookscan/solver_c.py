"""Greedy solver ranking libraries by remaining value per signup cost."""

from __future__ import annotations

import argparse
import heapq
import sys
from typing import Callable

from .problem import Problem, Solution, read_problem, write_solution

_ADD = 90
_POW = 1.0
_TIME_WEIGHT = 0.09
_EPS = 1e-5


def _cost(signup: int) -> float:
    return _ADD + float(signup) ** _POW


def _next_library(heap, value, chosen, day, problem) -> int | None:
    while heap:
        negative_value, negative_library = heapq.heappop(heap)
        library = -negative_library
        if (
            day + problem.signup[library] + 1 < problem.days
            and library not in chosen
            and abs(-negative_value - value[library]) < _EPS
        ):
            return library
    return None


def solve(problem: Problem) -> Solution:
    """Pick libraries greedily, re-ranking as their books get taken."""
    scores = problem.scores
    mean_score = sum(scores) / problem.num_books
    value = [
        (sum(scores[b] for b in held) - _TIME_WEIGHT * mean_score * signup) / _cost(signup)
        for held, signup in zip(problem.books, problem.signup)
    ]
    heap = [(-v, -library) for library, v in enumerate(value)]
    heapq.heapify(heap)

    day = 0
    seen: set[int] = set()
    chosen: set[int] = set()
    solution = Solution()

    while day < problem.days:
        library = _next_library(heap, value, chosen, day, problem)
        if library is None:
            break
        chosen.add(library)
        batch = []
        for book in problem.books[library]:
            if book in seen:
                continue
            seen.add(book)
            for other in problem.holders[book]:
                value[other] -= scores[book] / _cost(problem.signup[other])
                if other not in chosen:
                    heapq.heappush(heap, (-value[other], -other))
            batch.append(book)
        solution.libraries.append(library)
        solution.books.append(batch)
        day += problem.signup[library]

    return solution


def simulated_score(problem: Problem, solution: Solution) -> int:
    """Score a solution by simulating signups and daily shipping."""
    activation: dict[int, int] = {}
    signup_start = 0
    for library in solution.libraries:
        signup = problem.signup[library]
        if signup_start + signup > problem.days:
            break
        activation[library] = signup_start + signup
        signup_start += signup

    scanned: set[int] = set()
    for library, shipped in zip(solution.libraries, solution.books):
        start = activation.get(library)
        if start is None or start >= problem.days:
            continue
        per_day = problem.rate[library]
        for position, book in enumerate(shipped):
            if start + position // per_day >= problem.days:
                break
            scanned.add(book)
    return sum(problem.scores[book] for book in scanned)


def _run(
    argv: list[str] | None,
    solver: Callable[[Problem], Solution],
    report: Callable[[Problem, Solution], str],
) -> int:
    """Solve the problem on stdin, write the solution to stdout and a report to stderr."""
    parser = argparse.ArgumentParser(
        description="Read a problem on stdin and write a solution on stdout."
    )
    parser.parse_args(argv)
    problem = read_problem(sys.stdin)
    solution = solver(problem)
    write_solution(sys.stdout, solution)
    sys.stdout.flush()
    print(report(problem, solution), file=sys.stderr)
    return 0


def _report(problem: Problem, solution: Solution) -> str:
    return f"Actual score: {simulated_score(problem, solution)}"


def main(argv: list[str] | None = None) -> int:
    return _run(argv, solve, _report)


if __name__ == "__main__":
    sys.exit(main())