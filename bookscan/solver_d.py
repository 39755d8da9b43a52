"""Greedy solver ranking libraries by how many unclaimed books they hold."""

from __future__ import annotations

import heapq
import sys

from .problem import Problem, Solution
from .solver_c import _run

_MUL = 5
_ADD = 5
_SIGNUP_DAYS = 2


def solve(problem: Problem) -> Solution:
    """Pick libraries by weighted count of untaken books, shared books favoured."""
    weight = [size * _MUL for size in problem.sizes]
    for holders in problem.holders:
        if len(holders) == 2:
            for library in holders:
                weight[library] += _ADD

    heap = [(-w, -library) for library, w in enumerate(weight)]
    heapq.heapify(heap)

    day = 0
    seen: set[int] = set()
    chosen: set[int] = set()
    solution = Solution()

    while day < problem.days:
        library = None
        while heap:
            negative_weight, negative_library = heapq.heappop(heap)
            if -negative_weight == weight[-negative_library]:
                library = -negative_library
                break
        if library is None:
            break

        chosen.add(library)
        batch = []
        for book in problem.books[library]:
            if book in seen:
                continue
            seen.add(book)
            holders = problem.holders[book]
            penalty = _MUL + (_ADD if len(holders) == 2 else 0)
            for other in holders:
                weight[other] -= penalty
                if other not in chosen:
                    heapq.heappush(heap, (-weight[other], -other))
            if day + _SIGNUP_DAYS + len(batch) < problem.days:
                batch.append(book)

        if batch:
            solution.libraries.append(library)
            solution.books.append(batch)
        day += _SIGNUP_DAYS

    return solution


def sequential_score(problem: Problem, solution: Solution) -> int:
    """Score a solution, capping each library's books by its shipping capacity."""
    scanned: set[int] = set()
    current_day = 0
    for library, shipped in zip(solution.libraries, solution.books):
        signup = problem.signup[library]
        if current_day + signup > problem.days:
            break
        current_day += signup
        if current_day >= problem.days:
            break
        capacity = (problem.days - current_day) * problem.rate[library]
        scanned.update(shipped[: max(capacity, 0)])
    return sum(problem.scores[book] for book in scanned)


def _report(problem: Problem, solution: Solution) -> str:
    return f"Actual score: {sequential_score(problem, solution)}"


def main(argv: list[str] | None = None) -> int:
    return _run(argv, solve, _report)


if __name__ == "__main__":
    sys.exit(main())