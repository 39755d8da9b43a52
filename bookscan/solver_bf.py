"""Greedy solver with integer library values and a score-spread penalty."""

from __future__ import annotations

import heapq
import math
import sys
from dataclasses import dataclass
from typing import Callable

from .problem import Problem, Solution
from .solver_c import _run

_TIME_MUL = 3
_SPREAD_PENALTY = 65
_EPS = 1e-5
# What an undefined (NaN) value becomes once truncated to a 64-bit integer.
_UNRANKABLE = -(2**63)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class _Ranking:
    """How library values are charged for signup time and scaled.

    ``ratio`` turns the mean reachable value per signup day into the charge per
    signup day.  ``cost`` gives a divisor from (signup days, mean signup days);
    without it values stay integers and rescored values are truncated.
    """

    ratio: Callable[[int], int]
    cost: Callable[[int, int], float] | None = None


def _greedy(problem: Problem, ranking: _Ranking) -> Solution:
    """Pick libraries greedily, re-valuing them lazily once time runs short."""
    scores = problem.scores
    days = problem.days
    signup = problem.signup
    rate = problem.rate
    sizes = problem.sizes

    ordered = [sorted(held, key=scores.__getitem__, reverse=True) for held in problem.books]
    positions: list[list[int]] = [[] for _ in range(problem.num_books)]
    last_book: list[int] = []
    reachable: list[int] = []
    for library, held in enumerate(ordered):
        reach = min(sizes[library], rate[library] * (days - signup[library]))
        last_book.append(reach)
        reachable.append(sum(scores[book] for book in held[: max(reach, 0)]))
        for position, book in enumerate(held):
            positions[book].append(position)

    total_signup = sum(signup)
    if total_signup == 0:
        raise ValueError("total signup time must be positive")
    ratio = ranking.ratio(_trunc_div(sum(reachable), total_signup))
    mean_signup = _trunc_div(total_signup, problem.num_libraries)
    costs = (
        None
        if ranking.cost is None
        else [ranking.cost(days_to_sign, mean_signup) for days_to_sign in signup]
    )

    def scaled(amount, library):
        return amount if costs is None else float(amount) / costs[library]

    def rescored(library: int, capacity: int):
        reach = capacity
        total = squares = count = 0
        for position, book in enumerate(ordered[library]):
            if position >= reach:
                break
            if book in seen:
                reach += 1
            else:
                score = scores[book]
                total += score
                squares += score * score
                count += 1
        variance = squares / count - (total / count) ** 2 if count else -1.0
        if variance < 0:
            return (_UNRANKABLE if costs is None else -math.inf), reach
        raw = (-ratio * signup[library] + total) - _SPREAD_PENALTY * math.sqrt(variance)
        return (int(raw) if costs is None else raw / costs[library]), reach

    value = [
        scaled(v - ratio * days_to_sign, library)
        for library, (v, days_to_sign) in enumerate(zip(reachable, signup))
    ]
    heap = [(-v, -library) for library, v in enumerate(value)]
    heapq.heapify(heap)

    day = 0
    seen: set[int] = set()
    chosen: set[int] = set()
    recomputing = False
    solution = Solution()

    while day < days:
        library = None
        while heap:
            negative_value, negative_library = heap[0]
            candidate = -negative_library
            ranked = -negative_value
            if (
                day + signup[candidate] < days
                and candidate not in chosen
                and abs(ranked - value[candidate]) < _EPS
            ):
                capacity = rate[candidate] * (days - day - signup[candidate])
                if not recomputing and sizes[candidate] <= capacity:
                    library = candidate
                    break
                recomputing = True
                value[candidate], last_book[candidate] = rescored(candidate, capacity)
                if abs(ranked - value[candidate]) < _EPS:
                    library = candidate
                    break
                heapq.heappushpop(heap, (-value[candidate], -candidate))
            else:
                heapq.heappop(heap)
        if library is None:
            break
        heapq.heappop(heap)

        chosen.add(library)
        batch: list[int] = []
        for book in ordered[library]:
            if book in seen:
                continue
            seen.add(book)
            for other, position in zip(problem.holders[book], positions[book]):
                if other in chosen or position >= last_book[other]:
                    continue
                value[other] -= scaled(scores[book], other)
                heapq.heappush(heap, (-value[other], -other))
            if day + signup[library] + len(batch) // rate[library] < days:
                batch.append(book)

        if batch:
            solution.libraries.append(library)
            solution.books.append(batch)
            day += signup[library]

    return solution


def _shipped_total(problem: Problem, solution: Solution) -> str:
    return str(sum(problem.scores[book] for batch in solution.books for book in batch))


def _integer_ratio(mean: int) -> int:
    return _TIME_MUL * mean


_RANKING = _Ranking(ratio=_integer_ratio)


def solve(problem: Problem) -> Solution:
    """Pick libraries greedily by reachable book value minus a signup charge."""
    return _greedy(problem, _RANKING)


def main(argv: list[str] | None = None) -> int:
    return _run(argv, solve, _shipped_total)


if __name__ == "__main__":
    sys.exit(main())