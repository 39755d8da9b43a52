"""Greedy solver ranking libraries by penalised value per scaled signup time."""

from __future__ import annotations

import sys

from .problem import Problem, Solution
from .solver_bf import _greedy, _Ranking, _shipped_total
from .solver_c import _run

_TIME_MUL = 0.028
_D_POW = 1.55
_DC = 0.26


def _scaled_ratio(mean: int) -> int:
    return int(_TIME_MUL * float(mean))


def _signup_cost(days_to_sign: int, mean_signup: int) -> float:
    return _DC * float(mean_signup) + float(days_to_sign) ** _D_POW


_RANKING = _Ranking(ratio=_scaled_ratio, cost=_signup_cost)


def solve(problem: Problem) -> Solution:
    """Pick libraries greedily by book value divided by a signup-time cost."""
    return _greedy(problem, _RANKING)


def main(argv: list[str] | None = None) -> int:
    return _run(argv, solve, _shipped_total)


if __name__ == "__main__":
    sys.exit(main())