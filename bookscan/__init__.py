"""Greedy solvers, problem parsing and scoring for library sign-up and book-scan scheduling."""

__version__ = "0.1.0"