"""Command line front end for the multi-test-case problems."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from cfsolve.arithmetic import easy_problem, minimize, plus_or_minus, sum_check


@dataclass(frozen=True)
class _Problem:
    arity: int
    solve: Callable[..., object]
    summary: str


_PROBLEMS: dict[str, _Problem] = {
    "easy-problem": _Problem(1, easy_problem, "count pairs (a, b) with a = n - b"),
    "minimize": _Problem(2, minimize, "minimise (c - a) + (b - c)"),
    "plus-or-minus": _Problem(3, plus_or_minus, "find the sign in a ? b = c"),
    "sum": _Problem(3, sum_check, "is one number the sum of the other two"),
}


def _format(result: object) -> str:
    if isinstance(result, bool):
        return "YES" if result else "NO"
    return str(result)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfsolve",
        description="Read test cases from standard input and print one answer per case.",
    )
    parser.add_argument(
        "problem",
        choices=sorted(_PROBLEMS),
        help="; ".join(f"{name}: {problem.summary}" for name, problem in sorted(_PROBLEMS.items())),
    )
    return parser


def _solve_all(problem: _Problem, numbers: Sequence[int]) -> Iterator[str]:
    if not numbers:
        raise ValueError("the number of test cases is missing")
    count, *values = numbers
    if count < 0:
        raise ValueError("the number of test cases cannot be negative")
    needed = count * problem.arity
    if len(values) < needed:
        raise ValueError(f"expected {needed} numbers after the case count, got {len(values)}")
    for start in range(0, needed, problem.arity):
        yield _format(problem.solve(*values[start : start + problem.arity]))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve every test case read from standard input for the chosen problem."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    problem = _PROBLEMS[args.problem]
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
        answers = list(_solve_all(problem, numbers))
    except ValueError as error:
        parser.error(str(error))
    for answer in answers:
        print(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())