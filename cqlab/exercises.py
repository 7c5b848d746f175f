"""Harness for guided lab exercises.

A :class:`Lab` is a titled, ordered list of exercises.  Exercises are
plain functions registered with a decorator and called with the live
session and an :class:`ExerciseContext`::

    lab = Lab("Discovering Cassandra")

    @lab.exercise("Query data")
    def query_data(session, ctx):
        result = session.execute("SELECT id, name, age FROM education.user")
        ctx.display(result)

    @lab.exercise("Create a keyspace", ignore=True)
    def create_keyspace(session, ctx):
        ...

    results = lab.run(session)

Checks never abort an exercise: a false condition is printed and
recorded, and the exercise carries on.  An exception ends only the
exercise that raised it; the lab moves on to the next one.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, TextIO, Tuple

from .output import display, display_rows
from .renderers import TableRenderer

logger = logging.getLogger(__name__)

PASSED = "passed"
FAILED = "failed"
ERROR = "error"
IGNORED = "ignored"

ExerciseFunc = Callable[[Any, "ExerciseContext"], None]


@dataclass
class CheckResult:
    label: str
    passed: bool


@dataclass
class ExerciseResult:
    """Outcome of one exercise."""

    name: str
    status: str
    checks: List[CheckResult] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status in (PASSED, IGNORED)


class ExerciseContext:
    """Learner-facing output and checks for a running exercise."""

    def __init__(self, out: TextIO, renderer: Optional[TableRenderer] = None) -> None:
        self.out = out
        self.renderer = renderer
        self.checks: List[CheckResult] = []

    def comment(self, message: str) -> None:
        print(f"> {message}", file=self.out)

    def check(self, condition: bool, label: Optional[str] = None) -> bool:
        """Record and print whether ``condition`` holds."""
        passed = bool(condition)
        label = label or f"check #{len(self.checks) + 1}"
        self.checks.append(CheckResult(label, passed))
        print(f"  {'OK' if passed else 'FAILED'}: {label}", file=self.out)
        return passed

    def display(self, rows_or_result: Any) -> None:
        """Print a list of rows or a driver result set as a table.

        Anything carrying ``column_names`` is a driver result set, even
        when it is list-shaped; everything else must hold :class:`Row`.
        """
        if hasattr(rows_or_result, "column_names"):
            display(rows_or_result, renderer=self.renderer, out=self.out)
        else:
            display_rows(rows_or_result, renderer=self.renderer, out=self.out)


class Lab:
    """An ordered, titled collection of exercises."""

    def __init__(self, title: str) -> None:
        self.title = title
        self._exercises: List[Tuple[str, ExerciseFunc, bool]] = []

    def exercise(self, name: str, ignore: bool = False) -> Callable[[ExerciseFunc], ExerciseFunc]:
        """Decorator appending a function to the lab.

        Ignored exercises are listed when the lab runs but not executed.
        """
        def decorator(func: ExerciseFunc) -> ExerciseFunc:
            self._exercises.append((name, func, ignore))
            return func
        return decorator

    def names(self) -> List[str]:
        return [name for name, _, _ in self._exercises]

    def run(
        self,
        session: Any,
        out: Optional[TextIO] = None,
        renderer: Optional[TableRenderer] = None,
    ) -> List[ExerciseResult]:
        out = out or sys.stdout
        print(f"=== {self.title} ===", file=out)

        results: List[ExerciseResult] = []
        for name, func, ignore in self._exercises:
            if ignore:
                print(f"--- Exercise: {name} (ignored) ---", file=out)
                results.append(ExerciseResult(name, IGNORED))
                continue

            print(f"--- Exercise: {name} ---", file=out)
            ctx = ExerciseContext(out, renderer)
            try:
                func(session, ctx)
            except Exception as exc:
                logger.debug("Exercise %r raised", name, exc_info=True)
                print(f"  ERROR: {type(exc).__name__}: {exc}", file=out)
                results.append(ExerciseResult(name, ERROR, ctx.checks, exc))
                continue

            status = PASSED if all(c.passed for c in ctx.checks) else FAILED
            results.append(ExerciseResult(name, status, ctx.checks))

        return results
