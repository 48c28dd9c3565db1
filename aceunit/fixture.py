"""Fixtures, run results and the failure mechanism used by test code."""

from __future__ import annotations

import inspect
import sys
from dataclasses import dataclass, field
from typing import Callable, NoReturn, Optional, Sequence

TestFunc = Callable[[], object]


class AceUnitFailure(AssertionError):
    """Raised to abort the currently running test case or fixture function."""


def _caller_location(depth: int) -> str:
    """Describe the source location ``depth`` frames above the caller."""
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(depth):
            if target is None:
                break
            target = target.f_back
        if target is None:
            return "unknown location"
        code = target.f_code
        return f"{code.co_filename}:{target.f_lineno}: {code.co_name}"
    finally:
        del frame


def fail() -> NoReturn:
    """Fail and abort the running test case, naming where it failed."""
    location = _caller_location(1)
    raise AceUnitFailure(f"test failed at {location}")


def check(cond: object, message: str = "") -> None:
    """Assert ``cond``; on failure report the caller's location and fail."""
    if cond:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        code = caller.f_code
        location = f"{code.co_filename}:{caller.f_lineno}: {code.co_name}: "
    else:
        location = ""
    del frame, caller
    print(f"{location}Assertion `{message}' failed.", file=sys.stderr)
    fail()


@dataclass(frozen=True)
class Fixture:
    """A group of test cases sharing the same setup and teardown functions.

    ``before_all`` runs once before anything else, ``after_all`` once after
    everything else; ``before_each`` and ``after_each`` wrap every test case.
    """

    test_cases: Sequence[TestFunc] = ()
    before_all: Optional[TestFunc] = None
    after_all: Optional[TestFunc] = None
    before_each: Optional[TestFunc] = None
    after_each: Optional[TestFunc] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "test_cases", tuple(self.test_cases))


@dataclass
class Result:
    """Counts collected over one or more test runs."""

    test_case_count: int = 0
    success_count: int = 0
    failure_count: int = field(default=0)