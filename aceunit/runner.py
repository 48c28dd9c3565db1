"""Running fixtures and reporting the outcome."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from aceunit.catching import AbortCatcher, Catcher
from aceunit.fixture import Fixture, Result


def run(
    fixtures: Iterable[Fixture],
    result: Optional[Result] = None,
    catcher: Optional[Catcher] = None,
) -> Result:
    """Run all fixtures, adding their counts to ``result`` and returning it.

    A given ``result`` is not reset, so several runs can be collected together.
    """
    if result is None:
        result = Result()
    if catcher is None:
        catcher = AbortCatcher()
    attempt = catcher.run_catching
    for fixture in fixtures:
        before_all_ok = attempt(fixture.before_all)
        for test_case in fixture.test_cases:
            result.test_case_count += 1
            passed = False
            if before_all_ok:
                # The test case runs only if before_each succeeded; after_each always runs.
                body_ok = attempt(fixture.before_each) and attempt(test_case)
                cleanup_ok = attempt(fixture.after_each)
                passed = body_ok and cleanup_ok
            if passed:
                result.success_count += 1
            else:
                result.failure_count += 1
        if not attempt(fixture.after_all):
            result.failure_count += 1
    return result


def summary(program: str, result: Result) -> str:
    """Return the one-line report of a run."""
    return (
        f"{program}: {result.test_case_count} test cases, "
        f"{result.success_count} successful, {result.failure_count} failed."
    )


def main(
    argv: Optional[Sequence[str]] = None,
    fixtures: Iterable[Fixture] = (),
    catcher: Optional[Catcher] = None,
) -> int:
    """Run ``fixtures``, print the summary to stderr and return the exit status."""
    args = list(sys.argv if argv is None else argv)
    program = args[0] if args else "aceunit"
    result = run(fixtures, Result(), catcher)
    print(summary(program, result), file=sys.stderr)
    return 1 if result.failure_count else 0