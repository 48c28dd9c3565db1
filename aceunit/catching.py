"""Strategies for running a function and turning its failure into ``False``."""

from __future__ import annotations

import sys
import traceback
from typing import Callable, Optional, Protocol

from aceunit.fixture import AceUnitFailure

Code = Optional[Callable[[], object]]


def _nop() -> None:
    pass


class Catcher(Protocol):
    """Runs a function and reports whether it completed successfully."""

    def run_catching(self, code: Code) -> bool:
        ...


class SimpleCatcher:
    """Runs the code without catching anything; any failure propagates."""

    def run_catching(self, code: Code) -> bool:
        (code or _nop)()
        return True


class AbortCatcher:
    """Catches failures and plain assertion errors."""

    def run_catching(self, code: Code) -> bool:
        try:
            (code or _nop)()
        except AssertionError:
            return False
        return True


class SetJmpCatcher:
    """Catches only failures raised through :func:`aceunit.fixture.fail`."""

    def run_catching(self, code: Code) -> bool:
        try:
            (code or _nop)()
        except AceUnitFailure:
            return False
        return True


def _exit_status(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code & 0xFF
    print(code, file=sys.stderr)
    return 1


class ForkCatcher:
    """Catches every kind of failure, exits and unexpected errors included.

    An exit with status 0 counts as success; any other exit, a failed
    assertion or an unexpected error counts as failure.
    """

    def run_catching(self, code: Code) -> bool:
        try:
            (code or _nop)()
        except SystemExit as exc:
            return _exit_status(exc.code) == 0
        except AceUnitFailure:
            return False
        except Exception:
            traceback.print_exc()
            return False
        finally:
            sys.stdout.flush()
            sys.stderr.flush()
        return True