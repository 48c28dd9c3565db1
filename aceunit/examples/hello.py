"""A greeting program and a capturing stand-in for its output function."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from aceunit.fixture import check

Puts = Callable[[str], int]


def _puts(text: str) -> int:
    line = text + "\n"
    sys.stdout.write(line)
    return len(line)


class MockPuts:
    """Records the last line written instead of printing it."""

    def __init__(self) -> None:
        self.buffer = ""

    def __call__(self, text: str) -> int:
        self.buffer = text + "\n"
        return len(self.buffer)

    def assert_output(self, expected: str) -> None:
        """Fail unless the last recorded line equals ``expected``."""
        check(expected == self.buffer, f"{expected!r} == {self.buffer!r}")


def main(puts: Optional[Puts] = None) -> int:
    """Print the greeting and return the exit status."""
    (puts or _puts)("Hello, world!")
    return 0