# aceunit

A small unit test framework organised around *fixtures*. A fixture holds a
sequence of test cases plus optional functions that run before and after all
of its test cases, or before and after each one.

## Concepts

Defined in `aceunit.fixture`:

- **`Fixture`** – a frozen dataclass with `test_cases` (stored as a tuple)
  and optional `before_all`, `after_all`, `before_each` and `after_each`
  functions. Any of these may be `None`.
- **`Result`** – a dataclass counting `test_case_count`, `success_count` and
  `failure_count`. A run never resets a result it is given, so several runs
  can be collected into the same result.
- **`fail()`** – raises `AceUnitFailure`, naming the file, line and function
  it was called from.
- **`check(cond, message="")`** – does nothing when `cond` is true;
  otherwise prints ``<file>:<line>: <function>: Assertion `<message>' failed.``
  to standard error and calls `fail()`.
- **`AceUnitFailure`** – a subclass of `AssertionError`.

Defined in `aceunit.catching`, each catcher has `run_catching(code)`, which
runs `code` (a `None` function does nothing and succeeds) and returns `True`
only when it completed successfully:

- `SimpleCatcher` – catches nothing; any exception propagates, otherwise it
  returns `True`.
- `AbortCatcher` – returns `False` on any `AssertionError`, which includes
  `AceUnitFailure` and failed plain `assert` statements.
- `SetJmpCatcher` – returns `False` only on `AceUnitFailure`; other
  exceptions, plain assertion errors included, propagate.
- `ForkCatcher` – catches everything derived from `Exception` as well as
  `SystemExit`. A `sys.exit()` with status 0 (or `None`) counts as success,
  any other status as failure; other exceptions are printed to standard error
  and count as failure. Standard output and error are flushed afterwards.

## Running fixtures

`aceunit.runner.run(fixtures, result=None, catcher=None)` runs every fixture
in order, using `AbortCatcher` when no catcher is given and a fresh `Result`
when no result is given, and returns the result:

1. The fixture's `before_all` runs once.
2. For each test case the test case count goes up. If `before_all`
   succeeded, `before_each` runs, then the test case if `before_each`
   succeeded, then `after_each` in any case. The test case counts as
   successful only when all of these succeeded; otherwise, and whenever
   `before_all` failed, it counts as a failure.
3. `after_all` runs once; if it fails, one more failure is counted.

```python
from aceunit.fixture import Fixture, check
from aceunit.runner import run

def test_ok():
    check(1 + 1 == 2, "1 + 1 == 2")

def test_bad():
    check(False, "False")

result = run([Fixture(test_cases=[test_ok, test_bad])])
# result.test_case_count == 2, result.success_count == 1, result.failure_count == 1
```

`aceunit.runner.summary(program, result)` produces the one-line report, for
example:

```
mytests: 3 test cases, 2 successful, 1 failed.
```

`aceunit.runner.main(argv=None, fixtures=(), catcher=None)` runs the given
fixtures into a new result, writes the summary to standard error, using
`argv[0]` (or `sys.argv[0]`) as the program name, and returns `1` when any
failure was counted, `0` otherwise.

## Examples

The package ships two small examples in `aceunit.examples`.

Leap years:

```python
from aceunit.examples.leapyear import is_leap_year

assert is_leap_year(400)
assert not is_leap_year(100)
```

Testing output with a mock in place of the line-printing function:

```python
from aceunit.examples.hello import MockPuts, main

mock = MockPuts()
main(mock)
mock.assert_output("Hello, world!\n")
```

`main()` without an argument writes the greeting to standard output and
returns `0`. `MockPuts` records the last line it was given, with a newline
appended, in its `buffer` attribute.

## What it does not do

The package does not discover test functions by itself: fixtures are built
by hand from the functions to run. It installs no command-line tool; a test
program calls `aceunit.runner.main` with its own fixtures.