import pytest

from aceunit.fixture import AceUnitFailure, Fixture, Result, check, fail


def _noop():
    pass


def test_fail_raises_failure():
    with pytest.raises(AceUnitFailure):
        fail()


def test_check_true_is_silent(capsys):
    check(1 + 1 == 2, "1 + 1 == 2")
    assert capsys.readouterr().err == ""


def test_check_false_reports_and_fails(capsys):
    with pytest.raises(AceUnitFailure):
        check(False, "false")
    err = capsys.readouterr().err
    assert "Assertion `false' failed." in err
    assert "test_check_false_reports_and_fails" in err
    assert "test_fixture.py" in err


def test_check_uses_truthiness():
    with pytest.raises(AceUnitFailure):
        check([], "items")


def test_fixture_defaults():
    fixture = Fixture()
    assert fixture.test_cases == ()
    assert fixture.before_all is None
    assert fixture.after_all is None
    assert fixture.before_each is None
    assert fixture.after_each is None


def test_fixture_stores_test_cases_as_tuple():
    fixture = Fixture([_noop, _noop])
    assert fixture.test_cases == (_noop, _noop)


def test_fixture_is_immutable():
    fixture = Fixture([_noop])
    with pytest.raises(AttributeError):
        fixture.before_all = _noop
    assert fixture.before_all is None


def test_result_starts_at_zero():
    result = Result()
    assert (result.test_case_count, result.success_count, result.failure_count) == (0, 0, 0)


def test_result_is_mutable():
    result = Result()
    result.failure_count += 1
    assert result.failure_count == 1