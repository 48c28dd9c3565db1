import pytest

from aceunit.examples.leapyear import is_leap_year


@pytest.mark.parametrize("year", [0, 4, 400])
def test_leap_years(year):
    assert is_leap_year(year) is True


@pytest.mark.parametrize("year", [1, 100])
def test_non_leap_years(year):
    assert is_leap_year(year) is False