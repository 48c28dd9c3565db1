"""Small example programs: a leap-year rule and a greeting with a mockable output function."""

__all__ = ["hello", "leapyear"]