"""Fixture-based unit testing with pluggable failure catchers."""

__version__ = "3.0.0"
__all__ = ["catching", "examples", "fixture", "runner"]