"""Exceptions raised while parsing, formatting and converting values."""
from __future__ import annotations


class RationalError(Exception):
    """Base class for errors raised by :mod:`bigrat`."""


class ParseError(RationalError, ValueError):
    """Text could not be read as a number. Callers may report and continue."""


class UnsupportedFormatVerb(RationalError, RuntimeError):
    """The configured float format uses a verb rationals cannot render."""

    def __init__(self, verb: str) -> None:
        super().__init__(f"can't handle verb {verb} for rational")
        self.verb = verb


class InvalidNarrowing(RationalError, AssertionError):
    """A value was asked to convert into a kind that cannot hold it exactly.

    This is a programming error in the caller, not bad user input.
    """
