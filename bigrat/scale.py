"""Exact power-of-ten exponent search and scaling for rationals.

Both routines step through large exponents a billion at a time, so a value
with a thousand-digit numerator needs about a hundred big divisions rather
than a thousand. The chunked result is identical to stepping by ten.
"""
from __future__ import annotations

from fractions import Fraction

TEN = Fraction(10)
BILLION = Fraction(10**9)


def as_fraction(x) -> Fraction:
    """Copy an exact rational (``int``, ``Fraction`` or :class:`~bigrat.Rational`) into a Fraction."""
    return Fraction(x.numerator, x.denominator)


def rat_exponent(x: Fraction) -> int:
    """Return ``e`` such that ``10**e <= x < 10**(e+1)`` for positive *x*."""
    x = as_fraction(x)
    if x <= 0:
        raise ValueError("exponent is only defined for positive values")
    invert = x.numerator < x.denominator
    if invert:
        x = 1 / x
    e = 0
    while x >= BILLION:
        e += 9
        x /= BILLION
    while x >= TEN:
        e += 1
        x /= TEN
    if invert:
        # 1/x is in [10**e, 10**(e+1)); x is a decade lower unless 1/x == 10**e.
        return -e if x == 1 else -(e + 1)
    return e


def rat_scale(x: Fraction, exp: int) -> Fraction:
    """Return ``x * 10**exp`` exactly."""
    x = as_fraction(x)
    if exp < 0:
        if x == 0:
            return x
        return 1 / rat_scale(1 / x, -exp)
    while exp >= 9:
        x *= BILLION
        exp -= 9
    while exp >= 1:
        x *= TEN
        exp -= 1
    return x


__all__ = ["BILLION", "TEN", "as_fraction", "rat_exponent", "rat_scale"]
