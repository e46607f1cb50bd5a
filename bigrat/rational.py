"""Exact rational values: parsing, formatting and conversion."""
from __future__ import annotations

import logging
import math
import numbers
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

from .config import Config, parse_float_format
from .errors import InvalidNarrowing, ParseError
from .floatfmt import float_string
from .integer import format_big_int, parse_big_int
from .value import BigInt, Int, Matrix, Value, ValueKind, Vector, _ensure_int

logger = logging.getLogger(__name__)


class Rational:
    """Representation of a rational number in lowest terms.

    The denominator is always positive and shares no factor with the
    numerator. Instances are immutable.
    """

    __slots__ = ("_numerator", "_denominator")
    kind = ValueKind.RATIONAL

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            raise ZeroDivisionError("denominator must be non-zero")

        num, den = self._normalize(num, den)

        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def parse(cls, text: str, config: Optional[Config] = None) -> "Rational":
        return parse_rational(text, config if config is not None else Config())

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def is_int(self) -> bool:
        return self._denominator == 1

    # ------------------------------------------------------------------
    # Value protocol
    def eval(self, context: Any = None) -> "Rational":
        return self

    def shrink(self) -> Value:
        """Pull the value down to an :class:`Int` or :class:`BigInt` when it is integral."""
        if not self.is_int():
            return self
        return BigInt(self._numerator).shrink()

    def to_type(self, which: ValueKind) -> Value:
        if which is ValueKind.INT:
            raise InvalidNarrowing("rational to int")
        if which is ValueKind.BIG_INT:
            raise InvalidNarrowing("rational to big int")
        if which is ValueKind.RATIONAL:
            return self
        if which is ValueKind.VECTOR:
            return Vector([self])
        if which is ValueKind.MATRIX:
            return Matrix((1, 1), [self])
        raise InvalidNarrowing(f"rational to {which}")

    def to_string(self, config: Config) -> str:
        return format_rational(self, config)

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return format_rational(self, Config())

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        verb, prec, ok = parse_float_format("%" + format_spec)
        if ok and verb in "fFeE":
            return float_string(self.as_fraction(), verb, prec)
        return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _coerce_scalar(value: Any) -> Optional["Rational"]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return Rational.from_fraction(value)
        if isinstance(value, (Int, BigInt)):
            return Rational(value.value, 1)
        if isinstance(value, numbers.Integral):
            return Rational(int(value), 1)
        return None

    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int]:
        if den < 0:
            num, den = -num, -den
        gcd = math.gcd(num, den)
        return num // gcd, den // gcd

    # ------------------------------------------------------------------
    # Comparisons
    def __eq__(self, other: Any) -> bool:
        other_rat = self._coerce_scalar(other)
        if other_rat is None:
            return NotImplemented
        return (
            self._numerator == other_rat._numerator
            and self._denominator == other_rat._denominator
        )

    def __hash__(self) -> int:
        # Matches hash(Fraction) so equal Fractions and ints hash alike.
        return hash(Fraction(self._numerator, self._denominator))


def parse_rational(text: str, config: Config) -> Rational:
    """Parse *text* as a rational in ``config.input_base``.

    Decimal input uses the :class:`fractions.Fraction` literal grammar. In any
    other base a ``num/den`` string is split and each side parsed as a based
    integer.
    """
    base = config.input_base
    slash = text.find("/")
    if slash >= 0 and base not in (0, 10):
        logger.debug("parsing %r as base-%d numerator and denominator", text, base)
        num = parse_big_int(text[:slash], base)
        den = parse_big_int(text[slash + 1 :], base)
        if den == 0:
            raise ParseError("rational number syntax")
        return Rational(num, den)
    try:
        value = Fraction(text)
    except (ValueError, ZeroDivisionError) as exc:
        raise ParseError("rational number syntax") from exc
    return Rational.from_fraction(value)


def format_rational(r: Rational, config: Config) -> str:
    """Render *r* as a fraction, a float-style decimal, or through the rational template."""
    if not config.output_format:
        num = format_big_int(r.numerator, config)
        den = format_big_int(r.denominator, config)
        return f"{num}/{den}"
    verb, prec, ok = config.float_format()
    if ok:
        return float_string(r.as_fraction(), verb, prec)
    return config.rat_format() % (r.numerator, r.denominator)


__all__ = ["Rational", "format_rational", "parse_rational"]
