"""The closed set of evaluator values that rationals convert to and from."""
from __future__ import annotations

import enum
import math
import numbers
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Iterable, Sequence, Tuple, Union

import numpy as np

from .config import Config
from .errors import InvalidNarrowing
from .floatfmt import float_string
from .integer import format_big_int

if TYPE_CHECKING:
    from .rational import Rational

MIN_INT = -(1 << 63)
MAX_INT = (1 << 63) - 1


class ValueKind(enum.Enum):
    INT = "int"
    BIG_INT = "big int"
    RATIONAL = "rational"
    VECTOR = "vector"
    MATRIX = "matrix"


def _ensure_int(value: numbers.Real, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _object_array(items: Iterable["Value"]) -> np.ndarray:
    items = list(items)
    array = np.empty(len(items), dtype=object)
    for i, item in enumerate(items):
        array[i] = item
    return array


def format_integer(value: int, config: Config) -> str:
    """Render an integer value the way the evaluator prints scalars."""
    if config.output_format:
        verb, prec, ok = config.float_format()
        if ok:
            return float_string(Fraction(value), verb, prec)
        return config.output_format % value
    return format_big_int(value, config)


class Int:
    """An integer that fits in a signed 64-bit word."""

    __slots__ = ("_value",)
    kind = ValueKind.INT

    def __init__(self, value: Union[int, numbers.Integral]) -> None:
        v = _ensure_int(value, name="value")
        if not MIN_INT <= v <= MAX_INT:
            raise OverflowError(f"{v} does not fit in a 64-bit int")
        self._value = v

    @property
    def value(self) -> int:
        return self._value

    def eval(self, context: Any = None) -> "Int":
        return self

    def shrink(self) -> "Int":
        return self

    def to_type(self, which: ValueKind) -> "Value":
        if which is ValueKind.INT:
            return self
        if which is ValueKind.BIG_INT:
            return BigInt(self._value)
        if which is ValueKind.RATIONAL:
            from .rational import Rational

            return Rational(self._value, 1)
        if which is ValueKind.VECTOR:
            return Vector([self])
        if which is ValueKind.MATRIX:
            return Matrix((1, 1), [self])
        raise InvalidNarrowing(f"int to {which}")

    def to_string(self, config: Config) -> str:
        return format_integer(self._value, config)

    def __repr__(self) -> str:
        return f"Int({self._value})"

    def __str__(self) -> str:
        return self.to_string(Config())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (Int, BigInt)):
            return self._value == other.value
        if isinstance(other, numbers.Integral):
            return self._value == int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


class BigInt:
    """An arbitrary-precision integer."""

    __slots__ = ("_value",)
    kind = ValueKind.BIG_INT

    def __init__(self, value: Union[int, numbers.Integral]) -> None:
        self._value = _ensure_int(value, name="value")

    @property
    def value(self) -> int:
        return self._value

    def eval(self, context: Any = None) -> "BigInt":
        return self

    def shrink(self) -> Union[Int, "BigInt"]:
        """Return an :class:`Int` when the value fits in 64 bits."""
        if MIN_INT <= self._value <= MAX_INT:
            return Int(self._value)
        return self

    def to_type(self, which: ValueKind) -> "Value":
        if which is ValueKind.INT:
            raise InvalidNarrowing("big int to int")
        if which is ValueKind.BIG_INT:
            return self
        if which is ValueKind.RATIONAL:
            from .rational import Rational

            return Rational(self._value, 1)
        if which is ValueKind.VECTOR:
            return Vector([self])
        if which is ValueKind.MATRIX:
            return Matrix((1, 1), [self])
        raise InvalidNarrowing(f"big int to {which}")

    def to_string(self, config: Config) -> str:
        return format_integer(self._value, config)

    def __repr__(self) -> str:
        return f"BigInt({self._value})"

    def __str__(self) -> str:
        return self.to_string(Config())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (Int, BigInt)):
            return self._value == other.value
        if isinstance(other, numbers.Integral):
            return self._value == int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


class Vector:
    """A one-dimensional sequence of scalar values, stored as a NumPy object array."""

    __slots__ = ("_values",)
    kind = ValueKind.VECTOR

    def __init__(self, values: Iterable["Value"]) -> None:
        self._values = _object_array(values)

    @property
    def values(self) -> np.ndarray:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def eval(self, context: Any = None) -> "Vector":
        return Vector(item.eval(context) for item in self._values)

    def to_type(self, which: ValueKind) -> "Value":
        if which is ValueKind.VECTOR:
            return self
        if which is ValueKind.MATRIX:
            return Matrix((1, len(self._values)), self._values)
        raise InvalidNarrowing(f"vector to {which}")

    def to_string(self, config: Config) -> str:
        return " ".join(item.to_string(config) for item in self._values)

    def __repr__(self) -> str:
        return f"Vector({list(self._values)!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self._values, other.values)
        )

    __hash__ = None


class Matrix:
    """A rectangular array of scalar values built from a shape and flat data."""

    __slots__ = ("_values",)
    kind = ValueKind.MATRIX

    def __init__(self, shape: Sequence[int], values: Iterable["Value"]) -> None:
        shape = tuple(int(n) for n in shape)
        if len(shape) < 1 or any(n < 0 for n in shape):
            raise ValueError(f"invalid matrix shape {shape}")
        flat = _object_array(values)
        if flat.size != math.prod(shape):
            raise ValueError(
                f"matrix shape {shape} needs {math.prod(shape)} values, got {flat.size}"
            )
        self._values = flat.reshape(shape)

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._values.shape

    @property
    def values(self) -> np.ndarray:
        return self._values

    def eval(self, context: Any = None) -> "Matrix":
        return Matrix(self.shape, (item.eval(context) for item in self._values.flat))

    def to_type(self, which: ValueKind) -> "Value":
        if which is ValueKind.MATRIX:
            return self
        raise InvalidNarrowing(f"matrix to {which}")

    def to_string(self, config: Config) -> str:
        rows = self._values.reshape(-1, self.shape[-1]) if self._values.size else self._values
        return "\n".join(
            " ".join(item.to_string(config) for item in row) for row in rows
        )

    def __repr__(self) -> str:
        return f"Matrix({self.shape}, {list(self._values.flat)!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and all(
            a == b for a, b in zip(self._values.flat, other.values.flat)
        )

    __hash__ = None


Value = Union[Int, BigInt, "Rational", Vector, Matrix]


__all__ = [
    "BigInt",
    "Int",
    "MAX_INT",
    "MIN_INT",
    "Matrix",
    "Value",
    "ValueKind",
    "Vector",
    "format_integer",
]
