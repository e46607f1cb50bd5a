"""Exact rational values for a numeric-expression evaluator."""

from .config import Config, load_config
from .errors import InvalidNarrowing, ParseError, RationalError, UnsupportedFormatVerb
from .floatfmt import float_string
from .rational import Rational, format_rational, parse_rational
from .scale import rat_exponent, rat_scale
from .value import BigInt, Int, Matrix, ValueKind, Vector

__all__ = [
    "BigInt",
    "Config",
    "Int",
    "InvalidNarrowing",
    "Matrix",
    "ParseError",
    "Rational",
    "RationalError",
    "UnsupportedFormatVerb",
    "ValueKind",
    "Vector",
    "float_string",
    "format_rational",
    "load_config",
    "parse_rational",
    "rat_exponent",
    "rat_scale",
]
