"""Evaluator configuration consumed by parsing and formatting."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_FLOAT_PRECISION = 6
FLOAT_VERBS = "eEfFgG"


def parse_float_format(fmt: str) -> Tuple[str, int, bool]:
    """Split a printf-style float format such as ``%.12e`` into verb and precision.

    Returns ``(verb, precision, ok)``; ``ok`` is false when *fmt* is not a
    floating-point format.
    """
    if "%" not in fmt or fmt[-1] not in FLOAT_VERBS:
        return "", 0, False
    verb = fmt[-1]
    body = fmt[fmt.rindex("%") + 1 : -1]
    prec = DEFAULT_FLOAT_PRECISION
    dot = body.find(".")
    if dot >= 0:
        digits = body[dot + 1 :]
        if digits.isdigit():
            prec = int(digits)
    return verb, prec, True


def _check_base(base: int, *, name: str) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise ValueError(f"{name} must be an integer, got {type(base)!r}")
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"{name} must be 0 or between 2 and 36, got {base}")


@dataclass(frozen=True)
class Config:
    """Read-only settings passed to every parse and format call.

    ``input_base`` and ``output_base`` of ``0`` mean the decimal default.
    ``output_format`` is a printf-style template applied to each integer
    component; an empty template prints plain ``num/den`` fractions.
    """

    input_base: int = 0
    output_base: int = 0
    output_format: str = ""

    def __post_init__(self) -> None:
        _check_base(self.input_base, name="input_base")
        _check_base(self.output_base, name="output_base")
        if self.output_format:
            try:
                self.output_format % 0
            except (TypeError, ValueError) as exc:
                raise ValueError(f"invalid output format {self.output_format!r}") from exc

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "Config":
        """Build a :class:`Config` from a parameter table, using defaults for absent keys."""
        return cls(
            input_base=int(params.get("input_base", 0)),
            output_base=int(params.get("output_base", 0)),
            output_format=str(params.get("format", "")),
        )

    # ------------------------------------------------------------------
    # Derived queries
    def float_format(self) -> Tuple[str, int, bool]:
        return parse_float_format(self.output_format)

    def rat_format(self) -> str:
        """Template with two ordered slots: numerator, then denominator."""
        if not self.output_format:
            return "%s/%s"
        return f"{self.output_format}/{self.output_format}"


def load_config(path: Union[str, Path]) -> Config:
    """Read a :class:`Config` from a TOML file."""
    with open(path, "rb") as f:
        params = tomllib.load(f)
    logger.debug("loaded configuration from %s", path)
    return Config.from_mapping(params)


__all__ = ["Config", "DEFAULT_FLOAT_PRECISION", "load_config", "parse_float_format"]
