"""Fixed-point and scientific rendering of exact rationals."""
from __future__ import annotations

import logging
from fractions import Fraction

from .errors import UnsupportedFormatVerb
from .scale import as_fraction, rat_exponent, rat_scale

logger = logging.getLogger(__name__)


def fixed_point(x: Fraction, prec: int, *, rounding: bool = True) -> str:
    """Return the decimal expansion of *x* with *prec* fractional digits.

    With ``rounding`` the last digit is rounded half away from zero, otherwise
    the expansion is truncated. ``prec == 0`` prints no decimal point.
    """
    if prec < 0:
        raise ValueError("precision must be >= 0")
    num, den = x.numerator, x.denominator
    sign = "-" if num < 0 else ""
    whole, rem = divmod(abs(num), den)
    scale = 10**prec
    frac, rem = divmod(rem * scale, den)
    if rounding and 2 * rem >= den:
        frac += 1
        if frac >= scale:
            whole += 1
            frac -= scale
    text = f"{sign}{whole}"
    if prec > 0:
        text += "." + str(frac).rjust(prec, "0")
    return text


def e_format(verb: str, prec: int, sign: str, digits: str, exp: int) -> str:
    """Assemble ``d.ddde+nn`` text from a mantissa digit string and an exponent.

    *digits* has an implied decimal point after its first digit. Short strings
    are zero padded; the first digit beyond *prec* rounds half up.
    """
    if len(digits) <= prec + 1:
        digits = digits.ljust(prec + 1, "0")
    else:
        keep = digits[: prec + 1]
        if digits[prec + 1] >= "5":
            rounded = str(int(keep) + 1)
            if len(rounded) > len(keep):
                # 9.99 carried into 10.00
                rounded = rounded[:-1]
                exp += 1
            keep = rounded
        digits = keep
    mantissa = digits[0]
    if prec > 0:
        mantissa += "." + digits[1:]
    e_char = "E" if verb == "E" else "e"
    return f"{sign}{mantissa}{e_char}{exp:+03d}"


def float_string(x: Fraction, verb: str, prec: int) -> str:
    """Render *x* with a ``f``/``F``/``e``/``E`` verb and *prec* digits, without floats."""
    x = as_fraction(x)
    if verb in ("f", "F"):
        return fixed_point(x, prec)
    if verb in ("e", "E"):
        sign = ""
        if x < 0:
            sign = "-"
            x = -x
        if x == 0:
            return e_format(verb, prec, sign, "0", 0)
        exp = rat_exponent(x)
        scaled = rat_scale(x, -exp)
        # One extra digit so rounding happens once, in e_format.
        text = fixed_point(scaled, prec + 1, rounding=False)
        if text[0] == "0":
            text = text[2:]
            exp -= 1
        elif len(text) > 1 and text[1] == ".":
            text = text[0] + text[2:]
        return e_format(verb, prec, sign, text, exp)
    logger.error("can't handle verb %s for rational", verb)
    raise UnsupportedFormatVerb(verb)


__all__ = ["e_format", "fixed_point", "float_string"]
