"""
Number detection and printf-style formatting.

Cell formats are written the way table authors write them in other
tools: ``%,.2f``, ``%.1f%%``, ``$%,.0f``, ``%8.3e``. Python's ``%``
operator has no grouping flag, so each conversion is translated into a
format spec instead. Fixed-point output rounds half-up on the shortest
decimal representation of the value, so ``0.125`` shows as ``0.13``.

Supported conversions: ``f e E g G d x X o s S`` plus ``%%`` and ``%n``.
Supported flags: ``- + space 0 , ( #``.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Union

from .core.errors import NumberFormatError

Number = Union[int, float]

NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")

SPEC_RE = re.compile(r"%(?:(\d+)\$)?([-#+ 0,(]*)(\d+)?(?:\.(\d+))?([a-zA-Z%])")

FLOAT_CONVERSIONS = "feEgG"
INT_CONVERSIONS = "dxXo"


def parse_number(text: str) -> Optional[float]:
    """
    Parse text as a base-10 floating point number.

    Returns None when the text is not a plain decimal number. ``nan``,
    ``inf``, hex and underscore forms are not numbers here.
    """
    if not text or not NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def number_str(value: Number) -> str:
    """Plain text form of a number, used when formatting fails."""
    return str(value)


def _fixed(value: float, precision: int) -> Decimal:
    dec = Decimal(repr(float(value)))
    if not dec.is_finite():
        return dec
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, dec.adjusted() + precision + 2)
        return dec.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


def _convert(fmt: str, match: re.Match, value: Number) -> str:
    index, flags, width, precision, conv = match.groups()

    if index is not None and int(index) != 1:
        raise NumberFormatError(fmt, value, f"no argument {index}")
    if ("-" in flags or "0" in flags) and width is None:
        raise NumberFormatError(fmt, value, "flag requires a width")
    if "-" in flags and "0" in flags:
        raise NumberFormatError(fmt, value, "'-' and '0' flags together")
    if "+" in flags and " " in flags:
        raise NumberFormatError(fmt, value, "'+' and ' ' flags together")

    if conv in "sS":
        if set(flags) - {"-"}:
            raise NumberFormatError(fmt, value, f"flags {flags!r} not allowed for %{conv}")
        text = number_str(value)
        if precision is not None:
            text = text[: int(precision)]
        if conv == "S":
            text = text.upper()
        return _pad(text, width, "-" in flags)

    if conv in INT_CONVERSIONS:
        if isinstance(value, bool) or not isinstance(value, int):
            raise NumberFormatError(fmt, value, f"%{conv} needs an integer")
        if precision is not None:
            raise NumberFormatError(fmt, value, f"precision not allowed for %{conv}")
        if "," in flags and conv != "d":
            raise NumberFormatError(fmt, value, f"',' not allowed for %{conv}")
    elif conv in FLOAT_CONVERSIONS:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise NumberFormatError(fmt, value, f"%{conv} needs a number")
        if "," in flags and conv in "eE":
            raise NumberFormatError(fmt, value, f"',' not allowed for %{conv}")
    else:
        raise NumberFormatError(fmt, value, f"unknown conversion %{conv}")

    negative = value < 0
    paren = "(" in flags and negative
    if paren:
        value = -value

    spec = ""
    if "-" in flags and not paren:
        spec += "<"
    if not paren:
        if "+" in flags:
            spec += "+"
        elif " " in flags:
            spec += " "
    if "#" in flags or conv in "gG":
        spec += "#"
    if "0" in flags and not paren:
        spec += "0"
    if width is not None and not paren:
        spec += width
    if "," in flags:
        spec += ","

    if conv == "f":
        prec = int(precision) if precision is not None else 6
        text = format(_fixed(value, prec), f"{spec}.{prec}f")
    elif conv in "eEgG":
        prec = int(precision) if precision is not None else 6
        if conv in "gG" and prec == 0:
            prec = 1
        text = format(float(value), f"{spec}.{prec}{conv}")
    else:
        text = format(value, f"{spec}{conv}")

    if paren:
        text = _pad(f"({text})", width, "-" in flags)
    return text


def _pad(text: str, width: Optional[str], left: bool) -> str:
    if width is None:
        return text
    return text.ljust(int(width)) if left else text.rjust(int(width))


def format_number(fmt: str, value: Number) -> str:
    """
    Render value through a printf-style format string.

    Every argument-taking conversion receives the same single value, so
    a format may hold at most one of them (``%1$`` references excepted).

    Raises:
        NumberFormatError: When the format does not fit the value
    """
    if not isinstance(fmt, str):
        raise NumberFormatError(str(fmt), value, "format is not a string")

    parts: list[str] = []
    consumed = 0
    pos = 0
    for match in SPEC_RE.finditer(fmt):
        literal = fmt[pos : match.start()]
        if "%" in literal:
            raise NumberFormatError(fmt, value, "malformed conversion")
        parts.append(literal)
        pos = match.end()

        conv = match.group(5)
        if conv == "%":
            if set(match.group(2)) - {"-"}:
                raise NumberFormatError(fmt, value, "flags not allowed for %%")
            parts.append("%")
            continue
        if conv == "n":
            parts.append("\n")
            continue

        if match.group(1) is None:
            consumed += 1
            if consumed > 1:
                raise NumberFormatError(fmt, value, "format needs more than one argument")
        try:
            parts.append(_convert(fmt, match, value))
        except (ValueError, TypeError, ArithmeticError) as e:
            raise NumberFormatError(fmt, value, str(e)) from e

    tail = fmt[pos:]
    if "%" in tail:
        raise NumberFormatError(fmt, value, "malformed conversion")
    parts.append(tail)
    return "".join(parts)


def format_or_str(fmt: str, value: Number) -> str:
    """format_number(), falling back to the plain number text on any mismatch."""
    try:
        return format_number(fmt, value)
    except NumberFormatError:
        return number_str(value)
