"""
Value payload matcher.

A raw payload such as "10px", "#fff.5", "1/2" or "red" is decomposed into the
most specific of four shapes. Alternatives are tried in a fixed order and the
whole payload has to match one of them:

    fraction  ->  color  ->  number with optional unit  ->  named
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Optional, Union

from .fragments import ALPHA, FRACTION, HEX_DIGITS, NAMED, NUMBER, UNIT


@dataclass(frozen=True)
class Fraction:
    numerator: int
    denominator: int

    @property
    def kind(self) -> str:
        return "fraction"


@dataclass(frozen=True)
class Color:
    """Hex color without the leading '#'; alpha comes from a '.N' or '.NN' suffix."""
    hex: str
    alpha: Optional[float] = None

    @property
    def kind(self) -> str:
        return "color"


@dataclass(frozen=True)
class Number:
    value: float
    unit: Optional[str] = None

    @property
    def kind(self) -> str:
        return "number"


@dataclass(frozen=True)
class Named:
    name: str

    @property
    def kind(self) -> str:
        return "named"


ValueMatch = Union[Fraction, Color, Number, Named]


VALUE_SYNTAX = "".join([
    "(?P<fraction>", FRACTION, ")",
    "|",
    "(?:",
        "#(?P<hex>", HEX_DIGITS, ")",
        "(?P<alpha>", ALPHA, ")?",
        "(?!", UNIT, ")",
    ")",
    "|",
    "(?P<number>", NUMBER, ")",
    "(?P<unit>", UNIT, ")?",
    "|",
    "(?P<named>", NAMED, ")",
])

_VALUE_RE = re.compile(VALUE_SYNTAX, re.ASCII)


def match_value(payload: str) -> Optional[ValueMatch]:
    """
    Decompose a value payload.

    Args:
        payload: Raw value text, e.g. the part between parentheses of a token

    Returns:
        Fraction, Color, Number or Named; None if the payload fits none of them
    """
    if not isinstance(payload, str):
        raise TypeError(f"Value payload must be a string, got {type(payload).__name__}")

    m = _VALUE_RE.fullmatch(payload)
    if m is None:
        return None

    if m.group("fraction") is not None:
        return Fraction(int(m.group("numerator")), int(m.group("denominator")))
    if m.group("hex") is not None:
        alpha = m.group("alpha")
        return Color(m.group("hex"), float(alpha) if alpha else None)
    if m.group("number") is not None:
        return Number(float(m.group("number")), m.group("unit"))
    return Named(m.group("named"))


def value_to_dict(value: Optional[ValueMatch]) -> Optional[dict]:
    """JSON-friendly form of a ValueMatch."""
    if value is None:
        return None
    out = {"kind": value.kind}
    out.update(asdict(value))
    return out


__all__ = [
    "Fraction",
    "Color",
    "Number",
    "Named",
    "ValueMatch",
    "VALUE_SYNTAX",
    "match_value",
    "value_to_dict",
]
