"""
Pseudo-state registry.

One fixed table of (canonical, alias) pairs; both lookup directions are
derived from it at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .errors import GrammarError

PSEUDO_TABLE: Tuple[Tuple[str, str], ...] = (
    (":active", ":a"),
    (":checked", ":c"),
    (":default", ":d"),
    (":disabled", ":di"),
    (":empty", ":e"),
    (":enabled", ":en"),
    (":first", ":fi"),
    (":first-child", ":fc"),
    (":first-of-type", ":fot"),
    (":fullscreen", ":fs"),
    (":focus", ":f"),
    (":hover", ":h"),
    (":indeterminate", ":ind"),
    (":in-range", ":ir"),
    (":invalid", ":inv"),
    (":last-child", ":lc"),
    (":last-of-type", ":lot"),
    (":left", ":l"),
    (":link", ":li"),
    (":only-child", ":oc"),
    (":only-of-type", ":oot"),
    (":optional", ":o"),
    (":out-of-range", ":oor"),
    (":read-only", ":ro"),
    (":read-write", ":rw"),
    (":required", ":req"),
    (":right", ":r"),
    (":root", ":rt"),
    (":scope", ":s"),
    (":target", ":t"),
    (":valid", ":va"),
    (":visited", ":vi"),
)


def _build_maps() -> Tuple[Mapping[str, str], Mapping[str, str]]:
    to_alias: dict[str, str] = {}
    to_canonical: dict[str, str] = {}
    for canonical, alias in PSEUDO_TABLE:
        if canonical in to_alias or canonical in to_canonical:
            raise GrammarError(f"Duplicate pseudo-state name: {canonical}")
        if alias in to_canonical or alias in to_alias:
            raise GrammarError(f"Duplicate pseudo-state alias: {alias}")
        to_alias[canonical] = alias
        to_canonical[alias] = canonical
    return MappingProxyType(to_alias), MappingProxyType(to_canonical)


PSEUDOS, PSEUDOS_INVERTED = _build_maps()


def canonical_pseudo(name: str) -> Optional[str]:
    """
    Non-abbreviated pseudo-state for an abbreviated or full name.

    Returns None for unknown names.
    """
    if name in PSEUDOS:
        return name
    return PSEUDOS_INVERTED.get(name)


def pseudo_names() -> Tuple[str, ...]:
    """All canonical names and aliases, in table order."""
    return tuple(n for pair in PSEUDO_TABLE for n in pair)


__all__ = ["PSEUDO_TABLE", "PSEUDOS", "PSEUDOS_INVERTED", "canonical_pseudo", "pseudo_names"]
