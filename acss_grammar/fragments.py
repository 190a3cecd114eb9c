"""
Fragment library: named pattern pieces of the atomic class grammar.

Fragments are plain regex source strings. Larger fragments are built from
smaller ones by concatenation and alternation only, so every fragment can be
embedded as-is into a bigger pattern. Group names used here are reserved
for the token pattern: parent, parent_pseudo, parent_sep.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from .pseudo import pseudo_names


def ordered(names: Iterable[str]) -> List[str]:
    """
    Names sorted in descending order, duplicates removed.

    A strict prefix always sorts before its extensions, so in descending
    order every name is attempted before any of its prefixes: (Bgc|B), not (B|Bgc).
    """
    return sorted(set(names), reverse=True)


def alternation(names: Iterable[str]) -> str:
    """Escaped alternation body (no enclosing group) for literal names."""
    return "|".join(re.escape(n) for n in ordered(names))


def params_group(group: str) -> str:
    """Parenthesized payload captured into `group`."""
    return r"\((?P<" + group + ">" + VALUES + r")\)"


# Start of text, whitespace, quote or opening brace right before the token.
# Zero-width, so the match text is the token itself.
BOUNDARY = r"""(?<![^\s"'{])"""

# Ancestor name, kept lazy since '_' is also a separator.
PARENT = r"[a-zA-Z][-_a-zA-Z0-9]*?"

# '>' direct child, '_' descendant, '+' adjacent sibling
PARENT_SEP = r"[>_+]"

# every character allowed in a value payload
VALUES = r"[-_,.#$/%0-9a-zA-Z]+"

PARAMS = params_group("params")

FRACTION = r"(?P<numerator>[0-9]+)/(?P<denominator>[1-9][0-9]*)"

NUMBER = r"(?:-?[0-9]+(?:\.[0-9]+)?|\.[0-9]+)"

UNIT = r"[a-zA-Z%]+"

HEX_DIGITS = r"[0-9a-f]{3}(?:[0-9a-f]{3})?"

HEX = "#" + HEX_DIGITS

ALPHA = r"\.[0-9]{1,2}"

IMPORTANT = "!"

# Words joined by single hyphens; a double hyphen starts a breakpoint.
NAMED = r"[\w$]+(?:-(?!-)\w*)*"

PSEUDO = "(?:" + alternation(pseudo_names()) + ")(?![a-z])"

PSEUDO_SIMPLE = r":[a-z]+(?:-[a-z]+)*"

PARENT_PSEUDO_SIMPLE = r"[.:][a-z]+(?:-[a-z]+)*"

BREAKPOINT = r"--(?P<breakpoint>[a-z]+)"

PARENT_SELECTOR = "".join([
    "(?P<parent>", PARENT, ")",
    "(?P<parent_pseudo>", PSEUDO, ")?",
    "(?P<parent_sep>", PARENT_SEP, ")",
])

PARENT_SELECTOR_SIMPLE = "".join([
    "(?P<parent>", PARENT, ")",
    "(?P<parent_pseudo>", PARENT_PSEUDO_SIMPLE, ")?",
    "(?P<parent_sep>", PARENT_SEP, ")",
])

GRAMMAR = {
    "BOUNDARY": BOUNDARY,
    "PARENT": PARENT,
    "PARENT_SEP": PARENT_SEP,
    "VALUES": VALUES,
    "PARAMS": PARAMS,
    "FRACTION": FRACTION,
    "NUMBER": NUMBER,
    "UNIT": UNIT,
    "HEX": HEX,
    "ALPHA": ALPHA,
    "IMPORTANT": IMPORTANT,
    "NAMED": NAMED,
    "PSEUDO": PSEUDO,
    "PSEUDO_SIMPLE": PSEUDO_SIMPLE,
    "PARENT_PSEUDO_SIMPLE": PARENT_PSEUDO_SIMPLE,
    "BREAKPOINT": BREAKPOINT,
    "PARENT_SELECTOR": PARENT_SELECTOR,
    "PARENT_SELECTOR_SIMPLE": PARENT_SELECTOR_SIMPLE,
}


__all__ = [
    "GRAMMAR",
    "ordered",
    "alternation",
    "params_group",
] + list(GRAMMAR)
