"""
Main property/value pattern built from the caller's property tables.

Only the keys of a table are read; descriptors stay opaque. Identifiers of
the primary table require a parenthesized payload, identifiers of the helper
table may stand alone. Both tables share one alternation so that the
descending order holds across them: (Bgc|B), never (B|Bgc).
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional

from .errors import PropertyTableError
from .fragments import VALUES, ordered, params_group

_LOG = logging.getLogger("acss_grammar.syntax")

# A bare helper identifier must not run into a longer word, hyphenated or not;
# "--" still opens a breakpoint.
WORD_END = r"(?!-?[A-Za-z0-9_])"

# Lookahead pinning a primary identifier to a well-formed payload.
_PAYLOAD_AHEAD = r"(?=\(" + VALUES + r"\))"


def table_keys(table: Optional[Mapping[str, Any]], *, name: str) -> List[str]:
    """
    Identifier strings of a property table.

    Raises:
        PropertyTableError: table is not a mapping or a key is not a non-empty string
    """
    if table is None:
        return []
    if not isinstance(table, Mapping):
        raise PropertyTableError(name, f"expected a mapping, got {type(table).__name__}")
    keys: List[str] = []
    for key in table:
        if not isinstance(key, str):
            raise PropertyTableError(name, f"key {key!r} is not a string")
        if not key:
            raise PropertyTableError(name, "empty identifier")
        keys.append(key)
    return keys


def match_order(primary: Iterable[str], helpers: Iterable[str] = ()) -> List[str]:
    """Identifiers in the order the main pattern attempts them."""
    return ordered(list(primary) + list(helpers))


def build_syntax(primary: Optional[Mapping[str, Any]], helpers: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    """
    Main property/value pattern for both tables.

    Captures the identifier into `prop` and the payload into `values`.
    An identifier present in both tables follows the helper rule.

    Args:
        primary: Properties that take a value payload
        helpers: Properties whose payload is optional

    Returns:
        Pattern source, or None if neither table defines an identifier
    """
    primary_keys = table_keys(primary, name="primary")
    helper_keys = set(table_keys(helpers, name="helper"))

    order = match_order(primary_keys, helper_keys)
    _LOG.debug("main syntax: %d primary, %d helper identifiers", len(primary_keys), len(helper_keys))
    if not order:
        return None

    if not helper_keys:
        return "(?P<prop>" + "|".join(re.escape(k) for k in order) + ")" + params_group("values")

    branches = [
        re.escape(k) if k in helper_keys else re.escape(k) + _PAYLOAD_AHEAD
        for k in order
    ]
    return "".join([
        "(?P<prop>", "|".join(branches), ")",
        "(?:", params_group("values"), "|", WORD_END, ")",
    ])


__all__ = [
    "WORD_END",
    "table_keys",
    "match_order",
    "build_syntax",
]
