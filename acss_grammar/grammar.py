"""
Full token grammar.

Assembles the recognition pattern for a whole atomic class token:

    [parent [parent-pseudo] separator] prop(payload) [!] [:pseudo] [--breakpoint]

Two fidelity modes are available. The precise pattern validates identifiers
against the property tables and pseudo-states against the registry. The fast
pattern accepts any letter identifier and any colon-prefixed pseudo; it finds
every token the precise pattern finds (for letter-only identifiers) and is
meant as a pre-filter before precise re-validation. Identifiers with
characters other than letters are still matched by the precise pattern,
but the fast pattern misses them; a warning names each such identifier.
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, Mapping, Optional

from .fragments import (
    BOUNDARY,
    BREAKPOINT,
    IMPORTANT,
    PARENT_SELECTOR,
    PARENT_SELECTOR_SIMPLE,
    PSEUDO,
    PSEUDO_SIMPLE,
    params_group,
)
from .pseudo import canonical_pseudo
from .syntax import build_syntax, table_keys
from .values import ValueMatch, match_value

_LOG = logging.getLogger("acss_grammar.grammar")

NEVER = "(?!)"

_FAST_PROP = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True)
class TokenMatch:
    """
    Decomposition of one atomic class token.

    Attributes:
        text: Token text as it appears in the source
        start: Offset of the token in the scanned text
        end: Offset right after the token
        parent: Ancestor name of the parent selector
        parent_pseudo: Pseudo-state attached to the parent
        parent_sep: '>', '_' or '+'
        prop: Property identifier
        value: Raw payload between the parentheses
        important: '!' marker present
        value_pseudo: Pseudo-state suffix as written (may be an alias)
        breakpoint: Breakpoint name without the leading '--'
        is_helper: Identifier comes from the helper table
    """
    text: str
    start: int
    end: int
    prop: str
    value: Optional[str] = None
    important: bool = False
    parent: Optional[str] = None
    parent_pseudo: Optional[str] = None
    parent_sep: Optional[str] = None
    value_pseudo: Optional[str] = None
    breakpoint: Optional[str] = None
    is_helper: bool = False

    @property
    def canonical_pseudo(self) -> Optional[str]:
        return canonical_pseudo(self.value_pseudo) if self.value_pseudo else None

    @property
    def canonical_parent_pseudo(self) -> Optional[str]:
        return canonical_pseudo(self.parent_pseudo) if self.parent_pseudo else None

    def parsed_value(self) -> Optional[ValueMatch]:
        return match_value(self.value) if self.value is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Grammar:
    """
    Recognition patterns for one pair of property tables.

    Both patterns are compiled on construction; an instance holds no other
    state and can be shared between threads.
    """

    def __init__(self, rules: Optional[Mapping[str, Any]], helpers: Optional[Mapping[str, Any]] = None):
        self._primary = frozenset(table_keys(rules, name="primary"))
        self._helpers = frozenset(table_keys(helpers, name="helper"))
        self._main_syntax = build_syntax(rules, helpers)
        for key in sorted(self._primary | self._helpers):
            if not _FAST_PROP.fullmatch(key):
                _LOG.warning("Identifier %r is not letters-only; fast matching and scanning will miss it", key)
        if self._main_syntax is None:
            _LOG.info("No property identifiers defined; precise pattern will never match")

        self._patterns = {
            False: re.compile(self.get_syntax(False), re.ASCII),
            True: re.compile(self.get_syntax(True), re.ASCII),
        }
        _LOG.debug(
            "grammar compiled: %d primary, %d helper identifiers",
            len(self._primary), len(self._helpers),
        )

    # ---------------------------- delegates ---------------------------- #

    @staticmethod
    def get_pseudo(name: str) -> Optional[str]:
        """Non-abbreviated pseudo-state for an abbreviated or full name."""
        return canonical_pseudo(name)

    def get_canonical_pseudo(self, name: str) -> Optional[str]:
        return canonical_pseudo(name)

    @staticmethod
    def match_value(payload: str) -> Optional[ValueMatch]:
        return match_value(payload)

    # ---------------------------- patterns ----------------------------- #

    @property
    def identifiers(self) -> frozenset[str]:
        return self._primary | self._helpers

    def get_main_syntax(self, fast: bool = False) -> str:
        # the fast variant does not care whether the prop exists,
        # only that the shape is right and each group is captured
        if fast:
            params = params_group("values")
            if self._helpers:
                params = "(?:" + params + ")?"
            return "(?P<prop>[A-Za-z]+)" + params
        return self._main_syntax or NEVER

    def get_syntax(self, fast: bool = False) -> str:
        return "".join([
            BOUNDARY,
            "(?P<parent_selector>", PARENT_SELECTOR_SIMPLE if fast else PARENT_SELECTOR, ")?",
            self.get_main_syntax(fast),
            "(?P<important>", IMPORTANT, ")?",
            "(?P<value_pseudo>", PSEUDO_SIMPLE if fast else PSEUDO, ")?",
            "(?:", BREAKPOINT, ")?",
        ])

    def get_pattern(self, fast: bool = False) -> re.Pattern:
        return self._patterns[bool(fast)]

    # ---------------------------- matching ----------------------------- #

    def to_token(self, m: re.Match) -> TokenMatch:
        prop = m.group("prop")
        return TokenMatch(
            text=m.group(0),
            start=m.start(),
            end=m.end(),
            prop=prop,
            value=m.group("values"),
            important=m.group("important") is not None,
            parent=m.group("parent"),
            parent_pseudo=m.group("parent_pseudo"),
            parent_sep=m.group("parent_sep"),
            value_pseudo=m.group("value_pseudo"),
            breakpoint=m.group("breakpoint"),
            is_helper=prop in self._helpers,
        )

    def finditer(self, text: str, fast: bool = False) -> Iterator[TokenMatch]:
        for m in self.get_pattern(fast).finditer(text):
            yield self.to_token(m)

    def match_at(self, text: str, pos: int, fast: bool = False) -> Optional[TokenMatch]:
        """Token starting exactly at `pos`, or None."""
        m = self.get_pattern(fast).match(text, pos)
        return self.to_token(m) if m else None

    def decompose(self, token: str) -> Optional[TokenMatch]:
        """Precise decomposition of a single token; the whole string must match."""
        m = self.get_pattern(False).fullmatch(token)
        return self.to_token(m) if m else None


__all__ = ["Grammar", "TokenMatch", "NEVER"]
