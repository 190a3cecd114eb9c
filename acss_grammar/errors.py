"""
Base exceptions for user-facing errors.

Expected errors that should be displayed to the user as clean messages
(without stack traces) inherit from GrammarError. A token or value that does
not match the grammar is not an error: matchers return None for it.
"""

from __future__ import annotations


class GrammarError(Exception):
    """
    Base class for all user-facing errors in acss-grammar.

    These errors indicate problems the caller can fix:
    malformed property tables, broken rules files, etc.
    """
    pass


class PropertyTableError(GrammarError, TypeError):
    """Property table is not a mapping or has a key that is not a non-empty string."""

    def __init__(self, table: str, message: str):
        self.table = table
        super().__init__(f"Invalid {table} table: {message}")


class RulesFileError(GrammarError):
    """Rules file is missing or does not have the expected layout."""
    pass


__all__ = ["GrammarError", "PropertyTableError", "RulesFileError"]
