"""
Token scanner over documents.

Candidates are found with the fast pattern and each one is re-validated with
the precise pattern anchored at the candidate start.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence

from .fs import DEFAULT_INCLUDE, iter_files, read_text
from .grammar import Grammar, TokenMatch

_LOG = logging.getLogger("acss_grammar.scan")


@dataclass(frozen=True)
class ScanResult:
    path: Path
    tokens: List[TokenMatch] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "path": self.path.as_posix(),
            "tokens": [t.to_dict() for t in self.tokens],
        }


class TokenScanner:
    """
    Finds atomic class tokens in text.

    Args:
        grammar: Grammar built for the property tables in use
        fast_only: Skip precise re-validation and report fast candidates as-is
    """

    def __init__(self, grammar: Grammar, *, fast_only: bool = False):
        self.grammar = grammar
        self.fast_only = fast_only

    def scan(self, text: str) -> List[TokenMatch]:
        """Tokens of `text` in document order."""
        if self.fast_only:
            return list(self.grammar.finditer(text, fast=True))

        tokens: List[TokenMatch] = []
        for candidate in self.grammar.finditer(text, fast=True):
            token = self.grammar.match_at(text, candidate.start)
            if token is None:
                _LOG.debug("rejected candidate %r at %d", candidate.text, candidate.start)
                continue
            tokens.append(token)
        return tokens

    def scan_file(self, path: Path) -> ScanResult:
        return ScanResult(path=path, tokens=self.scan(read_text(path)))

    def scan_paths(
        self,
        paths: Iterable[Path],
        *,
        include: Sequence[str] = DEFAULT_INCLUDE,
        exclude: Sequence[str] = (),
    ) -> List[ScanResult]:
        """
        Scan files and directories.

        Directories are walked with `include`/`exclude` gitignore-style
        patterns; files given explicitly are always scanned. Unreadable
        files are skipped with a warning.
        """
        results: List[ScanResult] = []
        for p in paths:
            files = iter_files(p, include=include, exclude=exclude) if p.is_dir() else [p]
            for f in files:
                try:
                    results.append(self.scan_file(f))
                except OSError as e:
                    _LOG.warning("Skipping %s: %s", f, e)
        return results


__all__ = ["TokenScanner", "ScanResult"]
