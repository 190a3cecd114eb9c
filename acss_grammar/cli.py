from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import RulesConfig, load_rules
from .errors import GrammarError
from .fs import DEFAULT_INCLUDE
from .grammar import Grammar
from .jsonic import dumps as jdumps
from .pseudo import canonical_pseudo
from .scan import TokenScanner
from .values import match_value, value_to_dict
from .version import tool_version

_LOG = logging.getLogger("acss_grammar")


# Payloads like "-1.5em" or "-.5" are values, not options.
_DASH_VALUE = re.compile(r"^-\.?\d")


def _setup_logging(verbose: bool) -> logging.Handler:
    level = logging.DEBUG if verbose or os.environ.get("ACSS_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _LOG.addHandler(h)
    return h


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="acss-grammar",
        description="Atomic class token recognizer",
        add_help=True,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_scan = sub.add_parser("scan", help="find tokens in files and directories (JSON)")
    sp_scan.add_argument("paths", nargs="+", type=Path, help="files or directories")
    sp_scan.add_argument("--rules", type=Path, required=True, help="YAML rules file")
    sp_scan.add_argument(
        "--include",
        action="append",
        metavar="PATTERN",
        help=f"gitignore-style pattern for files inside directories (default: {' '.join(DEFAULT_INCLUDE)})",
    )
    sp_scan.add_argument("--exclude", action="append", metavar="PATTERN", help="gitignore-style pattern to skip")
    sp_scan.add_argument("--fast", action="store_true", help="report fast-pattern candidates without re-validation")

    sp_parse = sub.add_parser("parse", help="decompose single tokens (JSON)")
    sp_parse._negative_number_matcher = _DASH_VALUE
    sp_parse.add_argument("tokens", nargs="+")
    sp_parse.add_argument("--rules", type=Path, help="YAML rules file (without it only the fast grammar applies)")

    sp_value = sub.add_parser("value", help="decompose value payloads (JSON)")
    sp_value._negative_number_matcher = _DASH_VALUE
    sp_value.add_argument("payloads", nargs="+", help="value payloads, e.g. 1/2 #fff.5 -1.5em red")

    sp_pseudo = sub.add_parser("pseudo", help="canonical pseudo-state names (JSON)")
    sp_pseudo.add_argument("names", nargs="+")

    return p


def _grammar(rules_path: Optional[Path]) -> Grammar:
    cfg = load_rules(rules_path) if rules_path else RulesConfig()
    return cfg.grammar()


def _parse_token(grammar: Grammar, token: str, fast: bool) -> Optional[Dict[str, Any]]:
    m = grammar.get_pattern(fast).fullmatch(token)
    if m is None:
        return None
    tm = grammar.to_token(m)
    data = tm.to_dict()
    data["canonical_pseudo"] = tm.canonical_pseudo
    data["canonical_parent_pseudo"] = tm.canonical_parent_pseudo
    data["parsed_value"] = value_to_dict(tm.parsed_value())
    return data


def main(argv: List[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    prev_level = _LOG.level
    handler = _setup_logging(ns.verbose)
    try:
        return _run(ns)
    finally:
        _LOG.removeHandler(handler)
        _LOG.setLevel(prev_level)


def _run(ns: argparse.Namespace) -> int:
    try:
        if ns.cmd == "scan":
            scanner = TokenScanner(_grammar(ns.rules), fast_only=ns.fast)
            results = scanner.scan_paths(
                ns.paths,
                include=ns.include or DEFAULT_INCLUDE,
                exclude=ns.exclude or (),
            )
            sys.stdout.write(jdumps(results))
            return 0

        if ns.cmd == "parse":
            grammar = _grammar(ns.rules)
            fast = ns.rules is None
            data = {t: _parse_token(grammar, t, fast) for t in ns.tokens}
            sys.stdout.write(jdumps(data))
            return 0

        if ns.cmd == "value":
            sys.stdout.write(jdumps({p: value_to_dict(match_value(p)) for p in ns.payloads}))
            return 0

        if ns.cmd == "pseudo":
            sys.stdout.write(jdumps({n: canonical_pseudo(n) for n in ns.names}))
            return 0

    except GrammarError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
