from pathlib import Path

import pytest

from acss_grammar import Grammar
from acss_grammar.scan import TokenScanner

from tests.infrastructure.file_utils import write_rules

RULES = {
    "B": {"property": "border"},
    "Bd": {"property": "border"},
    "Bgc": {"property": "background-color"},
    "C": {"property": "color"},
    "D": {"property": "display"},
    "Fz": {"property": "font-size"},
    "M": {"property": "margin"},
    "Mb": {"property": "margin-bottom"},
    "W": {"property": "width"},
}

HELPERS = {
    "Cf": {"name": "clearfix"},
    "Ell": {"name": "ellipsis"},
    "Hidden": {"name": "hidden"},
}

RULES_YAML = """
rules:
  Bgc: {property: background-color}
  C: {property: color}
  D: {property: display}
  M: {property: margin}
  Mb: {property: margin-bottom}
helpers:
  - Cf
  - Hidden
"""


@pytest.fixture
def grammar() -> Grammar:
    return Grammar(RULES, HELPERS)


@pytest.fixture
def rules_only_grammar() -> Grammar:
    return Grammar(RULES)


@pytest.fixture
def scanner(grammar: Grammar) -> TokenScanner:
    return TokenScanner(grammar)


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    """Rules file with a few properties and two helpers."""
    return write_rules(tmp_path, RULES_YAML)
