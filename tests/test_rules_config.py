"""
Tests for loading property tables from YAML.
"""

from pathlib import Path

import pytest

from acss_grammar.config import RulesConfig, load_rules
from acss_grammar.errors import GrammarError, RulesFileError

from tests.infrastructure import write, write_rules


def test_load_rules(rules_file: Path):
    cfg = load_rules(rules_file)
    assert cfg.rules["Bgc"] == {"property": "background-color"}
    assert set(cfg.helpers) == {"Cf", "Hidden"}
    assert cfg.helpers["Cf"] == {}


def test_loaded_grammar(rules_file: Path):
    g = load_rules(rules_file).grammar()
    assert g.decompose("D_Bgc(red)!:h--md").prop == "Bgc"
    assert g.decompose("Hidden").is_helper is True
    assert g.decompose("W(1)") is None


def test_missing_sections(tmp_path: Path):
    cfg = load_rules(write_rules(tmp_path, "rules:\n  C: {}\n"))
    assert cfg.helpers == {}
    assert list(cfg.rules) == ["C"]


def test_empty_file(tmp_path: Path):
    cfg = load_rules(write(tmp_path / "rules.yaml", ""))
    assert cfg == RulesConfig()


def test_missing_file(tmp_path: Path):
    with pytest.raises(RulesFileError, match="not found"):
        load_rules(tmp_path / "nope.yaml")


def test_not_a_mapping(tmp_path: Path):
    with pytest.raises(RulesFileError, match="mapping"):
        load_rules(write(tmp_path / "rules.yaml", "- a\n- b\n"))


def test_unknown_top_level_key(tmp_path: Path):
    with pytest.raises(RulesFileError, match="unknown top-level keys: extra"):
        load_rules(write_rules(tmp_path, "rules: {}\nextra: 1\n"))


def test_bad_section_type(tmp_path: Path):
    with pytest.raises(RulesFileError, match="'helpers' must be"):
        load_rules(write_rules(tmp_path, "helpers: 3\n"))


def test_non_string_identifier(tmp_path: Path):
    with pytest.raises(RulesFileError, match="invalid identifier 12"):
        load_rules(write_rules(tmp_path, "rules:\n  12: {}\n"))


def test_invalid_yaml(tmp_path: Path):
    with pytest.raises(RulesFileError, match="Failed to parse"):
        load_rules(write(tmp_path / "rules.yaml", "rules: [unclosed\n"))


def test_errors_are_user_facing():
    assert issubclass(RulesFileError, GrammarError)


def test_from_dict():
    cfg = RulesConfig.from_dict({"rules": {"M": None}, "helpers": ["Cf"]})
    assert cfg.rules == {"M": None}
    assert cfg.helpers == {"Cf": {}}
