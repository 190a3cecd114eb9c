"""
Rules file loader.

Layout of a rules file (YAML):

    rules:            # identifiers that take a value payload
      Bgc: {property: background-color}
      M: {property: margin}
    helpers:          # identifiers whose payload is optional
      - Cf
      - Hidden

A list of names is shorthand for a mapping with empty descriptors.
Descriptors are kept as loaded and never interpreted here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import RulesFileError
from .grammar import Grammar

_yaml = YAML(typ="safe")

_SECTIONS = ("rules", "helpers")


@dataclass
class RulesConfig:
    rules: Dict[str, Any] = field(default_factory=dict)
    helpers: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict, *, source: str = "<dict>") -> RulesConfig:
        unknown = sorted(str(k) for k in set(raw) - set(_SECTIONS))
        if unknown:
            raise RulesFileError(f"{source}: unknown top-level keys: {', '.join(unknown)}")
        return cls(
            rules=_section(raw.get("rules"), "rules", source),
            helpers=_section(raw.get("helpers"), "helpers", source),
        )

    def grammar(self) -> Grammar:
        return Grammar(self.rules, self.helpers)


def _section(value: Any, name: str, source: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, (dict, list)):
        raise RulesFileError(f"{source}: '{name}' must be a mapping or a list of names")
    for key in value:
        if not isinstance(key, str) or not key:
            raise RulesFileError(f"{source}: '{name}' has invalid identifier {key!r}")
    if isinstance(value, list):
        return {k: {} for k in value}
    return dict(value)


def load_rules(path: Path) -> RulesConfig:
    """
    Read a rules file.

    Raises:
        RulesFileError: file is missing, is not valid YAML or has a wrong layout
    """
    if not path.is_file():
        raise RulesFileError(f"Rules file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise RulesFileError(f"Failed to parse {path}: {e}") from e
    if not isinstance(raw, dict):
        raise RulesFileError(f"YAML must be a mapping: {path}")
    return RulesConfig.from_dict(raw, source=str(path))


__all__ = ["RulesConfig", "load_rules"]
