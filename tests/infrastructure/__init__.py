"""
Shared test infrastructure for acss-grammar.

Modules:
- file_utils: creating files and rules files
- cli_utils: running the CLI in a subprocess
"""

from .file_utils import write, write_rules
from .cli_utils import run_cli, jload

__all__ = [
    "write",
    "write_rules",
    "run_cli",
    "jload",
]
