"""
Utilities for working with CLI in tests.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Runs acss_grammar.cli with specified arguments in the given directory.

    Args:
        root: Working directory for command execution
        *args: Command line arguments for acss_grammar.cli

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    env.pop("ACSS_DEBUG", None)
    return subprocess.run(
        [sys.executable, "-m", "acss_grammar.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    """
    Parses a JSON string, automatically removing ANSI escape codes.

    Some IDEs (e.g., PyCharm) may add ANSI escape sequences
    to subprocess output for colored console highlighting.

    Args:
        s: JSON string (possibly with ANSI escape codes)

    Returns:
        Parsed object
    """
    import re
    clean = re.sub(r'\x1b\[[0-9;]*m', '', s)
    return json.loads(clean)


__all__ = ["run_cli", "jload"]
