from __future__ import annotations

from importlib import metadata

DIST_NAME = "acss-grammar"


def tool_version() -> str:
    """Version of the installed acss-grammar distribution, "0.0.0" for a source checkout."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"

__all__ = ["DIST_NAME", "tool_version"]
