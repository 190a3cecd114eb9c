from __future__ import annotations

import json
from pathlib import PurePath
from typing import Any


def _encode(obj: Any) -> Any:
    # TokenMatch, ScanResult
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if isinstance(obj, PurePath):
        return obj.as_posix()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: Any) -> str:
    """
    Compact JSON for CLI answers: ensure_ascii=False, no trailing newline.
    Result records and paths are encoded through `_encode`.
    """
    return json.dumps(obj, ensure_ascii=False, default=_encode)
