from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pathspec

DEFAULT_INCLUDE = ("*.html", "*.htm", "*.jsx", "*.tsx", "*.js", "*.vue", "*.md")


def read_text(path: Path) -> str:
    """Document text; undecodable bytes are dropped rather than failing the scan."""
    return path.read_text(encoding="utf-8", errors="ignore")


def compile_spec(patterns: Sequence[str]) -> Optional[pathspec.PathSpec]:
    """PathSpec for gitignore-style patterns; None for an empty list."""
    lines = [p.strip() for p in patterns if p.strip()]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def gitignore_spec(root: Path) -> Optional[pathspec.PathSpec]:
    """Ignore rules of the scan root (comments dropped); None without a .gitignore."""
    ignore_file = root / ".gitignore"
    if not ignore_file.is_file():
        return None
    rules = read_text(ignore_file).splitlines()
    return compile_spec([r for r in rules if not r.lstrip().startswith("#")])


def iter_files(
    root: Path,
    *,
    include: Sequence[str] = DEFAULT_INCLUDE,
    exclude: Sequence[str] = (),
    use_gitignore: bool = True,
) -> Iterable[Path]:
    """
    Recursive file iterator.

    A file is yielded when its root-relative POSIX path matches `include`
    and matches neither `exclude` nor the root .gitignore.
    Files are yielded in sorted order per directory.
    """
    root = root.resolve()
    spec_include = compile_spec(include)
    spec_exclude = compile_spec(exclude)
    spec_git = gitignore_spec(root) if use_gitignore else None

    for dirpath, dirnames, filenames in os.walk(root):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")

        keep: List[str] = []
        for d in sorted(dirnames):
            rel_dir = Path(dirpath, d).relative_to(root).as_posix() + "/"
            if spec_git and spec_git.match_file(rel_dir):
                continue
            if spec_exclude and spec_exclude.match_file(rel_dir):
                continue
            keep.append(d)
        dirnames[:] = keep

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            rel_posix = p.relative_to(root).as_posix()
            if spec_include and not spec_include.match_file(rel_posix):
                continue
            if spec_exclude and spec_exclude.match_file(rel_posix):
                continue
            if spec_git and spec_git.match_file(rel_posix):
                continue
            yield p
