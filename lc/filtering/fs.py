from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pathspec

from ..errors import TraversalError

__all__ = ["build_ignore_spec", "iter_files"]


def _gitignore_lines(root: Path) -> List[str]:
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return []
    lines = []
    for ln in gitignore.read_text(encoding="utf-8", errors="ignore").splitlines():
        ln = ln.strip()
        if ln and not ln.startswith("#"):
            lines.append(ln)
    return lines


def build_ignore_spec(
    root: Path,
    patterns: Sequence[str] = (),
    *,
    use_gitignore: bool = False,
) -> Optional[pathspec.PathSpec]:
    """
    Build PathSpec from root .gitignore (if requested) and extra exclude patterns.
    Return None if there is nothing to ignore.
    """
    lines: List[str] = []
    if use_gitignore:
        lines.extend(_gitignore_lines(root))
    lines.extend(p for p in patterns if p.strip())
    if not lines:
        return None
    return pathspec.PathSpec.from_lines(pathspec.patterns.GitWildMatchPattern, lines)


def _raise_walk_error(err: OSError) -> None:
    raise TraversalError(err.filename or "?", err)


def iter_files(
    root: Path,
    suffix: str,
    *,
    ignore_spec: Optional[pathspec.PathSpec] = None,
) -> Iterable[Path]:
    """
    Recursive iterator of files whose name ends with `suffix` (literal,
    case-sensitive match). Never enters .git; directories matched by
    `ignore_spec` are pruned as a whole. Order is deterministic.

    Raises:
        TraversalError: root is missing or a directory cannot be listed
    """
    if not root.is_dir():
        raise TraversalError(root, FileNotFoundError(f"not a directory: {root}"))

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")

        if ignore_spec is not None:
            keep: List[str] = []
            for d in dirnames:
                rel_dir = Path(dirpath, d).relative_to(root).as_posix()
                if not ignore_spec.match_file(rel_dir + "/"):
                    keep.append(d)
            dirnames[:] = keep
        dirnames.sort()

        for fn in sorted(filenames):
            if not fn.endswith(suffix):
                continue
            p = Path(dirpath, fn)
            if ignore_spec is not None and ignore_spec.match_file(p.relative_to(root).as_posix()):
                continue
            yield p
