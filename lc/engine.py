"""
Counting run orchestration.

Resolves the comment style once, walks the tree and sums per-file counts.
Per-file read errors are tolerated (the file is left out of the totals);
traversal errors abort the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import load_config
from .counter import count_lines
from .errors import ConfigError, FileCountError
from .filtering.fs import build_ignore_spec, iter_files
from .report import CountReport, FileErrorRow, FileRow
from .styles.registry import StyleRegistry, default_registry, normalize_extension
from .types import RunOptions

logger = logging.getLogger(__name__)

__all__ = ["run_count", "resolve_registry"]


def run_count(
    root: Path,
    options: RunOptions,
    *,
    registry: Optional[StyleRegistry] = None,
) -> CountReport:
    """
    Count lines of all files under `root` ending with the requested extension.

    Args:
        root: Directory to walk
        options: Run options
        registry: Style table; defaults to the built-in one

    Returns:
        Report with totals, per-file rows, per-file errors and warnings

    Raises:
        ConfigError: empty extension or invalid config
        TraversalError: the tree could not be walked
    """
    ext = normalize_extension(options.extension)
    if not ext or ext == ".":
        raise ConfigError("Please provide a file extension (e.g. .go, .py)")

    cfg = load_config(root, options.config_path)
    registry = (registry or default_registry()).with_styles(cfg.styles)

    report = CountReport(root=str(root), extension=ext, exclude_comments=options.exclude_comments)

    if options.exclude_comments and ext not in registry:
        msg = f"No comment style defined for {ext}. Treating all lines as code."
        logger.warning(msg)
        report.warnings.append(msg)
        report.exclude_comments = False

    style = registry.lookup(ext)

    use_gitignore = cfg.gitignore if options.use_gitignore is None else options.use_gitignore
    ignore_spec = build_ignore_spec(root, cfg.exclude, use_gitignore=use_gitignore)

    for path in iter_files(root, ext, ignore_spec=ignore_spec):
        try:
            lines = count_lines(path, style, report.exclude_comments)
        except FileCountError as e:
            logger.error(str(e))
            report.errors.append(FileErrorRow(path=str(path), error=str(e.cause)))
            continue
        report.files.append(FileRow(path=str(path), lines=lines))
        report.total_lines += lines
        report.total_files += 1

    return report


def resolve_registry(root: Path, config_path: Optional[Path] = None) -> StyleRegistry:
    """Built-in styles plus those declared in the root (or explicit) config."""
    return default_registry().with_styles(load_config(root, config_path).styles)
