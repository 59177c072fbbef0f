from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .classify import iter_code_flags
from .errors import FileCountError
from .styles.model import CommentStyle

logger = logging.getLogger(__name__)

__all__ = ["count_lines"]


def count_lines(path: Path, style: Optional[CommentStyle], exclude_comments: bool) -> int:
    """
    Count lines of a single file.

    Args:
        path: File to read (UTF-8, broken bytes are ignored)
        style: Comment style of the file's language
        exclude_comments: If False, every line counts (blank lines included)

    Returns:
        Number of lines counted as code

    Raises:
        FileCountError: the file could not be opened or read; no partial count
    """
    if exclude_comments and style is None:
        raise ValueError("comment exclusion requires a comment style")

    try:
        with path.open(encoding="utf-8", errors="ignore") as f:
            if not exclude_comments:
                total = sum(1 for _ in f)
            else:
                total = sum(1 for is_code in iter_code_flags(f, style) if is_code)
    except OSError as e:
        raise FileCountError(path, e) from e

    logger.debug("%s: %d lines", path, total)
    return total
