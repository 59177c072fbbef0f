from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple

from ..errors import StyleError


@dataclass(frozen=True)
class BlockPair:
    """Block comment delimiters (e.g., ('/*', '*/'))."""

    start: str
    end: str

    def __post_init__(self) -> None:
        if not self.start or not self.end:
            raise StyleError(f"Block comment tokens must be non-empty: {self.start!r}, {self.end!r}")


@dataclass(frozen=True)
class CommentStyle:
    """Comment syntax description for a language."""

    line_tokens: FrozenSet[str] = field(default_factory=frozenset)
    """Tokens that start a comment running to end of line (e.g., '//', '#')."""

    block_pairs: Tuple[BlockPair, ...] = ()
    """Ordered block comment pairs (e.g., ('/*', '*/'), ('<!--', '-->'))."""

    def __post_init__(self) -> None:
        for tok in self.line_tokens:
            if not tok:
                raise StyleError("Line comment tokens must be non-empty")


def make_style(line: Iterable[str] = (), block: Iterable[Tuple[str, str]] = ()) -> CommentStyle:
    """Build a CommentStyle from plain strings and (start, end) tuples."""
    return CommentStyle(
        line_tokens=frozenset(line),
        block_pairs=tuple(BlockPair(start, end) for start, end in block),
    )


__all__ = ["BlockPair", "CommentStyle", "make_style"]
