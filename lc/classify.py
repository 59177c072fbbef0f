"""
Comment-aware line classifier.

Decides whether a line of text is code for a given CommentStyle, carrying
the open block comment (if any) from one line to the next.

Token priority inside a line:
  • the left-most token wins;
  • a block start and a line token at the same index → the block wins
    (so Lua's '--[[' is not swallowed by '--');
  • two block starts at the same index → the pair declared first wins.

Block comments do not nest: while a block is open only its end token is
searched for, any other start token inside it is plain text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from .styles.model import BlockPair, CommentStyle

__all__ = [
    "ScanState",
    "NORMAL",
    "scan_text",
    "classify_line",
    "iter_code_flags",
]


@dataclass(frozen=True)
class ScanState:
    """Carry state between lines of one file."""
    in_block: bool = False
    end_token: str = ""  # meaningful only when in_block

    @classmethod
    def open(cls, end_token: str) -> "ScanState":
        return cls(in_block=True, end_token=end_token)


NORMAL = ScanState()


def _find_line_token(text: str, style: CommentStyle) -> int:
    best = -1
    for tok in style.line_tokens:
        idx = text.find(tok)
        if idx != -1 and (best == -1 or idx < best):
            best = idx
    return best


def _find_block_start(text: str, style: CommentStyle) -> Optional[Tuple[int, BlockPair]]:
    found: Optional[Tuple[int, BlockPair]] = None
    for pair in style.block_pairs:
        idx = text.find(pair.start)
        if idx != -1 and (found is None or idx < found[0]):
            found = (idx, pair)
    return found


def scan_text(text: str, style: CommentStyle) -> Tuple[str, Optional[str]]:
    """
    Strip comments from a piece of text that starts outside any block comment.

    Returns (cleaned_text, opens) where `opens` is the end token of a block
    comment left unterminated at the end of the text, or None.
    """
    while True:
        text = text.strip()
        if not text:
            return text, None

        line_idx = _find_line_token(text, style)
        block = _find_block_start(text, style)

        # Block wins ties
        if block is not None and (line_idx == -1 or block[0] <= line_idx):
            block_idx, pair = block
            rest = text[block_idx + len(pair.start):]
            end_idx = rest.find(pair.end)
            if end_idx == -1:
                return text[:block_idx].strip(), pair.end
            text = text[:block_idx] + rest[end_idx + len(pair.end):]
            continue

        if line_idx == -1:
            return text, None

        return text[:line_idx].strip(), None


def classify_line(line: str, state: ScanState, style: CommentStyle) -> Tuple[bool, ScanState]:
    """
    Classify one raw line.

    Returns (is_code, new_state). Pure: the passed state is never modified.
    """
    text = line.strip()
    if not text:
        return False, state

    if state.in_block:
        idx = text.find(state.end_token)
        if idx == -1:
            return False, state
        text = text[idx + len(state.end_token):]
        state = NORMAL

    cleaned, opens = scan_text(text, style)
    if opens is not None:
        state = ScanState.open(opens)
    return bool(cleaned), state


def iter_code_flags(lines: Iterable[str], style: CommentStyle) -> Iterator[bool]:
    """Per-line code decisions for one file, threading a fresh ScanState."""
    state = NORMAL
    for line in lines:
        is_code, state = classify_line(line, state, style)
        yield is_code
