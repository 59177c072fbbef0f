from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .builtin import BUILTIN_STYLES
from .model import CommentStyle

__all__ = [
    "StyleRegistry",
    "default_registry",
    "normalize_extension",
]


def normalize_extension(ext: str) -> str:
    """'go' → '.go'; '.go' stays as is. Case is preserved."""
    ext = ext.strip()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


class StyleRegistry:
    """
    Immutable extension → CommentStyle lookup table.

    Constructed explicitly and passed to whoever needs it;
    there is no process-wide registry.
    """

    def __init__(self, styles: Mapping[str, CommentStyle]):
        self._styles: Mapping[str, CommentStyle] = MappingProxyType(
            {normalize_extension(ext): style for ext, style in styles.items()}
        )

    def lookup(self, extension: str) -> Optional[CommentStyle]:
        """Style for the extension, or None if it is not mapped."""
        return self._styles.get(normalize_extension(extension))

    def __contains__(self, extension: object) -> bool:
        return isinstance(extension, str) and normalize_extension(extension) in self._styles

    def extensions(self) -> List[str]:
        return sorted(self._styles)

    def items(self) -> List[Tuple[str, CommentStyle]]:
        """(extension, style) pairs sorted by extension."""
        return sorted(self._styles.items())

    def with_styles(self, extra: Mapping[str, CommentStyle]) -> "StyleRegistry":
        """New registry where `extra` entries are added or override existing ones."""
        merged: Dict[str, CommentStyle] = dict(self._styles)
        for ext, style in extra.items():
            merged[normalize_extension(ext)] = style
        return StyleRegistry(merged)


def default_registry() -> StyleRegistry:
    """Registry with the built-in language table."""
    return StyleRegistry(BUILTIN_STYLES)
