from .model import BlockPair, CommentStyle, make_style
from .registry import StyleRegistry, default_registry, normalize_extension

__all__ = [
    "BlockPair",
    "CommentStyle",
    "make_style",
    "StyleRegistry",
    "default_registry",
    "normalize_extension",
]
