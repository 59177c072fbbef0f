from .fs import build_ignore_spec, iter_files

__all__ = ["build_ignore_spec", "iter_files"]
