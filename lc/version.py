from __future__ import annotations

from importlib import metadata

DIST_NAME = "line-counter"


def tool_version() -> str:
    """Installed version of the line-counter distribution ("0.0.0" when running from a source tree)."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"

__all__ = ["tool_version", "DIST_NAME"]
