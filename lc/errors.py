"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from LCUserError.

Programming errors and bugs should NOT inherit from LCUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path


class LCUserError(Exception):
    """
    Base class for all user-facing errors in Line Counter.

    These errors indicate problems that the user can fix:
    configuration issues, unknown extensions, unreadable files, etc.
    """
    pass


class ConfigError(LCUserError):
    """Invalid configuration file, option value or extension."""
    pass


class StyleError(ConfigError):
    """Invalid comment style declaration (e.g. an empty token)."""
    pass


class FileCountError(LCUserError):
    """A single file could not be opened or read. Non-fatal for a run."""
    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading {path}: {cause}")


class TraversalError(LCUserError):
    """Directory walk failed. Fatal for a run."""
    def __init__(self, path: Path | str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Error walking directory {path}: {cause}")


__all__ = ["LCUserError", "ConfigError", "StyleError", "FileCountError", "TraversalError"]
