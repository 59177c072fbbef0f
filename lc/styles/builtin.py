from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .model import CommentStyle, make_style

# Shared comment style constants for common language families

# C-family: //, /* */
C_STYLE = make_style(line=["//"], block=[("/*", "*/")])

# Hash-style: Perl, Bash, YAML, R, PowerShell
SHELL_STYLE = make_style(line=["#"])

# Python docstrings are treated as block comments
PYTHON_STYLE = make_style(line=["#"], block=[('"""', '"""'), ("'''", "'''")])

HTML_STYLE = make_style(block=[("<!--", "-->")])

LISP_STYLE = make_style(line=[";"])


BUILTIN_STYLES: Mapping[str, CommentStyle] = MappingProxyType({
    ".c": C_STYLE,
    ".cpp": C_STYLE,
    ".java": C_STYLE,
    ".js": C_STYLE,
    ".ts": C_STYLE,
    ".cs": C_STYLE,
    ".swift": C_STYLE,
    ".rs": C_STYLE,
    ".go": C_STYLE,
    ".kt": C_STYLE,
    ".php": C_STYLE,
    ".css": make_style(block=[("/*", "*/")]),

    ".py": PYTHON_STYLE,
    ".rb": make_style(line=["#"], block=[("=begin", "=end")]),
    ".pl": SHELL_STYLE,
    ".sh": SHELL_STYLE,
    ".yaml": SHELL_STYLE,
    ".yml": SHELL_STYLE,
    ".r": SHELL_STYLE,
    ".ps1": SHELL_STYLE,

    ".sql": make_style(line=["--"], block=[("/*", "*/")]),
    ".lua": make_style(line=["--"], block=[("--[[", "]]")]),
    ".hs": make_style(line=["--"], block=[("{-", "-}")]),
    ".ada": make_style(line=["--"]),

    ".vb": make_style(line=["'"]),

    ".asm": LISP_STYLE,
    ".lisp": LISP_STYLE,
    ".clj": LISP_STYLE,
    ".ini": make_style(line=[";", "#"]),

    # Matlab/Octave
    ".m": make_style(line=["%"], block=[("%{", "%}")]),
    ".tex": make_style(line=["%"]),

    ".bat": make_style(line=["REM", "::"]),
    ".html": HTML_STYLE,
    ".xml": HTML_STYLE,
    ".pas": make_style(block=[("(*", "*)"), ("{", "}")]),
})


__all__ = ["BUILTIN_STYLES", "C_STYLE", "SHELL_STYLE", "PYTHON_STYLE"]
