from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RunOptions:
    extension: str                      # ".go", "py", ...
    exclude_comments: bool = False
    config_path: Optional[Path] = None  # explicit --config; otherwise <root>/lc.yaml
    use_gitignore: Optional[bool] = None  # None → take from config
