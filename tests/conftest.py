import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from lc.styles import default_registry

REPO_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = Path(__file__).resolve().parent / "data"


def write(p: Path, text: str) -> Path:
    """Write text to a file, creating parent directories as needed."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    env.pop("LC_DEBUG", None)
    return subprocess.run(
        [sys.executable, "-m", "lc.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    return json.loads(s)


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def c_style(registry):
    return registry.lookup(".go")
