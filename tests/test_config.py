from pathlib import Path
import textwrap

import pytest

from lc.config import LcConfig, load_config
from lc.errors import ConfigError, StyleError

from .conftest import write


def _cfg(root: Path, text: str) -> Path:
    return write(root / "lc.yaml", textwrap.dedent(text).strip() + "\n")


def test_defaults_without_file(tmp_path: Path):
    cfg = load_config(tmp_path)
    assert cfg == LcConfig()
    assert cfg.exclude == [] and cfg.gitignore is False and cfg.styles == {}


def test_full_config(tmp_path: Path):
    _cfg(tmp_path, """
    schema_version: 1
    exclude: ["vendor/", "**/gen/**"]
    gitignore: true
    styles:
      proto:
        line: ["//"]
        block: [["/*", "*/"]]
      .pas:
        block: [["{", "}"]]
    """)
    cfg = load_config(tmp_path)
    assert cfg.exclude == ["vendor/", "**/gen/**"]
    assert cfg.gitignore is True
    assert cfg.source == tmp_path / "lc.yaml"
    proto = cfg.styles[".proto"]
    assert proto.line_tokens == frozenset({"//"})
    assert [(b.start, b.end) for b in proto.block_pairs] == [("/*", "*/")]
    assert cfg.styles[".pas"].line_tokens == frozenset()


def test_empty_file_gives_defaults(tmp_path: Path):
    write(tmp_path / "lc.yaml", "")
    cfg = load_config(tmp_path)
    assert cfg.exclude == [] and cfg.styles == {}


def test_explicit_path(tmp_path: Path):
    p = write(tmp_path / "conf" / "custom.yaml", "exclude: ['x/']\n")
    assert load_config(tmp_path, p).exclude == ["x/"]


def test_explicit_missing_path(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "missing.yaml")


def test_schema_mismatch(tmp_path: Path):
    _cfg(tmp_path, "schema_version: 7")
    with pytest.raises(ConfigError, match="Unsupported config schema"):
        load_config(tmp_path)


@pytest.mark.parametrize("text,where", [
    ("exclude: vendor", "exclude"),
    ("gitignore: maybe", "gitignore"),
    ("styles: [1, 2]", "styles"),
    ("styles:\n  .x: ['#']", "styles..x"),
    ("styles:\n  .x:\n    line: '#'", "styles..x.line"),
    ("styles:\n  .x:\n    block: [['/*']]", "styles..x.block[0]"),
    ("styles:\n  .x:\n    nested: true", "styles..x"),
    ("unknown: 1", "unexpected keys"),
    ("- a\n- b", "must be a mapping"),
])
def test_invalid_config(tmp_path: Path, text, where):
    write(tmp_path / "lc.yaml", text + "\n")
    with pytest.raises(ConfigError) as ei:
        load_config(tmp_path)
    assert where in str(ei.value)


def test_empty_token_in_style(tmp_path: Path):
    write(tmp_path / "lc.yaml", "styles:\n  .x:\n    line: ['']\n")
    with pytest.raises(StyleError, match=r"styles\.\.x"):
        load_config(tmp_path)


def test_broken_yaml(tmp_path: Path):
    write(tmp_path / "lc.yaml", "exclude: [unclosed\n")
    with pytest.raises(ConfigError, match="Failed to read config"):
        load_config(tmp_path)
