from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError, StyleError
from .styles.model import CommentStyle, make_style
from .styles.registry import normalize_extension

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
DEFAULT_CFG_FILE = "lc.yaml"

# --------------------------------------------------------------------------- #
# Global defaults (applied when lc.yaml is missing or keys are omitted)
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    "exclude": [],
    "gitignore": False,
    "styles": {},
}

_yaml = YAML(typ="safe")


@dataclass(frozen=True)
class LcConfig:
    exclude: List[str] = field(default_factory=list)
    gitignore: bool = False
    styles: Dict[str, CommentStyle] = field(default_factory=dict)
    source: Optional[Path] = None  # file the config was read from, if any


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values on top of global defaults."""
    cfg = _DEFAULT_CFG.copy()
    cfg.update(raw)
    return cfg


def _str_list(node: Any, where: str) -> List[str]:
    if node is None:
        return []
    if not isinstance(node, list) or not all(isinstance(x, str) for x in node):
        raise ConfigError(f"{where}: must be a list of strings")
    return list(node)


def _block_list(node: Any, where: str) -> List[Tuple[str, str]]:
    if node is None:
        return []
    if not isinstance(node, list):
        raise ConfigError(f"{where}: must be a list of [start, end] pairs")
    out: List[Tuple[str, str]] = []
    for i, pair in enumerate(node):
        if (
            not isinstance(pair, list)
            or len(pair) != 2
            or not all(isinstance(x, str) for x in pair)
        ):
            raise ConfigError(f"{where}[{i}]: expected [start, end] pair of strings")
        out.append((pair[0], pair[1]))
    return out


def _parse_styles(node: Any) -> Dict[str, CommentStyle]:
    if node is None:
        return {}
    if not isinstance(node, dict):
        raise ConfigError("styles: must be a mapping of extension → {line, block}")
    styles: Dict[str, CommentStyle] = {}
    for ext, spec in node.items():
        where = f"styles.{ext}"
        if not isinstance(spec, dict):
            raise ConfigError(f"{where}: must be a mapping")
        extras = set(spec) - {"line", "block"}
        if extras:
            raise ConfigError(f"{where}: unexpected keys: {sorted(extras)!r}")
        line = _str_list(spec.get("line"), f"{where}.line")
        block = _block_list(spec.get("block"), f"{where}.block")
        try:
            styles[normalize_extension(str(ext))] = make_style(line=line, block=block)
        except StyleError as e:
            raise StyleError(f"{where}: {e}") from e
    return styles


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(root: Path, path: Optional[Path] = None) -> LcConfig:
    """
    Load lc.yaml.

    • Without an explicit path, look for lc.yaml in root; if it is missing,
      return defaults.
    • An explicit path that does not exist is an error.
    • schema_version, when present, must match the tool's version.
    """
    explicit = path is not None
    cfg_path = path if path is not None else root / DEFAULT_CFG_FILE

    if not cfg_path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {cfg_path}")
        return LcConfig()

    try:
        with cfg_path.open(encoding="utf-8") as f:
            raw = _yaml.load(f) or {}
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Failed to read config {cfg_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{cfg_path}: must be a mapping with keys: schema_version?, exclude?, gitignore?, styles?")

    extras = set(raw) - set(_DEFAULT_CFG)
    if extras:
        raise ConfigError(f"{cfg_path}: unexpected keys: {sorted(extras)!r}")

    if raw.get("schema_version", SCHEMA_VERSION) != SCHEMA_VERSION:
        raise ConfigError(
            f"Unsupported config schema {raw.get('schema_version')} "
            f"(tool expects {SCHEMA_VERSION})"
        )

    cfg = _merge_defaults(raw)
    gitignore = cfg["gitignore"]
    if not isinstance(gitignore, bool):
        raise ConfigError("gitignore: must be true or false")

    logger.debug("Loaded config %s", cfg_path)
    return LcConfig(
        exclude=_str_list(cfg["exclude"], "exclude"),
        gitignore=gitignore,
        styles=_parse_styles(cfg["styles"]),
        source=cfg_path,
    )


__all__ = ["LcConfig", "load_config", "DEFAULT_CFG_FILE", "SCHEMA_VERSION"]
