from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .engine import resolve_registry, run_count
from .errors import LCUserError
from .report import render_text
from .styles.registry import StyleRegistry
from .types import RunOptions
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lc",
        description="Line Counter (comment-aware source line counting)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_count = sub.add_parser("count", help="count lines of files with a given extension")
    sp_count.add_argument("root", nargs="?", default=".", help="directory to walk (default: .)")
    sp_count.add_argument("--ext", required=True, help="file extension to count (e.g. .go, py)")
    sp_count.add_argument(
        "--skip-comments",
        action="store_true",
        help="exclude comment-only and blank lines from the count",
    )
    sp_count.add_argument("--json", action="store_true", help="print a JSON report instead of text")
    sp_count.add_argument("--per-file", action="store_true", help="list every counted file in text output")
    sp_count.add_argument(
        "--gitignore",
        action="store_true",
        default=None,
        help="also skip paths matched by the root .gitignore",
    )
    sp_count.add_argument("--config", metavar="PATH", help="config file (default: <root>/lc.yaml)")

    sp_list = sub.add_parser("list", help="lists of entities (JSON)")
    sp_list.add_argument("what", choices=["styles", "extensions"], help="what to print")
    sp_list.add_argument("root", nargs="?", default=".", help="directory whose lc.yaml styles are merged in (default: .)")
    sp_list.add_argument("--config", metavar="PATH", help="config file (default: <root>/lc.yaml)")

    return p


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if (verbose or os.environ.get("LC_DEBUG")) else logging.INFO
    root = logging.getLogger("lc")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _config_path(ns: argparse.Namespace) -> Optional[Path]:
    return Path(ns.config) if ns.config else None


def _opts(ns: argparse.Namespace) -> RunOptions:
    return RunOptions(
        extension=ns.ext,
        exclude_comments=bool(ns.skip_comments),
        config_path=_config_path(ns),
        use_gitignore=ns.gitignore,
    )


def _list_styles(registry: StyleRegistry) -> List[Dict[str, Any]]:
    return [
        {
            "extension": ext,
            "line": sorted(style.line_tokens),
            "block": [[bp.start, bp.end] for bp in style.block_pairs],
        }
        for ext, style in registry.items()
    ]


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(ns.verbose))

    try:
        if ns.cmd == "count":
            report = run_count(Path(ns.root), _opts(ns))
            if ns.json:
                sys.stdout.write(json.dumps(report.model_dump(mode="json", by_alias=True), ensure_ascii=False))
            else:
                sys.stdout.write(render_text(report, per_file=bool(ns.per_file)))
            return 0

        if ns.cmd == "list":
            registry = resolve_registry(Path(ns.root), _config_path(ns))
            data: Dict[str, Any]
            if ns.what == "styles":
                data = {"styles": _list_styles(registry)}
            else:
                data = {"extensions": registry.extensions()}
            sys.stdout.write(json.dumps(data, ensure_ascii=False))
            return 0

    except LCUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
