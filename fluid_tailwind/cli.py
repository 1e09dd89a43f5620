from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich import print

from .build import build_css
from .config import BuildConfig, find_config, load_config
from .errors import FluidError
from .log import setup_logging


def _build_config(args: argparse.Namespace) -> BuildConfig:
    cfg_path = Path(args.config) if args.config else find_config(Path.cwd())
    config = load_config(cfg_path) if cfg_path else BuildConfig()
    if args.content:
        config.content = list(args.content)
        config.base_dir = Path.cwd()
    if args.output:
        config.output = Path(args.output).resolve()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="fluid-tailwind")
    p.add_argument(
        "--log-level",
        default=None,
        help="CRITICAL|ERROR|WARNING|INFO|DEBUG (or env FLUID_TAILWIND_LOG_LEVEL)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Scan content files and write the stylesheet")
    p_build.add_argument("--config", default=None, help="YAML config (default: ./fluid.config.yaml if present)")
    p_build.add_argument("--content", action="append", default=None, help="Content glob; repeatable")
    p_build.add_argument("--output", default=None, help="CSS file to write")

    args = p.parse_args(argv)
    setup_logging(args.log_level)
    log = logging.getLogger("fluid_tailwind")

    try:
        result = build_css(_build_config(args))
    except FluidError as err:
        log.error("%s", err)
        return 1
    print(f"[bold]Generated {result.rule_count} CSS rules[/bold] -> {result.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
