"""
Principal-parts linter - Runner

Usage:
    mag-lint-pp [-v] [-u UNIT] [pp.yml]
    python -m mag.lint_pp ...

Exits 1 when the dataset cannot be loaded or any lint error is found.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional, TextIO

from pydantic import ValidationError

from mag.common.dataset import load_pp
from mag.common.errors import MagError, exit_with_error
from mag.common.logging_config import setup_logging
from mag.config_models import LintOptions, add_common_arguments

from .linter import lint_pp, write_stats

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mag-lint-pp",
        description="Load and validate the MAG pp.yml dataset",
    )
    add_common_arguments(parser, "pp.yml", "lint")
    return parser


def run_cli(out: TextIO, opts: LintOptions) -> Dict[str, int]:
    units = load_pp(opts.filename)
    stats: Dict[str, int] = {}
    stats["errors"] = lint_pp(out, units, opts, stats)
    write_stats(out, stats)
    logger.debug("Lint finished", extra={"dataset": str(opts.filename), "errors": stats["errors"]})
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        opts = LintOptions(**vars(args))
    except ValidationError as ve:
        parser.error(str(ve))

    setup_logging("DEBUG" if opts.verbose else "INFO")
    try:
        stats = run_cli(sys.stdout, opts)
    except MagError as e:
        exit_with_error(str(e))
    return 1 if stats["errors"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
