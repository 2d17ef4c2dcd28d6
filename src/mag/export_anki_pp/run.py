"""
Principal-parts exporter - Runner

Usage:
    mag-export-pp [-v] [-u UNIT] [-n NUM] [-r] [-i] [-o OUTFILE] [pp.yml]
    python -m mag.export_anki_pp ...
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from mag.common.anki_csv import open_output
from mag.common.dataset import load_pp
from mag.common.errors import MagError, exit_with_error
from mag.common.logging_config import setup_logging
from mag.config_models import PPExportOptions, add_common_arguments

from .exporter import export_pp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mag-export-pp",
        description="Export the MAG pp.yml dataset as an Anki-format CSV",
    )
    add_common_arguments(parser, "pp.yml", "export")
    parser.add_argument("-n", "--num", type=int, default=0,
                        help="export all units up to and including this unit number")
    parser.add_argument("-i", "--incr", dest="incremental", action="store_true",
                        help="split into incremental subdecks of pp 1-3,6,4-5")
    parser.add_argument("-r", "--rev", dest="reverse", action="store_true",
                        help="export in reverse output format i.e. English-to-Greek")
    parser.add_argument("-o", "--outfile", help="path to output filename (use stdout if not set)")
    return parser


def run_cli(opts: PPExportOptions) -> Dict[str, int]:
    units = load_pp(opts.filename)
    with open_output(opts.outfile) as out:
        stats = export_pp(out, units, opts)
    logger.info(f"Exported {stats['rows']} cards: {json.dumps(stats, sort_keys=True)}",
                extra={"dataset": str(opts.filename)})
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        opts = PPExportOptions(**vars(args))
    except ValidationError as ve:
        parser.error(str(ve))

    setup_logging("DEBUG" if opts.verbose else "INFO")
    try:
        run_cli(opts)
    except MagError as e:
        exit_with_error(str(e))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
