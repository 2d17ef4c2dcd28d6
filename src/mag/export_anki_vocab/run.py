"""
Vocabulary exporter - Runner

Usage:
    mag-export-vocab [-v] [-u UNIT] [-n NUM] [-c COUNT] [-o OUTFILE] [vocab.yml]
    python -m mag.export_anki_vocab ...
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import Callable, Dict, List, Optional, TextIO

from pydantic import ValidationError

from mag.common.anki_csv import open_output
from mag.common.dataset import UnitVocab, load_vocab
from mag.common.errors import MagError, exit_with_error
from mag.common.logging_config import setup_logging
from mag.config_models import VocabExportOptions, add_common_arguments

from .exporter import export_vocab

logger = logging.getLogger(__name__)

Exporter = Callable[[TextIO, List[UnitVocab], VocabExportOptions], Dict[str, int]]


def build_parser(prog: str = "mag-export-vocab") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Export the MAG vocab.yml dataset to Anki as a CSV",
    )
    add_common_arguments(parser, "vocab.yml", "export")
    parser.add_argument("-n", "--num", type=int, default=0,
                        help="export all units up to and including this unit number")
    parser.add_argument("-c", "--count", type=int, default=0, help="export only this many entries")
    parser.add_argument("-o", "--outfile", help="path to output filename (use stdout if not set)")
    return parser


def run_cli(opts: VocabExportOptions, exporter: Exporter = export_vocab) -> Dict[str, int]:
    """Load the dataset and write the deck; the output is opened only once the dataset loads."""
    units = load_vocab(opts.filename)
    with open_output(opts.outfile) as out:
        stats = exporter(out, units, opts)
    logger.info(f"Exported {stats['rows']} cards: {json.dumps(stats, sort_keys=True)}",
                extra={"dataset": str(opts.filename)})
    return stats


def main(argv: Optional[List[str]] = None, exporter: Exporter = export_vocab, prog: str = "mag-export-vocab") -> int:
    parser = build_parser(prog)
    args = parser.parse_args(argv)
    try:
        opts = VocabExportOptions(**vars(args))
    except ValidationError as ve:
        parser.error(str(ve))

    setup_logging("DEBUG" if opts.verbose else "INFO")
    try:
        run_cli(opts, exporter)
    except MagError as e:
        exit_with_error(str(e))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
