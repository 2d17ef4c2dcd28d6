"""
First-generation vocabulary exporter - Runner

Usage:
    mag-export-to-anki [-v] [-u UNIT] [-n NUM] [-c COUNT] [-o OUTFILE] [vocab.yml]
"""
from __future__ import annotations

from typing import List, Optional

from mag.export_anki_vocab.run import main as _vocab_main

from .exporter import export_vocab


def main(argv: Optional[List[str]] = None) -> int:
    return _vocab_main(argv, exporter=export_vocab, prog="mag-export-to-anki")


if __name__ == "__main__":
    raise SystemExit(main())
