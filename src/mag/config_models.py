from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class UnitSelection(BaseModel):
    """Unit filter shared by every tool.

    - unit: export/lint only this unit number (0 = all)
    - num: cumulative selection of every unit numbered up to and including num (0 = all)
    """

    unit: int = Field(default=0, ge=0, description="Only this unit number (0 = all units)")
    num: int = Field(default=0, ge=0, description="All units up to and including this number (0 = no limit)")

    def selects(self, unit_number: int) -> bool:
        if self.unit > 0 and unit_number != self.unit:
            return False
        if self.num > 0 and unit_number > self.num:
            return False
        return True


class VocabExportOptions(UnitSelection):
    """Options for the vocabulary exporters (export_anki_vocab, export_to_anki)."""

    filename: Path = Field(default=Path("vocab.yml"), description="Vocab YAML dataset to read")
    count: int = Field(default=0, ge=0, description="Export only this many words (0 = all)")
    outfile: Optional[Path] = Field(default=None, description="Output path (stdout if not set)")
    verbose: bool = Field(default=False, description="Debug logging")


class PPExportOptions(UnitSelection):
    """Options for the principal-parts exporter."""

    filename: Path = Field(default=Path("pp.yml"), description="Principal parts YAML dataset to read")
    reverse: bool = Field(default=False, description="English-to-Greek output format")
    incremental: bool = Field(default=False, description="Split into incremental subdecks of pp 1-3,6,4-5")
    outfile: Optional[Path] = Field(default=None, description="Output path (stdout if not set)")
    verbose: bool = Field(default=False, description="Debug logging")


class LintOptions(UnitSelection):
    filename: Path = Field(default=Path("pp.yml"), description="Principal parts YAML dataset to read")
    verbose: bool = Field(default=False, description="Debug logging")


def add_common_arguments(parser: argparse.ArgumentParser, default_filename: str, what: str) -> None:
    """Register the flags every tool accepts."""
    parser.add_argument("-v", "--verbose", action="store_true", help="display verbose output")
    parser.add_argument("-u", "--unit", type=int, default=0, help=f"{what} only this unit number")
    parser.add_argument(
        "filename",
        nargs="?",
        default=default_filename,
        help=f"yml dataset to read (default: {default_filename})",
    )
