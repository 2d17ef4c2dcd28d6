"""
Principal-parts exporter: pp.yml -> Anki CSV.

Each verb record yields one card per non-empty principal part after the present,
which serves as the record id. A part written as "X or Y" / "X and Y" yields two
numbered cards.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Set, TextIO, Tuple

from mag.common.anki_csv import deck_path, new_writer, write_header
from mag.common.dataset import PrincipalParts, UnitPP
from mag.common.errors import DatasetError, DuplicateIdError
from mag.common.patterns import GREEK, SPACE
from mag.config_models import PPExportOptions

logger = logging.getLogger(__name__)

DECK_NAME = "Mastronarde AtticGreek Principal Parts"
INCREMENTAL_LABEL = "Incr"
NOTETYPES = {
    False: "MAG PP GrEn",
    True: "MAG PP EnGr",
}

# Incremental subdecks follow the teaching order: pp 1-3, then 6, then 4-5
PP1 = "PPA"
PP2 = "PPB"
PP3 = "PPC"

# (field, card label, incremental subdeck), in export order
PART_LAYOUT: Tuple[Tuple[str, str, str], ...] = (
    ("fu", "Future", PP1),
    ("ao", "Aorist", PP1),
    ("pf", "Perfect", PP3),
    ("pm", "Perfect Middle", PP3),
    ("ap", "Aorist Passive", PP2),
)

MEANINGS = {
    "and": " (diff. meaning)",
    "or": " (same meaning)",
}

_ALTERNATES_RE = re.compile(rf"(\()?({GREEK}+){SPACE}+(or|and){SPACE}+({GREEK}+)(\))?")
_SPACES_RE = re.compile(rf"{SPACE}+")


@dataclass
class PartCard:
    """One principal-part card before it is laid out as a forward or reverse row."""

    part: str
    label: str
    present: str
    number: int = 0
    conj: str = ""

    @property
    def description(self) -> str:
        number = f" #{self.number}" if self.number > 0 else ""
        return f"{self.label}{number} of {self.present}{MEANINGS.get(self.conj, '')}"

    @property
    def tag(self) -> str:
        return "pp::" + _SPACES_RE.sub("_", self.label.lower())

    def row(self, deck: str, reverse: bool) -> List[str]:
        if reverse:
            return [self.part, self.description, self.part, self.tag, deck]
        return [self.part, self.part, self.description, self.tag, deck]


def expand_alternates(present: str, label: str, part: str) -> List[PartCard]:
    """Expand a principal part into its cards.

    "ἔλυσα" gives one card; "ἤνεγκα or ἤνεγκον" and "(ἐῤῥήθην and ἐρρέθην)" give two,
    numbered #1 and #2, keeping the parentheses around each alternate.

    Raises:
        DatasetError: If an alternate opens a parenthesis it never closes
    """
    match = _ALTERNATES_RE.search(part)
    if match is None:
        return [PartCard(part=part, label=label, present=present)]

    open_paren, first, conj, second, close_paren = match.groups()
    if open_paren:
        if not close_paren:
            raise DatasetError(f"missing closing parenthesis in alternate: {part}")
        first, second = f"({first})", f"({second})"

    return [
        PartCard(part=first, label=label, present=present, number=1, conj=conj),
        PartCard(part=second, label=label, present=present, number=2, conj=conj),
    ]


def format_deckname(opts: PPExportOptions) -> str:
    direction = "EnGr" if opts.reverse else "GrEn"
    if not opts.incremental:
        return f"{DECK_NAME} ({direction})"
    return f"{DECK_NAME} ({INCREMENTAL_LABEL},{direction})"


def format_comment(deckname: str) -> str:
    return f"# {deckname} Anki CSV export"


def record_cards(record: PrincipalParts) -> List[Tuple[str, PartCard]]:
    """All cards of one record, each paired with its incremental subdeck."""
    cards = []
    for field, label, subdeck in PART_LAYOUT:
        part = getattr(record, field)
        if not part:
            continue
        cards.extend((subdeck, card) for card in expand_alternates(record.pr, label, part))
    return cards


def export_pp(out: TextIO, units: List[UnitPP], opts: PPExportOptions) -> Dict[str, int]:
    """Export principal parts in Anki CSV format to out.

    Args:
        out: Output stream
        units: Loaded principal-parts dataset
        opts: Export options (unit filters, direction, incremental subdecks)

    Returns:
        Export statistics: units, words (records) and rows written

    Raises:
        DuplicateIdError: If two records share a present form
        DatasetError: If an alternate is malformed
    """
    deckname = format_deckname(opts)
    write_header(out, format_comment(deckname), html=False, notetype=NOTETYPES[opts.reverse])
    writer = new_writer(out)
    seen: Set[str] = set()
    stats = {"units": 0, "words": 0, "rows": 0}

    for unit in units:
        if not opts.selects(unit.unit):
            continue
        stats["units"] += 1
        for record in unit.pp:
            if record.pr in seen:
                raise DuplicateIdError(f"duplicate ids found: {record.pr}")
            seen.add(record.pr)
            stats["words"] += 1

            for subdeck, card in record_cards(record):
                if opts.incremental:
                    deck = deck_path(deckname, subdeck, unit.name)
                else:
                    deck = deck_path(deckname, unit.name)
                writer.writerow(card.row(deck, opts.reverse))
                stats["rows"] += 1

        logger.debug(f"Exported unit {unit.unit}", extra={"unit_name": unit.name})

    return stats
