"""
Principal-parts linter.

Checks unit metadata and the formatting of every principal part. Problems are
reported one per line; the caller decides what a non-zero error count means.
"""
from __future__ import annotations

import json
import re
from typing import Dict, List, Optional, TextIO

from mag.common.dataset import PrincipalParts, UnitPP
from mag.common.patterns import GREEK, SPACE
from mag.config_models import LintOptions

# Units of the textbook that carry principal parts
MIN_UNIT = 5
MAX_UNIT = 42

PART_FIELDS = ("pr", "fu", "ao", "pf", "pm", "ap")

# λύω, -ἐλυσα, (ἐλύθην), ἤνεγκα or ἤνεγκον, ἔσχηκα (stem σχε-)
_ENTRY_RE = re.compile(
    rf"\(?-?{GREEK}+( (or|and) {GREEK}+)?({SPACE}+\(stem {GREEK}+-\))?\)?"
)


def check_word(word: str, pptype: str, label: str) -> Optional[str]:
    """Return an error message when word is not a well-formed principal part."""
    if _ENTRY_RE.fullmatch(word):
        return None
    return f"Bad {json.dumps(pptype)} entry found{label}: {json.dumps(word, ensure_ascii=False)}"


def lint_record(out: TextIO, record: PrincipalParts, label: str) -> int:
    errors = 0
    for field in PART_FIELDS:
        word = getattr(record, field)
        if not word:
            continue
        message = check_word(word, field, label)
        if message:
            out.write(message + "\n")
            errors += 1
    return errors


def unit_label(unit: UnitPP) -> str:
    if unit.name:
        return f" for unit {json.dumps(unit.name, ensure_ascii=False)}"
    if unit.unit >= 3:
        return f" for unit {unit.unit}"
    return ""


def lint_pp(out: TextIO, units: List[UnitPP], opts: LintOptions, stats: Dict[str, int]) -> int:
    """Run every check on the dataset, writing one line per problem to out.

    Args:
        out: Output stream for lint messages
        units: Loaded principal-parts dataset
        opts: Lint options (unit filter)
        stats: Counters updated in place ("units", "records")

    Returns:
        Number of errors found
    """
    if not units:
        out.write("Empty pp list!\n")
        return 1

    errors = 0
    for unit in units:
        if not opts.selects(unit.unit):
            continue

        stats["units"] = stats.get("units", 0) + 1
        label = unit_label(unit)
        if not unit.name:
            out.write(f"Empty unit 'name' field found{label}\n")
            errors += 1
        if unit.unit == 0:
            out.write(f"Empty unit 'unit' field found{label}\n")
            errors += 1
        elif unit.unit < MIN_UNIT or unit.unit > MAX_UNIT:
            out.write(f"Invalid unit 'unit' field found{label}: {unit.unit}\n")
            errors += 1
        if not unit.pp:
            out.write(f"Empty unit 'pp' list found{label}\n")
            errors += 1
            continue
        # Records of an unidentifiable unit cannot be reported usefully
        if not label:
            continue

        for record in unit.pp:
            stats["records"] = stats.get("records", 0) + 1
            errors += lint_record(out, record, label)

    return errors


def write_stats(out: TextIO, stats: Dict[str, int]) -> None:
    out.write(json.dumps(stats, indent=2, sort_keys=True, ensure_ascii=False) + "\n")
