"""
Anki CSV output helpers shared by the exporters.

Anki reads "#key:value" header lines at the top of an import file; the rows that
follow are plain CSV in the column order declared by "#columns".
"""
from __future__ import annotations

import contextlib
import csv
import re
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO

from .errors import MagError

CSV_COLUMNS = ["ID", "Front", "Back", "Tags", "DeckName"]
DECK_COLUMN_POS = 5

_COMMA_TAIL_RE = re.compile(r",.*$")


def strip_comma_tail(text: str) -> str:
    """'ἀγορά, ἀγορᾶς, ἡ' -> 'ἀγορά'"""
    return _COMMA_TAIL_RE.sub("", text)


def deck_path(*parts: str) -> str:
    return "::".join(parts)


def write_header(out: TextIO, comment: str, html: bool, notetype: Optional[str] = None) -> None:
    """Write the Anki import header block.

    Args:
        out: Output stream
        comment: Free-text comment line, including its leading "# "
        html: Whether Anki should treat field contents as HTML
        notetype: Optional note type name for every row
    """
    out.write(f"{comment}\n")
    out.write("#separator:Comma\n")
    out.write(f"#columns:{','.join(CSV_COLUMNS)}\n")
    if notetype:
        out.write(f"#notetype:{notetype}\n")
    out.write(f"#deck column:{DECK_COLUMN_POS}\n")
    out.write(f"#html:{'true' if html else 'false'}\n")


def new_writer(out: TextIO):
    return csv.writer(out, lineterminator="\n")


@contextlib.contextmanager
def open_output(outfile: Optional[Path]) -> Iterator[TextIO]:
    """Yield the output stream: the given file, or stdout when outfile is None."""
    if outfile is None:
        yield sys.stdout
        return
    try:
        f = open(outfile, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise MagError(f"opening outfile: {e}") from e
    with f:
        yield f

