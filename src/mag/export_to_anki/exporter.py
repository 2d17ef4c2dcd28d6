"""
First-generation vocabulary exporter.

Only prepositions are split, one card per governed case, and the case marker
stays at the head of each card back. Backs are written as-is.
"""
from __future__ import annotations

import logging
from typing import Dict, List, TextIO

from mag.common.anki_csv import deck_path, new_writer, write_header
from mag.common.dataset import UnitVocab
from mag.common.gloss import segment_case_glosses
from mag.config_models import VocabExportOptions
from mag.export_anki_vocab.exporter import (
    CSV_COMMENT_GR_EN,
    DECK_NAME_GR_EN,
    IdRegistry,
    back_with_notes,
    front_of,
    pos_tag,
    selected_units,
    word_id,
)

logger = logging.getLogger(__name__)


def export_vocab(out: TextIO, units: List[UnitVocab], opts: VocabExportOptions) -> Dict[str, int]:
    write_header(out, CSV_COMMENT_GR_EN, html=True)
    writer = new_writer(out)
    ids = IdRegistry()
    stats = {"units": 0, "words": 0, "rows": 0}

    for unit, words in selected_units(units, opts):
        stats["units"] += 1
        deck = deck_path(DECK_NAME_GR_EN, unit.name)
        for word in words:
            base_id = word_id(word)
            ids.claim(base_id)
            tags = pos_tag(word)
            front = front_of(word, word.gr)

            segments = []
            if word.pos == "prep":
                segments = segment_case_glosses(word.en, strip_marker=False)
                if word.en_ext:
                    logger.warning(f"en_ext is unsupported with prepositions - skipping for {front!r}")

            if len(segments) > 1:
                for segment in segments:
                    writer.writerow([
                        f"{base_id}-{segment.value}",
                        front_of(word, f"{word.gr} {segment.marker}"),
                        segment.text,
                        tags,
                        deck,
                    ])
                    stats["rows"] += 1
            else:
                writer.writerow([base_id, front, back_with_notes(word, word.en), tags, deck])
                stats["rows"] += 1
            stats["words"] += 1

    return stats
