"""
Vocabulary exporter: vocab.yml -> Anki CSV (Greek-to-English).

Words whose gloss lists several senses are split into one card per sense:
prepositions per governed case, verbs with a middle/passive headword per voice,
and nouns with a plural headword per number.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set, TextIO

from mag.common.anki_csv import deck_path, new_writer, strip_comma_tail, write_header
from mag.common.dataset import UnitVocab, Word
from mag.common.errors import DuplicateIdError, UnknownPartOfSpeechError
from mag.common.gloss import (
    GlossSegment,
    MarkerKind,
    format_back,
    segment_case_glosses,
    segment_plural_glosses,
    segment_voice_glosses,
)
from mag.config_models import VocabExportOptions

logger = logging.getLogger(__name__)

DECK_NAME_GR_EN = "Mastronarde Attic Greek Vocab (Greek-to-English)"
CSV_COMMENT_GR_EN = "# This is an export of the MAG vocab dataset in Anki CSV format (Greek-to-English)"

POS_NAMES: Dict[str, str] = {
    "adj": "adjective",
    "adv": "adverb",
    "conj": "conjunction",
    "n": "noun",
    "part": "particle",
    "prep": "preposition",
    "pron": "pronoun",
    "v": "verb",
}


def word_id(word: Word) -> str:
    """The explicit id, else the headword up to its first comma."""
    return word.id or strip_comma_tail(word.gr)


def pos_tag(word: Word) -> str:
    try:
        return "pos::" + POS_NAMES[word.pos]
    except KeyError:
        raise UnknownPartOfSpeechError(
            f"bad POS {word.pos!r} found on word {word.gr!r}/{word.en!r}"
        ) from None


def front_of(word: Word, head: str) -> str:
    return f"{head} {word.gr_ext}" if word.gr_ext else head


def back_with_notes(word: Word, back: str) -> str:
    """Append the extended English note and the cognate to a card back."""
    if word.en_ext:
        back += f"<br><i>{word.en_ext}</i>"
    if word.cog:
        back += f"<br>[{word.cog}]"
    return back


class IdRegistry:
    """Tracks card ids across the whole export; a repeat is fatal."""

    def __init__(self) -> None:
        self._seen: Set[str] = set()

    def claim(self, card_id: str) -> None:
        if card_id in self._seen:
            raise DuplicateIdError(f"duplicate ids found: {card_id}")
        self._seen.add(card_id)


def selected_units(units: Iterable[UnitVocab], opts: VocabExportOptions):
    """Yield (unit, words) for every selected unit, honouring the word count limit."""
    remaining = opts.count
    for unit in units:
        if not opts.selects(unit.unit):
            continue
        if opts.count > 0 and remaining <= 0:
            return
        words = unit.vocab if opts.count == 0 else unit.vocab[:remaining]
        remaining -= len(words)
        yield unit, words


def split_senses(word: Word, front: str) -> List[GlossSegment]:
    if word.pos == "prep":
        if word.en_ext:
            logger.warning(f"en_ext is unsupported with prepositions - skipping for {front!r}")
        return segment_case_glosses(word.en)
    if word.gr_mp:
        return segment_voice_glosses(word.en)
    if word.gr_pl:
        return segment_plural_glosses(word.en)
    return []


def sense_row(word: Word, base_id: str, segment: GlossSegment) -> List[str]:
    """ID, Front and Back for one sense of a split word."""
    card_id, front = base_id, front_of(word, word.gr)
    if segment.kind is MarkerKind.CASE:
        card_id = f"{base_id}-{segment.value}"
        front = front_of(word, f"{word.gr} {segment.marker}")
    elif segment.kind is MarkerKind.VOICE and word.gr_mp:
        card_id = front = word.gr_mp
    elif segment.kind is MarkerKind.PLURAL and word.gr_pl:
        card_id = strip_comma_tail(word.gr_pl)
        front = word.gr_pl
    return [card_id, front, format_back(segment.text)]


def export_vocab(out: TextIO, units: List[UnitVocab], opts: VocabExportOptions) -> Dict[str, int]:
    """Export vocab in Anki CSV format to out.

    Args:
        out: Output stream
        units: Loaded vocab dataset
        opts: Export options (unit filters and count limit)

    Returns:
        Export statistics: units, words and rows written

    Raises:
        DuplicateIdError: If two words resolve to the same id
        UnknownPartOfSpeechError: If a word has an unmapped pos code
        GlossFormatError: If a preposition gloss does not open with a case marker
    """
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

            segments = split_senses(word, front)
            if len(segments) > 1:
                logger.debug(f"Split {base_id} into {len(segments)} cards", extra={"unit": unit.unit})
                for segment in segments:
                    writer.writerow(sense_row(word, base_id, segment) + [tags, deck])
                    stats["rows"] += 1
            else:
                back = back_with_notes(word, format_back(word.en))
                writer.writerow([base_id, front, back, tags, deck])
                stats["rows"] += 1
            stats["words"] += 1

    return stats
