"""
Gloss segmentation.

A gloss is a semicolon-delimited list of clauses. Some clauses open with a marker
that introduces a new sense of the headword:

    (+ gen.) from, out of; (+ acc.) into     -> case markers (prepositions)
    make; (mid.) make for oneself            -> voice markers (verbs with gr_mp)
    hope; (pl.) expectations                 -> plural markers (nouns with gr_pl)

Segmentation splits a gloss into one GlossSegment per marker, appending unmarked
clauses to the segment before them.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional

from .errors import GlossFormatError
from .patterns import SPACE

_CLAUSE_SPLIT_RE = re.compile(rf"{SPACE}*;{SPACE}*")
_SENSE_BREAK_RE = re.compile(rf"{SPACE}*;{SPACE}*\(")

CASE_MARKER_RE = re.compile(rf"^\(\+{SPACE}*(acc|gen|dat)\.?\)")
VOICE_MARKER_RE = re.compile(r"^\([^(]*(mid|pass)\.[^)]*\)")
PLURAL_MARKER_RE = re.compile(r"^\((pl)\.\)")


class MarkerKind(str, Enum):
    CASE = "case"
    VOICE = "voice"
    PLURAL = "plural"
    NONE = "none"


@dataclass(frozen=True)
class MarkerRule:
    """How to recognise and treat one kind of leading marker.

    Attributes:
        kind: Marker kind assigned to segments this rule opens.
        pattern: Regex anchored at the clause start; group 1 is the marker value.
        require_leading: The first clause must carry a marker.
        merge_repeats: A marker equal to the open segment's value continues that segment.
        strip_marker: Remove the marker text from the segment text.
    """

    kind: MarkerKind
    pattern: re.Pattern
    require_leading: bool = False
    merge_repeats: bool = False
    strip_marker: bool = False


CASE_RULE = MarkerRule(MarkerKind.CASE, CASE_MARKER_RE, require_leading=True, strip_marker=True)
VOICE_RULE = MarkerRule(MarkerKind.VOICE, VOICE_MARKER_RE, merge_repeats=True)
PLURAL_RULE = MarkerRule(MarkerKind.PLURAL, PLURAL_MARKER_RE)


@dataclass
class GlossSegment:
    kind: MarkerKind = MarkerKind.NONE
    value: str = ""
    marker: str = ""
    text: str = ""

    @property
    def is_marked(self) -> bool:
        return self.kind is not MarkerKind.NONE

    def append(self, clause: str) -> None:
        self.text = f"{self.text}; {clause}" if self.text else clause


def split_clauses(gloss: str) -> List[str]:
    """Split a gloss on semicolons, dropping the spaces around each one."""
    return _CLAUSE_SPLIT_RE.split(gloss)


def segment_gloss(gloss: str, rule: MarkerRule) -> List[GlossSegment]:
    """Split a gloss into marker-led segments.

    Args:
        gloss: The semicolon-delimited gloss
        rule: Marker rule for the segmentation mode

    Returns:
        Segments in input order. Unmarked segments with no text are dropped.

    Raises:
        GlossFormatError: If the rule requires a leading marker and the first clause has none
    """
    segments: List[GlossSegment] = []
    current: Optional[GlossSegment] = None

    for clause in split_clauses(gloss):
        match = rule.pattern.match(clause)
        if match is None:
            if current is None:
                if rule.require_leading:
                    raise GlossFormatError(
                        f"gloss without initial {rule.kind.value} marker: {gloss}"
                    )
                current = GlossSegment()
            current.append(clause)
            continue

        value = match.group(1)
        if (
            rule.merge_repeats
            and current is not None
            and current.kind is rule.kind
            and current.value == value
        ):
            current.append(clause)
            continue

        if current is not None and (current.is_marked or current.text):
            segments.append(current)
        text = clause[match.end():].strip() if rule.strip_marker else clause
        current = GlossSegment(kind=rule.kind, value=value, marker=match.group(0), text=text)

    if current is not None and (current.is_marked or current.text):
        segments.append(current)
    return segments


def segment_case_glosses(gloss: str, strip_marker: bool = True) -> List[GlossSegment]:
    """Segment a preposition gloss by governed case ("acc", "gen", "dat")."""
    rule = CASE_RULE if strip_marker else replace(CASE_RULE, strip_marker=False)
    return segment_gloss(gloss, rule)


def segment_voice_glosses(gloss: str) -> List[GlossSegment]:
    """Segment a verb gloss by voice ("mid", "pass"); repeated voices merge."""
    return segment_gloss(gloss, VOICE_RULE)


def segment_plural_glosses(gloss: str) -> List[GlossSegment]:
    return segment_gloss(gloss, PLURAL_RULE)


def format_back(text: str) -> str:
    """Start each parenthesised sense of a card back on a new line."""
    return _SENSE_BREAK_RE.sub("<br>(", text)
