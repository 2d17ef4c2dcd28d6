"""
Export the MAG pp.yml principal-parts dataset as an Anki CSV deck, in
Greek-to-English or English-to-Greek format, optionally split into
incremental subdecks.
"""

from .exporter import export_pp, expand_alternates, format_deckname, PartCard

__all__ = [
    "export_pp",
    "expand_alternates",
    "format_deckname",
    "PartCard",
]
