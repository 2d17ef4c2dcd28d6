"""
Export the MAG vocab.yml dataset as an Anki CSV deck, splitting multi-sense
glosses into one card per case, voice or number.
"""

from .exporter import export_vocab, word_id, pos_tag, POS_NAMES

__all__ = [
    "export_vocab",
    "word_id",
    "pos_tag",
    "POS_NAMES",
]
