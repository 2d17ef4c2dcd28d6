"""
First-generation MAG vocab exporter: splits prepositions by case only and keeps
the case marker in the card back.
"""

from .exporter import export_vocab

__all__ = ["export_vocab"]
