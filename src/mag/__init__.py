"""mag package.

Command-line tools for the Mastronarde Attic Greek (MAG) datasets:
- export_anki_vocab: vocab.yml to an Anki CSV deck, one card per case/voice/number sense
- export_to_anki: first-generation vocab exporter (prepositions split by case only)
- export_anki_pp: pp.yml to an Anki CSV principal-parts deck
- lint_pp: validate pp.yml
"""

__version__ = "0.1.0"
