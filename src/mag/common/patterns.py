"""Regex building blocks shared by the gloss segmenter, the pp exporter and the linter."""

# Unicode space separators; tabs and newlines are not part of a dataset field
SPACE = r"[^\S\t\n\r\f\v]"

# Greek letters and Greek Extended; Common-script punctuation (ano teleia, question
# mark, numeral sign, dialytika tonos) and the Coptic letters U+03E2-03EF are excluded
GREEK = r"[\u0370-\u0373\u0375-\u037D\u037F-\u0384\u0386\u0388-\u03E1\u03F0-\u03FF\u1F00-\u1FFF]"
