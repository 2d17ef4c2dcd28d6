from .errors import MagError, DatasetError, GlossFormatError, DuplicateIdError, UnknownPartOfSpeechError
from .gloss import GlossSegment, MarkerKind, MarkerRule, segment_gloss
from .logging_config import setup_logging
