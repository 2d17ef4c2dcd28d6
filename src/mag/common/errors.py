"""Error types shared by the MAG tools.

Every error is fatal: the tool's ``main()`` logs it and exits non-zero.
"""
from __future__ import annotations

import logging
import sys
from typing import NoReturn

logger = logging.getLogger(__name__)


class MagError(RuntimeError):
    pass


class DatasetError(MagError):
    """The dataset is missing, is not valid YAML, or does not match the schema."""


class GlossFormatError(MagError):
    """A gloss does not follow the marker conventions of its segmentation mode."""


class DuplicateIdError(MagError):
    pass


class UnknownPartOfSpeechError(MagError):
    pass


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """
    Log an error message and exit the program.

    Args:
        message (str): The error message to display
        exit_code (int): The exit code to use (default: 1)

    Returns:
        NoReturn: This function never returns
    """
    logger.error(message)
    sys.exit(exit_code)
