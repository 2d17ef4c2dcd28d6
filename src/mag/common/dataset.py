"""
Data models and YAML loading for the MAG vocabulary and principal-parts datasets.

Both datasets are YAML lists of units. Plain scalars keep their source text
("yes" stays "yes", "010" stays "010"); pydantic converts unit numbers itself.
Missing or null string fields read as "", so exporters can test fields for
truthiness without None checks.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Type, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import DatasetError

logger = logging.getLogger(__name__)

_Unit = TypeVar("_Unit", bound=BaseModel)

# Implicit tags still resolved on plain scalars; everything else stays a string
_KEPT_TAGS = frozenset(["tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"])


class DatasetLoader(yaml.SafeLoader):
    """SafeLoader that resolves no YAML 1.1 booleans, numbers or timestamps."""


DatasetLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Word(_Record):
    """A vocabulary headword with its gloss."""

    gr: str = Field(default="", description="Greek headword, e.g. 'ἀγορά, ἀγορᾶς, ἡ'")
    gr_ext: str = Field(default="", description="Extra Greek shown after the headword on the front")
    gr_mp: str = Field(default="", description="Separate middle/passive headword")
    gr_pl: str = Field(default="", description="Separate plural headword")
    id: str = Field(default="", description="Explicit card id (defaults to the headword up to the first comma)")
    en: str = Field(default="", description="English gloss, semicolon-delimited")
    en_ext: str = Field(default="", description="Extended English note")
    cog: str = Field(default="", description="English cognate")
    pos: str = Field(default="", description="Part-of-speech code (n, v, adj, ...)")

    @field_validator("*", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return _as_text(value)


class UnitVocab(_Record):
    name: str = ""
    unit: int = 0
    vocab: List[Word] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def name_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("unit", mode="before")
    @classmethod
    def unit_number(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("vocab", mode="before")
    @classmethod
    def vocab_list(cls, value: Any) -> Any:
        return [] if value is None else value


class PrincipalParts(_Record):
    """The six principal parts of a verb. The present form doubles as the record id."""

    pr: str = Field(default="", description="Present")
    fu: str = Field(default="", description="Future")
    ao: str = Field(default="", description="Aorist")
    pf: str = Field(default="", description="Perfect")
    pm: str = Field(default="", description="Perfect middle")
    ap: str = Field(default="", description="Aorist passive")

    @field_validator("*", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return _as_text(value)


class UnitPP(_Record):
    name: str = ""
    unit: int = 0
    pp: List[PrincipalParts] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def name_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("unit", mode="before")
    @classmethod
    def unit_number(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("pp", mode="before")
    @classmethod
    def pp_list(cls, value: Any) -> Any:
        return [] if value is None else value


def load_units(path: str | Path, model: Type[_Unit]) -> List[_Unit]:
    """Load and validate a YAML list of units.

    Args:
        path: Path to the YAML dataset
        model: Unit model to validate each list item against

    Returns:
        The validated units, in file order

    Raises:
        DatasetError: If the file is missing, is not valid YAML, or does not match the schema
    """
    dataset = Path(path)
    if not dataset.is_file():
        raise DatasetError(f"Dataset file not found: {dataset}")

    try:
        raw = yaml.load(dataset.read_text(encoding="utf-8"), Loader=DatasetLoader)
    except yaml.YAMLError as e:
        raise DatasetError(f"Invalid YAML in {dataset}: {e}") from e

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DatasetError(f"Expected a list of units in {dataset}, got {type(raw).__name__}")

    units = []
    for i, item in enumerate(raw):
        try:
            units.append(model.model_validate(item))
        except ValidationError as ve:
            raise DatasetError(f"Invalid unit #{i + 1} in {dataset}:\n{ve}") from ve

    logger.debug(f"Loaded {len(units)} units", extra={"dataset": str(dataset)})
    return units


def load_vocab(path: str | Path) -> List[UnitVocab]:
    return load_units(path, UnitVocab)


def load_pp(path: str | Path) -> List[UnitPP]:
    return load_units(path, UnitPP)
