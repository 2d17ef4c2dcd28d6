"""Shared fixtures for the MAG tool tests."""

import csv
import io
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def vocab_path() -> Path:
    return FIXTURES / "vocab.yml"


@pytest.fixture
def pp_path() -> Path:
    return FIXTURES / "pp.yml"


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a temporary dataset file and return its path."""

    def _write(text: str, name: str = "dataset.yml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def header_lines(text: str):
    return [line for line in text.splitlines() if line.startswith("#")]


def data_rows(text: str):
    """Parse the CSV rows of an Anki export, skipping the header block."""
    body = "\n".join(line for line in text.splitlines() if not line.startswith("#"))
    return list(csv.reader(io.StringIO(body)))
