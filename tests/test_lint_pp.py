"""Tests for the principal-parts linter."""

import io
import json

import pytest

from mag.common.dataset import PrincipalParts, UnitPP, load_pp
from mag.config_models import LintOptions
from mag.lint_pp.linter import check_word, lint_pp, lint_record, write_stats


def _lint(units, **opts):
    out = io.StringIO()
    stats = {}
    errors = lint_pp(out, units, LintOptions(**opts), stats)
    return errors, out.getvalue().splitlines(), stats


class TestCheckWord:
    """Test the principal-part format check."""

    @pytest.mark.parametrize(
        "word",
        [
            "λύω",
            "-ἔσχημαι",
            "(ἐλύθην)",
            "ἤνεγκα or ἤνεγκον",
            "ἕξω and σχήσω",
            "ἔσχηκα (stem σχε-)",
        ],
    )
    def test_valid_forms(self, word):
        """Test forms the dataset is allowed to use."""
        assert check_word(word, "ao", " for unit 8") is None

    @pytest.mark.parametrize(
        "word",
        [
            "λύω,",
            "lyo",
            "ἤνεγκα, ἤνεγκον",
            "ἤνεγκα  or ἤνεγκον",
            "λύω\n",
            "λύω\u0387",
            "λύω\u037e",
            "\u03e3ύω",
        ],
    )
    def test_invalid_forms(self, word):
        """Test forms that break the formatting rules."""
        assert check_word(word, "ao", " for unit 8") is not None

    def test_message(self):
        """Test the error message names the part, unit and word."""
        message = check_word("lyo", "fu", ' for unit "Unit 8"')
        assert message == 'Bad "fu" entry found for unit "Unit 8": "lyo"'


class TestLintRecord:
    """Test linting a single record."""

    def test_counts_each_bad_part(self):
        """Test that every malformed part is reported."""
        out = io.StringIO()
        record = PrincipalParts(pr="λύω", fu="lyso", ao="ἔλυσα,")
        assert lint_record(out, record, " for unit 8") == 2
        assert len(out.getvalue().splitlines()) == 2

    def test_empty_parts_skipped(self):
        """Test that missing parts are not errors."""
        assert lint_record(io.StringIO(), PrincipalParts(pr="εἰμί"), " for unit 8") == 0


class TestLintPP:
    """Test dataset-level checks."""

    def test_fixture_is_clean(self, pp_path):
        """Test that the fixture dataset passes."""
        errors, lines, stats = _lint(load_pp(pp_path))
        assert errors == 0
        assert lines == []
        assert stats == {"units": 2, "records": 3}

    def test_empty_dataset(self):
        """Test that an empty dataset is one error."""
        errors, lines, stats = _lint([])
        assert errors == 1
        assert lines == ["Empty pp list!"]
        assert stats == {}

    def test_unit_metadata_errors(self):
        """Test missing name, missing number and empty pp list."""
        errors, lines, _ = _lint([UnitPP()])
        assert errors == 3
        assert lines == [
            "Empty unit 'name' field found",
            "Empty unit 'unit' field found",
            "Empty unit 'pp' list found",
        ]

    def test_unit_out_of_range(self):
        """Test that unit numbers outside 5..42 are flagged."""
        unit = UnitPP(name="Unit 43", unit=43, pp=[PrincipalParts(pr="λύω")])
        errors, lines, _ = _lint([unit])
        assert errors == 1
        assert lines == ['Invalid unit \'unit\' field found for unit "Unit 43": 43']

    def test_unnamed_unit_label_uses_number(self):
        """Test that an unnamed unit is identified by its number."""
        unit = UnitPP(unit=8, pp=[PrincipalParts(pr="lyo")])
        errors, lines, _ = _lint([unit])
        assert errors == 2
        assert lines == [
            "Empty unit 'name' field found for unit 8",
            'Bad "pr" entry found for unit 8: "lyo"',
        ]

    def test_unidentifiable_unit_skips_records(self):
        """Test that records are not checked when the unit has no label."""
        unit = UnitPP(unit=0, pp=[PrincipalParts(pr="lyo")])
        errors, _, stats = _lint([unit])
        assert errors == 2
        assert "records" not in stats

    def test_unit_filter(self, pp_path):
        """Test linting a single unit."""
        _, _, stats = _lint(load_pp(pp_path), unit=9)
        assert stats == {"units": 1, "records": 1}


class TestWriteStats:
    """Test the trailing JSON stats."""

    def test_sorted_indented_json(self):
        """Test that stats are written as sorted, indented JSON."""
        out = io.StringIO()
        write_stats(out, {"units": 2, "errors": 0, "records": 3})
        assert out.getvalue() == '{\n  "errors": 0,\n  "records": 3,\n  "units": 2\n}\n'
        assert json.loads(out.getvalue())["records"] == 3
