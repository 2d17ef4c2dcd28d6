"""Tests for dataset loading."""

import pytest

from mag.common.dataset import UnitPP, UnitVocab, load_pp, load_units, load_vocab
from mag.common.errors import DatasetError


class TestLoadVocab:
    """Test loading vocab.yml."""

    def test_fixture_loads(self, vocab_path):
        """Test that the fixture dataset loads in file order."""
        units = load_vocab(vocab_path)
        assert [u.unit for u in units] == [5, 6]
        assert units[0].name == "Unit 5"
        assert units[0].vocab[0].gr == "ἀγορά, ἀγορᾶς, ἡ"
        assert units[1].vocab[0].gr_mp == "ποιέομαι"

    def test_missing_fields_default_to_empty(self, write_yaml):
        """Test that absent and null string fields read as empty strings."""
        path = write_yaml("- name: Unit 5\n  unit: 5\n  vocab:\n    - gr: καί\n      en_ext:\n")
        word = load_vocab(path)[0].vocab[0]
        assert word.en_ext == ""
        assert word.id == ""
        assert word.pos == ""

    def test_numeric_scalars_read_as_text(self, write_yaml):
        """Test that a numeric id is coerced to a string."""
        path = write_yaml("- unit: 5\n  vocab:\n    - gr: εἷς\n      id: 1\n")
        assert load_vocab(path)[0].vocab[0].id == "1"

    def test_yaml_booleans_keep_their_text(self, write_yaml):
        """Test that yes/on/no glosses are read as written, not as booleans."""
        path = write_yaml(
            "- name: Unit 9\n  unit: 9\n  vocab:\n"
            "    - gr: ναί\n      en: yes\n      cog: no\n      pos: part\n"
            "    - gr: ἔπι\n      en: on\n      pos: adv\n"
        )
        words = load_vocab(path)[0].vocab
        assert (words[0].en, words[0].cog) == ("yes", "no")
        assert words[1].en == "on"

    def test_number_like_text_kept(self, write_yaml):
        """Test that number-like scalars keep their digits while unit numbers still parse."""
        path = write_yaml("- name: Unit 5\n  unit: 5\n  vocab:\n    - gr: δέκα\n      id: 010\n      en: 1.50\n")
        unit = load_vocab(path)[0]
        assert unit.unit == 5
        assert (unit.vocab[0].id, unit.vocab[0].en) == ("010", "1.50")

    def test_null_vocab_list(self, write_yaml):
        """Test that a unit with an empty vocab key has no words."""
        path = write_yaml("- name: Unit 7\n  unit: 7\n  vocab:\n")
        assert load_vocab(path)[0].vocab == []

    def test_unknown_keys_ignored(self, write_yaml):
        """Test that extra keys in the dataset are ignored."""
        path = write_yaml("- name: Unit 5\n  unit: 5\n  notes: draft\n  vocab: []\n")
        assert load_vocab(path)[0].name == "Unit 5"


class TestLoadErrors:
    """Test fatal dataset errors."""

    def test_missing_file(self, tmp_path):
        """Test that a missing dataset raises DatasetError."""
        with pytest.raises(DatasetError, match="not found"):
            load_vocab(tmp_path / "nope.yml")

    def test_invalid_yaml(self, write_yaml):
        """Test that malformed YAML raises DatasetError."""
        path = write_yaml("- name: [unclosed\n")
        with pytest.raises(DatasetError, match="Invalid YAML"):
            load_pp(path)

    def test_not_a_list(self, write_yaml):
        """Test that a mapping at the top level is rejected."""
        path = write_yaml("name: Unit 5\n")
        with pytest.raises(DatasetError, match="Expected a list"):
            load_units(path, UnitVocab)

    def test_bad_unit_number(self, write_yaml):
        """Test that a non-numeric unit number fails validation."""
        path = write_yaml("- name: Unit 5\n  unit: five\n")
        with pytest.raises(DatasetError, match="Invalid unit #1"):
            load_units(path, UnitPP)

    def test_empty_file(self, write_yaml):
        """Test that an empty file is an empty dataset."""
        assert load_pp(write_yaml("")) == []


class TestLoadPP:
    """Test loading pp.yml."""

    def test_fixture_loads(self, pp_path):
        """Test that principal parts are read into their fields."""
        units = load_pp(pp_path)
        first = units[0].pp[0]
        assert (first.pr, first.fu, first.ap) == ("λύω", "λύσω", "ἐλύθην")
        assert units[1].pp[0].ap == ""
