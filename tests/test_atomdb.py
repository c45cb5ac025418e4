"""Tests for atomic-database line validation."""

import pytest

from matcfg.core.atomdb import ELEMENT_SYMBOLS, is_valid_label, validate_atomdb_line
from matcfg.core.errors import BadInput


class TestLabels:
    def test_element_table(self):
        assert len(ELEMENT_SYMBOLS) == 118
        assert ELEMENT_SYMBOLS[0] == "H"
        assert ELEMENT_SYMBOLS[25] == "Fe"
        assert ELEMENT_SYMBOLS[-1] == "Og"

    @pytest.mark.parametrize("label", ["H", "Al", "Og", "D", "T", "He3", "U235", "C12", "X", "X1", "X99"])
    def test_valid(self, label):
        assert is_valid_label(label)

    @pytest.mark.parametrize("label", ["", "al", "Qq", "X0", "X100", "Fe5", "He03", "U2350", "H-1"])
    def test_invalid(self, label):
        assert not is_valid_label(label)


class TestLines:
    def test_nodefaults(self):
        validate_atomdb_line(["nodefaults"])

    def test_nodefaults_with_extra_words(self):
        with pytest.raises(BadInput, match="alone"):
            validate_atomdb_line(["nodefaults", "Al"])

    def test_element_definition(self):
        validate_atomdb_line(["Al", "26.98u", "3.449fm", "0.0082b", "0.231b"])
        validate_atomdb_line(["X1", "1.5e1u", "-3.7fm", "0b", "0b"])

    @pytest.mark.parametrize(
        "words, message",
        [
            (["Al", "26.98", "3.449fm", "0.0082b", "0.231b"], "Missing unit"),
            (["Al", "0u", "3.449fm", "0.0082b", "0.231b"], "Mass must be positive"),
            (["Al", "26.98u", "3.449fm", "-1b", "0.231b"], "can not be negative"),
            (["Al", "26.98u", "abcfm", "0.0082b", "0.231b"], "Invalid coherent"),
            (["Al", "26.98u", "3.449fm", "0.0082b"], "Wrong number"),
            (["Zz", "26.98u", "3.449fm", "0.0082b", "0.231b"], "Invalid element"),
        ],
    )
    def test_bad_element_definition(self, words, message):
        with pytest.raises(BadInput, match=message):
            validate_atomdb_line(words)

    def test_mixture(self):
        validate_atomdb_line(["H", "is", "0.9", "H1", "0.1", "D"])
        validate_atomdb_line(["X", "is", "1", "Al"])
        validate_atomdb_line(["B", "is", "0.2", "B10", "0.3", "B11", "0.5", "C"])

    @pytest.mark.parametrize(
        "words, message",
        [
            (["H", "is"], "pairs"),
            (["H", "is", "0.5", "H1", "0.5"], "pairs"),
            (["H", "is", "0.5", "H1", "0.4", "D"], "sum"),
            (["H", "is", "0.5", "H1", "0.5", "H1"], "more than once"),
            (["H", "is", "1.5", "H1", "-0.5", "D"], "not in"),
            (["H", "is", "0", "H1", "1", "D"], "not in"),
            (["H", "is", "1", "Yy"], "Invalid component"),
        ],
    )
    def test_bad_mixture(self, words, message):
        with pytest.raises(BadInput, match=message):
            validate_atomdb_line(words)

    def test_empty(self):
        with pytest.raises(BadInput):
            validate_atomdb_line([])
