"""Tests for Alphabet."""

import pytest

from alphabet import Alphabet
from errors import AlphabetError, IndexOutOfRangeError, InvalidSymbolError


class TestAlphabet:
    """Symbol <-> index mapping."""

    def test_round_trip(self):
        alpha = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        assert alpha.size() == 26
        for i in range(alpha.size()):
            assert alpha.to_index(alpha.to_symbol(i)) == i

    def test_non_letters(self):
        alpha = Alphabet("a1_.")
        assert alpha.to_index("_") == 2
        assert alpha.to_symbol(3) == "."
        assert len(alpha) == 4
        assert list(alpha) == ["a", "1", "_", "."]

    def test_contains(self):
        alpha = Alphabet("XYZ")
        assert alpha.contains("Y")
        assert not alpha.contains("A")
        assert "Z" in alpha
        assert "XY" not in alpha

    def test_invalid_symbol(self):
        with pytest.raises(InvalidSymbolError):
            Alphabet("ABC").to_index("D")

    def test_index_out_of_range(self):
        alpha = Alphabet("ABC")
        with pytest.raises(IndexOutOfRangeError):
            alpha.to_symbol(3)
        with pytest.raises(IndexOutOfRangeError):
            alpha.to_symbol(-1)

    @pytest.mark.parametrize("symbols", ["", "ABCA", "AB C", "AB(", "A*B"])
    def test_rejects_bad_alphabets(self, symbols):
        with pytest.raises(AlphabetError):
            Alphabet(symbols)

    def test_equality_by_symbols(self):
        assert Alphabet("ABC") == Alphabet("ABC")
        assert Alphabet("ABC") != Alphabet("CBA")
