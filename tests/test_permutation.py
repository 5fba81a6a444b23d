"""Tests for cycle-notation permutations."""

import pytest

from alphabet import Alphabet
from errors import MalformedCycleSpecError
from permutation import Permutation

UPPER = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
ROTOR_I = "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"


class TestPermutation:
    """Construction and application."""

    def test_single_cycle(self):
        perm = Permutation("(BACD)", Alphabet("ABCD"))
        assert [perm.permute(i) for i in range(4)] == [2, 0, 3, 1]
        assert [perm.invert(i) for i in range(4)] == [1, 3, 0, 2]

    def test_symbols(self):
        perm = Permutation("(BACD)", Alphabet("ABCD"))
        assert perm.permute_symbol("B") == "A"
        assert perm.permute_symbol("D") == "B"
        assert perm.invert_symbol("A") == "B"

    def test_wraps_out_of_range_input(self):
        perm = Permutation("(BACD)", Alphabet("ABCD"))
        assert perm.permute(-1) == perm.permute(3)
        assert perm.permute(5) == perm.permute(1)
        assert perm.invert(-6) == perm.invert(2)

    def test_unmentioned_symbols_are_fixed(self):
        perm = Permutation("(AB)", Alphabet("ABCD"))
        assert perm.permute(2) == 2
        assert perm.invert(3) == 3
        assert not perm.derangement()

    def test_empty_is_identity(self):
        perm = Permutation("", UPPER)
        assert all(perm.permute(i) == i for i in range(26))

    def test_whitespace_between_cycles_ignored(self):
        a = Permutation("(AB)(CD)", Alphabet("ABCD"))
        b = Permutation("  (AB)\n (CD) ", Alphabet("ABCD"))
        assert [a.permute(i) for i in range(4)] == [b.permute(i) for i in range(4)]
        assert a.derangement()

    def test_inverse_round_trip(self):
        perm = Permutation(ROTOR_I, UPPER)
        for i in range(26):
            assert perm.invert(perm.permute(i)) == i
            assert perm.permute(perm.invert(i)) == i

    def test_cycles_and_str(self):
        perm = Permutation("(AB) (C)", Alphabet("ABCD"))
        assert perm.cycles() == ["AB", "C"]
        assert str(perm) == "(AB)"

    @pytest.mark.parametrize(
        "spec",
        ["(AB", "AB)", "((AB))", "(A)B)", "(AX)", "(AB)(BC)", "(ABA)", "A(BC)", "(A B)"],
    )
    def test_malformed(self, spec):
        with pytest.raises(MalformedCycleSpecError):
            Permutation(spec, Alphabet("ABCD"))


class TestFromWiring:
    """Substitution strings converted to cycles."""

    def test_rotor_i_matches_cycle_form(self):
        wired = Permutation.from_wiring("EKMFLGDQVZNTOWYHXUSPAIBRCJ", UPPER)
        cycled = Permutation(ROTOR_I, UPPER)
        assert [wired.permute(i) for i in range(26)] == [cycled.permute(i) for i in range(26)]

    def test_cycle_structure(self):
        perm = Permutation.from_wiring("BCDA", Alphabet("ABCD"))
        assert perm.cycles() == ["ABCD"]
        assert str(perm) == "(ABCD)"

    @pytest.mark.parametrize("wiring", ["AABC", "ABC", "ABCDE", "ABCX"])
    def test_rejects_non_permutations(self, wiring):
        with pytest.raises(MalformedCycleSpecError):
            Permutation.from_wiring(wiring, Alphabet("ABCD"))
