# permutation.py
from __future__ import annotations

from alphabet import Alphabet
from debug import Debug
from errors import MalformedCycleSpecError

debug = Debug()


class Permutation:
    """A permutation of an alphabet's index space, written in cycle notation.

    ``Permutation("(AELT) (BK)", alpha)`` sends A→E→L→T→A and B↔K; every symbol
    not mentioned in a cycle maps to itself.  Whitespace between groups is
    ignored.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self.alphabet = alphabet
        self.size = alphabet.size()
        self._spec = cycles
        self._cycles: list[str] = _parse_cycles(cycles, alphabet)

        # integer lookup tables
        self._fwd = list(range(self.size))
        self._rev = list(range(self.size))
        for cycle in self._cycles:
            idx = [alphabet.to_index(c) for c in cycle]
            for a, b in zip(idx, idx[1:] + idx[:1]):
                self._fwd[a] = b
                self._rev[b] = a

        debug.log("permutation", f"{cycles!r} -> {len(self._cycles)} cycle(s)")

    @classmethod
    def from_wiring(cls, wiring: str, alphabet: Alphabet) -> "Permutation":
        """Build from a substitution string: symbol ``alphabet[i]`` goes to ``wiring[i]``."""
        if len(wiring) != alphabet.size() or sorted(wiring) != sorted(alphabet):
            raise MalformedCycleSpecError("wiring must be a permutation of alphabet")

        fwd = [alphabet.to_index(c) for c in wiring]
        seen = [False] * len(fwd)
        groups: list[str] = []
        for start in range(len(fwd)):
            if seen[start]:
                continue
            cycle = []
            i = start
            while not seen[i]:
                seen[i] = True
                cycle.append(alphabet.to_symbol(i))
                i = fwd[i]
            groups.append("(" + "".join(cycle) + ")")
        return cls(" ".join(groups), alphabet)

    # ── index space ──────────────────────────────────────────────
    def wrap(self, p: int) -> int:
        # Python's % already yields a non-negative remainder
        return p % self.size

    def permute(self, p: int) -> int:
        return self._fwd[self.wrap(p)]

    def invert(self, c: int) -> int:
        return self._rev[self.wrap(c)]

    # ── symbol space ─────────────────────────────────────────────
    def permute_symbol(self, symbol: str) -> str:
        return self.alphabet.to_symbol(self.permute(self.alphabet.to_index(symbol)))

    def invert_symbol(self, symbol: str) -> str:
        return self.alphabet.to_symbol(self.invert(self.alphabet.to_index(symbol)))

    def derangement(self) -> bool:
        """True iff no symbol maps to itself."""
        return all(self._fwd[i] != i for i in range(self.size))

    def cycles(self) -> list[str]:
        return list(self._cycles)

    def __str__(self) -> str:
        return " ".join(f"({c})" for c in self._cycles if len(c) > 1)

    def __repr__(self) -> str:
        return f"<Permutation {self}>"


def _parse_cycles(spec: str, alphabet: Alphabet) -> list[str]:
    cycles: list[str] = []
    used: set[str] = set()
    current: list[str] | None = None

    for pos, ch in enumerate(spec):
        if ch == "(":
            if current is not None:
                raise MalformedCycleSpecError(f"Nested '(' at position {pos} in {spec!r}")
            current = []
        elif ch == ")":
            if current is None:
                raise MalformedCycleSpecError(f"Unbalanced ')' at position {pos} in {spec!r}")
            if current:
                cycles.append("".join(current))
            current = None
        elif ch.isspace():
            if current is not None:
                raise MalformedCycleSpecError(f"Whitespace inside a cycle in {spec!r}")
        elif current is None:
            raise MalformedCycleSpecError(f"Symbol {ch!r} outside any cycle in {spec!r}")
        else:
            if ch not in alphabet:
                raise MalformedCycleSpecError(f"Symbol {ch!r} not in alphabet")
            if ch in used:
                raise MalformedCycleSpecError(f"Symbol {ch!r} appears in more than one place")
            used.add(ch)
            current.append(ch)

    if current is not None:
        raise MalformedCycleSpecError(f"Unclosed '(' in {spec!r}")
    return cycles
