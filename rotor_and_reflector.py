# rotor_and_reflector.py
from __future__ import annotations

from enum import Enum

from debug import Debug
from errors import (
    ConfigurationError,
    IndexOutOfRangeError,
    InvalidSymbolError,
    NotADerangementError,
)
from permutation import Permutation

debug = Debug()


class RotorKind(Enum):
    REFLECTOR = "R"
    FIXED = "N"
    MOVING = "M"


class Rotor:
    """One wheel of the machine.

    The three kinds share a name, a permutation and a rotational setting; what
    differs is selected on ``kind``.  Build them with :meth:`reflector`,
    :meth:`fixed` or :meth:`moving` rather than calling the constructor.
    """

    def __init__(
        self,
        name: str,
        permutation: Permutation,
        kind: RotorKind,
        notches: str = "",
    ) -> None:
        alphabet = permutation.alphabet
        if kind is not RotorKind.MOVING and notches:
            raise ConfigurationError(f"Only moving rotors carry notches ({name})")
        for ch in notches:
            if ch not in alphabet:
                raise InvalidSymbolError(ch, str(alphabet))
        if kind is RotorKind.REFLECTOR and not permutation.derangement():
            raise NotADerangementError(f"Reflector {name} maps a symbol to itself")

        self.name = name
        self.kind = kind
        self.permutation = permutation
        self.alphabet = alphabet
        self.size = alphabet.size()
        self._notches = frozenset(notches)
        self._setting = 0

    # ── variant constructors ──────────────────────────────────────
    @classmethod
    def reflector(cls, name: str, permutation: Permutation) -> "Rotor":
        return cls(name, permutation, RotorKind.REFLECTOR)

    @classmethod
    def fixed(cls, name: str, permutation: Permutation) -> "Rotor":
        return cls(name, permutation, RotorKind.FIXED)

    @classmethod
    def moving(cls, name: str, permutation: Permutation, notches: str) -> "Rotor":
        return cls(name, permutation, RotorKind.MOVING, notches)

    # ── per-kind behaviour ────────────────────────────────────────
    def rotates(self) -> bool:
        return self.kind is RotorKind.MOVING

    def reflecting(self) -> bool:
        return self.kind is RotorKind.REFLECTOR

    def notches(self) -> frozenset[str]:
        if self.kind is RotorKind.MOVING:
            return self._notches
        return frozenset()

    def at_notch(self) -> bool:
        if self.kind is RotorKind.MOVING:
            return self.alphabet.to_symbol(self._setting) in self._notches
        return False

    # ── setting & stepping ────────────────────────────────────────
    def setting(self) -> int:
        return self._setting

    def set(self, posn: int | str) -> None:
        """Turn the rotor to ``posn``, given as a symbol or an index."""
        if isinstance(posn, str):
            self._setting = self.alphabet.to_index(posn)
        else:
            if not (0 <= posn < self.size):
                raise IndexOutOfRangeError(posn, self.size)
            self._setting = posn

    def advance(self) -> None:
        if self.kind is not RotorKind.MOVING:
            raise RuntimeError(f"{self.kind.name.lower()} rotor {self.name} cannot advance")
        self._setting = (self._setting + 1) % self.size
        debug.log("rotor", f"{self.name} -> {self.alphabet.to_symbol(self._setting)}")

    # ── signal paths ---------------------------------------------
    def convert_forward(self, p: int) -> int:
        mapped = self.permutation.permute(p + self._setting)
        return (mapped - self._setting) % self.size

    def convert_backward(self, e: int) -> int:
        mapped = self.permutation.invert(e + self._setting)
        return (mapped - self._setting) % self.size

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        posn = self.alphabet.to_symbol(self._setting)
        return f"<Rotor {self.name} {self.kind.name.lower()} pos={posn}>"
