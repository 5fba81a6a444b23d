# machine.py  ──────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from alphabet import Alphabet
from debug import Debug
from errors import (
    ConfigurationError,
    DuplicateRotorError,
    InvalidSymbolError,
    MisplacedReflectorError,
    MissingReflectorError,
    SettingLengthMismatchError,
    SlotCountMismatchError,
    TooManyMovingRotorsError,
    UnknownRotorError,
)
from permutation import Permutation
from rotor_and_reflector import Rotor

debug = Debug()


@dataclass(frozen=True, slots=True)
class Step:
    """What one key-press did, handed to a ``trace`` callback."""

    positions: str      # window letters of slots 1..n-1, after stepping
    symbol_in: str
    plugged: str        # after the first plugboard pass
    symbol_out: str


Trace = Callable[[Step], None]


class Machine:
    """A complete machine: ``num_rotors`` slots, slot 0 holding the reflector,
    and ``num_pawls`` pawls (and thus at most that many rotating rotors)."""

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        num_pawls: int,
        all_rotors: Iterable[Rotor],
    ) -> None:
        if num_rotors < 2:
            raise ConfigurationError("A machine needs at least two rotor slots")
        if not (0 <= num_pawls < num_rotors):
            raise ConfigurationError(f"Pawl count must be in 0–{num_rotors - 1}")

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = num_pawls

        self._all_rotors: dict[str, Rotor] = {}
        for rotor in all_rotors:
            if rotor.name in self._all_rotors:
                raise ConfigurationError(f"Rotor {rotor.name!r} defined twice")
            if rotor.alphabet != alphabet:
                raise ConfigurationError(f"Rotor {rotor.name!r} uses a different alphabet")
            self._all_rotors[rotor.name] = rotor

        self._rotors: list[Rotor] = []
        self._plugboard = Permutation("", alphabet)

    # ── observers ───────────────────────────────────────────────
    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        return self._pawls

    def alphabet(self) -> Alphabet:
        return self._alphabet

    def get_rotor(self, k: int) -> Rotor:
        """Rotor in slot ``k``; slot 0 is the reflector, the last slot the fast rotor."""
        return self._rotors[k]

    def available_rotors(self) -> list[str]:
        return list(self._all_rotors)

    def plugboard(self) -> Permutation:
        return self._plugboard

    def positions(self) -> str:
        return "".join(self._alphabet.to_symbol(r.setting()) for r in self._rotors[1:])

    # ── configuration ───────────────────────────────────────────
    def insert_rotors(self, names: Sequence[str]) -> None:
        """Install the rotors named ``names`` (``names[0]`` is the reflector).

        Nothing changes unless the whole arrangement is valid.  Every
        installed rotor starts at setting 0.
        """
        if len(names) != self._num_rotors:
            raise SlotCountMismatchError(
                f"Expected {self._num_rotors} rotors, got {len(names)}"
            )

        staged: list[Rotor] = []
        for name in names:
            try:
                rotor = self._all_rotors[name]
            except KeyError:
                raise UnknownRotorError(name) from None
            if rotor in staged:
                raise DuplicateRotorError(name)
            staged.append(rotor)

        moving = sum(1 for r in staged if r.rotates())
        if moving > self._pawls:
            raise TooManyMovingRotorsError(
                f"{moving} moving rotors but only {self._pawls} pawls"
            )
        if not staged[0].reflecting():
            raise MissingReflectorError(f"Slot 0 holds {staged[0].name}, not a reflector")
        for slot, rotor in enumerate(staged[1:], start=1):
            if rotor.reflecting():
                raise MisplacedReflectorError(f"Reflector {rotor.name} in slot {slot}")

        for rotor in staged:
            rotor.set(0)
        self._rotors = staged
        debug.log("machine", f"installed {' '.join(names)}")

    def set_rotors(self, setting: str) -> None:
        """Turn slots 1..n-1 to the symbols of ``setting``, leftmost first."""
        if not self._rotors:
            raise ConfigurationError("No rotors installed")
        self.check_setting(setting)

        for rotor, ch in zip(self._rotors[1:], setting):
            rotor.set(ch)
        debug.log("machine", f"window {setting}")

    def check_setting(self, setting: str) -> None:
        """Raise unless ``setting`` would be accepted by :meth:`set_rotors`."""
        if len(setting) != self._num_rotors - 1:
            raise SettingLengthMismatchError(
                f"Setting {setting!r} needs {self._num_rotors - 1} symbols"
            )
        for ch in setting:
            if ch not in self._alphabet:
                raise InvalidSymbolError(ch, str(self._alphabet))

    def set_plugboard(self, plugboard: Permutation) -> None:
        if plugboard.alphabet != self._alphabet:
            raise ConfigurationError("Plugboard uses a different alphabet")
        self._plugboard = plugboard
        debug.log("machine", f"plugboard {plugboard}")

    # ── stepping logic  ─────────────────────────────────────────
    def _advance_rotors(self) -> None:
        """Advance rotors one key-press, double-stepping included."""
        rotors = self._rotors
        last = len(rotors) - 1

        # decide from a snapshot first, then move (two-phase clarity)
        notched = [r.at_notch() for r in rotors]
        advance = [False] * len(rotors)
        for i, rotor in enumerate(rotors):
            if not rotor.rotates():
                continue
            if i == last:
                advance[i] = True
            elif notched[i + 1] and rotors[i + 1].rotates():
                advance[i] = True
            elif notched[i] and advance[i - 1]:
                advance[i] = True

        for rotor, step in zip(rotors, advance):
            if step:
                rotor.advance()
        debug.log("stepping", f"Rotor pos {self.positions()}")

    def _apply_rotors(self, c: int) -> int:
        for rotor in reversed(self._rotors):
            c = rotor.convert_forward(c)
        for rotor in self._rotors[1:]:
            c = rotor.convert_backward(c)
        return c

    # ── conversion  ─────────────────────────────────────────────
    def convert_index(self, c: int, trace: Trace | None = None) -> int:
        """Encipher index ``c`` after first advancing the machine."""
        if not self._rotors:
            raise ConfigurationError("No rotors installed")
        self._advance_rotors()

        signal = self._plugboard.permute(c)
        plugged = signal
        signal = self._apply_rotors(signal)
        signal = self._plugboard.permute(signal)

        if trace is not None:
            to_sym = self._alphabet.to_symbol
            trace(Step(self.positions(), to_sym(c), to_sym(plugged), to_sym(signal)))
        return signal

    def convert(self, symbol: str, trace: Trace | None = None) -> str:
        c = self.convert_index(self._alphabet.to_index(symbol), trace)
        return self._alphabet.to_symbol(c)

    def convert_message(self, msg: str, trace: Trace | None = None) -> str:
        """Encipher every non-whitespace symbol of ``msg`` in order.

        The whole message is checked against the alphabet before the rotors move.
        """
        symbols = [ch for ch in msg if not ch.isspace()]
        for ch in symbols:
            if ch not in self._alphabet:
                raise InvalidSymbolError(ch, str(self._alphabet))
        return "".join(self.convert(ch, trace) for ch in symbols)

    def __repr__(self) -> str:
        names = " ".join(r.name for r in self._rotors) or "empty"
        return f"<Machine [{names}] pos={self.positions()}>"
