# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every configuration or conversion failure."""


# ── alphabet ──────────────────────────────────────────────────────
class AlphabetError(EnigmaError):
    pass


class InvalidSymbolError(EnigmaError):
    def __init__(self, symbol: str, alphabet: str = "") -> None:
        self.symbol = symbol
        msg = f"Invalid character {symbol!r}"
        if alphabet:
            msg += f" for alphabet {alphabet!r}"
        super().__init__(msg)


class IndexOutOfRangeError(EnigmaError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range 0–{size - 1}")


# ── permutations & rotors ─────────────────────────────────────────
class MalformedCycleSpecError(EnigmaError):
    pass


class NotADerangementError(EnigmaError):
    pass


# ── machine assembly ──────────────────────────────────────────────
class UnknownRotorError(EnigmaError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No rotor named {name!r}")


class DuplicateRotorError(EnigmaError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Rotor {name!r} used more than once")


class SlotCountMismatchError(EnigmaError):
    pass


class TooManyMovingRotorsError(EnigmaError):
    pass


class MissingReflectorError(EnigmaError):
    pass


class MisplacedReflectorError(EnigmaError):
    pass


class SettingLengthMismatchError(EnigmaError):
    pass


# ── textual configuration ─────────────────────────────────────────
class ConfigurationError(EnigmaError):
    pass
