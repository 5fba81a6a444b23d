# alphabet.py
from __future__ import annotations

from collections.abc import Iterator

from debug import Debug
from errors import AlphabetError, IndexOutOfRangeError, InvalidSymbolError

debug = Debug()

# reserved by the cycle and settings-line notations
_RESERVED = set("()*")


class Alphabet:
    """An ordered set of distinct one-character symbols, indexed 0..size-1."""

    def __init__(self, symbols: str) -> None:
        if not symbols:
            raise AlphabetError("Alphabet must contain at least one symbol")

        seen: set[str] = set()
        for ch in symbols:
            if ch in seen:
                raise AlphabetError(f"Duplicate symbol {ch!r} in alphabet")
            if ch.isspace() or ch in _RESERVED:
                raise AlphabetError(f"Symbol {ch!r} cannot appear in an alphabet")
            seen.add(ch)

        self._symbols: str = symbols
        self._index: dict[str, int] = {ch: i for i, ch in enumerate(symbols)}
        debug.log("alphabet", f"built alphabet of {len(symbols)} symbols")

    def size(self) -> int:
        return len(self._symbols)

    # symbol → integer signal
    def to_index(self, symbol: str) -> int:
        try:
            return self._index[symbol]
        except KeyError:
            raise InvalidSymbolError(symbol, self._symbols) from None

    # integer signal → symbol
    def to_symbol(self, index: int) -> str:
        if not (0 <= index < len(self._symbols)):
            raise IndexOutOfRangeError(index, len(self._symbols))
        return self._symbols[index]

    def contains(self, symbol: str) -> bool:
        return symbol in self._index

    # ── niceties --------------------------------------------------
    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        return f"<Alphabet {self._symbols!r}>"
