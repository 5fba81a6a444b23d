# configuration.py
"""Readers for machine descriptions and settings lines.

A machine description lists the alphabet, the slot and pawl counts and every
available wheel::

    ABCDEFGHIJKLMNOPQRSTUVWXYZ
    5 3
    I MQ   (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
    Beta N (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
    B R    (AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP) (RX) (SZ) (TV)

The type token is ``M`` followed by the notch symbols for a moving rotor, ``N``
for a fixed one and ``R`` for a reflector.  The same information can be given
as JSON (see :func:`parse_json_config`).

A settings line picks and positions the wheels for the next messages::

    * B Beta III IV I AXLE (HQ) (EX) (IP) (TR) (BY)
"""
from __future__ import annotations

import json
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path

from alphabet import Alphabet
from debug import Debug
from errors import ConfigurationError
from machine import Machine
from permutation import Permutation
from rotor_and_reflector import Rotor, RotorKind

debug = Debug()

_KINDS = {"moving": RotorKind.MOVING, "fixed": RotorKind.FIXED, "reflector": RotorKind.REFLECTOR}


@dataclass
class MachineConfig:
    """Everything needed to build a machine, minus the per-message settings."""

    alphabet: Alphabet
    num_rotors: int
    num_pawls: int
    rotors: list[Rotor] = field(default_factory=list)

    def build_machine(self) -> Machine:
        """Return a fresh machine with its own copies of the wheels."""
        return Machine(self.alphabet, self.num_rotors, self.num_pawls, deepcopy(self.rotors))


@dataclass(frozen=True)
class Settings:
    rotors: tuple[str, ...]
    setting: str
    plugboard: str = ""


# ────────────────────────────────────────────────────────────────────────
#  1. Machine descriptions
# ────────────────────────────────────────────────────────────────────────


def _is_cycle_token(token: str) -> bool:
    return "(" in token or ")" in token


def _make_rotor(name: str, kind: RotorKind, notches: str, cycles: str, alphabet: Alphabet) -> Rotor:
    if kind is not RotorKind.MOVING and notches:
        raise ConfigurationError(f"Rotor {name}: only moving rotors may have notches")
    perm = Permutation(cycles, alphabet)
    debug.log("config", f"rotor {name} kind={kind.name} notches={notches!r}")
    return Rotor(name, perm, kind, notches)


def parse_config(text: str) -> MachineConfig:
    tokens = text.split()
    if len(tokens) < 3:
        raise ConfigurationError("configuration file truncated")

    alphabet = Alphabet(tokens[0])
    try:
        num_rotors, num_pawls = int(tokens[1]), int(tokens[2])
    except ValueError:
        raise ConfigurationError(
            f"Expected rotor and pawl counts, got {tokens[1]!r} {tokens[2]!r}"
        ) from None

    rotors: list[Rotor] = []
    pos = 3
    while pos < len(tokens):
        name = tokens[pos]
        if _is_cycle_token(name):
            raise ConfigurationError(f"bad rotor description near {name!r}")
        if pos + 1 >= len(tokens):
            raise ConfigurationError(f"bad rotor description for {name}")
        type_token = tokens[pos + 1]
        try:
            kind = RotorKind(type_token[0])
        except ValueError:
            raise ConfigurationError(f"Rotor {name}: unknown type {type_token!r}") from None

        pos += 2
        cycles: list[str] = []
        while pos < len(tokens) and _is_cycle_token(tokens[pos]):
            cycles.append(tokens[pos])
            pos += 1
        rotors.append(_make_rotor(name, kind, type_token[1:], " ".join(cycles), alphabet))

    return MachineConfig(alphabet, num_rotors, num_pawls, rotors)


def _as_int(data: dict, key: str) -> int:
    value = data[key]
    if isinstance(value, bool):
        raise ConfigurationError(f"{key!r} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key!r} must be an integer, got {value!r}") from None


def parse_json_config(data: dict) -> MachineConfig:
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config must be a JSON object, got {type(data).__name__}")
    required = {"alphabet", "rotors", "pawls", "wheels"}
    missing = required - data.keys()
    if missing:
        raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")

    if not isinstance(data["alphabet"], str):
        raise ConfigurationError("'alphabet' must be a string")
    if not isinstance(data["wheels"], list):
        raise ConfigurationError("'wheels' must be a list")
    num_rotors, num_pawls = _as_int(data, "rotors"), _as_int(data, "pawls")

    alphabet = Alphabet(data["alphabet"])
    rotors: list[Rotor] = []
    for wheel in data["wheels"]:
        if not isinstance(wheel, dict):
            raise ConfigurationError(f"bad wheel description {wheel!r}: expected an object")
        notches, cycles = wheel.get("notches", ""), wheel.get("cycles", "")
        if not isinstance(notches, str) or not isinstance(cycles, str):
            raise ConfigurationError(f"bad wheel description {wheel!r}: notches and cycles are strings")
        try:
            name, kind = wheel["name"], _KINDS[wheel["kind"]]
        except (KeyError, TypeError) as exc:
            raise ConfigurationError(f"bad wheel description {wheel!r}: {exc}") from None
        if not isinstance(name, str):
            raise ConfigurationError(f"bad wheel description {wheel!r}: name must be a string")
        rotors.append(_make_rotor(name, kind, notches, cycles, alphabet))
    return MachineConfig(alphabet, num_rotors, num_pawls, rotors)


def load_config(path: str | Path) -> MachineConfig:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        raise ConfigurationError(f"could not open {path}") from None

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"{path}: {exc}") from None
        return parse_json_config(data)
    return parse_config(text)


# ────────────────────────────────────────────────────────────────────────
#  2. Settings lines
# ────────────────────────────────────────────────────────────────────────


def is_settings_line(line: str) -> bool:
    return line.lstrip().startswith("*")


def parse_settings(line: str, num_rotors: int) -> Settings:
    tokens = line.split()
    if not tokens or tokens[0] != "*":
        raise ConfigurationError(f"Settings line must start with '*': {line!r}")
    if len(tokens) < num_rotors + 2:
        raise ConfigurationError(
            f"Settings line needs {num_rotors} rotor names and a setting: {line!r}"
        )
    names = tuple(tokens[1 : num_rotors + 1])
    setting = tokens[num_rotors + 1]
    plugboard = " ".join(tokens[num_rotors + 2 :])
    return Settings(names, setting, plugboard)


def apply_settings(machine: Machine, line: str) -> Settings:
    """Configure ``machine`` from one settings line and return what was parsed.

    The line is applied whole or not at all: the plugboard and window are
    checked before any rotor is installed.
    """
    settings = parse_settings(line, machine.num_rotors())
    plugboard = Permutation(settings.plugboard, machine.alphabet())
    machine.check_setting(settings.setting)

    machine.insert_rotors(settings.rotors)
    machine.set_rotors(settings.setting)
    machine.set_plugboard(plugboard)
    debug.log("config", f"applied {line.strip()!r}")
    return settings
