# catalog.py
from __future__ import annotations

from alphabet import Alphabet
from configuration import MachineConfig, parse_config
from permutation import Permutation
from rotor_and_reflector import Rotor

ALPHA26 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# ────────────────────────────────────────────────────────────────────────
#  Wheel database (historical wirings, cycle notation)
# ────────────────────────────────────────────────────────────────────────

DEFAULT_CONFIG = f"""\
{ALPHA26}
5 3
I MQ      (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
II ME     (FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT) (A) (Q)
III MV    (ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)
IV MJ     (AEPLIYWCOXMRFZBSTGJQNH) (DV) (KU)
V MZ      (AVOLDRWFIUQ)(BZKSMNHYC) (EGTJPX)
VI MZM    (AJQDVLEOZWIYTS) (CGMNHFUX) (BPRK)
VII MZM   (ANOUPFRIMBZTLWKSVEGCJYDHXQ)
VIII MZM  (AFLSETWUNDHOZVICQ) (BKJ) (GXY) (MPR)
Beta N    (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
Gamma N   (AFNIRLBSQWVXGUZDKMTPCOYJHE)
B R       (AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP) (RX) (SZ) (TV)
C R       (AR) (BD) (CO) (EJ) (FN) (GT) (HK) (IV) (LM) (PW) (QZ) (SX) (UY)
"""

# three-rotor machine: substitution strings and turnover notches
CLASSIC_ROTORS = {
    "I":    ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":   ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III":  ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":   ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":    ("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    "VI":   ("JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    "VII":  ("NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    "VIII": ("FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
}

CLASSIC_REFLECTORS = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}


def default_config() -> MachineConfig:
    """The four-rotor naval wheel set: five slots, three pawls.

    ``B`` and ``C`` are the thin reflectors; with ``Beta`` at ``A`` the thin
    ``B`` behaves exactly like the wide ``B`` of :func:`classic_config`.
    """
    return parse_config(DEFAULT_CONFIG)


def classic_config() -> MachineConfig:
    """The three-rotor army wheel set: four slots, three pawls."""
    alpha = Alphabet(ALPHA26)
    rotors = [
        Rotor.moving(name, Permutation.from_wiring(wiring, alpha), notches)
        for name, (wiring, notches) in CLASSIC_ROTORS.items()
    ]
    rotors += [
        Rotor.reflector(name, Permutation.from_wiring(wiring, alpha))
        for name, wiring in CLASSIC_REFLECTORS.items()
    ]
    return MachineConfig(alpha, 4, 3, rotors)


CATALOGS = {"default": default_config, "classic": classic_config}
