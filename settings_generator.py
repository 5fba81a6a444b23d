# settings_generator.py
from __future__ import annotations

import argparse
import sys
from random import Random, SystemRandom
from typing import List

from configuration import MachineConfig
from errors import ConfigurationError, EnigmaError
from main import load_machine_config

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    max_possible = len(alpha) // 2
    k = min(k, max_possible)
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def choose_rotors(cfg: MachineConfig, rng: Random | SystemRandom) -> List[str]:
    """Reflector first, then fixed rotors, then as many moving rotors as pawls allow."""
    reflectors = [r.name for r in cfg.rotors if r.reflecting()]
    moving = [r.name for r in cfg.rotors if r.rotates()]
    fixed = [r.name for r in cfg.rotors if not r.rotates() and not r.reflecting()]

    slots = cfg.num_rotors - 1
    n_moving = min(cfg.num_pawls, len(moving), slots)
    n_fixed = slots - n_moving
    if not reflectors:
        raise ConfigurationError("No reflector available")
    if n_fixed > len(fixed):
        raise ConfigurationError(f"Need {n_fixed} fixed rotors, only {len(fixed)} available")

    return [rng.choice(reflectors)] + rng.sample(fixed, n_fixed) + rng.sample(moving, n_moving)


def generate_settings(cfg: MachineConfig, rng: Random | SystemRandom, pairs: int = 5) -> str:
    alpha = str(cfg.alphabet)
    rotors = choose_rotors(cfg, rng)
    setting = "".join(rng.choices(alpha, k=cfg.num_rotors - 1))
    plugs = " ".join(f"({p})" for p in choose_pairs(alpha, pairs, rng))
    return " ".join(["*", *rotors, setting, plugs]).rstrip()


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random settings line")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--config",
        default="default",
        help="Machine description file, or 'default' / 'classic' (default: default)",
    )
    p.add_argument("--pairs", type=int, default=5, help="Plugboard pairs (default: 5)")
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    args = parse_cli(argv)
    try:
        cfg = load_machine_config(args.config)
        print(generate_settings(cfg, build_rng(args.seed), args.pairs))
    except EnigmaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
