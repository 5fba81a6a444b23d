# main.py
from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import IO

from catalog import CATALOGS
from configuration import MachineConfig, apply_settings, is_settings_line, load_config
from debug import COMPONENTS, Debug
from errors import ConfigurationError, EnigmaError
from machine import Machine, Step, Trace

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Config:
    """Runtime switches for the command line driver."""

    verbose: bool = False           # trace every key-press on stderr
    block: int = 5                  # display group size
    log_to: str | None = None       # extra debug log file
    debug: list[str] = field(default_factory=list)


# ────────────────────────────────────────────────────────────────────────
#  1. Loading & formatting helpers
# ────────────────────────────────────────────────────────────────────────


def load_machine_config(source: str) -> MachineConfig:
    """``source`` names a built-in catalog (``default``, ``classic``) or a file."""
    if source in CATALOGS:
        return CATALOGS[source]()
    return load_config(source)


def group(msg: str, block: int = 5) -> str:
    """Split ``msg`` into space-separated groups of ``block`` symbols."""
    return " ".join(msg[i : i + block] for i in range(0, len(msg), block))


def format_step(step: Step) -> str:
    return f"[{step.positions}] {step.symbol_in} -> {step.plugged} -> {step.symbol_out}"


def trace_to_stderr(step: Step) -> None:
    print(format_step(step), file=sys.stderr)


# ────────────────────────────────────────────────────────────────────────
#  2. Message processing
# ────────────────────────────────────────────────────────────────────────


def process(
    machine: Machine,
    lines: Iterable[str],
    out: IO[str],
    *,
    block: int = 5,
    trace: Trace | None = None,
) -> None:
    """Run every line of ``lines`` through ``machine``, writing results to ``out``.

    Settings lines reconfigure the machine; any other line is a message.
    Blank lines before the first settings line are skipped.
    """
    configured = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if is_settings_line(line):
            apply_settings(machine, line)
            configured = True
        elif not configured:
            if line.strip():
                raise ConfigurationError("Input must start with a settings line ('* ...')")
        else:
            print(group(machine.convert_message(line, trace), block), file=out)


def _open(path: str | None, mode: str, default: IO[str]):
    if path is None:
        return nullcontext(default)
    try:
        return open(path, mode, encoding="utf-8")
    except OSError:
        raise ConfigurationError(f"could not open {path}") from None


def _start_logging(cfg: Config) -> None:
    try:
        dbg = Debug(log_to=cfg.log_to)
    except OSError:
        raise ConfigurationError(f"could not open {cfg.log_to}") from None
    dbg.enable(*cfg.debug)


# ────────────────────────────────────────────────────────────────────────
#  3. CLI
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt messages with a rotor machine")
    p.add_argument("config", help="Machine description file, or 'default' / 'classic'.")
    p.add_argument("input", nargs="?", help="Messages to process. Default: stdin")
    p.add_argument("output", nargs="?", help="Where to write results. Default: stdout")
    p.add_argument("--verbose", action="store_true", help="Trace rotor positions for every key-press.")
    p.add_argument("--log-to", metavar="FILE", help="Also stream debug logging to FILE.")
    p.add_argument(
        "--debug", action="append", default=[], choices=COMPONENTS, metavar="COMPONENT",
        help=f"Enable debug logging for a component ({', '.join(COMPONENTS)}).",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = Config(verbose=args.verbose, log_to=args.log_to, debug=args.debug)

    try:
        _start_logging(cfg)
        machine = load_machine_config(args.config).build_machine()
        with _open(args.input, "r", sys.stdin) as src, _open(args.output, "w", sys.stdout) as dst:
            process(
                machine, src, dst,
                block=cfg.block,
                trace=trace_to_stderr if cfg.verbose else None,
            )
    except EnigmaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
