# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, TextIO

from debug import COMPONENTS, debug
from enigma import Enigma
from errors import ConfigurationError
from settings import (
    MachineSettings,
    load_settings,
    parse_plugs,
    parse_positions,
    parse_rings,
    parse_rotors,
    save_settings,
)

# ────────────────────────────────────────────────────────────────────────
#  1. Settings assembly
# ────────────────────────────────────────────────────────────────────────


def build_settings(args: argparse.Namespace) -> MachineSettings:
    """Config file first, then any command-line overrides on top."""
    base = load_settings(args.config) if args.config else MachineSettings()

    overrides: dict = {}
    if args.rotors is not None:
        overrides["rotors"] = tuple(parse_rotors(args.rotors))
    if args.positions is not None:
        overrides["positions"] = tuple(parse_positions(args.positions))
    if args.rings is not None:
        overrides["rings"] = tuple(parse_rings(args.rings))
    if args.plugs is not None:
        overrides["plugs"] = tuple(parse_plugs(args.plugs))

    # replace() re-runs validation
    return replace(base, **overrides) if overrides else base


# ────────────────────────────────────────────────────────────────────────
#  2. Line source → machine → text sink
# ────────────────────────────────────────────────────────────────────────


def run(machine: Enigma, lines: Iterable[str], sink: TextIO) -> None:
    """Feed every line through one machine, in order, keeping line endings."""
    for line in lines:
        sink.write(machine.process(line))


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Encrypt or decrypt with a three-rotor Enigma (same operation both ways)."
    )
    source = p.add_mutually_exclusive_group()
    source.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, lines are read from --input or stdin.")
    source.add_argument("--input", metavar="FILE", type=Path, help="Read text from FILE instead of stdin.")
    p.add_argument("--output", metavar="FILE", type=Path, help="Write the result to FILE instead of stdout.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON.")
    p.add_argument("--rotors", metavar="IDS", help="Rotor order left to right, e.g. 'I II III'.")
    p.add_argument("--positions", metavar="POS", help="Start positions, e.g. '0 0 0' or 'ABC'.")
    p.add_argument("--rings", metavar="RINGS", help="Ring settings 0-25, e.g. '0 0 0'.")
    p.add_argument("--plugs", metavar="PAIRS", help="Plugboard pairs, e.g. 'AB CD'.")
    p.add_argument("--save-config", metavar="FILE", type=Path, help="Write the effective settings to FILE as JSON.")
    p.add_argument("--debug", metavar="COMPONENT", action="append", choices=COMPONENTS, default=[], help="Log one component's internals (repeatable).")
    p.add_argument("--log-file", metavar="FILE", help="Send --debug output to FILE instead of stderr.")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def _fail(exc: Exception) -> int:
    print(f"error: {exc}", file=sys.stderr)
    return 2


def _session(args: argparse.Namespace) -> int:
    try:
        settings = build_settings(args)
    except (ConfigurationError, OSError) as exc:
        return _fail(exc)

    if args.save_config:
        try:
            save_settings(settings, args.save_config)
        except OSError as exc:
            return _fail(exc)

    machine = Enigma.from_settings(settings)

    if args.message is not None:
        lines: Iterable[str] = [args.message + "\n"]
    elif args.input is not None:
        try:
            lines = args.input.read_text(encoding="utf-8").splitlines(keepends=True)
        except OSError as exc:
            return _fail(exc)
    else:
        lines = sys.stdin

    if args.output is None:
        run(machine, lines, sys.stdout)
        return 0

    try:
        sink = args.output.open("w", encoding="utf-8")
    except OSError as exc:
        return _fail(exc)
    with sink:
        run(machine, lines, sink)
    return 0


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    if not args.debug:
        return _session(args)

    try:
        with debug.attached(*args.debug, log_to=args.log_file):
            return _session(args)
    except OSError as exc:
        # log file could not be opened
        return _fail(exc)


if __name__ == "__main__":
    sys.exit(main())
