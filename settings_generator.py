# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from errors import ConfigurationError
from rotor_and_reflector import ALPHABET, SIZE
from settings import ROTOR_COUNT, MachineSettings, save_settings
from wheels import ROTOR_CATALOG

MAX_PAIRS = SIZE // 2

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    if not 0 <= k <= MAX_PAIRS:
        raise ConfigurationError(f"Pair count {k} out of range 0–{MAX_PAIRS}")
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(seed: int | None = None, pairs: int = 10) -> MachineSettings:
    """A random, valid key sheet entry; same *seed* gives the same sheet."""
    rng = build_rng(seed)
    return MachineSettings(
        rotors=tuple(rng.sample(list(ROTOR_CATALOG), ROTOR_COUNT)),
        positions=tuple(rng.randrange(SIZE) for _ in range(ROTOR_COUNT)),
        rings=tuple(rng.randrange(SIZE) for _ in range(ROTOR_COUNT)),
        plugs=tuple(choose_pairs(pairs, rng)),
    )


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma key sheet")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=10,
        help=f"Number of plugboard pairs 0–{MAX_PAIRS} (default: 10)",
    )
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> int:
    args = parse_cli(argv)
    try:
        cfg = generate_settings(args.seed, args.pairs)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    save_settings(cfg, args.outfile)
    print(f"Wrote {args.outfile}\n"
          f"   rotors      : {' '.join(cfg.rotors)}\n"
          f"   window      : {cfg.window()}\n"
          f"   rings       : {' '.join(map(str, cfg.rings))}\n"
          f"   plug pairs  : {len(cfg.plugs)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
