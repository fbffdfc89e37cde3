# settings.py
from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from debug import debug
from errors import ConfigurationError
from plugboard import Pair, Plugboard
from rotor_and_reflector import ALPHABET, LETTERS, SIZE
from wheels import canonical_name

ROTOR_COUNT = 3
REQUIRED_KEYS = {"rotors", "positions", "rings", "plugs"}

_pair_re = re.compile(r"([A-Z]{2})")


# ────────────────────────────────────────────────────────────────────────
#  0. Field normalisers
# ────────────────────────────────────────────────────────────────────────


def _as_index(label: str, value: int | str) -> int:
    """Accept 0-based ints or window letters (``"A"`` → 0)."""
    if isinstance(value, str):
        letter = value.strip().upper()
        if letter not in LETTERS:
            raise ConfigurationError(f"{label} {value!r} is not a letter A–Z")
        return ALPHABET.index(letter)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{label} must be an integer or letter, got {value!r}")
    if not 0 <= value < SIZE:
        raise ConfigurationError(f"{label} {value} out of range 0–{SIZE - 1}")
    return value


def _triple(label: str, values: Sequence[Any]) -> tuple:
    if isinstance(values, str) or not isinstance(values, Sequence) or len(values) != ROTOR_COUNT:
        raise ConfigurationError(f"Need exactly {ROTOR_COUNT} {label}, got {values!r}")
    return tuple(values)


# ────────────────────────────────────────────────────────────────────────
#  1. MachineSettings
# ────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MachineSettings:
    """Everything needed to build one machine, validated on creation.

    Rotor ids, positions and rings are ordered left, middle, right.
    """

    rotors: tuple[str, ...] = ("I", "II", "III")
    positions: tuple[int, ...] = (0, 0, 0)
    rings: tuple[int, ...] = (0, 0, 0)
    plugs: tuple[Pair, ...] = field(default=())
    allow_repeated_rotors: bool = False

    def __post_init__(self) -> None:
        rotors = tuple(canonical_name(r) for r in _triple("rotors", self.rotors))
        if not self.allow_repeated_rotors and len(set(rotors)) != len(rotors):
            raise ConfigurationError(f"Rotor used more than once: {list(rotors)}")

        positions = tuple(_as_index("position", p) for p in _triple("positions", self.positions))
        rings = tuple(_as_index("ring setting", r) for r in _triple("ring settings", self.rings))
        if isinstance(self.plugs, str) or not isinstance(self.plugs, Sequence):
            raise ConfigurationError(f"Plugs must be a list of pairs, got {self.plugs!r}")
        plugs = Plugboard(self.plugs).pairs

        # frozen dataclass: write the normalised values through object
        object.__setattr__(self, "rotors", rotors)
        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "rings", rings)
        object.__setattr__(self, "plugs", plugs)
        debug.log("settings", f"validated {self!r}")

    # ––– dict / JSON helpers ––––––––––––––––––––––––––––––––––––––

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        if not isinstance(data, dict):
            raise ConfigurationError("Settings must be a mapping")
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")
        repeat = data.get("allow_repeated_rotors", False)
        if not isinstance(repeat, bool):
            raise ConfigurationError(f"allow_repeated_rotors must be true or false, got {repeat!r}")
        return cls(
            rotors=data["rotors"],
            positions=data["positions"],
            rings=data["rings"],
            plugs=data["plugs"],
            allow_repeated_rotors=repeat,
        )

    def to_dict(self) -> dict:
        return {
            "rotors": list(self.rotors),
            "positions": list(self.positions),
            "rings": list(self.rings),
            "plugs": [a + b for a, b in self.plugs],
            "allow_repeated_rotors": self.allow_repeated_rotors,
        }

    def window(self) -> str:
        """Starting positions as the letters shown in the rotor windows."""
        return "".join(ALPHABET[p] for p in self.positions)


def load_settings(path: str | Path) -> MachineSettings:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: not valid JSON ({exc})") from exc
    return MachineSettings.from_dict(data)


def save_settings(settings: MachineSettings, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    return path


# ────────────────────────────────────────────────────────────────────────
#  2. Operator-style string parsing
# ────────────────────────────────────────────────────────────────────────


def _parse_triple(text: str) -> list[int | str]:
    """``"0 5 25"`` → ints, ``"ABC"`` / ``"A B C"`` → letters."""
    parts = text.replace(",", " ").split()
    if len(parts) == 1 and parts[0].isalpha():
        parts = list(parts[0])
    return [int(p) if p.lstrip("-").isdigit() else p for p in parts]


def parse_positions(text: str) -> list[int | str]:
    return _parse_triple(text)


def parse_rings(text: str) -> list[int | str]:
    return _parse_triple(text)


def parse_plugs(text: str) -> list[str]:
    """``"ab cd"`` → ``["AB", "CD"]``; anything that is not a letter pair is ignored."""
    return _pair_re.findall(text.upper())


def parse_rotors(text: str) -> list[str]:
    return text.replace(",", " ").split()
