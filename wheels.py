# wheels.py
from __future__ import annotations

from typing import Dict, Tuple

from errors import ConfigurationError
from rotor_and_reflector import Reflector, Rotor

# name → (wiring, notch)
ROTOR_CATALOG: Dict[str, Tuple[str, str]] = {
    "I":   ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":  ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
}

REFLECTOR_B = "YRUHQSLDPXNGOKMIEBFZCWVJAT"


def canonical_name(name: str) -> str:
    """Map an operator-typed rotor id (``"ii"``, ``" III "``) onto the catalog."""
    key = str(name).strip().upper()
    if key not in ROTOR_CATALOG:
        raise ConfigurationError(
            f"Unknown rotor {name!r}. Expected one of {list(ROTOR_CATALOG)}"
        )
    return key


def build_rotor(name: str, ring_setting: int = 0, position: int = 0) -> Rotor:
    """Return a fresh Rotor so callers never share mutable wheels."""
    key = canonical_name(name)
    wiring, notch = ROTOR_CATALOG[key]
    return Rotor(wiring, notch, ring_setting, position, name=key)


def build_reflector() -> Reflector:
    return Reflector(REFLECTOR_B)
