# rotor_and_reflector.py
from __future__ import annotations

import string

from debug import debug
from errors import ConfigurationError

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)
LETTERS = frozenset(ALPHABET)


def _check_index(label: str, value: int) -> int:
    # bool is an int subclass; True/False are not rotor settings
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{label} must be an integer, got {value!r}")
    if not 0 <= value < SIZE:
        raise ConfigurationError(f"{label} {value} out of range 0–{SIZE - 1}")
    return value


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        ring_setting: int = 0,
        position: int = 0,
        name: str = "",
    ) -> None:
        wiring = "".join(wiring)
        if len(wiring) != SIZE or sorted(wiring) != sorted(ALPHABET):
            raise ConfigurationError("wiring must be a permutation of the alphabet")
        if notch not in LETTERS:
            raise ConfigurationError(f"Notch must be a single alphabet letter, got {notch!r}")

        self.name = name
        self._wiring = wiring
        self.notch = notch
        self._ring_setting = _check_index("ring setting", ring_setting)
        self.position = _check_index("position", position)

        # integer lookup tables
        self._fwd = [ALPHABET.index(c) for c in wiring]
        self._rev = [wiring.index(c) for c in ALPHABET]

    @property
    def wiring(self) -> str:
        return self._wiring

    @property
    def ring_setting(self) -> int:
        return self._ring_setting

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = (self.position + 1) % SIZE

    def at_notch(self) -> bool:
        return ALPHABET[self.position] == self.notch

    # ── signal paths ---------------------------------------------
    def forward(self, c: str) -> str:
        """Right-to-left pass, current flowing toward the reflector."""
        shift = (ALPHABET.index(c) + self.position - self._ring_setting) % SIZE
        mapped = self._fwd[shift]
        out = ALPHABET[(mapped - self.position + self._ring_setting) % SIZE]
        debug.log("rotor", f"{self.name or '?'} fwd {c}->{out}")
        return out

    def backward(self, c: str) -> str:
        """Inverse of `forward` for the same position and ring setting."""
        shift = (ALPHABET.index(c) + self.position - self._ring_setting) % SIZE
        mapped = self._rev[shift]
        out = ALPHABET[(mapped - self.position + self._ring_setting) % SIZE]
        debug.log("rotor", f"{self.name or '?'} bwd {c}->{out}")
        return out

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.position} ring={self._ring_setting}>"


class Reflector:
    def __init__(self, wiring: str) -> None:
        if len(wiring) != SIZE:
            raise ConfigurationError("Reflector wiring length must match alphabet length")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            if c not in LETTERS:
                raise ConfigurationError(f"Reflector symbol {c!r} not in alphabet")
            j = ALPHABET.index(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ConfigurationError("Reflector wiring must be an involution with no fixed points")

        self._wiring = wiring

    @property
    def wiring(self) -> str:
        return self._wiring

    def reflect(self, c: str) -> str:
        out = self._wiring[ALPHABET.index(c)]
        debug.log("reflector", f"{c}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self._wiring}>"
