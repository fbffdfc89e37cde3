# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import debug
from errors import ConfigurationError
from plugboard import Plugboard
from rotor_and_reflector import ALPHABET, LETTERS, Reflector, Rotor
from settings import ROTOR_COUNT, MachineSettings
from stepping import step_rotors
from wheels import build_reflector, build_rotor


class Enigma:
    """Three-rotor machine. Rotor positions are the only state that changes.

    One instance is one session: encrypting and then decrypting needs two
    machines built from the same settings.
    """

    def __init__(
        self,
        rotors: Sequence[Rotor],
        plugboard: Plugboard,
        reflector: Reflector,
    ) -> None:
        if len(rotors) != ROTOR_COUNT:
            raise ConfigurationError(
                f"Machine takes exactly {ROTOR_COUNT} rotors, got {len(rotors)}"
            )
        if len({id(r) for r in rotors}) != ROTOR_COUNT:
            raise ConfigurationError("The same Rotor object cannot sit in two slots")

        self.rotors: list[Rotor] = list(rotors)     # left, middle, right
        self.plugboard = plugboard
        self.reflector = reflector

    @classmethod
    def from_settings(cls, settings: MachineSettings) -> "Enigma":
        rotors = [
            build_rotor(name, ring, pos)
            for name, ring, pos in zip(settings.rotors, settings.rings, settings.positions)
        ]
        return cls(rotors, Plugboard(settings.plugs), build_reflector())

    # ── state views ─────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, int, int]:
        left, middle, right = self.rotors
        return left.position, middle.position, right.position

    @property
    def window(self) -> str:
        """Letters currently showing, left to right."""
        return "".join(ALPHABET[p] for p in self.positions)

    # ── encipher one symbol  ────────────────────────────────────

    def encrypt_char(self, c: str) -> str:
        if c not in LETTERS:
            return c

        step_rotors(self.rotors)

        signal = self.plugboard.forward(c)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        out_ch = self.plugboard.backward(signal)
        debug.log("encipher", f"{c}->{out_ch} window={self.window}")
        return out_ch

    def process(self, text: str) -> str:
        return "".join(self.encrypt_char(ch) for ch in text)

    encrypt = process
    decrypt = process

    def __repr__(self) -> str:
        names = "-".join(r.name or "?" for r in self.rotors)
        return f"<Enigma {names} window={self.window} {self.plugboard!r}>"
