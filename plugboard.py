# plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from debug import debug
from errors import ConfigurationError
from rotor_and_reflector import LETTERS

Pair = tuple[str, str]


def swap(c: str, pairs: Sequence[Pair]) -> str:
    """Return the partner of *c* in the first pair holding it, else *c*."""
    for a, b in pairs:
        if c == a:
            return b
        if c == b:
            return a
    return c


def normalise_pair(raw: str | Sequence[str]) -> Pair:
    """Accept ``"AB"`` or ``("A", "B")`` and return ``("A", "B")``."""
    if len(raw) != 2:
        raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
    a, b = raw
    return a, b


class Plugboard:
    def __init__(self, pairs: Sequence[str | Sequence[str]] = ()) -> None:
        used: set[str] = set()
        checked: list[Pair] = []

        for raw in pairs:
            a, b = normalise_pair(raw)

            if a not in LETTERS or b not in LETTERS:
                bad = a if a not in LETTERS else b
                raise ConfigurationError(f"Symbol {bad!r} not in alphabet")
            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            checked.append((a, b))
            used.update((a, b))

        self.pairs: tuple[Pair, ...] = tuple(checked)

    # one helper does the job for both directions
    def _map(self, c: str) -> str:
        out = swap(c, self.pairs)
        debug.log("plugboard", f"{c}->{out}")
        return out

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(a + b for a, b in self.pairs)}>"
