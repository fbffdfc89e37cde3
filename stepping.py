# stepping.py
from __future__ import annotations

from copy import deepcopy
from collections.abc import Sequence

from debug import debug
from rotor_and_reflector import Rotor


def step_rotors(rotors: Sequence[Rotor]) -> None:
    """Advance a left/middle/right rotor set by one key-press, in place.

    The middle rotor's notch is checked both before and after the right
    rotor may have pushed it, so a middle rotor that lands on its notch
    steps again together with the left rotor (double-stepping).
    """
    left, middle, right = rotors

    middle_at_notch_before = middle.at_notch()
    if right.at_notch():
        middle.step()
    middle_at_notch_after = middle.at_notch()

    if middle_at_notch_before or middle_at_notch_after:
        left.step()
        middle.step()

    right.step()
    debug.log("stepping", f"positions {[r.position for r in rotors]}")


def next_positions(rotors: Sequence[Rotor]) -> tuple[int, int, int]:
    """Return the positions *rotors* would hold after one key-press.

    The given rotors are left untouched.
    """
    probe = deepcopy(list(rotors))
    step_rotors(probe)
    left, middle, right = probe
    return left.position, middle.position, right.position
