import pytest

from errors import ConfigurationError
from plugboard import Plugboard, swap
from rotor_and_reflector import ALPHABET


def test_swap_exchanges_either_side_of_a_pair():
    pairs = [("A", "B"), ("C", "D")]
    assert swap("A", pairs) == "B"
    assert swap("B", pairs) == "A"
    assert swap("D", pairs) == "C"
    assert swap("E", pairs) == "E"


def test_swap_first_matching_pair_wins():
    assert swap("A", [("A", "B"), ("A", "C")]) == "B"


def test_plugboard_is_an_involution():
    board = Plugboard(["AB", ("C", "D"), "XZ"])
    for c in ALPHABET:
        assert board.backward(board.forward(c)) == c


def test_plugboard_normalises_pairs():
    assert Plugboard(["AB", ("C", "D")]).pairs == (("A", "B"), ("C", "D"))


def test_empty_plugboard_passes_everything():
    board = Plugboard()
    assert all(board.forward(c) == c for c in ALPHABET)


@pytest.mark.parametrize(
    "pairs,message",
    [
        (["AB", "BC"], "already used"),
        (["AA"], "itself"),
        (["A1"], "not in alphabet"),
        (["ab"], "not in alphabet"),
        (["ABC"], "exactly 2"),
        ([("AB", "C")], "not in alphabet"),
    ],
)
def test_plugboard_rejects_bad_pairs(pairs, message):
    with pytest.raises(ConfigurationError, match=message):
        Plugboard(pairs)
