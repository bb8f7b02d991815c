"""Counting and listing dice rolls, keypad letter combinations and subsets."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import product

MODULUS = 10**9 + 7

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def _rolls(target: int, faces: int, length: int | None) -> Iterator[tuple[int, ...]]:
    if target == 0:
        if length is None or length == 0:
            yield ()
        return
    if length == 0:
        return
    rest_length = None if length is None else length - 1
    for face in range(1, min(faces, target) + 1):
        for rest in _rolls(target - face, faces, rest_length):
            yield (face, *rest)


def _check(target: int, faces: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")
    if faces < 1:
        raise ValueError("a die needs at least one face")


def dice_rolls(target, faces):
    """Return every sequence of rolls of a ``faces``-sided die that adds up to ``target``."""
    _check(target, faces)
    return list(_rolls(target, faces, None))


def dice_rolls_of_length(n, k, target):
    """Return every sequence of ``n`` rolls of a ``k``-sided die adding up to ``target``."""
    _check(target, k)
    if n < 0:
        raise ValueError("number of dice must not be negative")
    return list(_rolls(target, k, n))


def count_dice_rolls(n, k, target):
    """Return how many ways ``n`` ``k``-sided dice add up to ``target``, modulo 10**9 + 7."""
    _check(target, k)
    if n < 0:
        raise ValueError("number of dice must not be negative")
    ways = [1] + [0] * target
    for _ in range(n):
        ways = [0] + [
            sum(ways[total - face] for face in range(1, min(k, total) + 1)) % MODULUS
            for total in range(1, target + 1)
        ]
    return ways[target]


def letter_combinations(digits):
    """Return every word a phone keypad can spell from ``digits``."""
    try:
        letters = [_KEYPAD[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"digit {exc.args[0]!r} has no letters") from None
    return ["".join(combo) for combo in product(*letters)]


def subsets(values):
    """Return every subset of ``values``, each keeping the input order."""
    result: list[list] = [[]]
    for value in values:
        result += [subset + [value] for subset in result]
    return result