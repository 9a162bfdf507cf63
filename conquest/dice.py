"""
Dice - Random sources injected into the game.

The engine only needs "a thing that returns an int when called".
Any zero-argument callable works; the classes here add seeding
and scripting on top of that contract.

Implementations:
- RandomDice: seeded random.Random, for real games
- ScriptedDice: replays fixed rolls, for tests and reproducible runs
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Iterable
import random

from .config import DICE_SIDES


class DiceExhausted(RuntimeError):
    """Raised when ScriptedDice is rolled more often than it was scripted for."""

    def __init__(self, rolls_made: int):
        self.rolls_made = rolls_made
        super().__init__(f"No scripted rolls left after {rolls_made} roll(s)")


class InvalidDiceRoll(ValueError):
    """Raised when a roll cannot select a starting player."""

    def __init__(self, roll: int, num_players: int):
        self.roll = roll
        self.num_players = num_players
        super().__init__(f"Dice roll {roll} is outside 1..{num_players}")


class Dice(ABC):
    """Abstract base class for dice."""

    @abstractmethod
    def roll(self) -> int:
        """Roll once and return the result."""
        pass

    def __call__(self) -> int:
        return self.roll()


class RandomDice(Dice):
    """
    Fair dice backed by random.Random.

    Pass a seed for deterministic games.
    """

    def __init__(self, sides: int = DICE_SIDES, seed: int | None = None):
        if sides < 1:
            raise ValueError("Dice need at least one side")
        self.sides = sides
        self._rng = random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, self.sides)


class ScriptedDice(Dice):
    """
    Dice that return a fixed sequence of rolls, then fail loudly.
    """

    def __init__(self, rolls: Iterable[int]):
        self._rolls = list(rolls)
        self.rolls_made = 0

    @property
    def remaining(self) -> int:
        return len(self._rolls)

    def roll(self) -> int:
        if not self._rolls:
            raise DiceExhausted(self.rolls_made)
        self.rolls_made += 1
        return self._rolls.pop(0)


def starting_player_roll(num_players: int, seed: int | None = None) -> RandomDice:
    """Dice whose every roll can pick a starting player among `num_players`."""
    return RandomDice(sides=num_players, seed=seed)


def validate_roll(roll: int, num_players: int) -> int:
    """Return `roll` if it selects a roster position, raise InvalidDiceRoll otherwise."""
    if isinstance(roll, bool) or not isinstance(roll, int):
        raise InvalidDiceRoll(roll, num_players)
    if roll < 1 or roll > num_players:
        raise InvalidDiceRoll(roll, num_players)
    return roll
