"""
Rule violations - Everything a placement command can be rejected for.

The reducer never raises these for a bad command; it returns them inside
an ActionResult. They are exceptions so callers can re-raise them with
ActionResult.raise_for_violation().
"""

from __future__ import annotations
from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes."""
    UNKNOWN_PLAYER = "UNKNOWN_PLAYER"
    UNKNOWN_TERRITORY = "UNKNOWN_TERRITORY"
    NOT_PLAYERS_TURN = "NOT_PLAYERS_TURN"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"
    WRONG_PHASE = "WRONG_PHASE"
    NO_UNITS_LEFT = "NO_UNITS_LEFT"
    INVALID_ACTION = "INVALID_ACTION"


class RuleViolation(Exception):
    """Base class for rejected commands."""

    code: ErrorCode = ErrorCode.INVALID_ACTION

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownPlayer(RuleViolation):
    """Referenced player id is not in the roster."""

    code = ErrorCode.UNKNOWN_PLAYER

    def __init__(self, player_id: int):
        self.player_id = player_id
        super().__init__(f"Player {player_id} not found")


class UnknownTerritory(RuleViolation):
    """Referenced territory id is not on the board."""

    code = ErrorCode.UNKNOWN_TERRITORY

    def __init__(self, territory_id: int):
        self.territory_id = territory_id
        super().__init__(f"Territory {territory_id} not found")


class NotPlayersTurn(RuleViolation):
    code = ErrorCode.NOT_PLAYERS_TURN

    def __init__(self, player_id: int, current_player_id: int):
        self.player_id = player_id
        self.current_player_id = current_player_id
        super().__init__(
            f"Not player {player_id}'s turn (current player is {current_player_id})"
        )


class IllegalMove(RuleViolation):
    """Player tried to place on a territory claimed by someone else."""

    code = ErrorCode.ILLEGAL_MOVE

    def __init__(self, player_id: int, territory_id: int, owner_id: int):
        self.player_id = player_id
        self.territory_id = territory_id
        self.owner_id = owner_id
        super().__init__(
            f"Player {player_id} cannot place on territory {territory_id} "
            f"owned by player {owner_id}"
        )


class WrongPhase(RuleViolation):
    code = ErrorCode.WRONG_PHASE

    def __init__(self, phase: str):
        self.phase = phase
        super().__init__(f"Units cannot be placed during the '{phase}' phase")


class NoUnitsLeft(RuleViolation):
    """Current player has already spent their whole quota."""

    code = ErrorCode.NO_UNITS_LEFT

    def __init__(self, player_id: int):
        self.player_id = player_id
        super().__init__(f"Player {player_id} has no units left to place")
