"""
Engine Core - Deterministic placement-phase state management.

The engine is the runtime that:
1. Holds the board, roster and phase in an immutable GameState
2. Generates legal placements
3. Applies placements via the reducer
4. Drives a match through the Game orchestrator
"""

from .state import GameState, GamePhase, Player, Territory, Board, Card
from .errors import (
    ErrorCode,
    RuleViolation,
    UnknownPlayer,
    UnknownTerritory,
    NotPlayersTurn,
    IllegalMove,
    WrongPhase,
    NoUnitsLeft,
)
from .action import Action, ActionType, ActionPayload, ActionResult
from .reducer import Reducer, apply_action
from .action_generator import legal_actions, legal_territories
from .game import Game, DiceSource

__all__ = [
    "GameState",
    "GamePhase",
    "Player",
    "Territory",
    "Board",
    "Card",
    "ErrorCode",
    "RuleViolation",
    "UnknownPlayer",
    "UnknownTerritory",
    "NotPlayersTurn",
    "IllegalMove",
    "WrongPhase",
    "NoUnitsLeft",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Reducer",
    "apply_action",
    "legal_actions",
    "legal_territories",
    "Game",
    "DiceSource",
]
