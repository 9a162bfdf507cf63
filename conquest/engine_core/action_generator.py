"""
Action Generator - Generates all legal actions from a game state.

The action generator is used by:
1. UI to show available placements
2. Validation (is this action in legal_actions?)

Design: Generates Action objects, not just territory ids.
This ensures all generated actions are fully specified.
"""

from __future__ import annotations

from .state import GameState, GamePhase, Territory
from .action import Action


def legal_territories(state: GameState, player_id: int) -> list[Territory]:
    """
    Territories `player_id` may place a unit on right now.

    Empty when it is not their turn or placement is over.
    """
    if state.phase != GamePhase.PLACING:
        return []
    if not state.has_player(player_id) or state.current_player.player_id != player_id:
        return []

    return [
        t for t in state.board
        if not t.is_owned or t.is_owned_by(player_id)
    ]


def legal_actions(state: GameState) -> list[Action]:
    """Generate all legal placements for the current player."""
    if not state.players:
        return []
    player_id = state.current_player.player_id
    return [
        Action.place_unit(player_id, t.territory_id)
        for t in legal_territories(state, player_id)
    ]
