"""
Game Setup - Builds boards and rosters for new games.

This module handles:
- Creating territories and players with sequential ids
- Building a ready-to-play Game around them
"""

from __future__ import annotations

from .config import STARTING_UNITS
from .engine_core.game import Game, DiceSource
from .engine_core.state import Board, Player, Territory


def create_territories(count: int, first_id: int = 1, names: list[str] | None = None) -> list[Territory]:
    """Create `count` unowned territories with sequential ids."""
    if count < 1:
        raise ValueError("A board needs at least one territory")
    names = names or []
    return [
        Territory(territory_id=first_id + i, name=names[i] if i < len(names) else None)
        for i in range(count)
    ]


def create_board(count: int, first_id: int = 1, names: list[str] | None = None) -> Board:
    return Board(territories=tuple(create_territories(count, first_id, names)))


def create_players(count: int, first_id: int = 1, names: list[str] | None = None) -> list[Player]:
    """Create `count` players with sequential ids and no quota yet."""
    if count < 1:
        raise ValueError("A game needs at least one player")
    names = names or []
    return [
        Player(player_id=first_id + i, name=names[i] if i < len(names) else None)
        for i in range(count)
    ]


def setup_placement_game(
    num_players: int,
    num_territories: int,
    dice: DiceSource,
    starting_units: int = STARTING_UNITS,
    player_names: list[str] | None = None,
) -> Game:
    """
    Set up a new game in the placement phase.

    Args:
        num_players: Number of players, ids 1..num_players
        num_territories: Number of territories, ids 1..num_territories
        dice: Dice rolled once to pick the starting player
        starting_units: Quota every player starts with
        player_names: Optional display names, in roster order

    Returns:
        Game ready to accept placements
    """
    return Game(
        board=create_board(num_territories),
        players=create_players(num_players, names=player_names),
        dice=dice,
        starting_units=starting_units,
    )
