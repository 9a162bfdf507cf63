"""
Pytest fixtures for Conquest tests.
"""

import pytest

from ..dice import ScriptedDice
from ..engine_core.game import Game
from ..engine_core.state import Board, GamePhase, GameState, Player, Territory
from ..setup import create_board, create_players


@pytest.fixture
def three_territory_board() -> Board:
    """Territories 1, 2 and 3, all unowned."""
    return create_board(3)


@pytest.fixture
def three_players() -> list[Player]:
    """Players 1, 2 and 3 with no quota yet."""
    return create_players(3)


@pytest.fixture
def make_game(three_territory_board, three_players):
    """
    Factory for 3-player games on the 3-territory board.

    `rolls` scripts the dice; the first roll picks the starting player.
    """
    def _make(*rolls: int, starting_units: int = 35) -> Game:
        return Game(
            board=three_territory_board,
            players=three_players,
            dice=ScriptedDice(rolls or (1,)),
            starting_units=starting_units,
        )
    return _make


@pytest.fixture
def game(make_game) -> Game:
    """3-player game where player 1 starts."""
    return make_game(1)


@pytest.fixture
def placing_state() -> GameState:
    """
    Hand-built state mid-placement: player 2 to move,
    territory 1 owned by player 1, territory 2 owned by player 2.
    """
    return GameState(
        board=Board(territories=(
            Territory(territory_id=1, owner=1, units=2),
            Territory(territory_id=2, owner=2, units=1),
            Territory(territory_id=3),
        )),
        phase=GamePhase.PLACING,
        players=(
            Player(player_id=1, units_left_to_place=3),
            Player(player_id=2, units_left_to_place=4),
        ),
        current_player_idx=1,
        turn_number=3,
    )
