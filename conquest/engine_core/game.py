"""
Game - Orchestrates one match through the placement phase.

Usage:
    game = Game(board, players, dice=RandomDice(seed=7))

    result = game.place_unit(player_id=1, territory_id=4)
    if not result.success:
        show_error(result.error_code, result.error)

    game.state.phase  # PLACING until every quota is spent, then PLAYING

The Game owns the current GameState and replaces it wholesale after every
successful command. Access is not synchronized; callers sharing a Game
across threads must serialize calls themselves.
"""

from __future__ import annotations
from collections.abc import Callable, Sequence
import logging

from ..config import STARTING_UNITS
from ..dice import validate_roll
from ..validation import validate_setup
from .action import Action, ActionResult
from .reducer import Reducer
from .state import Board, Card, GamePhase, GameState, Player, Territory

logger = logging.getLogger(__name__)

DiceSource = Callable[[], int]


class Game:
    """
    A single match.

    Construction seeds every player's quota, rolls the dice once to
    choose the starting player and leaves the game in the PLACING phase.
    """

    def __init__(
        self,
        board: Board | Sequence[Territory],
        players: Sequence[Player],
        dice: DiceSource,
        starting_units: int = STARTING_UNITS,
        cards: Sequence[Card] = (),
    ):
        if not isinstance(board, Board):
            board = Board(territories=tuple(board))

        validate_setup(board.territories, players, starting_units).raise_on_error()

        self._dice = dice
        self._reducer = Reducer()
        self._state = GameState(
            board=board,
            phase=GamePhase.PLACING,
            players=tuple(p.give_units_to_place(starting_units) for p in players),
            current_player_idx=0,
            cards=tuple(cards),
        )
        self._decide_starting_player()

    def _decide_starting_player(self) -> None:
        """Roll once; a roll of d makes roster position d-1 the current player."""
        roll = validate_roll(self.roll_dice(), self._state.num_players)
        self._update(self._state._copy_with(current_player_idx=roll - 1))
        logger.info(
            "Rolled %d, player %d starts",
            roll, self._state.current_player.player_id,
        )

    @property
    def state(self) -> GameState:
        return self._state

    def _update(self, new_state: GameState) -> None:
        self._state = new_state

    def roll_dice(self) -> int:
        return self._dice()

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    def is_player_turn(self, player_id: int) -> bool:
        return self._state.current_player.player_id == player_id

    def player_exists(self, player_id: int) -> bool:
        return self._state.has_player(player_id)

    def territory_exists(self, territory_id: int) -> bool:
        return self._state.board.has_territory(territory_id)

    def apply(self, action: Action) -> ActionResult:
        """
        Apply an action and adopt the resulting state if it succeeded.

        A failed action leaves the current state object in place.
        """
        result = self._reducer.apply(self._state, action)
        if result.success:
            self._update(result.new_state)
        return result

    def place_unit(self, player_id: int, territory_id: int) -> ActionResult:
        """
        Place one unit of `player_id` on `territory_id`.

        Returns the ActionResult; call raise_for_violation() on it to turn
        a rejected placement into an exception.
        """
        return self.apply(Action.place_unit(player_id, territory_id))
