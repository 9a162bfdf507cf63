"""
Reducer - Applies actions to game state.

The reducer is the single point of state transition.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying, in a fixed order
- Returns ActionResult with success/failure, never raises for a bad command
- A failed action hands back the original state object untouched
"""

from __future__ import annotations
import logging

from .state import GameState, GamePhase
from .action import Action, ActionType, ActionResult
from .errors import (
    RuleViolation,
    UnknownPlayer,
    UnknownTerritory,
    NotPlayersTurn,
    IllegalMove,
    WrongPhase,
    NoUnitsLeft,
)

logger = logging.getLogger(__name__)


class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            violation = RuleViolation(f"No handler for action type: {action.action_type}")
            return ActionResult.failure(violation, state)

        violation = self._validate_action(state, action)
        if violation:
            logger.debug("Rejected %s: %s", action.action_type.value, violation.message)
            return ActionResult.failure(violation, state)

        return handler(state, action)

    def _validate_action(self, state: GameState, action: Action) -> RuleViolation | None:
        """
        Validate that an action is legal in the current state.

        Checks run in a fixed order and the first failure wins:
        player exists, territory exists, player's turn, ownership, phase,
        units left in the player's quota.
        Returns the violation if invalid, None if valid.
        """
        player_id = action.payload.player_id
        territory_id = action.payload.territory_id

        if player_id is None or not state.has_player(player_id):
            return UnknownPlayer(player_id)

        territory = state.board.get_territory(territory_id) if territory_id is not None else None
        if territory is None:
            return UnknownTerritory(territory_id)

        current_player_id = state.current_player.player_id
        if player_id != current_player_id:
            return NotPlayersTurn(player_id, current_player_id)

        if territory.is_owned and not territory.is_owned_by(player_id):
            return IllegalMove(player_id, territory_id, territory.owner)

        if state.phase != GamePhase.PLACING:
            return WrongPhase(state.phase.value)

        if not state.current_player.has_units_to_place:
            return NoUnitsLeft(player_id)

        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLACE_UNIT: self._handle_place_unit,
        }
        return handlers.get(action_type)

    def _handle_place_unit(self, state: GameState, action: Action) -> ActionResult:
        """
        Handle place unit action.

        Claims the territory if unowned, adds a unit to its garrison,
        spends one unit of the player's quota and hands the turn to the
        next player. The phase becomes PLAYING once nobody has units left.
        """
        player = state.get_player(action.payload.player_id)
        territory = state.board.get_territory(action.payload.territory_id)
        changes = []

        if not territory.is_owned:
            territory = territory.with_owner(player.player_id)
            changes.append(f"{player.display_name} claimed territory {territory.territory_id}")

        territory = territory.add_unit()
        player = player.placed_unit()
        changes.append(
            f"{player.display_name} placed a unit on territory {territory.territory_id} "
            f"({player.units_left_to_place} left to place)"
        )

        new_state = state.with_territory(territory).with_player(player)
        phase = GamePhase.PLAYING if new_state.all_units_placed() else GamePhase.PLACING
        new_state = new_state._copy_with(
            phase=phase,
            current_player_idx=(state.current_player_idx + 1) % state.num_players,
            turn_number=state.turn_number + 1,
        )

        if phase != state.phase:
            logger.info("Phase changed: %s -> %s", state.phase.value, phase.value)
            changes.append(f"Phase changed to {phase.value}")

        return ActionResult.success_with_state(new_state, changes=changes)


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)
