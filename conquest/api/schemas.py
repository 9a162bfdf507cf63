"""
Pydantic Schemas - Serializable views of the engine for collaborators.

These models define the contract between the rules engine and whatever
presents it (CLI, UI, logs). They are read-only snapshots: building one
never touches the engine state.

Error Codes:
- UNKNOWN_PLAYER: Player id is not in the roster
- UNKNOWN_TERRITORY: Territory id is not on the board
- NOT_PLAYERS_TURN: Acting player is not the current player
- ILLEGAL_MOVE: Territory is owned by another player
- WRONG_PHASE: Placement is already over
"""

from __future__ import annotations
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..engine_core.action import ActionResult
from ..engine_core.errors import ErrorCode
from ..engine_core.state import GamePhase, GameState


# =============================================================================
# Shared Models
# =============================================================================

class PlayerInfo(BaseModel):
    """Player information for display."""
    player_id: int
    name: str
    units_left_to_place: int = Field(ge=0)
    is_current_turn: bool = False
    territory_count: int = 0

    model_config = {"from_attributes": True}


class TerritoryInfo(BaseModel):
    """Territory information for display."""
    territory_id: int
    name: Optional[str] = None
    owner: Optional[int] = None
    units: int = Field(0, ge=0)

    model_config = {"from_attributes": True}


class CardInfo(BaseModel):
    card_id: str

    model_config = {"from_attributes": True}


# =============================================================================
# Snapshots
# =============================================================================

class GameStateSnapshot(BaseModel):
    """
    Complete view of a GameState.

    `players` keeps roster order; `turn_order` lists player ids starting
    with the current player.
    """
    phase: GamePhase
    turn_number: int = 0
    current_player_id: int
    players: list[PlayerInfo] = Field(default_factory=list)
    turn_order: list[int] = Field(default_factory=list)
    board: list[TerritoryInfo] = Field(default_factory=list)
    cards: list[CardInfo] = Field(default_factory=list)
    api_version: str = "v1"

    @classmethod
    def from_state(cls, state: GameState) -> GameStateSnapshot:
        current_id = state.current_player.player_id
        return cls(
            phase=state.phase,
            turn_number=state.turn_number,
            current_player_id=current_id,
            players=[
                PlayerInfo(
                    player_id=p.player_id,
                    name=p.display_name,
                    units_left_to_place=p.units_left_to_place,
                    is_current_turn=p.player_id == current_id,
                    territory_count=len(state.board.territories_owned_by(p.player_id)),
                )
                for p in state.players
            ],
            turn_order=[p.player_id for p in state.players_in_turn_order()],
            board=[TerritoryInfo.model_validate(t) for t in state.board],
            cards=[CardInfo.model_validate(c) for c in state.cards],
        )


# =============================================================================
# Commands
# =============================================================================

class PlaceUnitRequest(BaseModel):
    """Request to place one unit."""
    player_id: int = Field(ge=0)
    territory_id: int = Field(ge=0)


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None


class PlaceUnitResponse(BaseModel):
    """Outcome of a placement."""
    success: bool
    state: GameStateSnapshot
    changes: list[str] = Field(default_factory=list)
    error: Optional[ErrorResponse] = None

    @classmethod
    def from_result(cls, result: ActionResult) -> PlaceUnitResponse:
        error = None
        if not result.success:
            error = ErrorResponse(
                error=result.error or "",
                error_code=result.error_code or ErrorCode.INVALID_ACTION,
            )
        return cls(
            success=result.success,
            state=GameStateSnapshot.from_state(result.new_state),
            changes=result.state_changes,
            error=error,
        )
