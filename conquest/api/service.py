"""
Game Service - Facade between the engine and presentation collaborators.

Translates schema requests into engine commands and engine results
into schema responses. Holds no rules of its own.
"""

from __future__ import annotations

from ..engine_core.action_generator import legal_territories
from ..engine_core.game import Game
from .schemas import GameStateSnapshot, PlaceUnitRequest, PlaceUnitResponse, TerritoryInfo


class GameService:
    """
    Service wrapping a single Game.

    Usage:
        service = GameService(game)
        response = service.place_unit(PlaceUnitRequest(player_id=1, territory_id=3))
    """

    def __init__(self, game: Game):
        self.game = game

    def get_state(self) -> GameStateSnapshot:
        return GameStateSnapshot.from_state(self.game.state)

    def place_unit(self, request: PlaceUnitRequest) -> PlaceUnitResponse:
        result = self.game.place_unit(request.player_id, request.territory_id)
        return PlaceUnitResponse.from_result(result)

    def legal_moves(self, player_id: int | None = None) -> list[TerritoryInfo]:
        """Territories the player (default: current player) may place on."""
        if player_id is None:
            player_id = self.game.current_player.player_id
        return [
            TerritoryInfo.model_validate(t)
            for t in legal_territories(self.game.state, player_id)
        ]
