"""
API Module - Serializable interface for presentation collaborators.

Exposes read-only snapshots of the engine state and a service facade
that accepts placement requests. No transport is bundled; callers
pick their own (CLI, UI, tests).
"""

from .schemas import (
    # Requests
    PlaceUnitRequest,
    # Responses
    PlaceUnitResponse,
    ErrorResponse,
    GameStateSnapshot,
    # Shared
    PlayerInfo,
    TerritoryInfo,
    CardInfo,
)
from .service import GameService

__all__ = [
    # Requests
    "PlaceUnitRequest",
    # Responses
    "PlaceUnitResponse",
    "ErrorResponse",
    "GameStateSnapshot",
    # Shared
    "PlayerInfo",
    "TerritoryInfo",
    "CardInfo",
    # Service
    "GameService",
]
