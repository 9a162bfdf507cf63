"""
Setup Validation - Checks the board and roster a game is built from.

Validates that:
1. There is at least one territory and one player
2. Territory ids and player ids are unique
3. Quotas are non-negative
4. Every territory starts unowned
5. The starting position is one the engine can actually play out
"""

from __future__ import annotations
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine_core.state import Player, Territory


class SetupValidationError(Exception):
    """Raised when setup validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            f"Setup validation failed with {len(errors)} error(s): " + "; ".join(errors)
        )


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]

    def raise_on_error(self) -> None:
        if not self.valid:
            raise SetupValidationError(self.errors)


def validate_setup(
    territories: Sequence[Territory],
    players: Sequence[Player],
    starting_units: int | None = None,
) -> ValidationResult:
    """
    Validate the inputs of a new game.

    Returns ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not territories:
        errors.append("Board needs at least one territory")
    if not players:
        errors.append("Game needs at least one player")

    for territory_id, count in Counter(t.territory_id for t in territories).items():
        if count > 1:
            errors.append(f"Duplicate territory id {territory_id}")
    for player_id, count in Counter(p.player_id for p in players).items():
        if count > 1:
            errors.append(f"Duplicate player id {player_id}")

    # A player left without a territory to claim can never spend their quota
    if territories and players and len(territories) < len(players):
        errors.append(
            f"Only {len(territories)} territories for {len(players)} players - "
            "every player needs a territory to claim"
        )

    if starting_units is not None:
        if starting_units < 1:
            errors.append("starting_units must be >= 1")
        elif starting_units * len(players) < len(territories):
            warnings.append(
                f"{starting_units * len(players)} units cannot claim all "
                f"{len(territories)} territories"
            )

    # Boards start unclaimed; a pre-owned territory can lock players out of every move
    for t in territories:
        if t.owner is not None:
            errors.append(f"Territory {t.territory_id} is already owned by player {t.owner}")

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
