"""
Action System - Actions, payloads, and results.

Actions represent player commands against the game state.
All state changes flow through actions; every action yields an
ActionResult that is either a success carrying the new state or a
failure carrying the rule violation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ErrorCode, RuleViolation


class ActionType(Enum):
    """Types of actions in the system."""
    PLACE_UNIT = "place_unit"


@dataclass(frozen=True)
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Validation happens in the reducer.
    """
    player_id: int | None = None
    territory_id: int | None = None


@dataclass(frozen=True)
class Action:
    """A complete action to be applied to the game state."""
    action_type: ActionType
    payload: ActionPayload

    @classmethod
    def place_unit(cls, player_id: int, territory_id: int) -> Action:
        """Factory for place unit action."""
        return cls(
            action_type=ActionType.PLACE_UNIT,
            payload=ActionPayload(player_id=player_id, territory_id=territory_id),
        )


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded, otherwise the untouched previous state)
    - The violation, its message and code (if failed)
    - Human-readable changes (for presentation)
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: ErrorCode | None = None
    violation: RuleViolation | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, violation: RuleViolation, state: Any | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(
            success=False,
            new_state=state,
            error=violation.message,
            error_code=violation.code,
            violation=violation,
        )

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )

    def raise_for_violation(self) -> ActionResult:
        """Raise the violation if the action failed, otherwise return self."""
        if self.violation is not None:
            raise self.violation
        return self
