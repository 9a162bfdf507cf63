"""
Conquest - Placement-phase rules engine for territorial conquest games

A deterministic, rules-driven engine for the opening of a Risk-like game.
It provides:
- Immutable state for board, roster and phase
- Turn order decided by an injected dice roll
- Unit placement with ownership rules
- The transition from placing to playing once every quota is spent
"""

__version__ = "0.1.0"
