"""
Game State - Entity model and the per-turn state snapshot.

Design principles:
- Immutable: entities and state are frozen; all mutations return new copies
- Fixed roster: the player list never changes order, a cursor marks whose turn it is
- Comparable: two states holding equal values compare equal
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum


class GamePhase(Enum):
    """High-level game phases."""
    PLACING = "placing"
    PLAYING = "playing"


@dataclass(frozen=True)
class Card:
    """
    A card in the shared pool.

    The placement phase never touches cards; the pool is carried
    through every transition unchanged.
    """
    card_id: str


@dataclass(frozen=True)
class Player:
    """A player and the number of units they still have to place."""
    player_id: int
    units_left_to_place: int = 0
    name: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or f"Player {self.player_id}"

    @property
    def has_units_to_place(self) -> bool:
        return self.units_left_to_place > 0

    def give_units_to_place(self, units: int) -> Player:
        """Return a copy with the placement quota set to `units`."""
        if units < 0:
            raise ValueError(f"Quota must be non-negative, got {units}")
        return replace(self, units_left_to_place=units)

    def placed_unit(self) -> Player:
        """Return a copy with one unit fewer left to place."""
        if self.units_left_to_place <= 0:
            raise ValueError(f"Player {self.player_id} has no units left to place")
        return replace(self, units_left_to_place=self.units_left_to_place - 1)


@dataclass(frozen=True)
class Territory:
    """
    A territory on the board.

    `owner` is the player_id of the claiming player, or None while unclaimed.
    `units` is the garrison standing on the territory.
    """
    territory_id: int
    owner: int | None = None
    units: int = 0
    name: str | None = None

    @property
    def is_owned(self) -> bool:
        return self.owner is not None

    def is_owned_by(self, player_id: int) -> bool:
        return self.owner == player_id

    def with_owner(self, player_id: int) -> Territory:
        """Return a copy owned by `player_id`. Ownership rules are the caller's job."""
        return replace(self, owner=player_id)

    def add_unit(self) -> Territory:
        """Return a copy with one more unit in the garrison."""
        return replace(self, units=self.units + 1)


@dataclass(frozen=True)
class Board:
    """An ordered collection of territories. The set of ids never changes."""
    territories: tuple[Territory, ...] = ()

    def __len__(self) -> int:
        return len(self.territories)

    def __iter__(self):
        return iter(self.territories)

    @property
    def territory_ids(self) -> list[int]:
        return [t.territory_id for t in self.territories]

    def get_territory(self, territory_id: int) -> Territory | None:
        """Get territory by ID."""
        for t in self.territories:
            if t.territory_id == territory_id:
                return t
        return None

    def has_territory(self, territory_id: int) -> bool:
        return self.get_territory(territory_id) is not None

    def unowned_territories(self) -> list[Territory]:
        return [t for t in self.territories if not t.is_owned]

    def territories_owned_by(self, player_id: int) -> list[Territory]:
        return [t for t in self.territories if t.is_owned_by(player_id)]

    def with_territory(self, territory: Territory) -> Board:
        """Return new board with `territory` swapped in at its position."""
        return Board(territories=tuple(
            territory if t.territory_id == territory.territory_id else t
            for t in self.territories
        ))


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    The roster in `players` keeps the order players were given in;
    `current_player_idx` points at the player entitled to act.
    All state changes go through the reducer.
    """
    board: Board
    phase: GamePhase = GamePhase.PLACING
    players: tuple[Player, ...] = ()
    current_player_idx: int = 0
    cards: tuple[Card, ...] = field(default_factory=tuple)

    # Successful placements so far
    turn_number: int = 0

    @property
    def current_player(self) -> Player:
        """Get the current player."""
        return self.players[self.current_player_idx]

    @property
    def num_players(self) -> int:
        return len(self.players)

    def get_player(self, player_id: int) -> Player | None:
        """Get player by ID."""
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def has_player(self, player_id: int) -> bool:
        return self.get_player(player_id) is not None

    def players_in_turn_order(self) -> list[Player]:
        """The roster rotated so the current player comes first."""
        idx = self.current_player_idx
        return list(self.players[idx:] + self.players[:idx])

    def all_units_placed(self) -> bool:
        return not any(p.has_units_to_place for p in self.players)

    def with_player(self, player: Player) -> GameState:
        """Return new state with updated player."""
        new_players = tuple(
            player if p.player_id == player.player_id else p
            for p in self.players
        )
        return self._copy_with(players=new_players)

    def with_territory(self, territory: Territory) -> GameState:
        """Return new state with updated territory."""
        return self._copy_with(board=self.board.with_territory(territory))

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)
