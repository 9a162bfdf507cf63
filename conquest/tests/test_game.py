"""
Tests for the Game orchestrator.

Tests:
- Startup: quotas, starting player, phase
- Placement scenarios through a full placement phase
- Turn rotation, quota and ownership properties
- No-op on every kind of failure
"""

import pytest

from ..dice import DiceExhausted, InvalidDiceRoll, ScriptedDice
from ..engine_core.errors import ErrorCode, IllegalMove
from ..engine_core.game import Game
from ..engine_core.state import Card, GamePhase, Player, Territory
from ..setup import create_players, setup_placement_game
from ..validation import SetupValidationError


def play_round(game: Game, placements: dict[int, int]) -> None:
    """Let each player in turn place on their territory from `placements`."""
    for _ in range(game.state.num_players):
        player_id = game.current_player.player_id
        game.place_unit(player_id, placements[player_id]).raise_for_violation()


class TestStartup:
    """Tests for game construction."""

    def test_game_starts_in_placing_phase(self, game):
        assert game.state.phase == GamePhase.PLACING
        assert game.phase == GamePhase.PLACING

    def test_every_player_gets_quota(self, game):
        assert [p.units_left_to_place for p in game.state.players] == [35, 35, 35]

    def test_board_starts_unowned(self, game):
        assert all(t.owner is None for t in game.state.board)

    @pytest.mark.parametrize("roll,expected", [(1, 1), (2, 2), (3, 3)])
    def test_dice_picks_starting_player(self, make_game, roll, expected):
        """A roll of d makes the d-th player of the roster start."""
        game = make_game(roll)

        assert game.current_player.player_id == expected

    def test_turn_order_rotates_from_starting_player(self, make_game):
        game = make_game(2)

        assert [p.player_id for p in game.state.players_in_turn_order()] == [2, 3, 1]

    def test_dice_rolled_exactly_once(self, three_territory_board, three_players):
        dice = ScriptedDice([1, 1])
        Game(three_territory_board, three_players, dice=dice)

        assert dice.rolls_made == 1
        assert dice.remaining == 1

    def test_roll_dice_passes_through(self, game):
        """The fixture scripts a single roll, which startup consumed."""
        with pytest.raises(DiceExhausted):
            game.roll_dice()

    def test_plain_callable_dice(self, three_territory_board, three_players):
        game = Game(three_territory_board, three_players, dice=lambda: 3)

        assert game.current_player.player_id == 3

    @pytest.mark.parametrize("roll", [0, 4, -1])
    def test_out_of_range_roll_rejected(self, make_game, roll):
        with pytest.raises(InvalidDiceRoll):
            make_game(roll)

    def test_territory_list_accepted_as_board(self, three_players):
        territories = [Territory(territory_id=i) for i in (10, 20, 30)]
        game = Game(territories, three_players, dice=lambda: 1)

        assert game.state.board.territory_ids == [10, 20, 30]

    def test_duplicate_player_ids_rejected(self, three_territory_board):
        players = [Player(player_id=1), Player(player_id=1)]

        with pytest.raises(SetupValidationError) as exc_info:
            Game(three_territory_board, players, dice=lambda: 1)

        assert any("Duplicate player id 1" in e for e in exc_info.value.errors)

    def test_empty_roster_rejected(self, three_territory_board):
        with pytest.raises(SetupValidationError):
            Game(three_territory_board, [], dice=lambda: 1)

    def test_custom_starting_units(self, make_game):
        game = make_game(1, starting_units=2)

        assert all(p.units_left_to_place == 2 for p in game.state.players)


class TestPlacementScenario:
    """Three players, three territories, player 1 starts."""

    def test_player1_places_a_unit(self, game):
        result = game.place_unit(1, 1)

        assert result.success
        assert game.state.board.get_territory(1).owner == 1
        assert game.current_player.player_id == 2
        assert game.state.phase == GamePhase.PLACING

    def test_player2_cannot_place_on_player1_territory(self, game):
        game.place_unit(1, 1)
        before = game.state

        result = game.place_unit(2, 1)

        assert not result.success
        assert result.error_code == ErrorCode.ILLEGAL_MOVE
        assert game.state is before

    def test_player2_not_in_turn(self, game):
        before = game.state

        result = game.place_unit(2, 1)

        assert result.error_code == ErrorCode.NOT_PLAYERS_TURN
        assert game.state is before
        assert game.current_player.player_id == 1

    def test_unknown_player(self, game):
        before = game.state

        result = game.place_unit(4, 1)

        assert result.error_code == ErrorCode.UNKNOWN_PLAYER
        assert game.state is before

    def test_unknown_territory(self, game):
        before = game.state

        result = game.place_unit(1, 0)

        assert result.error_code == ErrorCode.UNKNOWN_TERRITORY
        assert game.state is before

    def test_full_round_returns_to_first_player(self, game):
        play_round(game, {1: 1, 2: 2, 3: 3})

        assert game.current_player.player_id == 1
        assert game.state.phase == GamePhase.PLACING

    def test_placement_phase_ends_when_no_units_left(self, game):
        placements = {1: 1, 2: 2, 3: 3}
        for _ in range(34):
            play_round(game, placements)
        assert game.state.phase == GamePhase.PLACING

        play_round(game, placements)

        assert game.state.phase == GamePhase.PLAYING
        assert game.state.all_units_placed()
        assert [t.units for t in game.state.board] == [35, 35, 35]

    def test_phase_changes_only_on_last_placement(self, make_game):
        game = make_game(1, starting_units=2)
        placements = {1: 1, 2: 2, 3: 3}
        phases = []
        for _ in range(6):
            player_id = game.current_player.player_id
            game.place_unit(player_id, placements[player_id]).raise_for_violation()
            phases.append(game.state.phase)

        assert phases == [GamePhase.PLACING] * 5 + [GamePhase.PLAYING]

    def test_no_placement_once_playing(self, make_game):
        game = make_game(1, starting_units=1)
        play_round(game, {1: 1, 2: 2, 3: 3})
        before = game.state

        result = game.place_unit(1, 1)

        assert result.error_code == ErrorCode.WRONG_PHASE
        assert game.state is before

    def test_consecutive_placements_on_same_territory(self, game):
        """A player may keep reinforcing the same territory turn after turn."""
        play_round(game, {1: 1, 2: 2, 3: 3})
        play_round(game, {1: 1, 2: 2, 3: 3})

        assert game.state.board.get_territory(1).units == 2

    def test_raise_for_violation_through_game(self, game):
        game.place_unit(1, 1)

        with pytest.raises(IllegalMove):
            game.place_unit(2, 1).raise_for_violation()

    def test_cards_carried_through(self, three_territory_board, three_players):
        cards = [Card(card_id="infantry"), Card(card_id="cavalry")]
        game = Game(three_territory_board, three_players, dice=lambda: 1, cards=cards)

        game.place_unit(1, 1)

        assert game.state.cards == tuple(cards)


class TestGameProperties:
    """Invariants over whole placement phases."""

    def test_turn_rotation(self, make_game):
        """After N placements the current player is start order[N mod 3]."""
        game = make_game(2)
        start_order = [p.player_id for p in game.state.players_in_turn_order()]
        placements = {1: 1, 2: 2, 3: 3}

        for n in range(1, 10):
            player_id = game.current_player.player_id
            game.place_unit(player_id, placements[player_id]).raise_for_violation()
            assert game.current_player.player_id == start_order[n % 3]

    def test_quota_monotonic(self, make_game):
        game = make_game(3, starting_units=5)
        placements = {1: 1, 2: 2, 3: 3}
        previous = {p.player_id: p.units_left_to_place for p in game.state.players}

        while game.state.phase == GamePhase.PLACING:
            player_id = game.current_player.player_id
            game.place_unit(player_id, placements[player_id])
            # Failed attempts along the way must not touch quotas either
            game.place_unit(player_id, placements[player_id])
            for p in game.state.players:
                assert 0 <= p.units_left_to_place <= previous[p.player_id]
                previous[p.player_id] = p.units_left_to_place

        assert all(units == 0 for units in previous.values())

    def test_ownership_exclusive(self, game):
        game.place_unit(1, 1)
        game.place_unit(2, 2)
        game.place_unit(3, 3)
        quotas = [p.units_left_to_place for p in game.state.players]

        # Player 1 tries every territory owned by someone else
        for territory_id in (2, 3):
            assert game.place_unit(1, territory_id).error_code == ErrorCode.ILLEGAL_MOVE

        assert [t.owner for t in game.state.board] == [1, 2, 3]
        assert [p.units_left_to_place for p in game.state.players] == quotas
        assert game.place_unit(1, 1).success


class TestSetupHelpers:
    def test_setup_placement_game(self):
        game = setup_placement_game(
            num_players=4,
            num_territories=6,
            dice=ScriptedDice([4]),
            starting_units=10,
            player_names=["Ann", "Bo"],
        )

        assert game.current_player.player_id == 4
        assert game.state.board.territory_ids == [1, 2, 3, 4, 5, 6]
        assert game.state.get_player(1).display_name == "Ann"
        assert game.state.get_player(3).display_name == "Player 3"

    def test_create_players_needs_one(self):
        with pytest.raises(ValueError):
            create_players(0)
