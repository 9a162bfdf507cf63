"""
Conquest CLI - Command-line harness for the engine.

Usage:
    conquest simulate --players 3 --territories 42     Play out a placement phase
    conquest validate --players 3 --territories 2      Validate a setup
"""

import argparse
import json
import sys

from .api import GameService, PlaceUnitRequest
from .config import STARTING_UNITS
from .dice import starting_player_roll
from .engine_core.state import GamePhase
from .logging_utils import configure_logging
from .setup import create_board, create_players, setup_placement_game
from .validation import SetupValidationError, validate_setup


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Conquest - Placement-phase rules engine",
        prog="conquest",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from CONQUEST_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play out a placement phase")
    simulate_parser.add_argument("--players", type=int, default=3, help="Number of players")
    simulate_parser.add_argument("--territories", type=int, default=42, help="Number of territories")
    simulate_parser.add_argument("--starting-units", type=int, default=STARTING_UNITS, help="Units per player")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Seed for the starting roll")
    simulate_parser.add_argument("--json", action="store_true", help="Print the final state as JSON")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a setup")
    validate_parser.add_argument("--players", type=int, required=True, help="Number of players")
    validate_parser.add_argument("--territories", type=int, required=True, help="Number of territories")
    validate_parser.add_argument("--starting-units", type=int, default=STARTING_UNITS, help="Units per player")

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    if args.command == "simulate":
        return cmd_simulate(args)
    elif args.command == "validate":
        return cmd_validate(args)
    else:
        parser.print_help()
        return 1


def cmd_simulate(args):
    """Place every unit, spreading out before stacking."""
    try:
        game = setup_placement_game(
            num_players=args.players,
            num_territories=args.territories,
            dice=starting_player_roll(args.players, seed=args.seed),
            starting_units=args.starting_units,
        )
    except (SetupValidationError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    service = GameService(game)
    print(f"Player {game.current_player.player_id} starts")

    while game.phase == GamePhase.PLACING:
        candidates = service.legal_moves()
        # Claim new ground first, then reinforce the thinnest garrison
        target = min(candidates, key=lambda t: (t.owner is not None, t.units, t.territory_id))
        response = service.place_unit(PlaceUnitRequest(
            player_id=game.current_player.player_id,
            territory_id=target.territory_id,
        ))
        if not response.success:
            print(f"Error: {response.error.error}")
            return 1

    snapshot = service.get_state()
    if args.json:
        print(json.dumps(snapshot.model_dump(mode="json"), indent=2))
    else:
        print(f"Phase: {snapshot.phase.value} after {snapshot.turn_number} placements")
        for player in snapshot.players:
            units = sum(t.units for t in snapshot.board if t.owner == player.player_id)
            print(f"  {player.name}: {player.territory_count} territories, {units} units")
    return 0


def cmd_validate(args):
    """Validate a setup."""
    try:
        territories = create_board(args.territories).territories
        players = create_players(args.players)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    result = validate_setup(territories, players, args.starting_units)
    print(f"Valid: {result.valid}")
    for e in result.errors:
        print(f"  error: {e}")
    for w in result.warnings:
        print(f"  warning: {w}")
    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
