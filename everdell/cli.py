"""
Everdell CLI - Command-line interface for the engine.

Usage:
    everdell new <name> <name> [...]     Create a game and save it
    everdell show <game_id>              Print the current state
    everdell inputs <game_id>            Print the inputs the active player may submit
    everdell apply <game_id> [file]      Apply one input (JSON file, or stdin)
    everdell score <game_id>             Print every player's points

Games are stored as JSON snapshots under EVERDELL_DATA_DIR (default .everdell).
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import EngineConfig


def main(argv=None):
    """Main CLI entry point."""
    config = EngineConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Everdell - rules engine",
        prog="everdell",
    )
    parser.add_argument("--data-dir", default=config.data_dir, help="Directory for saved games")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log engine activity")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # New game
    new_parser = subparsers.add_parser("new", help="Create a new game")
    new_parser.add_argument("players", nargs="+", help="Player names in turn order")
    new_parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    new_parser.add_argument("--no-shuffle", action="store_true", help="Deal from an unshuffled deck")
    new_parser.add_argument("--realtime-points", action="store_true", help="Include live scores")
    new_parser.add_argument("--forest", type=int, default=None, help="Number of forest locations")
    new_parser.add_argument("--special-events", type=int, default=4, help="Number of special events")

    # Show state
    show_parser = subparsers.add_parser("show", help="Print a game's state")
    show_parser.add_argument("game_id")
    show_parser.add_argument("--private", action="store_true", help="Include hands and the deck")

    # Possible inputs
    inputs_parser = subparsers.add_parser("inputs", help="List the active player's inputs")
    inputs_parser.add_argument("game_id")

    # Apply input
    apply_parser = subparsers.add_parser("apply", help="Apply one game input")
    apply_parser.add_argument("game_id")
    apply_parser.add_argument("input_file", nargs="?", default="-", help="JSON file, or - for stdin")

    # Score
    score_parser = subparsers.add_parser("score", help="Print scores")
    score_parser.add_argument("game_id")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else config.logging_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "new":
        cmd_new(args)
    elif args.command == "show":
        cmd_show(args)
    elif args.command == "inputs":
        cmd_inputs(args)
    elif args.command == "apply":
        cmd_apply(args)
    elif args.command == "score":
        cmd_score(args)
    else:
        parser.print_help()
        sys.exit(1)


# =============================================================================
# Storage
# =============================================================================

def _game_path(args, game_id):
    return Path(args.data_dir) / f"{game_id}.json"


def _load_service(args):
    """GameService holding the saved game named on the command line."""
    from .api import GameService

    path = _game_path(args, args.game_id)
    try:
        with open(path, "r", encoding="utf-8") as f:
            snapshot = json.load(f)
    except FileNotFoundError:
        print(f"Error: Game not found: {args.game_id}")
        sys.exit(1)

    service = GameService()
    service.load_game(args.game_id, snapshot)
    return service


def _save(args, service, game_id):
    path = _game_path(args, game_id)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(service.export_game(game_id), f, indent=2)


def _print_json(data):
    print(json.dumps(data, indent=2))


def _exit_on_failure(result):
    if not result.success:
        print(f"Error [{result.error_code.value}]: {result.error}")
        sys.exit(1)


# =============================================================================
# Commands
# =============================================================================

def cmd_new(args):
    """Create and save a new game."""
    from .api import CreateGameRequest, GameService
    from pydantic import ValidationError

    try:
        request = CreateGameRequest(
            player_names=args.players,
            shuffle_deck=not args.no_shuffle,
            seed=args.seed,
            realtime_points=args.realtime_points,
            num_forest_locations=args.forest,
            num_special_events=args.special_events,
        )
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    service = GameService()
    result = service.create_game(request)
    _exit_on_failure(result)

    game_id = result.data.game_id
    _save(args, service, game_id)
    print(f"Game created: {game_id}")
    for player in result.data.state["players"]:
        print(f"  {player['name']}: {player['player_id']}")


def cmd_show(args):
    """Print a saved game's state."""
    service = _load_service(args)
    result = service.get_state(args.game_id, include_private=args.private)
    _exit_on_failure(result)
    _print_json(result.data.state)


def cmd_inputs(args):
    """Print the inputs the active player may submit."""
    service = _load_service(args)
    result = service.get_possible_inputs(args.game_id)
    _exit_on_failure(result)
    _print_json([
        gi.model_dump(mode="json", exclude_none=True)
        for gi in result.data.inputs
    ])


def cmd_apply(args):
    """Apply a single input and save the resulting state."""
    try:
        if args.input_file == "-":
            payload = json.load(sys.stdin)
        else:
            with open(args.input_file, "r", encoding="utf-8") as f:
                payload = json.load(f)
    except FileNotFoundError:
        print(f"Error: File not found: {args.input_file}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}")
        sys.exit(1)

    service = _load_service(args)
    result = service.apply_input(args.game_id, payload)
    _exit_on_failure(result)
    _save(args, service, args.game_id)

    data = result.data
    print(f"Game state: {data.game_state_id}")
    if data.is_game_over:
        print("Game over")
    else:
        print(f"Active player: {data.active_player_id}")
        if data.pending_input_count:
            print(f"Pending inputs: {data.pending_input_count}")


def cmd_score(args):
    """Print every player's score."""
    service = _load_service(args)
    result = service.get_scores(args.game_id)
    _exit_on_failure(result)

    for score in result.data.scores:
        marker = " *" if score.is_winner and result.data.is_game_over else ""
        print(f"{score.name}: {score.points}{marker}")


if __name__ == "__main__":
    main()
