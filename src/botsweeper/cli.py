"""
Botsweeper - terminal front end.

Usage:
    botsweeper play [--width W] [--height H] [--mines N] [--seed S]
    botsweeper show [--width W] [--height H] [--mines N] [--seed S]

Settings may also come from a JSON file passed with ``--config``;
command-line flags override it.
"""
import argparse
import json
import logging
import random
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .board import BoardConfig
from .controller import CELL_SIZE, KEY_CHEAT, Controller
from .engine import Game, Rules
from .view import render_ansi, status_line


logger = logging.getLogger(__name__)

CONFIG_KEYS = ("width", "height", "num_mines", "flood_reveal", "chord_clear", "seed")

# Typed command -> key code pressed and released
COMMAND_KEYS = {
    "w": "ArrowUp",
    "up": "ArrowUp",
    "s": "ArrowDown",
    "down": "ArrowDown",
    "a": "ArrowLeft",
    "left": "ArrowLeft",
    "d": "ArrowRight",
    "right": "ArrowRight",
    "o": "Space",
    "open": "Space",
    "f": "KeyF",
    "flag": "KeyF",
    "g": "KeyG",
    "clear": "KeyG",
    "r": "KeyR",
    "restart": "KeyR",
}

HELP = (
    "Commands: w/a/s/d move, o open, f flag, g chord-clear, "
    "m X Y click cell, c toggle cheat, r restart, q quit"
)


# ============================================================================
# Configuration
# ============================================================================

def load_config(path: Optional[str]) -> Dict[str, Any]:
    """
    Read game settings from a JSON file.

    Args:
        path: File to read, or None for no file.

    Returns:
        Dict limited to the known setting keys.
    """
    if path is None:
        return {}
    with Path(path).open() as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object")
    unknown = set(data) - set(CONFIG_KEYS)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
    return {key: data[key] for key in CONFIG_KEYS if key in data}


def build_game(args: argparse.Namespace) -> Game:
    """Create a game from the config file and command-line overrides."""
    settings = load_config(args.config)
    for key in ("width", "height", "seed"):
        if getattr(args, key) is not None:
            settings[key] = getattr(args, key)
    if args.mines is not None:
        settings["num_mines"] = args.mines
    if args.no_flood:
        settings["flood_reveal"] = False
    if args.no_chord:
        settings["chord_clear"] = False

    config = BoardConfig(
        width=settings.get("width", 9),
        height=settings.get("height", 9),
        num_mines=settings.get("num_mines", 10),
    )
    rules = Rules(
        flood_reveal=settings.get("flood_reveal", True),
        chord_clear=settings.get("chord_clear", True),
    )
    seed = settings.get("seed")
    rng = random.Random(seed) if seed is not None else None
    return Game(config=config, rules=rules, rng=rng)


# ============================================================================
# Commands
# ============================================================================

def apply_command(controller: Controller, line: str) -> bool:
    """
    Feed one typed command to the controller.

    Returns:
        False when the player asked to quit, True otherwise.

    Raises:
        ValueError: The command is not understood.
    """
    parts = line.strip().lower().split()
    if not parts:
        return True
    command, params = parts[0], parts[1:]

    if command in ("q", "quit"):
        return False
    if command in COMMAND_KEYS:
        code = COMMAND_KEYS[command]
        controller.key_down(code)
        controller.key_up(code)
    elif command in ("c", "cheat"):
        if controller.game.cheat:
            controller.key_up(KEY_CHEAT)
        else:
            controller.key_down(KEY_CHEAT)
    elif command in ("m", "click"):
        if len(params) != 2:
            raise ValueError("Usage: m X Y")
        x, y = (int(p) for p in params)
        controller.mouse_move(x * CELL_SIZE, y * CELL_SIZE)
        controller.mouse_down(0)
        controller.mouse_up(0)
    else:
        raise ValueError(f"Unknown command: {command}")
    return True


def play(game: Game, lines: Iterable[str]) -> None:
    """Run an interactive session over a stream of typed commands."""
    controller = Controller(game)
    print(HELP)
    print(render_ansi(game, controller))
    print(status_line(game))

    for line in lines:
        try:
            if not apply_command(controller, line):
                break
        except ValueError as exc:
            print(exc)
            continue
        print(render_ansi(game, controller))
        print(status_line(game))
        if game.is_dead:
            print("*** BOOM! Press r to restart ***")


def _input_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def show(game: Game) -> None:
    """Print a freshly built board fully revealed."""
    game.set_cheat(True)
    print(render_ansi(game))
    print(f"{game.config.width}x{game.config.height}, {game.board.mine_count} mines")


# ============================================================================
# Entry Point
# ============================================================================

def _add_game_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=None, help="Board columns")
    parser.add_argument("--height", type=int, default=None, help="Board rows")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--config", default=None, help="JSON settings file")
    parser.add_argument(
        "--no-flood", action="store_true", help="Open one cell per reveal"
    )
    parser.add_argument(
        "--no-chord", action="store_true", help="Disable chord-clear"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Botsweeper - minesweeper with bots")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    _add_game_options(play_parser)

    show_parser = subparsers.add_parser("show", help="Print a revealed board")
    _add_game_options(show_parser)

    return parser


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = make_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        game = build_game(args)
    except (ValueError, OSError) as exc:
        parser.error(str(exc))

    if args.command == "play":
        play(game, _input_lines())
    elif args.command == "show":
        show(game)
