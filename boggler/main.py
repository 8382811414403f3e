"""
Main entry point for generating and playing Boggler grids.

Usage:
    python -m boggler.main
    python -m boggler.main config.yaml --seed 12345 --play
    python -m boggler.main --size 16 --output results/game.json --verbose
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

import yaml

from .dictionary import DictionaryUnavailableError
from .engine import parse_path, render_grid
from .environment import GameConfig, GameSession


QUIT_COMMANDS = {":quit", ":q", "quit", "exit"}


def load_config(config_path: Optional[str] = None, **overrides) -> GameConfig:
    """
    Load game configuration from a YAML file, then apply command-line overrides.

    Overrides whose value is None are ignored.
    """
    data = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(path) as f:
            data = yaml.safe_load(f) or {}

    data.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig(**data)


def play(session: GameSession, stream: Optional[TextIO] = None, verbose: bool = False) -> None:
    """
    Read paths from stream and submit them until EOF, a quit command, or the clock runs out.

    Each line is one path, e.g. "0,0 0,1 1,2". Every line costs one tick of the clock.
    """
    if stream is None:
        stream = sys.stdin
    session.start()
    print("Enter a path per line (e.g. '0,0 0,1 1,2'), ':quit' to stop.")

    for line in stream:
        line = line.strip()
        if not line:
            continue
        if line.lower() in QUIT_COMMANDS:
            break

        try:
            positions = parse_path(line)
        except ValueError as e:
            print(f"✗ {e}")
            continue

        result = session.submit_path(positions)
        mark = "✓" if result.success else "✗"
        if result.validation and result.validation.word and not result.success:
            print(f"{mark} {result.validation.word}: {result.message}")
        else:
            print(f"{mark} {result.message}")

        session.tick()
        if verbose:
            print(f"  Score: {session.score}  Time left: {session.time_remaining}s")
        if session.game_state == "gameover":
            print("Time's up!")
            break

    session.end_game()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate (and optionally play) a Boggler grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 9
  timer_duration: 180
  language: english
  seed: 12345
  generator:
    placement_retries: 20
    max_length: 8
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument("--size", type=int, help="Grid size (e.g. 4, 9, 16)")
    parser.add_argument("--seed", help="Seed to rebuild a shared grid")
    parser.add_argument("--timer", type=int, help="Timer duration in seconds")
    parser.add_argument("--language", help="Dictionary language (default: english)")
    parser.add_argument(
        "--dictionary",
        help="Directory holding <language>/seeding.txt and validation.txt"
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Read paths from stdin and play the grid"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the session JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(
            args.config,
            grid_size=args.size,
            seed=args.seed,
            timer_duration=args.timer,
            language=args.language,
            dictionary_root=args.dictionary,
        )
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        session = GameSession.create(config=config, verbose=args.verbose)
    except DictionaryUnavailableError as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        return 1

    print(f"Seed: {session.seed}")
    print(render_grid(session.grid))
    print(f"{len(session.grid.seeded_words)} words hidden in the grid")

    if args.play:
        print()
        try:
            play(session, verbose=args.verbose)
        except KeyboardInterrupt:
            print("\nGame interrupted by user")
            if session.game_state != "setup":
                session.end_game()

        print()
        print("=== Game Summary ===")
        print(session.summary())

    if args.output:
        session.save_result(args.output)
        if args.verbose:
            print(f"Session saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
