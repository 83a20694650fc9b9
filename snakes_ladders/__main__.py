"""CLI entry point: python -m snakes_ladders {console,window,snapshot}."""

from __future__ import annotations

import argparse
import logging
import sys

from snakes_ladders.board import STANDARD_BOARD
from snakes_ladders.console import ConsoleRenderer
from snakes_ladders.engine import MIN_PLAYERS
from snakes_ladders.game import Dice, GameSession, run_session


# ── console ──────────────────────────────────────────────────────────

def cmd_console(args: argparse.Namespace) -> None:
    """Play in the terminal, one Enter press per roll."""
    session = GameSession(dice=Dice(seed=args.seed))
    renderer = ConsoleRenderer(color=not args.no_color)

    print("Welcome to Snakes and Ladders!")
    print("Press Enter to roll the dice on your turn.")

    if args.players is not None and not session.start(args.players):
        print(session.status, file=sys.stderr)
        sys.exit(2)

    try:
        winner = run_session(session, renderer)
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        sys.exit(2)

    if winner is None:
        print("\nGame abandoned.")


# ── window ───────────────────────────────────────────────────────────

def cmd_window(args: argparse.Namespace) -> None:
    """Open the interactive window."""
    from snakes_ladders.window import WindowApp

    app = WindowApp(GameSession(dice=Dice(seed=args.seed)))
    app.run()


# ── snapshot ─────────────────────────────────────────────────────────

def cmd_snapshot(args: argparse.Namespace) -> None:
    """Play a few automatic turns and save the board as a PNG."""
    import matplotlib
    matplotlib.use("Agg")  # non-interactive backend

    from snakes_ladders.window import save_board_snapshot

    session = GameSession(dice=Dice(seed=args.seed))
    if not session.start(args.players):
        print(session.status, file=sys.stderr)
        sys.exit(2)

    for _ in range(args.turns):
        if session.roll() is None:
            break
        print(session.status)

    out = args.output or "board.png"
    save_board_snapshot(STANDARD_BOARD, session.state.positions, output_path=out)
    print(f"Board saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def main() -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Snakes & Ladders for 2–4 players",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    p_console = sub.add_parser("console", help="Play in the terminal")
    p_console.add_argument("--players", type=int, help="Number of players (2–4); prompts if omitted")
    p_console.add_argument("--seed", type=int, help="Seed for reproducible rolls")
    p_console.add_argument("--no-color", action="store_true", help="Plain text board")

    p_window = sub.add_parser("window", help="Play in a window")
    p_window.add_argument("--seed", type=int, help="Seed for reproducible rolls")

    p_snap = sub.add_parser("snapshot", help="Save the board as a PNG")
    p_snap.add_argument("--players", type=int, default=MIN_PLAYERS, help="Number of players (default 2)")
    p_snap.add_argument("--seed", type=int, help="Seed for reproducible rolls")
    p_snap.add_argument("--turns", type=int, default=0, help="Automatic turns to play first")
    p_snap.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "console":
        cmd_console(args)
    elif args.command == "window":
        cmd_window(args)
    elif args.command == "snapshot":
        cmd_snapshot(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
