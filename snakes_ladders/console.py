"""Terminal front-end: colored text grid and Enter-to-roll prompts."""

from __future__ import annotations

import sys
from typing import TextIO

from snakes_ladders.board import BoardConfig

# ANSI SGR foreground codes
RESET = "\033[0m"
BLUE = "\033[34m"
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
WHITE = "\033[37m"

CELL_WIDTH = 5


def parse_player_count(line: str) -> int:
    """Parse the player-count answer. Raises ValueError on non-numeric input."""
    text = line.strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None


def _cell(board: BoardConfig, positions: list[int], square: int) -> tuple[str, str]:
    """Label and color for one square."""
    for idx, pos in enumerate(positions):
        if pos == square:
            player_number = idx + 1
            return f"P{player_number}", BLUE if player_number % 2 else GREEN

    tail = board.snake_at(square)
    if tail is not None:
        return f"S{tail}", RED
    top = board.ladder_at(square)
    if top is not None:
        return f"L{top}", YELLOW
    return str(square), WHITE


def render_grid(board: BoardConfig, positions: list[int], color: bool = True) -> str:
    """Render the board as fixed-width text, top row first."""
    lines = []
    for row in board.rows():
        parts = []
        for square in row:
            label, code = _cell(board, positions, square)
            text = f"{label:<{CELL_WIDTH}}"
            parts.append(f"{code}{text}" if color else text)
        line = "".join(parts).rstrip()
        lines.append(line + RESET if color else line)
    return "\n".join(lines)


class ConsoleRenderer:
    """Line-oriented renderer over a pair of text streams."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        color: bool = True,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.color = color

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout, flush=True)

    def render_board(self, board: BoardConfig, positions: list[int]) -> None:
        self._print("\nCurrent Board:")
        self._print(render_grid(board, positions, color=self.color))
        self._print()

    def render_status(self, message: str) -> None:
        self._print(message)

    def ask_player_count(self) -> int:
        self._print("Select the number of players (2-4):")
        return parse_player_count(self.stdin.readline())

    def wait_for_roll(self) -> bool:
        """Block until Enter. Returns False at end of input."""
        self._print("Press Enter to roll the dice.")
        return self.stdin.readline() != ""
