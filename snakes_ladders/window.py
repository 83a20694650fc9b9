"""Windowed front-end built on matplotlib, plus PNG board snapshots."""

from __future__ import annotations

import logging

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from snakes_ladders.board import BoardConfig
from snakes_ladders.engine import MAX_PLAYERS, MIN_PLAYERS
from snakes_ladders.game import GameSession

logger = logging.getLogger(__name__)

PLAYER_COLORS = ["#1f4fd8", "#2ca02c", "#f2c318", "#d62728"]
SNAKE_COLOR = "#8b0000"
LADDER_COLOR = "#006400"
EMPTY_COLOR = "#ffffff"


def _cell_style(board: BoardConfig, positions: list[int], square: int) -> tuple[str, str]:
    for idx, pos in enumerate(positions):
        if pos == square:
            return f"P{idx + 1}", PLAYER_COLORS[idx % len(PLAYER_COLORS)]

    tail = board.snake_at(square)
    if tail is not None:
        return f"S→{tail}", SNAKE_COLOR
    top = board.ladder_at(square)
    if top is not None:
        return f"L→{top}", LADDER_COLOR
    return str(square), EMPTY_COLOR


def draw_board(ax, board: BoardConfig, positions: list[int]):
    """Draw the serpentine grid onto *ax*, one labelled cell per square."""
    rows = board.rows()
    n_rows = len(rows)

    for i, row in enumerate(rows):
        y = n_rows - 1 - i
        for x, square in enumerate(row):
            label, color = _cell_style(board, positions, square)
            ax.add_patch(
                Rectangle((x, y), 1, 1, facecolor=color, edgecolor="#444444")
            )
            text_color = "black" if color in (EMPTY_COLOR, PLAYER_COLORS[2]) else "white"
            ax.text(
                x + 0.5, y + 0.5, label,
                ha="center", va="center", fontsize=9, color=text_color,
            )

    ax.set_xlim(0, board.width)
    ax.set_ylim(0, n_rows)
    ax.set_aspect("equal")
    ax.set_axis_off()
    return ax


def save_board_snapshot(
    board: BoardConfig,
    positions: list[int],
    output_path: str = "board.png",
    title: str = "Snakes & Ladders",
) -> str:
    """Render the board to a PNG without opening a window.

    Returns the path to the saved PNG.
    """
    fig = Figure(figsize=(8, 8))
    FigureCanvasAgg(fig)
    ax = fig.add_subplot()
    draw_board(ax, board, positions)
    ax.set_title(title, fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    return output_path


class WindowApp:
    """Interactive window: player-count buttons, a roll button, and the board."""

    def __init__(self, session: GameSession):
        import matplotlib.pyplot as plt
        from matplotlib.widgets import Button

        self.session = session
        self.fig = plt.figure(figsize=(12, 8))
        self.fig.suptitle("Snakes and Ladders", fontsize=16, fontweight="bold")
        self.board_ax = self.fig.add_axes([0.03, 0.05, 0.62, 0.85])

        self.start_buttons: dict[int, Button] = {}
        for i, n in enumerate(range(MIN_PLAYERS, MAX_PLAYERS + 1)):
            bax = self.fig.add_axes([0.70, 0.82 - i * 0.08, 0.25, 0.06])
            button = Button(bax, f"Start with {n} players")
            button.on_clicked(lambda _event, n=n: self.start(n))
            self.start_buttons[n] = button

        rax = self.fig.add_axes([0.70, 0.50, 0.25, 0.08])
        self.roll_button = Button(rax, "Roll Dice")
        self.roll_button.on_clicked(lambda _event: self.roll())

        self.status_text = self.fig.text(0.70, 0.42, "", fontsize=10, wrap=True, va="top")
        self.players_text = self.fig.text(0.70, 0.25, "", fontsize=10, va="top")

        self.session.status = "Select the number of players (2-4):"
        self.repaint()

    def start(self, num_players: int) -> None:
        self.session.start(num_players)
        self.repaint()

    def roll(self) -> None:
        if self.session.roll() is None:
            logger.debug("roll ignored: no match in progress")
        self.repaint()

    def repaint(self) -> None:
        state = self.session.state
        positions = state.positions if state is not None else []

        self.board_ax.clear()
        draw_board(self.board_ax, self.session.board, positions)

        if state is not None and state.winner is not None:
            self.status_text.set_text(f"Player {state.winner + 1} wins!")
        else:
            self.status_text.set_text(self.session.status)
        self.players_text.set_text(
            "\n".join(f"Player {i + 1}: {pos}" for i, pos in enumerate(positions))
        )
        self.fig.canvas.draw_idle()

    def run(self) -> None:
        import matplotlib.pyplot as plt

        plt.show()
