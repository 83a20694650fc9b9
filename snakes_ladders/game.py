"""Game session — glue between a front-end, the dice, and the engine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from snakes_ladders.board import STANDARD_BOARD, BoardConfig, ConfigurationError
from snakes_ladders.engine import (
    DIE_FACES,
    MatchState,
    TurnResult,
    apply_turn,
    new_match,
)

logger = logging.getLogger(__name__)


# ── Dice ─────────────────────────────────────────────────────────────

class Dice:
    """Uniform die. Pass *seed* for a reproducible sequence."""

    def __init__(self, seed: int | None = None, faces: int = DIE_FACES):
        self.faces = faces
        self._rng = random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, self.faces)


# ── Observer ────────────────────────────────────────────────────────

class TurnObserver(Protocol):
    """Receives every resolved turn."""

    def on_turn(self, result: TurnResult) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects results into a list."""

    results: list[TurnResult] = field(default_factory=list)

    def on_turn(self, result: TurnResult) -> None:
        self.results.append(result)


# ── Renderer interface ───────────────────────────────────────────────

@runtime_checkable
class Renderer(Protocol):
    """Structural interface for a front-end — any object with these methods works."""

    def render_board(self, board: BoardConfig, positions: list[int]) -> None: ...

    def render_status(self, message: str) -> None: ...

    def ask_player_count(self) -> int: ...

    def wait_for_roll(self) -> bool: ...


# ── Session ──────────────────────────────────────────────────────────

class GameSession:
    """One seat at the table: a board, a die, and the match in progress."""

    def __init__(
        self,
        board: BoardConfig = STANDARD_BOARD,
        dice: Dice | None = None,
        observer: TurnObserver | None = None,
    ):
        self.board = board
        self.dice = dice or Dice()
        self.observer = observer or ListObserver()
        self.state: MatchState | None = None
        self.status = ""

    @property
    def started(self) -> bool:
        return self.state is not None

    @property
    def finished(self) -> bool:
        return self.state is not None and self.state.finished

    def start(self, num_players: int) -> bool:
        """Begin a new match. Returns False (and keeps any current match) on a bad count."""
        try:
            state = new_match(num_players)
        except ConfigurationError as exc:
            self.status = f"Cannot start: {exc}."
            logger.info("rejected player count %r", num_players)
            return False

        self.state = state
        self.status = "Game started! Player 1's turn."
        logger.info("match started with %d players", num_players)
        return True

    def roll(self) -> TurnResult | None:
        """Roll for the current player. Does nothing before start or after a win."""
        if self.state is None or self.state.finished:
            return None

        die = self.dice.roll()
        result = apply_turn(self.state, self.board, die, max_die=self.dice.faces)
        self.status = result.narration
        self.observer.on_turn(result)

        if result.won:
            logger.info(
                "player %d won after %d turns", result.player + 1, self.state.turns
            )
        return result


def run_session(session: GameSession, renderer: Renderer) -> int | None:
    """Drive one full match through *renderer*.

    Returns the winner's index, or None if the renderer stopped early.
    """
    while not session.started:
        session.start(renderer.ask_player_count())
        renderer.render_status(session.status)

    renderer.render_board(session.board, session.state.positions)

    while not session.finished:
        state = session.state
        renderer.render_status(
            f"Player {state.current_player + 1}'s turn. "
            f"(Position: {state.positions[state.current_player]})"
        )
        if not renderer.wait_for_roll():
            return None
        session.roll()
        renderer.render_status(session.status)
        renderer.render_board(session.board, state.positions)

    return session.state.winner
