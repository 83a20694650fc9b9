"""Turn resolution — the rules of Snakes & Ladders.

The engine never rolls dice or prints anything: callers pass the die value in
and render the narration that comes back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from snakes_ladders.board import BoardConfig, ConfigurationError

logger = logging.getLogger(__name__)

DIE_FACES = 6
MIN_PLAYERS = 2
MAX_PLAYERS = 4

HOME = 0  # off-board starting square


class InvalidRollError(ValueError):
    """Die value outside the range the engine accepts."""


class MatchFinishedError(RuntimeError):
    """A turn was requested after the match already has a winner."""


@dataclass
class MatchState:
    """Mutable state of one match."""

    positions: list[int] = field(default_factory=lambda: [HOME] * MIN_PLAYERS)
    current_player: int = 0
    winner: int | None = None
    turns: int = 0

    @property
    def num_players(self) -> int:
        return len(self.positions)

    @property
    def finished(self) -> bool:
        return self.winner is not None


@dataclass
class TurnResult:
    """What happened during one resolved turn."""

    player: int
    die: int
    start: int
    candidate: int
    landing: int
    kind: str  # "move" | "snake" | "ladder" | "overshoot"
    narration: str
    sent_home: int | None = None
    won: bool = False


def new_match(num_players: int) -> MatchState:
    """Fresh state with every player at home."""
    if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
        raise ConfigurationError(
            f"number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, "
            f"got {num_players}"
        )
    return MatchState(positions=[HOME] * num_players)


def _check_turn(state: MatchState, die: int, max_die: int | None) -> None:
    if state.winner is not None:
        raise MatchFinishedError(
            f"match is over — Player {state.winner + 1} already won"
        )
    if not 0 <= state.current_player < state.num_players:
        raise ConfigurationError(
            f"current player {state.current_player} is not one of "
            f"{state.num_players} players"
        )
    if isinstance(die, bool) or not isinstance(die, int):
        raise InvalidRollError(f"die value must be an integer, got {die!r}")
    if die < 1 or (max_die is not None and die > max_die):
        upper = max_die if max_die is not None else "∞"
        raise InvalidRollError(f"die value {die} is outside 1–{upper}")


def apply_turn(
    state: MatchState,
    board: BoardConfig,
    die: int,
    *,
    max_die: int | None = DIE_FACES,
) -> TurnResult:
    """Resolve the current player's turn for *die* and mutate *state*.

    Rules apply in a fixed order: overshoot, snake, ladder, plain move, commit,
    send-home, win, turn advance. Raises ``MatchFinishedError`` once a winner
    exists and ``InvalidRollError`` for a die outside ``1..max_die``; in both
    cases *state* is left untouched.
    """
    _check_turn(state, die, max_die)

    player = state.current_player
    name = f"Player {player + 1}"
    start = state.positions[player]
    candidate = start + die

    # Overshoot → stay put, no snake/ladder lookup
    if candidate > board.size:
        landing = start
        kind = "overshoot"
        narration = (
            f"{name} rolled {die}, but cannot move past square {board.size} "
            f"and stays at {start}."
        )
    elif board.snake_at(candidate) is not None:
        landing = board.snake_at(candidate)
        kind = "snake"
        narration = (
            f"{name} rolled {die}, climbed to {candidate}, "
            f"but was bitten by a snake and fell to {landing}!"
        )
    elif board.ladder_at(candidate) is not None:
        landing = board.ladder_at(candidate)
        kind = "ladder"
        narration = f"{name} rolled {die}, climbed a ladder from {candidate} to {landing}!"
    else:
        landing = candidate
        kind = "move"
        narration = f"{name} rolled {die}, and moved to position {landing}"

    state.positions[player] = landing

    # Send-home: only the first other player found on the square, and never
    # on the winning square or at home.
    sent_home = None
    if HOME < landing < board.size:
        for other, pos in enumerate(state.positions):
            if other != player and pos == landing:
                state.positions[other] = HOME
                sent_home = other
                narration = (
                    f"Oops! {name} rolled {die} and moved to position {landing} "
                    f"and sent Player {other + 1} back to home base!"
                )
                break

    won = landing == board.size
    if won:
        state.winner = player
        narration = f"{name} wins!"
    else:
        state.current_player = (player + 1) % state.num_players
    state.turns += 1

    logger.debug(
        "turn %d: player %d rolled %d, %d → %d (%s)%s%s",
        state.turns, player + 1, die, start, landing, kind,
        f", sent player {sent_home + 1} home" if sent_home is not None else "",
        ", won" if won else "",
    )

    return TurnResult(
        player=player,
        die=die,
        start=start,
        candidate=candidate,
        landing=landing,
        kind=kind,
        narration=narration,
        sent_home=sent_home,
        won=won,
    )


def resolve_turn(
    state: MatchState,
    board: BoardConfig,
    die: int,
    *,
    max_die: int | None = DIE_FACES,
) -> str:
    """Resolve one turn in place and return its narration."""
    return apply_turn(state, board, die, max_die=max_die).narration
