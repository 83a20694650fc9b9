"""Board topology for Snakes & Ladders."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

BOARD_SIZE = 100
BOARD_WIDTH = 10

# fmt: off
SNAKES: dict[int, int] = {
    16:  6,  47: 26,  49: 11,  56: 53,  62: 19,
    64: 60,  87: 24,  93: 73,  95: 75,  98: 78,
}

LADDERS: dict[int, int] = {
     1: 38,   4: 14,   9: 31,  21: 42,  28: 84,
    36: 44,  51: 67,  71: 91,  80: 100,
}
# fmt: on


class ConfigurationError(ValueError):
    """Board data or match setup that the rules cannot work with."""


@dataclass(frozen=True)
class BoardConfig:
    """Immutable board description shared by every match."""

    size: int = BOARD_SIZE
    width: int = BOARD_WIDTH
    snakes: Mapping[int, int] = field(default_factory=lambda: dict(SNAKES))
    ladders: Mapping[int, int] = field(default_factory=lambda: dict(LADDERS))

    def __post_init__(self) -> None:
        if self.size < 1 or self.width < 1:
            raise ConfigurationError("board size and width must be positive")
        if self.size % self.width:
            raise ConfigurationError(
                f"board size {self.size} is not a multiple of width {self.width}"
            )

        for name, mapping, going_up in (
            ("snake", self.snakes, False),
            ("ladder", self.ladders, True),
        ):
            for start, end in mapping.items():
                if not (1 <= start <= self.size and 1 <= end <= self.size):
                    raise ConfigurationError(
                        f"{name} {start}→{end} is off the board (1–{self.size})"
                    )
                if (end > start) != going_up or end == start:
                    raise ConfigurationError(
                        f"{name} {start}→{end} points the wrong way"
                    )

        overlap = set(self.snakes) & set(self.ladders)
        if overlap:
            raise ConfigurationError(
                f"squares {sorted(overlap)} are both a snake head and a ladder bottom"
            )

        # Freeze the mappings so a shared config can't be edited in place.
        object.__setattr__(self, "snakes", MappingProxyType(dict(self.snakes)))
        object.__setattr__(self, "ladders", MappingProxyType(dict(self.ladders)))

    def snake_at(self, square: int) -> int | None:
        return self.snakes.get(square)

    def ladder_at(self, square: int) -> int | None:
        return self.ladders.get(square)

    def square_at(self, row: int, col: int) -> int:
        """Square number at *row* (0 = bottom) and *col* (0 = left).

        Rows snake back and forth: even rows run left-to-right, odd rows
        right-to-left.
        """
        base = row * self.width
        if row % 2 == 0:
            return base + col + 1
        return base + (self.width - col)

    def rows(self) -> list[list[int]]:
        """Square numbers row by row, top row first, as the board is drawn."""
        n_rows = self.size // self.width
        return [
            [self.square_at(row, col) for col in range(self.width)]
            for row in reversed(range(n_rows))
        ]


STANDARD_BOARD = BoardConfig()
