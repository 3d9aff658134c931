"""Grid positions and unit moves."""

from __future__ import annotations

from typing import NamedTuple


class Move(NamedTuple):
    """A displacement on the grid; agents only produce steps in {-1, 0, 1}."""

    dx: int
    dy: int


class Position(NamedTuple):
    """Integer grid coordinates."""

    x: int
    y: int

    @classmethod
    def at(cls, x: int, y: int) -> "Position":
        return cls(int(x), int(y))

    def move(self, move: Move) -> "Position":
        return Position(self.x + move.dx, self.y + move.dy)

    def to(self, other: "Position") -> Move:
        """Move leading from this position to another one."""
        return Move(other.x - self.x, other.y - self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


ORIGIN = Position(0, 0)


__all__ = ["Move", "Position", "ORIGIN"]
