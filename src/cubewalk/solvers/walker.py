"""
Path Walker
===========
Runs the command list over the grid and reduces the final state to the
password.

Note: The walker has no error paths. Walls ahead of the walker, before or
after an edge crossing, only end the current Forward command.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from cubewalk.model.commands import Forward, Turn, TurnSide
from cubewalk.model.geometry_primitives import Direction, Point
from cubewalk.model.grid import Tile

if TYPE_CHECKING:
    from cubewalk.analysis.resolvers import EdgeResolver
    from cubewalk.model.commands import Command
    from cubewalk.model.grid import GridModel

logger = logging.getLogger(__name__)

ROW_WEIGHT = 1000
COLUMN_WEIGHT = 4


@dataclass(frozen=True)
class WalkerState:
    position: Point
    direction: Direction = Direction.RIGHT


def password(state: WalkerState) -> int:
    """1000 * row + 4 * column + facing, with 1-based row and column."""
    position = state.position
    return ROW_WEIGHT * (position.y + 1) + COLUMN_WEIGHT * (position.x + 1) + state.direction.score


class PathWalker:
    """
    Class for stepping the walker through the grid.
    """

    def __init__(
        self,
        grid: GridModel,
        resolver: EdgeResolver,
    ) -> None:
        """
        Initialize the walker.

        Args:
            grid: The map to walk on.
            resolver: Rule used whenever a step would leave the net.
        """
        self.grid = grid
        self.resolver = resolver

    def _forward(self, state: WalkerState, count: int) -> WalkerState:
        position, direction = state.position, state.direction
        for _ in range(count):
            step = position + direction.vector
            tile = self.grid.tile(step)
            if tile == Tile.WALL:
                break
            if tile == Tile.OPEN:
                position = step
                continue

            candidate, candidate_direction = self.resolver.resolve(position, direction)
            if self.grid.tile(candidate) != Tile.OPEN:
                break
            position, direction = candidate, candidate_direction
        return WalkerState(position, direction)

    def step(self, state: WalkerState, command: Command) -> WalkerState:
        """Apply a single command."""
        if isinstance(command, Turn):
            if command.side == TurnSide.LEFT:
                return WalkerState(state.position, state.direction.counter_clockwise())
            return WalkerState(state.position, state.direction.clockwise())
        if isinstance(command, Forward):
            return self._forward(state, command.count)
        raise TypeError(f"Unknown command: {command!r}")

    def walk(self, commands: Iterable[Command]) -> WalkerState:
        """Run all commands from the start tile and return the final state."""
        state = WalkerState(self.grid.start)
        for command in commands:
            state = self.step(state, command)
        logger.info(
            f"{self.resolver.__class__.__name__} finished at {state.position} facing {state.direction.name}"
        )
        return state

    def run(self, commands: Iterable[Command]) -> int:
        """Walk and return the password of the final state."""
        return password(self.walk(commands))
