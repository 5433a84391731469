"""
Edge Resolvers
==============
Decide where the walker re-enters the net after stepping off it.

Both resolvers take the last tile on the net and the heading that would leave
it, and return the tile and heading the walker would continue with. Neither
checks for walls at the destination; that is the walker's job.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cubewalk.analysis.topology import CubeTopologyBuilder
from cubewalk.errors import TopologyInconsistency
from cubewalk.model.geometry_primitives import Direction, Point
from cubewalk.model.grid import Tile

if TYPE_CHECKING:
    from cubewalk.analysis.topology import Face, FaceRegistry
    from cubewalk.model.geometry_primitives import Vector3
    from cubewalk.model.grid import GridModel

logger = logging.getLogger(__name__)

L, R, D, U = Direction.LEFT, Direction.RIGHT, Direction.DOWN, Direction.UP

# (departure, arrival) -> new in-face offset (x, y). Terms refer to the old
# offset and to ``edge = segment - 1``.
OFFSET_REMAP: dict[tuple[Direction, Direction], tuple[str, str]] = {
    (L, L): ("edge", "y"),
    (L, R): ("0", "edge-y"),
    (L, D): ("y", "0"),
    (L, U): ("edge-y", "edge"),
    (R, L): ("edge", "edge-y"),
    (R, R): ("0", "y"),
    (R, D): ("edge-y", "0"),
    (R, U): ("y", "edge"),
    (D, L): ("edge", "x"),
    (D, R): ("0", "edge-x"),
    (D, D): ("x", "0"),
    (D, U): ("edge-x", "edge"),
    (U, L): ("edge", "edge-x"),
    (U, R): ("0", "x"),
    (U, D): ("edge-x", "0"),
    (U, U): ("x", "edge"),
}


def _term(name: str, offset: Point, edge: int) -> int:
    values = {
        "0": 0,
        "edge": edge,
        "x": offset.x,
        "y": offset.y,
        "edge-x": edge - offset.x,
        "edge-y": edge - offset.y,
    }
    return values[name]


def remap_offset(departure: Direction, arrival: Direction, offset: Point, segment: int) -> Point:
    """Position inside the entered face of the tile glued to ``offset``."""
    edge = segment - 1
    x_term, y_term = OFFSET_REMAP[(departure, arrival)]
    return Point(_term(x_term, offset, edge), _term(y_term, offset, edge))


class EdgeResolver(ABC):
    """
    Abstract base class for the rules applied when a step leaves the net.
    """

    def __init__(self, grid: GridModel) -> None:
        self.grid = grid

    @abstractmethod
    def resolve(self, position: Point, direction: Direction) -> tuple[Point, Direction]:
        """Where a step from ``position`` along ``direction`` lands."""
        pass


class FlatEdgeResolver(EdgeResolver):
    """
    Treats every row and column as a cycle.

    On grids whose occupied runs are multiples of the segment size, the scan
    back to the far end of the run jumps a whole segment at a time. Other
    grids are scanned one tile at a time.
    """

    def resolve(self, position: Point, direction: Direction) -> tuple[Point, Direction]:
        stride = self.grid.segment if self.grid.has_uniform_runs else 1
        reverse = direction.vector * -stride
        cursor = position + reverse
        while self.grid.tile(cursor) != Tile.EMPTY:
            cursor = cursor + reverse
        # Back onto the first occupied tile of the run
        cursor = cursor + direction.vector
        logger.debug(f"Flat wrap {position} {direction.name} -> {cursor}")
        return cursor, direction


class CubeEdgeResolver(EdgeResolver):
    """
    Glues the edges of the net according to the folded cube.
    """

    def __init__(self, grid: GridModel, registry: FaceRegistry) -> None:
        super().__init__(grid)
        self.registry = registry

    @classmethod
    def from_grid(cls, grid: GridModel) -> CubeEdgeResolver:
        """Fold the grid's net once and build a resolver over it."""
        return cls(grid, CubeTopologyBuilder(grid).build())

    def _face_at(self, corner: Point) -> Face:
        face = self.registry.by_corner.get(corner)
        if face is None:
            raise TopologyInconsistency(f"No face registered at corner {corner}.")
        return face

    def _face_facing(self, normal: Vector3) -> Face:
        face = self.registry.by_normal.get(normal)
        if face is None:
            raise TopologyInconsistency(f"No face registered with normal {normal}.")
        return face

    @staticmethod
    def _crossed_axis(face: Face, direction: Direction) -> Vector3:
        """Outward normal of the face lying beyond the crossed edge."""
        if direction is Direction.LEFT:
            return face.i
        if direction is Direction.RIGHT:
            return -face.i
        if direction is Direction.UP:
            return face.j
        return -face.j

    @staticmethod
    def _arrival(departed: Face, entered: Face) -> Direction:
        k = departed.k
        if k == entered.i:
            return Direction.RIGHT
        if k == -entered.i:
            return Direction.LEFT
        if k == entered.j:
            return Direction.DOWN
        if k == -entered.j:
            return Direction.UP
        raise TopologyInconsistency(
            f"Face with normal {departed.k} does not border face with normal {entered.k}."
        )

    def resolve(self, position: Point, direction: Direction) -> tuple[Point, Direction]:
        segment = self.registry.segment
        offset = position % segment
        current = self._face_at(position - offset)

        entered = self._face_facing(self._crossed_axis(current, direction))
        arrival = self._arrival(current, entered)

        landing = entered.corner + remap_offset(direction, arrival, offset, segment)
        logger.debug(
            f"Cube wrap {position} {direction.name} -> {landing} {arrival.name} "
            f"(normal {current.k} -> {entered.k})"
        )
        return landing, arrival
