"""
Cube Topology
=============
Folds the six square segments of a net into a cube.

Every segment gets a frame of three unit vectors: ``i`` points right across
the segment as drawn, ``j`` points down, and ``k = i x j`` is the outward
normal of the cube face it becomes. Starting from the segment that holds the
walker's start tile, a breadth-first search folds the net by 90 degrees at
each shared edge.

The result is a flat registry with two keys per face (outward normal and
net corner); faces never refer to each other directly.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cubewalk.errors import InvalidNetShape
from cubewalk.model.geometry_primitives import UNIT_X, UNIT_Y, UNIT_Z, Point, Vector3
from cubewalk.model.grid import Tile

if TYPE_CHECKING:
    from cubewalk.model.grid import GridModel

logger = logging.getLogger(__name__)

CUBE_FACES = 6


@dataclass(frozen=True)
class Face:
    """One net segment together with its orientation on the cube."""
    corner: Point
    i: Vector3
    j: Vector3
    k: Vector3

    def neighbors(self, segment: int) -> list[Face]:
        """The four faces reached by folding across each edge of this one."""
        corner, i, j, k = self.corner, self.i, self.j, self.k
        return [
            Face(corner + Point(-segment, 0), i=-k, j=j, k=i),   # Left
            Face(corner + Point(segment, 0), i=k, j=j, k=-i),    # Right
            Face(corner + Point(0, -segment), i=i, j=-k, k=j),   # Up
            Face(corner + Point(0, segment), i=i, j=k, k=-j),    # Down
        ]


@dataclass
class FaceRegistry:
    """Faces indexed by outward normal and by the corner of their segment."""
    segment: int
    by_normal: dict[Vector3, Face] = field(default_factory=dict)
    by_corner: dict[Point, Face] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.by_normal)

    def __iter__(self):
        return iter(self.by_normal.values())

    def add(self, face: Face) -> None:
        """
        Register ``face`` under both keys.

        Raises:
            InvalidNetShape: If its segment already folds onto another normal.
        """
        existing = self.by_corner.get(face.corner)
        if existing is not None and existing.k != face.k:
            raise InvalidNetShape(
                f"Segment at {face.corner} folds onto both {existing.k} and {face.k}."
            )
        self.by_normal[face.k] = face
        self.by_corner[face.corner] = face


class CubeTopologyBuilder:
    """
    Assigns a 3D frame to every segment of a cube net.
    """

    def __init__(self, grid: GridModel) -> None:
        self.grid = grid

    def seed(self) -> Face:
        """Face of the segment holding the start tile, in the canonical frame."""
        return Face(
            corner=self.grid.segment_corner(self.grid.start),
            i=UNIT_X,
            j=UNIT_Y,
            k=UNIT_Z,
        )

    def build(self) -> FaceRegistry:
        """
        Fold the net breadth-first.

        Raises:
            InvalidNetShape: If the net does not fold into exactly six faces,
                two different normals claim the same segment, or some tile
                lies outside the folded segments.
        """
        segment = self.grid.segment
        if not self.grid.has_uniform_runs:
            raise InvalidNetShape(
                f"Occupied runs are not multiples of the segment size {segment}; cannot fold."
            )
        occupied = self.grid.occupied_segments()
        if len(occupied) != CUBE_FACES:
            raise InvalidNetShape(
                f"A cube net needs {CUBE_FACES} segments of size {segment}, found {len(occupied)}."
            )

        start = self.seed()
        registry = FaceRegistry(segment=segment)
        registry.add(start)
        todo = deque([start])

        while todo:
            face = todo.popleft()
            for candidate in face.neighbors(segment):
                if self.grid.tile(candidate.corner) == Tile.EMPTY:
                    continue
                if candidate.k in registry.by_normal:
                    continue
                registry.add(candidate)
                todo.append(candidate)
                logger.debug(f"Folded segment {candidate.corner} onto normal {candidate.k}")

        if len(registry) != CUBE_FACES:
            raise InvalidNetShape(
                f"Net folds into {len(registry)} distinct faces instead of {CUBE_FACES}."
            )
        self._check_coverage(registry)

        logger.info(f"Folded cube net with segment size {segment}.")
        return registry

    def _check_coverage(self, registry: FaceRegistry) -> None:
        """Every occupied tile must belong to a folded segment, and every folded segment must be full."""
        segment = self.grid.segment
        occupied = self.grid.tiles != Tile.EMPTY
        covered = 0
        for corner in registry.by_corner:
            block = occupied[corner.y:corner.y + segment, corner.x:corner.x + segment]
            if not block.all():
                raise InvalidNetShape(f"Segment at {corner} has gaps.")
            covered += block.size
        if covered != int(occupied.sum()):
            raise InvalidNetShape(
                f"{int(occupied.sum()) - covered} occupied tiles lie outside the folded segments."
            )
