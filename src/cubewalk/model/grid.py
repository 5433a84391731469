"""
Tile Grid
=========
Bounds-checked storage for the parsed net.

The grid is a rectangular numpy buffer padded with EMPTY tiles. It knows the
walker's start tile and the side length of one cube face (``segment``), and
checks that the occupied regions line up with that side length.
"""
from __future__ import annotations

import logging
import math
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy as np

from cubewalk.errors import InvalidNetShape, MalformedInput
from cubewalk.model.geometry_primitives import Point

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Tile(IntEnum):
    EMPTY = 0
    OPEN = 1
    WALL = 2


def _runs(line: npt.NDArray[np.int8]) -> list[int]:
    """Lengths of the maximal runs of non-EMPTY tiles in a 1D slice."""
    occupied = np.concatenate(([False], line != Tile.EMPTY, [False]))
    edges = np.flatnonzero(np.diff(occupied.astype(np.int8)))
    starts, ends = edges[::2], edges[1::2]
    return (ends - starts).tolist()


class GridModel:
    """
    Immutable tile map of an unfolded cube.

    Attributes:
        width: Number of columns (longest input row).
        height: Number of rows.
        tiles: Row-major ``(height, width)`` buffer of Tile values.
        start: First OPEN tile in reading order.
        segment: Side length of one face, gcd(width, height).
        has_uniform_runs: Whether every occupied run is a multiple of ``segment``.
    """

    def __init__(self, tiles: npt.ArrayLike, strict: bool = True) -> None:
        """
        Args:
            tiles: 2D array of Tile values, one row per grid line.
            strict: Reject grids whose occupied runs are not multiples of the
                segment size. Lenient grids can still be walked with flat wrap.

        Raises:
            MalformedInput: If the grid holds no OPEN tile to start from.
            InvalidNetShape: If the segment size is zero, or ``strict`` is set
                and a run violates the segment size.
        """
        buffer = np.array(tiles, dtype=np.int8)
        if buffer.ndim != 2:
            raise MalformedInput(f"Expected a 2D tile buffer, got shape {buffer.shape}.")
        buffer.setflags(write=False)

        self.tiles: npt.NDArray[np.int8] = buffer
        self.height, self.width = buffer.shape

        self.segment: int = math.gcd(self.width, self.height)
        if self.segment == 0:
            raise InvalidNetShape("Grid is empty, segment size is zero.")

        open_indices = np.flatnonzero(buffer == Tile.OPEN)
        if open_indices.size == 0:
            raise MalformedInput("Grid contains no open tile to start from.")
        self.start_index: int = int(open_indices[0])
        self.start = Point(self.start_index % self.width, self.start_index // self.width)

        self.has_uniform_runs: bool = self._check_runs()
        if strict and not self.has_uniform_runs:
            raise InvalidNetShape(
                f"Occupied runs are not multiples of the segment size {self.segment}."
            )

        logger.debug(
            f"Grid {self.width}x{self.height}, segment={self.segment}, start={self.start}"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(width={self.width}, height={self.height}, segment={self.segment})"

    def _check_runs(self) -> bool:
        lines = list(self.tiles) + list(self.tiles.T)
        return all(run % self.segment == 0 for line in lines for run in _runs(line))

    def tile(self, point: Point) -> Tile:
        """Tile at ``point``; EMPTY for anything outside the grid."""
        if 0 <= point.x < self.width and 0 <= point.y < self.height:
            return Tile(int(self.tiles[point.y, point.x]))
        return Tile.EMPTY

    def segment_corner(self, point: Point) -> Point:
        """Top-left tile of the segment containing ``point``."""
        return point - point % self.segment

    def occupied_segments(self) -> list[Point]:
        """Corners of every segment whose top-left tile is part of the net."""
        return [
            Point(x, y)
            for y in range(0, self.height, self.segment)
            for x in range(0, self.width, self.segment)
            if self.tiles[y, x] != Tile.EMPTY
        ]
