"""
Input Manager
Turns puzzle text into a GridModel and an ordered command list.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

import numpy as np

from cubewalk.config import TILE_CHARS
from cubewalk.errors import MalformedInput
from cubewalk.model.commands import Command, Forward, Turn, TurnSide
from cubewalk.model.grid import GridModel, Tile

# Get module logger
logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"(\d+)|([LR])")


@dataclass(frozen=True)
class PuzzleInput:
    grid: GridModel
    commands: list[Command]


def parse_grid(text: str, strict: bool = True) -> GridModel:
    """
    Parse the map section. Short rows are padded with EMPTY tiles.

    Raises:
        MalformedInput: If the section has no rows or no open tile.
        InvalidNetShape: If ``strict`` and the runs do not fit the segment size.
    """
    rows = text.split("\n")
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise MalformedInput("Map section is empty.")

    width = max(len(row) for row in rows)
    tiles = np.full((len(rows), width), Tile.EMPTY, dtype=np.int8)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            name = TILE_CHARS.get(char)
            if name is not None:
                tiles[y, x] = Tile[name]

    return GridModel(tiles, strict=strict)


def parse_commands(text: str) -> list[Command]:
    """
    Parse a path such as ``10R5L5`` into alternating Forward/Turn commands.

    Raises:
        MalformedInput: On unknown characters or if no run-length is present.
    """
    compact = "".join(text.split())
    commands: list[Command] = []
    position = 0
    for match in _TOKEN.finditer(compact):
        if match.start() != position:
            raise MalformedInput(f"Unexpected character in path at offset {position}: {compact[position]!r}")
        position = match.end()
        number, letter = match.groups()
        if number is not None:
            commands.append(Forward(int(number)))
        else:
            commands.append(Turn(TurnSide(letter)))
    if position != len(compact):
        raise MalformedInput(f"Unexpected character in path at offset {position}: {compact[position]!r}")

    if not any(isinstance(command, Forward) for command in commands):
        raise MalformedInput("Path contains no run-length.")
    return commands


def parse_input(text: str, strict: bool = True) -> PuzzleInput:
    """Split puzzle text on its last blank line and parse both sections."""
    normalized = text.replace("\r\n", "\n").rstrip("\n")
    prefix, separator, suffix = normalized.rpartition("\n\n")
    if not separator:
        raise MalformedInput("Missing blank line between map and path.")

    grid = parse_grid(prefix, strict=strict)
    commands = parse_commands(suffix)
    logger.info(f"Parsed {grid!r} with {len(commands)} commands.")
    return PuzzleInput(grid=grid, commands=commands)


def load_puzzle(filepath: str, strict: bool = True) -> PuzzleInput:
    logger.info(f"Loading puzzle from: {filepath}")
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Puzzle file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        return parse_input(f.read(), strict=strict)
