from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union


class TurnSide(StrEnum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Turn:
    """Rotate the walker by 90 degrees in place."""
    side: TurnSide


@dataclass(frozen=True)
class Forward:
    """Step ahead ``count`` tiles, stopping early at a wall."""
    count: int


# Union for type hinting
Command = Union[Turn, Forward]

LEFT = Turn(TurnSide.LEFT)
RIGHT = Turn(TurnSide.RIGHT)
