"""
Error types raised while loading a puzzle and folding its net.

Input problems (MalformedInput, InvalidNetShape) are detected before any walk
starts. TopologyInconsistency means the folded frames contradict each other,
which is a bug in the topology code rather than a problem with the input.
"""


class CubeWalkError(Exception):
    """Base class for all cubewalk errors."""


class MalformedInput(CubeWalkError, ValueError):
    """The puzzle text cannot be split into a grid and a command list."""


class InvalidNetShape(CubeWalkError, ValueError):
    """The grid is not a net of six equal square segments."""


class TopologyInconsistency(CubeWalkError, RuntimeError):
    """Face frames disagree while crossing an edge."""
