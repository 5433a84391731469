"""Walk a path over an unfolded cube net, wrapping flat or folded."""
from importlib.metadata import PackageNotFoundError, version

from cubewalk.analysis.resolvers import CubeEdgeResolver, FlatEdgeResolver
from cubewalk.model.io import PuzzleInput, load_puzzle, parse_input
from cubewalk.solvers.walker import PathWalker

try:
    __version__ = version("cubewalk")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"


def part1(puzzle: PuzzleInput) -> int:
    """Password when rows and columns wrap around."""
    return PathWalker(puzzle.grid, FlatEdgeResolver(puzzle.grid)).run(puzzle.commands)


def part2(puzzle: PuzzleInput) -> int:
    """Password when the net is folded into a cube."""
    return PathWalker(puzzle.grid, CubeEdgeResolver.from_grid(puzzle.grid)).run(puzzle.commands)


__all__ = ["part1", "part2", "load_puzzle", "parse_input", "PuzzleInput", "__version__"]
