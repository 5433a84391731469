import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from cubewalk.config import EXAMPLE_INPUT_PATH
from cubewalk.model.io import parse_grid, parse_input

EXAMPLE_PATH = "10R5L5R10L4R5L5"

EXAMPLE_MAP = "\n".join([
    "        ...#",
    "        .#..",
    "        #...",
    "        ....",
    "...#.......#",
    "........#...",
    "..#....#....",
    "..........#.",
    "        ...#....",
    "        .....#..",
    "        .#......",
    "        ......#.",
])

# Segment layouts as (column, row) in units of one face
CUBE_NETS = {
    "sample": [(2, 0), (0, 1), (1, 1), (2, 1), (2, 2), (3, 2)],
    "cross": [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2), (1, 3)],
    "hook": [(1, 0), (2, 0), (1, 1), (0, 2), (1, 2), (0, 3)],
    "stairs": [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2), (3, 2)],
    "three_three": [(0, 0), (1, 0), (2, 0), (2, 1), (3, 1), (4, 1)],
}


def render_net(cells, size, wall=None):
    """Draw a net of open tiles; ``wall`` is an optional (x, y) tile to block."""
    columns = max(c for c, _ in cells) + 1
    rows = max(r for _, r in cells) + 1
    lines = [[" "] * (columns * size) for _ in range(rows * size)]
    for c, r in cells:
        for y in range(r * size, (r + 1) * size):
            for x in range(c * size, (c + 1) * size):
                lines[y][x] = "."
    if wall is not None:
        lines[wall[1]][wall[0]] = "#"
    return "\n".join("".join(line) for line in lines)


@pytest.fixture
def example_text():
    with open(EXAMPLE_INPUT_PATH, encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def example_puzzle():
    return parse_input(EXAMPLE_MAP + "\n\n" + EXAMPLE_PATH + "\n")


@pytest.fixture
def example_grid(example_puzzle):
    return example_puzzle.grid


@pytest.fixture(params=sorted(CUBE_NETS))
def net_name(request):
    return request.param


@pytest.fixture(params=[1, 2, 3])
def cube_grid(request, net_name):
    return parse_grid(render_net(CUBE_NETS[net_name], request.param))


def ragged_cross(size=2):
    """Cross net with one extra open tile to the right of the top segment."""
    lines = render_net(CUBE_NETS["cross"], size).split("\n")
    x = 2 * size
    lines[1] = lines[1][:x] + "." + lines[1][x + 1:]
    return "\n".join(lines)
