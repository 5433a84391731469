"""
Command-Line Runner
===================
Loads a puzzle file and prints the flat and/or cube password.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Parses the puzzle into a GridModel and the command list.
3. Builds the requested edge resolvers and hands them to a PathWalker.
4. Maps input errors and internal errors onto process exit codes.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from cubewalk.analysis.resolvers import CubeEdgeResolver, FlatEdgeResolver
from cubewalk.config import DEFAULT_LOG_LEVEL, EXAMPLE_INPUT_PATH
from cubewalk.errors import InvalidNetShape, MalformedInput, TopologyInconsistency
from cubewalk.logging_config import setup_logging
from cubewalk.model.io import load_puzzle
from cubewalk.solvers.walker import PathWalker

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_INTERNAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cubewalk",
        description="Walk a path over a cube net and print the password",
    )
    parser.add_argument('input', nargs='?', default=EXAMPLE_INPUT_PATH,
                        help='Puzzle file (default: bundled example)')
    parser.add_argument('--part', choices=['1', '2', 'both'], default='both',
                        help='1 = flat wrap, 2 = cube wrap (default: both)')
    parser.add_argument('--lenient', action='store_true',
                        help='Accept grids whose rows/columns do not fit the segment size (part 1 only; part 2 rejects them)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show debug logging')
    parser.add_argument('--log-file', default=None,
                        help='Also write the log to this file')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (stderr + optional file)
    if args.verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelNamesMapping().get(DEFAULT_LOG_LEVEL, logging.WARNING)
    setup_logging(level=level, log_file=args.log_file)

    # 2. Load the puzzle
    try:
        puzzle = load_puzzle(args.input, strict=not args.lenient)
    except FileNotFoundError as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT
    except (MalformedInput, InvalidNetShape) as e:
        logger.error(f"Invalid puzzle '{args.input}': {e}")
        return EXIT_BAD_INPUT

    # 3. Build every requested resolver before walking, so a net that does
    # not fold is reported without printing a partial result
    resolvers = []
    try:
        if args.part in ('1', 'both'):
            resolvers.append(("Part 1", FlatEdgeResolver(puzzle.grid)))
        if args.part in ('2', 'both'):
            resolvers.append(("Part 2", CubeEdgeResolver.from_grid(puzzle.grid)))
    except InvalidNetShape as e:
        logger.error(f"Cannot fold '{args.input}' into a cube: {e}")
        return EXIT_BAD_INPUT

    # 4. Walk
    try:
        for label, resolver in resolvers:
            password = PathWalker(puzzle.grid, resolver).run(puzzle.commands)
            print(f"{label}: {password}")
    except TopologyInconsistency as e:
        logger.exception(f"Internal error while crossing a cube edge: {e}")
        return EXIT_INTERNAL

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
