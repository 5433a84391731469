"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths to the bundled puzzles from being
   scattered throughout the code.
2. Location: Bundled puzzles live in the project's assets/ directory, next
   to src/, and are found relative to this file.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    EXAMPLE_INPUT_PATH (str): Absolute path to the bundled sample puzzle.
    DEFAULT_LOG_LEVEL (str): Log level used by the CLI unless overridden.
    TILE_CHARS (dict): Input character -> tile name for the grid section.
"""
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a resource in the project root.
    """
    # config.py is in src/cubewalk/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
EXAMPLE_INPUT_PATH: str = os.path.join(ASSETS_PATH, "example_net.txt")

DEFAULT_LOG_LEVEL: str = os.environ.get("CUBEWALK_LOG_LEVEL", "WARNING").upper()

# Anything not listed here (space, end of a short row) is outside the net
TILE_CHARS: dict[str, str] = {
    ".": "OPEN",
    "#": "WALL",
}

if not os.path.exists(ASSETS_PATH):
    logger.debug(f"Assets path not found at {ASSETS_PATH}")
