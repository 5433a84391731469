import logging
import os

import pytest

from cubewalk.config import ASSETS_PATH, EXAMPLE_INPUT_PATH, get_resource_path
from cubewalk.main import EXIT_BAD_INPUT, EXIT_OK, main
from conftest import ragged_cross


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logging.getLogger("cubewalk").handlers.clear()


def test_bundled_example(capsys):
    assert main([]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Part 1: 6032" in out
    assert "Part 2: 5031" in out


@pytest.mark.parametrize("part, expected, missing", [
    ("1", "Part 1: 6032", "Part 2"),
    ("2", "Part 2: 5031", "Part 1"),
])
def test_single_part(capsys, part, expected, missing):
    assert main(["--part", part]) == EXIT_OK
    out = capsys.readouterr().out
    assert expected in out
    assert missing not in out


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.txt")]) == EXIT_BAD_INPUT


def test_malformed_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("...#\n10R5\n", encoding="utf-8")
    assert main([str(path)]) == EXIT_BAD_INPUT


def test_net_that_does_not_fold(tmp_path, capsys):
    path = tmp_path / "strip.txt"
    path.write_text("......\n\n3\n", encoding="utf-8")
    assert main([str(path)]) == EXIT_BAD_INPUT
    # Nothing is printed when part 2 cannot be set up
    assert "Part 1" not in capsys.readouterr().out


def test_lenient_flat_walk(tmp_path, capsys):
    path = tmp_path / "ragged.txt"
    path.write_text("....\n...\n\n2R1\n", encoding="utf-8")
    assert main([str(path), "--lenient", "--part", "1"]) == EXIT_OK
    assert "Part 1: 2013" in capsys.readouterr().out


def test_log_file(tmp_path):
    log_file = tmp_path / "run.log"
    assert main(["--verbose", "--log-file", str(log_file)]) == EXIT_OK
    assert "Folded cube net" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize("part", ["2", "both"])
def test_lenient_grid_cannot_fold(tmp_path, capsys, part):
    path = tmp_path / "ragged_cross.txt"
    path.write_text(ragged_cross() + "\n\n1R1L2\n", encoding="utf-8")
    assert main([str(path), "--lenient", "--part", part]) == EXIT_BAD_INPUT
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("name, expected", [
    ("DEBUG", logging.DEBUG),
    ("ERROR", logging.ERROR),
    ("BASIC_FORMAT", logging.WARNING),
    ("NOT_A_LEVEL", logging.WARNING),
])
def test_default_log_level_names(monkeypatch, name, expected):
    monkeypatch.setattr("cubewalk.main.DEFAULT_LOG_LEVEL", name)
    assert main(["--part", "1"]) == EXIT_OK
    assert logging.getLogger("cubewalk").level == expected


def test_bundled_example_path():
    assert os.path.isfile(EXAMPLE_INPUT_PATH)
    assert get_resource_path("assets") == ASSETS_PATH
    assert os.path.dirname(EXAMPLE_INPUT_PATH) == ASSETS_PATH
