import json
import logging

import pytest
from typer.testing import CliRunner

from shapecalc.model.shapes import Circle, Square, Cuboid, Spheroid


@pytest.fixture
def mixed_shapes():
    """One circle and two squares, total area 4π + 61."""
    return [Circle(2), Square(5), Square(6)]


@pytest.fixture
def solids():
    return [Cuboid(2, 3, 4), Spheroid.sphere(1)]


@pytest.fixture
def write_shapes_file(tmp_path):
    """Write a JSON document to a temp file and return its path."""
    def _write(data, name="shapes.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging() mutates the 'shapecalc' logger; restore it after each test."""
    logger = logging.getLogger("shapecalc")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
