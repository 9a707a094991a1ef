"""
Input/Output Manager (JSON)
Handles saving and loading shape collections to .json files.

File layout:
    {"version": "...", "shapes": [{"kind": "circle", "radius": 2.0}, ...]}

A bare list of shape descriptions is accepted on load as well.
"""
from __future__ import annotations

import json
import logging
from importlib.metadata import version, PackageNotFoundError
from typing import Any, Iterable, List

from shapecalc.errors import InvalidShapeError
from shapecalc.model.shapes import Shape

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("shapecalc")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


class ShapeFileIO:

    @staticmethod
    def shapes_from_data(data: Any) -> List[Shape]:
        """
        Build shapes from a decoded JSON document.

        Raises:
            InvalidShapeError: The document or one of its entries is malformed.
            InvalidDimension: An entry carries an invalid dimension.
        """
        items = data.get("shapes") if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise InvalidShapeError("Expected a list of shapes or an object with a 'shapes' list.")

        shapes = [Shape.from_dict(item) for item in items]
        logger.debug(f"Built {len(shapes)} shapes from data.")
        return shapes

    @staticmethod
    def shapes_to_data(shapes: Iterable[Shape]) -> dict[str, Any]:
        return {
            "version": APP_VERSION,
            "shapes": [shape.to_dict() for shape in shapes],
        }

    @staticmethod
    def load_shapes(filepath: str) -> List[Shape]:
        logger.info(f"Loading shapes from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read shape file '{filepath}': {e}")
            raise

        shapes = ShapeFileIO.shapes_from_data(data)
        logger.info(f"Loaded {len(shapes)} shapes.")
        return shapes

    @staticmethod
    def save_shapes(shapes: Iterable[Shape], filepath: str) -> None:
        logger.info(f"Saving shapes to: {filepath}")
        data = ShapeFileIO.shapes_to_data(shapes)
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write shape file '{filepath}': {e}")
            raise
        logger.info(f"Saved {len(data['shapes'])} shapes.")
