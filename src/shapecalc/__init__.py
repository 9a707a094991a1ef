"""
shapecalc
=========
Area and volume aggregation over polymorphic shapes, with JSON and HTML output.

    >>> from shapecalc import AreaCalculator, Circle, Square, ResultFormatter
    >>> calc = AreaCalculator([Circle(2), Square(5), Square(6)])
    >>> round(ResultFormatter(calc).to_structured_data()["sum"], 3)
    73.566
"""
from shapecalc.errors import ShapeError, InvalidDimension, InvalidShapeError, NonFiniteResultError
from shapecalc.model.geometry_primitives import Point
from shapecalc.model.shapes import (
    AreaCapable, VolumeCapable, Shape, SolidShape, ShapeKind,
    Square, Rectangle, Circle, Polygon, Cuboid, Spheroid,
    register_shape, create_shape, list_kinds,
)
from shapecalc.model.calculators import AreaCalculator, VolumeCalculator
from shapecalc.model.outputs import OutputFormat, ResultFormatter
from shapecalc.model.io import ShapeFileIO

__all__ = [
    "ShapeError", "InvalidDimension", "InvalidShapeError", "NonFiniteResultError",
    "Point",
    "AreaCapable", "VolumeCapable", "Shape", "SolidShape", "ShapeKind",
    "Square", "Rectangle", "Circle", "Polygon", "Cuboid", "Spheroid",
    "register_shape", "create_shape", "list_kinds",
    "AreaCalculator", "VolumeCalculator",
    "OutputFormat", "ResultFormatter",
    "ShapeFileIO",
]
