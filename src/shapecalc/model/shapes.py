"""
Shape Catalog
=============
Immutable value objects that know how to measure themselves.

Capabilities are kept separate: every shape can report its area, only solids
can report a volume. Aggregators depend on the capability, never on a concrete
class, so a new shape is added by writing a new class and registering it.

Classes:
    AreaCapable / VolumeCapable: Runtime-checkable capability protocols.
    Shape: Abstract base for flat shapes (area only).
    SolidShape: Abstract base for solids (area + volume).
    Square, Rectangle, Circle, Polygon, Cuboid, Spheroid: Concrete variants.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict, fields
from enum import StrEnum
from typing import Any, ClassVar, Dict, Protocol, Sequence, Union, runtime_checkable
import logging
import math

from shapecalc.errors import InvalidDimension, InvalidShapeError
from shapecalc.model.geometry_primitives import Point, shoelace_area
from shapecalc.utils import ensure_non_negative

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Capabilities
# ------------------------------------------------------------------------------
@runtime_checkable
class AreaCapable(Protocol):
    def area(self) -> float: ...

@runtime_checkable
class VolumeCapable(Protocol):
    def volume(self) -> float: ...


class ShapeKind(StrEnum):
    SQUARE = "square"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    POLYGON = "polygon"
    CUBOID = "cuboid"
    SPHEROID = "spheroid"


# ------------------------------------------------------------------------------
# Abstract bases
# ------------------------------------------------------------------------------
class Shape(ABC):
    """
    Abstract base class for every shape.

    Subclasses are frozen dataclasses whose fields are lengths; they are
    validated and normalised to float in __post_init__.
    """
    KIND: ClassVar[ShapeKind]

    def __post_init__(self) -> None:
        for f in fields(self):
            value = ensure_non_negative(f.name, getattr(self, f.name))
            object.__setattr__(self, f.name, value)

    @abstractmethod
    def area(self) -> float:
        """Area of the shape (surface area for solids)."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": str(self.KIND), **asdict(self)}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Shape:
        """Inverse of to_dict(); dispatches on the 'kind' key via the registry."""
        if not isinstance(data, dict):
            raise InvalidShapeError(f"Shape description must be a mapping, got {type(data).__name__}.")
        params = dict(data)
        kind = params.pop("kind", None)
        if kind is None:
            raise InvalidShapeError(f"Shape description is missing 'kind': {data!r}")
        return create_shape(kind, **params)


class SolidShape(Shape):
    """A shape that additionally encloses a volume."""

    @abstractmethod
    def volume(self) -> float:
        pass


# ------------------------------------------------------------------------------
# Registry
# ------------------------------------------------------------------------------
_REGISTRY: dict[str, type[Shape]] = {}

def register_shape(cls: type[Shape]) -> type[Shape]:
    """Class decorator to register a shape by its KIND."""
    kind = getattr(cls, "KIND", None)
    if not kind:
        raise ValueError(f"{cls.__name__} must define KIND")
    _REGISTRY[str(kind)] = cls
    return cls

def create_shape(kind: str, **params: Any) -> Shape:
    cls = _REGISTRY.get(str(kind))
    if not cls:
        raise InvalidShapeError(f"No shape registered for kind '{kind}'")
    logger.debug(f"Creating {cls.__name__} with {params}")
    try:
        return cls(**params)
    except TypeError as e:
        if isinstance(e, InvalidShapeError):
            raise
        # Wrong/missing keyword arguments
        raise InvalidShapeError(f"Invalid parameters for '{kind}': {e}") from e

def list_kinds() -> list[str]:
    return list(_REGISTRY.keys())


# ------------------------------------------------------------------------------
# Flat shapes
# ------------------------------------------------------------------------------
@register_shape
@dataclass(frozen=True)
class Square(Shape):
    KIND: ClassVar[ShapeKind] = ShapeKind.SQUARE
    side: float

    def area(self) -> float:
        return self.side * self.side


@register_shape
@dataclass(frozen=True)
class Rectangle(Shape):
    KIND: ClassVar[ShapeKind] = ShapeKind.RECTANGLE
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@register_shape
@dataclass(frozen=True)
class Circle(Shape):
    KIND: ClassVar[ShapeKind] = ShapeKind.CIRCLE
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius


@register_shape
@dataclass(frozen=True)
class Polygon(Shape):
    """
    Simple (non self-intersecting) polygon given by its outline.

    Vertices are coordinates, not lengths, so they may be negative. At least
    three are required. Pairs such as [x, y] are converted to Point.
    """
    KIND: ClassVar[ShapeKind] = ShapeKind.POLYGON
    vertices: tuple[Point, ...]

    def __post_init__(self) -> None:
        if isinstance(self.vertices, (str, bytes)) or not isinstance(self.vertices, Sequence):
            raise InvalidDimension(f"'vertices' must be a sequence of points, got {self.vertices!r}.")
        points = tuple(self._to_point(v) for v in self.vertices)
        if len(points) < 3:
            raise InvalidDimension(f"A polygon needs at least 3 vertices, got {len(points)}.")
        object.__setattr__(self, "vertices", points)

    @staticmethod
    def _to_point(vertex: Union[Point, Sequence[float]]) -> Point:
        if isinstance(vertex, Point):
            return vertex
        try:
            return Point.from_sequence(vertex)
        except (TypeError, KeyError, IndexError) as e:
            raise InvalidDimension(f"Invalid polygon vertex {vertex!r}.") from e

    def area(self) -> float:
        return shoelace_area(self.vertices)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": str(self.KIND), "vertices": [p.to_list() for p in self.vertices]}


# ------------------------------------------------------------------------------
# Solids
# ------------------------------------------------------------------------------
@register_shape
@dataclass(frozen=True)
class Cuboid(SolidShape):
    KIND: ClassVar[ShapeKind] = ShapeKind.CUBOID
    width: float
    height: float
    depth: float

    def area(self) -> float:
        w, h, d = self.width, self.height, self.depth
        return 2.0 * (w * h + w * d + h * d)

    def volume(self) -> float:
        w, h, d = self.width, self.height, self.depth
        # inf * 0 would give NaN when the other two sides overflow
        if 0.0 in (w, h, d):
            return 0.0
        return w * h * d


@register_shape
@dataclass(frozen=True)
class Spheroid(SolidShape):
    """
    Ellipsoid of revolution with semi-axes (a, a, c).

    c < a is oblate, c > a is prolate, c == a is a sphere.

    The surface formulas are written in terms of the axis ratio and
    q = sqrt((1 - r)(1 + r)) so that very flat or very long spheroids stay
    finite, and huge radii overflow to inf instead of raising.
    """
    KIND: ClassVar[ShapeKind] = ShapeKind.SPHEROID
    equatorial_radius: float
    polar_radius: float

    @classmethod
    def sphere(cls, radius: float) -> Spheroid:
        return cls(equatorial_radius=radius, polar_radius=radius)

    def area(self) -> float:
        a, c = self.equatorial_radius, self.polar_radius
        disk = 2.0 * math.pi * a * a
        if a == 0.0:
            return 0.0
        if math.isclose(a, c):
            return 2.0 * disk
        if c < a:
            r = c / a
            if r == 0.0:
                # Flattened to a disk, both faces count
                return disk
            q = math.sqrt((1.0 - r) * (1.0 + r))
            # atanh(q) == log((1 + q) / r), which stays finite as q -> 1
            return disk * (1.0 + r * r / q * math.log((1.0 + q) / r))
        r = a / c
        q = math.sqrt((1.0 - r) * (1.0 + r))
        return disk + 2.0 * math.pi * a * c * math.asin(q) / q

    def volume(self) -> float:
        a, c = self.equatorial_radius, self.polar_radius
        return 4.0 / 3.0 * math.pi * a * (a * c)
