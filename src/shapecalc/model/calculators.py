"""
Aggregators
===========
Sum one measure over a collection of shapes.

AreaCalculator and VolumeCalculator are siblings, not parent and child: a
volume total is not a drop-in replacement for an area total. They share the
summation helper below and nothing else.
"""
from __future__ import annotations

from typing import ClassVar, Iterable, Iterator
import logging

from shapecalc.errors import InvalidShapeError
from shapecalc.model.shapes import AreaCapable, VolumeCapable

logger = logging.getLogger(__name__)


def _sum_capability(
    shapes: Iterable[object],
    capability: type,
    method: str,
) -> float:
    """
    Accumulate `shape.<method>()` in insertion order.

    Args:
        shapes: The shapes to aggregate.
        capability: Runtime-checkable protocol every element must satisfy.
        method: Name of the measuring method (e.g. "area").

    Raises:
        InvalidShapeError: If an element does not satisfy `capability`, is a
            class rather than an instance, or its `method` is not callable.
    """
    total = 0.0
    for index, shape in enumerate(shapes):
        measure = getattr(shape, method, None)
        # Protocol isinstance() only checks that the attribute exists
        if isinstance(shape, type) or not isinstance(shape, capability) or not callable(measure):
            name = shape.__name__ if isinstance(shape, type) else type(shape).__name__
            raise InvalidShapeError(f"Element {index} ({name}) cannot compute {method}.")
        total += measure()
    return total


class AreaCalculator:
    """Sums the areas of a fixed collection of shapes."""
    QUANTITY: ClassVar[str] = "areas"

    def __init__(self, shapes: Iterable[AreaCapable]) -> None:
        self._shapes: tuple[AreaCapable, ...] = tuple(shapes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n_shapes={len(self._shapes)})"

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[AreaCapable]:
        return iter(self._shapes)

    @property
    def shapes(self) -> tuple[AreaCapable, ...]:
        return self._shapes

    def sum(self) -> float:
        total = _sum_capability(self._shapes, AreaCapable, "area")
        logger.debug(f"Summed areas of {len(self._shapes)} shapes: {total}")
        return total


class VolumeCalculator:
    """Sums the volumes of a fixed collection of solids."""
    QUANTITY: ClassVar[str] = "volumes"

    def __init__(self, shapes: Iterable[VolumeCapable]) -> None:
        self._shapes: tuple[VolumeCapable, ...] = tuple(shapes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n_shapes={len(self._shapes)})"

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[VolumeCapable]:
        return iter(self._shapes)

    @property
    def shapes(self) -> tuple[VolumeCapable, ...]:
        return self._shapes

    def sum(self) -> float:
        total = _sum_capability(self._shapes, VolumeCapable, "volume")
        logger.debug(f"Summed volumes of {len(self._shapes)} shapes: {total}")
        return total
