"""
Result Rendering
================
ResultFormatter turns an aggregator's total into an output encoding. It does
not compute anything itself and it does not cache: every call asks the
aggregator for a fresh sum.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Any, Dict, Optional, Protocol
import json
import logging

from shapecalc.config import MARKUP_TEMPLATE
from shapecalc.errors import NonFiniteResultError

logger = logging.getLogger(__name__)


class OutputFormat(StrEnum):
    JSON = "json"
    MARKUP = "markup"


class Summable(Protocol):
    """Anything that can report a total and name what it is a total of."""
    QUANTITY: str

    def sum(self) -> float: ...


class ResultFormatter:
    """
    Renders the total of an aggregator (AreaCalculator, VolumeCalculator, ...).

    The formatter only holds a reference to the aggregator; it never owns the
    shapes behind it.
    """

    def __init__(self, calculator: Summable) -> None:
        self.calculator = calculator

    def to_structured_data(self) -> Dict[str, Any]:
        return {"sum": self.calculator.sum()}

    def to_json(self, indent: Optional[int] = None) -> str:
        """
        Strict JSON: a total that overflowed to inf has no JSON encoding.

        Raises:
            NonFiniteResultError: If the total is not finite.
        """
        data = self.to_structured_data()
        try:
            return json.dumps(data, indent=indent, allow_nan=False)
        except ValueError as e:
            raise NonFiniteResultError(
                f"Sum of the {self.calculator.QUANTITY} is not finite ({data['sum']}); "
                f"use markup output or smaller dimensions."
            ) from e

    def to_markup(self) -> str:
        return MARKUP_TEMPLATE.format(
            quantity=self.calculator.QUANTITY,
            total=self.calculator.sum(),
        )

    def render(self, fmt: OutputFormat | str, indent: Optional[int] = None) -> str:
        """Render in the requested encoding."""
        logger.debug(f"Rendering {self.calculator!r} as {fmt}")
        match OutputFormat(fmt):
            case OutputFormat.JSON:
                return self.to_json(indent=indent)
            case OutputFormat.MARKUP:
                return self.to_markup()
