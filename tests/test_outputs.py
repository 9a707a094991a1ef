"""Tests for ResultFormatter."""
import json

import pytest

from shapecalc.config import MARKUP_TEMPLATE
from shapecalc.errors import NonFiniteResultError, ShapeError
from shapecalc.model.calculators import AreaCalculator, VolumeCalculator
from shapecalc.model.outputs import OutputFormat, ResultFormatter
from shapecalc.model.shapes import Square


class CountingCalculator:
    """Stub aggregator that records how often it is asked for a total."""
    QUANTITY = "things"

    def __init__(self, total):
        self.total = total
        self.calls = 0

    def sum(self):
        self.calls += 1
        return self.total


class TestResultFormatter:

    def test_structured_data(self, mixed_shapes):
        calc = AreaCalculator(mixed_shapes)
        assert ResultFormatter(calc).to_structured_data() == {"sum": calc.sum()}

    def test_json_round_trips_the_sum(self, mixed_shapes):
        calc = AreaCalculator(mixed_shapes)
        assert json.loads(ResultFormatter(calc).to_json()) == {"sum": calc.sum()}

    def test_json_indent(self):
        out = ResultFormatter(AreaCalculator([Square(2)])).to_json(indent=2)
        assert out == '{\n  "sum": 4.0\n}'

    def test_markup(self):
        out = ResultFormatter(AreaCalculator([Square(2)])).to_markup()
        assert out == "<h1>Sum of the areas of provided shapes: 4.0</h1>"

    def test_markup_for_volumes(self, solids):
        calc = VolumeCalculator(solids)
        out = ResultFormatter(calc).to_markup()
        assert out == MARKUP_TEMPLATE.format(quantity="volumes", total=calc.sum())

    def test_both_encodings_report_the_same_sum(self, mixed_shapes):
        formatter = ResultFormatter(AreaCalculator(mixed_shapes))
        total = formatter.to_structured_data()["sum"]
        assert formatter.to_markup().endswith(f": {total}</h1>")

    def test_sum_is_not_cached(self):
        calc = CountingCalculator(1.5)
        formatter = ResultFormatter(calc)
        formatter.to_structured_data()
        formatter.to_markup()
        formatter.to_json()
        assert calc.calls == 3

    def test_reflects_calculator_at_call_time(self):
        calc = CountingCalculator(1.0)
        formatter = ResultFormatter(calc)
        assert formatter.to_structured_data() == {"sum": 1.0}
        calc.total = 2.0
        assert formatter.to_structured_data() == {"sum": 2.0}
        assert "things" in formatter.to_markup()

    @pytest.mark.parametrize("fmt, expected", [
        (OutputFormat.JSON, '{"sum": 4.0}'),
        ("json", '{"sum": 4.0}'),
        (OutputFormat.MARKUP, "<h1>Sum of the areas of provided shapes: 4.0</h1>"),
    ])
    def test_render(self, fmt, expected):
        assert ResultFormatter(AreaCalculator([Square(2)])).render(fmt) == expected

    def test_json_rejects_overflowed_total(self):
        formatter = ResultFormatter(AreaCalculator([Square(1e200)]))
        with pytest.raises(NonFiniteResultError, match="not finite"):
            formatter.to_json()
        with pytest.raises(ShapeError):
            formatter.render(OutputFormat.JSON)

    def test_markup_shows_overflowed_total(self):
        out = ResultFormatter(AreaCalculator([Square(1e200)])).to_markup()
        assert out == "<h1>Sum of the areas of provided shapes: inf</h1>"

    def test_render_unknown_format(self):
        with pytest.raises(ValueError):
            ResultFormatter(AreaCalculator([])).render("xml")
