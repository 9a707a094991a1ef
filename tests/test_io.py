"""Tests for loading and saving shape files."""
import json

import pytest

from shapecalc.config import DEFAULT_SHAPES_PATH, DEFAULT_SOLIDS_PATH
from shapecalc.errors import InvalidDimension, InvalidShapeError
from shapecalc.model.calculators import AreaCalculator, VolumeCalculator
from shapecalc.model.io import ShapeFileIO, APP_VERSION
from shapecalc.model.shapes import Circle, Polygon, Square, Cuboid


class TestShapesFromData:

    def test_object_document(self):
        data = {"shapes": [{"kind": "circle", "radius": 2}, {"kind": "square", "side": 5}]}
        assert ShapeFileIO.shapes_from_data(data) == [Circle(2), Square(5)]

    def test_bare_list(self):
        assert ShapeFileIO.shapes_from_data([{"kind": "square", "side": 1}]) == [Square(1)]

    def test_empty(self):
        assert ShapeFileIO.shapes_from_data({"shapes": []}) == []

    @pytest.mark.parametrize("data", [{}, {"shapes": 3}, "shapes", None])
    def test_malformed_document(self, data):
        with pytest.raises(InvalidShapeError):
            ShapeFileIO.shapes_from_data(data)

    def test_unknown_kind(self):
        with pytest.raises(InvalidShapeError):
            ShapeFileIO.shapes_from_data([{"kind": "blob"}])

    def test_bad_dimension(self):
        with pytest.raises(InvalidDimension):
            ShapeFileIO.shapes_from_data([{"kind": "circle", "radius": -2}])


class TestLoadSave:

    def test_save_then_load(self, tmp_path):
        shapes = [Circle(2), Square(5), Polygon([(0, 0), (3, 0), (0, 4)]), Cuboid(1, 2, 3)]
        path = str(tmp_path / "out.json")
        ShapeFileIO.save_shapes(shapes, path)
        assert ShapeFileIO.load_shapes(path) == shapes

    def test_saved_document_layout(self, tmp_path):
        path = tmp_path / "out.json"
        ShapeFileIO.save_shapes([Square(2)], str(path))
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"version": APP_VERSION, "shapes": [{"kind": "square", "side": 2.0}]}

    def test_load_from_file(self, write_shapes_file):
        path = write_shapes_file({"shapes": [{"kind": "rectangle", "width": 2, "height": 3}]})
        shapes = ShapeFileIO.load_shapes(path)
        assert AreaCalculator(shapes).sum() == pytest.approx(6.0)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ShapeFileIO.load_shapes(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            ShapeFileIO.load_shapes(str(path))

    def test_bundled_examples(self):
        assert AreaCalculator(ShapeFileIO.load_shapes(DEFAULT_SHAPES_PATH)).sum() == pytest.approx(73.566, abs=1e-3)
        assert VolumeCalculator(ShapeFileIO.load_shapes(DEFAULT_SOLIDS_PATH)).sum() > 24.0
