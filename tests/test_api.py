import json

import numpy as np
import pytest
import torch

from relaxed_splines.api import compute_control_points, load_points, save_points
from relaxed_splines.core.points import Point
from relaxed_splines.exceptions import ConfigurationError, PointsFileError

ZIGZAG = [(0.0, 0.0), (1.0, 2.0), (2.0, 0.0), (3.0, 2.0)]
EXPECTED = [[0.0, 0.0], [1.0, 10.0 / 3.0], [2.0, -4.0 / 3.0], [3.0, 2.0]]


def test_list_input_returns_points():
    result = compute_control_points(ZIGZAG)
    assert all(isinstance(p, Point) for p in result)
    np.testing.assert_allclose([p.as_tuple() for p in result], EXPECTED)


def test_ndarray_input_returns_ndarray():
    result = compute_control_points(np.array(ZIGZAG, dtype=np.float32))
    assert isinstance(result, np.ndarray)
    assert result.dtype == np.float32
    np.testing.assert_allclose(result, EXPECTED, rtol=1e-6)


def test_integer_ndarray_promoted_to_float():
    result = compute_control_points(np.array(ZIGZAG, dtype=np.int64))
    assert result.dtype == np.float64


def test_tensor_input_returns_tensor():
    points = torch.tensor(ZIGZAG, dtype=torch.float32)
    result = compute_control_points(points)
    assert isinstance(result, torch.Tensor)
    assert result.dtype == torch.float32
    assert result.shape == (4, 2)
    torch.testing.assert_close(result, torch.tensor(EXPECTED, dtype=torch.float32))


def test_json_round_trip(tmp_path):
    path = save_points(tmp_path / "points.json", ZIGZAG)
    assert json.loads(path.read_text()) == [list(p) for p in ZIGZAG]
    assert load_points(path) == [Point(*p) for p in ZIGZAG]


def test_json_object_form(tmp_path):
    path = tmp_path / "points.json"
    path.write_text(json.dumps({"points": [{"x": 0, "y": 1}, {"x": 2, "y": 3}]}))
    assert load_points(path) == [Point(0, 1), Point(2, 3)]


def test_csv_with_header(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("x,y\n0,0\n1,2\n2,0\n")
    assert load_points(path) == [Point(0, 0), Point(1, 2), Point(2, 0)]


def test_csv_written_by_save_points(tmp_path):
    path = save_points(tmp_path / "out.csv", compute_control_points(ZIGZAG))
    np.testing.assert_allclose([p.as_tuple() for p in load_points(path)], EXPECTED)


def test_whitespace_text_file(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("0 0\n1 2\n2 0\n3 2\n")
    assert len(load_points(path)) == 4


def test_missing_file(tmp_path):
    with pytest.raises(PointsFileError):
        load_points(tmp_path / "missing.json")


def test_malformed_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(PointsFileError) as excinfo:
        load_points(path)
    assert excinfo.value.original_error is not None


def test_unknown_suffix(tmp_path):
    with pytest.raises(ConfigurationError):
        load_points(tmp_path / "points.xml")
    with pytest.raises(ConfigurationError):
        save_points(tmp_path / "points.xml", ZIGZAG)


def test_text_round_trip(tmp_path):
    path = save_points(tmp_path / "points.txt", ZIGZAG)
    assert path.read_text().splitlines()[0] == "x y"
    assert load_points(path) == [Point(*p) for p in ZIGZAG]


def test_save_into_missing_directory(tmp_path):
    with pytest.raises(PointsFileError):
        save_points(tmp_path / "nope" / "points.csv", ZIGZAG)
