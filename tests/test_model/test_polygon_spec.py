"""Tests for PolygonSpec validation and canonical notation."""

import dataclasses

import pytest

from shaper2d.model.polygon_spec import PolygonSpec
from shaper2d.parser import InvalidNotationError


class TestPolygonSpec:
    def test_default_step(self):
        assert PolygonSpec(6).k == 1

    def test_str_omits_unit_step(self):
        assert str(PolygonSpec(12)) == "12"

    def test_str_includes_step(self):
        assert str(PolygonSpec(5, 2)) == "5/2"

    def test_str_zero_step(self):
        assert str(PolygonSpec(5, 0)) == "5/0"

    def test_frozen(self):
        spec = PolygonSpec(5, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.n = 7

    def test_equality_and_hash(self):
        assert PolygonSpec(7, 3) == PolygonSpec(7, 3)
        assert len({PolygonSpec(7, 3), PolygonSpec(7, 3)}) == 1

    def test_negative_n_rejected(self):
        with pytest.raises(ValueError, match="n must be non-negative"):
            PolygonSpec(-1)

    def test_negative_k_rejected(self):
        with pytest.raises(ValueError, match="k must be non-negative"):
            PolygonSpec(5, -2)

    def test_float_rejected(self):
        with pytest.raises(ValueError, match="n must be an integer"):
            PolygonSpec(5.0)

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="k must be an integer"):
            PolygonSpec(5, True)


class TestFromString:
    def test_parses(self):
        assert PolygonSpec.from_string("7/3") == PolygonSpec(7, 3)

    def test_invalid(self):
        with pytest.raises(InvalidNotationError):
            PolygonSpec.from_string("7/")


class TestTarget:
    def test_wraps(self):
        spec = PolygonSpec(5, 2)
        assert [spec.target(i) for i in range(5)] == [2, 3, 4, 0, 1]

    def test_step_larger_than_n(self):
        assert PolygonSpec(5, 7).target(4) == 1

    def test_empty_polygon(self):
        with pytest.raises(ValueError, match="no vertices"):
            PolygonSpec(0).target(0)
