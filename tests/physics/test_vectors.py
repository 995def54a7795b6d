"""Tests for Vector3 class."""

import math

import numpy as np
import pytest

from airnav.physics.vectors import Vector3


class TestVector3Creation:
    """Test Vector3 creation and factory methods."""

    def test_constructor_with_values(self) -> None:
        """Test constructor with explicit values."""
        v = Vector3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_zero_factory(self) -> None:
        """Test zero() factory method."""
        assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)

    def test_is_immutable(self) -> None:
        """Test that components cannot be reassigned."""
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Test vectors can be used as dict keys."""
        positions = {Vector3(1.0, 2.0, 3.0): "gate"}
        assert positions[Vector3(1.0, 2.0, 3.0)] == "gate"


class TestVector3Operations:
    """Test Vector3 arithmetic operations."""

    def test_addition(self) -> None:
        """Test vector addition."""
        assert Vector3(1.0, 2.0, 3.0) + Vector3(4.0, 5.0, 6.0) == Vector3(5.0, 7.0, 9.0)

    def test_subtraction(self) -> None:
        """Test vector subtraction."""
        assert Vector3(5.0, 7.0, 9.0) - Vector3(1.0, 2.0, 3.0) == Vector3(4.0, 5.0, 6.0)

    def test_scalar_multiplication(self) -> None:
        """Test multiplication by a scalar on either side."""
        v = Vector3(1.0, -2.0, 3.0)
        assert v * 2.0 == Vector3(2.0, -4.0, 6.0)
        assert 2.0 * v == Vector3(2.0, -4.0, 6.0)

    def test_division(self) -> None:
        """Test division by a scalar."""
        assert Vector3(2.0, 4.0, 6.0) / 2.0 == Vector3(1.0, 2.0, 3.0)

    def test_division_by_zero(self) -> None:
        """Test division by zero raises."""
        with pytest.raises(ZeroDivisionError):
            Vector3(1.0, 1.0, 1.0) / 0.0

    def test_negation(self) -> None:
        """Test unary negation."""
        assert -Vector3(1.0, -2.0, 3.0) == Vector3(-1.0, 2.0, -3.0)


class TestVector3Distances:
    """Test magnitude and distance helpers."""

    def test_magnitude(self) -> None:
        """Test vector length."""
        assert Vector3(3.0, 4.0, 0.0).magnitude() == pytest.approx(5.0)
        assert Vector3(1.0, 2.0, 2.0).magnitude() == pytest.approx(3.0)

    def test_distance_includes_elevation(self) -> None:
        """Test 3D distance uses all components."""
        a = Vector3(0.0, 0.0, 0.0)
        b = Vector3(0.0, 3.0, 4.0)
        assert a.distance_to(b) == pytest.approx(5.0)

    def test_horizontal_distance_ignores_elevation(self) -> None:
        """Test horizontal distance ignores z."""
        a = Vector3(0.0, 0.0, 500.0)
        b = Vector3(3.0, 4.0, 0.0)
        assert a.horizontal_distance_to(b) == pytest.approx(5.0)

    def test_distance_is_symmetric(self) -> None:
        """Test distance is the same in both directions."""
        a = Vector3(-1336.0, -2434.0, 13.9)
        b = Vector3(-942.0, -2988.0, 13.9)
        assert a.distance_to(b) == pytest.approx(b.distance_to(a))


class TestVector3Heading:
    """Test compass heading offsets."""

    @pytest.mark.parametrize(
        "heading,expected",
        [
            (0.0, (0.0, 100.0)),
            (90.0, (100.0, 0.0)),
            (180.0, (0.0, -100.0)),
            (270.0, (-100.0, 0.0)),
        ],
    )
    def test_cardinal_headings(self, heading: float, expected: tuple[float, float]) -> None:
        """Test offsets along the cardinal headings."""
        v = Vector3.from_heading(heading, 100.0)
        assert v.x == pytest.approx(expected[0], abs=1e-9)
        assert v.y == pytest.approx(expected[1], abs=1e-9)
        assert v.z == 0.0

    def test_offset_length(self) -> None:
        """Test horizontal length equals the requested distance."""
        v = Vector3.from_heading(93.0, 800.0)
        assert math.hypot(v.x, v.y) == pytest.approx(800.0)

    def test_vertical_component(self) -> None:
        """Test the optional up component."""
        assert Vector3.from_heading(45.0, 10.0, up=7.0).z == 7.0


class TestVector3Interpolation:
    """Test linear interpolation."""

    def test_lerp_endpoints(self) -> None:
        """Test t=0 and t=1 return the endpoints."""
        a = Vector3(0.0, 0.0, 0.0)
        b = Vector3(10.0, 20.0, 30.0)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b

    def test_lerp_midpoint(self) -> None:
        """Test t=0.5 returns the midpoint."""
        a = Vector3(-100.0, 0.0, 0.0)
        b = Vector3(0.0, 0.0, 10.0)
        assert a.lerp(b, 0.5) == Vector3(-50.0, 0.0, 5.0)


class TestVector3Conversion:
    """Test numpy conversion and formatting."""

    def test_to_array(self) -> None:
        """Test conversion to numpy array."""
        arr = Vector3(1.0, 2.0, 3.0).to_array()
        assert isinstance(arr, np.ndarray)
        np.testing.assert_array_equal(arr, np.array([1.0, 2.0, 3.0]))

    def test_from_array(self) -> None:
        """Test creation from numpy array."""
        v = Vector3.from_array(np.array([4.0, 5.0, 6.0]))
        assert v == Vector3(4.0, 5.0, 6.0)
        assert isinstance(v.x, float)

    def test_str(self) -> None:
        """Test string formatting with one decimal."""
        assert str(Vector3(-1336.0, -2434.04, 13.9)) == "(-1336.0, -2434.0, 13.9)"
