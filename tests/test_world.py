"""
Unit tests for world volume construction
"""

import math

import pytest

from ssd_geometry import (
    CartesianBox,
    CoordinateSystem,
    Interval,
    MissingConfigFieldError,
    Tube,
    UnsupportedCoordinateSystemError,
    construct_periodicity,
    construct_world,
    resolve_units,
)


def cylindrical_grid(r=50.0, z_from=-10.0, z_to=60.0):
    return {
        "coordinates": "Cylindrical",
        "dimensions": {"r": r, "z": {"from": z_from, "to": z_to}},
        "symmetries": {"periodic": {"phi": 360.0}},
    }


class TestCylindricalWorld:
    """Full-revolution tube worlds"""

    def test_dimensions_in_metres(self):
        """World dimensions in metres"""
        cs, world = construct_world(cylindrical_grid(), resolve_units({"length": "mm"}))
        assert cs is CoordinateSystem.CYLINDRICAL
        assert isinstance(world, Tube)
        assert world.r == Interval(0.0, 0.05)
        assert world.z == Interval(-0.01, 0.06)
        assert world.phi.left == 0.0
        assert world.full_revolution

    def test_same_world_in_other_length_unit(self):
        """Same world in cm"""
        _, world_mm = construct_world(cylindrical_grid(), resolve_units({"length": "mm"}))
        _, world_cm = construct_world(cylindrical_grid(5.0, -1.0, 6.0), resolve_units({"length": "cm"}))
        assert world_mm == world_cm

    @pytest.mark.parametrize("angle", ["rad", "deg"])
    def test_full_revolution_independent_of_angle_unit(self, angle):
        """World phi is 2π for any angle unit"""
        _, world = construct_world(cylindrical_grid(), resolve_units({"angle": angle}))
        assert world.phi.right == pytest.approx(2.0 * math.pi)

    def test_missing_radius(self):
        """Missing radius reports its path"""
        grid = cylindrical_grid()
        del grid["dimensions"]["r"]
        with pytest.raises(MissingConfigFieldError) as excinfo:
            construct_world(grid, resolve_units({}))
        assert excinfo.value.path == "world.grid.dimensions.r"


class TestCartesianWorld:
    """Axis-aligned box worlds"""

    def test_box_world(self):
        """Cartesian world box"""
        grid = {
            "coordinates": "Cartesian",
            "dimensions": {
                "x": {"from": -20, "to": 20},
                "y": {"from": -10, "to": 10},
                "z": {"from": 0, "to": 5},
            },
        }
        cs, world = construct_world(grid, resolve_units({"length": "cm"}))
        assert cs is CoordinateSystem.CARTESIAN
        assert isinstance(world, CartesianBox)
        assert world.x == Interval(-0.2, 0.2)
        assert world.y == Interval(-0.1, 0.1)
        assert world.z == Interval(0.0, 0.05)


class TestGridErrors:
    """Invalid grid sections"""

    @pytest.mark.parametrize("tag", ["Spherical", "cylindrical", None, 3])
    def test_unsupported_coordinates(self, tag):
        """Unsupported coordinate tags fail"""
        grid = cylindrical_grid()
        grid["coordinates"] = tag
        with pytest.raises(UnsupportedCoordinateSystemError):
            construct_world(grid, resolve_units({}))

    def test_missing_dimensions(self):
        """Missing dimensions report their path"""
        with pytest.raises(MissingConfigFieldError) as excinfo:
            construct_world({"coordinates": "Cylindrical"}, resolve_units({}))
        assert excinfo.value.path == "world.grid.dimensions"


class TestPeriodicity:
    """Periodic azimuthal span"""

    def test_degrees_to_radians(self):
        """Periodicity converted to radians"""
        cyclic = construct_periodicity(cylindrical_grid(), resolve_units({"angle": "deg"}))
        assert cyclic == pytest.approx(2.0 * math.pi)

    def test_missing_symmetries(self):
        """Missing periodicity reports its path"""
        grid = cylindrical_grid()
        del grid["symmetries"]["periodic"]
        with pytest.raises(MissingConfigFieldError) as excinfo:
            construct_periodicity(grid, resolve_units({}))
        assert excinfo.value.path == "world.grid.symmetries.periodic"
