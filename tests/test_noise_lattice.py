import itertools

import pytest

from simlab.noise_basis import PRIME_X, PRIME_Y, PRIME_Z, to_int32, val_coord2, val_coord3
from simlab.noise_lattice import (
    CellularDistanceFunction,
    CellularReturnType,
    cellular2,
    cellular3,
    perlin2,
    perlin3,
    value2,
    value3,
    value_cubic2,
    value_cubic3,
)

SEED = 1337
POINTS_2D = [(0.3, 0.7), (-4.25, 2.5), (10.1, -3.9), (123.456, 78.9)]
POINTS_3D = [(0.3, 0.7, 0.1), (-4.25, 2.5, 7.75), (10.1, -3.9, -0.6)]


def test_perlin_is_zero_on_lattice_points():
    assert perlin2(SEED, 3.0, -2.0) == pytest.approx(0.0, abs=1e-12)
    assert perlin3(SEED, 3.0, -2.0, 5.0) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("x, y", POINTS_2D)
def test_perlin2_bounded_and_deterministic(x, y):
    first = perlin2(SEED, x, y)
    assert -1.5 <= first <= 1.5
    assert perlin2(SEED, x, y) == first


@pytest.mark.parametrize("x, y, z", POINTS_3D)
def test_perlin3_bounded(x, y, z):
    assert -1.5 <= perlin3(SEED, x, y, z) <= 1.5


def test_value2_matches_lattice_value_on_integer_points():
    expected = val_coord2(SEED, to_int32(4 * PRIME_X), to_int32(-7 * PRIME_Y))
    assert value2(SEED, 4.0, -7.0) == pytest.approx(expected)


def test_value3_matches_lattice_value_on_integer_points():
    expected = val_coord3(
        SEED, to_int32(2 * PRIME_X), to_int32(3 * PRIME_Y), to_int32(-1 * PRIME_Z)
    )
    assert value3(SEED, 2.0, 3.0, -1.0) == pytest.approx(expected)


def test_value_cubic2_on_integer_points_is_scaled_lattice_value():
    expected = val_coord2(SEED, to_int32(5 * PRIME_X), to_int32(1 * PRIME_Y))
    assert value_cubic2(SEED, 5.0, 1.0) == pytest.approx(expected * (1 / (1.5 * 1.5)))


def test_value_cubic3_on_integer_points_is_scaled_lattice_value():
    expected = val_coord3(
        SEED, to_int32(5 * PRIME_X), to_int32(1 * PRIME_Y), to_int32(2 * PRIME_Z)
    )
    assert value_cubic3(SEED, 5.0, 1.0, 2.0) == pytest.approx(
        expected * (1 / (1.5 * 1.5 * 1.5))
    )


@pytest.mark.parametrize("x, y", POINTS_2D)
def test_value_noise_2d_within_unit_range(x, y):
    assert -1.0 <= value2(SEED, x, y) <= 1.0
    assert -1.0 <= value_cubic2(SEED, x, y) <= 1.0


@pytest.mark.parametrize("x, y, z", POINTS_3D)
def test_value_noise_3d_within_unit_range(x, y, z):
    assert -1.0 <= value3(SEED, x, y, z) <= 1.0
    assert -1.0 <= value_cubic3(SEED, x, y, z) <= 1.0


def test_value2_stays_between_corner_values():
    corners = [
        val_coord2(SEED, to_int32(cx * PRIME_X), to_int32(cy * PRIME_Y))
        for cx, cy in itertools.product((0, 1), (0, 1))
    ]
    v = value2(SEED, 0.4, 0.6)
    assert min(corners) - 1e-12 <= v <= max(corners) + 1e-12


def test_cellular_without_jitter_at_cell_centre():
    assert cellular2(SEED, 2.0, 3.0, jitter=0.0) == pytest.approx(-1.0)
    assert cellular3(SEED, 2.0, 3.0, -4.0, jitter=0.0) == pytest.approx(-1.0)
    second = cellular2(
        SEED, 2.0, 3.0, return_type=CellularReturnType.DISTANCE2, jitter=0.0
    )
    assert second == pytest.approx(0.0)


@pytest.mark.parametrize("x, y", POINTS_2D)
@pytest.mark.parametrize("df", list(CellularDistanceFunction))
def test_cellular2_second_distance_not_smaller(x, y, df):
    d0 = cellular2(SEED, x, y, df, CellularReturnType.DISTANCE)
    d1 = cellular2(SEED, x, y, df, CellularReturnType.DISTANCE2)
    assert d0 >= -1.0
    assert d1 >= d0
    assert cellular2(SEED, x, y, df, CellularReturnType.DISTANCE2_SUB) >= -1.0


@pytest.mark.parametrize("x, y, z", POINTS_3D)
@pytest.mark.parametrize("df", list(CellularDistanceFunction))
def test_cellular3_second_distance_not_smaller(x, y, z, df):
    d0 = cellular3(SEED, x, y, z, df, CellularReturnType.DISTANCE)
    d1 = cellular3(SEED, x, y, z, df, CellularReturnType.DISTANCE2)
    assert d0 >= -1.0
    assert d1 >= d0


@pytest.mark.parametrize("x, y", POINTS_2D)
def test_cellular_euclidean_is_root_of_squared(x, y):
    sq = cellular2(SEED, x, y, CellularDistanceFunction.EUCLIDEAN_SQ)
    root = cellular2(SEED, x, y, CellularDistanceFunction.EUCLIDEAN)
    assert (root + 1) ** 2 == pytest.approx(sq + 1)


@pytest.mark.parametrize("x, y", POINTS_2D)
def test_cellular_combined_return_types_are_consistent(x, y):
    df = CellularDistanceFunction.EUCLIDEAN
    d0 = cellular2(SEED, x, y, df, CellularReturnType.DISTANCE) + 1
    d1 = cellular2(SEED, x, y, df, CellularReturnType.DISTANCE2) + 1
    add = cellular2(SEED, x, y, df, CellularReturnType.DISTANCE2_ADD)
    mul = cellular2(SEED, x, y, df, CellularReturnType.DISTANCE2_MUL)
    div = cellular2(SEED, x, y, df, CellularReturnType.DISTANCE2_DIV)
    assert add == pytest.approx((d0 + d1) * 0.5 - 1)
    assert mul == pytest.approx(d0 * d1 * 0.5 - 1)
    assert div == pytest.approx(d0 / d1 - 1)


@pytest.mark.parametrize("x, y", POINTS_2D)
def test_cellular_cell_value_in_range(x, y):
    v = cellular2(SEED, x, y, return_type=CellularReturnType.CELL_VALUE)
    assert -1.0 <= v < 1.0


def test_cellular_cell_value_constant_near_feature_point():
    a = cellular2(SEED, 4.0, 4.0, return_type=CellularReturnType.CELL_VALUE, jitter=0.0)
    b = cellular2(SEED, 4.05, 3.95, return_type=CellularReturnType.CELL_VALUE, jitter=0.0)
    assert a == b


def test_cellular_rejects_unknown_distance_function():
    with pytest.raises(ValueError):
        cellular2(SEED, 0.5, 0.5, 7, CellularReturnType.DISTANCE)


def test_cellular_rejects_unknown_return_type():
    with pytest.raises(ValueError):
        cellular3(SEED, 0.5, 0.5, 0.5, CellularDistanceFunction.EUCLIDEAN, 42)