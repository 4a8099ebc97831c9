import math

import pytest

from simlab.noise_basis import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    cubic_lerp,
    fast_floor,
    fast_round,
    grad_coord2,
    grad_coord3,
    grad_coord_dual2,
    grad_coord_dual3,
    grad_coord_out2,
    grad_coord_out3,
    hash2,
    hash3,
    interp_hermite,
    interp_quintic,
    lerp,
    ping_pong,
    to_int32,
    val_coord2,
    val_coord3,
)
from simlab.noise_lookup import RAND_VECS_2D, RAND_VECS_3D

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

LATTICE = [
    (1337, 0, 0, 0),
    (1337, PRIME_X, PRIME_Y, PRIME_Z),
    (-5, to_int32(-3 * PRIME_X), to_int32(7 * PRIME_Y), to_int32(11 * PRIME_Z)),
    (42, to_int32(100 * PRIME_X), to_int32(-100 * PRIME_Y), to_int32(-9 * PRIME_Z)),
]


def test_to_int32_wraps():
    assert to_int32(2**31) == INT32_MIN
    assert to_int32(2**32 + 5) == 5
    assert to_int32(-1) == -1


@pytest.mark.parametrize(
    "value, expected", [(1.5, 1), (0.0, 0), (-1.5, -2), (-2.0, -3), (3.0, 3)]
)
def test_fast_floor(value, expected):
    assert fast_floor(value) == expected


@pytest.mark.parametrize("value, expected", [(2.5, 3), (-2.5, -3), (2.4, 2), (-2.4, -2)])
def test_fast_round(value, expected):
    assert fast_round(value) == expected


def test_lerp_endpoints():
    assert lerp(3.0, 7.0, 0.0) == 3.0
    assert lerp(3.0, 7.0, 1.0) == 7.0


@pytest.mark.parametrize("t", [0.0, 0.1, 0.3, 0.5, 0.9])
def test_interpolants_are_symmetric(t):
    assert math.isclose(interp_hermite(t) + interp_hermite(1 - t), 1.0)
    assert math.isclose(interp_quintic(t) + interp_quintic(1 - t), 1.0)


def test_interpolants_endpoints():
    assert interp_hermite(0.0) == 0.0
    assert interp_hermite(1.0) == 1.0
    assert interp_quintic(0.0) == 0.0
    assert interp_quintic(1.0) == 1.0


def test_cubic_lerp_passes_through_inner_points():
    assert math.isclose(cubic_lerp(0.2, -0.4, 0.9, 0.1, 0.0), -0.4)
    assert math.isclose(cubic_lerp(0.2, -0.4, 0.9, 0.1, 1.0), 0.9)


@pytest.mark.parametrize("t", [0.0, 0.25, 0.75, 0.99])
def test_ping_pong_shape(t):
    assert ping_pong(t) == pytest.approx(t)
    assert ping_pong(2 - t) == pytest.approx(t) if t > 0 else True
    assert ping_pong(t + 2) == pytest.approx(ping_pong(t))
    assert 0.0 <= ping_pong(t + 4.3) <= 1.0


def test_hash_uses_source_multiplier():
    assert hash2(0, 0, 0) == 0
    assert hash2(1, 0, 0) == 0x27D4EB2D
    assert hash3(0, 1, 0, 0) == 0x27D4EB2D


@pytest.mark.parametrize("seed, x, y, z", LATTICE)
def test_hash_properties(seed, x, y, z):
    h = hash2(seed, x, y)
    assert INT32_MIN <= h <= INT32_MAX
    assert hash2(seed, x, y) == hash2(seed, y, x)
    assert hash3(seed, x, y, 0) == h
    assert INT32_MIN <= hash3(seed, x, y, z) <= INT32_MAX


@pytest.mark.parametrize("seed, x, y, z", LATTICE)
def test_val_coord_range(seed, x, y, z):
    assert -1.0 <= val_coord2(seed, x, y) < 1.0
    assert -1.0 <= val_coord3(seed, x, y, z) < 1.0


def test_val_coord_of_zero_hash():
    assert val_coord2(0, 0, 0) == 0.0
    assert val_coord3(0, 0, 0, 0) == 0.0


@pytest.mark.parametrize("seed, x, y, z", LATTICE)
def test_grad_coord_linear_and_bounded(seed, x, y, z):
    assert grad_coord2(seed, x, y, 0.0, 0.0) == 0.0
    g = grad_coord2(seed, x, y, 0.3, -0.4)
    assert grad_coord2(seed, x, y, 0.6, -0.8) == pytest.approx(2 * g)
    assert abs(g) <= 0.5 + 1e-9
    assert grad_coord3(seed, x, y, z, 0.0, 0.0, 0.0) == 0.0
    g3 = grad_coord3(seed, x, y, z, 0.1, 0.2, -0.3)
    assert grad_coord3(seed, x, y, z, -0.1, -0.2, 0.3) == pytest.approx(-g3)
    assert abs(g3) <= math.sqrt(2) * math.sqrt(0.14) + 1e-9


@pytest.mark.parametrize("seed, x, y, z", LATTICE)
def test_grad_coord_out_comes_from_tables(seed, x, y, z):
    xo, yo = grad_coord_out2(seed, x, y)
    pairs = {(RAND_VECS_2D[i], RAND_VECS_2D[i + 1]) for i in range(0, len(RAND_VECS_2D), 2)}
    assert (xo, yo) in pairs
    assert math.hypot(xo, yo) == pytest.approx(1.0, abs=1e-6)
    vec = grad_coord_out3(seed, x, y, z)
    triples = {tuple(RAND_VECS_3D[i : i + 3]) for i in range(0, len(RAND_VECS_3D), 4)}
    assert vec in triples
    assert math.sqrt(sum(c * c for c in vec)) == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("seed, x, y, z", LATTICE)
def test_grad_coord_dual(seed, x, y, z):
    assert grad_coord_dual2(seed, x, y, 0.0, 0.0) == (0.0, 0.0)
    xo, yo = grad_coord_dual2(seed, x, y, 0.3, -0.4)
    assert math.hypot(xo, yo) <= 0.5 + 1e-6
    x2, y2 = grad_coord_dual2(seed, x, y, 0.6, -0.8)
    assert (x2, y2) == pytest.approx((2 * xo, 2 * yo))
    assert grad_coord_dual3(seed, x, y, z, 0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    v = grad_coord_dual3(seed, x, y, z, 0.1, 0.2, -0.3)
    w = grad_coord_dual3(seed, x, y, z, -0.1, -0.2, 0.3)
    assert w == pytest.approx(tuple(-c for c in v))