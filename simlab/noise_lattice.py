"""Lattice-based noise: cellular (Worley), Perlin, cubic value and value noise.

Coordinates are taken as already scaled by the noise frequency. Results lie
roughly in [-1, 1].
"""

from __future__ import annotations

import math
from enum import IntEnum

from simlab.noise_basis import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    cubic_lerp,
    fast_floor,
    fast_round,
    grad_coord2,
    grad_coord3,
    hash2,
    hash3,
    interp_hermite,
    interp_quintic,
    lerp,
    to_int32,
    val_coord2,
    val_coord3,
)
from simlab.noise_lookup import RAND_VECS_2D, RAND_VECS_3D

__all__ = [
    "CellularDistanceFunction",
    "CellularReturnType",
    "cellular2",
    "cellular3",
    "perlin2",
    "perlin3",
    "value_cubic2",
    "value_cubic3",
    "value2",
    "value3",
]

_INT_SCALE = 1 / 2147483648.0
_JITTER_2D = 0.43701595
_JITTER_3D = 0.39614353


class CellularDistanceFunction(IntEnum):
    """How the distance to a cell's feature point is measured."""

    EUCLIDEAN = 0
    EUCLIDEAN_SQ = 1
    MANHATTAN = 2
    HYBRID = 3


class CellularReturnType(IntEnum):
    """Which quantity cellular noise reports."""

    CELL_VALUE = 0
    DISTANCE = 1
    DISTANCE2 = 2
    DISTANCE2_ADD = 3
    DISTANCE2_SUB = 4
    DISTANCE2_MUL = 5
    DISTANCE2_DIV = 6


def _measure(distance_function: CellularDistanceFunction, components: tuple[float, ...]) -> float:
    if distance_function is CellularDistanceFunction.MANHATTAN:
        return sum(abs(c) for c in components)
    squared = sum(c * c for c in components)
    if distance_function is CellularDistanceFunction.HYBRID:
        return sum(abs(c) for c in components) + squared
    return squared


def _cellular_result(
    distance0: float,
    distance1: float,
    closest_hash: int,
    distance_function: CellularDistanceFunction,
    return_type: CellularReturnType,
) -> float:
    if (
        distance_function is CellularDistanceFunction.EUCLIDEAN
        and return_type >= CellularReturnType.DISTANCE
    ):
        distance0 = math.sqrt(distance0)
        if return_type >= CellularReturnType.DISTANCE2:
            distance1 = math.sqrt(distance1)

    if return_type is CellularReturnType.CELL_VALUE:
        return closest_hash * _INT_SCALE
    if return_type is CellularReturnType.DISTANCE:
        return distance0 - 1
    if return_type is CellularReturnType.DISTANCE2:
        return distance1 - 1
    if return_type is CellularReturnType.DISTANCE2_ADD:
        return (distance1 + distance0) * 0.5 - 1
    if return_type is CellularReturnType.DISTANCE2_SUB:
        return distance1 - distance0 - 1
    if return_type is CellularReturnType.DISTANCE2_MUL:
        return distance1 * distance0 * 0.5 - 1
    return distance0 / distance1 - 1


def cellular2(
    seed: int,
    x: float,
    y: float,
    distance_function: CellularDistanceFunction = CellularDistanceFunction.EUCLIDEAN_SQ,
    return_type: CellularReturnType = CellularReturnType.DISTANCE,
    jitter: float = 1.0,
) -> float:
    """2D cellular noise over the 3x3 block of cells around the point."""
    distance_function = CellularDistanceFunction(distance_function)
    return_type = CellularReturnType(return_type)
    xr = fast_round(x)
    yr = fast_round(y)

    distance0 = 1e10
    distance1 = 1e10
    closest_hash = 0
    cell_jitter = _JITTER_2D * jitter

    for xi in range(xr - 1, xr + 2):
        x_primed = to_int32(xi * PRIME_X)
        for yi in range(yr - 1, yr + 2):
            y_primed = to_int32(yi * PRIME_Y)
            h = hash2(seed, x_primed, y_primed)
            idx = h & (255 << 1)
            vec_x = (xi - x) + RAND_VECS_2D[idx] * cell_jitter
            vec_y = (yi - y) + RAND_VECS_2D[idx | 1] * cell_jitter
            new_distance = _measure(distance_function, (vec_x, vec_y))
            distance1 = max(min(distance1, new_distance), distance0)
            if new_distance < distance0:
                distance0 = new_distance
                closest_hash = h

    return _cellular_result(distance0, distance1, closest_hash, distance_function, return_type)


def cellular3(
    seed: int,
    x: float,
    y: float,
    z: float,
    distance_function: CellularDistanceFunction = CellularDistanceFunction.EUCLIDEAN_SQ,
    return_type: CellularReturnType = CellularReturnType.DISTANCE,
    jitter: float = 1.0,
) -> float:
    """3D cellular noise over the 3x3x3 block of cells around the point."""
    distance_function = CellularDistanceFunction(distance_function)
    return_type = CellularReturnType(return_type)
    xr = fast_round(x)
    yr = fast_round(y)
    zr = fast_round(z)

    distance0 = 1e10
    distance1 = 1e10
    closest_hash = 0
    cell_jitter = _JITTER_3D * jitter

    for xi in range(xr - 1, xr + 2):
        x_primed = to_int32(xi * PRIME_X)
        for yi in range(yr - 1, yr + 2):
            y_primed = to_int32(yi * PRIME_Y)
            for zi in range(zr - 1, zr + 2):
                z_primed = to_int32(zi * PRIME_Z)
                h = hash3(seed, x_primed, y_primed, z_primed)
                idx = h & (255 << 2)
                vec_x = (xi - x) + RAND_VECS_3D[idx] * cell_jitter
                vec_y = (yi - y) + RAND_VECS_3D[idx | 1] * cell_jitter
                vec_z = (zi - z) + RAND_VECS_3D[idx | 2] * cell_jitter
                new_distance = _measure(distance_function, (vec_x, vec_y, vec_z))
                distance1 = max(min(distance1, new_distance), distance0)
                if new_distance < distance0:
                    distance0 = new_distance
                    closest_hash = h

    return _cellular_result(distance0, distance1, closest_hash, distance_function, return_type)


def perlin2(seed: int, x: float, y: float) -> float:
    """2D Perlin gradient noise."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)

    xd0 = x - x0
    yd0 = y - y0
    xd1 = xd0 - 1
    yd1 = yd0 - 1

    xs = interp_quintic(xd0)
    ys = interp_quintic(yd0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)

    xf0 = lerp(grad_coord2(seed, x0, y0, xd0, yd0), grad_coord2(seed, x1, y0, xd1, yd0), xs)
    xf1 = lerp(grad_coord2(seed, x0, y1, xd0, yd1), grad_coord2(seed, x1, y1, xd1, yd1), xs)

    return lerp(xf0, xf1, ys) * 1.4247691104677813


def perlin3(seed: int, x: float, y: float, z: float) -> float:
    """3D Perlin gradient noise."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)

    xd0 = x - x0
    yd0 = y - y0
    zd0 = z - z0
    xd1 = xd0 - 1
    yd1 = yd0 - 1
    zd1 = zd0 - 1

    xs = interp_quintic(xd0)
    ys = interp_quintic(yd0)
    zs = interp_quintic(zd0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    z0 = to_int32(z0 * PRIME_Z)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)
    z1 = to_int32(z0 + PRIME_Z)

    def along_x(yp: int, zp: int, yd: float, zd: float) -> float:
        return lerp(
            grad_coord3(seed, x0, yp, zp, xd0, yd, zd),
            grad_coord3(seed, x1, yp, zp, xd1, yd, zd),
            xs,
        )

    xf00 = along_x(y0, z0, yd0, zd0)
    xf10 = along_x(y1, z0, yd1, zd0)
    xf01 = along_x(y0, z1, yd0, zd1)
    xf11 = along_x(y1, z1, yd1, zd1)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)

    return lerp(yf0, yf1, zs) * 0.964921414852142333984375


def _cubic_axis(base: int, prime: int) -> tuple[int, int, int, int]:
    p1 = to_int32(base * prime)
    return (
        to_int32(p1 - prime),
        p1,
        to_int32(p1 + prime),
        to_int32(p1 + (prime << 1)),
    )


def value_cubic2(seed: int, x: float, y: float) -> float:
    """2D value noise with cubic interpolation over a 4x4 neighbourhood."""
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    xs = x - x1
    ys = y - y1

    xp = _cubic_axis(x1, PRIME_X)
    yp = _cubic_axis(y1, PRIME_Y)

    rows = [cubic_lerp(*(val_coord2(seed, px, py) for px in xp), xs) for py in yp]
    return cubic_lerp(*rows, ys) * (1 / (1.5 * 1.5))


def value_cubic3(seed: int, x: float, y: float, z: float) -> float:
    """3D value noise with cubic interpolation over a 4x4x4 neighbourhood."""
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    z1 = fast_floor(z)
    xs = x - x1
    ys = y - y1
    zs = z - z1

    xp = _cubic_axis(x1, PRIME_X)
    yp = _cubic_axis(y1, PRIME_Y)
    zp = _cubic_axis(z1, PRIME_Z)

    planes = [
        cubic_lerp(
            *(
                cubic_lerp(*(val_coord3(seed, px, py, pz) for px in xp), xs)
                for py in yp
            ),
            ys,
        )
        for pz in zp
    ]
    return cubic_lerp(*planes, zs) * (1 / (1.5 * 1.5 * 1.5))


def value2(seed: int, x: float, y: float) -> float:
    """2D value noise with Hermite interpolation."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)

    xs = interp_hermite(x - x0)
    ys = interp_hermite(y - y0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)

    xf0 = lerp(val_coord2(seed, x0, y0), val_coord2(seed, x1, y0), xs)
    xf1 = lerp(val_coord2(seed, x0, y1), val_coord2(seed, x1, y1), xs)

    return lerp(xf0, xf1, ys)


def value3(seed: int, x: float, y: float, z: float) -> float:
    """3D value noise with Hermite interpolation."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)

    xs = interp_hermite(x - x0)
    ys = interp_hermite(y - y0)
    zs = interp_hermite(z - z0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    z0 = to_int32(z0 * PRIME_Z)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)
    z1 = to_int32(z0 + PRIME_Z)

    xf00 = lerp(val_coord3(seed, x0, y0, z0), val_coord3(seed, x1, y0, z0), xs)
    xf10 = lerp(val_coord3(seed, x0, y1, z0), val_coord3(seed, x1, y1, z0), xs)
    xf01 = lerp(val_coord3(seed, x0, y0, z1), val_coord3(seed, x1, y0, z1), xs)
    xf11 = lerp(val_coord3(seed, x0, y1, z1), val_coord3(seed, x1, y1, z1), xs)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)

    return lerp(yf0, yf1, zs)