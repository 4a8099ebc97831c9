"""Shared building blocks for the noise generators.

These are interpolation helpers, lattice hashing and gradient lookups. Hash
arithmetic wraps to signed 32 bits, so integer lattice coordinates must be
passed already multiplied by the matching prime and wrapped with
:func:`to_int32`.
"""

from __future__ import annotations

from simlab.noise_lookup import GRADIENTS_2D, GRADIENTS_3D, RAND_VECS_2D, RAND_VECS_3D

__all__ = [
    "PRIME_X",
    "PRIME_Y",
    "PRIME_Z",
    "to_int32",
    "fast_floor",
    "fast_round",
    "lerp",
    "interp_hermite",
    "interp_quintic",
    "cubic_lerp",
    "ping_pong",
    "hash2",
    "hash3",
    "val_coord2",
    "val_coord3",
    "grad_coord2",
    "grad_coord3",
    "grad_coord_out2",
    "grad_coord_out3",
    "grad_coord_dual2",
    "grad_coord_dual3",
]

PRIME_X = 501125321
PRIME_Y = 1136930381
PRIME_Z = 1720413743

_HASH_MULTIPLIER = 0x27D4EB2D
_INT_SCALE = 1 / 2147483648.0


def to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def fast_floor(f: float) -> int:
    """Floor for non-negative values; negative values always step down one."""
    return int(f) if f >= 0 else int(f) - 1


def fast_round(f: float) -> int:
    """Round half away from zero."""
    return int(f + 0.5) if f >= 0 else int(f - 0.5)


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def interp_hermite(t: float) -> float:
    return t * t * (3 - 2 * t)


def interp_quintic(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def cubic_lerp(a: float, b: float, c: float, d: float, t: float) -> float:
    """Cubic interpolation between ``b`` and ``c`` using ``a`` and ``d`` as outer points."""
    p = (d - c) - (a - b)
    return t * t * t * p + t * t * ((a - b) - p) + t * (c - a) + b


def ping_pong(t: float) -> float:
    """Triangle wave with period 2, rising from 0 to 1 then falling back."""
    t -= int(t * 0.5) * 2
    return t if t < 1 else 2 - t


def hash2(seed: int, x_primed: int, y_primed: int) -> int:
    return to_int32((seed ^ x_primed ^ y_primed) * _HASH_MULTIPLIER)


def hash3(seed: int, x_primed: int, y_primed: int, z_primed: int) -> int:
    return to_int32((seed ^ x_primed ^ y_primed ^ z_primed) * _HASH_MULTIPLIER)


def _hash_to_value(h: int) -> float:
    h = to_int32(h * h)
    h = to_int32(h ^ (h << 19))
    return h * _INT_SCALE


def val_coord2(seed: int, x_primed: int, y_primed: int) -> float:
    """Pseudo-random value in [-1, 1) for a 2D lattice point."""
    return _hash_to_value(hash2(seed, x_primed, y_primed))


def val_coord3(seed: int, x_primed: int, y_primed: int, z_primed: int) -> float:
    """Pseudo-random value in [-1, 1) for a 3D lattice point."""
    return _hash_to_value(hash3(seed, x_primed, y_primed, z_primed))


def grad_coord2(seed: int, x_primed: int, y_primed: int, xd: float, yd: float) -> float:
    """Dot product of the offset with the lattice point's 2D gradient."""
    h = hash2(seed, x_primed, y_primed)
    h ^= h >> 15
    h &= 127 << 1
    return xd * GRADIENTS_2D[h] + yd * GRADIENTS_2D[h | 1]


def grad_coord3(
    seed: int,
    x_primed: int,
    y_primed: int,
    z_primed: int,
    xd: float,
    yd: float,
    zd: float,
) -> float:
    """Dot product of the offset with the lattice point's 3D gradient."""
    h = hash3(seed, x_primed, y_primed, z_primed)
    h ^= h >> 15
    h &= 63 << 2
    return xd * GRADIENTS_3D[h] + yd * GRADIENTS_3D[h | 1] + zd * GRADIENTS_3D[h | 2]


def grad_coord_out2(seed: int, x_primed: int, y_primed: int) -> tuple[float, float]:
    """The lattice point's random 2D unit vector."""
    h = hash2(seed, x_primed, y_primed) & (255 << 1)
    return RAND_VECS_2D[h], RAND_VECS_2D[h | 1]


def grad_coord_out3(
    seed: int, x_primed: int, y_primed: int, z_primed: int
) -> tuple[float, float, float]:
    """The lattice point's random 3D unit vector."""
    h = hash3(seed, x_primed, y_primed, z_primed) & (255 << 2)
    return RAND_VECS_3D[h], RAND_VECS_3D[h | 1], RAND_VECS_3D[h | 2]


def grad_coord_dual2(
    seed: int, x_primed: int, y_primed: int, xd: float, yd: float
) -> tuple[float, float]:
    """A random 2D direction scaled by the gradient dot product."""
    h = hash2(seed, x_primed, y_primed)
    index1 = h & (127 << 1)
    index2 = (h >> 7) & (255 << 1)
    value = xd * GRADIENTS_2D[index1] + yd * GRADIENTS_2D[index1 | 1]
    return value * RAND_VECS_2D[index2], value * RAND_VECS_2D[index2 | 1]


def grad_coord_dual3(
    seed: int,
    x_primed: int,
    y_primed: int,
    z_primed: int,
    xd: float,
    yd: float,
    zd: float,
) -> tuple[float, float, float]:
    """A random 3D direction scaled by the gradient dot product."""
    h = hash3(seed, x_primed, y_primed, z_primed)
    index1 = h & (63 << 2)
    index2 = (h >> 6) & (255 << 2)
    value = (
        xd * GRADIENTS_3D[index1]
        + yd * GRADIENTS_3D[index1 | 1]
        + zd * GRADIENTS_3D[index1 | 2]
    )
    return (
        value * RAND_VECS_3D[index2],
        value * RAND_VECS_3D[index2 | 1],
        value * RAND_VECS_3D[index2 | 2],
    )