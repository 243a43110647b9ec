"""2D/3D point and orientation sampling.

Vectors and quaternions are jax.numpy float32 arrays; quaternions are
ordered (x, y, z, w).
"""

from tinymt_rng.geometry.rotation import FORWARD, rotate_vector
from tinymt_rng.geometry.samplers import (
    in_unit_circle,
    in_unit_cube,
    in_unit_sphere,
    in_unit_square,
    on_unit_circle,
    on_unit_cube,
    on_unit_sphere,
    on_unit_square,
    random_quaternion,
    sample_batch,
)

__all__ = [
    "FORWARD",
    "rotate_vector",
    "on_unit_circle",
    "in_unit_circle",
    "in_unit_square",
    "on_unit_square",
    "in_unit_sphere",
    "on_unit_sphere",
    "in_unit_cube",
    "on_unit_cube",
    "random_quaternion",
    "sample_batch",
]
