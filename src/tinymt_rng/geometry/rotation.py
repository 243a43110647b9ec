"""Quaternion rotation of 3D vectors.

Quaternions are float32 arrays ordered ``(x, y, z, w)``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

FORWARD = jnp.array([0.0, 0.0, 1.0], dtype=jnp.float32)


def rotate_vector(quaternion: Array, vector: Array) -> Array:
    """Rotate ``vector`` by the unit ``quaternion``.

    Uses v' = v + w t + q_xyz × t with t = 2 (q_xyz × v), which is
    q v q* expanded without building the conjugate.

    Args:
        quaternion: Unit quaternion ``(x, y, z, w)``, shape (4,).
        vector: 3D vector, shape (3,).

    Returns:
        Rotated vector, shape (3,).

    Examples:
        >>> import jax.numpy as jnp
        >>> quarter_turn_y = jnp.array([0.0, 0.70710677, 0.0, 0.70710677])
        >>> v = rotate_vector(quarter_turn_y, FORWARD)
        >>> bool(jnp.allclose(v, jnp.array([1.0, 0.0, 0.0]), atol=1e-6))
        True

    """
    axis = quaternion[:3]
    t = 2.0 * jnp.cross(axis, vector)
    return vector + quaternion[3] * t + jnp.cross(axis, t)
