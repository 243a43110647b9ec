"""Point and orientation sampling in 2D and 3D.

All samplers return float32 arrays and draw their coordinates in axis
order (x, then y, then z), so a given seed always lands on the same
points.

The rejection samplers (``in_unit_circle``, ``in_unit_sphere``) redraw
until a point falls inside the unit ball. They take about 1.27 (2D) and
1.91 (3D) attempts on average, but never return when fed a source that
keeps producing the same word. Do not use them with constant test
doubles.

References:
    - J. Kuffner, "Effective Sampling and Distance Metrics for 3D Rigid
      Body Path Planning", ICRA 2004 (uniform quaternions)
    - K. Shoemake, "Uniform Random Rotations", Graphics Gems III, 1992

"""

from __future__ import annotations

import math
from collections.abc import Callable

import jax.numpy as jnp
from jax import Array

from tinymt_rng.distributions import switch
from tinymt_rng.engine import EntropySource
from tinymt_rng.exceptions import InvalidArgumentError
from tinymt_rng.geometry.rotation import FORWARD, rotate_vector
from tinymt_rng.scalars import float01, float_range

TWO_PI = 2.0 * math.pi

SQUARE_EDGES = (1, 1, 1, 1)
CUBE_FACES = (1, 1, 1, 1, 1, 1)


def _vector(*components: float) -> Array:
    return jnp.array(components, dtype=jnp.float32)


def on_unit_circle(source: EntropySource) -> Array:
    """Point on the unit circle, as ``(sin a, cos a)`` for a uniform angle.

    Args:
        source: Entropy source (advanced once).

    Returns:
        Array of shape (2,) with magnitude 1.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> on_unit_circle(TinyMT32(0)).shape
        (2,)

    """
    angle = float01(source) * TWO_PI
    return _vector(math.sin(angle), math.cos(angle))


def in_unit_circle(source: EntropySource) -> Array:
    """Point inside the unit disc, by rejection from [-1, 1]².

    Args:
        source: Entropy source (advanced twice per attempt).

    Returns:
        Array of shape (2,) with squared magnitude <= 1.

    Examples:
        >>> import jax.numpy as jnp
        >>> from tinymt_rng.engine import TinyMT32
        >>> point = in_unit_circle(TinyMT32(0))
        >>> float(jnp.dot(point, point)) <= 1.0
        True

    """
    while True:
        point = _vector(float_range(source, -1.0, 1.0), float_range(source, -1.0, 1.0))
        if float(jnp.dot(point, point)) <= 1.0:
            return point


def in_unit_square(source: EntropySource) -> Array:
    """Point in [0, 1)², one independent draw per axis.

    Args:
        source: Entropy source (advanced twice).

    Returns:
        Array of shape (2,) with both coordinates in [0, 1).

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> in_unit_square(TinyMT32(0)).shape
        (2,)

    """
    return _vector(float01(source), float01(source))


def on_unit_square(source: EntropySource) -> Array:
    """Point on the boundary of the unit square, edges equally likely.

    The edge is picked first (one draw), then the free coordinate.

    Args:
        source: Entropy source (advanced twice).

    Returns:
        Array of shape (2,); one coordinate is exactly 0 or 1.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> any(c in (0.0, 1.0) for c in on_unit_square(TinyMT32(0)).tolist())
        True

    """
    match switch(source, SQUARE_EDGES):
        case 0:
            return _vector(0.0, float01(source))
        case 1:
            return _vector(1.0, float01(source))
        case 2:
            return _vector(float01(source), 0.0)
        case _:
            return _vector(float01(source), 1.0)


def in_unit_sphere(source: EntropySource) -> Array:
    """Point inside the unit ball, by rejection from [-1, 1]³.

    Args:
        source: Entropy source (advanced three times per attempt).

    Returns:
        Array of shape (3,) with squared magnitude <= 1.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> in_unit_sphere(TinyMT32(0)).shape
        (3,)

    """
    while True:
        point = _vector(
            float_range(source, -1.0, 1.0),
            float_range(source, -1.0, 1.0),
            float_range(source, -1.0, 1.0),
        )
        if float(jnp.dot(point, point)) <= 1.0:
            return point


def on_unit_sphere(source: EntropySource) -> Array:
    """Point on the unit sphere: the forward axis under a random rotation.

    Consumes the three draws of ``random_quaternion``.

    Args:
        source: Entropy source (advanced three times).

    Returns:
        Array of shape (3,) with magnitude 1.

    Examples:
        >>> import jax.numpy as jnp
        >>> from tinymt_rng.engine import TinyMT32
        >>> abs(float(jnp.linalg.norm(on_unit_sphere(TinyMT32(0)))) - 1.0) < 1e-5
        True

    """
    return rotate_vector(random_quaternion(source), FORWARD)


def in_unit_cube(source: EntropySource) -> Array:
    """Point in [0, 1)³, one independent draw per axis.

    Args:
        source: Entropy source (advanced three times).

    Returns:
        Array of shape (3,) with all coordinates in [0, 1).

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> point = in_unit_cube(TinyMT32(0))
        >>> bool(((point >= 0.0) & (point < 1.0)).all())
        True

    """
    return _vector(float01(source), float01(source), float01(source))


def on_unit_cube(source: EntropySource) -> Array:
    """Point on the surface of the unit cube, faces equally likely.

    Args:
        source: Entropy source (advanced three times).

    Returns:
        Array of shape (3,); one coordinate is exactly 0 or 1.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> any(c in (0.0, 1.0) for c in on_unit_cube(TinyMT32(0)).tolist())
        True

    """
    match switch(source, CUBE_FACES):
        case 0:
            return _vector(0.0, float01(source), float01(source))
        case 1:
            return _vector(1.0, float01(source), float01(source))
        case 2:
            return _vector(float01(source), 0.0, float01(source))
        case 3:
            return _vector(float01(source), 1.0, float01(source))
        case 4:
            return _vector(float01(source), float01(source), 0.0)
        case _:
            return _vector(float01(source), float01(source), 1.0)


def random_quaternion(source: EntropySource) -> Array:
    """Unit quaternion uniformly distributed over all rotations.

    With s, θ1, θ2 drawn in that order, σ1 = √(1 - s) and σ2 = √s, the
    result is (cos θ2·σ2, sin θ1·σ1, cos θ1·σ1, sin θ2·σ2).

    Args:
        source: Entropy source (advanced three times).

    Returns:
        Array of shape (4,) ordered ``(x, y, z, w)``, norm 1.

    Examples:
        >>> import jax.numpy as jnp
        >>> from tinymt_rng.engine import TinyMT32
        >>> q = random_quaternion(TinyMT32(5))
        >>> q.shape
        (4,)
        >>> abs(float(jnp.linalg.norm(q)) - 1.0) < 1e-5
        True

    """
    s = float01(source)
    sigma1 = math.sqrt(1.0 - s)
    sigma2 = math.sqrt(s)
    theta1 = TWO_PI * float01(source)
    theta2 = TWO_PI * float01(source)
    return _vector(
        math.cos(theta2) * sigma2,
        math.sin(theta1) * sigma1,
        math.cos(theta1) * sigma1,
        math.sin(theta2) * sigma2,
    )


def sample_batch(
    source: EntropySource,
    sampler: Callable[[EntropySource], Array],
    count: int,
) -> Array:
    """Stack ``count`` successive samples into one array.

    Args:
        source: Entropy source shared by all samples.
        sampler: Any sampler from this module.
        count: Number of samples, >= 1.

    Returns:
        Array of shape ``(count, *sample_shape)``.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> sample_batch(TinyMT32(0), in_unit_cube, 10).shape
        (10, 3)

    """
    if count < 1:
        raise InvalidArgumentError(f"count must be >= 1, got {count}")
    return jnp.stack([sampler(source) for _ in range(count)])
