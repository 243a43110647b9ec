"""Random subdivision of an interval.

Each of ``n`` segments gets a raw length drawn uniformly from
[1, variation]; the lengths are normalized to sum to 1 and turned into
break points with a cumulative sum. ``variation=1`` gives equal
segments, larger values give increasingly uneven ones.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from tinymt_rng.engine import EntropySource
from tinymt_rng.exceptions import InvalidArgumentError
from tinymt_rng.scalars import float_range


def partition(
    source: EntropySource,
    n: int,
    variation: float = 1.0,
    add_zero: bool = False,
) -> Array:
    """Split [0, 1] into ``n`` random intervals and return their end points.

    Args:
        source: Entropy source (advanced ``n`` times).
        n: Number of intervals.
        variation: Upper bound of a raw segment length, the lower bound
            being 1. Must be >= 0.
        add_zero: Prepend an explicit 0, giving ``n + 1`` points.

    Returns:
        float32 array of non-decreasing break points, the last one ~1.

    Raises:
        InvalidArgumentError: If ``variation < 0`` or ``n < 1``.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> points = partition(TinyMT32(1, 3, 3, 7), 4, add_zero=True)
        >>> points.shape
        (5,)
        >>> points.tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]

    """
    if variation < 0:
        raise InvalidArgumentError(f"variation must be >= 0, got {variation}")
    if n < 1:
        raise InvalidArgumentError(f"n must be >= 1, got {n}")

    lengths = jnp.array([float_range(source, 1.0, variation) for _ in range(n)], dtype=jnp.float32)
    breaks = jnp.cumsum(lengths * (1.0 / jnp.sum(lengths)))
    if add_zero:
        breaks = jnp.concatenate([jnp.zeros((1,), dtype=breaks.dtype), breaks])
    return breaks


def partition_range(
    source: EntropySource,
    n: int,
    variation: float,
    min_value: float,
    max_value: float,
    add_zero: bool = False,
) -> Array:
    """Like ``partition`` but spread over [min_value, max_value].

    With ``add_zero`` the first point is ``min_value``.

    Args:
        source: Entropy source (advanced ``n`` times).
        n: Number of intervals.
        variation: Upper bound of a raw segment length. Must be >= 0.
        min_value: Start of the first interval.
        max_value: End of the last interval.
        add_zero: Prepend the start point, giving ``n + 1`` points.

    Returns:
        float32 array of break points from ~min_value to ~max_value.

    """
    unit = partition(source, n, variation, add_zero)
    return unit * (max_value - min_value) + min_value
