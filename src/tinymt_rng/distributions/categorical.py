"""Weighted discrete choice."""

from __future__ import annotations

from collections.abc import Sequence

from tinymt_rng.engine import EntropySource
from tinymt_rng.exceptions import InvalidArgumentError
from tinymt_rng.scalars import int_range


def switch(source: EntropySource, weights: Sequence[int]) -> int:
    """Pick an index with probability proportional to its weight.

    Meant to drive a ``match`` statement::

        match switch(rng, (4, 2, 1)):
            case 0: ...  # 4/7 of the time
            case 1: ...  # 2/7 of the time
            case 2: ...  # 1/7 of the time

    Args:
        source: Entropy source (advanced once).
        weights: Non-negative integer weights, at least one positive.

    Returns:
        Index into ``weights``.

    Raises:
        InvalidArgumentError: If weights are empty, negative or sum to 0.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> switch(TinyMT32(3), (0, 5, 0))
        1

    """
    if not weights:
        raise InvalidArgumentError("weights must not be empty")
    if any(w < 0 for w in weights):
        raise InvalidArgumentError(f"weights must be non-negative, got {list(weights)}")
    total = sum(weights)
    if total == 0:
        raise InvalidArgumentError("at least one weight must be positive")

    pick = int_range(source, 0, total - 1)
    running = 0
    for index, weight in enumerate(weights[:-1]):
        running += weight
        if pick < running:
            return index
    return len(weights) - 1
