"""Random picks from and reorderings of sequences.

Both helpers accept an optional source. When it is omitted they draw
from ``default_generator()``, which is shared process-wide and not
thread-safe.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from tinymt_rng.engine import EntropySource, default_generator
from tinymt_rng.exceptions import InvalidArgumentError
from tinymt_rng.scalars import int_range

T = TypeVar("T")


def random_element(items: Sequence[T], source: EntropySource | None = None) -> T:
    """Return a uniformly chosen element of ``items``.

    Args:
        items: Non-empty sequence.
        source: Entropy source. Default: the process-wide generator.

    Returns:
        One element of ``items``.

    Raises:
        InvalidArgumentError: If ``items`` is empty.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> random_element(["rock"], TinyMT32(9))
        'rock'

    """
    if len(items) == 0:
        raise InvalidArgumentError("cannot pick an element from an empty sequence")
    if source is None:
        source = default_generator()
    return items[int_range(source, 0, len(items) - 1)]


def shuffled(items: Sequence[T], source: EntropySource | None = None) -> list[T] | tuple[T, ...]:
    """Return a shuffled copy of ``items``, leaving the original untouched.

    Repeatedly moves a uniformly chosen remaining element to the output,
    which yields every permutation with equal probability. Tuples come
    back as tuples, everything else as a list.

    Args:
        items: Sequence to shuffle.
        source: Entropy source. Default: the process-wide generator.

    Returns:
        New sequence holding the same elements in random order.

    Raises:
        InvalidArgumentError: If ``items`` is empty.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> sorted(shuffled([3, 1, 2], TinyMT32(9)))
        [1, 2, 3]
        >>> type(shuffled((1, 2), TinyMT32(9)))
        <class 'tuple'>

    """
    if len(items) == 0:
        raise InvalidArgumentError("cannot shuffle an empty sequence")
    if source is None:
        source = default_generator()
    remaining = list(range(len(items)))
    result = []
    while remaining:
        idx = int_range(source, 0, len(remaining) - 1)
        result.append(items[remaining.pop(idx)])
    if isinstance(items, tuple):
        return tuple(result)
    return result
