"""Scalar values derived from single 32-bit draws.

Each function consumes exactly one ``next_uint32()`` from the source,
so the position in the stream only depends on how many calls were made,
never on the values drawn.

Known limitations, kept for reproducibility:
    - ``int_range`` uses a plain modulo, so low values are slightly more
      likely once the span is a sizeable fraction of 2**32.
    - ``float_range`` scales a 24-bit fraction, so very wide spans are
      coarsely quantized.

"""

from __future__ import annotations

import math

from tinymt_rng.engine import UINT32_MAX, EntropySource
from tinymt_rng.exceptions import InvalidArgumentError

FLOAT01_SCALE = 1.0 / 16777216.0  # 2**-24


def uint16(source: EntropySource) -> int:
    """Low 16 bits of one draw.

    Args:
        source: Entropy source.

    Returns:
        Integer in [0, 65535].

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> hex(uint16(TinyMT32(1, 3, 3, 7)))
        '0xa7ba'

    """
    return source.next_uint32() & 0xFFFF


def float01(source: EntropySource) -> float:
    """Uniform float in [0, 1) from the top 24 bits of one draw.

    Args:
        source: Entropy source.

    Returns:
        Float ``f`` with ``0 <= f < 1``, a multiple of 2**-24.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> 0.0 <= float01(TinyMT32(7)) < 1.0
        True

    """
    return (source.next_uint32() >> 8) * FLOAT01_SCALE


def float_range(source: EntropySource, min_value: float, max_value: float) -> float:
    """Uniform float in [min_value, max_value).

    Reversed bounds are allowed; the result then lies in
    (max_value, min_value].

    Args:
        source: Entropy source.
        min_value: Lower bound (inclusive).
        max_value: Upper bound (exclusive).

    Returns:
        ``min_value + float01 * (max_value - min_value)``.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> -1.0 <= float_range(TinyMT32(7), -1.0, 1.0) < 1.0
        True

    """
    return min_value + float01(source) * (max_value - min_value)


def int_range(source: EntropySource, min_value: int, max_value: int) -> int:
    """Integer in [min_value, max_value], both ends inclusive.

    Args:
        source: Entropy source.
        min_value: Lowest possible result.
        max_value: Highest possible result.

    Returns:
        ``min_value + draw % (max_value - min_value + 1)``.

    Raises:
        InvalidArgumentError: If ``max_value < min_value`` or the range
            holds more than 2**32 values.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> rng = TinyMT32(7)
        >>> all(1 <= int_range(rng, 1, 6) <= 6 for _ in range(100))
        True

    """
    span = max_value - min_value + 1
    if span <= 0:
        raise InvalidArgumentError(f"empty range [{min_value}, {max_value}]")
    if span > UINT32_MAX + 1:
        raise InvalidArgumentError(f"range [{min_value}, {max_value}] is wider than 2**32 values")
    return min_value + source.next_uint32() % span


def random_bool(source: EntropySource, chance: float | None = None) -> bool:
    """Boolean that is True with the given probability.

    Without a chance the threshold is exactly half of ``UINT32_MAX``,
    not ``chance=0.5``. With ``chance=1.0`` a draw of ``UINT32_MAX`` still
    yields False.

    Args:
        source: Entropy source.
        chance: Probability of True, e.g. 0.9 for 90% of the time.

    Returns:
        ``draw < floor(UINT32_MAX * chance)``.

    Raises:
        InvalidArgumentError: If ``chance`` is NaN or infinite.

    """
    if chance is None:
        return source.next_uint32() < UINT32_MAX // 2
    if not math.isfinite(chance):
        raise InvalidArgumentError(f"chance must be finite, got {chance}")
    return source.next_uint32() < math.floor(UINT32_MAX * chance)
