"""Time-based event chances for per-tick simulation loops.

Call these once per frame/tick with the elapsed time since the previous
call. The chance of the event firing over a longer interval does not
depend on how finely that interval is split into ticks.
"""

from __future__ import annotations

import math

from tinymt_rng.engine import EntropySource
from tinymt_rng.exceptions import InvalidArgumentError
from tinymt_rng.scalars.derivation import float01, random_bool


def half_chance_in_time(
    source: EntropySource,
    half_life_seconds: float,
    delta_time: float,
) -> bool:
    """Fire with a 50% chance per ``half_life_seconds`` of elapsed time.

    No draw is consumed when ``delta_time == 0`` (always False) or when
    ``half_life_seconds == 0`` (always True, events are infinitely
    frequent).

    Args:
        source: Entropy source.
        half_life_seconds: Interval over which the event has a 50% chance.
        delta_time: Seconds since the previous call.

    Returns:
        True when the event happens during this tick.

    """
    if delta_time == 0:
        return False
    if half_life_seconds == 0:
        return True
    return float01(source) > 0.5 ** (delta_time / half_life_seconds)


def chance_for_period(
    source: EntropySource,
    average_seconds_between_events: float,
    delta_time: float,
) -> bool:
    """Fire if at least one event of a Poisson process happens in this tick.

    With rate ``l = delta_time / average``, P(k events) = l**k e**-l / k!,
    so P(at least one) = 1 - e**-l.

    Args:
        source: Entropy source.
        average_seconds_between_events: Mean interval between events.
        delta_time: Seconds since the previous call.

    Returns:
        True when the event happens during this tick.

    Raises:
        InvalidArgumentError: If the average interval is negative.

    Examples:
        >>> from tinymt_rng.engine import TinyMT32
        >>> chance_for_period(TinyMT32(1), 2.0, 0.0)
        False
        >>> chance_for_period(TinyMT32(1), 0.0, 0.016)
        True

    """
    if average_seconds_between_events < 0:
        raise InvalidArgumentError(
            f"average seconds between events must be >= 0, got {average_seconds_between_events}"
        )
    if delta_time <= 0:
        return False
    if average_seconds_between_events == 0:
        return True

    event_rate = delta_time / average_seconds_between_events
    probability = 1.0 - math.exp(-event_rate)
    return random_bool(source, probability)
