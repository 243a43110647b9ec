"""Scalar derivations and time-based probabilities.

Every function takes an EntropySource first and consumes at most one
draw from it.
"""

from tinymt_rng.scalars.derivation import (
    float01,
    float_range,
    int_range,
    random_bool,
    uint16,
)
from tinymt_rng.scalars.temporal import chance_for_period, half_chance_in_time

__all__ = [
    "uint16",
    "float01",
    "float_range",
    "int_range",
    "random_bool",
    "half_chance_in_time",
    "chance_for_period",
]
