"""Interval partitioning and weighted categorical choice."""

from tinymt_rng.distributions.categorical import switch
from tinymt_rng.distributions.partition import partition, partition_range

__all__ = [
    "partition",
    "partition_range",
    "switch",
]
