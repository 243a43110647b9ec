"""Collection helpers: random element and non-destructive shuffle."""

from tinymt_rng.sequences.helpers import random_element, shuffled

__all__ = [
    "random_element",
    "shuffled",
]
