"""Errors raised by tinymt_rng."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An argument is outside the domain of the sampling operation.

    Raised synchronously, never clamped. Subclasses ValueError so plain
    ``except ValueError`` handlers keep working.
    """
