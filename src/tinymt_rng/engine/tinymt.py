"""TinyMT32 bit generator.

The Tiny Mersenne Twister (Saito & Matsumoto) keeps 127 bits of state in
four 32-bit words plus three tempering parameters and has a period of
2**127 - 1. Every other module in this package reaches randomness only
through ``next_uint32()``, so any object with that method can stand in
for the engine (see ``EntropySource``).

References:
    - TinyMT: http://www.math.sci.hiroshima-u.ac.jp/m-mat/MT/TINYMT/
    - tinymt32.h / tinymt32.c, version 1.1.1

"""

from __future__ import annotations

import logging
import time
from typing import NamedTuple, Protocol, runtime_checkable

import jax.numpy as jnp
from jax import Array

from tinymt_rng.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF
TINYMT32_MASK = 0x7FFFFFFF
TINYMT32_SH0 = 1
TINYMT32_SH1 = 10
TINYMT32_SH8 = 8
MIN_LOOP = 8
PRE_LOOP = 8
INIT_MULTIPLIER = 1812433253

# "TINY"
CERTIFIED_STATUS = (0x54, 0x49, 0x4E, 0x59)


@runtime_checkable
class EntropySource(Protocol):
    """Anything that yields uniformly distributed 32-bit unsigned words."""

    def next_uint32(self) -> int: ...


class GeneratorConfig(NamedTuple):
    """Seed tuple a generator is built from."""

    seed: int
    mat1: int = 0
    mat2: int = 0
    tmat: int = 0


class GeneratorState(NamedTuple):
    """Frozen copy of a generator's state words and tempering parameters."""

    status: tuple[int, int, int, int]
    mat1: int
    mat2: int
    tmat: int


def _check_word(name: str, value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= UINT32_MAX:
        raise InvalidArgumentError(f"{name} must be a 32-bit unsigned integer, got {value}")
    return value


class TinyMT32:
    """TinyMT32 generator with an exclusively owned, in-place mutated state.

    Instances are not synchronized. Sharing one between threads requires
    external locking.

    Args:
        seed: 32-bit seed.
        mat1: First state-transition parameter, also mixed into the seed.
        mat2: Second state-transition parameter, also mixed into the seed.
        tmat: Tempering parameter, also mixed into the seed.

    Examples:
        >>> rng = TinyMT32(1, 3, 3, 7)
        >>> hex(rng.next_uint32())
        '0xa564a7ba'
        >>> hex(rng.next_uint32())
        '0xdda6773c'

    """

    __slots__ = ("_status", "_mat1", "_mat2", "_tmat")

    def __init__(self, seed: int, mat1: int = 0, mat2: int = 0, tmat: int = 0) -> None:
        self._mat1 = _check_word("mat1", mat1)
        self._mat2 = _check_word("mat2", mat2)
        self._tmat = _check_word("tmat", tmat)
        status = [_check_word("seed", seed), mat1, mat2, tmat]
        for i in range(1, MIN_LOOP):
            prev = status[(i - 1) & 3]
            status[i & 3] ^= (i + INIT_MULTIPLIER * (prev ^ (prev >> 30))) & UINT32_MAX
        self._status = status
        self._certify_period()
        for _ in range(PRE_LOOP):
            self.next_uint32()

    def _certify_period(self) -> None:
        s = self._status
        if (s[0] & TINYMT32_MASK) == 0 and s[1] == 0 and s[2] == 0 and s[3] == 0:
            logger.debug("all-zero initial state, substituting certified fallback")
            self._status = list(CERTIFIED_STATUS)

    @property
    def params(self) -> tuple[int, int, int]:
        """The ``(mat1, mat2, tmat)`` parameters fixed at construction."""
        return self._mat1, self._mat2, self._tmat

    def next_uint32(self) -> int:
        """Advance the state and return the tempered 32-bit output."""
        s = self._status

        # next state
        y = s[3]
        x = (s[0] & TINYMT32_MASK) ^ s[1] ^ s[2]
        x ^= (x << TINYMT32_SH0) & UINT32_MAX
        y ^= (y >> TINYMT32_SH0) ^ x
        s[0] = s[1]
        s[1] = s[2]
        s[2] = x ^ ((y << TINYMT32_SH1) & UINT32_MAX)
        s[3] = y
        if y & 1:
            s[1] ^= self._mat1
            s[2] ^= self._mat2

        # temper
        t0 = s[3]
        t1 = (s[0] + (s[2] >> TINYMT32_SH8)) & UINT32_MAX
        t0 ^= t1
        if t1 & 1:
            t0 ^= self._tmat
        return t0

    def clone(self) -> TinyMT32:
        """Return an independent generator that continues the same sequence."""
        twin = TinyMT32.__new__(TinyMT32)
        twin.copy_from(self)
        return twin

    def copy_from(self, other: TinyMT32) -> None:
        """Overwrite this generator's state and parameters with ``other``'s."""
        self._mat1, self._mat2, self._tmat = other.params
        self._status = list(other._status)

    def snapshot(self) -> GeneratorState:
        """Capture the current state so the stream can be resumed later.

        Examples:
            >>> rng = TinyMT32(42)
            >>> saved = rng.snapshot()
            >>> first = rng.next_uint32()
            >>> TinyMT32.from_state(saved).next_uint32() == first
            True

        """
        return GeneratorState(tuple(self._status), self._mat1, self._mat2, self._tmat)

    @classmethod
    def from_state(cls, state: GeneratorState) -> TinyMT32:
        """Rebuild a generator from a snapshot, without re-seeding or warm-up."""
        if len(state.status) != 4:
            raise InvalidArgumentError(f"status must hold 4 words, got {len(state.status)}")
        rng = cls.__new__(cls)
        rng._mat1 = _check_word("mat1", state.mat1)
        rng._mat2 = _check_word("mat2", state.mat2)
        rng._tmat = _check_word("tmat", state.tmat)
        rng._status = [_check_word("status", word) for word in state.status]
        logger.debug("restored generator from snapshot %s", state)
        return rng

    def __repr__(self) -> str:
        return f"TinyMT32(status={tuple(self._status)!r}, params={self.params!r})"


_default_generator: TinyMT32 | None = None


def default_generator() -> TinyMT32:
    """Return the process-wide generator, seeding it from the clock on first use.

    The generator lives for the rest of the process and is never reset.
    It is shared mutable state: callers on different threads must
    serialize access themselves.

    Returns:
        The shared TinyMT32 instance.

    """
    global _default_generator
    if _default_generator is None:
        seed = (time.time_ns() // 100) & UINT32_MAX
        logger.debug("seeding default generator with %#010x", seed)
        _default_generator = TinyMT32(seed)
    return _default_generator


def create_generator(config: GeneratorConfig | None = None) -> TinyMT32:
    """Create a generator from a seed tuple.

    Without a config the seed is one draw from ``default_generator()``,
    which gives each new generator its own stream without picking seeds
    by hand.

    Args:
        config: Seed tuple. Default: seed drawn from the default generator.

    Returns:
        A freshly seeded TinyMT32.

    Examples:
        >>> rng = create_generator(GeneratorConfig(seed=1, mat1=3, mat2=3, tmat=7))
        >>> hex(rng.next_uint32())
        '0xa564a7ba'

    """
    if config is None:
        config = GeneratorConfig(seed=default_generator().next_uint32())
    return TinyMT32(*config)


def uint32_array(source: EntropySource, count: int) -> Array:
    """Pack ``count`` successive draws into a ``uint32`` array.

    Args:
        source: Entropy source (advanced ``count`` times).
        count: Number of words to draw.

    Returns:
        Array of shape ``(count,)`` and dtype ``uint32``.

    Examples:
        >>> words = uint32_array(TinyMT32(1, 3, 3, 7), 5)
        >>> words.shape
        (5,)
        >>> hex(int(words[4]))
        '0xe888e74e'

    """
    if count < 0:
        raise InvalidArgumentError(f"count must be >= 0, got {count}")
    return jnp.array([source.next_uint32() for _ in range(count)], dtype=jnp.uint32)
