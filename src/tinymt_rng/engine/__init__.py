"""TinyMT32 bit generation engine.

One generator per independent stream. The 4-word seed tuple
(seed, mat1, mat2, tmat) fully determines the output sequence.

Public surface:
    TinyMT32 → the generator (next_uint32, clone, snapshot, from_state)
    EntropySource → protocol every sampler accepts
    create_generator → build from a GeneratorConfig (or a drawn seed)
    default_generator → lazily seeded process-wide fallback
"""

from tinymt_rng.engine.tinymt import (
    UINT32_MAX,
    EntropySource,
    GeneratorConfig,
    GeneratorState,
    TinyMT32,
    create_generator,
    default_generator,
    uint32_array,
)

__all__ = [
    "UINT32_MAX",
    "EntropySource",
    "GeneratorConfig",
    "GeneratorState",
    "TinyMT32",
    "create_generator",
    "default_generator",
    "uint32_array",
]
