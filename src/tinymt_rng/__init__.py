"""tinymt-rng: reproducible randomness for procedural generation and simulation.

A TinyMT32 bit generator plus a layer of sampling recipes built only on
its 32-bit draws. The same seed tuple gives the same sequence on every
platform, so a seed can be sent instead of generated content.

Modules:
    engine: TinyMT32 bit generator, snapshots, process-wide default generator
    scalars: uint16/float/int/bool derivations and per-tick event chances
    distributions: interval partitioning and weighted categorical choice
    geometry: points in/on circles, squares, spheres, cubes; quaternions
    sequences: random element and non-destructive shuffle
"""

__version__ = "0.1.0"
