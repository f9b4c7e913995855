"""Namespace re-export of the random source helpers in number_mixers.core.seeding."""

from __future__ import annotations

from number_mixers.core.seeding import (
    SALT_DRIVER_DATASET,
    SALT_DUAL_MIXER,
    SALT_NUM_MIXER,
    SALT_STACK_DATASET,
    SEED_ROOT_VERSION,
    RandomSource,
    reset_shared_rng,
    rng_for,
    rng_from_seed,
    seed_root,
    shared_rng,
)

__all__ = [
    "RandomSource",
    "SEED_ROOT_VERSION",
    "SALT_DRIVER_DATASET",
    "SALT_DUAL_MIXER",
    "SALT_NUM_MIXER",
    "SALT_STACK_DATASET",
    "reset_shared_rng",
    "rng_for",
    "rng_from_seed",
    "seed_root",
    "shared_rng",
]
