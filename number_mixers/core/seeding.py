"""
Canonical random source for all mixers.

Every mixer receives a numpy Generator explicitly (rng=...). Reproducible runs derive
their generator via rng_for(run_key, salt), one salt per component, so two components
never share a stream by accident. Never use Python's built-in hash() (not stable across
processes).

Contract: seed_root versioning
- SEED_ROOT_VERSION is the current version of the hashing scheme (salts, encoding, algorithm).
- If you change hashing scheme, salt set, or encoding, bump SEED_ROOT_VERSION.

shared_rng() is the process-wide fallback used when a mixer is built without rng=.
It is single-threaded state; give each thread its own generator instead.
"""

from __future__ import annotations

import hashlib
from typing import Optional

import numpy as np

# Version of seed_root derivation; bump when hashing scheme / salt set / encoding changes
SEED_ROOT_VERSION = 1

# Component-scoped salt names (reference these, never string literals)
SALT_NUM_MIXER = "num_mixer"
SALT_DUAL_MIXER = "dual_mixer"
SALT_STACK_DATASET = "stack_dataset"
SALT_DRIVER_DATASET = "driver_dataset"

# Public alias: a RandomSource is a numpy Generator.
RandomSource = np.random.Generator

_shared: Optional[np.random.Generator] = None


def seed_root(run_key: str, *, salt: str) -> int:
    """
    Derive a stable 63-bit seed from run_key and component salt.
    Same (run_key, salt) yields the same seed across process runs for a given SEED_ROOT_VERSION.
    """
    payload = f"{run_key}|{salt}|{SEED_ROOT_VERSION}".encode("utf-8")
    digest = hashlib.sha256(payload).digest()
    seed = int.from_bytes(digest[:8], byteorder="big")
    return seed % (2**63)


def rng_for(run_key: str, salt: str) -> np.random.Generator:
    """Return a Generator seeded from seed_root(run_key, salt=salt)."""
    return np.random.default_rng(seed_root(run_key, salt=salt))


def rng_from_seed(seed: Optional[int]) -> np.random.Generator:
    """
    Build a Generator from an explicit seed.
    If seed is None, returns a non-deterministic generator (OS entropy).
    """
    if seed is not None:
        return np.random.default_rng(seed)
    return np.random.default_rng()


def shared_rng() -> np.random.Generator:
    """Process-wide default generator, created on first use."""
    global _shared
    if _shared is None:
        _shared = rng_from_seed(None)
    return _shared


def reset_shared_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Replace the process-wide generator (e.g. to make a whole run reproducible)."""
    global _shared
    _shared = rng_from_seed(seed)
    return _shared


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    """Explicit generator if given, else the shared one."""
    return rng if rng is not None else shared_rng()


__all__ = [
    "RandomSource",
    "SEED_ROOT_VERSION",
    "SALT_DRIVER_DATASET",
    "SALT_DUAL_MIXER",
    "SALT_NUM_MIXER",
    "SALT_STACK_DATASET",
    "reset_shared_rng",
    "resolve_rng",
    "rng_for",
    "rng_from_seed",
    "seed_root",
    "shared_rng",
]
