"""
DualMixer: two default NumMixers (one pinned EVEN, one pinned ODD) merged per combine mode.

Combine modes (batch size 10 per underlying sample):
- 1: EVEN values only.
- 2: ODD values only.
- 3: alternating EVEN/ODD, starting with EVEN (20 values).
- 4: EVEN values without duplicates, then ODD values without duplicates (<= 20 values).

A failed underlying sample (inactive mixer) contributes nothing. Mode 3 interleaves only
when both sides succeed; otherwise it returns the side that did.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from number_mixers.core.errors import ContractViolation
from number_mixers.core.seeding import resolve_rng

from .filters import purge_duplicates
from .num_mixer import NumMixer, OutputController, SampleResult

logger = logging.getLogger(__name__)

BATCH_SIZE = 10
DEFAULT_COMBINE_MODE = 3
COMBINE_MODES = (1, 2, 3, 4)


def interleave(first: List[int], second: List[int]) -> List[int]:
    """[first[0], second[0], first[1], second[1], ...]; inputs must be the same length."""
    out: List[int] = []
    for a, b in zip(first, second):
        out.append(a)
        out.append(b)
    return out


class DualMixer:
    """Owns an EVEN and an ODD NumMixer; ping() merges their samples per combine_mode."""

    def __init__(self, *, rng: Optional[np.random.Generator] = None) -> None:
        rng = resolve_rng(rng)
        self._combine_mode = DEFAULT_COMBINE_MODE
        self._even = NumMixer(rng=rng)
        self._odd = NumMixer(rng=rng)
        self._even.set_mode(OutputController.EVEN)
        self._odd.set_mode(OutputController.ODD)

    @classmethod
    def _from_parts(cls, combine_mode: int, even: NumMixer, odd: NumMixer) -> "DualMixer":
        obj = cls.__new__(cls)
        obj._combine_mode = combine_mode
        obj._even = even
        obj._odd = odd
        return obj

    @property
    def combine_mode(self) -> int:
        return self._combine_mode

    @property
    def even_mixer(self) -> NumMixer:
        """Snapshot of the EVEN mixer; changes to it do not reach this DualMixer."""
        return self._even.copy()

    @property
    def odd_mixer(self) -> NumMixer:
        """Snapshot of the ODD mixer; changes to it do not reach this DualMixer."""
        return self._odd.copy()

    def set_combine_mode(self, val: int) -> None:
        if isinstance(val, bool) or val not in COMBINE_MODES:
            raise ContractViolation(f"combine mode must be one of {COMBINE_MODES}, got {val!r}")
        self._combine_mode = val

    def ping(self) -> List[int]:
        mode = self._combine_mode
        if mode == 1:
            return self._take(self._even.sample(BATCH_SIZE), "EVEN")
        if mode == 2:
            return self._take(self._odd.sample(BATCH_SIZE), "ODD")
        if mode == 3:
            return self._ping_interleaved()
        if mode == 4:
            return self._ping_deduplicated()
        return []

    def copy(self) -> "DualMixer":
        return DualMixer._from_parts(self._combine_mode, self._even.copy(), self._odd.copy())

    def _take(self, result: SampleResult, side: str) -> List[int]:
        if not result.ok:
            logger.warning("DualMixer %s mixer sample failed: %s", side, result.status.value)
            return []
        return list(result.values)

    def _ping_interleaved(self) -> List[int]:
        even = self._even.sample(BATCH_SIZE)
        odd = self._odd.sample(BATCH_SIZE)
        if even.ok and odd.ok:
            return interleave(list(even.values), list(odd.values))
        return self._take(even, "EVEN") + self._take(odd, "ODD")

    def _ping_deduplicated(self) -> List[int]:
        even = purge_duplicates(self._take(self._even.sample(BATCH_SIZE), "EVEN"))
        odd = purge_duplicates(self._take(self._odd.sample(BATCH_SIZE), "ODD"))
        return even + odd

    # Comparison: ordering holds only when both owned mixers agree.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DualMixer):
            return NotImplemented
        return (
            self._combine_mode == other._combine_mode
            and self._even == other._even
            and self._odd == other._odd
        )

    def __lt__(self, other: "DualMixer") -> bool:
        if not isinstance(other, DualMixer):
            return NotImplemented
        return self._even < other._even and self._odd < other._odd

    def __gt__(self, other: "DualMixer") -> bool:
        if not isinstance(other, DualMixer):
            return NotImplemented
        return other < self

    def __le__(self, other: "DualMixer") -> bool:
        if not isinstance(other, DualMixer):
            return NotImplemented
        return not self > other

    def __ge__(self, other: "DualMixer") -> bool:
        if not isinstance(other, DualMixer):
            return NotImplemented
        return not self < other

    __hash__ = None

    def __add__(self, other: "DualMixer") -> "DualMixer":
        """Pairwise sum of the owned mixers; combine mode from lhs."""
        if not isinstance(other, DualMixer):
            return NotImplemented
        return DualMixer._from_parts(self._combine_mode, self._even + other._even, self._odd + other._odd)

    def __repr__(self) -> str:
        return f"DualMixer(combine_mode={self._combine_mode}, even={self._even!r}, odd={self._odd!r})"


__all__ = ["BATCH_SIZE", "COMBINE_MODES", "DEFAULT_COMBINE_MODE", "DualMixer", "interleave"]
