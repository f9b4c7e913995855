"""
StackMixer: a LIFO stack of NumMixers whose top position selects the sampling policy.

Position is counted from the bottom (0). For the top element at index size - 1:
- (size - 1) % 3 == 0: MIX, with primes removed from the batch.
- (size - 1) % 3 == 1: EVEN.
- (size - 1) % 3 == 2: ODD.

Each mixer added via add_mixers() gets its own 30-value dataset drawn from [2, 100], so
both parities are present in practice.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from number_mixers.core.errors import ContractViolation
from number_mixers.core.seeding import resolve_rng

from .filters import purge_primes
from .num_mixer import NumMixer, OutputController

logger = logging.getLogger(__name__)

BATCH_SIZE = 10
DATASET_SIZE = 30
DATASET_LOWER_BOUND = 2
DATASET_UPPER_BOUND = 100

# Mode of the top mixer by (size - 1) % 3
_POSITION_MODES = (OutputController.MIX, OutputController.EVEN, OutputController.ODD)


def _require_positive(count: int, what: str) -> None:
    if isinstance(count, bool) or count <= 0:
        raise ContractViolation(f"{what} count must be > 0, got {count!r}")


class StackMixer:
    """
    Stack of NumMixers; the last pushed mixer is on top and serves ping().

    Usage:
        sm = StackMixer(rng=rng_from_seed(3))
        sm.add_mixers(3)
        values = sm.ping()  # top index 2 -> ODD values
    """

    def __init__(self, *, rng: Optional[np.random.Generator] = None) -> None:
        self._rng = resolve_rng(rng)
        self._stack: List[NumMixer] = []

    # Accessors

    @property
    def size(self) -> int:
        return len(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def has_mixers(self) -> bool:
        return bool(self._stack)

    def __bool__(self) -> bool:
        return self.has_mixers()

    @property
    def top(self) -> NumMixer:
        """Snapshot of the top mixer."""
        return self._top().copy()

    def iter_top_down(self) -> Iterator[Tuple[int, NumMixer]]:
        """Yield (bottom-based index, mixer snapshot) from the top of the stack down."""
        for i in range(len(self._stack) - 1, -1, -1):
            yield i, self._stack[i].copy()

    def _top(self) -> NumMixer:
        if not self._stack:
            raise ContractViolation("StackMixer is empty")
        return self._stack[-1]

    # Stack operations

    def generate_dataset(self, size: int = DATASET_SIZE) -> List[int]:
        """`size` values drawn uniformly from [2, 100] using this stack's random source."""
        _require_positive(size, "dataset")
        draws = self._rng.integers(DATASET_LOWER_BOUND, DATASET_UPPER_BOUND + 1, size=size)
        return [int(v) for v in draws]

    def add_mixers(self, count: int) -> None:
        _require_positive(count, "add_mixers")
        for _ in range(count):
            self._stack.append(NumMixer(self.generate_dataset(), rng=self._rng))
        logger.debug("StackMixer pushed %d mixer(s); size=%d", count, len(self._stack))

    def remove_mixers(self, count: int) -> None:
        _require_positive(count, "remove_mixers")
        if count > len(self._stack):
            raise ContractViolation(f"cannot remove {count} mixer(s) from a stack of {len(self._stack)}")
        del self._stack[-count:]
        logger.debug("StackMixer popped %d mixer(s); size=%d", count, len(self._stack))

    def push(self, mixer: NumMixer) -> None:
        """Push a copy of `mixer` on top."""
        self._stack.append(mixer.copy())

    def append_all(self, other: "StackMixer") -> None:
        """Stack copies of other's mixers on top, keeping their relative order."""
        copies = [m.copy() for m in other._stack]
        self._stack.extend(copies)

    def copy(self) -> "StackMixer":
        out = StackMixer(rng=self._rng)
        out.append_all(self)
        return out

    def ping(self) -> List[int]:
        top = self._top()
        idx = (len(self._stack) - 1) % 3
        mode = _POSITION_MODES[idx]
        top.set_mode(mode)
        result = top.sample(BATCH_SIZE)
        if not result.ok:
            logger.warning("StackMixer top mixer sample failed: %s", result.status.value)
            return []
        if mode == OutputController.MIX:
            return purge_primes(result.values)
        return list(result.values)

    # Comparison: equality on contents, ordering on size.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StackMixer):
            return NotImplemented
        return self._stack == other._stack

    def __lt__(self, other: "StackMixer") -> bool:
        if not isinstance(other, StackMixer):
            return NotImplemented
        return len(self._stack) < len(other._stack)

    def __gt__(self, other: "StackMixer") -> bool:
        if not isinstance(other, StackMixer):
            return NotImplemented
        return other < self

    def __le__(self, other: "StackMixer") -> bool:
        if not isinstance(other, StackMixer):
            return NotImplemented
        return not self > other

    def __ge__(self, other: "StackMixer") -> bool:
        if not isinstance(other, StackMixer):
            return NotImplemented
        return not self < other

    __hash__ = None

    # Arithmetic: rhs lands on top (a whole stack, or a single NumMixer).

    def __iadd__(self, other: Union["StackMixer", NumMixer]) -> "StackMixer":
        if isinstance(other, StackMixer):
            self.append_all(other)
        elif isinstance(other, NumMixer):
            self.push(other)
        else:
            return NotImplemented
        return self

    def __add__(self, other: Union["StackMixer", NumMixer]) -> "StackMixer":
        if not isinstance(other, (StackMixer, NumMixer)):
            return NotImplemented
        out = self.copy()
        out += other
        return out

    def __repr__(self) -> str:
        return f"StackMixer(size={len(self._stack)})"


__all__ = [
    "BATCH_SIZE",
    "DATASET_LOWER_BOUND",
    "DATASET_SIZE",
    "DATASET_UPPER_BOUND",
    "StackMixer",
]
