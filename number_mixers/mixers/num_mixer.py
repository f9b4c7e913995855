"""
NumMixer: parity-filtered random sampling from a fixed dataset under an activity budget.

A mixer is built from a dataset (default 1..100) and starts in MIX mode with a budget
drawn uniformly from [10, 20]. Each successful sample() spends one unit of budget; at
zero the mixer is inactive for good. Sampling is with replacement: random indices are
drawn until the value satisfies the current mode's parity (rejection sampling), so
duplicates are normal.

sample() never raises for expected outcomes. An inactive mixer or a mode whose parity
is missing from the dataset returns a SampleResult with ok == False and no values.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from number_mixers.core.errors import ContractViolation
from number_mixers.core.seeding import resolve_rng

logger = logging.getLogger(__name__)

DEFAULT_DATASET_SIZE = 100
BUDGET_LOWER_BOUND = 10
BUDGET_UPPER_BOUND = 20


class OutputController(enum.Enum):
    """Parity selector applied when sampling."""

    MIX = "MIX"
    EVEN = "EVEN"
    ODD = "ODD"


class SampleStatus(enum.Enum):
    """Outcome of a single sample() call."""

    OK = "OK"
    INACTIVE = "INACTIVE"
    PARITY_UNAVAILABLE = "PARITY_UNAVAILABLE"


@dataclass(frozen=True)
class SampleResult:
    """Immutable outcome of NumMixer.sample(); values is empty unless ok."""

    values: Tuple[int, ...] = ()
    status: SampleStatus = SampleStatus.OK

    @property
    def ok(self) -> bool:
        return self.status == SampleStatus.OK

    def __bool__(self) -> bool:
        return self.ok

    def __len__(self) -> int:
        return len(self.values)


def _is_even(value: int) -> bool:
    return value % 2 == 0


def _coerce_mode(mode) -> OutputController:
    try:
        return OutputController(mode)
    except ValueError:
        raise ContractViolation(f"Unknown output controller: {mode!r}") from None


class NumMixer:
    """
    Random integer source over a dataset with a MIX/EVEN/ODD parity filter.

    Usage:
        nm = NumMixer(rng=rng_from_seed(7))
        nm.set_mode(OutputController.EVEN)
        result = nm.sample(10)
        if result.ok:
            use(result.values)
    """

    def __init__(
        self,
        dataset: Optional[Iterable[int]] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._rng = resolve_rng(rng)
        if dataset is None:
            data = tuple(range(1, DEFAULT_DATASET_SIZE + 1))
        else:
            data = tuple(int(v) for v in dataset)
            if not data:
                raise ContractViolation("NumMixer dataset must contain at least one value")
        self._dataset = data
        self._even_allowed = any(_is_even(v) for v in data)
        self._odd_allowed = any(not _is_even(v) for v in data)
        self._remaining_budget = int(self._rng.integers(BUDGET_LOWER_BOUND, BUDGET_UPPER_BOUND + 1))
        self._mode_change_count = 0
        self._mode = OutputController.MIX

    @classmethod
    def _from_state(
        cls,
        dataset: Tuple[int, ...],
        *,
        even_allowed: bool,
        odd_allowed: bool,
        remaining_budget: int,
        mode_change_count: int,
        mode: OutputController,
        rng: np.random.Generator,
    ) -> "NumMixer":
        obj = cls.__new__(cls)
        obj._rng = rng
        obj._dataset = dataset
        obj._even_allowed = even_allowed
        obj._odd_allowed = odd_allowed
        obj._remaining_budget = remaining_budget
        obj._mode_change_count = mode_change_count
        obj._mode = mode
        return obj

    # Accessors

    @property
    def dataset(self) -> Tuple[int, ...]:
        return self._dataset

    @property
    def even_allowed(self) -> bool:
        return self._even_allowed

    @property
    def odd_allowed(self) -> bool:
        return self._odd_allowed

    @property
    def remaining_budget(self) -> int:
        return self._remaining_budget

    @property
    def mode_change_count(self) -> int:
        return self._mode_change_count

    @property
    def mode(self) -> OutputController:
        return self._mode

    @property
    def mode_name(self) -> str:
        """Name of the current mode for reports: MIX, EVEN, ODD or UNKNOWN."""
        if isinstance(self._mode, OutputController):
            return self._mode.value
        return "UNKNOWN"

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def is_active(self) -> bool:
        return self._remaining_budget > 0

    # Mutators

    def set_mode(self, new_mode) -> None:
        """Switch parity mode; counts a change only when the mode actually differs."""
        mode = _coerce_mode(new_mode)
        if mode == self._mode:
            return
        logger.debug("NumMixer mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode
        self._mode_change_count += 1

    def sample(self, count: int) -> SampleResult:
        """
        Draw `count` values under the current mode.
        Spends one unit of budget per successful call, not per value.
        """
        if isinstance(count, bool) or count <= 0:
            raise ContractViolation(f"sample count must be > 0, got {count!r}")
        if not self.is_active():
            logger.debug("NumMixer inactive; sample(%d) refused", count)
            return SampleResult(status=SampleStatus.INACTIVE)
        if not self._mode_satisfiable():
            logger.debug("NumMixer dataset has no %s values; sample(%d) refused", self._mode.value, count)
            return SampleResult(status=SampleStatus.PARITY_UNAVAILABLE)
        values = tuple(self._draw() for _ in range(count))
        self._remaining_budget -= 1
        return SampleResult(values=values)

    def copy(self) -> "NumMixer":
        """Independent copy of all state; the random source is shared, not cloned."""
        return NumMixer._from_state(
            self._dataset,
            even_allowed=self._even_allowed,
            odd_allowed=self._odd_allowed,
            remaining_budget=self._remaining_budget,
            mode_change_count=self._mode_change_count,
            mode=self._mode,
            rng=self._rng,
        )

    # Utility

    def _mode_satisfiable(self) -> bool:
        if self._mode == OutputController.EVEN:
            return self._even_allowed
        if self._mode == OutputController.ODD:
            return self._odd_allowed
        return True

    def _accepts(self, value: int) -> bool:
        if self._mode == OutputController.EVEN:
            return _is_even(value)
        if self._mode == OutputController.ODD:
            return not _is_even(value)
        return True

    def _draw(self) -> int:
        n = len(self._dataset)
        value = self._dataset[int(self._rng.integers(n))]
        while not self._accepts(value):
            value = self._dataset[int(self._rng.integers(n))]
        return value

    # Comparison: equality on every data member, ordering on remaining budget only.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumMixer):
            return NotImplemented
        return (
            self._mode_change_count == other._mode_change_count
            and self._remaining_budget == other._remaining_budget
            and self._even_allowed == other._even_allowed
            and self._odd_allowed == other._odd_allowed
            and self._dataset == other._dataset
            and self._mode == other._mode
        )

    def __lt__(self, other: "NumMixer") -> bool:
        if not isinstance(other, NumMixer):
            return NotImplemented
        return self._remaining_budget < other._remaining_budget

    def __gt__(self, other: "NumMixer") -> bool:
        if not isinstance(other, NumMixer):
            return NotImplemented
        return other < self

    def __le__(self, other: "NumMixer") -> bool:
        if not isinstance(other, NumMixer):
            return NotImplemented
        return not self > other

    def __ge__(self, other: "NumMixer") -> bool:
        if not isinstance(other, NumMixer):
            return NotImplemented
        return not self < other

    __hash__ = None  # mutable; equality is by value

    # Arithmetic: `a += b` rebinds to a new object, so no mixer's budget ever grows in place.

    def __add__(self, other: "NumMixer") -> "NumMixer":
        """Sum counters and budgets, OR the parity flags, append rhs dataset; keep lhs mode."""
        if not isinstance(other, NumMixer):
            return NotImplemented
        return NumMixer._from_state(
            self._dataset + other._dataset,
            even_allowed=self._even_allowed or other._even_allowed,
            odd_allowed=self._odd_allowed or other._odd_allowed,
            remaining_budget=self._remaining_budget + other._remaining_budget,
            mode_change_count=self._mode_change_count + other._mode_change_count,
            mode=self._mode,
            rng=self._rng,
        )

    def __repr__(self) -> str:
        return (
            f"NumMixer(mode={self.mode_name}, remaining_budget={self._remaining_budget}, "
            f"mode_change_count={self._mode_change_count}, size={len(self._dataset)})"
        )


__all__ = [
    "BUDGET_LOWER_BOUND",
    "BUDGET_UPPER_BOUND",
    "DEFAULT_DATASET_SIZE",
    "NumMixer",
    "OutputController",
    "SampleResult",
    "SampleStatus",
]
