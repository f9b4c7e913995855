"""
Shared typing aliases and Protocols for number_mixers.
No runtime behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from number_mixers.mixers.num_mixer import SampleResult


@runtime_checkable
class Sampler(Protocol):
    """Capability interface of a mixer that draws integer batches under a budget."""

    def sample(self, count: int) -> "SampleResult": ...

    def is_active(self) -> bool: ...


__all__ = ["Sampler"]
