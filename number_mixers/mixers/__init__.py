"""Mixer value types: NumMixer, DualMixer, StackMixer and their output filters."""

from .dual_mixer import DualMixer
from .filters import PRIME_NUMBERS, is_prime, purge_duplicates, purge_primes
from .num_mixer import NumMixer, OutputController, SampleResult, SampleStatus
from .stack_mixer import StackMixer

__all__ = [
    "DualMixer",
    "NumMixer",
    "OutputController",
    "PRIME_NUMBERS",
    "SampleResult",
    "SampleStatus",
    "StackMixer",
    "is_prime",
    "purge_duplicates",
    "purge_primes",
]
