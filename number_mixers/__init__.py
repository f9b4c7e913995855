"""
Top-level public API surface. Stable facades only.
Mixer types live in number_mixers.mixers; random source helpers in number_mixers.rng.
Does not import cli or report.
"""

from __future__ import annotations

from . import core, mixers, rng
from ._version import __version__
from .core import ContractViolation, MixerError, Sampler
from .mixers import (
    DualMixer,
    NumMixer,
    OutputController,
    SampleResult,
    SampleStatus,
    StackMixer,
)

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "ContractViolation",
    "DualMixer",
    "MixerError",
    "NumMixer",
    "OutputController",
    "SampleResult",
    "SampleStatus",
    "Sampler",
    "StackMixer",
    "core",
    "mixers",
    "rng",
]
