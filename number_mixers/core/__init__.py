"""
Stable facade: errors, random source seeding and capability Protocols.
Core-only: no imports from mixers, report or cli. Do not add exports without updating __all__.
"""

from __future__ import annotations

from .errors import ContractViolation, MixerError
from .types import Sampler

# Do not add exports without updating __all__.
__all__ = ["ContractViolation", "MixerError", "Sampler"]
