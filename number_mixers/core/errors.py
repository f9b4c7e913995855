"""
Shared exception types for number_mixers.
Only contract violations raise; expected sampling outcomes are returned as SampleResult.
"""

from __future__ import annotations


class MixerError(Exception):
    """Base exception for number_mixers; catch this for any package-raised error."""

    pass


class ContractViolation(MixerError, ValueError):
    """Caller broke a precondition (empty dataset, bad count, unknown mode, empty stack)."""

    pass


__all__ = ["ContractViolation", "MixerError"]
