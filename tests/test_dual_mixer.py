"""Tests for DualMixer combine modes, failure tolerance and operators."""
from __future__ import annotations

import logging

import pytest

from number_mixers.core import ContractViolation
from number_mixers.mixers import DualMixer, OutputController, purge_duplicates
from number_mixers.mixers.dual_mixer import interleave
from number_mixers.rng import rng_from_seed


def _dual(seed: int = 5) -> DualMixer:
    return DualMixer(rng=rng_from_seed(seed))


def test_construction_pins_even_and_odd():
    dm = _dual()
    assert dm.combine_mode == 3
    assert dm.even_mixer.mode == OutputController.EVEN
    assert dm.odd_mixer.mode == OutputController.ODD
    assert dm.even_mixer.mode_change_count == 1
    assert dm.odd_mixer.mode_change_count == 1
    assert dm.even_mixer.dataset == tuple(range(1, 101))


def test_mode_1_even_only():
    dm = _dual()
    dm.set_combine_mode(1)
    out = dm.ping()
    assert len(out) == 10
    assert all(v % 2 == 0 for v in out)


def test_mode_2_odd_only():
    dm = _dual()
    dm.set_combine_mode(2)
    out = dm.ping()
    assert len(out) == 10
    assert all(v % 2 == 1 for v in out)


def test_default_mode_interleaves_even_then_odd():
    """20 values; even indices from the EVEN mixer, odd indices from the ODD mixer."""
    dm = _dual(8)
    twin = _dual(8)
    out = dm.ping()
    even = twin.even_mixer.sample(10).values
    odd = twin.odd_mixer.sample(10).values
    assert len(out) == 20
    assert out[0::2] == list(even)
    assert out[1::2] == list(odd)
    assert all(v % 2 == 0 for v in out[0::2])
    assert all(v % 2 == 1 for v in out[1::2])


def test_mode_4_deduplicates_each_side():
    dm = _dual(9)
    twin = _dual(9)
    dm.set_combine_mode(4)
    out = dm.ping()
    expected = purge_duplicates(twin.even_mixer.sample(10).values) + purge_duplicates(
        twin.odd_mixer.sample(10).values
    )
    assert out == expected
    assert len(out) <= 20
    evens = [v for v in out if v % 2 == 0]
    odds = [v for v in out if v % 2 == 1]
    assert out == evens + odds
    assert len(set(evens)) == len(evens)
    assert len(set(odds)) == len(odds)


def test_each_ping_spends_budget_on_used_mixers():
    dm = _dual()
    even_before = dm.even_mixer.remaining_budget
    odd_before = dm.odd_mixer.remaining_budget
    dm.set_combine_mode(1)
    dm.ping()
    assert dm.even_mixer.remaining_budget == even_before - 1
    assert dm.odd_mixer.remaining_budget == odd_before
    dm.set_combine_mode(3)
    dm.ping()
    assert dm.even_mixer.remaining_budget == even_before - 2
    assert dm.odd_mixer.remaining_budget == odd_before - 1


@pytest.mark.parametrize("val", [0, 5, -1, True])
def test_invalid_combine_mode_rejected(val):
    dm = _dual()
    with pytest.raises(ContractViolation, match="combine mode"):
        dm.set_combine_mode(val)
    assert dm.combine_mode == 3


def test_exhausted_side_returns_empty():
    dm = _dual()
    dm.set_combine_mode(1)
    for _ in range(dm.even_mixer.remaining_budget):
        assert len(dm.ping()) == 10
    assert dm.ping() == []


def test_mode_3_with_one_side_exhausted_returns_other_side():
    dm = _dual()
    dm.set_combine_mode(1)
    while dm.even_mixer.is_active():
        dm.ping()
    dm.set_combine_mode(3)
    out = dm.ping()
    assert len(out) == 10
    assert all(v % 2 == 1 for v in out)


def test_mode_4_with_even_side_exhausted_returns_deduplicated_odds(caplog):
    dm = _dual(12)
    dm.set_combine_mode(1)
    while dm.even_mixer.is_active():
        dm.ping()
    dm.set_combine_mode(4)
    with caplog.at_level(logging.WARNING, logger="number_mixers.mixers.dual_mixer"):
        out = dm.ping()
    assert 0 < len(out) <= 10
    assert all(v % 2 == 1 for v in out)
    assert len(set(out)) == len(out)
    assert "EVEN mixer sample failed: INACTIVE" in caplog.text


def test_owned_mixers_not_reachable_through_accessors():
    """Re-moding or draining the returned mixers does not change ping()."""
    dm = _dual()
    leaked = dm.even_mixer
    leaked.set_mode(OutputController.MIX)
    while leaked.is_active():
        leaked.sample(1)
    dm.odd_mixer.set_mode(OutputController.EVEN)
    assert dm.even_mixer.mode == OutputController.EVEN
    assert dm.even_mixer.is_active()
    dm.set_combine_mode(1)
    for _ in range(5):
        out = dm.ping()
        assert len(out) == 10
        assert all(v % 2 == 0 for v in out)
    dm.set_combine_mode(2)
    assert all(v % 2 == 1 for v in dm.ping())


def test_interleave_pairs_values():
    assert interleave([2, 4], [1, 3]) == [2, 1, 4, 3]


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

def test_copy_equal_and_independent():
    dm = _dual()
    dup = dm.copy()
    assert dup == dm
    dup.ping()
    assert dup != dm
    assert dup < dm
    assert dm > dup


def test_equality_includes_combine_mode():
    dm = _dual()
    dup = dm.copy()
    dup.set_combine_mode(4)
    assert dm != dup


def test_ordering_requires_both_mixers():
    """Only the EVEN side spent: neither < nor > holds."""
    dm = _dual()
    dup = dm.copy()
    dup.set_combine_mode(1)
    dup.ping()
    assert not dup < dm
    assert not dup > dm
    assert dup <= dm and dup >= dm


def test_addition_sums_owned_mixers():
    a = _dual(1)
    b = _dual(2)
    b.set_combine_mode(2)
    total = a + b
    assert total.combine_mode == 3
    assert total.even_mixer.remaining_budget == a.even_mixer.remaining_budget + b.even_mixer.remaining_budget
    assert total.odd_mixer.dataset == a.odd_mixer.dataset + b.odd_mixer.dataset
    assert total.even_mixer.mode == OutputController.EVEN
    assert total.even_mixer.mode_change_count == 2
