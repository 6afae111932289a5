import math

import pytest

from arbitrage.outcome import InvalidInput, NoOpportunity, Opportunity, SourcePool
from arbitrage.snapshot import ReserveSnapshot
from arbitrage.solver import NON_FINITE_REASON, ZERO_PRODUCT_REASON, solve


def test_cheaper_on_pool_a_sizes_from_a():
    """Pool A prices X at 1.0, pool B at 1.1."""
    pool_a = ReserveSnapshot(100, 100, 0.997)
    pool_b = ReserveSnapshot(110, 100, 0.997)

    outcome = solve(pool_a, pool_b)

    assert isinstance(outcome, Opportunity)
    assert outcome.source_pool is SourcePool.A
    assert outcome.deposit_pool is SourcePool.B
    assert outcome.input_amount == pytest.approx(4.27, abs=0.01)


def test_closed_form_matches_hand_computation():
    pool_a = ReserveSnapshot(100, 100, 0.997)
    pool_b = ReserveSnapshot(110, 100, 0.997)
    expected = math.sqrt(110 * 100 * 0.997 * 0.997 / (100 * 100)) * 100 - 100 / 0.997

    outcome = solve(pool_a, pool_b)

    assert outcome.input_amount == pytest.approx(expected, rel=1e-12)


def test_identical_pools_have_no_opportunity():
    pool = ReserveSnapshot(1000, 500, 0.997)
    assert solve(pool, pool) == NoOpportunity()


def test_equal_rates_with_different_depth_have_no_opportunity():
    pool_a = ReserveSnapshot(1000, 500, 0.997)
    pool_b = ReserveSnapshot(2000, 1000, 0.9975)
    assert pool_a.exchange_rate == pool_b.exchange_rate
    assert solve(pool_a, pool_b) == NoOpportunity()


def test_equal_rates_fee_free_still_no_opportunity():
    pool_a = ReserveSnapshot(100, 100, 1.0)
    pool_b = ReserveSnapshot(300, 300, 1.0)
    assert solve(pool_a, pool_b) == NoOpportunity()


def test_gap_smaller_than_fees_is_no_opportunity():
    pool_a = ReserveSnapshot(1000, 1000, 0.997)
    pool_b = ReserveSnapshot(1004, 1000, 0.997)
    assert solve(pool_a, pool_b) == NoOpportunity()


def test_swapping_pools_mirrors_direction_and_size():
    pool_1 = ReserveSnapshot(100, 100, 0.997)
    pool_2 = ReserveSnapshot(110, 100, 0.997)

    forward = solve(pool_1, pool_2)
    backward = solve(pool_2, pool_1)

    assert forward.source_pool is SourcePool.A
    assert backward.source_pool is SourcePool.B
    assert backward.input_amount == pytest.approx(forward.input_amount, rel=1e-12)


def test_b_to_a_branch_uses_pool_a_fee_in_correction():
    pool_a = ReserveSnapshot(3000, 1000, 0.99)
    pool_b = ReserveSnapshot(2000, 1000, 0.997)
    x2 = pool_b.reserve_x
    expected = (
        math.sqrt(3000 * 1000 * 0.99 * 0.997 / (1000 * 2000)) * x2 - x2 / 0.99
    )

    outcome = solve(pool_a, pool_b)

    assert outcome.source_pool is SourcePool.B
    assert outcome.input_amount == pytest.approx(expected, rel=1e-12)


def test_solver_is_deterministic():
    pool_a = ReserveSnapshot(123.456, 78.9, 0.9975)
    pool_b = ReserveSnapshot(130.0, 78.0, 0.997)
    assert solve(pool_a, pool_b) == solve(pool_a, pool_b)


def test_zero_reserve_product_is_invalid_input():
    """Both reserves are positive but their product underflows to zero."""
    pool_a = ReserveSnapshot(1e-200, 1e-200, 0.997)
    pool_b = ReserveSnapshot(1e-200, 1e-300, 0.997)

    outcome = solve(pool_a, pool_b)

    assert outcome == InvalidInput(ZERO_PRODUCT_REASON)


def test_overflowing_reserves_are_invalid_input():
    pool_a = ReserveSnapshot(1, 1e200, 0.997)
    pool_b = ReserveSnapshot(1e200, 1, 0.997)

    outcome = solve(pool_a, pool_b)

    assert outcome == InvalidInput(NON_FINITE_REASON)
