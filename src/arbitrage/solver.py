"""
Closed-form sizing of a single round-trip arbitrage between two
constant-product pools.

For pool A with state (x1, y1, g1) and pool B with state (x2, y2, g2), the
trade that moves X out of the cheaper pool and sells into the dearer one has
profit whose derivative vanishes at

    delta = sqrt(x_dst * y_src * g1 * g2 / (y_dst * x_src)) * x_src - x_src / g_dst

where "src" is the pool X is withdrawn from. The two directions are written
out separately: the fee in the ``x / g`` correction belongs to the pool being
deposited into, so the branches are not interchangeable.
"""

from __future__ import annotations

import logging
import math

from .outcome import ArbitrageOutcome, InvalidInput, NoOpportunity, Opportunity, SourcePool
from .snapshot import ReserveSnapshot

logger = logging.getLogger(__name__)

ZERO_PRODUCT_REASON = "degenerate pool: zero product of reserves"
NON_FINITE_REASON = "degenerate pool: reserves overflow float range"


def solve(pool_a: ReserveSnapshot, pool_b: ReserveSnapshot) -> ArbitrageOutcome:
    """
    Decide the profitable direction between two pools and size the trade.

    Returns ``Opportunity`` with the pool to withdraw X from, ``NoOpportunity``
    when no single trade is profitable after fees, or ``InvalidInput`` when
    the reserve arithmetic degenerates.
    """
    x1, y1, gamma1 = pool_a.reserve_x, pool_a.reserve_y, pool_a.fee_multiplier
    x2, y2, gamma2 = pool_b.reserve_x, pool_b.reserve_y, pool_b.fee_multiplier

    rate_a = x1 / y1
    rate_b = x2 / y2

    # A tie goes to the B->A branch, which evaluates to a non-positive delta.
    if rate_a < rate_b:
        logger.debug("X cheaper on pool A (%.6g < %.6g)", rate_a, rate_b)
        numerator = x2 * y1 * gamma2 * gamma1
        denominator = y2 * x1
        if denominator == 0:
            return InvalidInput(ZERO_PRODUCT_REASON)
        sqrt_term = math.sqrt(numerator / denominator)
        delta = sqrt_term * x1 - x1 / gamma2
        return _to_outcome(SourcePool.A, delta)

    logger.debug("X cheaper on pool B (%.6g >= %.6g)", rate_a, rate_b)
    numerator = x1 * y2 * gamma1 * gamma2
    denominator = y1 * x2
    if denominator == 0:
        return InvalidInput(ZERO_PRODUCT_REASON)
    sqrt_term = math.sqrt(numerator / denominator)
    delta = sqrt_term * x2 - x2 / gamma1
    return _to_outcome(SourcePool.B, delta)


def _to_outcome(source: SourcePool, delta: float) -> ArbitrageOutcome:
    if not math.isfinite(delta):
        return InvalidInput(NON_FINITE_REASON)
    if delta > 0:
        return Opportunity(source_pool=source, input_amount=delta)
    return NoOpportunity()
