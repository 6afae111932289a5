from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidInputError


@dataclass(frozen=True)
class ReserveSnapshot:
    """
    Normalized tradable state of one pool, independent of the venue type.

    ``fee_multiplier`` is gamma, the fraction of an input kept after the fee
    (0.997 for a 0.30% pool). Reserves are in human units of each asset.
    """

    reserve_x: float
    reserve_y: float
    fee_multiplier: float

    def __post_init__(self) -> None:
        for name in ("reserve_x", "reserve_y", "fee_multiplier"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(f"{name} must be a number")
            # NaN fails every comparison below, so it must be caught here.
            if math.isnan(value):
                raise InvalidInputError(f"{name} must not be NaN")
            object.__setattr__(self, name, float(value))

        if self.reserve_x <= 0:
            raise InvalidInputError("reserve_x must be positive")
        if self.reserve_y <= 0:
            raise InvalidInputError("reserve_y must be positive")
        if not 0 < self.fee_multiplier <= 1:
            raise InvalidInputError("fee_multiplier must be in (0, 1]")

    @property
    def exchange_rate(self) -> float:
        """Price of Y in units of X."""
        return self.reserve_x / self.reserve_y
