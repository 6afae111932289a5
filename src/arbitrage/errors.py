"""Errors raised at the snapshot / scanner boundary."""

from __future__ import annotations


class ArbitrageError(Exception):
    """Base class for arbitrage errors."""


class InvalidInputError(ArbitrageError, ValueError):
    """Pool state that cannot be evaluated (non-positive reserve, bad fee)."""


class ScanError(ArbitrageError):
    """Retrieving one of the two snapshots failed; the scan was aborted."""

    def __init__(self, pool: str, message: str):
        self.pool = pool
        super().__init__(f"pool {pool}: {message}")
