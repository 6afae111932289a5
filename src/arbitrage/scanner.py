"""Fetch two pool snapshots side by side and run the solver on the pair."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Protocol

from .errors import InvalidInputError, ScanError
from .outcome import ArbitrageOutcome, InvalidInput
from .snapshot import ReserveSnapshot
from .solver import solve

logger = logging.getLogger(__name__)


class SnapshotSource(Protocol):
    """Anything that can produce a ReserveSnapshot for one venue."""

    def fetch_snapshot(self) -> ReserveSnapshot:
        ...


@dataclass(frozen=True)
class ScanResult:
    outcome: ArbitrageOutcome
    snapshot_a: Optional[ReserveSnapshot] = None
    snapshot_b: Optional[ReserveSnapshot] = None


class ArbitrageScanner:
    """
    Retrieves the snapshots for pool A and pool B concurrently, then solves.

    A retrieval failure on either side aborts the scan with ``ScanError``;
    the solver never sees a partial pair. A pool whose state fails
    validation yields an ``InvalidInput`` outcome instead.
    """

    def __init__(self, pool_a: SnapshotSource, pool_b: SnapshotSource):
        self._pool_a = pool_a
        self._pool_b = pool_b

    def scan(self) -> ScanResult:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="snapshot") as pool:
            future_a = pool.submit(self._pool_a.fetch_snapshot)
            future_b = pool.submit(self._pool_b.fetch_snapshot)
            results = {"A": _join(future_a), "B": _join(future_b)}

        for name, (_, error) in results.items():
            if error is not None and not isinstance(error, InvalidInputError):
                logger.error("snapshot retrieval for pool %s failed: %s", name, error)
                raise ScanError(name, f"snapshot retrieval failed: {error}") from error

        invalid = [
            f"pool {name}: {error}"
            for name, (_, error) in results.items()
            if isinstance(error, InvalidInputError)
        ]
        if invalid:
            logger.warning("rejected pool state: %s", "; ".join(invalid))
            return ScanResult(outcome=InvalidInput("; ".join(invalid)))

        snapshot_a = results["A"][0]
        snapshot_b = results["B"][0]
        outcome = solve(snapshot_a, snapshot_b)
        logger.info(
            "rates A=%.6g B=%.6g -> %s",
            snapshot_a.exchange_rate,
            snapshot_b.exchange_rate,
            type(outcome).__name__,
        )
        return ScanResult(outcome=outcome, snapshot_a=snapshot_a, snapshot_b=snapshot_b)


def _join(
    future: "Future[ReserveSnapshot]",
) -> tuple[Optional[ReserveSnapshot], Optional[Exception]]:
    try:
        return future.result(), None
    except Exception as exc:
        return None, exc
