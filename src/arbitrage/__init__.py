from .errors import ArbitrageError, InvalidInputError, ScanError
from .outcome import ArbitrageOutcome, InvalidInput, NoOpportunity, Opportunity, SourcePool
from .scanner import ArbitrageScanner, ScanResult
from .snapshot import ReserveSnapshot
from .solver import solve

__all__ = [
    "ReserveSnapshot",
    "ArbitrageOutcome",
    "Opportunity",
    "NoOpportunity",
    "InvalidInput",
    "SourcePool",
    "solve",
    "ArbitrageScanner",
    "ScanResult",
    "ArbitrageError",
    "InvalidInputError",
    "ScanError",
]
