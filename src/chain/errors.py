"""Chain-specific exceptions for RPC and contract failures."""

from __future__ import annotations

from typing import Optional


class ChainError(Exception):
    """Base class for chain errors."""


class RPCError(ChainError):
    """RPC request failed."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[object] = None,
    ):
        self.code = code
        self.data = data
        super().__init__(message)


class InsufficientFunds(ChainError):
    """Not enough balance for the estimated transaction."""


class ExecutionReverted(RPCError):
    """eth_call or eth_estimateGas reverted."""


class ContractNotFound(ChainError):
    """No contract code deployed at the address."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"No contract code found at address {address}")
