from .client import ChainClient
from .contract import call_contract, call_single, encode_call, selector
from .errors import (
    ChainError,
    ContractNotFound,
    ExecutionReverted,
    InsufficientFunds,
    RPCError,
)
from .networks import Network, get_network

__all__ = [
    "ChainClient",
    "Network",
    "get_network",
    "call_contract",
    "call_single",
    "encode_call",
    "selector",
    "ChainError",
    "RPCError",
    "ExecutionReverted",
    "InsufficientFunds",
    "ContractNotFound",
]
