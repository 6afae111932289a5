from .balances import get_token_balances
from .transfer import TransferEstimate, estimate_eth_transfer, estimate_token_transfer

__all__ = [
    "get_token_balances",
    "TransferEstimate",
    "estimate_eth_transfer",
    "estimate_token_transfer",
]
