"""
Transfer cost estimation.

Transfers are only estimated: the request is built and priced with
eth_estimateGas / eth_gasPrice, and nothing is signed or broadcast.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from chain.client import ChainClient
from chain.contract import encode_call
from core.base_types import Address, CallRequest, TokenAmount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferEstimate:
    sender: Address
    recipient: Address
    amount: TokenAmount
    gas: int
    gas_price_wei: int

    @property
    def fee(self) -> TokenAmount:
        return TokenAmount(raw=self.gas * self.gas_price_wei, decimals=18, symbol="ETH")

    @property
    def gas_price_gwei(self) -> Decimal:
        return Decimal(self.gas_price_wei) / Decimal(10**9)


def estimate_eth_transfer(
    client: ChainClient,
    sender: Address,
    recipient: Address,
    amount: TokenAmount,
) -> TransferEstimate:
    if amount.raw <= 0:
        raise ValueError("amount must be positive")
    request = CallRequest(to=recipient, value=amount.raw, sender=sender)
    return _estimate(client, request, sender, recipient, amount)


def estimate_token_transfer(
    client: ChainClient,
    token: Address,
    sender: Address,
    recipient: Address,
    amount: TokenAmount,
) -> TransferEstimate:
    """Price an ERC-20 ``transfer(recipient, amount)`` sent from ``sender``."""
    if amount.raw <= 0:
        raise ValueError("amount must be positive")
    data = encode_call(
        "transfer(address,uint256)", ["address", "uint256"], [recipient.checksum, amount.raw]
    )
    request = CallRequest(to=token, data=data, sender=sender)
    return _estimate(client, request, sender, recipient, amount)


def _estimate(
    client: ChainClient,
    request: CallRequest,
    sender: Address,
    recipient: Address,
    amount: TokenAmount,
) -> TransferEstimate:
    gas = client.estimate_gas(request)
    gas_price = client.get_gas_price()
    estimate = TransferEstimate(
        sender=sender,
        recipient=recipient,
        amount=amount,
        gas=gas,
        gas_price_wei=gas_price,
    )
    logger.info("estimated %s transfer: gas=%d fee=%s", amount.symbol, gas, estimate.fee)
    return estimate
