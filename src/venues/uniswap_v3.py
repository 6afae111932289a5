"""Uniswap V3 pool adapter: per-token balances plus the pool fee tier."""

from __future__ import annotations

import logging
from typing import Optional

from arbitrage.errors import InvalidInputError
from arbitrage.snapshot import ReserveSnapshot
from chain.client import ChainClient
from chain.contract import call_single
from core.base_types import Address

from .base import PoolInfo, verify_contract
from .erc20 import balance_of, load_token

logger = logging.getLogger(__name__)

# fee() is expressed in hundredths of a basis point: 3000 == 0.30%.
FEE_DENOMINATOR = 1_000_000


def fee_tier_to_multiplier(fee: int) -> float:
    if fee < 0 or fee >= FEE_DENOMINATOR:
        raise InvalidInputError(f"fee tier out of range: {fee}")
    return 1 - fee / FEE_DENOMINATOR


class UniswapV3PoolAdapter:
    """
    Reads a Uniswap V3 pool as two effective reserves.

    The reserves are the ERC-20 balances held by the pool contract, so
    concentrated-liquidity ranges are flattened into one constant-product
    view.
    """

    venue = "uniswap-v3"

    def __init__(
        self,
        client: ChainClient,
        pool_address: Address,
        token_x: Optional[Address] = None,
    ):
        self._client = client
        self._address = pool_address
        self._token_x = token_x

    @property
    def address(self) -> Address:
        return self._address

    def fetch_info(self) -> PoolInfo:
        code_size = verify_contract(self._client, self._address)
        logger.info("uniswap pool %s code size %d bytes", self._address, code_size)

        token0_addr = Address(call_single(self._client, self._address, "token0()", "address"))
        token1_addr = Address(call_single(self._client, self._address, "token1()", "address"))
        factory = Address(call_single(self._client, self._address, "factory()", "address"))
        fee = int(call_single(self._client, self._address, "fee()", "uint24"))
        liquidity = int(call_single(self._client, self._address, "liquidity()", "uint128"))

        token0 = load_token(self._client, token0_addr)
        token1 = load_token(self._client, token1_addr)

        return PoolInfo(
            venue=self.venue,
            address=self._address,
            token0=token0,
            token1=token1,
            balance0=balance_of(self._client, token0, self._address),
            balance1=balance_of(self._client, token1, self._address),
            fee_multiplier=fee_tier_to_multiplier(fee),
            details={"fee": fee, "liquidity": liquidity, "factory": factory.checksum},
        )

    def fetch_snapshot(self) -> ReserveSnapshot:
        return self.fetch_info().to_snapshot(self._token_x)
