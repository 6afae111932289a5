"""Chainlink AggregatorV3 price feed reads."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from chain.client import ChainClient
from chain.contract import call_contract, call_single
from chain.errors import ChainError
from core.base_types import Address

ROUND_DATA_TYPES = ["uint80", "int256", "uint256", "uint256", "uint80"]


class OracleError(ChainError):
    """Feed returned an unusable answer."""


@dataclass(frozen=True)
class RoundData:
    round_id: int
    answer: int
    started_at: int
    updated_at: int
    answered_in_round: int


class PriceFeed:
    """ETH/USD (or any AggregatorV3Interface) feed at an explicit address."""

    def __init__(self, client: ChainClient, feed_address: Address):
        self._client = client
        self._address = feed_address
        self._decimals: int | None = None

    @property
    def address(self) -> Address:
        return self._address

    def decimals(self) -> int:
        if self._decimals is None:
            self._decimals = int(call_single(self._client, self._address, "decimals()", "uint8"))
        return self._decimals

    def description(self) -> str:
        return str(call_single(self._client, self._address, "description()", "string"))

    def latest_round(self) -> RoundData:
        values = call_contract(
            self._client, self._address, "latestRoundData()", ROUND_DATA_TYPES
        )
        return RoundData(*(int(value) for value in values))

    def latest_price(self) -> Decimal:
        price, _ = self.price_with_timestamp()
        return price

    def price_with_timestamp(self) -> tuple[Decimal, int]:
        """Latest answer scaled by the feed decimals, with its update time."""
        round_data = self.latest_round()
        if round_data.answer <= 0:
            raise OracleError(f"feed {self._address} returned answer {round_data.answer}")
        price = Decimal(round_data.answer) / (Decimal(10) ** self.decimals())
        return price, round_data.updated_at
