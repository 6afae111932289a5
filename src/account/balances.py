"""Wallet balance lookups for native ETH and mapped ERC-20 tokens."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from chain.client import ChainClient
from core.base_types import Address
from venues.erc20 import balance_of, load_token

logger = logging.getLogger(__name__)


def get_token_balances(
    client: ChainClient,
    owner: Address,
    symbols: Sequence[str],
    token_map: Mapping[str, str],
) -> list[tuple[str, float]]:
    """
    Return ``(symbol, balance)`` pairs in request order.

    ``ETH`` reads the native balance. An empty ``symbols`` checks every token
    in ``token_map``. Symbols missing from the map report 0.0.
    """
    requested = list(symbols) if symbols else list(token_map)
    balances: list[tuple[str, float]] = []
    for symbol in requested:
        key = symbol.upper()
        if key == "ETH":
            balances.append(("ETH", client.get_balance(owner).as_float()))
            continue
        token_address = token_map.get(key)
        if token_address is None:
            logger.warning("no token address configured for %s", symbol)
            balances.append((symbol, 0.0))
            continue
        token = load_token(client, Address(token_address))
        balances.append((key, balance_of(client, token, owner).as_float()))
    return balances
