"""ERC-20 metadata and balance reads."""

from __future__ import annotations

from dataclasses import dataclass

from chain.client import ChainClient
from chain.contract import call_single, decode_result, encode_call
from core.base_types import Address, CallRequest, TokenAmount


@dataclass(frozen=True)
class Token:
    address: Address
    symbol: str
    decimals: int

    def amount(self, raw: int) -> TokenAmount:
        return TokenAmount(raw=int(raw), decimals=self.decimals, symbol=self.symbol)


def load_token(client: ChainClient, address: Address) -> Token:
    return Token(
        address=address,
        symbol=_read_symbol(client, address),
        decimals=int(call_single(client, address, "decimals()", "uint8")),
    )


def balance_of(client: ChainClient, token: Token, owner: Address) -> TokenAmount:
    raw = call_single(
        client, token.address, "balanceOf(address)", "uint256", ["address"], [owner.checksum]
    )
    return token.amount(raw)


def _read_symbol(client: ChainClient, address: Address) -> str:
    raw = client.call(CallRequest(to=address, data=encode_call("symbol()")))
    # Older tokens (MKR, SAI) return bytes32 instead of string.
    if len(raw) == 32:
        return raw.rstrip(b"\x00").decode("utf-8", errors="ignore")
    (decoded,) = decode_result(["string"], raw, f"symbol() on {address}")
    return str(decoded)
