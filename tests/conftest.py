"""Test configuration for module import paths and an in-memory chain."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src_path = Path(__file__).resolve().parents[1] / "src"
    src_value = str(src_path)
    if src_value not in sys.path:
        sys.path.insert(0, src_value)


_ensure_src_on_path()

from eth_abi import encode  # noqa: E402

from chain.contract import encode_call  # noqa: E402
from chain.errors import ExecutionReverted  # noqa: E402
from core.base_types import Address, TokenAmount  # noqa: E402


class FakeChain:
    """
    Stands in for ChainClient: eth_call answers are registered per
    (contract, calldata) and everything else is a plain attribute.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, bytes], bytes] = {}
        self.code: dict[str, bytes] = {}
        self.eth_balances: dict[str, int] = {}
        self.gas = 21000
        self.gas_price = 20 * 10**9
        self.estimated: list = []
        self.calls: list = []

    def deploy(self, address: str) -> None:
        self.code[Address(address).lower] = b"\x60\x80"

    def on_call(
        self,
        address: str,
        signature: str,
        return_types: list[str],
        values: list,
        arg_types: list[str] = (),
        args: list = (),
    ) -> None:
        self.on_raw(address, signature, encode(return_types, values), arg_types, args)

    def on_raw(
        self,
        address: str,
        signature: str,
        raw: bytes,
        arg_types: list[str] = (),
        args: list = (),
    ) -> None:
        key = (Address(address).lower, encode_call(signature, arg_types, args))
        self.responses[key] = raw

    def call(self, tx, block: str = "latest") -> bytes:
        self.calls.append(tx)
        key = (tx.to.lower, tx.data)
        if key not in self.responses:
            raise ExecutionReverted("execution reverted")
        return self.responses[key]

    def get_code(self, address: Address, block: str = "latest") -> bytes:
        return self.code.get(address.lower, b"")

    def get_balance(self, address: Address, block: str = "latest") -> TokenAmount:
        raw = self.eth_balances.get(address.lower, 0)
        return TokenAmount(raw=raw, decimals=18, symbol="ETH")

    def estimate_gas(self, tx) -> int:
        self.estimated.append(tx)
        return self.gas

    def get_gas_price(self) -> int:
        return self.gas_price

    def add_token(self, address: str, symbol: str, decimals: int) -> None:
        self.on_call(address, "symbol()", ["string"], [symbol])
        self.on_call(address, "decimals()", ["uint8"], [decimals])

    def set_token_balance(self, token: str, owner: str, raw: int) -> None:
        self.on_call(
            token,
            "balanceOf(address)",
            ["uint256"],
            [raw],
            ["address"],
            [Address(owner).checksum],
        )


@pytest.fixture
def fake_chain() -> FakeChain:
    return FakeChain()
