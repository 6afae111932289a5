"""Ethereum JSON-RPC client with retries and error classification."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Optional

import requests

from core.base_types import Address, CallRequest, TokenAmount

from .errors import ChainError, ExecutionReverted, InsufficientFunds, RPCError

logger = logging.getLogger(__name__)


class ChainClient:
    """
    Read-only Ethereum RPC client.

    Features:
    - Automatic retry with exponential backoff
    - Multiple RPC endpoint fallback
    - Request timing/logging
    - Error classification (reverts, insufficient funds)
    """

    def __init__(
        self,
        rpc_urls: list[str],
        timeout: int = 30,
        max_retries: int = 3,
    ):
        if not rpc_urls:
            raise ValueError("rpc_urls must not be empty")
        self._rpc_urls = rpc_urls
        self._timeout = timeout
        self._max_retries = max_retries
        self._session = requests.Session()

    def get_block_number(self) -> int:
        return _hex_to_int(self._rpc_call("eth_blockNumber", []))

    def get_block(self, block: str = "latest", full: bool = False) -> dict:
        data = self._rpc_call("eth_getBlockByNumber", [block, full])
        if data is None:
            raise RPCError(f"Block {block} not found")
        return data

    def get_balance(self, address: Address, block: str = "latest") -> TokenAmount:
        balance_hex = self._rpc_call("eth_getBalance", [address.checksum, block])
        return TokenAmount(raw=_hex_to_int(balance_hex), decimals=18, symbol="ETH")

    def get_code(self, address: Address, block: str = "latest") -> bytes:
        return _hex_to_bytes(self._rpc_call("eth_getCode", [address.checksum, block]))

    def get_gas_price(self) -> int:
        """Legacy gas price in wei."""
        return _hex_to_int(self._rpc_call("eth_gasPrice", []))

    def estimate_gas(self, tx: CallRequest) -> int:
        return _hex_to_int(self._rpc_call("eth_estimateGas", [tx.to_dict()]))

    def call(self, tx: CallRequest, block: str = "latest") -> bytes:
        return _hex_to_bytes(self._rpc_call("eth_call", [tx.to_dict(), block]))

    def _rpc_call(self, method: str, params: list[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        last_error: Optional[Exception] = None
        for url in self._rpc_urls:
            for attempt in range(self._max_retries):
                start = time.perf_counter()
                try:
                    response = self._session.post(
                        url,
                        json=payload,
                        timeout=self._timeout,
                    )
                    elapsed = time.perf_counter() - start
                    logger.info("rpc %s %s in %.3fs", method, url, elapsed)
                    if response.status_code >= 400:
                        raise RPCError(f"HTTP {response.status_code} from {url}")
                    data = response.json()
                    if "error" in data:
                        self._raise_rpc_error(data["error"])
                    return data.get("result")
                except (requests.Timeout, requests.ConnectionError) as exc:
                    logger.warning(
                        "rpc %s %s attempt %d failed: %s", method, url, attempt + 1, exc
                    )
                    last_error = exc
                    self._sleep_backoff(attempt)
                except RPCError:
                    raise
                except json.JSONDecodeError as exc:
                    last_error = exc
                    self._sleep_backoff(attempt)
        raise ChainError(f"RPC request {method} failed") from last_error

    def _sleep_backoff(self, attempt: int) -> None:
        delay = 0.5 * (2**attempt)
        time.sleep(delay)

    def _raise_rpc_error(self, error: dict) -> None:
        message = str(error.get("message", "RPC error"))
        code = error.get("code")
        data = error.get("data")
        lowered = message.lower()
        if "insufficient funds" in lowered:
            raise InsufficientFunds(message)
        if "execution reverted" in lowered:
            raise ExecutionReverted(message, code=code, data=data)
        raise RPCError(message, code=code, data=data)


def _hex_to_int(value: str) -> int:
    if not isinstance(value, str):
        raise RPCError("Expected hex string result")
    return int(value, 16)


def _hex_to_bytes(value: str) -> bytes:
    if not isinstance(value, str):
        raise RPCError("Expected hex string result")
    normalized = value[2:] if value.startswith("0x") else value
    if normalized == "":
        return b""
    return bytes.fromhex(normalized)
