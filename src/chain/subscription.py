from __future__ import annotations

import json
import logging
from typing import AsyncIterator, Optional

import websockets

from .errors import RPCError

logger = logging.getLogger(__name__)


class PendingTransactionStream:
    """
    Stream of pending transaction hashes over an Ethereum websocket endpoint.

    Uses ``eth_subscribe("newPendingTransactions")`` and stops after ``limit``
    hashes. Callers are responsible for reconnect/backoff policies.
    """

    def __init__(self, ws_url: str, limit: int = 100) -> None:
        if not ws_url:
            raise ValueError("ws_url must not be empty")
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._ws_url = ws_url
        self._limit = limit

    async def stream(self) -> AsyncIterator[str]:
        subscribe_payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "eth_subscribe",
            "params": ["newPendingTransactions"],
        }
        async with websockets.connect(self._ws_url) as ws:
            await ws.send(json.dumps(subscribe_payload))
            subscription_id: Optional[str] = None
            received = 0

            async for raw in ws:
                try:
                    message = json.loads(raw)
                except json.JSONDecodeError:
                    logger.debug("ws non-JSON message: %r", raw)
                    continue

                if subscription_id is None and message.get("id") == 1:
                    subscription_id = _subscription_id(message)
                    logger.info("subscribed to pending transactions: %s", subscription_id)
                    continue

                tx_hash = _pending_hash(message, subscription_id)
                if tx_hash is None:
                    continue
                received += 1
                yield tx_hash
                if received >= self._limit:
                    logger.info("received %d pending transactions, stopping", received)
                    return


def _subscription_id(message: dict) -> str:
    if "error" in message:
        error = message["error"] or {}
        raise RPCError(
            str(error.get("message", "eth_subscribe failed")),
            code=error.get("code"),
            data=error.get("data"),
        )
    result = message.get("result")
    if not isinstance(result, str):
        raise RPCError("eth_subscribe returned no subscription id")
    return result


def _pending_hash(message: dict, subscription_id: Optional[str]) -> Optional[str]:
    if message.get("method") != "eth_subscription":
        return None
    params = message.get("params")
    if not isinstance(params, dict):
        return None
    if subscription_id is not None and params.get("subscription") != subscription_id:
        return None
    result = params.get("result")
    if isinstance(result, str):
        return result
    # Some nodes push full transaction objects instead of hashes.
    if isinstance(result, dict) and isinstance(result.get("hash"), str):
        return result["hash"]
    return None
