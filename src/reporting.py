"""Plain-text renderers for CLI output. No I/O happens here."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from account.transfer import TransferEstimate
from arbitrage.outcome import ArbitrageOutcome, InvalidInput, NoOpportunity, Opportunity
from arbitrage.scanner import ScanResult
from core.base_types import Address
from venues.base import PoolInfo

RULE = "-" * 37


def _format_decimal(value: Decimal, places: int = 2) -> str:
    quantize_value = Decimal(f"1e-{places}")
    return format(
        value.quantize(quantize_value, rounding=ROUND_HALF_UP), f",.{places}f"
    )


def _format_timestamp(seconds: int) -> str:
    return datetime.fromtimestamp(seconds, tz=timezone.utc).strftime(
        "%Y-%m-%d %H:%M:%S UTC"
    )


def format_pool_info(info: PoolInfo) -> str:
    lines = [f"{info.venue} pool {info.address}", RULE]
    for key, value in info.details.items():
        lines.append(f"{key}: {value}")
    lines.append(f"fee multiplier: {info.fee_multiplier:.6f}")
    lines.append(f"token0: {info.token0.symbol} {info.token0.address}")
    lines.append(f"token1: {info.token1.symbol} {info.token1.address}")
    lines.append("")
    lines.append("balances")
    lines.append(RULE)
    lines.append(f"{info.token0.symbol}: {info.balance0.as_float():.6f}")
    lines.append(f"{info.token1.symbol}: {info.balance1.as_float():.6f}")
    return "\n".join(lines)


def format_outcome(
    outcome: ArbitrageOutcome, label_a: str = "pool A", label_b: str = "pool B"
) -> str:
    labels = {"A": label_a, "B": label_b}
    if isinstance(outcome, Opportunity):
        source = labels[outcome.source_pool.value]
        deposit = labels[outcome.deposit_pool.value]
        return (
            f"Arbitrage: withdraw X from {source}, deposit into {deposit}; "
            f"optimal input {outcome.input_amount:.6f}"
        )
    if isinstance(outcome, NoOpportunity):
        return "No arbitrage opportunity found"
    if isinstance(outcome, InvalidInput):
        return f"Rejected computation: {outcome.reason}"
    raise TypeError(f"unknown outcome {outcome!r}")


def format_scan(result: ScanResult, label_a: str = "pool A", label_b: str = "pool B") -> str:
    lines = []
    if result.snapshot_a is not None and result.snapshot_b is not None:
        lines.append(f"Exchange rate {label_a}: {result.snapshot_a.exchange_rate:.8g}")
        lines.append(f"Exchange rate {label_b}: {result.snapshot_b.exchange_rate:.8g}")
    lines.append(format_outcome(result.outcome, label_a, label_b))
    return "\n".join(lines)


def format_price(description: str, price: Decimal, updated_at: int) -> str:
    return "\n".join(
        [
            "Chainlink price feed",
            RULE,
            f"Description: {description}",
            f"Latest Price: ${_format_decimal(price)}",
            f"Last Updated: {_format_timestamp(updated_at)}",
        ]
    )


def format_balances(owner: Address, balances: Iterable[tuple[str, float]]) -> str:
    lines = [f"Wallet balances for {owner}", RULE]
    lines.extend(f"{symbol}: {amount:.6f}" for symbol, amount in balances)
    return "\n".join(lines)


def format_block(block: dict) -> str:
    number = int(block.get("number", "0x0"), 16)
    timestamp = int(block.get("timestamp", "0x0"), 16)
    tx_count = len(block.get("transactions") or [])
    return "\n".join(
        [
            f"Latest block: {number}",
            f"Hash: {block.get('hash')}",
            f"Timestamp: {_format_timestamp(timestamp)}",
            f"Transactions: {tx_count}",
        ]
    )


def format_transfer_estimate(estimate: TransferEstimate) -> str:
    return "\n".join(
        [
            f"Transfer {estimate.amount} from {estimate.sender} to {estimate.recipient}",
            f"Estimated gas: {estimate.gas}",
            f"Gas price: {_format_decimal(estimate.gas_price_gwei, 4)} gwei",
            f"Estimated total gas fee: {estimate.fee.human} ETH",
            "Not sent: estimation only",
        ]
    )
