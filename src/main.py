"""CLI entrypoint for the chain reader and two-pool arbitrage calculator."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import websockets

import config
import reporting
from account.balances import get_token_balances
from account.transfer import estimate_eth_transfer, estimate_token_transfer
from arbitrage.errors import ArbitrageError, InvalidInputError
from arbitrage.outcome import InvalidInput
from arbitrage.scanner import ArbitrageScanner
from arbitrage.snapshot import ReserveSnapshot
from arbitrage.solver import solve
from chain.client import ChainClient
from chain.errors import ChainError
from chain.networks import Network, get_network
from chain.subscription import PendingTransactionStream
from core.base_types import Address, TokenAmount
from core.wallet_manager import WalletManager
from oracle.chainlink import PriceFeed
from venues.balancer import BalancerPoolAdapter
from venues.base import VenueAdapter
from venues.erc20 import load_token
from venues.uniswap_v3 import UniswapV3PoolAdapter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-pool AMM arbitrage client")
    parser.add_argument(
        "--network", default="ethereum", help="Network preset (ethereum, sepolia)"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("block", help="Print the latest block")

    subscribe = subparsers.add_parser(
        "subscribe", help="Print pending transaction hashes (websocket)"
    )
    subscribe.add_argument("--limit", type=int, default=100, help="Stop after N hashes")

    balances = subparsers.add_parser("balances", help="Print wallet token balances")
    balances.add_argument("symbols", nargs="*", help="Symbols to check (default: all)")
    balances.add_argument("--address", help="Address to query instead of PRIVATE_KEY")

    chainlink = subparsers.add_parser("chainlink", help="Print Chainlink ETH/USD price")
    chainlink.add_argument("--feed", help="Price feed address")

    pool_uniswap = subparsers.add_parser("pool-uniswap", help="Print Uniswap V3 pool")
    pool_uniswap.add_argument("--pool", help="Pool address")

    pool_balancer = subparsers.add_parser("pool-balancer", help="Print Balancer pool")
    pool_balancer.add_argument("--pool", help="Pool address")

    arbitrage = subparsers.add_parser(
        "arbitrage", help="Size the Uniswap (A) / Balancer (B) arbitrage"
    )
    arbitrage.add_argument("--uniswap-pool", help="Uniswap V3 pool address (pool A)")
    arbitrage.add_argument("--balancer-pool", help="Balancer pool address (pool B)")
    arbitrage.add_argument(
        "--token-x", default="USDC", help="Asset X as symbol or address (default USDC)"
    )

    solve_cmd = subparsers.add_parser(
        "solve", help="Size an arbitrage from reserves given on the command line"
    )
    for name in ("x1", "y1", "gamma1", "x2", "y2", "gamma2"):
        solve_cmd.add_argument(name, type=float)

    transfer = subparsers.add_parser(
        "transfer-estimate", help="Estimate the gas cost of a transfer (never sends)"
    )
    transfer.add_argument("--to", required=True, help="Recipient address")
    transfer.add_argument("--amount", default="0.001", help="Human-readable amount")
    transfer.add_argument("--token", default="ETH", help="ETH or a mapped token symbol")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "solve":
            print(_run_solve(args))
            return

        network = get_network(args.network)

        if args.command == "subscribe":
            _run_subscribe(network, args.limit)
            return

        client = ChainClient([network.rpc_url])

        if args.command == "block":
            print(reporting.format_block(client.get_block("latest")))
            return

        if args.command == "balances":
            owner = _resolve_owner(args.address)
            balances = get_token_balances(client, owner, args.symbols, config.token_map())
            print(reporting.format_balances(owner, balances))
            return

        if args.command == "chainlink":
            feed = PriceFeed(client, Address(args.feed or config.price_feed_address()))
            price, updated_at = feed.price_with_timestamp()
            print(reporting.format_price(feed.description(), price, updated_at))
            return

        if args.command == "pool-uniswap":
            pool = Address(args.pool or config.uniswap_pool_address())
            info = UniswapV3PoolAdapter(client, pool).fetch_info()
            print(reporting.format_pool_info(info))
            return

        if args.command == "pool-balancer":
            pool = Address(args.pool or config.balancer_pool_address())
            info = BalancerPoolAdapter(client, pool).fetch_info()
            print(reporting.format_pool_info(info))
            return

        if args.command == "arbitrage":
            token_x = _resolve_token(args.token_x)
            pool_a: VenueAdapter = UniswapV3PoolAdapter(
                client,
                Address(args.uniswap_pool or config.uniswap_pool_address()),
                token_x=token_x,
            )
            pool_b: VenueAdapter = BalancerPoolAdapter(
                client,
                Address(args.balancer_pool or config.balancer_pool_address()),
                token_x=token_x,
            )
            result = ArbitrageScanner(pool_a, pool_b).scan()
            print(reporting.format_scan(result, "uniswap", "balancer"))
            return

        if args.command == "transfer-estimate":
            print(reporting.format_transfer_estimate(_run_transfer_estimate(client, args)))
            return
    except (ValueError, ChainError, ArbitrageError) as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(2)


def _run_solve(args: argparse.Namespace) -> str:
    try:
        pool_a = ReserveSnapshot(args.x1, args.y1, args.gamma1)
        pool_b = ReserveSnapshot(args.x2, args.y2, args.gamma2)
    except InvalidInputError as exc:
        return reporting.format_outcome(InvalidInput(str(exc)))
    return reporting.format_outcome(solve(pool_a, pool_b))


def _run_subscribe(network: Network, limit: int) -> None:
    if not network.ws_url:
        raise ValueError(f"no websocket URL configured for {network.name}")

    async def _consume() -> None:
        count = 0
        async for tx_hash in PendingTransactionStream(network.ws_url, limit).stream():
            count += 1
            print(f"New pending transaction #{count}: {tx_hash}")

    try:
        asyncio.run(_consume())
    except (OSError, websockets.exceptions.WebSocketException) as exc:
        raise ChainError(f"websocket stream failed: {exc}") from exc


def _resolve_owner(address: str | None) -> Address:
    if address:
        return Address(address)
    private_key = config.get_env("PRIVATE_KEY", required=True)
    return WalletManager(str(private_key)).address


def _resolve_token(value: str) -> Address:
    if value.startswith("0x"):
        return Address(value)
    tokens = config.token_map()
    key = value.upper()
    if key not in tokens:
        raise ValueError(f"unknown token symbol {value!r}")
    return Address(tokens[key])


def _run_transfer_estimate(client: ChainClient, args: argparse.Namespace):
    sender = _resolve_owner(None)
    recipient = Address(args.to)
    if args.token.upper() == "ETH":
        amount = TokenAmount.from_human(args.amount, 18, "ETH")
        return estimate_eth_transfer(client, sender, recipient, amount)
    token = load_token(client, _resolve_token(args.token))
    amount = TokenAmount.from_human(args.amount, token.decimals, token.symbol)
    return estimate_token_transfer(client, token.address, sender, recipient, amount)


if __name__ == "__main__":
    main()
